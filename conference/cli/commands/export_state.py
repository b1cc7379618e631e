"""Export the data model to JSON."""

from pathlib import Path
from typing import Any

from rich.console import Console

from conference.cli.output import format_success, json_output
from conference.cli.utils import load_config, run_session
from conference.state import StoreState, export_state, export_state_to_file

console = Console()


def export_command(
    output: str | None,
    json_flag: bool,
) -> None:
    """Export all stores to JSON."""
    output_path = Path(output) if output else None
    config = load_config()

    def _export(state: StoreState) -> dict[str, Any]:
        if output_path:
            export_state_to_file(state, output_path)
        return export_state(state)

    data = run_session(_export, "export state", config=config, save=False)

    if json_flag or not output_path:
        json_output(console, data)
        return

    format_success(console, f"State exported to {output_path}")
    console.print(f"[cyan]Schema:[/cyan]   {data['schema_version']}")
    console.print(f"[cyan]Users:[/cyan]    {len(data['users']['users'])}")
    console.print(f"[cyan]Messages:[/cyan] {len(data['messages']['messages'])}")
    console.print(f"[cyan]Requests:[/cyan] {len(data['requests']['requests'])}")
