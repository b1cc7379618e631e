"""Import the data model from JSON."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from conference.cli.output import format_error, format_success, format_warning, json_output
from conference.cli.utils import load_config, run_session
from conference.state import StateImportError, StoreState, import_state_from_file

console = Console()


def import_command(
    input_path: str,
    yes: bool,
    json_flag: bool,
) -> None:
    """Replace every store with the contents of a JSON export."""
    path = Path(input_path)
    if not path.exists():
        format_error(console, f"File not found: {path}")
        raise typer.Exit(code=5)

    config = load_config()

    try:
        imported = import_state_from_file(path)
    except StateImportError as e:
        format_error(console, f"Import failed: {e}")
        raise typer.Exit(code=2)

    if not yes:
        format_warning(console, "This will REPLACE all existing state")
        if not typer.confirm("Continue?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(code=0)

    def _replace(state: StoreState) -> None:
        state.messages = imported.messages
        state.requests = imported.requests
        state.users = imported.users

    run_session(_replace, "import state", config=config)

    summary = {
        "source": str(path),
        "users": len(imported.users),
        "messages": len(imported.messages),
        "requests": len(imported.requests),
    }
    if json_flag:
        json_output(console, {"status": "imported", **summary})
        return

    format_success(console, "State imported to local database")
    console.print(f"[cyan]Source:[/cyan]   {escape(summary['source'])}")
    console.print(f"[cyan]Users:[/cyan]    {summary['users']}")
    console.print(f"[cyan]Messages:[/cyan] {summary['messages']}")
    console.print(f"[cyan]Requests:[/cyan] {summary['requests']}")
    if not imported.users.user_exists(config.username):
        format_warning(
            console, f"{config.username} is not in the imported users; run 'conference init --force'",
        )
