"""View the threaded inbox or the archive."""

from rich.console import Console

from conference.cli.output import format_entries, json_output
from conference.cli.utils import load_config, run_session
from conference.state import build_archive_entries, build_inbox_entries

console = Console()


def inbox_command(archived: bool, json_flag: bool) -> None:
    """List the acting user's inbox, or their archive with ``archived``."""
    config = load_config()
    username = config.username
    build = build_archive_entries if archived else build_inbox_entries

    entries = run_session(
        lambda state: build(state.messages, username),
        "read archive" if archived else "read inbox",
        config=config,
        save=False,
    )

    if json_flag:
        json_output(
            console,
            {
                "username": username,
                "view": "archive" if archived else "inbox",
                "count": len(entries),
                "messages": entries,
            },
        )
        return

    if archived:
        if not entries:
            console.print("[yellow]Sorry, you do not have any archived messages.[/yellow]")
            return
        format_entries(console, "Here are your archived messages.", "End of archives.", entries)
    else:
        if not entries:
            console.print("[yellow]Sorry, you do not have any messages in your inbox.[/yellow]")
            return
        format_entries(console, "Here is your inbox:", "End of inbox.", entries)
