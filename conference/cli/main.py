"""Main CLI entry point for the conference messaging console."""

import typer
from rich.console import Console

from conference.cli.commands.export_state import export_command
from conference.cli.commands.import_state import import_command
from conference.cli.commands.inbox import inbox_command
from conference.cli.commands.init import init_command
from conference.cli.commands.interact import (
    actions_command,
    archive_command,
    delete_command,
    read_command,
    reply_command,
    unread_command,
)
from conference.cli.commands.requests import (
    delete_request_command,
    request_command,
    requests_command,
    respond_command,
)
from conference.cli.commands.send import send_command
from conference.cli.commands.status import status_command
from conference.cli.commands.users import register_command, users_command
from conference.cli.utils import configure_logging

app = typer.Typer(
    name="conference",
    help="Conference messaging - threaded inboxes and organizer requests",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging"),
) -> None:
    """Conference messaging console."""
    configure_logging(verbose)


@app.command("init")
def init(
    username: str = typer.Option(..., "-u", "--user", help="Username to act as"),
    user_type: str = typer.Option("attendee", "-t", "--type", help="Role if registering"),
    force: bool = typer.Option(False, "-f", "--force", help="Overwrite config"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Set the acting user, registering them if needed."""
    init_command(username, user_type, force, json_flag)


@app.command("status")
def status(
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Show the acting user and mailbox counts."""
    status_command(json_flag)


@app.command("register")
def register(
    username: str = typer.Option(..., "-u", "--user", help="Username"),
    user_type: str = typer.Option("attendee", "-t", "--type", help="User role"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Register a user account."""
    register_command(username, user_type, json_flag)


@app.command("users")
def users(
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """List registered users."""
    users_command(json_flag)


@app.command("send")
def send(
    to: str = typer.Option(..., "-t", "--to", help="Recipients, comma separated"),
    message: str = typer.Option(..., "-m", "--message", help="Content"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Send a message, starting a new thread."""
    send_command(to, message, json_flag)


@app.command("inbox")
def inbox(
    archived: bool = typer.Option(False, "-a", "--archived", help="Show the archive"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the threaded inbox."""
    inbox_command(archived, json_flag)


@app.command("reply")
def reply(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    message: str = typer.Option(..., "-m", "--message", help="Content"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Reply to a message in the inbox."""
    reply_command(number, message, json_flag)


@app.command("delete")
def delete(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Delete a message you wrote."""
    delete_command(number, json_flag)


@app.command("archive")
def archive(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Archive a message."""
    archive_command(number, json_flag)


@app.command("unread")
def unread(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Mark a message as unread."""
    unread_command(number, json_flag)


@app.command("read")
def read(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Unmark a message as unread."""
    read_command(number, json_flag)


@app.command("actions")
def actions(
    number: int = typer.Option(..., "-n", "--number", help="Inbox message number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """List what you can do with a message."""
    actions_command(number, json_flag)


@app.command("request")
def request(
    message: str = typer.Option(..., "-m", "--message", help="Request text"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Send a request to the organizers."""
    request_command(message, json_flag)


@app.command("requests")
def requests(
    mine: bool = typer.Option(False, "--mine", help="Only your own requests"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """List requests."""
    requests_command(mine, json_flag)


@app.command("respond")
def respond(
    number: int = typer.Option(..., "-n", "--number", help="Request number"),
    message: str = typer.Option(..., "-m", "--message", help="Reply text"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Reply to a request (organizers only)."""
    respond_command(number, message, json_flag)


@app.command("delete-request")
def delete_request(
    number: int = typer.Option(..., "-n", "--number", help="Request number"),
    json_flag: bool = typer.Option(False, "--json"),
) -> None:
    """Delete a request (organizers only)."""
    delete_request_command(number, json_flag)


@app.command("export")
def export_state_cmd(
    output: str = typer.Option(None, "-o", "--output", help="Output file path"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Export all state to JSON."""
    export_command(output, json_flag)


@app.command("import")
def import_state_cmd(
    input_path: str = typer.Option(..., "-i", "--input", help="JSON file to import"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation"),
    json_flag: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Replace all state with a JSON export."""
    import_command(input_path, yes, json_flag)


def main() -> None:
    """Entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(130)
