"""Send a message to other users."""

import typer
from rich.console import Console

from conference.cli.output import format_error, format_success, format_warning, json_output
from conference.cli.utils import (
    CommandError,
    load_config,
    parse_recipients,
    run_session,
    validate_message_content,
)
from conference.state import StoreState

console = Console()


def send_command(to: str, message: str, json_flag: bool) -> None:
    """Start a new thread with every valid recipient in ``to``."""
    try:
        content = validate_message_content(message)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    requested = parse_recipients(to)

    config = load_config()

    def _send(state: StoreState) -> tuple[str, list[str]]:
        recipients = state.users.valid_recipients(requested)
        if not recipients:
            raise CommandError(
                "Sorry, there were no valid recipients",
                hint="Recipients must be registered users, see 'conference users'",
            )
        return state.messages.add_message(content, config.username, recipients), recipients

    message_id, recipients = run_session(_send, "send message", config=config)
    skipped = [name for name in requested if name not in recipients]

    if json_flag:
        json_output(
            console,
            {
                "status": "sent",
                "message_id": message_id,
                "recipients": recipients,
                "skipped": skipped,
            },
        )
        return
    format_success(console, "Your message has been sent to all valid recipients:")
    console.print(", ".join(recipients), markup=False)
    if skipped:
        format_warning(console, f"Skipped unknown recipients: {', '.join(skipped)}")
