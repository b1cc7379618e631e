"""Act on a numbered message from the inbox view.

Numbers are positions in the threaded inbox exactly as ``conference inbox``
prints them. Permission checks happen here; the message store trusts its
callers.
"""

from typing import Callable

import typer
from rich.console import Console

from conference.cli.output import format_error, format_success, json_output
from conference.cli.utils import (
    CommandError,
    load_config,
    run_session,
    validate_message_content,
)
from conference.state import (
    MessageAction,
    StoreState,
    available_actions,
    compute_inbox_view,
    select_entry,
)

console = Console()

_ACTION_LABELS = {
    MessageAction.REPLY: "Reply to the message",
    MessageAction.DELETE: "Delete the message",
    MessageAction.ARCHIVE: "Archive the message",
    MessageAction.MARK_UNREAD: "Mark message as unread",
    MessageAction.UNMARK_UNREAD: "Unmark message as unread",
}


def _select(state: StoreState, username: str, number: int) -> str:
    return select_entry(compute_inbox_view(state.messages, username), number)


def _interact(
    number: int,
    json_flag: bool,
    label: str,
    status: str,
    confirmation: str,
    apply: Callable[[StoreState, str, str], None],
) -> None:
    """Resolve inbox entry ``number`` for the acting user and apply an action."""
    config = load_config()
    username = config.username

    def _action(state: StoreState) -> str:
        message_id = _select(state, username, number)
        apply(state, username, message_id)
        return message_id

    message_id = run_session(_action, label, config=config)

    if json_flag:
        json_output(console, {"status": status, "message_id": message_id})
    else:
        format_success(console, confirmation)


def reply_command(number: int, message: str, json_flag: bool) -> None:
    """Reply to inbox entry ``number``."""
    try:
        content = validate_message_content(message)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    def _reply(state: StoreState, username: str, message_id: str) -> None:
        if MessageAction.REPLY not in available_actions(state.messages, username, message_id):
            raise CommandError(
                "You can only reply to messages you received", code=4,
            )
        state.messages.reply_to_message(content, username, message_id)

    _interact(number, json_flag, "reply", "replied", "Your reply has been sent.", _reply)


def delete_command(number: int, json_flag: bool) -> None:
    """Soft-delete inbox entry ``number``."""

    def _delete(state: StoreState, username: str, message_id: str) -> None:
        if not state.messages.is_author(username, message_id):
            raise CommandError("You can only delete messages you wrote", code=4)
        if state.messages.is_deleted(message_id):
            raise CommandError("That message has already been deleted", code=2)
        state.messages.mark_as_deleted(message_id)

    _interact(number, json_flag, "delete message", "deleted", "Your message has been deleted.", _delete)


def archive_command(number: int, json_flag: bool) -> None:
    """Move inbox entry ``number`` to the acting user's archive."""

    def _archive(state: StoreState, username: str, message_id: str) -> None:
        state.messages.add_to_archive(message_id, username)

    _interact(number, json_flag, "archive message", "archived", "Your message has been archived.", _archive)


def unread_command(number: int, json_flag: bool) -> None:
    """Flag inbox entry ``number`` as unread."""

    def _mark(state: StoreState, username: str, message_id: str) -> None:
        state.messages.mark_as_unread(message_id, username)

    _interact(number, json_flag, "mark message unread", "unread", "Message has been marked as unread.", _mark)


def read_command(number: int, json_flag: bool) -> None:
    """Clear the unread flag on inbox entry ``number``."""

    def _unmark(state: StoreState, username: str, message_id: str) -> None:
        state.messages.unmark_as_unread(message_id, username)

    _interact(number, json_flag, "mark message read", "read", "Message has been re-marked as read.", _unmark)


def actions_command(number: int, json_flag: bool) -> None:
    """List what the acting user can do with inbox entry ``number``."""
    config = load_config()
    username = config.username

    def _actions(state: StoreState) -> tuple[str, list[MessageAction]]:
        message_id = _select(state, username, number)
        return message_id, available_actions(state.messages, username, message_id)

    message_id, actions = run_session(_actions, "list actions", config=config, save=False)

    if json_flag:
        json_output(
            console,
            {"message_id": message_id, "actions": [a.value for a in actions]},
        )
        return
    console.print("Available actions for this message:")
    for action in actions:
        console.print(f"- {_ACTION_LABELS[action]} ([cyan]{action.value}[/cyan])")

