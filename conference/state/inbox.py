"""Per-user inbox and archive views over the message store."""
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from conference.state.exceptions import InvalidSelectionError
from conference.state.models.correspondence import UNREAD_MARKER
from conference.state.repositories.messages import MessageRepository


class MessageAction(Enum):
    """Things a user can do with a message in their inbox."""

    REPLY = "reply"
    DELETE = "delete"
    ARCHIVE = "archive"
    MARK_UNREAD = "mark_unread"
    UNMARK_UNREAD = "unmark_unread"


@dataclass(frozen=True)
class InboxEntry:
    """One rendered line group of an inbox or archive listing.

    Attributes:
        position: 1-based number used to pick the entry.
        message_id: Id of the message shown.
        nesting: Indentation depth (always 0 in the archive view).
        text: Rendered message, with the unread marker when flagged.
        unread: Whether the viewer marked the message unread.
        deleted: Whether the message was soft-deleted.
    """

    position: int
    message_id: str
    nesting: int
    text: str
    unread: bool = False
    deleted: bool = False


def _expand_thread(store: MessageRepository, root_id: str, seen: set[str]) -> list[str]:
    """Depth-first, pre-order walk of a thread along its reply pointers."""
    ordered: list[str] = []
    stack = [root_id]
    while stack:
        message_id = stack.pop()
        if message_id in seen:
            continue
        seen.add(message_id)
        ordered.append(message_id)
        stack.extend(reversed(store.get_replies(message_id)))
    return ordered


def compute_inbox_view(store: MessageRepository, username: str) -> list[str]:
    """Ordered message ids making up the user's threaded inbox.

    Only thread roots from the user's inbox list start an expansion; a reply
    shows up solely as part of its root's thread, even when the user is its
    recipient. Roots the user archived therefore hide their whole thread.
    """
    view: list[str] = []
    seen: set[str] = set()
    for message_id in store.get_inbox_messages(username):
        if store.get_nesting_level(message_id) == 0:
            view.extend(_expand_thread(store, message_id, seen))
    return view


def compute_archive_view(store: MessageRepository, username: str) -> list[str]:
    """The user's archive in the order entries were added."""
    return store.get_user_archived_messages(username)


def _render(store: MessageRepository, username: str, message_id: str) -> tuple[str, bool]:
    unread = store.did_user_mark_unread(username, message_id)
    text = store.get_message_as_string(message_id)
    if unread:
        text = f"{text}{UNREAD_MARKER}\n"
    return text, unread


def build_inbox_entries(store: MessageRepository, username: str) -> list[InboxEntry]:
    """Pair each inbox id with its position, nesting and rendered text."""
    entries = []
    for position, message_id in enumerate(compute_inbox_view(store, username), start=1):
        text, unread = _render(store, username, message_id)
        entries.append(InboxEntry(
            position=position, message_id=message_id,
            nesting=store.get_nesting_level(message_id), text=text,
            unread=unread, deleted=store.is_deleted(message_id),
        ))
    return entries


def build_archive_entries(store: MessageRepository, username: str) -> list[InboxEntry]:
    """Flat archive listing. Entries carry no nesting and no unread flag."""
    return [
        InboxEntry(
            position=position, message_id=message_id, nesting=0,
            text=store.get_message_as_string(message_id),
            deleted=store.is_deleted(message_id),
        )
        for position, message_id in enumerate(compute_archive_view(store, username), start=1)
    ]


def select_entry(view: Sequence[str], position: int) -> str:
    """Resolve a 1-based position in a view to its message id."""
    if not 1 <= position <= len(view):
        raise InvalidSelectionError(position, len(view))
    return view[position - 1]


def available_actions(
    store: MessageRepository, username: str, message_id: str,
) -> list[MessageAction]:
    """Actions the user may take on a message, in menu order."""
    actions: list[MessageAction] = []
    if store.is_recipient(username, message_id):
        actions.append(MessageAction.REPLY)
    if store.is_author(username, message_id) and not store.is_deleted(message_id):
        actions.append(MessageAction.DELETE)
    actions.append(MessageAction.ARCHIVE)
    if store.did_user_mark_unread(username, message_id):
        actions.append(MessageAction.UNMARK_UNREAD)
    else:
        actions.append(MessageAction.MARK_UNREAD)
    return actions
