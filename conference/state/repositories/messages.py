"""Message store with per-user archive and unread overlays."""
import logging
from typing import Iterable, Iterator, Mapping, Optional

from conference.state.exceptions import MessageNotFoundError
from conference.state.models.message import Message

logger = logging.getLogger(__name__)


class MessageRepository:
    """Append-only store of every message ever sent.

    Messages are kept in insertion order, which is also chronological order
    since nothing is ever removed or reordered. Per-user state lives in
    overlay maps keyed by username and created lazily on first write; reading
    an overlay for a user with no entries yields an empty result.

    Lookups that need the message itself raise ``MessageNotFoundError`` for
    unknown ids. The archive and unread overlays deliberately skip that check
    and record whatever id they are given.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._by_id: dict[str, Message] = {}
        self._archived: dict[str, list[str]] = {}
        self._unread: dict[str, set[str]] = {}
        self._deleted: set[str] = set()

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._by_id

    def get_message(self, message_id: str) -> Message:
        """Return the message with the given id or raise MessageNotFoundError."""
        try:
            return self._by_id[message_id]
        except KeyError:
            raise MessageNotFoundError(message_id) from None

    def all_messages(self) -> Iterator[Message]:
        """Iterate over every message in insertion order."""
        return iter(list(self._messages))

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        self._by_id[message.message_id] = message

    # Adding messages and replies

    def add_message(
        self, text: str, author: str, recipients: Iterable[str], nesting: int = 0,
    ) -> str:
        """Store a new message and return its id.

        Recipients are expected to be non-empty; validating them is the
        caller's job.
        """
        message = Message.create(text, author, recipients, nesting)
        self._append(message)
        logger.debug(
            "Message %s added by %s to %s", message.message_id, author,
            ", ".join(message.recipients),
        )
        return message.message_id

    def reply_to_message(self, text: str, author: str, parent_id: str) -> None:
        """Reply to an existing message.

        The reply goes to the parent's author only and sits one nesting
        level below the parent.
        """
        parent = self.get_message(parent_id)
        reply = Message.create(text, author, (parent.author,), parent.nesting + 1)
        self._append(reply)
        parent.add_reply(reply.message_id)
        logger.debug("Reply %s by %s to %s", reply.message_id, author, parent_id)

    # Listing message ids

    def get_replies(self, message_id: str) -> list[str]:
        return list(self.get_message(message_id).replies)

    def get_inbox_messages(self, username: str) -> list[str]:
        """Ids of messages authored by or sent to the user, minus their archive.

        Soft-deleted messages stay in the result.
        """
        archived = set(self._archived.get(username, ()))
        return [
            m.message_id for m in self._messages
            if (m.author == username or m.has_recipient(username))
            and m.message_id not in archived
        ]

    # Soft deletion

    def mark_as_deleted(self, message_id: str) -> None:
        message = self.get_message(message_id)
        self._deleted.add(message_id)
        message.mark_deleted()
        logger.debug("Message %s marked as deleted", message_id)

    def is_deleted(self, message_id: str) -> bool:
        return message_id in self._deleted

    # Unread overlay

    def mark_as_unread(self, message_id: str, username: str) -> None:
        self._unread.setdefault(username, set()).add(message_id)

    def unmark_as_unread(self, message_id: str, username: str) -> None:
        if username in self._unread:
            self._unread[username].discard(message_id)

    def did_user_mark_unread(self, username: str, message_id: str) -> bool:
        return message_id in self._unread.get(username, ())

    # Archive overlay

    def add_to_archive(self, message_id: str, username: str) -> None:
        """Append to the user's archive. Archiving twice records it twice."""
        self._archived.setdefault(username, []).append(message_id)
        logger.debug("Message %s archived by %s", message_id, username)

    def get_user_archived_messages(self, username: str) -> list[str]:
        return list(self._archived.get(username, ()))

    # Per-message queries

    def is_recipient(self, username: str, message_id: str) -> bool:
        return self.get_message(message_id).has_recipient(username)

    def is_author(self, username: str, message_id: str) -> bool:
        return self.get_message(message_id).author == username

    def get_nesting_level(self, message_id: str) -> int:
        return self.get_message(message_id).nesting

    def get_message_as_string(self, message_id: str) -> str:
        return self.get_message(message_id).render()

    # Snapshot support

    def archived_by_user(self) -> dict[str, list[str]]:
        return {user: list(ids) for user, ids in self._archived.items()}

    def unread_by_user(self) -> dict[str, list[str]]:
        return {user: sorted(ids) for user, ids in self._unread.items()}

    def deleted_ids(self) -> list[str]:
        return sorted(self._deleted)

    @classmethod
    def restore(
        cls,
        messages: Iterable[Message],
        archived: Optional[Mapping[str, Iterable[str]]] = None,
        unread: Optional[Mapping[str, Iterable[str]]] = None,
        deleted: Iterable[str] = (),
    ) -> "MessageRepository":
        """Rebuild a store from persisted state, keeping the given order."""
        repo = cls()
        for message in messages:
            repo._append(message)
        for user, ids in (archived or {}).items():
            repo._archived[user] = list(ids)
        for user, ids in (unread or {}).items():
            repo._unread[user] = set(ids)
        repo._deleted = set(deleted)
        return repo
