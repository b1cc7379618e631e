"""Message model."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from conference.state.models.correspondence import (
    DELETED_MARKER,
    new_id,
    render_correspondence,
    utc_now,
)


@dataclass(eq=False)
class Message:
    """One unit of correspondence between users.

    Attributes:
        message_id: Unique identifier, assigned at creation.
        author: Username of the sender.
        text: Message body. Replaced by the deletion marker on soft delete.
        recipients: Usernames the message was sent to.
        created_at: When the message was created (UTC).
        nesting: 0 for thread roots, parent nesting + 1 for replies.
        replies: Ids of replies to this message, in the order they were made.
    """

    message_id: str
    author: str
    text: str
    recipients: tuple[str, ...]
    created_at: datetime
    nesting: int = 0
    replies: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.message_id:
            raise ValueError("message_id cannot be empty")
        if not self.author:
            raise ValueError("author cannot be empty")
        if self.nesting < 0:
            raise ValueError(f"nesting must be non-negative, got {self.nesting}")
        self.recipients = tuple(self.recipients)

    @classmethod
    def create(
        cls, text: str, author: str, recipients: Iterable[str], nesting: int = 0,
    ) -> "Message":
        """Build a new message with a fresh id and the current time."""
        return cls(
            message_id=new_id(), author=author, text=text,
            recipients=tuple(recipients), created_at=utc_now(), nesting=nesting,
        )

    @property
    def is_root(self) -> bool:
        return self.nesting == 0

    def has_recipient(self, username: str) -> bool:
        return username in self.recipients

    def add_reply(self, reply_id: str) -> None:
        self.replies.append(reply_id)

    def mark_deleted(self) -> None:
        self.text = DELETED_MARKER

    def render(self) -> str:
        return render_correspondence(self.created_at, self.author, self.text)
