"""Organizer request model."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from conference.state.models.correspondence import (
    new_id,
    render_correspondence,
    utc_now,
)


@dataclass(eq=False)
class Request:
    """A one-shot request sent to the organizers.

    A request holds at most one reply. An empty ``reply`` means nobody has
    answered yet; ``resolved`` flips to True once a reply is recorded and
    never goes back.
    """

    request_id: str
    author: str
    text: str
    created_at: datetime
    reply: str = ""
    reply_author: Optional[str] = None
    resolved: bool = False

    def __post_init__(self) -> None:
        if not self.request_id:
            raise ValueError("request_id cannot be empty")
        if not self.author:
            raise ValueError("author cannot be empty")

    @classmethod
    def create(cls, text: str, author: str) -> "Request":
        return cls(request_id=new_id(), author=author, text=text, created_at=utc_now())

    @property
    def has_reply(self) -> bool:
        return self.reply != ""

    def set_reply(self, text: str, author: str) -> None:
        self.reply = text
        self.reply_author = author

    def resolve(self) -> None:
        self.resolved = True

    def render(self) -> str:
        base = render_correspondence(self.created_at, self.author, self.text)
        return f"{base} \t>{self.reply}\n"
