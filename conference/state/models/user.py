"""User account models."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserType(Enum):
    """Role of a conference user."""

    ATTENDEE = "attendee"
    ORGANIZER = "organizer"
    SPEAKER = "speaker"
    VIP = "vip"
    ADMIN = "admin"


@dataclass(frozen=True)
class User:
    """A registered conference user."""

    username: str
    user_type: UserType
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("username cannot be empty")
