"""State models."""
from conference.state.models.correspondence import (
    DELETED_MARKER,
    UNREAD_MARKER,
    format_timestamp,
    render_correspondence,
)
from conference.state.models.message import Message
from conference.state.models.request import Request
from conference.state.models.user import User, UserType
__all__ = [
    "DELETED_MARKER", "UNREAD_MARKER", "format_timestamp", "render_correspondence",
    "Message",
    "Request",
    "User", "UserType",
]
