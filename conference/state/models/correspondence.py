"""Construction and rendering helpers shared by messages and requests."""
from datetime import datetime, timezone
from uuid import uuid4

DELETED_MARKER = "[DELETED]"
UNREAD_MARKER = "[UNREAD!]"
TIMESTAMP_FORMAT = "%d-%m %H:%M"


def new_id() -> str:
    """Return a fresh globally unique identifier."""
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format a timestamp as local ``dd-mm HH:MM``."""
    return moment.astimezone().strftime(TIMESTAMP_FORMAT)


def render_correspondence(created_at: datetime, author: str, text: str) -> str:
    """Render the display string for one unit of correspondence.

    Example::

        19-10 14:05
        alice said:
        > Hi
    """
    return f"{format_timestamp(created_at)}\n{author} said:\n> {text}\n"
