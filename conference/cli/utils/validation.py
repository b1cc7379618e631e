"""Input validation utilities for CLI commands."""

import re

from conference.state.models.user import UserType


def validate_username(username: str) -> str:
    """Validate and return a username. Raises ValueError if invalid."""
    if not username or not username.strip():
        raise ValueError("Username cannot be empty")
    username = username.strip()
    if len(username) > 64:
        raise ValueError("Username cannot exceed 64 characters")
    if not re.match(r"^[a-zA-Z0-9_.-]+$", username):
        raise ValueError(
            "Username can only contain letters, numbers, underscores, dots, and hyphens"
        )
    return username


def validate_user_type(value: str) -> UserType:
    """Parse a role name such as 'organizer'. Raises ValueError if unknown."""
    try:
        return UserType(value.strip().lower())
    except ValueError:
        valid = ", ".join(t.value for t in UserType)
        raise ValueError(f"Unknown user type '{value}' (valid: {valid})") from None


def validate_message_content(content: str) -> str:
    """Validate and return message content. Raises ValueError if invalid."""
    if not content or not content.strip():
        raise ValueError("Message content cannot be empty")
    if len(content) > 65536:
        raise ValueError("Message content cannot exceed 65536 characters")
    return content


def parse_recipients(raw: str) -> list[str]:
    """Split a comma separated recipient list, tolerating whitespace."""
    return [name for name in re.split(r"\s*,\s*", raw.strip()) if name]
