"""CLI commands."""

from . import (
    export_state,
    import_state,
    inbox,
    init,
    interact,
    requests,
    send,
    status,
    users,
)

__all__ = [
    "export_state",
    "import_state",
    "inbox",
    "init",
    "interact",
    "requests",
    "send",
    "status",
    "users",
]
