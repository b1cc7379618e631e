"""Show the acting user and their message counts."""

from typing import Any

from rich.console import Console

from conference.cli.output import format_key_value, json_output
from conference.cli.utils import load_config, run_session
from conference.state import StoreState, UserType, build_inbox_entries

console = Console()


def status_command(json_flag: bool) -> None:
    """Show session configuration and mailbox counts."""
    config = load_config()
    username = config.username

    def _status(state: StoreState) -> dict[str, Any]:
        entries = build_inbox_entries(state.messages, username)
        registered = state.users.user_exists(username)
        role = state.users.get_user_type(username) if registered else None
        data: dict[str, Any] = {
            "username": username,
            "user_type": role.value if role else "unregistered",
            "db_path": str(config.db_path),
            "inbox": len(entries),
            "unread": sum(1 for e in entries if e.unread),
            "archived": len(state.messages.get_user_archived_messages(username)),
            "requests": len(state.requests.user_requests(username)),
        }
        if role == UserType.ORGANIZER:
            data["open_requests"] = sum(
                1 for r in state.requests.all_requests() if not r.resolved
            )
        return data

    data = run_session(_status, "read status", config=config, save=False)

    if json_flag:
        json_output(console, data)
        return
    format_key_value(
        console,
        {
            "User": f"{data['username']} ({data['user_type']})",
            "Database": data["db_path"],
            "Inbox": data["inbox"],
            "Unread": data["unread"],
            "Archived": data["archived"],
            "My requests": data["requests"],
            **({"Open requests": data["open_requests"]} if "open_requests" in data else {}),
        },
    )
