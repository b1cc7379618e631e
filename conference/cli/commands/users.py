"""Register and list conference users."""

import typer
from rich.console import Console

from conference.cli.output import format_error, format_success, format_table, json_output
from conference.cli.utils import (
    load_config,
    run_session,
    validate_user_type,
    validate_username,
)
from conference.state import StoreState, User

console = Console()


def register_command(username: str, user_type: str, json_flag: bool) -> None:
    """Register a new user account."""
    try:
        name = validate_username(username)
        role = validate_user_type(user_type)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    config = load_config()

    def _register(state: StoreState) -> User:
        return state.users.register(name, role)

    user = run_session(_register, "register user", config=config)

    if json_flag:
        json_output(
            console,
            {"status": "registered", "username": user.username, "user_type": user.user_type.value},
        )
    else:
        format_success(console, f"Registered {user.username} as {user.user_type.value}")


def users_command(json_flag: bool) -> None:
    """List registered users."""
    config = load_config()
    users = run_session(
        lambda state: state.users.list_users(), "list users", config=config, save=False,
    )

    if json_flag:
        json_output(
            console,
            {
                "count": len(users),
                "users": [
                    {"username": u.username, "user_type": u.user_type.value,
                     "created_at": u.created_at.isoformat()}
                    for u in users
                ],
            },
        )
        return
    if not users:
        console.print("[yellow]No users registered[/yellow]")
        return
    format_table(
        console,
        f"Users ({len(users)})",
        ["Username", "Type"],
        [(u.username, u.user_type.value) for u in users],
    )
