"""Initialize the session configuration."""

import typer
from rich.console import Console
from rich.markup import escape

from conference.cli.output import format_error, format_success, json_output
from conference.cli.utils import (
    ConfigManager,
    run_session,
    validate_user_type,
    validate_username,
)
from conference.state import StoreState, User

console = Console()


def init_command(username: str, user_type: str, force: bool, json_flag: bool) -> None:
    """Write the config for ``username`` and register them if needed."""
    try:
        name = validate_username(username)
        role = validate_user_type(user_type)
    except ValueError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)

    config = ConfigManager()
    if config.exists() and not force:
        format_error(
            console,
            f"Configuration already exists at {config.config_path}",
            hint="Use --force to switch to another user",
        )
        raise typer.Exit(code=1)

    config.save(name)
    app_config = config.load()

    def _init(state: StoreState) -> tuple[User, bool]:
        if state.users.user_exists(name):
            return state.users.get_user(name), False
        return state.users.register(name, role), True

    user, registered = run_session(_init, "initialize", config=app_config)

    if json_flag:
        json_output(
            console,
            {
                "status": "initialized",
                "username": user.username,
                "user_type": user.user_type.value,
                "registered": registered,
                "db_path": str(app_config.db_path),
            },
        )
        return

    format_success(console, "Session initialized successfully")
    console.print(f"[cyan]User:[/cyan]     {user.username} ({user.user_type.value})")
    console.print(f"[cyan]Database:[/cyan] {escape(str(app_config.db_path))}")
    if not registered:
        console.print("[yellow]Using existing account[/yellow]")
