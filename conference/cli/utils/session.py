"""Run one CLI action against the persisted stores.

Every command follows the same cycle: load all stores from the snapshot
database, apply the action in memory, and save everything back. A failing
action leaves the database untouched.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

import typer
from rich.console import Console

from conference.cli.output import format_error
from conference.cli.utils.config import AppConfig, ConfigError, ConfigManager
from conference.state import (
    ConferenceError,
    DatabaseError,
    DatabaseManager,
    InvalidSelectionError,
    NotFoundError,
    SnapshotError,
    SnapshotGateway,
    StoreState,
    UserType,
)

logger = logging.getLogger(__name__)
console = Console()

T = TypeVar("T")


class CommandError(Exception):
    """A command refused to proceed; carries the exit code and an optional hint."""

    def __init__(self, message: str, code: int = 2, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint


def load_config() -> AppConfig:
    """Load the session config or exit with code 1."""
    try:
        return ConfigManager().load()
    except ConfigError as e:
        format_error(console, str(e), hint="Run 'conference init' first")
        raise typer.Exit(code=1)


async def _session(
    db_path: Path, action: Callable[[StoreState], T], save: bool,
) -> T:
    db = DatabaseManager(db_path)
    await db.initialize()
    try:
        async with db.connection() as conn:
            gateway = SnapshotGateway(conn)
            state = await gateway.load()
            result = action(state)
            if save:
                await gateway.save(state)
    finally:
        await db.close()
    return result


def run_session(
    action: Callable[[StoreState], T],
    error_label: str,
    config: Optional[AppConfig] = None,
    save: bool = True,
) -> T:
    """Run ``action`` against freshly loaded stores with standard error handling."""
    if config is None:
        config = load_config()
    try:
        return asyncio.run(_session(config.db_path, action, save))
    except CommandError as e:
        format_error(console, e.message, hint=e.hint)
        raise typer.Exit(code=e.code)
    except InvalidSelectionError as e:
        format_error(console, str(e), hint="Run 'conference inbox' to see the numbers")
        raise typer.Exit(code=2)
    except NotFoundError as e:
        format_error(console, str(e))
        raise typer.Exit(code=5)
    except ConferenceError as e:
        format_error(console, str(e))
        raise typer.Exit(code=2)
    except (DatabaseError, SnapshotError) as e:
        format_error(
            console, f"Storage failure while trying to {error_label}: {e}",
            hint=f"Check the database at {config.db_path}",
        )
        raise typer.Exit(code=3)
    except Exception as e:
        logger.debug("Unexpected failure while trying to %s", error_label, exc_info=True)
        format_error(console, f"Failed to {error_label}: {e}")
        raise typer.Exit(code=1)


def require_organizer(state: StoreState, username: str, what: str) -> None:
    """Raise CommandError unless ``username`` is a registered organizer."""
    if state.users.get_user_type(username) != UserType.ORGANIZER:
        raise CommandError(f"Only organizers can {what}", code=4)
