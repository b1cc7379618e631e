"""Pytest fixtures shared by state and CLI tests."""
from pathlib import Path

import pytest
import pytest_asyncio

from conference.cli.utils.config import ConfigManager
from conference.state import (
    DatabaseManager,
    MessageRepository,
    RequestRepository,
    UserRepository,
    UserType,
)


@pytest.fixture
def store() -> MessageRepository:
    return MessageRepository()


@pytest.fixture
def request_store() -> RequestRepository:
    return RequestRepository()


@pytest.fixture
def user_store() -> UserRepository:
    users = UserRepository()
    users.register("alice")
    users.register("bob")
    users.register("carol")
    users.register("org", UserType.ORGANIZER)
    return users


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> DatabaseManager:
    """Create and initialize a temp database."""
    manager = DatabaseManager(tmp_path / "test_conference.db")
    await manager.initialize()
    return manager


@pytest.fixture
def config_dir(monkeypatch, tmp_path: Path) -> Path:
    """Point ConfigManager at a temp directory for CLI tests."""
    directory = tmp_path / "conference"
    monkeypatch.setattr(ConfigManager, "DEFAULT_DIR", directory)
    monkeypatch.delenv("CONFERENCE_DB_PATH", raising=False)
    monkeypatch.delenv("CONFERENCE_LOG_LEVEL", raising=False)
    return directory
