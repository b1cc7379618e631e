"""Database connection and lifecycle management."""
import aiosqlite
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator


class DatabaseError(Exception):
    pass


class DatabaseManager:
    """Manages the SQLite file that holds store snapshots."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._initialized = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Create tables if they do not exist yet."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            async with self.connection() as conn:
                await conn.executescript(_SCHEMA)
                await conn.commit()
        except (OSError, aiosqlite.Error) as e:
            raise DatabaseError(f"Could not initialize {self._db_path}: {e}") from e
        self._initialized = True

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield an async database connection."""
        conn = await aiosqlite.connect(self._db_path)
        conn.row_factory = aiosqlite.Row
        try:
            yield conn
        finally:
            await conn.close()

    async def close(self) -> None:
        """Mark the manager as closed."""
        self._initialized = False


_SCHEMA = """
CREATE TABLE IF NOT EXISTS schema_versions (version TEXT PRIMARY KEY, applied_at TEXT NOT NULL);
CREATE TABLE IF NOT EXISTS snapshots (
    name     TEXT PRIMARY KEY,
    payload  TEXT NOT NULL,
    saved_at TEXT NOT NULL,
    CHECK(name IN ('messages', 'requests', 'users'))
);
INSERT OR IGNORE INTO schema_versions (version, applied_at) VALUES ('1.0.0', datetime('now'));
"""
