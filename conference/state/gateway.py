"""Load and save the whole data model at process boundaries."""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

import aiosqlite

from conference.state.database import DatabaseError
from conference.state.repositories.messages import MessageRepository
from conference.state.repositories.requests import RequestRepository
from conference.state.repositories.users import UserRepository
from conference.state.snapshot import (
    MessageStorePayload,
    RequestStorePayload,
    UserStorePayload,
    dump_messages,
    dump_requests,
    dump_users,
    load_messages,
    load_requests,
    load_users,
    parse_payload,
)

logger = logging.getLogger(__name__)


@dataclass
class StoreState:
    """Every store the application works with, loaded together."""

    messages: MessageRepository = field(default_factory=MessageRepository)
    requests: RequestRepository = field(default_factory=RequestRepository)
    users: UserRepository = field(default_factory=UserRepository)


class SnapshotGateway:
    """Reads and writes one JSON snapshot per store in the snapshots table."""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def _fetch(self, name: str) -> str | None:
        try:
            cursor = await self._conn.execute(
                "SELECT payload FROM snapshots WHERE name = ?", (name,),
            )
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise DatabaseError(f"Could not read {name} snapshot: {e}") from e
        return row["payload"] if row else None

    async def load(self) -> StoreState:
        """Load every store. Stores never saved before come back empty."""
        state = StoreState()
        raw = await self._fetch("messages")
        if raw is not None:
            state.messages = load_messages(parse_payload(MessageStorePayload, raw, "messages"))
        raw = await self._fetch("requests")
        if raw is not None:
            state.requests = load_requests(parse_payload(RequestStorePayload, raw, "requests"))
        raw = await self._fetch("users")
        if raw is not None:
            state.users = load_users(parse_payload(UserStorePayload, raw, "users"))
        logger.info(
            "Loaded %d messages, %d requests, %d users",
            len(state.messages), len(state.requests), len(state.users),
        )
        return state

    async def save(self, state: StoreState) -> None:
        """Replace all snapshots in a single commit."""
        now = datetime.now(timezone.utc).isoformat()
        rows = [
            ("messages", dump_messages(state.messages).model_dump_json(), now),
            ("requests", dump_requests(state.requests).model_dump_json(), now),
            ("users", dump_users(state.users).model_dump_json(), now),
        ]
        try:
            await self._conn.executemany(
                "INSERT OR REPLACE INTO snapshots (name, payload, saved_at) VALUES (?, ?, ?)",
                rows,
            )
            await self._conn.commit()
        except aiosqlite.Error as e:
            raise DatabaseError(f"Could not save snapshots: {e}") from e
        logger.info(
            "Saved %d messages, %d requests, %d users",
            len(state.messages), len(state.requests), len(state.users),
        )
