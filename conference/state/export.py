"""State export and import."""
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from conference.state.gateway import StoreState
from conference.state.snapshot import (
    MessageStorePayload,
    RequestStorePayload,
    SnapshotError,
    UserStorePayload,
    dump_messages,
    dump_requests,
    dump_users,
    load_messages,
    load_requests,
    load_users,
    parse_payload,
)

_CURRENT_SCHEMA_VERSION = "1.0.0"
_SUPPORTED_IMPORT_VERSIONS = {"1.0.0"}


class StateImportError(Exception): pass


def export_state(state: StoreState) -> dict[str, Any]:
    return {
        "schema_version": _CURRENT_SCHEMA_VERSION,
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "users": dump_users(state.users).model_dump(mode="json"),
        "messages": dump_messages(state.messages).model_dump(mode="json"),
        "requests": dump_requests(state.requests).model_dump(mode="json"),
    }


def export_state_to_file(state: StoreState, path: Path) -> None:
    data = export_state(state)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f: json.dump(data, f, indent=2)


def import_state(data: dict[str, Any]) -> StoreState:
    version = data.get("schema_version", "")
    if version not in _SUPPORTED_IMPORT_VERSIONS:
        raise StateImportError(f"Unsupported schema version: {version}")
    try:
        return StoreState(
            messages=load_messages(parse_payload(MessageStorePayload, data.get("messages", {}), "messages")),
            requests=load_requests(parse_payload(RequestStorePayload, data.get("requests", {}), "requests")),
            users=load_users(parse_payload(UserStorePayload, data.get("users", {}), "users")),
        )
    except SnapshotError as e:
        raise StateImportError(str(e)) from e


def import_state_from_file(path: Path) -> StoreState:
    if not path.exists(): raise StateImportError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise StateImportError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise StateImportError(f"Expected a JSON object in {path}")
    return import_state(data)
