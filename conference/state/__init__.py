"""State management module."""
from conference.state.database import DatabaseManager, DatabaseError
from conference.state.exceptions import (
    ConferenceError, NotFoundError, MessageNotFoundError, RequestNotFoundError,
    UserNotFoundError, UserExistsError, InvalidSelectionError,
)
from conference.state.export import export_state, export_state_to_file, import_state, import_state_from_file, StateImportError
from conference.state.gateway import SnapshotGateway, StoreState
from conference.state.inbox import (
    InboxEntry, MessageAction, available_actions, build_archive_entries, build_inbox_entries,
    compute_archive_view, compute_inbox_view, select_entry,
)
from conference.state.models import Message, Request, User, UserType, DELETED_MARKER, UNREAD_MARKER
from conference.state.repositories import MessageRepository, RequestRepository, UserRepository
from conference.state.snapshot import SnapshotError
__all__ = ["DatabaseManager", "DatabaseError",
           "ConferenceError", "NotFoundError", "MessageNotFoundError", "RequestNotFoundError",
           "UserNotFoundError", "UserExistsError", "InvalidSelectionError",
           "export_state", "export_state_to_file", "import_state", "import_state_from_file", "StateImportError",
           "SnapshotGateway", "StoreState",
           "InboxEntry", "MessageAction", "available_actions", "build_archive_entries", "build_inbox_entries",
           "compute_archive_view", "compute_inbox_view", "select_entry",
           "Message", "Request", "User", "UserType", "DELETED_MARKER", "UNREAD_MARKER",
           "MessageRepository", "RequestRepository", "UserRepository", "SnapshotError"]
