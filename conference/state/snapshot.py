"""Pydantic schemas for persisted store snapshots.

Each store is saved as one JSON document. These models validate a document
on the way in and convert between documents and repositories.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from conference.state.models.message import Message
from conference.state.models.request import Request
from conference.state.models.user import User, UserType
from conference.state.repositories.messages import MessageRepository
from conference.state.repositories.requests import RequestRepository
from conference.state.repositories.users import UserRepository


class SnapshotError(Exception):
    """A persisted snapshot could not be decoded."""
    pass


class MessageRecord(BaseModel):
    message_id: str = Field(min_length=1)
    author: str = Field(min_length=1)
    text: str
    recipients: list[str]
    created_at: datetime
    nesting: int = Field(ge=0)
    replies: list[str] = Field(default_factory=list)


class MessageStorePayload(BaseModel):
    """Messages in insertion order plus the per-user overlays."""

    messages: list[MessageRecord] = Field(default_factory=list)
    archived: dict[str, list[str]] = Field(default_factory=dict)
    unread: dict[str, list[str]] = Field(default_factory=dict)
    deleted: list[str] = Field(default_factory=list)


class RequestRecord(BaseModel):
    request_id: str = Field(min_length=1)
    author: str = Field(min_length=1)
    text: str
    created_at: datetime
    reply: str = ""
    reply_author: Optional[str] = None
    resolved: bool = False


class RequestStorePayload(BaseModel):
    requests: list[RequestRecord] = Field(default_factory=list)


class UserRecord(BaseModel):
    username: str = Field(min_length=1)
    user_type: UserType
    created_at: datetime


class UserStorePayload(BaseModel):
    users: list[UserRecord] = Field(default_factory=list)


def dump_messages(repo: MessageRepository) -> MessageStorePayload:
    return MessageStorePayload(
        messages=[
            MessageRecord(
                message_id=m.message_id, author=m.author, text=m.text,
                recipients=list(m.recipients), created_at=m.created_at,
                nesting=m.nesting, replies=list(m.replies),
            )
            for m in repo.all_messages()
        ],
        archived=repo.archived_by_user(),
        unread=repo.unread_by_user(),
        deleted=repo.deleted_ids(),
    )


def load_messages(payload: MessageStorePayload) -> MessageRepository:
    messages = [
        Message(
            message_id=r.message_id, author=r.author, text=r.text,
            recipients=tuple(r.recipients), created_at=r.created_at,
            nesting=r.nesting, replies=list(r.replies),
        )
        for r in payload.messages
    ]
    return MessageRepository.restore(
        messages, archived=payload.archived, unread=payload.unread,
        deleted=payload.deleted,
    )


def dump_requests(repo: RequestRepository) -> RequestStorePayload:
    return RequestStorePayload(requests=[
        RequestRecord(
            request_id=r.request_id, author=r.author, text=r.text,
            created_at=r.created_at, reply=r.reply,
            reply_author=r.reply_author, resolved=r.resolved,
        )
        for r in repo.all_requests()
    ])


def load_requests(payload: RequestStorePayload) -> RequestRepository:
    return RequestRepository.restore(
        Request(
            request_id=r.request_id, author=r.author, text=r.text,
            created_at=r.created_at, reply=r.reply,
            reply_author=r.reply_author, resolved=r.resolved,
        )
        for r in payload.requests
    )


def dump_users(repo: UserRepository) -> UserStorePayload:
    return UserStorePayload(users=[
        UserRecord(username=u.username, user_type=u.user_type, created_at=u.created_at)
        for u in repo.list_users()
    ])


def load_users(payload: UserStorePayload) -> UserRepository:
    return UserRepository.restore(
        User(username=r.username, user_type=r.user_type, created_at=r.created_at)
        for r in payload.users
    )


def parse_payload(model: type[BaseModel], raw: object, label: str) -> BaseModel:
    """Validate a decoded snapshot, wrapping failures in SnapshotError."""
    try:
        if isinstance(raw, (str, bytes)):
            return model.model_validate_json(raw)
        return model.model_validate(raw)
    except ValidationError as e:
        raise SnapshotError(f"Invalid {label} snapshot: {e}") from e
