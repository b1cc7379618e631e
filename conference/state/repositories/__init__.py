"""Repositories."""
from conference.state.repositories.messages import MessageRepository
from conference.state.repositories.requests import RequestRepository
from conference.state.repositories.users import UserRepository
__all__ = [
    "MessageRepository",
    "RequestRepository",
    "UserRepository",
]
