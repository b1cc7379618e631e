"""User directory."""
import logging
from typing import Iterable

from conference.state.exceptions import UserExistsError, UserNotFoundError
from conference.state.models.correspondence import utc_now
from conference.state.models.user import User, UserType

logger = logging.getLogger(__name__)


class UserRepository:
    """Registered users keyed by username, in registration order."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def register(self, username: str, user_type: UserType = UserType.ATTENDEE) -> User:
        """Register a new user. Raises UserExistsError for taken usernames."""
        username = username.strip()
        if not username:
            raise ValueError("username cannot be empty")
        if username in self._users:
            raise UserExistsError(f"User {username!r} already exists")
        user = User(username=username, user_type=user_type, created_at=utc_now())
        self._users[username] = user
        logger.info("Registered %s as %s", username, user_type.value)
        return user

    def user_exists(self, username: str) -> bool:
        return username in self._users

    def get_user(self, username: str) -> User:
        try:
            return self._users[username]
        except KeyError:
            raise UserNotFoundError(username) from None

    def get_user_type(self, username: str) -> UserType:
        return self.get_user(username).user_type

    def organizer_exists(self) -> bool:
        return any(u.user_type == UserType.ORGANIZER for u in self._users.values())

    def list_users(self) -> list[User]:
        return list(self._users.values())

    def valid_recipients(self, usernames: Iterable[str]) -> list[str]:
        """Keep the registered usernames, dropping blanks and repeats."""
        valid: list[str] = []
        for name in usernames:
            name = name.strip()
            if name and name in self._users and name not in valid:
                valid.append(name)
        return valid

    @classmethod
    def restore(cls, users: Iterable[User]) -> "UserRepository":
        repo = cls()
        for user in users:
            repo._users[user.username] = user
        return repo
