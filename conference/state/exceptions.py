"""Exception types for the conference state layer."""


class ConferenceError(Exception):
    """Base exception for all conference state errors."""
    pass


class NotFoundError(ConferenceError):
    """An operation referenced an id that is not in its store."""
    pass


class MessageNotFoundError(NotFoundError):
    """No message exists with the given id."""
    def __init__(self, message_id: str) -> None:
        super().__init__(f"Message with ID {message_id} does not exist")
        self.message_id = message_id


class RequestNotFoundError(NotFoundError):
    """No request exists with the given id."""
    def __init__(self, request_id: str) -> None:
        super().__init__(f"There are no requests with the ID {request_id}")
        self.request_id = request_id


class UserNotFoundError(NotFoundError):
    """No user is registered under the given username."""
    def __init__(self, username: str) -> None:
        super().__init__(f"User {username!r} does not exist")
        self.username = username


class UserExistsError(ConferenceError):
    """A user is already registered under the given username."""
    pass


class InvalidSelectionError(ConferenceError):
    """A numbered selection fell outside the list it was picked from."""
    def __init__(self, position: int, size: int) -> None:
        if size:
            detail = f"Selection {position} is out of range (1-{size})"
        else:
            detail = f"Selection {position} is out of range: the list is empty"
        super().__init__(detail)
        self.position = position
        self.size = size
