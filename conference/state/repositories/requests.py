"""Request store."""
import logging
from typing import Iterable

from conference.state.exceptions import RequestNotFoundError
from conference.state.models.request import Request

logger = logging.getLogger(__name__)


class RequestRepository:
    """Holds organizer requests in the order they were made.

    Unlike messages, requests can be removed outright.
    """

    def __init__(self) -> None:
        self._requests: list[Request] = []

    def __len__(self) -> int:
        return len(self._requests)

    def request_ids(self) -> list[str]:
        return [r.request_id for r in self._requests]

    def all_requests(self) -> list[Request]:
        return list(self._requests)

    def get_request_with_id(self, request_id: str) -> Request:
        for request in self._requests:
            if request.request_id == request_id:
                return request
        raise RequestNotFoundError(request_id)

    def add_request(self, text: str, author: str) -> str:
        request = Request.create(text, author)
        self._requests.append(request)
        logger.debug("Request %s added by %s", request.request_id, author)
        return request.request_id

    def delete_request(self, request_id: str) -> None:
        """Remove a request. Unknown ids are ignored."""
        before = len(self._requests)
        self._requests = [r for r in self._requests if r.request_id != request_id]
        if len(self._requests) != before:
            logger.debug("Request %s deleted", request_id)

    def is_author(self, username: str, request_id: str) -> bool:
        return self.get_request_with_id(request_id).author == username

    def add_reply(self, text: str, request_id: str, author: str) -> None:
        """Record the reply to a request, replacing any earlier one.

        Refusing a second reply is up to the caller (see ``has_reply``).
        """
        self.get_request_with_id(request_id).set_reply(text, author)
        logger.debug("Request %s answered by %s", request_id, author)

    def has_reply(self, request_id: str) -> bool:
        return self.get_request_with_id(request_id).has_reply

    def update_status(self, request_id: str) -> None:
        self.get_request_with_id(request_id).resolve()

    def user_requests(self, username: str) -> list[str]:
        return [r.request_id for r in self._requests if r.author == username]

    def get_request_as_string(self, request_id: str) -> str:
        return self.get_request_with_id(request_id).render()

    @classmethod
    def restore(cls, requests: Iterable[Request]) -> "RequestRepository":
        repo = cls()
        repo._requests = list(requests)
        return repo
