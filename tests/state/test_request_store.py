"""Tests for the request store."""
import pytest

from conference.state import RequestNotFoundError, RequestRepository


class TestRequestRepository:
    """Tests for adding, answering and removing requests."""

    def test_add_request(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        request = request_store.get_request_with_id(request_id)
        assert request.author == "dave"
        assert request.text == "Need a projector"
        assert request.reply == ""
        assert not request_store.has_reply(request_id)

    def test_order_kept(self, request_store: RequestRepository) -> None:
        ids = [request_store.add_request(f"r{i}", "dave") for i in range(3)]
        assert request_store.request_ids() == ids
        assert len(request_store) == 3

    def test_unknown_id_raises(self, request_store: RequestRepository) -> None:
        with pytest.raises(RequestNotFoundError, match="no requests with the ID"):
            request_store.get_request_with_id("missing")

    def test_add_reply(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        request_store.add_reply("On its way", request_id, "org")
        request = request_store.get_request_with_id(request_id)
        assert request.reply == "On its way"
        assert request.reply_author == "org"
        assert request_store.has_reply(request_id)

    def test_second_reply_overwrites(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        request_store.add_reply("first", request_id, "org")
        request_store.add_reply("second", request_id, "org2")
        request = request_store.get_request_with_id(request_id)
        assert request.reply == "second"
        assert request.reply_author == "org2"

    def test_reply_to_unknown_raises(self, request_store: RequestRepository) -> None:
        with pytest.raises(RequestNotFoundError):
            request_store.add_reply("text", "missing", "org")

    def test_update_status(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        request_store.update_status(request_id)
        assert request_store.get_request_with_id(request_id).resolved

    def test_delete_request(self, request_store: RequestRepository) -> None:
        keep = request_store.add_request("keep", "dave")
        drop = request_store.add_request("drop", "dave")
        request_store.delete_request(drop)
        assert request_store.request_ids() == [keep]
        with pytest.raises(RequestNotFoundError):
            request_store.get_request_with_id(drop)

    def test_delete_unknown_is_noop(self, request_store: RequestRepository) -> None:
        request_store.add_request("keep", "dave")
        request_store.delete_request("missing")
        assert len(request_store) == 1

    def test_is_author(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        assert request_store.is_author("dave", request_id)
        assert not request_store.is_author("org", request_id)

    def test_user_requests(self, request_store: RequestRepository) -> None:
        mine = request_store.add_request("a", "dave")
        request_store.add_request("b", "erin")
        assert request_store.user_requests("dave") == [mine]
        assert request_store.user_requests("nobody") == []

    def test_rendering_shows_reply(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("Need a projector", "dave")
        assert request_store.get_request_as_string(request_id).endswith(" \t>\n")
        request_store.add_reply("Done", request_id, "org")
        assert request_store.get_request_as_string(request_id).endswith(" \t>Done\n")

    def test_restore(self, request_store: RequestRepository) -> None:
        request_id = request_store.add_request("a", "dave")
        rebuilt = RequestRepository.restore(request_store.all_requests())
        assert rebuilt.request_ids() == [request_id]
