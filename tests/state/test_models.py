"""Tests for message, request and user models."""
import re
from datetime import datetime, timezone

import pytest

from conference.state.models import (
    DELETED_MARKER,
    Message,
    Request,
    User,
    UserType,
    format_timestamp,
    render_correspondence,
)

SENT_AT = datetime(2026, 3, 5, 9, 7, tzinfo=timezone.utc)


def _expected_stamp() -> str:
    return SENT_AT.astimezone().strftime("%d-%m %H:%M")


class TestCorrespondenceHelpers:
    """Tests for timestamp formatting and rendering."""

    def test_timestamp_is_day_month_hour_minute(self) -> None:
        stamp = format_timestamp(SENT_AT)
        assert re.fullmatch(r"\d{2}-\d{2} \d{2}:\d{2}", stamp)
        assert stamp == _expected_stamp()

    def test_render_layout(self) -> None:
        rendered = render_correspondence(SENT_AT, "alice", "Hi")
        assert rendered == f"{_expected_stamp()}\nalice said:\n> Hi\n"


class TestMessageModel:
    """Tests for the Message dataclass."""

    def test_create_assigns_id_and_time(self) -> None:
        m = Message.create("Hi", "alice", ["bob"])
        assert m.message_id
        assert m.created_at.tzinfo is not None
        assert m.nesting == 0
        assert m.replies == []
        assert m.recipients == ("bob",)

    def test_ids_are_unique(self) -> None:
        ids = {Message.create("Hi", "alice", ["bob"]).message_id for _ in range(50)}
        assert len(ids) == 50

    def test_recipients_are_stored_as_tuple(self) -> None:
        recipients = ["bob", "carol"]
        m = Message.create("Hi", "alice", recipients)
        recipients.append("dave")
        assert m.recipients == ("bob", "carol")

    def test_empty_author_raises(self) -> None:
        with pytest.raises(ValueError, match="author"):
            Message.create("Hi", "", ["bob"])

    def test_negative_nesting_raises(self) -> None:
        with pytest.raises(ValueError, match="nesting"):
            Message.create("Hi", "alice", ["bob"], nesting=-1)

    def test_has_recipient(self) -> None:
        m = Message.create("Hi", "alice", ["bob"])
        assert m.has_recipient("bob")
        assert not m.has_recipient("alice")

    def test_add_reply_appends_in_order(self) -> None:
        m = Message.create("Hi", "alice", ["bob"])
        m.add_reply("r1")
        m.add_reply("r2")
        assert m.replies == ["r1", "r2"]

    def test_mark_deleted_replaces_text(self) -> None:
        m = Message.create("secret", "alice", ["bob"])
        m.mark_deleted()
        assert m.text == DELETED_MARKER
        assert "secret" not in m.render()

    def test_render(self) -> None:
        m = Message("id-1", "alice", "Hi", ("bob",), SENT_AT)
        assert m.render() == f"{_expected_stamp()}\nalice said:\n> Hi\n"


class TestRequestModel:
    """Tests for the Request dataclass."""

    def test_new_request_has_no_reply(self) -> None:
        r = Request.create("Need a projector", "dave")
        assert r.reply == ""
        assert r.reply_author is None
        assert r.has_reply is False
        assert r.resolved is False

    def test_set_reply(self) -> None:
        r = Request.create("Need a projector", "dave")
        r.set_reply("Sure", "org")
        assert r.has_reply
        assert r.reply_author == "org"

    def test_resolve_is_idempotent(self) -> None:
        r = Request.create("Need a projector", "dave")
        r.resolve()
        r.resolve()
        assert r.resolved is True

    def test_render_inlines_reply(self) -> None:
        r = Request("req-1", "dave", "Need a projector", SENT_AT, reply="Sure")
        assert r.render() == (
            f"{_expected_stamp()}\ndave said:\n> Need a projector\n \t>Sure\n"
        )

    def test_empty_request_id_raises(self) -> None:
        with pytest.raises(ValueError, match="request_id"):
            Request("", "dave", "text", SENT_AT)


class TestUserModel:
    """Tests for the User frozen dataclass."""

    def test_frozen(self) -> None:
        u = User("alice", UserType.ATTENDEE, SENT_AT)
        with pytest.raises(AttributeError):
            u.username = "bob"  # type: ignore[misc]

    def test_user_type_values(self) -> None:
        assert UserType.ORGANIZER.value == "organizer"
        assert UserType("vip") is UserType.VIP
