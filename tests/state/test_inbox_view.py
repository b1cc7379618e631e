"""Tests for threaded inbox and archive views."""
from datetime import datetime, timezone

import pytest

from conference.state import (
    UNREAD_MARKER,
    InvalidSelectionError,
    Message,
    MessageAction,
    MessageRepository,
    available_actions,
    build_archive_entries,
    build_inbox_entries,
    compute_archive_view,
    compute_inbox_view,
    select_entry,
)


def _thread(store: MessageRepository) -> dict[str, str]:
    """alice -> bob root with two replies, the first of which has its own reply."""
    root = store.add_message("root", "alice", ["bob"])
    store.reply_to_message("first", "bob", root)
    store.reply_to_message("second", "bob", root)
    first, second = store.get_replies(root)
    store.reply_to_message("nested", "alice", first)
    (nested,) = store.get_replies(first)
    return {"root": root, "first": first, "second": second, "nested": nested}


class TestComputeInboxView:
    """Tests for root-driven depth-first thread expansion."""

    def test_pre_order_traversal(self, store: MessageRepository) -> None:
        ids = _thread(store)
        expected = [ids["root"], ids["first"], ids["nested"], ids["second"]]
        assert compute_inbox_view(store, "alice") == expected
        assert compute_inbox_view(store, "bob") == expected

    def test_threads_in_root_creation_order(self, store: MessageRepository) -> None:
        older = store.add_message("older", "carol", ["bob"])
        newer = store.add_message("newer", "alice", ["bob"])
        store.reply_to_message("re older", "bob", older)
        (reply,) = store.get_replies(older)
        assert compute_inbox_view(store, "bob") == [older, reply, newer]

    def test_reply_recipient_without_root_sees_nothing(self, store: MessageRepository) -> None:
        root = store.add_message("Hi", "alice", ["bob"])
        store.add_to_archive(root, "alice")
        store.reply_to_message("Hey", "bob", root)
        (reply,) = store.get_replies(root)
        assert reply in store.get_inbox_messages("alice")
        assert compute_inbox_view(store, "alice") == []

    def test_outsider_sees_nothing(self, store: MessageRepository) -> None:
        root = store.add_message("Hi", "alice", ["bob"])
        store.reply_to_message("Hey", "bob", root)
        assert compute_inbox_view(store, "carol") == []

    def test_archived_root_hides_thread(self, store: MessageRepository) -> None:
        ids = _thread(store)
        store.add_to_archive(ids["root"], "alice")
        assert compute_inbox_view(store, "alice") == []
        assert ids["root"] in compute_inbox_view(store, "bob")

    def test_archived_reply_still_shown_in_thread(self, store: MessageRepository) -> None:
        ids = _thread(store)
        store.add_to_archive(ids["first"], "alice")
        assert ids["first"] in compute_inbox_view(store, "alice")

    def test_other_participants_visible_in_thread(self, store: MessageRepository) -> None:
        root = store.add_message("Hi all", "alice", ["bob", "carol"])
        store.reply_to_message("bob here", "bob", root)
        (reply,) = store.get_replies(root)
        # carol sees bob's reply to alice because it hangs off her root
        assert compute_inbox_view(store, "carol") == [root, reply]

    def test_deleted_messages_still_listed(self, store: MessageRepository) -> None:
        ids = _thread(store)
        store.mark_as_deleted(ids["first"])
        assert len(compute_inbox_view(store, "bob")) == 4

    def test_cycle_in_reply_links_terminates(self) -> None:
        now = datetime.now(timezone.utc)
        a = Message("a", "alice", "A", ("bob",), now, replies=["b"])
        b = Message("b", "bob", "B", ("alice",), now, nesting=1, replies=["a"])
        store = MessageRepository.restore([a, b])
        assert compute_inbox_view(store, "bob") == ["a", "b"]

    def test_empty_store(self, store: MessageRepository) -> None:
        assert compute_inbox_view(store, "alice") == []


class TestComputeArchiveView:
    """Tests for the flat archive view."""

    def test_archive_view_is_flat(self, store: MessageRepository) -> None:
        ids = _thread(store)
        store.add_to_archive(ids["root"], "alice")
        assert compute_archive_view(store, "alice") == [ids["root"]]

    def test_duplicates_kept(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        store.add_to_archive(message_id, "bob")
        store.add_to_archive(message_id, "bob")
        assert compute_archive_view(store, "bob") == [message_id, message_id]


class TestEntries:
    """Tests for rendered inbox and archive entries."""

    def test_positions_and_nesting(self, store: MessageRepository) -> None:
        _thread(store)
        entries = build_inbox_entries(store, "bob")
        assert [e.position for e in entries] == [1, 2, 3, 4]
        assert [e.nesting for e in entries] == [0, 1, 2, 1]

    def test_unread_marker_appended(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        store.mark_as_unread(message_id, "bob")
        (entry,) = build_inbox_entries(store, "bob")
        assert entry.unread
        assert entry.text.endswith(f"{UNREAD_MARKER}\n")
        (alice_entry,) = build_inbox_entries(store, "alice")
        assert UNREAD_MARKER not in alice_entry.text

    def test_deleted_flag(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        store.mark_as_deleted(message_id)
        (entry,) = build_inbox_entries(store, "bob")
        assert entry.deleted
        assert "[DELETED]" in entry.text

    def test_archive_entries_are_flat(self, store: MessageRepository) -> None:
        ids = _thread(store)
        store.add_to_archive(ids["nested"], "bob")
        store.mark_as_unread(ids["nested"], "bob")
        (entry,) = build_archive_entries(store, "bob")
        assert entry.nesting == 0
        assert entry.unread is False
        assert UNREAD_MARKER not in entry.text


class TestSelectEntry:
    """Tests for picking a view entry by number."""

    def test_one_based(self) -> None:
        assert select_entry(["a", "b", "c"], 1) == "a"
        assert select_entry(["a", "b", "c"], 3) == "c"

    @pytest.mark.parametrize("position", [0, 4, -1])
    def test_out_of_range(self, position: int) -> None:
        with pytest.raises(InvalidSelectionError, match="out of range"):
            select_entry(["a", "b", "c"], position)

    def test_empty_view(self) -> None:
        with pytest.raises(InvalidSelectionError, match="empty"):
            select_entry([], 1)


class TestAvailableActions:
    """Tests for the per-message action menu."""

    def test_recipient_can_reply(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        assert available_actions(store, "bob", message_id) == [
            MessageAction.REPLY, MessageAction.ARCHIVE, MessageAction.MARK_UNREAD,
        ]

    def test_author_can_delete(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        assert available_actions(store, "alice", message_id) == [
            MessageAction.DELETE, MessageAction.ARCHIVE, MessageAction.MARK_UNREAD,
        ]

    def test_deleted_message_cannot_be_deleted_again(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        store.mark_as_deleted(message_id)
        assert MessageAction.DELETE not in available_actions(store, "alice", message_id)

    def test_unread_toggles_to_unmark(self, store: MessageRepository) -> None:
        message_id = store.add_message("Hi", "alice", ["bob"])
        store.mark_as_unread(message_id, "bob")
        actions = available_actions(store, "bob", message_id)
        assert MessageAction.UNMARK_UNREAD in actions
        assert MessageAction.MARK_UNREAD not in actions

    def test_self_addressed_message(self, store: MessageRepository) -> None:
        message_id = store.add_message("Note to self", "alice", ["alice"])
        assert available_actions(store, "alice", message_id)[:2] == [
            MessageAction.REPLY, MessageAction.DELETE,
        ]
