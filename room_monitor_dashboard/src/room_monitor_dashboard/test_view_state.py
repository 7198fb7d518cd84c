from unittest.mock import Mock

from room_monitor_dashboard.view_state import DashboardState, Slot


def test_offer_applies_newer_result_and_notifies():
    slot: Slot[list] = Slot("status", [])
    listener = Mock()
    slot.subscribe(listener)

    seq = slot.issue()
    assert slot.offer(seq, ["a"]) is True

    assert slot.value == ["a"]
    assert slot.applied_seq == seq
    listener.assert_called_once_with(["a"])


def test_stale_result_does_not_overwrite_fresher_one():
    slot: Slot[list] = Slot("history", [])
    listener = Mock()
    slot.subscribe(listener)

    older = slot.issue()
    newer = slot.issue()

    assert slot.offer(newer, ["fresh"]) is True
    assert slot.offer(older, ["stale"]) is False

    assert slot.value == ["fresh"]
    listener.assert_called_once_with(["fresh"])


def test_results_arriving_in_order_are_all_applied():
    slot: Slot[int] = Slot("status", 0)
    first, second = slot.issue(), slot.issue()

    assert slot.offer(first, 1)
    assert slot.offer(second, 2)
    assert slot.value == 2


def test_older_result_still_applies_when_newer_never_arrives():
    slot: Slot[int] = Slot("status", 0)
    first = slot.issue()
    slot.issue()  # this request fails and never offers

    assert slot.offer(first, 1)
    assert slot.value == 1


def test_failing_listener_does_not_block_others():
    slot: Slot[int] = Slot("status", 0)
    broken = Mock(side_effect=RuntimeError("render failed"))
    healthy = Mock()
    slot.subscribe(broken)
    slot.subscribe(healthy)

    assert slot.offer(slot.issue(), 5)

    healthy.assert_called_once_with(5)
    assert slot.value == 5


def test_dashboard_state_starts_empty():
    state = DashboardState()
    assert state.history.value == []
    assert state.status.value == []
    assert state.history.applied_seq == 0


def test_accept_stores_without_notifying_until_notify():
    slot: Slot[int] = Slot("history", 0)
    listener = Mock()
    slot.subscribe(listener)

    assert slot.accept(slot.issue(), 7) is True
    listener.assert_not_called()
    assert slot.value == 7

    slot.notify()
    listener.assert_called_once_with(7)


def test_notify_hands_out_latest_value():
    slot: Slot[int] = Slot("history", 0)
    listener = Mock()
    slot.subscribe(listener)
    first, second = slot.issue(), slot.issue()

    slot.accept(first, 1)
    slot.accept(second, 2)
    slot.notify()

    listener.assert_called_once_with(2)
