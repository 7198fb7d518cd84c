from datetime import date

import pytest

from room_monitor_core.domain.models import Selection
from room_monitor_core.domain.rooms import (
    InvalidSelection,
    earliest_selectable_date,
    is_selectable_date,
    room_ids,
    validate_room,
    validate_selection,
)

TODAY = date(2026, 10, 16)


def test_room_ids_default_to_ten_rooms_starting_at_100():
    rooms = room_ids()
    assert rooms == ["100", "101", "102", "103", "104", "105", "106", "107", "108", "109"]


def test_room_ids_use_prefix_and_count():
    assert room_ids(prefix="2", count=3) == ["20", "21", "22"]


def test_earliest_selectable_date_is_window_days_back():
    assert earliest_selectable_date(TODAY, 7) == date(2026, 10, 9)


@pytest.mark.parametrize(
    "day, expected",
    [
        (TODAY, True),
        (date(2026, 10, 9), True),
        (date(2026, 10, 8), False),
        (date(2026, 10, 17), False),
    ],
)
def test_is_selectable_date(day, expected):
    assert is_selectable_date(day, TODAY, 7) is expected


def test_validate_selection_accepts_known_room_and_recent_day():
    sel = Selection(room="107", date=date(2026, 10, 14))
    assert validate_selection(sel, room_ids(), TODAY) is sel


def test_validate_selection_rejects_unknown_room():
    with pytest.raises(InvalidSelection, match="Unknown room"):
        validate_selection(Selection(room="999", date=TODAY), room_ids(), TODAY)


def test_validate_selection_rejects_future_day():
    with pytest.raises(InvalidSelection):
        validate_selection(Selection(room="100", date=date(2026, 10, 17)), room_ids(), TODAY)


def test_invalid_selection_is_a_value_error():
    assert issubclass(InvalidSelection, ValueError)


def test_selection_helpers_return_new_selections():
    sel = Selection(room="100", date=TODAY)
    assert sel.with_room("105") == Selection(room="105", date=TODAY)
    assert sel.with_date(date(2026, 10, 10)) == Selection(room="100", date=date(2026, 10, 10))
    assert sel == Selection(room="100", date=TODAY)


def test_validate_room_ignores_dates():
    assert validate_room("105", room_ids()) == "105"
    with pytest.raises(InvalidSelection):
        validate_room("1010", room_ids())
