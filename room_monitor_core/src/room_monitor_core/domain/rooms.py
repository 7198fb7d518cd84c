# room_monitor/domain/rooms.py

from datetime import date, timedelta
from typing import List, Sequence

from room_monitor_core.domain.models import Selection


class InvalidSelection(ValueError):
    """Raised when a selection names an unknown room or an out-of-range day."""


def room_ids(prefix: str = "10", count: int = 10) -> List[str]:
    return [f"{prefix}{i}" for i in range(count)]


def earliest_selectable_date(today: date, window_days: int = 7) -> date:
    return today - timedelta(days=window_days)


def is_selectable_date(day: date, today: date, window_days: int = 7) -> bool:
    """A day may be picked if it is not in the future and at most `window_days` back."""
    return earliest_selectable_date(today, window_days) <= day <= today


def validate_room(room: str, rooms: Sequence[str]) -> str:
    if room not in rooms:
        raise InvalidSelection(f"Unknown room {room!r}")
    return room


def validate_selection(
    selection: Selection,
    rooms: Sequence[str],
    today: date,
    window_days: int = 7,
) -> Selection:
    validate_room(selection.room, rooms)
    if not is_selectable_date(selection.date, today, window_days):
        raise InvalidSelection(
            f"Date {selection.date.isoformat()} is outside "
            f"{earliest_selectable_date(today, window_days).isoformat()}..{today.isoformat()}"
        )
    return selection
