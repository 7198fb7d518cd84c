"""
Deterministic simulated readings for the development API.

The same (room, day, hour) always yields the same values, so history and
current status agree with each other across requests.
"""

import math
import random
from datetime import date, datetime
from typing import List, Sequence

from room_monitor_core.domain.models import RoomStatus, SensorReading

HOURS_PER_DAY = 24


def _room_offset(room: str) -> float:
    # rooms further down the list run a little warmer
    digits = "".join(ch for ch in room if ch.isdigit())
    return (int(digits[-1]) if digits else 0) * 0.3


def simulate_reading(room: str, day: date, hour: int) -> SensorReading:
    rng = random.Random(f"{room}/{day.isoformat()}/{hour}")
    # daily cycle peaks mid-afternoon
    phase = math.sin((hour - 9) / HOURS_PER_DAY * 2 * math.pi)
    temperature = 20.5 + _room_offset(room) + 2.5 * phase + rng.uniform(-0.4, 0.4)
    humidity = 47.0 - 8.0 * phase + rng.uniform(-2.0, 2.0)
    return SensorReading(
        time=f"{hour:02d}:00",
        temperature=round(temperature, 1),
        humidity=round(humidity, 1),
    )


def readings_for_day(room: str, day: date, now: datetime) -> List[SensorReading]:
    """Hourly readings ordered by time; today stops at the current hour, future days are empty."""
    today = now.date()
    if day > today:
        return []
    last_hour = now.hour if day == today else HOURS_PER_DAY - 1
    return [simulate_reading(room, day, hour) for hour in range(last_hour + 1)]


def current_status(rooms: Sequence[str], now: datetime) -> List[RoomStatus]:
    statuses = []
    for room in rooms:
        r = simulate_reading(room, now.date(), now.hour)
        statuses.append(RoomStatus(room=room, temperature=r.temperature, humidity=r.humidity))
    return statuses
