from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class SensorReading:
    time: str  # label, e.g. "14:00"
    temperature: float  # °C
    humidity: float  # %


@dataclass(frozen=True)
class RoomStatus:
    room: str
    temperature: float
    humidity: float


@dataclass(frozen=True)
class Selection:
    room: str
    date: date

    def with_room(self, room: str) -> "Selection":
        return Selection(room=room, date=self.date)

    def with_date(self, day: date) -> "Selection":
        return Selection(room=self.room, date=day)
