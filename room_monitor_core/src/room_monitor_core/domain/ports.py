from datetime import date
from typing import Any, List, Optional, Protocol

from room_monitor_core.domain.models import RoomStatus, SensorReading


class HttpResponse(Protocol):
    def raise_for_status(self) -> Any: ...

    def json(self) -> Any: ...


class HttpSession(Protocol):
    """Anything with a requests-compatible ``get``; requests.Session and TestClient both fit."""

    def get(self, url: str, *, timeout: Optional[float] = None) -> HttpResponse: ...


class ReadingsSource(Protocol):
    def fetch_room_history(self, room: str, day: date) -> List[SensorReading]: ...

    def fetch_current_status(self) -> List[RoomStatus]: ...
