import logging
import threading
from typing import Callable, Generic, List, TypeVar

from room_monitor_core.domain.models import RoomStatus, SensorReading

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Slot(Generic[T]):
    """
    One independently published piece of dashboard state.

    Every request aimed at the slot is issued a ticket from a monotonic
    counter. A result is applied only when its ticket is newer than the
    ticket of the value currently shown, so a slow response can never
    overwrite one that was requested after it.
    """

    def __init__(self, name: str, initial: T):
        self.name = name
        self._value = initial
        self._issued = 0
        self._applied = 0
        self._lock = threading.Lock()
        self._listeners: List[Listener[T]] = []

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    @property
    def applied_seq(self) -> int:
        with self._lock:
            return self._applied

    def subscribe(self, listener: Listener[T]) -> None:
        self._listeners.append(listener)

    def issue(self) -> int:
        with self._lock:
            self._issued += 1
            return self._issued

    def accept(self, seq: int, value: T) -> bool:
        """Store the result if it is newer than the one shown. Listeners are not called."""
        with self._lock:
            if seq <= self._applied:
                logger.debug(
                    "Discarding stale %s result (seq %d, shown %d)", self.name, seq, self._applied
                )
                return False
            self._applied = seq
            self._value = value
            return True

    def offer(self, seq: int, value: T) -> bool:
        if not self.accept(seq, value):
            return False
        self.notify()
        return True

    def notify(self) -> None:
        """Hand the value currently shown to every listener."""
        value = self.value
        for listener in list(self._listeners):
            try:
                listener(value)
            except Exception:
                logger.exception("Listener for %s slot failed", self.name)


class DashboardState:
    """The two slots the view layer renders from."""

    def __init__(self) -> None:
        self.history: Slot[List[SensorReading]] = Slot("history", [])
        self.status: Slot[List[RoomStatus]] = Slot("status", [])
