import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Optional

from room_monitor_core.config.environments import Settings
from room_monitor_core.domain.models import Selection
from room_monitor_core.domain.ports import ReadingsSource
from room_monitor_core.domain.rooms import room_ids, validate_room, validate_selection

from room_monitor_dashboard.fetchers import FetchError
from room_monitor_dashboard.view_state import DashboardState

logger = logging.getLogger(__name__)

Job = Callable[[], None]
Runner = Callable[[Job, str], None]


def start_daemon(job: Job, name: str) -> None:
    """Run one fetch job on its own daemon thread."""
    threading.Thread(target=job, name=name, daemon=True).start()


@dataclass
class PollerConfig:
    rooms: List[str] = field(default_factory=room_ids)
    interval_s: float = 5.0
    history_window_days: int = 7
    base_url: str = "http://localhost:8000"
    request_timeout_s: Optional[float] = None
    today: Callable[[], date] = date.today

    @classmethod
    def from_settings(cls, settings: Settings) -> "PollerConfig":
        return cls(
            rooms=room_ids(settings.ROOM_PREFIX, settings.ROOM_COUNT),
            interval_s=settings.POLL_INTERVAL_SEC,
            history_window_days=settings.HISTORY_WINDOW_DAYS,
            base_url=settings.API_BASE_URL,
            request_timeout_s=settings.REQUEST_TIMEOUT_SEC,
        )


class RoomTelemetryPoller(threading.Thread):
    """
    Keeps a DashboardState in sync with the readings API.

    Mounting (``start``) polls once right away and then every
    ``interval_s`` seconds. Changing the selection polls right away and
    re-arms the timer. ``stop`` unmounts: the timer is cancelled and any
    response still in flight is ignored when it lands.

    A poll fetches the selected room-day history and the current status of
    all rooms concurrently; each result lands in its own slot as soon as it
    arrives. A failed fetch is logged and leaves its slot as it was.
    """

    daemon = True

    def __init__(
        self,
        source: ReadingsSource,
        config: PollerConfig,
        state: Optional[DashboardState] = None,
        selection: Optional[Selection] = None,
        runner: Runner = start_daemon,
    ):
        super().__init__(name="room-telemetry-poller")
        self.source = source
        self.config = config
        self.state = state if state is not None else DashboardState()
        self.runner = runner
        if selection is None:
            selection = Selection(room=config.rooms[0], date=config.today())
        self._selection = self._validate(selection)
        self._generation = 0
        self._rearm = False
        self._lock = threading.RLock()
        self._wake = threading.Event()
        self.s_stop = threading.Event()
        self.poll_count = 0

    @property
    def selection(self) -> Selection:
        with self._lock:
            return self._selection

    @property
    def mounted(self) -> bool:
        return self.is_alive() and not self.s_stop.is_set()

    def _validate(self, selection: Selection) -> Selection:
        return validate_selection(
            selection,
            self.config.rooms,
            today=self.config.today(),
            window_days=self.config.history_window_days,
        )

    def select(self, room: Optional[str] = None, day: Optional[date] = None) -> Selection:
        """Change the selected room and/or day. Raises InvalidSelection for out-of-range input."""
        with self._lock:
            current = self._selection
            new = current
            if room is not None:
                new = new.with_room(validate_room(room, self.config.rooms))
            if day is not None:
                new = self._validate(new.with_date(day))
            if new == current:
                return current
            self._selection = new
            self._generation += 1

        logger.info("Selection changed to room %s on %s", new.room, new.date.isoformat())
        if self.mounted:
            self.poll()
            with self._lock:
                self._rearm = True
            self._wake.set()
        return new

    def stop(self) -> None:
        logger.info("Stopping room telemetry poller")
        self.s_stop.set()
        self._wake.set()

    def poll(self) -> None:
        """Issue one history fetch and one status fetch; neither waits for the other."""
        if self.s_stop.is_set():
            return
        with self._lock:
            selection = self._selection
            generation = self._generation
            self.poll_count += 1
        history_seq = self.state.history.issue()
        status_seq = self.state.status.issue()
        logger.debug(
            "Poll %d: room %s on %s", self.poll_count, selection.room, selection.date.isoformat()
        )

        self.runner(
            lambda: self._load_history(selection, generation, history_seq),
            f"history-{selection.room}",
        )
        self.runner(lambda: self._load_status(status_seq), "current-status")

    def _load_history(self, selection: Selection, generation: int, seq: int) -> None:
        try:
            readings = self.source.fetch_room_history(selection.room, selection.date)
        except FetchError as e:
            logger.warning(
                "Error fetching history for room %s on %s: %s",
                selection.room,
                selection.date.isoformat(),
                e,
            )
            return
        except Exception:
            logger.exception("Unexpected error fetching history for room %s", selection.room)
            return

        with self._lock:
            if self.s_stop.is_set():
                return
            if generation != self._generation:
                logger.debug("Discarding history for superseded selection %s", selection)
                return
            accepted = self.state.history.accept(seq, readings)
        # listeners run outside the poller lock
        if accepted:
            self.state.history.notify()

    def _load_status(self, seq: int) -> None:
        try:
            statuses = self.source.fetch_current_status()
        except FetchError as e:
            logger.warning("Error fetching current status: %s", e)
            return
        except Exception:
            logger.exception("Unexpected error fetching current status")
            return

        if self.s_stop.is_set():
            return
        self.state.status.offer(seq, statuses)

    def run(self) -> None:
        logger.info("Starting room telemetry poller (every %.1fs)", self.config.interval_s)
        self.poll()
        next_tick = time.monotonic() + self.config.interval_s
        while not self.s_stop.is_set():
            with self._lock:
                rearm, self._rearm = self._rearm, False
            now = time.monotonic()
            if rearm:
                next_tick = now + self.config.interval_s
            elif now >= next_tick:
                self.poll()
                next_tick += self.config.interval_s
            else:
                self._wake.wait(next_tick - now)
                self._wake.clear()
        logger.info("Room telemetry poller stopped")
