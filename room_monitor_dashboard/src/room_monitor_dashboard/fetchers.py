import logging
from datetime import date
from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from room_monitor_core.domain.models import RoomStatus, SensorReading
from room_monitor_core.domain.ports import HttpSession
from room_monitor_core.domain.schemas import RoomStatusOut, SensorReadingOut

logger = logging.getLogger(__name__)

READINGS_PATH = "/api/readings/{room}/{day}"
CURRENT_STATUS_PATH = "/api/current-status"

_readings_adapter = TypeAdapter(List[SensorReadingOut])
_status_adapter = TypeAdapter(List[RoomStatusOut])


class FetchError(Exception):
    """A fetch did not produce a usable result."""


class NetworkError(FetchError):
    """Host unreachable, timed out, or answered with an error status."""


class DeserializationError(FetchError):
    """The body was not JSON or did not have the expected shape."""


def history_url(base_url: str, room: str, day: date) -> str:
    return base_url.rstrip("/") + READINGS_PATH.format(room=room, day=day.strftime("%Y-%m-%d"))


def status_url(base_url: str) -> str:
    return base_url.rstrip("/") + CURRENT_STATUS_PATH


class ReadingsApiClient:
    """
    Reads room history and current status from the readings API.

    Inputs are not validated here; the caller only passes rooms from the
    configured room set and days inside the selectable window.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[HttpSession] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get_json(self, url: str) -> Any:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"GET {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise DeserializationError(f"GET {url} returned a non-JSON body: {e}") from e

    def fetch_room_history(self, room: str, day: date) -> List[SensorReading]:
        url = history_url(self.base_url, room, day)
        body = self._get_json(url)
        try:
            readings = _readings_adapter.validate_python(body)
        except ValidationError as e:
            raise DeserializationError(f"Unexpected readings payload from {url}: {e}") from e
        return [r.to_domain() for r in readings]

    def fetch_current_status(self) -> List[RoomStatus]:
        url = status_url(self.base_url)
        body = self._get_json(url)
        try:
            statuses = _status_adapter.validate_python(body)
        except ValidationError as e:
            raise DeserializationError(f"Unexpected status payload from {url}: {e}") from e
        return [s.to_domain() for s in statuses]

    def close(self) -> None:
        close = getattr(self.session, "close", None)
        if close is not None:
            close()
