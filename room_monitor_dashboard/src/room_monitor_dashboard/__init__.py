from .fetchers import DeserializationError, FetchError, NetworkError, ReadingsApiClient
from .poller import PollerConfig, RoomTelemetryPoller
from .view_state import DashboardState, Slot

__all__ = [
    "DeserializationError",
    "FetchError",
    "NetworkError",
    "ReadingsApiClient",
    "PollerConfig",
    "RoomTelemetryPoller",
    "DashboardState",
    "Slot",
]
