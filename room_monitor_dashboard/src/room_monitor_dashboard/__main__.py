"""
Canonical entry point for room_monitor_dashboard package.

Usage:
    room-monitor-dashboard --environment development
    room-monitor-dashboard --room 107 --date 2026-10-14 --base-url http://localhost:8000

While running, type on stdin:
    room <id>          switch room
    date <yyyy-mm-dd>  switch day
    quit               exit
"""

import argparse
import logging
import os
import signal
import sys
from datetime import date
from typing import Optional, TextIO

from room_monitor_core.config.environments import get_settings
from room_monitor_core.domain.models import Selection
from room_monitor_core.domain.rooms import InvalidSelection

from room_monitor_dashboard.fetchers import ReadingsApiClient
from room_monitor_dashboard.poller import PollerConfig, RoomTelemetryPoller
from room_monitor_dashboard.render import format_history, format_status_cards


def setup_logging(config) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    return None


def attach_terminal_view(poller: RoomTelemetryPoller, out: TextIO = sys.stdout) -> None:
    """Print every accepted slot update."""

    def on_history(readings) -> None:
        print(format_history(poller.selection, readings), file=out, flush=True)

    def on_status(statuses) -> None:
        print(format_status_cards(statuses), file=out, flush=True)

    poller.state.history.subscribe(on_history)
    poller.state.status.subscribe(on_status)


def handle_command(poller: RoomTelemetryPoller, line: str) -> bool:
    """Apply one stdin command. Returns False when the user asked to quit."""
    log = logging.getLogger(__name__)
    parts = line.split()
    if not parts:
        return True
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("quit", "exit"):
        return False
    try:
        if cmd == "room" and len(args) == 1:
            poller.select(room=args[0])
        elif cmd == "date" and len(args) == 1:
            poller.select(day=date.fromisoformat(args[0]))
        else:
            log.warning(f"Unknown command: {line.strip()!r}")
    except (InvalidSelection, ValueError) as e:
        log.warning(f"Selection rejected: {e}")
    return True


def positive_float(value: str) -> float:
    interval = float(value)
    if interval <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return interval


def stop_dashboard(poller: RoomTelemetryPoller, client: ReadingsApiClient) -> None:
    """Unmount the poller, waiting for its loop only if it was ever started."""
    poller.stop()
    if poller.is_alive():
        poller.join()
    client.close()


def main(argv: Optional[list] = None) -> None:
    """Main entry point for room_monitor_dashboard."""
    parser = argparse.ArgumentParser(description="Room Environment Monitor")
    parser.add_argument(
        "--environment",
        choices=["production", "development", "testing"],
        default="development",
        help="Environment to run in",
    )
    parser.add_argument("--room", help="Initially selected room (default: first room)")
    parser.add_argument(
        "--date", type=date.fromisoformat, help="Initially selected day, yyyy-mm-dd (default: today)"
    )
    parser.add_argument("--base-url", help="Readings API base URL (overrides config)")
    parser.add_argument(
        "--interval", type=positive_float, help="Poll interval in seconds (overrides config)"
    )

    args = parser.parse_args(argv)

    # Set environment variable for config
    os.environ["ROOM_MONITOR_ENV"] = args.environment

    # Get configuration
    config = get_settings()

    # Set up logging
    setup_logging(config)
    log = logging.getLogger(__name__)

    poller_config = PollerConfig.from_settings(config)
    if args.base_url:
        poller_config.base_url = args.base_url
    if args.interval is not None:
        poller_config.interval_s = args.interval

    selection = Selection(
        room=args.room or poller_config.rooms[0],
        date=args.date or poller_config.today(),
    )

    log.info("Starting room monitor dashboard...")
    log.info(f"Environment: {args.environment}")
    log.info(f"API: {poller_config.base_url}")
    log.info(f"Interval: {poller_config.interval_s}s")

    client = ReadingsApiClient(poller_config.base_url, timeout=poller_config.request_timeout_s)
    try:
        poller = RoomTelemetryPoller(client, poller_config, selection=selection)
    except InvalidSelection as e:
        parser.error(str(e))
    attach_terminal_view(poller)

    def shutdown(signum=None, frame=None):
        log.info("Received shutdown signal, stopping dashboard...")
        stop_dashboard(poller, client)
        sys.exit(0)

    poller.start()
    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    for line in sys.stdin:
        if not handle_command(poller, line):
            shutdown()

    # stdin closed; keep polling until a signal arrives
    signal.pause()


if __name__ == "__main__":
    main()
