"""
Canonical entry point for room_monitor_server package.

Serves the readings API the dashboard polls, backed by simulated data.

Usage:
    room-monitor-api --environment development
    room-monitor-api --port 8001 --reload
"""

import argparse
import logging
import os
from typing import Optional

import uvicorn
from room_monitor_core.config.environments import get_settings


def setup_logging(config) -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    return None


def run_api_server(args: argparse.Namespace) -> None:
    """Run the FastAPI server."""
    config = get_settings()
    setup_logging(config)
    log = logging.getLogger(__name__)

    # Override with command line arguments
    host = args.host or config.API_HOST
    port = args.port or config.API_PORT
    reload = args.reload and args.environment != "production"

    log.info("Starting API server...")
    log.info(f"Environment: {args.environment}")
    log.info(f"Host: {host}")
    log.info(f"Port: {port}")
    log.info(f"Reload: {reload}")
    log.info(f"Rooms: {config.ROOM_COUNT} (prefix {config.ROOM_PREFIX!r})")

    uvicorn.run(
        "room_monitor_server.adapters.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=config.LOG_LEVEL.lower(),
    )
    return None


def main(argv: Optional[list] = None) -> None:
    """Main entry point for the room monitor API."""
    parser = argparse.ArgumentParser(description="Room Monitor API (simulated readings)")
    parser.add_argument(
        "--environment",
        choices=["production", "development", "testing"],
        default="development",
        help="Environment to run in",
    )
    parser.add_argument("--host", help="Host to bind to (overrides config)")
    parser.add_argument("--port", type=int, help="Port to bind to (overrides config)")
    parser.add_argument(
        "--reload", action="store_true", help="Enable auto-reload (development only)"
    )

    args = parser.parse_args(argv)

    # Set environment variable for config
    os.environ["ROOM_MONITOR_ENV"] = args.environment

    run_api_server(args)


if __name__ == "__main__":
    main()
