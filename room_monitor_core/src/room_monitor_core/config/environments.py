from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings


class Environment(str, Enum):
    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TESTING = "testing"


class Settings(BaseSettings):
    """Configuration settings for the room monitor."""

    # Environment
    ENVIRONMENT: Environment = Environment.DEVELOPMENT

    # Readings API consumed by the dashboard
    API_BASE_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT_SEC: Optional[float] = 10.0

    # Development API server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # Dashboard
    POLL_INTERVAL_SEC: float = 5.0
    ROOM_PREFIX: str = "10"
    ROOM_COUNT: int = 10
    HISTORY_WINDOW_DAYS: int = 7

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


def get_settings() -> Settings:
    """Get settings based on environment."""
    import os

    # Set environment-specific defaults
    env = os.getenv("ROOM_MONITOR_ENV", "development").lower()

    if env == "production":
        return Settings(ENVIRONMENT=Environment.PRODUCTION, LOG_LEVEL="WARNING")
    elif env == "testing":
        return Settings(
            ENVIRONMENT=Environment.TESTING,
            API_BASE_URL="http://localhost:8001",
            API_PORT=8001,
            POLL_INTERVAL_SEC=1.0,
            REQUEST_TIMEOUT_SEC=2.0,
            LOG_LEVEL="DEBUG",
        )
    else:
        return Settings(ENVIRONMENT=Environment.DEVELOPMENT, LOG_LEVEL="DEBUG")
