from room_monitor_core.config.environments import Environment, get_settings


def test_development_is_the_default(monkeypatch):
    monkeypatch.delenv("ROOM_MONITOR_ENV", raising=False)
    settings = get_settings()
    assert settings.ENVIRONMENT == Environment.DEVELOPMENT
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.POLL_INTERVAL_SEC == 5.0
    assert settings.API_BASE_URL == "http://localhost:8000"


def test_testing_environment_overrides(monkeypatch):
    monkeypatch.setenv("ROOM_MONITOR_ENV", "testing")
    settings = get_settings()
    assert settings.ENVIRONMENT == Environment.TESTING
    assert settings.API_PORT == 8001
    assert settings.POLL_INTERVAL_SEC == 1.0


def test_production_environment_logs_warnings_only(monkeypatch):
    monkeypatch.setenv("ROOM_MONITOR_ENV", "PRODUCTION")
    settings = get_settings()
    assert settings.ENVIRONMENT == Environment.PRODUCTION
    assert settings.LOG_LEVEL == "WARNING"


def test_environment_variables_override_defaults(monkeypatch):
    monkeypatch.setenv("ROOM_MONITOR_ENV", "production")
    monkeypatch.setenv("ROOM_COUNT", "4")
    monkeypatch.setenv("API_BASE_URL", "http://monitor.local:9000")
    settings = get_settings()
    assert settings.ROOM_COUNT == 4
    assert settings.API_BASE_URL == "http://monitor.local:9000"
