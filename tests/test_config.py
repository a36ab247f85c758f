"""Tests for process configuration and the server entry point."""

import pytest

from projectinfo import server
from projectinfo.config import Settings, load_settings
from projectinfo.errors import ConfigurationError


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.delenv("EXPECTED_HOST", raising=False)
    settings = Settings(PORT=8080)
    assert settings.GITHUB_API_URL == "https://api.github.com"
    assert settings.EXPECTED_HOST == "github.com"
    assert settings.REJECT_STATUS_CODE == 200
    assert settings.UPSTREAM_TIMEOUT > 0


def test_load_settings_reads_port(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("HOST", "127.0.0.1")
    settings = load_settings()
    assert settings.PORT == 5000
    assert settings.listen_address == "127.0.0.1:5000"


def test_missing_port_is_fatal(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    with pytest.raises(ConfigurationError, match="PORT not set"):
        load_settings()


def test_invalid_port_is_fatal(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ConfigurationError):
        load_settings()


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings().LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_fatal(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        load_settings()


def test_main_exits_on_unknown_log_level(monkeypatch):
    monkeypatch.setenv("PORT", "5000")
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    started = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: started.append(kwargs))

    with pytest.raises(SystemExit) as excinfo:
        server.main()

    assert excinfo.value.code == 1
    assert started == []


def test_main_exits_before_serving_without_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    started = []
    monkeypatch.setattr(server.uvicorn, "run", lambda *args, **kwargs: started.append(kwargs))

    with pytest.raises(SystemExit) as excinfo:
        server.main()

    assert excinfo.value.code == 1
    assert started == []


def test_main_runs_uvicorn_on_port(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    started = []
    monkeypatch.setattr(server.uvicorn, "run", lambda app, **kwargs: started.append(kwargs))

    server.main()

    assert started == [{"host": "0.0.0.0", "port": 9090, "log_level": "warning"}]
