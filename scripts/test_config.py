import logging

import pytest

from app.core.config import LASTFM_URL, MUSIXMATCH_URL, SERPAPI_URL, Settings
from app.core.logging_config import setup_logging

ENV_VARS = [
    "LASTFM_API_KEY", "LASTFM_BASE_URL",
    "MUSIXMATCH_API_KEY", "MUSIXMATCH_BASE_URL",
    "SERPAPI_API_KEY", "SERPAPI_BASE_URL",
    "UPSTREAM_TIMEOUT", "REQUEST_TIMEOUT",
    "TOPTRACK_HOST", "TOPTRACK_PORT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = Settings.from_env()

    assert settings.lastfm.base_url == LASTFM_URL
    assert settings.musixmatch.base_url == MUSIXMATCH_URL
    assert settings.serpapi.base_url == SERPAPI_URL
    assert all(service.api_key == "" for service in settings.services)
    assert all(service.timeout == 10.0 for service in settings.services)
    assert settings.request_timeout == 30.0
    assert settings.port == 8099
    assert settings.log_level == "INFO"


def test_one_key_per_service(monkeypatch):
    monkeypatch.setenv("LASTFM_API_KEY", "a")
    monkeypatch.setenv("MUSIXMATCH_API_KEY", "b")
    monkeypatch.setenv("SERPAPI_API_KEY", "c")

    settings = Settings.from_env()

    assert settings.lastfm.api_key == "a"
    assert settings.musixmatch.api_key == "b"
    assert settings.serpapi.api_key == "c"


def test_overrides(monkeypatch):
    monkeypatch.setenv("LASTFM_BASE_URL", "http://charts.local/")
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "2.5")
    monkeypatch.setenv("REQUEST_TIMEOUT", "7")
    monkeypatch.setenv("TOPTRACK_PORT", "9000")

    settings = Settings.from_env()

    assert settings.lastfm.base_url == "http://charts.local/"
    assert settings.serpapi.timeout == 2.5
    assert settings.request_timeout == 7.0
    assert settings.port == 9000


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("UPSTREAM_TIMEOUT", "soon")

    assert Settings.from_env().lastfm.timeout == 10.0


def test_warn_missing_keys(monkeypatch, caplog):
    monkeypatch.setenv("MUSIXMATCH_API_KEY", "b")

    with caplog.at_level(logging.WARNING, logger="app.core.config"):
        Settings.from_env().warn_missing_keys()

    assert "Last.fm" in caplog.text
    assert "SerpApi" in caplog.text
    assert "Musixmatch" not in caplog.text


def test_invalid_port_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("TOPTRACK_PORT", "eighty")

    with caplog.at_level(logging.WARNING, logger="app.core.config"):
        settings = Settings.from_env()

    assert settings.port == 8099
    assert "TOPTRACK_PORT" in caplog.text


def test_setup_logging_configures_root_once(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)

    setup_logging("debug")
    setup_logging("info")

    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
