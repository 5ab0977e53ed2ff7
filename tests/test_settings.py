import logging
import os

from htmx_todos.logging_setup import setup_logging
from htmx_todos.settings import DEFAULT_STATIC_DIR, get_settings


def test_defaults(monkeypatch):
    for name in ["HOST", "PORT", "STATIC_DIR", "LOCK_TIMEOUT", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.static_dir == DEFAULT_STATIC_DIR
    assert os.path.isfile(os.path.join(DEFAULT_STATIC_DIR, "global.css"))
    assert settings.lock_timeout == 5.0
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("STATIC_DIR", "/srv/assets")
    monkeypatch.setenv("LOCK_TIMEOUT", "0.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.static_dir == "/srv/assets"
    assert settings.lock_timeout == 0.5
    assert settings.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("LOCK_TIMEOUT", "-1")
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    settings = get_settings()
    assert settings.port == 8080
    assert settings.lock_timeout == 5.0
    assert settings.log_level == "INFO"


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("DEBUG")
        setup_logging("WARNING")
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
