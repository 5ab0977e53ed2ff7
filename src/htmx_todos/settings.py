from __future__ import annotations

import os
from dataclasses import dataclass

# Assets shipped inside the package; htmx.min.js, tailwind.min.js and
# favicon.png are vendored into this directory (or into STATIC_DIR) at deploy time.
DEFAULT_STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: bind address. Default '127.0.0.1'
    - PORT: listening port. Default 8080
    - STATIC_DIR: directory served under /assets. Default: the package's static/ directory
    - LOCK_TIMEOUT: seconds to wait for the task store lock. Default 5.0
    - LOG_LEVEL: console log level name. Default 'INFO'
    """

    host: str
    port: int
    static_dir: str
    lock_timeout: float
    log_level: str


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = 8080) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_timeout(value: str, default: float = 5.0) -> float:
    try:
        timeout = float(value.strip())
    except ValueError:
        return default
    # Non-positive values fall back to the default
    if timeout <= 0:
        return default
    return timeout


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        log_level = "INFO"

    return Settings(
        host=_get_env("HOST", "127.0.0.1").strip(),
        port=_parse_port(_get_env("PORT", "8080")),
        static_dir=_get_env("STATIC_DIR", DEFAULT_STATIC_DIR).strip(),
        lock_timeout=_parse_timeout(_get_env("LOCK_TIMEOUT", "5.0")),
        log_level=log_level,
    )
