"""Environment-backed settings for the Kilo Cloud tool."""

import os
from pathlib import Path
from typing import Any

from shared.rpc import ClientSettings, ConfigurationError

DEFAULT_TRPC_BASE_URL = "https://app.kilo.ai/api/trpc"
DEFAULT_REST_BASE_URL = "https://app.kilo.ai/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_AUDIT_DB_PATH = "/tmp/kilo-cloud/audit.db"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpret a bool or a string flag such as "true"/"false"."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    return default


def _timeout() -> float:
    raw = os.getenv("KILO_API_TIMEOUT")
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"KILO_API_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"KILO_API_TIMEOUT must be positive, got {raw!r}")
    return timeout


def load_settings() -> ClientSettings:
    """Read settings from the environment at call time."""
    return ClientSettings(
        trpc_base_url=os.getenv("KILO_TRPC_BASE_URL", DEFAULT_TRPC_BASE_URL),
        rest_base_url=os.getenv("KILO_REST_BASE_URL", DEFAULT_REST_BASE_URL),
        api_key=os.getenv("KILO_API_KEY") or None,
        api_key_env="KILO_API_KEY",
        timeout=_timeout(),
    )


def audit_enabled(default: bool) -> bool:
    return parse_bool(os.getenv("KILO_AUDIT_ENABLED"), default)


def audit_db_path() -> Path:
    """Get audit database path, allowing override for tests."""
    return Path(os.getenv("KILO_AUDIT_DB_PATH", DEFAULT_AUDIT_DB_PATH))
