"""Environment variables configuration."""

import os
from typing import Optional

from ..constants.config_keys import ConfigDefaults, ConfigKeys


def get_api_url() -> str:
    """Returns the settings API base URL without a trailing slash."""
    return os.getenv(ConfigKeys.API_URL, ConfigDefaults.API_URL).rstrip("/")


def get_api_token() -> Optional[str]:
    """Returns the bearer token for the settings API, if configured."""
    token = os.getenv(ConfigKeys.API_TOKEN, "").strip()
    return token or None


def get_api_timeout() -> Optional[float]:
    """Returns the request timeout in seconds, or None when disabled.

    Raises:
        ValueError: If the configured value is not a number.
    """
    raw = os.getenv(ConfigKeys.API_TIMEOUT, "").strip() or ConfigDefaults.API_TIMEOUT
    try:
        seconds = float(raw)
    except ValueError:
        raise ValueError(f"{ConfigKeys.API_TIMEOUT} must be a number, got {raw!r}") from None
    return seconds if seconds > 0 else None


def get_log_level() -> str:
    """Returns the configured log level name."""
    return os.getenv(ConfigKeys.LOG_LEVEL, ConfigDefaults.LOG_LEVEL).lower()
