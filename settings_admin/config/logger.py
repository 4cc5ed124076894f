"""Centralized logger for the settings admin core."""

from datetime import datetime
from typing import Any

from rich.console import Console
from rich.markup import escape

from .env import get_log_level

console = Console(stderr=True)

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
COLORS = {"debug": "dim", "info": "cyan", "warn": "yellow", "error": "red bold"}

_current_level = LEVELS.get(get_log_level(), 20)


def set_level(level: str) -> None:
    """Overrides the LOG_LEVEL read at import time."""
    global _current_level
    if level.lower() not in LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    _current_level = LEVELS[level.lower()]


def _should_log(level: str) -> bool:
    return LEVELS.get(level, 0) >= _current_level


def _format_value(value: Any, max_length: int = 120) -> str:
    if value is None:
        return "None"
    s = str(value)
    if len(s) > max_length:
        return s[:max_length] + "..."
    return s


def log(level: str, context: str, message: str, **data):
    if not _should_log(level):
        return

    timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    color = COLORS.get(level, "white")
    level_str = level.upper().ljust(5)

    data_str = ""
    if data:
        parts = [f"{escape(str(k))}={escape(_format_value(v))}" for k, v in data.items()]
        data_str = " | " + ", ".join(parts)

    console.print(
        f"[dim]{timestamp}[/dim] [{color}]{level_str}[/{color}] "
        f"[blue]{escape('[' + context + ']')}[/blue] {escape(message)}{data_str}",
        markup=True,
        highlight=False,
    )


def debug(context: str, message: str, **data):
    log("debug", context, message, **data)


def info(context: str, message: str, **data):
    log("info", context, message, **data)


def warn(context: str, message: str, **data):
    log("warn", context, message, **data)


def error(context: str, message: str, **data):
    log("error", context, message, **data)
