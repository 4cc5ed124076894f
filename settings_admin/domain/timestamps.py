"""Timestamp conversion between API JSON and datetime."""

from datetime import datetime
from typing import Optional, Union


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parses an ISO-8601 timestamp as sent by the API (``Z`` suffix allowed)."""
    if value is None or isinstance(value, datetime):
        return value
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
