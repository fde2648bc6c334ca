"""Timestamp utilities for UTC handling.

Every timestamp stored by the engine is timezone-aware UTC. Persistence keeps
them as ISO 8601 strings with a trailing ``Z`` so lexical ordering in SQL
matches chronological ordering.
"""

from datetime import datetime, timezone
from typing import Optional

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert a datetime to timezone-aware UTC.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to convert (may be None)

    Returns:
        Timezone-aware UTC datetime, or None if input was None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime as an ISO 8601 string for storage."""
    if dt is None:
        return None
    return ensure_utc(dt).strftime(ISO_FORMAT)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored ISO 8601 string back into a UTC datetime.

    Accepts values with or without microseconds and with or without the
    trailing ``Z``.
    """
    if not value:
        return None

    value = value.rstrip("Z")
    try:
        dt = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%f")
    except ValueError:
        dt = datetime.strptime(value, "%Y-%m-%dT%H:%M:%S")

    return dt.replace(tzinfo=timezone.utc)
