"""UTC time helpers."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(UTC)


def utc_timestamp() -> int:
    """Return the current Unix timestamp in whole seconds."""
    return int(utc_now().timestamp())
