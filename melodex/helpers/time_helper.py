"""Time utility helpers."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Get the current time as a timezone-aware UTC datetime.

    Returns:
        Current time in UTC
    """
    return datetime.now(UTC)
