"""
Core Utilities.

Shared utility functions used across the backend.
All modules should import utilities from this module.
"""

from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application should be timezone-naive
    and assumed to be UTC. This ensures consistent behavior across
    the codebase and simplifies database storage.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_now_after(previous: datetime) -> datetime:
    """
    Return the current UTC time, but never earlier than one microsecond
    after ``previous``.

    Two writes within the same clock tick would otherwise share a
    timestamp; callers that need a strictly increasing value use this.
    """
    return max(utc_now(), previous + _TICK)
