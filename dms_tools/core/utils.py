"""Shared utilities for dms-tools."""

from __future__ import annotations

import time
from datetime import datetime


def current_time_millis() -> int:
    """Get the current wall-clock time.

    Returns:
        Milliseconds since midnight, January 1, 1970 UTC
    """
    return time.time_ns() // 1_000_000


def format_datetime(millis: int, include_date: bool = True) -> str:
    """Format an epoch millisecond timestamp in local time.

    Args:
        millis: Milliseconds since midnight, January 1, 1970 UTC
        include_date: Prefix the time with the date if True

    Returns:
        ``yyyy-mm-dd HH:MM:SS`` or ``HH:MM:SS``, or the raw millisecond
        value if it is outside the range the platform can represent

    Example:
        >>> format_datetime(0, include_date=False)  # doctest: +SKIP
        '01:00:00'
    """
    try:
        moment = datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        return f"{millis} ms"
    if include_date:
        return moment.strftime("%Y-%m-%d %H:%M:%S")
    return moment.strftime("%H:%M:%S")


def format_datetime_auto(millis: int) -> str:
    """Format a timestamp, omitting the date when it is today.

    Args:
        millis: Milliseconds since midnight, January 1, 1970 UTC

    Returns:
        Formatted local time string
    """
    try:
        moment = datetime.fromtimestamp(millis / 1000)
    except (OverflowError, OSError, ValueError):
        return f"{millis} ms"
    return format_datetime(millis, include_date=moment.date() != datetime.now().date())
