"""Timestamp formatting."""

from __future__ import annotations

from datetime import datetime, timezone


def formatted_timestamp(time: datetime) -> str:
    """Format a time as an RFC 3339 timestamp in UTC.

    Fractional seconds are shown only when present, as milliseconds where
    that is exact and microseconds otherwise.
    """
    if time.tzinfo is None or time.utcoffset() is None:
        raise ValueError("timestamp must be timezone-aware")
    utc = time.astimezone(timezone.utc)
    if utc.microsecond == 0:
        timespec = "seconds"
    elif utc.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return utc.isoformat(timespec=timespec)