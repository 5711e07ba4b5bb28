"""Wayback timestamp helpers."""

from __future__ import annotations

_WB_TIMESTAMP_LENGTH = 14


def format_timestamp(timestamp: str) -> str:
    """Format a ``YYYYMMDDhhmmss`` CDX timestamp as ``YYYY-MM-DD hh:mm:ss``.

    The value is sliced positionally; no range checking is done, so a
    month of ``13`` passes through as-is.  Any string that is not exactly
    14 characters long is returned unchanged.

    Args:
        timestamp: Raw CDX ``timestamp`` field value.

    Returns:
        Human-readable date-time string, or *timestamp* itself.
    """
    if len(timestamp) != _WB_TIMESTAMP_LENGTH:
        return timestamp

    year = timestamp[0:4]
    month = timestamp[4:6]
    day = timestamp[6:8]
    hour = timestamp[8:10]
    minute = timestamp[10:12]
    second = timestamp[12:14]

    return f"{year}-{month}-{day} {hour}:{minute}:{second}"
