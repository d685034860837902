"""Conversions from Polygon timestamps to US equity market time."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

MARKET_TIMEZONE = ZoneInfo("America/New_York")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_unix_millis(value: Optional[int]) -> Optional[datetime]:
    """Convert a Unix epoch in milliseconds to an aware datetime in market time."""

    if value is None:
        return None
    return (_EPOCH + timedelta(milliseconds=int(value))).astimezone(MARKET_TIMEZONE)


def from_unix_nanos(value: Optional[int]) -> Optional[datetime]:
    """Convert a Unix epoch in nanoseconds to an aware datetime in market time.

    Python datetimes stop at microseconds, so the last three digits are dropped.
    """

    if value is None:
        return None
    return (_EPOCH + timedelta(microseconds=int(value) // 1000)).astimezone(MARKET_TIMEZONE)


def from_iso_string(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp with offset into market time.

    Returns ``None`` for empty, naive or unparseable values.
    """

    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed.astimezone(MARKET_TIMEZONE)


__all__ = [
    "MARKET_TIMEZONE",
    "from_iso_string",
    "from_unix_millis",
    "from_unix_nanos",
]
