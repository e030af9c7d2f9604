"""Utility functions for working with dates and times."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Final

from ..errors import ValidationError

__all__ = [
    "get_current_timestamp",
    "to_canonical_string",
    "normalize_date",
    "normalize_time",
]

# Fallback layouts tried after ISO 8601; naive results are read as UTC.
_DATE_FORMATS: Final[tuple[str, ...]] = (
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

_TIME: Final[re.Pattern[str]] = re.compile(
    r"^(\d{1,2})(?::(\d{1,2}))?\s*(am|pm)?$", re.IGNORECASE | re.ASCII
)


def get_current_timestamp() -> datetime:
    """Return the current UTC datetime with micro-second precision.

    This object can be stored directly in MongoDB where it will be written as
    a BSON Date.
    """
    return datetime.now(tz=timezone.utc)


def to_canonical_string(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def _parse_date(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError):
        return None


def normalize_date(value: str) -> str:
    """Parse a calendar date/time and return its canonical UTC string.

    Canonical strings parse back to themselves, so normalizing twice is a
    no-op.
    """
    parsed = _parse_date(value.strip()) if isinstance(value, str) else None
    if parsed is None:
        raise ValidationError(f"Invalid date format: {value!r}", field="date")
    try:
        return to_canonical_string(parsed)
    except OverflowError:
        raise ValidationError(f"Date out of range: {value!r}", field="date") from None


def normalize_time(value: str) -> str:
    """Normalize a clock time to 24-hour ``HH:MM``.

    Accepts ``H``/``HH`` with optional ``:M``/``:MM`` and an optional am/pm
    marker, e.g. ``"9"`` -> ``"09:00"``, ``"2:5pm"`` -> ``"14:05"``,
    ``"12am"`` -> ``"00:00"``.
    """
    match = _TIME.match((value or "").strip())
    if match is None:
        raise ValidationError(f"Invalid time format: {value!r}", field="time")

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    marker = match.group(3)
    if marker:
        is_pm = marker.lower() == "pm"
        if hours == 12:
            hours = 12 if is_pm else 0
        elif is_pm:
            hours += 12

    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise ValidationError(f"Invalid time value: {value!r}", field="time")
    return f"{hours:02d}:{minutes:02d}"
