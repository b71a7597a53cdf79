"""Conversion helpers for cell timestamps.

Cell timestamps are plain integers (microseconds since the Unix epoch). The
helpers here let callers hand in datetimes, dates or ISO-8601 text instead,
backed by python-dateutil's ISO parser.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Literal, TypeAlias

from dateutil.parser import isoparse

Edge: TypeAlias = Literal["start", "end", "value"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)


def to_micros(value: Any, edge: Edge = "start") -> int:
    """Convert a timestamp-like value to integer microseconds since the epoch.

    Accepts:
    - int: Passed through as-is, without any range check
    - datetime: Must be timezone-aware, converted exactly (no float rounding)
    - date: Last microsecond of the day for edge="end", otherwise start of
      the day, in UTC
    - str: ISO-8601 text with a UTC offset, e.g. "2025-01-01T09:00:00+00:00"

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
        ValueError: If text cannot be parsed as ISO-8601
    """
    # bool is an int subclass but never a meaningful timestamp
    if isinstance(value, bool):
        raise TypeError(
            f"Timestamp {edge} must be int, datetime, date, or ISO-8601 text.\n"
            f"Got bool: {value!r}"
        )
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except ValueError as e:
            raise ValueError(
                f"Timestamp {edge} is not valid ISO-8601 text: {value!r}\n"
                f"Example: '2025-01-01T09:00:00+00:00' or '2025-01-01T09:00:00Z'"
            ) from e
        if parsed.tzinfo is None:
            raise TypeError(
                f"Timestamp {edge} text must carry a UTC offset.\n"
                f"Got: {value!r}\n"
                f"Hint: append 'Z' or an offset such as '+00:00'"
            )
        return to_micros(parsed, edge)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Timestamp {edge} must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return (value - _EPOCH) // _ONE_MICROSECOND
    if isinstance(value, date):
        moment = time.max if edge == "end" else time.min
        return to_micros(datetime.combine(value, moment, tzinfo=timezone.utc), edge)
    raise TypeError(
        f"Timestamp {edge} must be int, datetime, date, or ISO-8601 text.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  TimestampRange.create(1_700_000_000_000_000, 1_700_000_060_000_000)\n"
        f"  TimestampRange.create(datetime(2025, 1, 1, tzinfo=timezone.utc), ...)\n"
        f"  TimestampRange.create(date(2025, 1, 1), date(2025, 2, 1))"
    )


def from_micros(value: int) -> datetime:
    """Return the UTC datetime for a microsecond timestamp."""
    return _EPOCH + timedelta(microseconds=value)
