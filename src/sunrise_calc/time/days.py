"""Calendar day coercion and iteration."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, date, datetime, timedelta


def as_calendar_day(value: date | datetime | None) -> date:
    """Return the calendar date of value; time of day is ignored, None means today in UTC."""
    if value is None:
        return datetime.now(UTC).date()
    if isinstance(value, datetime):
        return value.date()
    return value


def midnight_utc(day: date) -> datetime:
    """Return 00:00 UTC on the given calendar day."""
    return datetime(day.year, day.month, day.day, tzinfo=UTC)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield each calendar day in [start, end]."""
    if end < start:
        raise ValueError("end must be on or after start")
    current = start
    step = timedelta(days=1)
    while current <= end:
        yield current
        current = current + step
