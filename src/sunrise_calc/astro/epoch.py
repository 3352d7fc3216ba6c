"""Conversions between civil dates and days since the J2000.0 epoch."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from math import floor, fmod

from sunrise_calc.time.days import midnight_utc
from sunrise_calc.time.zones import to_utc

J2000 = datetime(2000, 1, 1, tzinfo=UTC)

# Years for which the orbital element approximations stay within about a minute.
MIN_YEAR = 1801
MAX_YEAR = 2099

_SECONDS_PER_DAY = 86_400.0


def is_accurate_year(year: int) -> bool:
    """Return True if calculations for year fall inside the accurate range."""
    return MIN_YEAR <= year <= MAX_YEAR


def days_since_epoch(moment: date | datetime) -> float:
    """Return fractional days from J2000.0 to moment, negative before the epoch.

    A bare date is taken as 00:00 UTC of that day; naive datetimes are UTC.
    """
    if isinstance(moment, datetime):
        instant = to_utc(moment)
    else:
        instant = midnight_utc(moment)
    return (instant - J2000).total_seconds() / _SECONDS_PER_DAY


def _midday_offset_days(longitude: float) -> float:
    return 0.5 - fmod(longitude, 360.0) / 360.0


def local_midday_epoch_day(day: date, longitude: float) -> float:
    """Return the epoch day of nominal local midday at longitude on day."""
    return days_since_epoch(day) + _midday_offset_days(longitude)


def local_midday_utc(day: date, longitude: float) -> datetime:
    """Return the UTC instant of nominal local midday at longitude on day."""
    return midnight_utc(day) + timedelta(days=_midday_offset_days(longitude))


def epoch_day_to_datetime(epoch_day: float) -> datetime:
    """Convert an epoch day back to a UTC datetime."""
    return J2000 + timedelta(days=epoch_day)


def utc_midday(day: date) -> datetime:
    """Return 12:00 UTC on day, ignoring longitude."""
    return midnight_utc(day) + timedelta(hours=12)


def utc_midday_epoch_day(epoch_day: float) -> float:
    """Return the epoch day of 12:00 UTC on the day containing epoch_day."""
    return floor(epoch_day) + 0.5
