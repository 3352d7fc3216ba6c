"""Tests for UTC normalization, zone presentation and day iteration."""

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from sunrise_calc.time.days import as_calendar_day, iter_days, midnight_utc
from sunrise_calc.time.zones import resolve_zone, to_utc, to_zone


def test_to_utc_with_naive_datetime() -> None:
    """Naive datetimes should be treated as UTC."""
    dt = datetime(2024, 5, 12, 9, 37, 45)
    assert to_utc(dt) == datetime(2024, 5, 12, 9, 37, 45, tzinfo=UTC)


def test_to_utc_with_non_utc_timezone() -> None:
    """Non-UTC aware datetimes should normalize to UTC."""
    kst = timezone(timedelta(hours=9))
    dt = datetime(2024, 5, 13, 3, 5, 30, tzinfo=kst)
    assert to_utc(dt) == datetime(2024, 5, 12, 18, 5, 30, tzinfo=UTC)
    assert to_utc(dt).tzinfo is UTC


def test_to_zone_keeps_instant() -> None:
    """Presentation conversion changes only the offset."""
    instant = datetime(2021, 1, 15, 12, 0, tzinfo=UTC)
    local = to_zone(instant, "Asia/Seoul")

    assert local == instant
    assert local.hour == 21
    assert to_zone(instant).tzinfo is UTC


def test_resolve_zone_variants() -> None:
    """Zone names, tzinfo objects and None all resolve."""
    fixed = timezone(timedelta(hours=-3))
    assert resolve_zone(None) is UTC
    assert resolve_zone("utc") is UTC
    assert resolve_zone(fixed) is fixed
    assert resolve_zone("Europe/Paris").utcoffset(datetime(2021, 7, 1)) == timedelta(hours=2)

    with pytest.raises(ValueError, match="unknown time zone"):
        resolve_zone("Not/AZone")


def test_as_calendar_day_drops_time() -> None:
    """Datetimes collapse to their calendar date; dates pass through."""
    assert as_calendar_day(datetime(2021, 7, 9, 23, 59)) == date(2021, 7, 9)
    assert as_calendar_day(date(2021, 7, 9)) == date(2021, 7, 9)
    assert isinstance(as_calendar_day(None), date)


def test_midnight_utc() -> None:
    """Midnight is 00:00 UTC on the day."""
    assert midnight_utc(date(2021, 7, 9)) == datetime(2021, 7, 9, tzinfo=UTC)


def test_iter_days_inclusive() -> None:
    """Iteration includes both endpoints and crosses month boundaries."""
    days = list(iter_days(date(2021, 2, 27), date(2021, 3, 2)))

    assert days == [date(2021, 2, 27), date(2021, 2, 28), date(2021, 3, 1), date(2021, 3, 2)]
    assert list(iter_days(date(2021, 1, 1), date(2021, 1, 1))) == [date(2021, 1, 1)]

    with pytest.raises(ValueError):
        list(iter_days(date(2021, 1, 2), date(2021, 1, 1)))
