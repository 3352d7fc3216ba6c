"""Tests for J2000 epoch-day conversions."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from sunrise_calc.astro.epoch import (
    J2000,
    days_since_epoch,
    epoch_day_to_datetime,
    is_accurate_year,
    local_midday_epoch_day,
    local_midday_utc,
    utc_midday,
    utc_midday_epoch_day,
)


def test_days_since_epoch_signs() -> None:
    """Epoch days are zero at J2000, positive after and negative before."""
    assert days_since_epoch(date(2000, 1, 1)) == 0.0
    assert days_since_epoch(datetime(2000, 1, 2, 12, 0, tzinfo=UTC)) == 1.5
    assert days_since_epoch(date(1999, 12, 31)) == -1.0


def test_days_since_epoch_naive_is_utc() -> None:
    """Naive datetimes are treated as UTC, aware ones converted first."""
    naive = datetime(2000, 1, 1, 6, 0)
    aware = datetime(2000, 1, 1, 15, 0, tzinfo=timezone(timedelta(hours=9)))

    assert days_since_epoch(naive) == 0.25
    assert days_since_epoch(aware) == 0.25


@pytest.mark.parametrize(
    ("longitude", "expected"),
    [(0.0, 0.5), (90.0, 0.25), (-90.0, 0.75), (180.0, 0.0)],
)
def test_local_midday_epoch_day_offsets_by_longitude(longitude: float, expected: float) -> None:
    """Local midday moves earlier in UTC for eastern longitudes."""
    assert local_midday_epoch_day(date(2000, 1, 1), longitude) == pytest.approx(expected)


def test_local_midday_utc_matches_epoch_day() -> None:
    """The UTC instant of local midday agrees with its epoch day."""
    day = date(2021, 7, 9)
    instant = local_midday_utc(day, -90.0)

    assert instant == datetime(2021, 7, 9, 18, 0, tzinfo=UTC)
    assert days_since_epoch(instant) == pytest.approx(local_midday_epoch_day(day, -90.0))


def test_epoch_day_to_datetime_inverts_days_since_epoch() -> None:
    """Converting an epoch day back yields the original instant."""
    instant = datetime(2021, 7, 9, 16, 56, tzinfo=UTC)
    assert epoch_day_to_datetime(days_since_epoch(instant)) == instant
    assert epoch_day_to_datetime(0.0) == J2000


def test_utc_midday_helpers() -> None:
    """UTC midday ignores longitude."""
    assert utc_midday(date(2021, 7, 9)) == datetime(2021, 7, 9, 12, 0, tzinfo=UTC)
    assert utc_midday_epoch_day(7860.9) == 7860.5
    assert utc_midday_epoch_day(-0.2) == -0.5


def test_is_accurate_year_bounds() -> None:
    """Accuracy range spans 1801 to 2099 inclusive."""
    assert is_accurate_year(1801)
    assert is_accurate_year(2099)
    assert not is_accurate_year(1800)
    assert not is_accurate_year(2100)
