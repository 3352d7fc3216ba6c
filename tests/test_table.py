"""Tests for daylight table generation."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from sunrise_calc.calculator import SunriseCalculator
from sunrise_calc.contracts import DiurnalResult, Horizon
from sunrise_calc.table import build_daylight_table


def test_table_covers_inclusive_range() -> None:
    """One row per day, both endpoints included."""
    rows = build_daylight_table(51.4769, 0.0, date(2021, 6, 19), date(2021, 6, 23))

    assert [row.day for row in rows] == [date(2021, 6, 19) + timedelta(days=i) for i in range(5)]
    assert all(row.events.result is DiurnalResult.NORMAL_DAY for row in rows)


def test_table_rows_match_calculator() -> None:
    """Each row equals a direct calculator query for that day."""
    rows = build_daylight_table(
        -33.8688, 151.2093, date(2021, 3, 1), date(2021, 3, 3), horizon=Horizon.CIVIL, tz="Australia/Sydney"
    )

    direct = SunriseCalculator(-33.8688, 151.2093, date(2021, 3, 2)).sun_events(
        Horizon.CIVIL, "Australia/Sydney"
    )
    assert rows[1].events == direct
    assert rows[1].to_dict()["day"] == "2021-03-02"


def test_table_day_length_decreases_after_summer_solstice() -> None:
    """Northern day length shrinks through July."""
    rows = build_daylight_table(48.85, 2.35, date(2021, 7, 1), date(2021, 7, 31))
    lengths = [row.events.day_length for row in rows]

    assert lengths == sorted(lengths, reverse=True)


def test_table_rejects_invalid_ranges() -> None:
    """Reversed ranges and ranges above the cap are rejected."""
    with pytest.raises(ValueError, match="on or after"):
        build_daylight_table(0.0, 0.0, date(2021, 1, 2), date(2021, 1, 1))

    with pytest.raises(ValueError, match="exceeds max_days"):
        build_daylight_table(0.0, 0.0, date(2021, 1, 1), date(2021, 1, 10), max_days=5)
