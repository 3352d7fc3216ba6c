"""Daylight tables over a range of days for one location."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Any

from sunrise_calc.cache import LRUCache
from sunrise_calc.calculator import SunriseCalculator
from sunrise_calc.contracts import Horizon, SolarEphemeris, SunEvents
from sunrise_calc.time.days import iter_days


@dataclass(frozen=True)
class DaylightRow:
    """Sun events for one calendar day."""

    day: date
    events: SunEvents

    def to_dict(self) -> dict[str, Any]:
        return {"day": self.day.isoformat(), **self.events.to_dict()}


def build_daylight_table(
    latitude: float,
    longitude: float,
    start: date,
    end: date,
    horizon: Horizon = Horizon.NORMAL,
    tz: str | tzinfo | None = None,
    max_days: int | None = 366,
    ephemeris_cache: LRUCache[float, SolarEphemeris] | None = None,
) -> list[DaylightRow]:
    """Compute sun events for each day in the inclusive range [start, end]."""
    if end < start:
        raise ValueError("end must be on or after start")
    day_count = (end - start).days + 1
    if max_days is not None and day_count > max_days:
        raise ValueError(f"date range of {day_count} days exceeds max_days={max_days}")

    calc = SunriseCalculator(latitude, longitude, start, ephemeris_cache=ephemeris_cache)
    rows: list[DaylightRow] = []
    for day in iter_days(start, end):
        calc = calc.with_day(day)
        rows.append(DaylightRow(day=day, events=calc.sun_events(horizon, tz)))
    return rows
