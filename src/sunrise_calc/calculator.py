"""Sunrise, sunset and twilight calculator for one location and day."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, tzinfo

from sunrise_calc.astro.diurnal import (
    arc_to_timedelta,
    diurnal_arc,
    horizon_altitude_deg,
    meridian_transit_utc,
)
from sunrise_calc.astro.epoch import MAX_YEAR, MIN_YEAR, is_accurate_year, local_midday_epoch_day
from sunrise_calc.astro.epoch import local_midday_utc as _local_midday_utc
from sunrise_calc.astro.solar import ephemeris_for
from sunrise_calc.cache import LRUCache
from sunrise_calc.contracts import (
    DiurnalResult,
    GeoCoordinate,
    Horizon,
    SolarEphemeris,
    SunEvents,
    validate_latitude,
    wrap_longitude,
)
from sunrise_calc.time.days import as_calendar_day
from sunrise_calc.time.zones import to_zone

_log = logging.getLogger(__name__)

Zone = str | tzinfo | None


@dataclass(frozen=True)
class SunriseCalculator:
    """Immutable calculator bound to a latitude, longitude and calendar day.

    Latitude must lie in [-90, 90]; longitude is wrapped into [-180, 180] and
    must be finite. `day` accepts a date or datetime (time of day is ignored)
    and defaults to today in UTC. All instants are computed in UTC; the
    optional `tz` argument of the query methods only changes presentation.

    Example:
        >>> calc = SunriseCalculator(40.7128, -74.0060, date(2021, 7, 9))
        >>> result, sunrise, sunset = calc.get_rise_and_set()
    """

    latitude: float
    longitude: float
    day: date | None = None
    ephemeris_cache: LRUCache[float, SolarEphemeris] | None = field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", validate_latitude(self.latitude))
        object.__setattr__(self, "longitude", wrap_longitude(self.longitude))
        day = as_calendar_day(self.day)
        object.__setattr__(self, "day", day)
        if not is_accurate_year(day.year):
            _log.warning(
                "year %d is outside %d-%d; sunrise/sunset accuracy is reduced",
                day.year,
                MIN_YEAR,
                MAX_YEAR,
            )

    @classmethod
    def from_coordinate(
        cls, coordinate: GeoCoordinate, day: date | datetime | None = None
    ) -> "SunriseCalculator":
        """Create a calculator for an already validated coordinate."""
        return cls(coordinate.latitude, coordinate.longitude, day)

    @property
    def location(self) -> GeoCoordinate:
        return GeoCoordinate(self.latitude, self.longitude)

    @property
    def epoch_day(self) -> float:
        """Days since J2000.0 at local midday of the calculation day."""
        return local_midday_epoch_day(self.day, self.longitude)

    @property
    def local_midday_utc(self) -> datetime:
        return _local_midday_utc(self.day, self.longitude)

    @property
    def ephemeris(self) -> SolarEphemeris:
        """Solar position for local midday; memoized by epoch day."""
        return ephemeris_for(self.day, self.longitude, self.ephemeris_cache)

    @property
    def transit_utc(self) -> datetime:
        """UTC instant of the sun's meridian transit."""
        return meridian_transit_utc(self.day, self.longitude, self.ephemeris)

    def with_day(self, day: date | datetime | None) -> "SunriseCalculator":
        """Return a calculator for the same location on another day."""
        return replace(self, day=as_calendar_day(day))

    def with_location(self, latitude: float, longitude: float) -> "SunriseCalculator":
        """Return a calculator for another location on the same day."""
        return replace(self, latitude=latitude, longitude=longitude)

    def _half_day(self, horizon: Horizon) -> tuple[DiurnalResult, timedelta]:
        ephemeris = self.ephemeris
        altitude = horizon_altitude_deg(horizon, ephemeris.apparent_radius_deg)
        result, arc = diurnal_arc(self.latitude, ephemeris.declination_rad, altitude)
        return result, arc_to_timedelta(arc)

    def get_sunrise(
        self, horizon: Horizon = Horizon.NORMAL, tz: Zone = None
    ) -> tuple[DiurnalResult, datetime]:
        """Return the day classification and the instant the sun rises past horizon.

        For `SUN_ALWAYS_ABOVE` the instant is 12 hours before transit; for
        `SUN_ALWAYS_BELOW` it equals the transit, when the sun is closest to
        the horizon.
        """
        result, half_day = self._half_day(horizon)
        return result, to_zone(self.transit_utc - half_day, tz)

    def get_sunset(
        self, horizon: Horizon = Horizon.NORMAL, tz: Zone = None
    ) -> tuple[DiurnalResult, datetime]:
        """Return the day classification and the instant the sun sets past horizon."""
        result, half_day = self._half_day(horizon)
        return result, to_zone(self.transit_utc + half_day, tz)

    def get_rise_and_set(
        self, horizon: Horizon = Horizon.NORMAL, tz: Zone = None
    ) -> tuple[DiurnalResult, datetime, datetime]:
        """Return `(result, sunrise, sunset)` for horizon."""
        result, half_day = self._half_day(horizon)
        transit = self.transit_utc
        return result, to_zone(transit - half_day, tz), to_zone(transit + half_day, tz)

    def get_day_length(self, horizon: Horizon = Horizon.NORMAL) -> timedelta:
        """Return time spent above horizon: zero for polar night, 24h for polar day."""
        _, half_day = self._half_day(horizon)
        return 2 * half_day

    def sun_events(self, horizon: Horizon = Horizon.NORMAL, tz: Zone = None) -> SunEvents:
        """Return rise, transit, set and day length as one value."""
        horizon = Horizon(horizon)
        result, half_day = self._half_day(horizon)
        transit = self.transit_utc
        return SunEvents(
            result=result,
            horizon=horizon,
            sunrise=to_zone(transit - half_day, tz),
            transit=to_zone(transit, tz),
            sunset=to_zone(transit + half_day, tz),
            day_length=2 * half_day,
        )
