"""Core data contracts for the sunrise calculator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum
from math import degrees, fmod, isfinite, isnan
from typing import Any

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class CoordinateRangeError(ValueError):
    """Raised when a latitude or longitude cannot describe a point on Earth."""

    def __init__(self, field: str, value: float, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


def validate_latitude(value: float) -> float:
    """Return latitude unchanged if it lies in [-90, 90]."""
    latitude = float(value)
    if isnan(latitude) or latitude < MIN_LATITUDE or latitude > MAX_LATITUDE:
        raise CoordinateRangeError(
            "latitude",
            latitude,
            f"latitude must be in range {MIN_LATITUDE} to {MAX_LATITUDE} degrees, got {latitude}.",
        )
    return latitude


def wrap_longitude(value: float) -> float:
    """Wrap a finite longitude into [-180, 180] by whole revolutions."""
    longitude = float(value)
    if not isfinite(longitude):
        raise CoordinateRangeError("longitude", longitude, f"longitude must be finite, got {longitude}.")
    if MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        return longitude
    wrapped = fmod(longitude - MIN_LONGITUDE, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    return wrapped + MIN_LONGITUDE


@dataclass(frozen=True, slots=True)
class GeoCoordinate:
    """Observer position in degrees, latitude north and longitude east positive."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate latitude and wrap longitude."""
        object.__setattr__(self, "latitude", validate_latitude(self.latitude))
        object.__setattr__(self, "longitude", wrap_longitude(self.longitude))


class Horizon(StrEnum):
    """Altitude thresholds that define rise/set and twilight events."""

    NORMAL = "normal"
    NOMINAL = "nominal"
    CIVIL = "civil"
    NAUTICAL = "nautical"
    ASTRONOMICAL = "astronomical"


class DiurnalResult(StrEnum):
    """Whether the sun crosses the requested horizon on a given day."""

    NORMAL_DAY = "normal_day"
    SUN_ALWAYS_ABOVE = "sun_always_above"
    SUN_ALWAYS_BELOW = "sun_always_below"


@dataclass(frozen=True, slots=True)
class SolarEphemeris:
    """Apparent solar position evaluated at one epoch day.

    Attributes:
        epoch_day: Days since J2000.0 at which the elements were evaluated.
        right_ascension_rad: Right ascension in radians, in (-pi, pi].
        declination_rad: Declination in radians.
        apparent_radius_deg: Apparent angular radius of the solar disc in degrees.
        distance_au: Earth-Sun distance in astronomical units.
        obliquity_rad: Obliquity of the ecliptic in radians.
    """

    epoch_day: float
    right_ascension_rad: float
    declination_rad: float
    apparent_radius_deg: float
    distance_au: float
    obliquity_rad: float

    @property
    def right_ascension_deg(self) -> float:
        return degrees(self.right_ascension_rad)

    @property
    def declination_deg(self) -> float:
        return degrees(self.declination_rad)


@dataclass(frozen=True, slots=True)
class SunEvents:
    """Rise, transit and set of the sun for one day and horizon."""

    result: DiurnalResult
    horizon: Horizon
    sunrise: datetime
    transit: datetime
    sunset: datetime
    day_length: timedelta

    def to_dict(self) -> dict[str, Any]:
        """Serialize events to a JSON-compatible dictionary."""
        return {
            "result": self.result.value,
            "horizon": self.horizon.value,
            "sunrise": self.sunrise.isoformat(),
            "transit": self.transit.isoformat(),
            "sunset": self.sunset.isoformat(),
            "day_length_seconds": self.day_length.total_seconds(),
        }
