"""Diurnal arc solver: horizon crossings and meridian transit."""

from __future__ import annotations

import warnings
from datetime import date, datetime, timedelta
from math import acos, cos, pi, radians, sin

from sunrise_calc.astro.solar import gmst0_degrees, rev180, rev360
from sunrise_calc.contracts import DiurnalResult, Horizon, SolarEphemeris
from sunrise_calc.time.days import midnight_utc

# Upper limb 35 arc minutes below the geometric horizon accounts for refraction.
NOMINAL_HORIZON_DEG = -35.0 / 60.0
CIVIL_HORIZON_DEG = -6.0
NAUTICAL_HORIZON_DEG = -12.0
ASTRONOMICAL_HORIZON_DEG = -18.0


def horizon_altitude_deg(horizon: Horizon, apparent_radius_deg: float) -> float:
    """Return the altitude threshold in degrees for horizon."""
    horizon = Horizon(horizon)
    if horizon is Horizon.NORMAL:
        return NOMINAL_HORIZON_DEG - apparent_radius_deg
    if horizon is Horizon.NOMINAL:
        warnings.warn(
            "Horizon.NOMINAL ignores the solar radius and is deprecated; use Horizon.NORMAL.",
            DeprecationWarning,
            stacklevel=3,
        )
        return NOMINAL_HORIZON_DEG
    if horizon is Horizon.CIVIL:
        return CIVIL_HORIZON_DEG
    if horizon is Horizon.NAUTICAL:
        return NAUTICAL_HORIZON_DEG
    return ASTRONOMICAL_HORIZON_DEG


def diurnal_arc(latitude_deg: float, declination_rad: float, altitude_deg: float) -> tuple[DiurnalResult, float]:
    """Solve the half-day arc above altitude_deg.

    Returns:
        Tuple of `(result, arc_rad)`. The arc is 0 when the sun never rises
        above the altitude and pi when it never sets.
    """
    lat = radians(latitude_deg)
    cos_arc = (sin(radians(altitude_deg)) - sin(lat) * sin(declination_rad)) / (
        cos(lat) * cos(declination_rad)
    )
    if cos_arc >= 1.0:
        return DiurnalResult.SUN_ALWAYS_BELOW, 0.0
    if cos_arc <= -1.0:
        return DiurnalResult.SUN_ALWAYS_ABOVE, pi
    return DiurnalResult.NORMAL_DAY, acos(cos_arc)


def arc_to_timedelta(arc_rad: float) -> timedelta:
    """Convert an hour-angle arc in radians to elapsed time."""
    return timedelta(hours=arc_rad * 12.0 / pi)


def local_sidereal_time_deg(epoch_day: float, longitude: float) -> float:
    """Local sidereal time at 12h UT of epoch_day's date, in degrees."""
    return rev360(gmst0_degrees(epoch_day) + 180.0 + longitude)


def meridian_transit_utc(day: date, longitude: float, ephemeris: SolarEphemeris) -> datetime:
    """Return the UTC instant at which the sun crosses the local meridian on day."""
    hour_angle_deg = rev180(
        local_sidereal_time_deg(ephemeris.epoch_day, longitude) - ephemeris.right_ascension_deg
    )
    return midnight_utc(day) + timedelta(hours=12.0 - hour_angle_deg / 15.0)
