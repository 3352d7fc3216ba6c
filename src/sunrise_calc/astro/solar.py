"""Solar ephemeris from low-order Keplerian orbital elements.

The model evaluates the Earth's mean orbital elements at an epoch day
(days since J2000.0) and converts the resulting ecliptic position of the sun
into equatorial coordinates. It ignores perturbations and nutation, which
keeps rise/set times within about a minute for years 1801 to 2099.
"""

from __future__ import annotations

import logging
from datetime import date
from math import atan2, cos, floor, hypot, pi, radians, sin, sqrt

from sunrise_calc.astro.epoch import local_midday_epoch_day
from sunrise_calc.cache import LRUCache
from sunrise_calc.contracts import SolarEphemeris

_log = logging.getLogger(__name__)

_TWO_PI = 2.0 * pi

# Mean anomaly and longitude of perihelion at J2000.0 and their daily rates, degrees.
_MEAN_ANOMALY_EPOCH_DEG = 357.0470
_MEAN_ANOMALY_RATE_DEG = 0.9856002585
_PERIHELION_EPOCH_DEG = 282.9404
_PERIHELION_RATE_DEG = 4.70935e-5

_ECCENTRICITY_EPOCH = 0.016709
_ECCENTRICITY_RATE = 1.151e-9

_OBLIQUITY_EPOCH_DEG = 23.4393
_OBLIQUITY_RATE_DEG = 3.563e-7

# Angular radius of the solar disc at 1 AU, degrees.
_SOLAR_RADIUS_AT_1AU_DEG = 0.2666

_DEFAULT_CACHE: LRUCache[float, SolarEphemeris] = LRUCache(capacity=256)


def rev360(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    return angle_deg % 360.0


def rev2pi(angle_rad: float) -> float:
    """Normalize an angle to [0, 2*pi)."""
    return angle_rad % _TWO_PI


def rev180(angle_deg: float) -> float:
    """Normalize an angle to [-180, 180)."""
    return angle_deg - 360.0 * floor(angle_deg / 360.0 + 0.5)


def gmst0_degrees(epoch_day: float) -> float:
    """Greenwich mean sidereal time at 0h UT, as an angle in [0, 360)."""
    return rev360(
        180.0
        + _MEAN_ANOMALY_EPOCH_DEG
        + _PERIHELION_EPOCH_DEG
        + (_MEAN_ANOMALY_RATE_DEG + _PERIHELION_RATE_DEG) * epoch_day
    )


def compute_solar_ephemeris(epoch_day: float) -> SolarEphemeris:
    """Compute the sun's apparent equatorial position at epoch_day.

    Args:
        epoch_day: Days since 2000-01-01T00:00:00 UTC, usually anchored to
            local midday of the observer.

    Returns:
        A `SolarEphemeris` snapshot. The result depends only on `epoch_day`.
    """
    d = epoch_day
    mean_anomaly = rev2pi(radians(_MEAN_ANOMALY_EPOCH_DEG + _MEAN_ANOMALY_RATE_DEG * d))
    perihelion = radians(_PERIHELION_EPOCH_DEG + _PERIHELION_RATE_DEG * d)
    ecc = _ECCENTRICITY_EPOCH - _ECCENTRICITY_RATE * d

    # One correction step only; the model's accuracy is calibrated against it.
    ecc_anomaly = mean_anomaly + ecc * sin(mean_anomaly) * (1.0 + ecc * cos(mean_anomaly))

    x = cos(ecc_anomaly) - ecc
    y = sqrt(1.0 - ecc * ecc) * sin(ecc_anomaly)
    distance = hypot(x, y)
    true_anomaly = atan2(y, x)
    true_longitude = rev2pi(true_anomaly + perihelion)

    obliquity = radians(_OBLIQUITY_EPOCH_DEG - _OBLIQUITY_RATE_DEG * d)

    xe = distance * cos(true_longitude)
    ye = distance * sin(true_longitude)
    xq = xe
    yq = ye * cos(obliquity)
    zq = ye * sin(obliquity)

    return SolarEphemeris(
        epoch_day=epoch_day,
        right_ascension_rad=atan2(yq, xq),
        declination_rad=atan2(zq, hypot(xq, yq)),
        apparent_radius_deg=_SOLAR_RADIUS_AT_1AU_DEG / distance,
        distance_au=distance,
        obliquity_rad=obliquity,
    )


def ephemeris_for(
    day: date,
    longitude: float,
    cache: LRUCache[float, SolarEphemeris] | None = None,
) -> SolarEphemeris:
    """Return the memoized ephemeris for local midday at longitude on day."""
    epoch_day = local_midday_epoch_day(day, longitude)
    store = _DEFAULT_CACHE if cache is None else cache

    def build() -> SolarEphemeris:
        _log.debug("computing solar ephemeris for epoch day %.6f", epoch_day)
        return compute_solar_ephemeris(epoch_day)

    return store.get(epoch_day, build)
