"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from sunrise_calc.contracts import Horizon
from sunrise_calc.time.zones import resolve_zone


def _resolve_horizon(raw: str) -> Horizon:
    """Parse a horizon name with validation."""
    value = raw.strip().lower()
    try:
        return Horizon(value)
    except ValueError as exc:
        choices = ", ".join(h.value for h in Horizon)
        raise ValueError(f"SUNRISE_DEFAULT_HORIZON must be one of: {choices}") from exc


def _positive_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value


@dataclass(frozen=True)
class Settings:
    """Defaults shared by the CLI and the HTTP API."""

    default_horizon: Horizon = Horizon.NORMAL
    default_timezone: str | None = None
    ephemeris_cache_size: int = 256
    max_table_days: int = 366

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from `SUNRISE_*` environment variables."""
        env = os.environ if environ is None else environ
        tz_name = env.get("SUNRISE_DEFAULT_TZ", "").strip() or None
        if tz_name is not None:
            resolve_zone(tz_name)
        return cls(
            default_horizon=_resolve_horizon(env.get("SUNRISE_DEFAULT_HORIZON", "normal")),
            default_timezone=tz_name,
            ephemeris_cache_size=_positive_int(env, "SUNRISE_EPHEMERIS_CACHE_SIZE", 256),
            max_table_days=_positive_int(env, "SUNRISE_MAX_TABLE_DAYS", 366),
        )
