"""UTC normalization and presentation time-zone helpers."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def resolve_zone(zone: str | tzinfo | None) -> tzinfo:
    """Resolve an IANA zone name or tzinfo; None means UTC."""
    if zone is None:
        return UTC
    if isinstance(zone, tzinfo):
        return zone
    name = zone.strip()
    if name.upper() in {"UTC", "Z"}:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown time zone: {zone}") from exc


def to_zone(dt: datetime, zone: str | tzinfo | None = None) -> datetime:
    """Present a UTC instant in the requested zone without changing the instant."""
    return to_utc(dt).astimezone(resolve_zone(zone))
