"""FastAPI app exposing sunrise, sunset and daylight endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, model_validator

from sunrise_calc.cache import LRUCache
from sunrise_calc.calculator import SunriseCalculator
from sunrise_calc.config import Settings
from sunrise_calc.contracts import DiurnalResult, Horizon, SolarEphemeris, SunEvents
from sunrise_calc.table import build_daylight_table
from sunrise_calc.time.zones import resolve_zone

HorizonName = Literal["normal", "civil", "nautical", "astronomical"]


class LocationRequest(BaseModel):
    """Observer location and presentation options shared by all requests."""

    lat: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    lon: float = Field(allow_inf_nan=False)
    horizon: HorizonName | None = None
    tz: str | None = None


class SunEventsRequest(LocationRequest):
    """Request schema for one day of sun events."""

    day: date | None = None


class DaylightTableRequest(LocationRequest):
    """Request schema for a daylight table over an inclusive date range."""

    start: date
    end: date

    @model_validator(mode="after")
    def validate_range(self) -> "DaylightTableRequest":
        """Validate date range ordering."""
        if self.start > self.end:
            raise ValueError("start must be <= end")
        return self


class SunEventsResponse(BaseModel):
    """Response schema aligned with the SunEvents contract."""

    day: date
    result: DiurnalResult
    horizon: Horizon
    sunrise: datetime
    transit: datetime
    sunset: datetime
    day_length_seconds: float


class DayLengthResponse(BaseModel):
    """Length of daylight for one day."""

    day: date
    horizon: Horizon
    day_length_seconds: float


class DaylightTableResponse(BaseModel):
    """Sun events for each day of the requested range."""

    rows: list[SunEventsResponse]


def _events_response(day: date, events: SunEvents) -> SunEventsResponse:
    return SunEventsResponse(
        day=day,
        result=events.result,
        horizon=events.horizon,
        sunrise=events.sunrise,
        transit=events.transit,
        sunset=events.sunset,
        day_length_seconds=events.day_length.total_seconds(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sunrise Calculator API", version="0.1.0")

    cfg = settings or Settings.from_env()
    ephemeris_cache: LRUCache[float, SolarEphemeris] = LRUCache(capacity=cfg.ephemeris_cache_size)

    app.state.settings = cfg
    app.state.ephemeris_cache = ephemeris_cache

    def _horizon(payload: LocationRequest) -> Horizon:
        return Horizon(payload.horizon) if payload.horizon else cfg.default_horizon

    def _zone(payload: LocationRequest) -> str | None:
        zone = payload.tz or cfg.default_timezone
        try:
            resolve_zone(zone)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return zone

    def _calculator(payload: LocationRequest, day: date | None) -> SunriseCalculator:
        try:
            return SunriseCalculator(payload.lat, payload.lon, day, ephemeris_cache=ephemeris_cache)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    @app.post("/sun-events", response_model=SunEventsResponse)
    def post_sun_events(payload: SunEventsRequest) -> SunEventsResponse:
        """Return sunrise, transit, sunset and day length for one day."""
        calc = _calculator(payload, payload.day)
        events = calc.sun_events(_horizon(payload), _zone(payload))
        return _events_response(calc.day, events)

    @app.post("/day-length", response_model=DayLengthResponse)
    def post_day_length(payload: SunEventsRequest) -> DayLengthResponse:
        """Return the time the sun spends above the horizon on one day."""
        calc = _calculator(payload, payload.day)
        horizon = _horizon(payload)
        return DayLengthResponse(
            day=calc.day,
            horizon=horizon,
            day_length_seconds=calc.get_day_length(horizon).total_seconds(),
        )

    @app.post("/daylight-table", response_model=DaylightTableResponse)
    def post_daylight_table(payload: DaylightTableRequest) -> DaylightTableResponse:
        """Return sun events for each day in an inclusive date range."""
        zone = _zone(payload)
        try:
            rows = build_daylight_table(
                payload.lat,
                payload.lon,
                payload.start,
                payload.end,
                horizon=_horizon(payload),
                tz=zone,
                max_days=cfg.max_table_days,
                ephemeris_cache=ephemeris_cache,
            )
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return DaylightTableResponse(rows=[_events_response(row.day, row.events) for row in rows])

    return app


app = create_app()
