"""Command-line entrypoint for sunrise_calc."""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence
from datetime import date

from sunrise_calc.cache import LRUCache
from sunrise_calc.calculator import SunriseCalculator
from sunrise_calc.config import Settings
from sunrise_calc.contracts import Horizon, SunEvents
from sunrise_calc.table import build_daylight_table
from sunrise_calc.time.zones import resolve_zone


def _parse_iso_date(value: str) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from exc


def _parse_zone(value: str) -> str:
    try:
        resolve_zone(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _add_location_args(parser: argparse.ArgumentParser, settings: Settings) -> None:
    parser.add_argument("--lat", type=float, required=True, help="Latitude in degrees, north positive.")
    parser.add_argument("--lon", type=float, required=True, help="Longitude in degrees, east positive.")
    parser.add_argument(
        "--horizon",
        choices=[h.value for h in Horizon if h is not Horizon.NOMINAL],
        default=settings.default_horizon.value,
    )
    parser.add_argument("--tz", type=_parse_zone, default=settings.default_timezone)
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text.")


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="sunrise_calc",
        description="Sunrise, sunset and twilight times for any location and date.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command")
    rise_set = subparsers.add_parser("rise-set", help="Print sunrise, transit and sunset for one day.")
    _add_location_args(rise_set, settings)
    rise_set.add_argument("--date", type=_parse_iso_date, default=None)

    day_length = subparsers.add_parser("day-length", help="Print the length of daylight for one day.")
    _add_location_args(day_length, settings)
    day_length.add_argument("--date", type=_parse_iso_date, default=None)

    table = subparsers.add_parser("table", help="Print sun events for each day of a date range.")
    _add_location_args(table, settings)
    table.add_argument("--start", type=_parse_iso_date, required=True)
    table.add_argument("--end", type=_parse_iso_date, required=True)

    return parser


def _format_events(events: SunEvents) -> str:
    hours = events.day_length.total_seconds() / 3600.0
    return (
        f"result={events.result.value} "
        f"sunrise={events.sunrise.isoformat(timespec='seconds')} "
        f"transit={events.transit.isoformat(timespec='seconds')} "
        f"sunset={events.sunset.isoformat(timespec='seconds')} "
        f"day_length_hours={hours:.4f}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        return 0

    cache: LRUCache = LRUCache(capacity=settings.ephemeris_cache_size)
    horizon = Horizon(args.horizon)
    try:
        if args.command == "table":
            rows = build_daylight_table(
                args.lat,
                args.lon,
                args.start,
                args.end,
                horizon=horizon,
                tz=args.tz,
                max_days=settings.max_table_days,
                ephemeris_cache=cache,
            )
            if args.json:
                print(json.dumps([row.to_dict() for row in rows], indent=2))
            else:
                for row in rows:
                    print(f"{row.day.isoformat()} {_format_events(row.events)}")
            return 0

        calc = SunriseCalculator(args.lat, args.lon, args.date, ephemeris_cache=cache)
        if args.command == "day-length":
            seconds = calc.get_day_length(horizon).total_seconds()
            if args.json:
                print(json.dumps({"day": calc.day.isoformat(), "day_length_seconds": seconds}))
            else:
                print(f"day={calc.day.isoformat()} day_length_hours={seconds / 3600.0:.4f}")
            return 0

        events = calc.sun_events(horizon, args.tz)
        if args.json:
            print(json.dumps({"day": calc.day.isoformat(), **events.to_dict()}, indent=2))
        else:
            print(f"day={calc.day.isoformat()} {_format_events(events)}")
        return 0
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
