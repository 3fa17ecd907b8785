"""Command line interface for the Travel Pace plugin."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from .core import (
    PACES,
    TravelPaceError,
    TravelPaceSettings,
    TravelRequest,
    calculate_travel,
    convert_distance,
    journey_time,
    list_paces,
    load_settings,
)
from .core.constants import DISTANCE_UNITS

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG = REPO_ROOT / "config.yml"


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _settings(args: argparse.Namespace) -> TravelPaceSettings:
    path = Path(args.config)
    raw: dict[str, Any] = {}
    if path.exists():
        with path.open("r", encoding="utf-8") as handle:
            raw = (yaml.safe_load(handle) or {}).get("plugins", {}).get("travel_pace", {}) or {}
    return load_settings(raw, root=REPO_ROOT)


def _use_metric(args: argparse.Namespace, settings: TravelPaceSettings) -> bool:
    return settings.use_metric if args.metric is None else args.metric


def command_paces(args: argparse.Namespace) -> None:
    settings = _settings(args)
    _print({"paces": list_paces(use_metric=_use_metric(args, settings))})


def command_mounts(args: argparse.Namespace) -> None:
    settings = _settings(args)
    _print({"mounts": settings.mount_registry().available(_use_metric(args, settings))})


def command_time(args: argparse.Namespace) -> None:
    settings = _settings(args)
    request = TravelRequest(mode="distance", pace=args.pace, distance=args.distance, mount_id=args.mount)
    _print(
        calculate_travel(
            request,
            use_metric=_use_metric(args, settings),
            mounts=settings.mount_registry(),
        )
    )


def command_distance(args: argparse.Namespace) -> None:
    settings = _settings(args)
    request = TravelRequest(
        mode="time",
        pace=args.pace,
        days=args.days,
        hours=args.hours,
        minutes=args.minutes,
        mount_id=args.mount,
    )
    _print(
        calculate_travel(
            request,
            use_metric=_use_metric(args, settings),
            mounts=settings.mount_registry(),
        )
    )


def command_convert(args: argparse.Namespace) -> None:
    value = convert_distance(args.value, args.from_unit, args.to_unit, use_tabletop=not args.standard)
    _print({"value": value, "unit": args.to_unit, "use_tabletop": not args.standard})


def command_journey(args: argparse.Namespace) -> None:
    settings = _settings(args)
    result = journey_time(
        args.speed,
        args.on_road,
        args.off_road,
        args.pace,
        args.ratio,
        use_metric=_use_metric(args, settings),
        include_days=args.days,
    )
    _print(result.to_dict())


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=str(DEFAULT_CONFIG), help="Path to config.yml")
    units = parser.add_mutually_exclusive_group()
    units.add_argument("--metric", dest="metric", action="store_true", default=None, help="Use kilometres and metres")
    units.add_argument("--imperial", dest="metric", action="store_false", default=None, help="Use miles and feet")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Travel pace calculator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    paces_parser = subparsers.add_parser("paces", help="List travel paces")
    _add_common(paces_parser)
    paces_parser.set_defaults(func=command_paces)

    mounts_parser = subparsers.add_parser("mounts", help="List configured mounts and vehicles")
    _add_common(mounts_parser)
    mounts_parser.set_defaults(func=command_mounts)

    time_parser = subparsers.add_parser("time", help="How long does a distance take?")
    time_parser.add_argument("--distance", type=float, required=True, help="Distance in mi (km with --metric)")
    time_parser.add_argument("--pace", default="normal", choices=PACES)
    time_parser.add_argument("--mount", default=None, help="Mount or vehicle id from config.yml")
    _add_common(time_parser)
    time_parser.set_defaults(func=command_time)

    distance_parser = subparsers.add_parser("distance", help="How far can the party travel?")
    distance_parser.add_argument("--days", type=float, default=0, help="Travel days of 8 hours")
    distance_parser.add_argument("--hours", type=float, default=0)
    distance_parser.add_argument("--minutes", type=float, default=0)
    distance_parser.add_argument("--pace", default="normal", choices=PACES)
    distance_parser.add_argument("--mount", default=None, help="Mount or vehicle id from config.yml")
    _add_common(distance_parser)
    distance_parser.set_defaults(func=command_distance)

    convert_parser = subparsers.add_parser("convert", help="Convert a distance between ft, m, mi and km")
    convert_parser.add_argument("value", type=float)
    convert_parser.add_argument("from_unit", choices=DISTANCE_UNITS)
    convert_parser.add_argument("to_unit", choices=DISTANCE_UNITS)
    convert_parser.add_argument("--standard", action="store_true", help="Use 5280 ft miles instead of 6000 ft")
    convert_parser.set_defaults(func=command_convert)

    journey_parser = subparsers.add_parser("journey", help="Estimate an on-road/off-road journey")
    journey_parser.add_argument("--speed", type=float, default=30, help="Walking speed per round")
    journey_parser.add_argument("--on-road", dest="on_road", type=float, default=0)
    journey_parser.add_argument("--off-road", dest="off_road", type=float, default=0)
    journey_parser.add_argument("--pace", default="normal", choices=PACES)
    journey_parser.add_argument("--ratio", type=float, default=1)
    journey_parser.add_argument("--days", action="store_true", help="Include travel days")
    _add_common(journey_parser)
    journey_parser.set_defaults(func=command_journey)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except TravelPaceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
