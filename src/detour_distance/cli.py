"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from detour_distance import __version__
from detour_distance.calculator import DistanceCalculator, is_unreachable
from detour_distance.config import get_settings
from detour_distance.datasources.bing import BingRouteProvider
from detour_distance.detour import Detour
from detour_distance.errors import DetourDistanceError
from detour_distance.schemas import Coordinate


def coordinate(text: str) -> Coordinate:
    """argparse type for ``"lat,lon"`` arguments."""
    try:
        return Coordinate.from_waypoint(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid coordinate {text!r} (expected 'lat,lon')") from e


def format_miles(miles: float) -> str:
    return "unreachable" if is_unreachable(miles) else f"{miles:.2f} mi"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="detour-distance",
        description="Driving distances and rideshare detour distances",
        epilog="Coordinates are 'lat,lon'. Put '--' before the first one if it is negative.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    distance_parser = subparsers.add_parser("distance", help="Driving distance between two points")
    distance_parser.add_argument("start", type=coordinate, help="Start as 'lat,lon'")
    distance_parser.add_argument("terminus", type=coordinate, help="Terminus as 'lat,lon'")
    distance_parser.add_argument(
        "--via",
        nargs=2,
        type=coordinate,
        metavar=("PICKUP", "DROPOFF"),
        help="Detour through a pick-up then a drop-off point",
    )

    detour_parser = subparsers.add_parser(
        "detour", help="Minimum detour for driver A->B and driver C->D to share a ride"
    )
    for name in ("a", "b", "c", "d"):
        detour_parser.add_argument(name, type=coordinate, help=f"Point {name.upper()} as 'lat,lon'")

    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def create_calculator() -> DistanceCalculator:
    return DistanceCalculator(BingRouteProvider.from_settings(get_settings()))


def cmd_distance(args: argparse.Namespace) -> int:
    """Handle the 'distance' command."""
    detour = Detour(*args.via) if args.via else None
    miles = create_calculator().distance(args.start, args.terminus, detour)
    print(format_miles(miles))
    return 0


def cmd_detour(args: argparse.Namespace) -> int:
    """Handle the 'detour' command."""
    breakdown = create_calculator().detour_distances(args.a, args.b, args.c, args.d)
    print(f"A->B driver detour: {format_miles(breakdown.ab_detour)}")
    print(f"C->D driver detour: {format_miles(breakdown.cd_detour)}")
    print(f"Minimum detour:     {format_miles(breakdown.minimum)}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Routing URL: {settings.routing_url}")
    print(f"API key configured: {'yes' if settings.has_api_key else 'no'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "distance": cmd_distance,
        "detour": cmd_detour,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    configure_logging(args.debug)
    try:
        return handler(args)
    except DetourDistanceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
