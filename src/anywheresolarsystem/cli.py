"""CLI entry point for scale model generation.

Writes KML and/or PNG output for a Sun size and centre point:
    anywhere-solar-system --sun-size 5 --latitude 49.27 --longitude -123.10 --kml out.kml
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from anywheresolarsystem import config
from anywheresolarsystem.compute import (
    GeocodingError,
    ProjectionError,
    QueryValidationError,
    geocode_place,
    run,
)
from anywheresolarsystem.formatting import summary_rows
from anywheresolarsystem.models import QueryInput

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, DEBUG with --verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )
    for name in ("httpx", "httpcore", "matplotlib"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _positive_int(value: str) -> int:
    """argparse type for a ring segment count of at least 1."""
    try:
        points = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if points < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {points}")
    return points


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the anywhere-solar-system command.

    Returns:
        Parser for Sun size, centre (coordinates or place name), ring size,
        projector selection, output paths and verbosity.
    """
    parser = argparse.ArgumentParser(
        prog="anywhere-solar-system",
        description="Scale the Solar System to a Sun of the given size, centred anywhere.",
    )
    parser.add_argument("--sun-size", help="Sun diameter in meters (0.01-500)")
    parser.add_argument("--latitude", help="Centre latitude in degrees")
    parser.add_argument("--longitude", help="Centre longitude in degrees")
    parser.add_argument("--place", help="Place name to geocode as the centre")
    parser.add_argument("--points", type=_positive_int, help="Ring segments per orbit")
    parser.add_argument(
        "--corrected",
        action="store_true",
        default=None,
        help="Scale longitude offsets by cos(latitude) without swapping axes",
    )
    parser.add_argument("--kml", type=Path, help="Write a KML document to this path")
    parser.add_argument("--png", type=Path, help="Write a PNG chart to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        points = args.points if args.points is not None else config.get_ring_points()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    latitude, longitude = args.latitude, args.longitude
    try:
        if args.place:
            point = geocode_place(args.place)
            logger.info("Geocoded %r to %s", args.place, tuple(point))
            latitude, longitude = point.latitude, point.longitude
        data = run(
            QueryInput(sun_size=args.sun_size, latitude=latitude, longitude=longitude),
            points=points,
            corrected=args.corrected,
        )
    except QueryValidationError as e:
        for issue in e.issues:
            print(f"error: {issue.message}", file=sys.stderr)
        return 2
    except (GeocodingError, ProjectionError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.kml:
        from anywheresolarsystem.renderers.kml import generate_kml

        args.kml.parent.mkdir(parents=True, exist_ok=True)
        args.kml.write_text(generate_kml(data), encoding="utf-8")
        print(f"Saved: {args.kml}")
    if args.png:
        from anywheresolarsystem.renderers.static import save_static_chart

        print(f"Saved: {save_static_chart(data, args.png)}")
    if not args.kml and not args.png:
        for name, size, distance in summary_rows(data.placemarks):
            print(f"{name:<8} {size:>10} {distance:>12}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
