"""Command-line entrypoint for equirect_projection."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from equirect_projection.contracts import LatLng, LatLngBounds, Point, TileCoord
from equirect_projection.errors import ProjectionError
from equirect_projection.geo.tiling import visible_tiles
from equirect_projection.projection.factory import create_projection, parse_dimensions

logger = logging.getLogger(__name__)


def _parse_dimensions(value: str) -> list[list[float]]:
    """Parse the --dimensions JSON table for argparse."""
    try:
        return parse_dimensions(value)
    except ProjectionError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="equirect_projection",
        description="Equirectangular lat/lng <-> pixel projection utilities.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("--zoom-levels", type=int, default=None)
    parser.add_argument("--dimensions", type=_parse_dimensions, default=None)
    parser.add_argument("--no-repeat", action="store_true", help="Report an infinite wrap width.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    subparsers = parser.add_subparsers(dest="command")

    to_pixel = subparsers.add_parser("to-pixel", help="Project lat/lng to a pixel offset.")
    to_pixel.add_argument("lat", type=float)
    to_pixel.add_argument("lng", type=float)
    to_pixel.add_argument("zoom", type=int)

    to_latlng = subparsers.add_parser("to-latlng", help="Interpret a pixel offset as lat/lng.")
    to_latlng.add_argument("x", type=float)
    to_latlng.add_argument("y", type=float)
    to_latlng.add_argument("zoom", type=int)
    to_latlng.add_argument("--unbounded", action="store_true")

    bounds = subparsers.add_parser("bounds", help="Print the world rectangle at a zoom level.")
    bounds.add_argument("zoom", type=int)

    tile_check = subparsers.add_parser("tile-check", help="Check whether a tile is in range.")
    tile_check.add_argument("x", type=int)
    tile_check.add_argument("y", type=int)
    tile_check.add_argument("zoom", type=int)
    tile_check.add_argument("--tile-size", type=int, default=256)

    wrap_width = subparsers.add_parser("wrap-width", help="Print the horizontal repeat period.")
    wrap_width.add_argument("zoom", type=int)

    project_bounds = subparsers.add_parser("project-bounds", help="Project a lat/lng box to pixels.")
    project_bounds.add_argument("south", type=float)
    project_bounds.add_argument("west", type=float)
    project_bounds.add_argument("north", type=float)
    project_bounds.add_argument("east", type=float)
    project_bounds.add_argument("zoom", type=int)

    tiles = subparsers.add_parser("tiles", help="List tiles covering the world at a zoom level.")
    tiles.add_argument("zoom", type=int)
    tiles.add_argument("--tile-size", type=int, default=256)

    return parser


def _run(args: argparse.Namespace) -> list[str]:
    """Execute the selected command and return output lines."""
    projection = create_projection(
        zoom_levels=args.zoom_levels,
        dimensions=args.dimensions,
        repeats=False if args.no_repeat else None,
    )

    if args.command == "to-pixel":
        pixel = projection.from_latlng_to_pixel(LatLng(args.lat, args.lng, True), args.zoom)
        return [f"{pixel.x} {pixel.y}"]
    if args.command == "to-latlng":
        latlng = projection.from_pixel_to_latlng(Point(args.x, args.y), args.zoom, args.unbounded)
        return [f"{latlng.lat} {latlng.lng}"]
    if args.command == "bounds":
        rect = projection.bounds(args.zoom)
        return [f"{rect} right={rect.right()} bottom={rect.bottom()}"]
    if args.command == "tile-check":
        in_range = projection.tile_check_range(TileCoord(args.x, args.y), args.zoom, args.tile_size)
        return ["in-range" if in_range else "out-of-range"]
    if args.command == "wrap-width":
        return [str(projection.get_wrap_width(args.zoom))]
    if args.command == "project-bounds":
        box = LatLngBounds.from_edges(args.south, args.west, args.north, args.east, unbounded=True)
        return [str(projection.project_latlng_bounds(box, args.zoom))]
    if args.command == "tiles":
        return [f"{tile.x} {tile.y}" for tile in visible_tiles(projection, args.zoom, args.tile_size)]
    return []


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(asctime)s [%(levelname)s] %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        lines = _run(args)
    except ValueError as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
