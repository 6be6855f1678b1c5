"""
GreatCircle CLI entrypoint.

Quick command-line access to the spherical geodesy functions, mostly for demos and
for checking numbers by hand. Every subcommand delegates to `greatcircle.geodesy`.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from greatcircle.config.settings import Settings, get_settings
from greatcircle.core.errors import AmbiguousResultError, GeodesyError
from greatcircle.core.geo import GeoPoint
from greatcircle.core.logging import configure_logging
from greatcircle.geodesy.cross_track import (
    along_track_distance_to,
    cross_track_distance_to,
    cross_track_point,
)
from greatcircle.geodesy.intersection import intersection
from greatcircle.geodesy.spherical import (
    bearing_to,
    destination_point,
    distance_to,
    final_bearing_to,
    midpoint_to,
)
from greatcircle.report.summary import format_bearing, format_distance, format_point, point_payload

logger = logging.getLogger(__name__)


def _point(values: list[float]) -> GeoPoint:
    lat, lon = values
    return GeoPoint(lat=lat, lon=lon)


def _radius(args: argparse.Namespace, settings: Settings) -> float:
    if args.radius_m is not None:
        return float(args.radius_m)
    return settings.geodesy.earth_radius_m


def _emit(args: argparse.Namespace, payload: dict[str, Any], lines: list[str]) -> None:
    if args.json:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    for line in lines:
        print(line)


def _cmd_distance(args: argparse.Namespace, settings: Settings) -> int:
    a, b = _point(args.from_), _point(args.to)
    meters = distance_to(a, b, radius_m=_radius(args, settings))
    _emit(args, {"distance_m": meters}, [format_distance(meters, settings.output)])
    return 0


def _cmd_bearing(args: argparse.Namespace, settings: Settings) -> int:
    a, b = _point(args.from_), _point(args.to)
    initial = bearing_to(a, b)
    final = final_bearing_to(a, b)
    out = settings.output
    _emit(
        args,
        {"initial_bearing_deg": initial, "final_bearing_deg": final},
        [f"initial: {format_bearing(initial, out)}", f"final: {format_bearing(final, out)}"],
    )
    return 0


def _cmd_midpoint(args: argparse.Namespace, settings: Settings) -> int:
    mid = midpoint_to(_point(args.from_), _point(args.to))
    _emit(args, {"midpoint": point_payload(mid)}, [format_point(mid, settings.output)])
    return 0


def _cmd_destination(args: argparse.Namespace, settings: Settings) -> int:
    dest = destination_point(
        _point(args.from_),
        float(args.distance_m),
        float(args.bearing),
        radius_m=_radius(args, settings),
    )
    _emit(args, {"destination": point_payload(dest)}, [format_point(dest, settings.output)])
    return 0


def _cmd_cross_track(args: argparse.Namespace, settings: Settings) -> int:
    point, start, end = _point(args.point), _point(args.start), _point(args.end)
    radius = _radius(args, settings)
    xt = cross_track_distance_to(point, start, end, radius_m=radius)
    at: float | None
    foot: GeoPoint | None
    try:
        at = along_track_distance_to(point, start, end, radius_m=radius)
        foot = cross_track_point(point, start, end)
    except AmbiguousResultError as exc:
        # The point sits on the path's pole: every point of the path is equally close.
        logger.info("cross-track: %s", exc)
        at, foot = None, None
    out = settings.output
    _emit(
        args,
        {"cross_track_m": xt, "along_track_m": at, "closest_point": point_payload(foot)},
        [
            f"cross-track: {format_distance(xt, out)} ({'right' if xt >= 0 else 'left'} of path)",
            f"along-track: {format_distance(at, out) if at is not None else 'undefined'}",
            f"closest point: {format_point(foot, out) if foot is not None else 'undefined'}",
        ],
    )
    return 0


def _cmd_intersection(args: argparse.Namespace, settings: Settings) -> int:
    result = intersection(_point(args.p1), float(args.bearing1), _point(args.p2), float(args.bearing2))
    if result.point is not None:
        line = format_point(result.point, settings.output)
    else:
        line = f"no intersection ({result.status})"
    _emit(args, {"status": result.status, "point": point_payload(result.point)}, [line])
    return 0 if result.found else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the GreatCircle CLI."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--radius-m", type=float, default=None, help="Override the configured earth radius.")
    common.add_argument("--json", action="store_true", help="Output machine-readable JSON")

    parser = argparse.ArgumentParser(prog="greatcircle")
    sub = parser.add_subparsers(dest="command", required=True)
    latlon: dict[str, Any] = {"nargs": 2, "type": float, "metavar": ("LAT", "LON"), "required": True}

    for name, func, help_text in [
        ("distance", _cmd_distance, "Great-circle distance between two points."),
        ("bearing", _cmd_bearing, "Initial and final bearing from one point to another."),
        ("midpoint", _cmd_midpoint, "Midpoint along the great circle."),
    ]:
        p = sub.add_parser(name, parents=[common], help=help_text)
        p.add_argument("--from", dest="from_", **latlon)
        p.add_argument("--to", **latlon)
        p.set_defaults(func=func)

    dest = sub.add_parser("destination", parents=[common], help="Point at a distance and bearing.")
    dest.add_argument("--from", dest="from_", **latlon)
    dest.add_argument("--distance-m", required=True, type=float)
    dest.add_argument("--bearing", required=True, type=float, help="Degrees clockwise from north.")
    dest.set_defaults(func=_cmd_destination)

    xt = sub.add_parser("cross-track", parents=[common], help="Distance from a point to a path.")
    xt.add_argument("--point", **latlon)
    xt.add_argument("--start", **latlon)
    xt.add_argument("--end", **latlon)
    xt.set_defaults(func=_cmd_cross_track)

    ix = sub.add_parser("intersection", parents=[common], help="Where two paths (point + bearing) cross.")
    ix.add_argument("--p1", **latlon)
    ix.add_argument("--bearing1", required=True, type=float)
    ix.add_argument("--p2", **latlon)
    ix.add_argument("--bearing2", required=True, type=float)
    ix.set_defaults(func=_cmd_intersection)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint callable used by `python -m greatcircle.cli`."""
    settings = get_settings()
    configure_logging(settings)
    parser = build_parser()
    args = parser.parse_args(argv)
    func: Any = getattr(args, "func")
    try:
        return int(func(args, settings))
    except GeodesyError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
