"""
Small formatting helpers.

Used by the CLI to print compact, human-readable results.
"""

from __future__ import annotations

from greatcircle.config.settings import OutputSettings
from greatcircle.core.geo import GeoPoint


def format_point(point: GeoPoint, output: OutputSettings) -> str:
    d = output.coordinate_decimals
    return f"{point.lat:.{d}f}, {point.lon:.{d}f}"


def format_distance(meters: float, output: OutputSettings) -> str:
    return f"{meters:.{output.distance_decimals}f} m"


def format_bearing(degrees: float, output: OutputSettings) -> str:
    return f"{degrees:.{output.bearing_decimals}f}°"


def point_payload(point: GeoPoint | None) -> dict[str, float] | None:
    """JSON-friendly representation of a point."""
    if point is None:
        return None
    return {"lat": point.lat, "lon": point.lon}
