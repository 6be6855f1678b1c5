"""
Distances measured against a great-circle path.

A path is the great circle through `path_start` and `path_end`, oriented from start
to end. Cross-track distance is signed: positive to the right of the direction of
travel, negative to the left (the same clockwise-from-north orientation used by
`bearing_to`).
"""

from __future__ import annotations

import math

from greatcircle.core.angles import ANGLE_EPSILON, EARTH_RADIUS_M, clamp_unit, require_radius
from greatcircle.core.errors import AmbiguousResultError
from greatcircle.core.geo import GeoPoint
from greatcircle.core.vector import defines_great_circle
from greatcircle.geodesy.spherical import angular_distance, bearing_to, project_point


def _path_angles(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> tuple[float, float, float]:
    """Return `(delta13, theta13, theta12)` in radians."""
    if not defines_great_circle(path_start, path_end):
        raise AmbiguousResultError(
            f"Path from {path_start} to {path_end} does not define a single great circle"
        )
    delta13 = angular_distance(path_start, point)
    theta13 = math.radians(bearing_to(path_start, point))
    theta12 = math.radians(bearing_to(path_start, path_end))
    return delta13, theta13, theta12


def _cross_track_angle(delta13: float, theta13: float, theta12: float) -> float:
    return math.asin(clamp_unit(math.sin(delta13) * math.sin(theta13 - theta12)))


def _along_track_angle(delta13: float, theta13: float, theta12: float) -> float:
    cos_xt = abs(math.cos(_cross_track_angle(delta13, theta13, theta12)))
    if cos_xt < ANGLE_EPSILON:
        raise AmbiguousResultError("Point lies on the pole of the path; along-track position is undefined")
    along = math.acos(clamp_unit(math.cos(delta13) / cos_xt))
    return along if math.cos(theta12 - theta13) >= 0 else -along


def cross_track_distance_to(
    point: GeoPoint,
    path_start: GeoPoint,
    path_end: GeoPoint,
    *,
    radius_m: float = EARTH_RADIUS_M,
) -> float:
    """Signed distance in meters from `point` to the path (positive = right of path)."""
    r = require_radius(radius_m)
    return _cross_track_angle(*_path_angles(point, path_start, path_end)) * r


def along_track_distance_to(
    point: GeoPoint,
    path_start: GeoPoint,
    path_end: GeoPoint,
    *,
    radius_m: float = EARTH_RADIUS_M,
) -> float:
    """Distance in meters from `path_start` to the closest point on the path.

    Negative when that closest point lies behind `path_start`.
    """
    r = require_radius(radius_m)
    return _along_track_angle(*_path_angles(point, path_start, path_end)) * r


def cross_track_point(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> GeoPoint:
    """The point on the path closest to `point` (foot of the perpendicular)."""
    delta13, theta13, theta12 = _path_angles(point, path_start, path_end)
    along = _along_track_angle(delta13, theta13, theta12)
    return project_point(path_start, along, theta12)
