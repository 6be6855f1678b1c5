"""
Great-circle distance, bearings, midpoint and destination on a spherical earth.

Every function is pure: inputs are immutable `GeoPoint`s, results are new values,
and the earth radius is an explicit keyword (`radius_m`) rather than global state.

Degenerate inputs follow fixed rules:
- `bearing_to` returns 0.0 when the direction is undefined (coincident or antipodal
  points),
- `midpoint_to` raises `AmbiguousResultError` for antipodal points,
- `destination_point` rejects negative distances with `InvalidArgumentError`.
"""

from __future__ import annotations

import logging
import math

from greatcircle.core.angles import (
    ANGLE_EPSILON,
    EARTH_RADIUS_M,
    clamp_unit,
    require_finite,
    require_radius,
    wrap360,
)
from greatcircle.core.errors import AmbiguousResultError, InvalidArgumentError
from greatcircle.core.geo import GeoPoint
from greatcircle.core.vector import add, defines_great_circle, from_vector, norm, to_vector

logger = logging.getLogger(__name__)


def angular_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine angular distance between two points, in radians on the unit sphere."""
    phi1, lam1 = a.to_radians()
    phi2, lam2 = b.to_radians()

    dphi = phi2 - phi1
    dlam = lam2 - lam1

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    # Rounding can push h a hair outside [0, 1] for coincident/antipodal points.
    h = min(max(h, 0.0), 1.0)
    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def distance_to(a: GeoPoint, b: GeoPoint, *, radius_m: float = EARTH_RADIUS_M) -> float:
    """Compute great-circle distance in meters between two points."""
    return require_radius(radius_m) * angular_distance(a, b)


def bearing_to(a: GeoPoint, b: GeoPoint) -> float:
    """Initial bearing (degrees clockwise from true north, [0, 360)) from `a` to `b`."""
    if not defines_great_circle(a, b):
        logger.debug("Bearing undefined between %s and %s; using 0.0", a, b)
        return 0.0

    phi1, lam1 = a.to_radians()
    phi2, lam2 = b.to_radians()
    dlam = lam2 - lam1

    y = math.sin(dlam) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlam)
    return wrap360(math.degrees(math.atan2(y, x)))


def final_bearing_to(a: GeoPoint, b: GeoPoint) -> float:
    """Bearing on arrival at `b` when travelling from `a`.

    This is the reverse of the initial bearing from `b` back to `a`, so it differs
    from `bearing_to(a, b)` by an amount that grows with distance and latitude.
    """
    return wrap360(bearing_to(b, a) + 180.0)


def midpoint_to(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    """Half-way point along the great circle between `a` and `b`.

    Computed by summing the two unit vectors and projecting the sum back onto the
    sphere (averaging lat/lon would be wrong away from the equator).
    """
    total = add(to_vector(a), to_vector(b))
    if norm(total) < ANGLE_EPSILON:
        raise AmbiguousResultError(f"Midpoint of antipodal points {a} and {b} is undefined")
    return from_vector(total)


def project_point(origin: GeoPoint, delta: float, theta: float) -> GeoPoint:
    """Travel `delta` radians from `origin` on initial bearing `theta` (radians).

    `delta` may be negative (travel backwards); public callers go through
    `destination_point`, which validates its inputs.
    """
    phi1, lam1 = origin.to_radians()
    sin_phi1, cos_phi1 = math.sin(phi1), math.cos(phi1)
    sin_d, cos_d = math.sin(delta), math.cos(delta)

    sin_phi2 = clamp_unit(sin_phi1 * cos_d + cos_phi1 * sin_d * math.cos(theta))
    phi2 = math.asin(sin_phi2)
    lam2 = lam1 + math.atan2(math.sin(theta) * sin_d * cos_phi1, cos_d - sin_phi1 * sin_phi2)
    return GeoPoint(lat=math.degrees(phi2), lon=math.degrees(lam2))


def destination_point(
    origin: GeoPoint,
    distance_m: float,
    bearing_deg: float,
    *,
    radius_m: float = EARTH_RADIUS_M,
) -> GeoPoint:
    """Point reached after travelling `distance_m` from `origin` on `bearing_deg`."""
    distance = require_finite("distance_m", distance_m)
    if distance < 0:
        raise InvalidArgumentError(f"distance_m must be >= 0, got {distance}")
    bearing = require_finite("bearing_deg", bearing_deg)
    delta = distance / require_radius(radius_m)
    return project_point(origin, delta, math.radians(bearing))
