"""
Tiny 3-D vector algebra over unit vectors on the sphere (n-vectors).

Kept dependency-free on purpose: three-element tuples are all the midpoint and the
intersection checks need.
"""

from __future__ import annotations

import math

from greatcircle.core.angles import ANGLE_EPSILON
from greatcircle.core.geo import GeoPoint

Vector3 = tuple[float, float, float]


def to_vector(point: GeoPoint) -> Vector3:
    """Convert a point into an earth-centred unit vector."""
    phi, lam = point.to_radians()
    cos_phi = math.cos(phi)
    return (cos_phi * math.cos(lam), cos_phi * math.sin(lam), math.sin(phi))


def from_vector(v: Vector3) -> GeoPoint:
    """Convert a (not necessarily unit) vector back to a point."""
    x, y, z = v
    lat = math.atan2(z, math.hypot(x, y))
    lon = math.atan2(y, x)
    return GeoPoint(lat=math.degrees(lat), lon=math.degrees(lon))


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def dot(a: Vector3, b: Vector3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector3, b: Vector3) -> Vector3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def norm(v: Vector3) -> float:
    return math.sqrt(dot(v, v))


def great_circle_pole(point: GeoPoint, bearing_deg: float) -> Vector3:
    """Unit normal of the great circle leaving `point` on `bearing_deg`.

    Two paths lie on the same great circle exactly when their poles are parallel
    (equal or opposite).
    """
    phi, lam = point.to_radians()
    theta = math.radians(bearing_deg)
    sin_phi, cos_phi = math.sin(phi), math.cos(phi)
    sin_lam, cos_lam = math.sin(lam), math.cos(lam)
    sin_t, cos_t = math.sin(theta), math.cos(theta)
    return (
        sin_lam * cos_t - sin_phi * cos_lam * sin_t,
        -cos_lam * cos_t - sin_phi * sin_lam * sin_t,
        cos_phi * sin_t,
    )


def defines_great_circle(a: GeoPoint, b: GeoPoint) -> bool:
    """True when exactly one great circle passes through `a` and `b`.

    Coincident and antipodal pairs fail: |a x b| = sin(angular distance) vanishes
    for both, and the cross product stays accurate where haversine does not.
    """
    return norm(cross(to_vector(a), to_vector(b))) >= ANGLE_EPSILON
