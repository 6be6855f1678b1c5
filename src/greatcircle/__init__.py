"""
Spherical-earth (great-circle) geodesy.

Pure functions over the immutable `GeoPoint` value type: distance, bearings,
midpoint, destination, cross-track/along-track distance and path intersection.
"""

from greatcircle.core.angles import EARTH_RADIUS_M
from greatcircle.core.errors import (
    AmbiguousResultError,
    GeodesyError,
    InvalidArgumentError,
    NoIntersectionError,
)
from greatcircle.core.geo import GeoPoint
from greatcircle.geodesy.cross_track import (
    along_track_distance_to,
    cross_track_distance_to,
    cross_track_point,
)
from greatcircle.geodesy.intersection import IntersectionResult, intersection
from greatcircle.geodesy.spherical import (
    angular_distance,
    bearing_to,
    destination_point,
    distance_to,
    final_bearing_to,
    midpoint_to,
)

__all__ = [
    "EARTH_RADIUS_M",
    "AmbiguousResultError",
    "GeoPoint",
    "GeodesyError",
    "IntersectionResult",
    "InvalidArgumentError",
    "NoIntersectionError",
    "along_track_distance_to",
    "angular_distance",
    "bearing_to",
    "cross_track_distance_to",
    "cross_track_point",
    "destination_point",
    "distance_to",
    "final_bearing_to",
    "intersection",
    "midpoint_to",
]
