"""
Intersection of two great-circle paths, each given by a start point and a bearing.

Two distinct great circles always cross twice (at antipodal points), so "the"
intersection is the crossing reached by travelling forward along both paths.
Results are reported as an `IntersectionResult` rather than an exception:

- `found`: the forward crossing (`point` is set),
- `coincident`: both paths lie on the same great circle (infinitely many points),
- `divergent`: the paths only meet behind one of the start points.

Special cases:
- `p1` equal or antipodal to `p2`: every great circle through one passes through the
  other, so the answer is `p1`.
- a path heading straight at the other start point: the answer is that start point.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal

from greatcircle.core.angles import ANGLE_EPSILON, clamp_unit, require_finite, wrap_pi
from greatcircle.core.errors import AmbiguousResultError, InvalidArgumentError, NoIntersectionError
from greatcircle.core.geo import GeoPoint
from greatcircle.core.vector import cross, defines_great_circle, great_circle_pole, norm
from greatcircle.geodesy.spherical import angular_distance, bearing_to, project_point

logger = logging.getLogger(__name__)

IntersectionStatus = Literal["found", "coincident", "divergent"]


@dataclass(frozen=True)
class IntersectionResult:
    status: IntersectionStatus
    point: GeoPoint | None = None

    def __post_init__(self) -> None:
        if (self.point is not None) != (self.status == "found"):
            raise InvalidArgumentError(f"status={self.status!r} is inconsistent with point={self.point!r}")

    @property
    def found(self) -> bool:
        return self.status == "found"

    def unwrap(self) -> GeoPoint:
        """Return the intersection point or raise the matching geodesy error."""
        if self.point is not None:
            return self.point
        if self.status == "coincident":
            raise AmbiguousResultError("Paths lie on the same great circle; no unique intersection")
        raise NoIntersectionError("Paths do not meet in the forward direction")


def _found(point: GeoPoint) -> IntersectionResult:
    return IntersectionResult(status="found", point=point)


def intersection(p1: GeoPoint, bearing1: float, p2: GeoPoint, bearing2: float) -> IntersectionResult:
    """Find where the path from `p1` on `bearing1` meets the path from `p2` on `bearing2`."""
    b1 = require_finite("bearing1", bearing1)
    b2 = require_finite("bearing2", bearing2)

    pole1 = great_circle_pole(p1, b1)
    pole2 = great_circle_pole(p2, b2)
    if norm(cross(pole1, pole2)) < ANGLE_EPSILON:
        logger.debug("Paths from %s and %s are coincident", p1, p2)
        return IntersectionResult(status="coincident")

    if not defines_great_circle(p1, p2):
        return _found(p1)

    delta12 = angular_distance(p1, p2)
    theta13 = math.radians(b1)
    theta23 = math.radians(b2)
    theta12 = math.radians(bearing_to(p1, p2))
    theta21 = math.radians(bearing_to(p2, p1))

    # Interior angles of the triangle p1-p2-intersection.
    alpha1 = wrap_pi(theta13 - theta12)
    alpha2 = wrap_pi(theta21 - theta23)
    sin1, sin2 = math.sin(alpha1), math.sin(alpha2)

    # One path runs along the p1-p2 great circle and therefore through the other start.
    if abs(sin1) < ANGLE_EPSILON:
        if math.cos(alpha1) > 0:
            return _found(p2)
        logger.debug("Path from %s points away from %s", p1, p2)
        return IntersectionResult(status="divergent")
    if abs(sin2) < ANGLE_EPSILON:
        if math.cos(alpha2) > 0:
            return _found(p1)
        logger.debug("Path from %s points away from %s", p2, p1)
        return IntersectionResult(status="divergent")

    if sin1 * sin2 < 0:
        logger.debug("Paths from %s and %s diverge", p1, p2)
        return IntersectionResult(status="divergent")

    cos1, cos2 = math.cos(alpha1), math.cos(alpha2)
    alpha3 = math.acos(clamp_unit(-cos1 * cos2 + sin1 * sin2 * math.cos(delta12)))
    delta13 = math.atan2(math.sin(delta12) * sin1 * sin2, cos2 + cos1 * math.cos(alpha3))
    return _found(project_point(p1, delta13, theta13))
