from __future__ import annotations

import math
from dataclasses import dataclass

from greatcircle.core.angles import require_finite, wrap180
from greatcircle.core.errors import InvalidArgumentError

"""
The point type shared by every geodesy operation.

A `GeoPoint` is an immutable latitude/longitude pair on a spherical earth. It holds
no derived state (no cached radians); operations that "move" a point build a new one.
"""


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees.

    Latitude must lie in [-90, 90]. Longitude is normalized into (-180, 180], so
    `GeoPoint(0, 190) == GeoPoint(0, -170)`.
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        lat = require_finite("lat", self.lat)
        lon = require_finite("lon", self.lon)
        if not (-90.0 <= lat <= 90.0):
            raise InvalidArgumentError(f"Invalid latitude: {lat}")
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lon", wrap180(lon))

    @property
    def is_pole(self) -> bool:
        return abs(self.lat) == 90.0

    def almost_equals(self, other: GeoPoint, *, tolerance_deg: float = 1e-9) -> bool:
        """Compare two points within `tolerance_deg`.

        Longitude is compared modulo 360 and ignored when both points sit on the
        same pole.
        """
        if abs(self.lat - other.lat) > tolerance_deg:
            return False
        if self.is_pole and other.is_pole:
            return True
        return abs(wrap180(self.lon - other.lon)) <= tolerance_deg

    def to_radians(self) -> tuple[float, float]:
        """Return `(phi, lambda)` in radians."""
        return math.radians(self.lat), math.radians(self.lon)
