"""
Angle normalization and numeric guards.

All trigonometry in the geodesy layer goes through these helpers so that:
- bearings always land in [0, 360),
- longitudes always land in (-180, 180],
- inverse trig never sees a value nudged outside [-1, 1] by rounding.
"""

from __future__ import annotations

import math

from greatcircle.core.errors import InvalidArgumentError

# Mean earth radius (IUGG). Callers may pass their own radius to every operation.
EARTH_RADIUS_M = 6_371_000.0

# Angular tolerance (radians) used to detect coincident/antipodal/parallel cases.
ANGLE_EPSILON = 1e-12


def require_finite(name: str, value: float) -> float:
    """Coerce `value` to float and reject NaN/inf with a named error.

    Strings and booleans are rejected rather than coerced.
    """
    if isinstance(value, (str, bytes, bool)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(v):
        raise InvalidArgumentError(f"{name} must be finite, got {v}")
    return v


def require_radius(radius_m: float) -> float:
    r = require_finite("radius_m", radius_m)
    if r <= 0:
        raise InvalidArgumentError(f"radius_m must be > 0, got {r}")
    return r


def wrap360(degrees: float) -> float:
    """Normalize an angle into [0, 360)."""
    out = degrees % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if out == 360.0 else out


def wrap180(degrees: float) -> float:
    """Normalize an angle into (-180, 180] (used for longitudes)."""
    if -180.0 < degrees <= 180.0:
        return degrees
    out = (180.0 - degrees) % 360.0
    if out == 360.0:
        out = 0.0
    return 180.0 - out


def wrap_pi(radians: float) -> float:
    """Normalize an angle in radians into (-pi, pi]."""
    two_pi = 2.0 * math.pi
    out = (math.pi - radians) % two_pi
    if out == two_pi:
        out = 0.0
    return math.pi - out


def clamp_unit(value: float) -> float:
    """Clamp into [-1, 1] before handing a value to asin/acos."""
    return max(-1.0, min(1.0, value))
