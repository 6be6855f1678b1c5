"""
Geodesy error taxonomy.

Every failure raised by `greatcircle` derives from `GeodesyError`, so callers can
catch the whole family in one place (the CLI does exactly that).
"""

from __future__ import annotations


class GeodesyError(Exception):
    """Base class for all geodesy failures."""


class InvalidArgumentError(GeodesyError, ValueError):
    """Malformed input: latitude out of range, negative distance, NaN, ..."""


class AmbiguousResultError(GeodesyError):
    """The geometry does not determine a single answer (e.g. antipodal midpoint)."""


class NoIntersectionError(GeodesyError):
    """Two paths do not meet at a single forward point."""
