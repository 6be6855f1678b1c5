import math

import pytest

from greatcircle.core.angles import EARTH_RADIUS_M, wrap360
from greatcircle.core.errors import AmbiguousResultError
from greatcircle.core.geo import GeoPoint
from greatcircle.geodesy.cross_track import (
    along_track_distance_to,
    cross_track_distance_to,
    cross_track_point,
)
from greatcircle.geodesy.spherical import bearing_to, destination_point, distance_to, midpoint_to


def _offset_from_midpoint(start, end, meters, side_deg):
    # Step perpendicular to the path from its midpoint (side_deg=+90 is right, -90 is left).
    mid = midpoint_to(start, end)
    return destination_point(mid, meters, wrap360(bearing_to(start, end) + side_deg))


def test_cross_track_point_right_of_path_is_positive(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, 90.0)
    assert cross_track_distance_to(p, eiffel_tower, versailles) == pytest.approx(200.0, abs=1.0)


def test_cross_track_point_left_of_path_is_negative(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, -90.0)
    assert cross_track_distance_to(p, eiffel_tower, versailles) == pytest.approx(-200.0, abs=1.0)


def test_cross_track_sign_flips_with_path_direction(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, 90.0)
    forward = cross_track_distance_to(p, eiffel_tower, versailles)
    backward = cross_track_distance_to(p, versailles, eiffel_tower)
    assert backward == pytest.approx(-forward, abs=1e-6)


def test_cross_track_zero_for_points_on_the_path(eiffel_tower, versailles):
    mid = midpoint_to(eiffel_tower, versailles)
    assert cross_track_distance_to(mid, eiffel_tower, versailles) == pytest.approx(0.0, abs=1e-6)
    assert cross_track_distance_to(eiffel_tower, eiffel_tower, versailles) == 0.0
    assert cross_track_distance_to(versailles, eiffel_tower, versailles) == pytest.approx(0.0, abs=1e-6)


def test_cross_track_from_the_equator_equals_latitude():
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=10.0)
    p = GeoPoint(lat=1.0, lon=-5.0)
    # Travelling east, the northern hemisphere is on the left.
    assert cross_track_distance_to(p, start, end) == pytest.approx(-EARTH_RADIUS_M * math.radians(1.0), rel=1e-9)


def test_along_track_distance_of_the_midpoint(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, 90.0)
    half = distance_to(eiffel_tower, versailles) / 2
    assert along_track_distance_to(p, eiffel_tower, versailles) == pytest.approx(half, abs=1.0)


def test_along_track_distance_is_negative_behind_the_start():
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=10.0)
    p = GeoPoint(lat=1.0, lon=-5.0)
    assert along_track_distance_to(p, start, end) == pytest.approx(-EARTH_RADIUS_M * math.radians(5.0), rel=1e-9)


def test_cross_track_point_is_the_foot_of_the_perpendicular(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, 90.0)
    foot = cross_track_point(p, eiffel_tower, versailles)
    assert distance_to(foot, midpoint_to(eiffel_tower, versailles)) < 1.0
    assert cross_track_distance_to(foot, eiffel_tower, versailles) == pytest.approx(0.0, abs=1e-3)
    assert distance_to(p, foot) == pytest.approx(200.0, abs=1.0)


def test_cross_track_point_behind_the_start():
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=10.0)
    foot = cross_track_point(GeoPoint(lat=1.0, lon=-5.0), start, end)
    assert foot.lat == pytest.approx(0.0, abs=1e-9)
    assert foot.lon == pytest.approx(-5.0)


def test_custom_radius_scales_cross_track(eiffel_tower, versailles):
    p = _offset_from_midpoint(eiffel_tower, versailles, 200.0, 90.0)
    unit = cross_track_distance_to(p, eiffel_tower, versailles, radius_m=1.0)
    assert unit * EARTH_RADIUS_M == pytest.approx(cross_track_distance_to(p, eiffel_tower, versailles))


@pytest.mark.parametrize(
    "func", [cross_track_distance_to, along_track_distance_to, cross_track_point]
)
def test_degenerate_path_is_ambiguous(func, eiffel_tower, versailles):
    with pytest.raises(AmbiguousResultError):
        func(versailles, eiffel_tower, eiffel_tower)
    with pytest.raises(AmbiguousResultError):
        func(versailles, GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=180.0))


def test_along_track_undefined_at_the_path_pole():
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=10.0)
    with pytest.raises(AmbiguousResultError):
        along_track_distance_to(GeoPoint(lat=90.0, lon=0.0), start, end)
