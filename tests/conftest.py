"""Shared fixtures: a handful of Paris-area landmarks."""

import pytest

from greatcircle.core.geo import GeoPoint


@pytest.fixture
def eiffel_tower():
    return GeoPoint(lat=48.858158, lon=2.294825)


@pytest.fixture
def versailles():
    return GeoPoint(lat=48.804766, lon=2.120339)


@pytest.fixture
def saint_germain():
    return GeoPoint(lat=48.897728, lon=2.094977)


@pytest.fixture
def orly():
    return GeoPoint(lat=48.747114, lon=2.400526)
