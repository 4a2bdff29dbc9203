"""Tests for great-circle distance."""

import math

import pytest

from mcflurry_ratings.domain.geo_distance import EARTH_RADIUS_KM, distance_between, distance_km
from mcflurry_ratings.domain.models import Location, UserPosition

AUGSBURG_CITY = (48.36686, 10.89804)
MUNICH_MARIENPLATZ = (48.13736, 11.57549)

POINT_PAIRS = [
    (AUGSBURG_CITY, MUNICH_MARIENPLATZ),
    ((53.55265, 10.0069), (52.52192, 13.41321)),
    ((0.0, 0.0), (0.0, 90.0)),
    ((-33.8688, 151.2093), (40.7128, -74.006)),
    ((89.9, 0.0), (-89.9, 180.0)),
]


@pytest.mark.parametrize(("p", "q"), POINT_PAIRS)
def test_distance_is_symmetric(p: tuple[float, float], q: tuple[float, float]) -> None:
    """Given two points, when measuring in both directions, then the distances are equal."""
    assert distance_km(*p, *q) == pytest.approx(distance_km(*q, *p))


@pytest.mark.parametrize("p", [pair[0] for pair in POINT_PAIRS])
def test_distance_to_self_is_zero(p: tuple[float, float]) -> None:
    """Given identical points, when measuring, then the distance is zero."""
    assert distance_km(*p, *p) == 0.0


@pytest.mark.parametrize(("p", "q"), POINT_PAIRS)
def test_distance_is_never_negative(p: tuple[float, float], q: tuple[float, float]) -> None:
    """Given any two points, when measuring, then the distance is non-negative."""
    assert distance_km(*p, *q) >= 0.0


def test_augsburg_to_munich_matches_reference_distance() -> None:
    """Given Augsburg City and Munich Marienplatz, then the distance is about 56 km."""
    assert distance_km(*AUGSBURG_CITY, *MUNICH_MARIENPLATZ) == pytest.approx(56.3, abs=1.0)


def test_quarter_meridian() -> None:
    """Given the equator and the north pole, then the distance is a quarter circumference."""
    assert distance_km(0.0, 0.0, 90.0, 0.0) == pytest.approx(EARTH_RADIUS_KM * math.pi / 2)


def test_antipodal_points_are_half_circumference_apart() -> None:
    """Given antipodal points, then the distance is half the circumference."""
    assert distance_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(EARTH_RADIUS_KM * math.pi)


def test_out_of_range_coordinates_are_accepted() -> None:
    """Given coordinates outside the usual ranges, when measuring, then no error is raised."""
    assert distance_km(95.0, 200.0, -95.0, -200.0) >= 0.0


def test_distance_between_position_and_location() -> None:
    """Given a position and a location, then distance_between matches distance_km."""
    position = UserPosition(latitude=AUGSBURG_CITY[0], longitude=AUGSBURG_CITY[1])
    location = Location(3, "Marienplatz", "München", *MUNICH_MARIENPLATZ)

    assert distance_between(position, location) == distance_km(*AUGSBURG_CITY, *MUNICH_MARIENPLATZ)
