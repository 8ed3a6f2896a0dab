"""Great-circle distance: validation and metric properties."""

import math

import pytest

from heartkemy.core.errors import InvalidCoordinate, ValidationError
from heartkemy.core.geo import Coordinate, distance_km, haversine_distance_km

SEOUL = Coordinate(37.5665, 126.9780)
BUSAN = Coordinate(35.1796, 129.0756)
TOKYO = Coordinate(35.6762, 139.6503)
NEW_YORK = Coordinate(40.7128, -74.0060)
SYDNEY = Coordinate(-33.8688, 151.2093)
NORTH_POLE = Coordinate(90.0, 0.0)
SOUTH_POLE = Coordinate(-90.0, 0.0)
DATELINE_EAST = Coordinate(0.0, 179.9)
DATELINE_WEST = Coordinate(0.0, -179.9)

POINTS = [SEOUL, BUSAN, TOKYO, NEW_YORK, SYDNEY, NORTH_POLE, SOUTH_POLE, DATELINE_EAST, DATELINE_WEST]


@pytest.mark.parametrize("point", POINTS)
def test_distance_to_self_is_zero(point):
    assert distance_km(point, point) == 0


@pytest.mark.parametrize("a", POINTS)
@pytest.mark.parametrize("b", POINTS)
def test_distance_is_symmetric_and_non_negative(a, b):
    d = distance_km(a, b)
    assert d >= 0
    assert d == pytest.approx(distance_km(b, a), abs=1e-9)


@pytest.mark.parametrize(
    "a, b, c",
    [
        (SEOUL, BUSAN, TOKYO),
        (SEOUL, NEW_YORK, SYDNEY),
        (NORTH_POLE, SOUTH_POLE, SEOUL),
        (DATELINE_EAST, DATELINE_WEST, TOKYO),
        (NEW_YORK, SYDNEY, NORTH_POLE),
    ],
)
def test_triangle_inequality(a, b, c):
    assert distance_km(a, b) <= distance_km(a, c) + distance_km(c, b) + 1e-9


def test_seoul_city_hall_to_point_0_01_degree_north():
    north = Coordinate(37.5765, 126.9780)
    assert distance_km(SEOUL, north) == pytest.approx(1.112, abs=0.001)


def test_seoul_to_busan():
    assert distance_km(SEOUL, BUSAN) == pytest.approx(325, abs=2)


def test_antipodal_points_are_half_the_circumference():
    half = math.pi * 6371.0
    assert distance_km(NORTH_POLE, SOUTH_POLE) == pytest.approx(half)
    assert distance_km(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(half)


def test_crossing_the_dateline_takes_the_short_way():
    # 0.2 degrees of longitude on the equator, not 359.8
    assert distance_km(DATELINE_EAST, DATELINE_WEST) == pytest.approx(22.24, abs=0.01)


@pytest.mark.parametrize(
    "lat, lng",
    [
        (90.0001, 0),
        (-90.5, 0),
        (0, 180.0001),
        (0, -181),
        (float("nan"), 0),
        (0, float("inf")),
    ],
)
def test_out_of_range_coordinate_is_rejected(lat, lng):
    with pytest.raises(InvalidCoordinate):
        Coordinate(lat, lng)
    with pytest.raises(InvalidCoordinate):
        haversine_distance_km(lat, lng, 0, 0)


def test_invalid_coordinate_is_a_validation_error():
    with pytest.raises(ValidationError):
        Coordinate(100, 0)


def test_range_boundaries_are_valid():
    for lat, lng in [(90, 180), (-90, -180), (0, 0)]:
        Coordinate(lat, lng)


def test_numeric_strings_are_stored_as_floats():
    point = Coordinate("37.5665", "126.9780")
    assert point.lat == 37.5665
    assert isinstance(point.lng, float)
    assert distance_km(point, SEOUL) == 0
    assert haversine_distance_km("37.5665", "126.9780", 37.5765, 126.9780) == pytest.approx(1.112, abs=0.001)


@pytest.mark.parametrize("lat, lng", [("north", 0), (None, 0), (0, [1])])
def test_non_numeric_coordinate_is_rejected(lat, lng):
    with pytest.raises(InvalidCoordinate):
        Coordinate(lat, lng)
