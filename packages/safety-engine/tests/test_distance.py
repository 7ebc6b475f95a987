import math

import pytest

from safety_engine.distance import EARTH_RADIUS_KM, haversine_distance_km
from safety_engine.models import GeoPoint


def test_haversine_distance_is_zero_for_same_point() -> None:
    point = GeoPoint(lat=28.6139, lng=77.2090)
    assert haversine_distance_km(point, point) == 0.0


def test_haversine_distance_is_symmetric() -> None:
    connaught_place = GeoPoint(lat=28.6315, lng=77.2167)
    lajpat_nagar = GeoPoint(lat=28.5653, lng=77.2434)
    forward = haversine_distance_km(connaught_place, lajpat_nagar)
    backward = haversine_distance_km(lajpat_nagar, connaught_place)
    assert forward == pytest.approx(backward, rel=1e-9)
    assert 5 < forward < 10


def test_one_degree_of_longitude_on_equator() -> None:
    distance = haversine_distance_km(GeoPoint(lat=0, lng=0), GeoPoint(lat=0, lng=1))
    assert distance == pytest.approx(EARTH_RADIUS_KM * math.pi / 180, rel=1e-9)


def test_distance_grows_with_angular_offset() -> None:
    origin = GeoPoint(lat=0, lng=0)
    near = haversine_distance_km(origin, GeoPoint(lat=0, lng=0.01))
    far = haversine_distance_km(origin, GeoPoint(lat=0, lng=0.02))
    assert far == pytest.approx(2 * near, rel=1e-6)


def test_nan_coordinates_propagate() -> None:
    distance = haversine_distance_km(GeoPoint(lat=math.nan, lng=0), GeoPoint(lat=0, lng=0))
    assert math.isnan(distance)
