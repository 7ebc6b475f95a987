import pytest

from safety_engine.geofence import is_point_inside_radius
from safety_engine.models import GeoPoint


def test_point_inside_radius() -> None:
    center = GeoPoint(lat=28.6562, lng=77.2410)
    nearby = GeoPoint(lat=28.6580, lng=77.2420)
    assert is_point_inside_radius(center, nearby, radius_km=0.5)


def test_point_outside_radius() -> None:
    center = GeoPoint(lat=28.6562, lng=77.2410)
    far = GeoPoint(lat=28.5653, lng=77.2434)
    assert not is_point_inside_radius(center, far, radius_km=0.5)


def test_zero_radius_excludes_center() -> None:
    center = GeoPoint(lat=28.6562, lng=77.2410)
    assert not is_point_inside_radius(center, center, radius_km=0)


def test_negative_radius_raises() -> None:
    center = GeoPoint(lat=28.6562, lng=77.2410)
    with pytest.raises(ValueError):
        is_point_inside_radius(center, center, radius_km=-1)
