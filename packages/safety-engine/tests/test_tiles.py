import math
import re

from safety_engine.models import GeoPoint
from safety_engine.tiles import tile_code

TILE_PATTERN = re.compile(r"^[0-9A-Z]{6}$")


def test_new_delhi_regression_fixture() -> None:
    assert tile_code(GeoPoint(lat=28.6139, lng=77.2090)) == "JITIGP"


def test_known_tile_codes() -> None:
    assert tile_code(GeoPoint(lat=28.6562, lng=77.2410)) == "JK0IHL"
    assert tile_code(GeoPoint(lat=28.6315, lng=77.2167)) == "JJBIGW"


def test_tile_code_is_deterministic() -> None:
    point = GeoPoint(lat=28.6139, lng=77.2090)
    assert tile_code(point) == tile_code(point)
    assert tile_code(point) == tile_code(GeoPoint(lat=28.6139, lng=77.2090))


def test_nearby_points_share_a_tile() -> None:
    assert tile_code(GeoPoint(lat=28.61391, lng=77.20901)) == tile_code(
        GeoPoint(lat=28.61394, lng=77.20904)
    )


def test_tile_code_shape_across_the_globe() -> None:
    for lat in (-89.9, -45.5, 0.0, 12.345, 51.5, 89.9):
        for lng in (-179.9, -73.98, 0.0, 77.209, 139.69, 179.9):
            assert TILE_PATTERN.match(tile_code(GeoPoint(lat=lat, lng=lng)))


def test_south_west_corner_is_zero_padded() -> None:
    assert tile_code(GeoPoint(lat=-90, lng=-180)) == "000000"


def test_north_east_corner() -> None:
    assert tile_code(GeoPoint(lat=90, lng=180)) == "UW0PS0"


def test_non_finite_coordinates_do_not_raise() -> None:
    assert tile_code(GeoPoint(lat=math.nan, lng=0)) == "NAN" + tile_code(GeoPoint(lat=0, lng=0))[3:]
    assert tile_code(GeoPoint(lat=0, lng=math.inf)) == tile_code(GeoPoint(lat=0, lng=0))[:3] + "ITY"
    assert tile_code(GeoPoint(lat=-math.inf, lng=math.nan)) == "ITYNAN"
