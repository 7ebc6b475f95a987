from __future__ import annotations

import math

from safety_engine.models import GeoPoint

TILE_PRECISION = 1000
TILE_PART_LENGTH = 3
NAN_TILE_PART = "NAN"
INFINITE_TILE_PART = "ITY"

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def tile_code(point: GeoPoint) -> str:
    """Map a point to its 6-character grid cell id (~111m of latitude per cell).

    Nearby points share a code. Out-of-range coordinates are not checked and
    non-finite ones encode to ``NAN_TILE_PART`` / ``INFINITE_TILE_PART``.
    """
    lat_part = _encode_axis(point.lat + 90)
    lng_part = _encode_axis(point.lng + 180)
    return lat_part + lng_part


def _encode_axis(shifted: float) -> str:
    if math.isnan(shifted):
        return NAN_TILE_PART
    if math.isinf(shifted):
        return INFINITE_TILE_PART
    encoded = _to_base36(math.floor(shifted * TILE_PRECISION))
    return encoded[-TILE_PART_LENGTH:].upper().rjust(TILE_PART_LENGTH, "0")


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    remaining = abs(value)
    while remaining:
        remaining, index = divmod(remaining, 36)
        digits.append(_BASE36_DIGITS[index])
    return "".join(reversed(digits))
