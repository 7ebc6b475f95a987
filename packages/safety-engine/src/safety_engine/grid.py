from __future__ import annotations

import random

from safety_engine.models import GeoPoint, GridSummary, GridTile
from safety_engine.sampling import weighted_random
from safety_engine.tiles import tile_code

GRID_SIZE = 5
GRID_START_OFFSET = -0.01
GRID_STEP = 0.005  # roughly 500m

SAFETY_LEVELS = ("safe", "monitored", "caution", "danger")
SAFETY_LEVEL_WEIGHTS = (0.4, 0.3, 0.2, 0.1)

DEFAULT_TIME_RANGE = "24h"
TIME_AGO_OPTIONS: dict[str, tuple[str, ...]] = {
    "1h": ("30 minutes ago", "45 minutes ago", "1 hour ago"),
    "24h": ("2 hours ago", "6 hours ago", "12 hours ago", "1 day ago"),
    "7d": ("2 days ago", "4 days ago", "1 week ago"),
    "30d": ("1 week ago", "2 weeks ago", "1 month ago"),
}

# (minimum, exclusive span) per safety level
_INCIDENT_RANGES: dict[str, tuple[int, int]] = {
    "safe": (0, 2),
    "monitored": (0, 5),
    "caution": (2, 10),
    "danger": (5, 15),
}

TILE_SUMMARIES: dict[str, str] = {
    "safe": (
        "Well-patrolled area with good lighting and regular foot traffic. "
        "Multiple guardians active. No recent incidents reported."
    ),
    "monitored": (
        "Moderate activity area with some guardian presence. "
        "Occasional minor incidents but generally secure during daylight hours."
    ),
    "caution": (
        "Area with increased incident reports. Limited guardian coverage. "
        "Recommend avoiding after dark and staying in groups."
    ),
    "danger": (
        "High-risk zone with multiple recent incidents. Minimal guardian presence. "
        "Authorities have been notified. Avoid if possible."
    ),
}


def build_grid_summary(
    center: GeoPoint,
    time_range: str = DEFAULT_TIME_RANGE,
    rng: random.Random | None = None,
) -> GridSummary:
    """Fabricate a demo safety grid around ``center``.

    Tiles are laid out row by row from the south-west corner. Levels are
    sampled, so only the layout and tile codes are reproducible without a
    seeded ``rng``.
    """
    source = rng or random.Random()
    tiles: list[GridTile] = []
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            point = GeoPoint(
                lat=center.lat + GRID_START_OFFSET + row * GRID_STEP,
                lng=center.lng + GRID_START_OFFSET + col * GRID_STEP,
            )
            tiles.append(_build_tile(point, time_range, source))
    counts = {level: 0 for level in SAFETY_LEVELS}
    for tile in tiles:
        counts[tile.safety_level] += 1
    return GridSummary(tiles=tuple(tiles), time_range=time_range, counts=tuple(counts.items()))


def random_time_ago(time_range: str, rng: random.Random) -> str:
    options = TIME_AGO_OPTIONS.get(time_range, TIME_AGO_OPTIONS[DEFAULT_TIME_RANGE])
    return rng.choice(options)


def _build_tile(point: GeoPoint, time_range: str, rng: random.Random) -> GridTile:
    safety_level = weighted_random(SAFETY_LEVELS, SAFETY_LEVEL_WEIGHTS, rng=rng)
    minimum, span = _INCIDENT_RANGES[safety_level]
    incident_count = minimum + rng.randrange(span)
    guardian_bonus = 3 if safety_level == "safe" else 1
    return GridTile(
        tile_code=tile_code(point),
        safety_level=safety_level,
        incident_count=incident_count,
        last_incident=random_time_ago(time_range, rng) if incident_count > 0 else None,
        summary=TILE_SUMMARIES[safety_level],
        coordinates=point,
        population=100 + rng.randrange(1000),
        guardian_count=rng.randrange(8) + guardian_bonus,
    )
