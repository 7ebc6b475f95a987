import random
from datetime import datetime, timezone

import pytest

from safety_api.schemas.geo import GeoPointIn
from safety_api.services.safety_service import SafetyService


def _service(hour: int = 12) -> SafetyService:
    return SafetyService(
        clock=lambda: datetime(2026, 10, 19, hour, 0, tzinfo=timezone.utc),
        rng=random.Random(8),
    )


@pytest.mark.asyncio
async def test_route_safety_uses_default_hazards() -> None:
    result = await _service().route_safety(
        route=[GeoPointIn(lat=28.6562, lng=77.2410)],
        time_of_day=3,
        hazards=None,
    )
    assert result.score == 50
    assert "Yamuna Bank area" in result.avoided_areas


@pytest.mark.asyncio
async def test_route_safety_with_no_hazards() -> None:
    result = await _service().route_safety(
        route=[GeoPointIn(lat=28.6562, lng=77.2410)],
        time_of_day=3,
        hazards=[],
    )
    assert "Yamuna Bank area" not in result.avoided_areas
    assert result.score == 65


@pytest.mark.asyncio
async def test_route_safety_falls_back_to_clock_hour() -> None:
    result = await _service(hour=20).route_safety(route=[], time_of_day=None, hazards=[])
    assert result.analysis.time_of_day == "evening"


@pytest.mark.asyncio
async def test_distance_is_rounded_to_metres() -> None:
    result = await _service().distance_km(0, 0, 0, 1)
    assert result.distance_km == 111.195


@pytest.mark.asyncio
async def test_grid_summary_counts_match_tiles() -> None:
    result = await _service().grid_summary(GeoPointIn(lat=28.6139, lng=77.2090), "30d")
    counts = result.summary.model_dump()
    for level, count in counts.items():
        assert count == sum(1 for tile in result.tiles if tile.safety_level == level)
