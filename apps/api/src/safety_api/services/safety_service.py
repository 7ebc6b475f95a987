from __future__ import annotations

import logging
import random
from collections.abc import Callable
from datetime import datetime

from safety_devkit.timezone import DEFAULT_TIMEZONE, now_local
from safety_engine.distance import haversine_distance_km
from safety_engine.grid import build_grid_summary
from safety_engine.hazards import DEFAULT_HAZARD_ZONES
from safety_engine.location_check import check_location_safety
from safety_engine.models import GeoPoint, HazardZone
from safety_engine.safety_score import assess_route_safety
from safety_engine.tiles import tile_code

from safety_api.observability import get_trace_id
from safety_api.schemas.geo import Coordinates, GeoDistanceResult, GeoPointIn, TileCodeResult
from safety_api.schemas.safety import (
    GridLevelCounts,
    GridSummaryResult,
    GridTileItem,
    HazardZoneIn,
    LocationCheckResult,
    RouteSafetyResult,
)

logger = logging.getLogger(__name__)


class SafetyService:
    def __init__(
        self,
        timezone_name: str = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._timezone_name = timezone_name
        self._clock = clock or (lambda: now_local(self._timezone_name))
        self._rng = rng or random.Random()

    async def distance_km(
        self,
        origin_lat: float,
        origin_lng: float,
        target_lat: float,
        target_lng: float,
    ) -> GeoDistanceResult:
        origin = GeoPoint(lat=origin_lat, lng=origin_lng)
        target = GeoPoint(lat=target_lat, lng=target_lng)
        return GeoDistanceResult(distance_km=round(haversine_distance_km(origin, target), 3))

    async def tile_code(self, lat: float, lng: float) -> TileCodeResult:
        return TileCodeResult(tile_code=tile_code(GeoPoint(lat=lat, lng=lng)))

    async def route_safety(
        self,
        route: list[GeoPointIn],
        time_of_day: int | None,
        hazards: list[HazardZoneIn] | None,
    ) -> RouteSafetyResult:
        hour = self._resolve_hour(time_of_day)
        zones = DEFAULT_HAZARD_ZONES if hazards is None else [_to_hazard_zone(item) for item in hazards]
        assessment = assess_route_safety(
            [_to_point(item) for item in route],
            hour_of_day=hour,
            hazards=zones,
        )
        logger.info(
            "route_safety_assessed",
            extra={
                "component": "safety_api",
                "waypoints": len(route),
                "hour_of_day": hour,
                "score": assessment.score,
                "trace_id": get_trace_id(),
            },
        )
        return RouteSafetyResult(**assessment.to_dict())

    async def location_check(self, location: GeoPointIn, time_of_day: int | None) -> LocationCheckResult:
        now = self._clock()
        hour = now.hour if time_of_day is None else time_of_day
        check = check_location_safety(_to_point(location), hour_of_day=hour)
        if check.status != "safe":
            logger.info(
                "location_check_caution",
                extra={
                    "component": "safety_api",
                    "alerts": len(check.alerts),
                    "trace_id": get_trace_id(),
                },
            )
        return LocationCheckResult(
            safety_status=check.status,
            alerts=list(check.alerts),
            timestamp=now.isoformat(),
        )

    async def grid_summary(self, location: GeoPointIn, time_range: str) -> GridSummaryResult:
        summary = build_grid_summary(_to_point(location), time_range=time_range, rng=self._rng)
        return GridSummaryResult(
            tiles=[
                GridTileItem(
                    tile_code=tile.tile_code,
                    safety_level=tile.safety_level,
                    incident_count=tile.incident_count,
                    last_incident=tile.last_incident,
                    summary=tile.summary,
                    coordinates=Coordinates(lat=tile.coordinates.lat, lng=tile.coordinates.lng),
                    population=tile.population,
                    guardian_count=tile.guardian_count,
                )
                for tile in summary.tiles
            ],
            time_range=summary.time_range,
            last_updated=self._clock().isoformat(),
            total_tiles=len(summary.tiles),
            summary=GridLevelCounts(**summary.counts_by_level()),
        )

    def _resolve_hour(self, time_of_day: int | None) -> int:
        if time_of_day is not None:
            return time_of_day
        return self._clock().hour


def _to_point(item: GeoPointIn) -> GeoPoint:
    return GeoPoint(lat=item.lat, lng=item.lng)


def _to_hazard_zone(item: HazardZoneIn) -> HazardZone:
    return HazardZone(center=_to_point(item.center), radius_km=item.radius_km, label=item.label)
