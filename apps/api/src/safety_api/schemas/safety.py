from pydantic import BaseModel, Field

from safety_api.schemas.geo import Coordinates, GeoPointIn


class HazardZoneIn(BaseModel):
    center: GeoPointIn
    radius_km: float = Field(..., ge=0)
    label: str = Field(..., min_length=1)


class RouteSafetyRequest(BaseModel):
    route: list[GeoPointIn] = Field(default_factory=list)
    time_of_day: int | None = Field(default=None, ge=0, le=23)
    hazards: list[HazardZoneIn] | None = None


class SafetyAnalysisDetail(BaseModel):
    time_of_day: str
    isolated_segments: int
    crowd_density: str
    emergency_proximity: str
    lighting_quality: str


class RouteSafetyResult(BaseModel):
    score: int
    warnings: list[str]
    avoided_areas: list[str]
    analysis: SafetyAnalysisDetail


class LocationCheckRequest(BaseModel):
    location: GeoPointIn
    time_of_day: int | None = Field(default=None, ge=0, le=23)


class LocationCheckResult(BaseModel):
    safety_status: str
    alerts: list[str]
    timestamp: str


class GridSummaryRequest(BaseModel):
    location: GeoPointIn
    time_range: str = "24h"


class GridTileItem(BaseModel):
    tile_code: str
    safety_level: str
    incident_count: int
    last_incident: str | None
    summary: str
    coordinates: Coordinates
    population: int
    guardian_count: int


class GridLevelCounts(BaseModel):
    safe: int
    monitored: int
    caution: int
    danger: int


class GridSummaryResult(BaseModel):
    tiles: list[GridTileItem]
    time_range: str
    last_updated: str
    total_tiles: int
    summary: GridLevelCounts
