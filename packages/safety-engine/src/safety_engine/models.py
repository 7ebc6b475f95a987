from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class HazardZone:
    center: GeoPoint
    radius_km: float
    label: str


@dataclass(frozen=True)
class EmergencyService:
    location: GeoPoint
    kind: str


@dataclass(frozen=True)
class WeightedCategory:
    label: str
    weight: float


@dataclass(frozen=True)
class SafetyAssessment:
    score: int
    warnings: tuple[str, ...]
    avoided_areas: tuple[str, ...]
    classification: str
    isolated_segments: int
    crowd_density: str
    emergency_proximity: str
    lighting_quality: str

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "warnings": list(self.warnings),
            "avoided_areas": list(self.avoided_areas),
            "analysis": {
                "time_of_day": self.classification,
                "isolated_segments": self.isolated_segments,
                "crowd_density": self.crowd_density,
                "emergency_proximity": self.emergency_proximity,
                "lighting_quality": self.lighting_quality,
            },
        }


@dataclass(frozen=True)
class LocationSafetyCheck:
    status: str
    alerts: tuple[str, ...]


@dataclass(frozen=True)
class GridTile:
    tile_code: str
    safety_level: str
    incident_count: int
    last_incident: str | None
    summary: str
    coordinates: GeoPoint
    population: int
    guardian_count: int


@dataclass(frozen=True)
class GridSummary:
    tiles: tuple[GridTile, ...]
    time_range: str
    counts: tuple[tuple[str, int], ...] = ()

    def counts_by_level(self) -> dict[str, int]:
        return dict(self.counts)
