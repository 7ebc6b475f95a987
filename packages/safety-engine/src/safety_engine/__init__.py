"""Geospatial safety scoring core package."""

from safety_engine.distance import haversine_distance_km
from safety_engine.geofence import is_point_inside_radius
from safety_engine.grid import build_grid_summary
from safety_engine.location_check import check_location_safety
from safety_engine.models import (
    EmergencyService,
    GeoPoint,
    GridSummary,
    GridTile,
    HazardZone,
    LocationSafetyCheck,
    SafetyAssessment,
    WeightedCategory,
)
from safety_engine.safety_score import assess_route_safety, classify_time_of_day
from safety_engine.sampling import pick_category, weighted_random
from safety_engine.tiles import tile_code

__all__ = [
    "GeoPoint",
    "HazardZone",
    "EmergencyService",
    "WeightedCategory",
    "SafetyAssessment",
    "LocationSafetyCheck",
    "GridTile",
    "GridSummary",
    "haversine_distance_km",
    "is_point_inside_radius",
    "tile_code",
    "assess_route_safety",
    "classify_time_of_day",
    "check_location_safety",
    "weighted_random",
    "pick_category",
    "build_grid_summary",
]
