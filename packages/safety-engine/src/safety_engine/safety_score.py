from __future__ import annotations

import math
from collections.abc import Sequence

from safety_engine.geofence import is_point_inside_radius
from safety_engine.hazards import DEFAULT_EMERGENCY_SERVICES, DEFAULT_HAZARD_ZONES
from safety_engine.models import EmergencyService, GeoPoint, HazardZone, SafetyAssessment

BASE_SCORE = 85
EMERGENCY_SERVICE_RADIUS_KM = 2.0

ISOLATED_POINT_THRESHOLD = 20
WELL_LIT_POINT_THRESHOLD = 70
ISOLATED_ROUTE_RATIO = 0.3
WELL_LIT_ROUTE_RATIO = 0.7

WARNING_LATE_NIGHT = "Late night travel - extra caution advised"
WARNING_EVENING = "Evening hours - stay in well-lit areas"
WARNING_ISOLATED = "Route passes through isolated areas - consider alternative"
WARNING_INCIDENTS = "Route passes near areas with recent safety incidents"
WARNING_LOW_FOOT_TRAFFIC = "Route has low foot traffic - stay alert"
WARNING_LIMITED_EMERGENCY = "Limited emergency services coverage on this route"

AVOIDED_INDUSTRIAL = "Industrial zones with poor lighting"
AVOIDED_DARK_PATHS = "Dark alleys and unlit paths"


def assess_route_safety(
    waypoints: Sequence[GeoPoint],
    hour_of_day: int,
    hazards: Sequence[HazardZone] = DEFAULT_HAZARD_ZONES,
    emergency_services: Sequence[EmergencyService] = DEFAULT_EMERGENCY_SERVICES,
) -> SafetyAssessment:
    """Score a route from 0 (avoid) to 100 (safe).

    Starts from ``BASE_SCORE`` and applies independent adjustments in a fixed
    order: time of day, isolation, hazard proximity, lighting, crowd density,
    emergency coverage. Warnings follow the same order.
    """
    _validate_hour(hour_of_day)
    score = BASE_SCORE
    warnings: list[str] = []
    avoided_areas: list[str] = []
    route_length = len(waypoints)

    classification = classify_time_of_day(hour_of_day)
    if classification == "night":
        score -= 15
        warnings.append(WARNING_LATE_NIGHT)
    elif classification == "evening":
        score -= 5
        warnings.append(WARNING_EVENING)

    isolated_segments = sum(1 for point in waypoints if is_isolated_point(point))
    if isolated_segments > route_length * ISOLATED_ROUTE_RATIO:
        score -= 20
        warnings.append(WARNING_ISOLATED)
        avoided_areas.append(AVOIDED_INDUSTRIAL)

    triggered = triggered_hazard_labels(waypoints, hazards)
    if triggered:
        score -= 15
        warnings.append(WARNING_INCIDENTS)
        avoided_areas.extend(triggered)

    well_lit_segments = sum(1 for point in waypoints if is_well_lit_point(point))
    well_lit = well_lit_segments > route_length * WELL_LIT_ROUTE_RATIO
    if well_lit:
        score += 10
        avoided_areas.append(AVOIDED_DARK_PATHS)

    crowd_density = classify_crowd_density(hour_of_day)
    if crowd_density == "high":
        score += 5
    elif crowd_density == "low":
        score -= 10
        warnings.append(WARNING_LOW_FOOT_TRAFFIC)

    emergency_proximity = classify_emergency_proximity(waypoints, emergency_services)
    if emergency_proximity == "good":
        score += 5
    elif emergency_proximity == "poor":
        score -= 5
        warnings.append(WARNING_LIMITED_EMERGENCY)

    return SafetyAssessment(
        score=round(max(0, min(100, score))),
        warnings=tuple(warnings),
        avoided_areas=tuple(avoided_areas),
        classification=classification,
        isolated_segments=isolated_segments,
        crowd_density=crowd_density,
        emergency_proximity=emergency_proximity,
        lighting_quality="good" if well_lit else "poor",
    )


def classify_time_of_day(hour_of_day: int) -> str:
    if hour_of_day >= 22 or hour_of_day <= 5:
        return "night"
    if 18 <= hour_of_day <= 21:
        return "evening"
    return "day"


def classify_crowd_density(hour_of_day: int) -> str:
    if 9 <= hour_of_day <= 18:
        return "high"
    if 18 <= hour_of_day <= 22:
        return "medium"
    return "low"


def coordinate_hash(point: GeoPoint) -> float:
    # Placeholder for real POI and street-lighting data; stable per coordinate.
    return abs(math.sin(point.lat * point.lng) * 10000) % 100


def is_isolated_point(point: GeoPoint) -> bool:
    return coordinate_hash(point) < ISOLATED_POINT_THRESHOLD


def is_well_lit_point(point: GeoPoint) -> bool:
    return coordinate_hash(point) < WELL_LIT_POINT_THRESHOLD


def triggered_hazard_labels(
    waypoints: Sequence[GeoPoint],
    hazards: Sequence[HazardZone],
) -> list[str]:
    labels: list[str] = []
    for point in waypoints:
        for hazard in hazards:
            if hazard.label in labels:
                continue
            if is_point_inside_radius(hazard.center, point, hazard.radius_km):
                labels.append(hazard.label)
    return labels


def classify_emergency_proximity(
    waypoints: Sequence[GeoPoint],
    emergency_services: Sequence[EmergencyService],
) -> str:
    if not waypoints:
        return "poor"
    covered = sum(
        1
        for point in waypoints
        if any(
            is_point_inside_radius(service.location, point, EMERGENCY_SERVICE_RADIUS_KM)
            for service in emergency_services
        )
    )
    coverage = covered / len(waypoints)
    if coverage > 0.7:
        return "good"
    if coverage > 0.4:
        return "fair"
    return "poor"


def _validate_hour(hour_of_day: int) -> None:
    if hour_of_day < 0 or hour_of_day > 23:
        raise ValueError("hour_of_day must be between 0 and 23")
