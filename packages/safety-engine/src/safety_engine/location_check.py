from __future__ import annotations

from collections.abc import Sequence

from safety_engine.geofence import is_point_inside_radius
from safety_engine.hazards import DEFAULT_UNSAFE_AREAS
from safety_engine.models import GeoPoint, HazardZone, LocationSafetyCheck
from safety_engine.safety_score import classify_time_of_day

ALERT_LATE_NIGHT = "Late night travel detected - extra caution advised"


def check_location_safety(
    location: GeoPoint,
    hour_of_day: int,
    unsafe_areas: Sequence[HazardZone] = DEFAULT_UNSAFE_AREAS,
) -> LocationSafetyCheck:
    alerts: list[str] = []
    status = "safe"
    for area in unsafe_areas:
        if is_point_inside_radius(area.center, location, area.radius_km):
            alerts.append(f"Approaching unsafe area: {area.label}")
            status = "caution"
    if classify_time_of_day(hour_of_day) == "night":
        alerts.append(ALERT_LATE_NIGHT)
        status = "caution"
    return LocationSafetyCheck(status=status, alerts=tuple(alerts))
