from safety_engine.models import EmergencyService, GeoPoint, HazardZone

DEFAULT_HAZARD_ZONES: tuple[HazardZone, ...] = (
    HazardZone(center=GeoPoint(lat=28.6562, lng=77.2410), radius_km=0.5, label="Yamuna Bank area"),
    HazardZone(center=GeoPoint(lat=28.5653, lng=77.2434), radius_km=0.5, label="Lajpat Nagar late hours"),
)

DEFAULT_UNSAFE_AREAS: tuple[HazardZone, ...] = (
    HazardZone(center=GeoPoint(lat=28.6562, lng=77.2410), radius_km=0.5, label="Yamuna Bank area"),
    HazardZone(center=GeoPoint(lat=28.5653, lng=77.2434), radius_km=0.3, label="Lajpat Nagar"),
)

DEFAULT_EMERGENCY_SERVICES: tuple[EmergencyService, ...] = (
    EmergencyService(location=GeoPoint(lat=28.6315, lng=77.2167), kind="police"),
    EmergencyService(location=GeoPoint(lat=28.5672, lng=77.2100), kind="hospital"),
    EmergencyService(location=GeoPoint(lat=28.6247, lng=77.2442), kind="police"),
)
