from pydantic import BaseModel, Field


class GeoPointIn(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Coordinates(BaseModel):
    lat: float
    lng: float


class GeoDistanceResult(BaseModel):
    distance_km: float


class TileCodeResult(BaseModel):
    tile_code: str
