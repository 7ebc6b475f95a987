from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from safety_api.dependencies import get_rate_limiter, get_safety_service
from safety_api.guards import call_with_guards
from safety_api.rate_limit import SlidingWindowRateLimiter
from safety_api.services.safety_service import SafetyService

router = APIRouter(prefix="/v1/geo", tags=["geo"])


@router.get("/distance")
async def distance(
    request: Request,
    origin_lat: float = Query(..., ge=-90, le=90),
    origin_lng: float = Query(..., ge=-180, le=180),
    target_lat: float = Query(..., ge=-90, le=90),
    target_lng: float = Query(..., ge=-180, le=180),
    service: SafetyService = Depends(get_safety_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> dict:
    return await call_with_guards(
        request=request,
        rate_limiter=rate_limiter,
        action=lambda: service.distance_km(origin_lat, origin_lng, target_lat, target_lng),
    )


@router.get("/tile-code")
async def tile_code(
    request: Request,
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180),
    service: SafetyService = Depends(get_safety_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> dict:
    return await call_with_guards(
        request=request,
        rate_limiter=rate_limiter,
        action=lambda: service.tile_code(lat, lng),
    )
