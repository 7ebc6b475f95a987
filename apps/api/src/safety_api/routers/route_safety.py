from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from safety_api.dependencies import get_rate_limiter, get_safety_service
from safety_api.guards import call_with_guards
from safety_api.rate_limit import SlidingWindowRateLimiter
from safety_api.schemas.safety import LocationCheckRequest, RouteSafetyRequest
from safety_api.services.safety_service import SafetyService

router = APIRouter(prefix="/v1/route", tags=["route"])


@router.post("/safety-analysis")
async def safety_analysis(
    request: Request,
    payload: RouteSafetyRequest,
    service: SafetyService = Depends(get_safety_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> dict:
    return await call_with_guards(
        request=request,
        rate_limiter=rate_limiter,
        action=lambda: service.route_safety(
            route=payload.route,
            time_of_day=payload.time_of_day,
            hazards=payload.hazards,
        ),
    )


@router.post("/location-check")
async def location_check(
    request: Request,
    payload: LocationCheckRequest,
    service: SafetyService = Depends(get_safety_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> dict:
    return await call_with_guards(
        request=request,
        rate_limiter=rate_limiter,
        action=lambda: service.location_check(payload.location, payload.time_of_day),
    )
