from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from safety_api.dependencies import get_rate_limiter, get_safety_service
from safety_api.guards import call_with_guards
from safety_api.rate_limit import SlidingWindowRateLimiter
from safety_api.schemas.safety import GridSummaryRequest
from safety_api.services.safety_service import SafetyService

router = APIRouter(prefix="/v1/guardian", tags=["guardian"])


@router.post("/grid-summary")
async def grid_summary(
    request: Request,
    payload: GridSummaryRequest,
    service: SafetyService = Depends(get_safety_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
) -> dict:
    return await call_with_guards(
        request=request,
        rate_limiter=rate_limiter,
        action=lambda: service.grid_summary(payload.location, payload.time_range),
    )
