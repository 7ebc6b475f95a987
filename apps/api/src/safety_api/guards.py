from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from pydantic import BaseModel
from starlette.requests import Request

from safety_api.errors import ApiError
from safety_api.observability import get_trace_id
from safety_api.rate_limit import SlidingWindowRateLimiter, resolve_client_key
from safety_api.response import success_response

logger = logging.getLogger(__name__)


async def call_with_guards(
    request: Request,
    rate_limiter: SlidingWindowRateLimiter,
    action: Callable[[], Awaitable[BaseModel]],
) -> dict:
    allowed = await rate_limiter.allow(resolve_client_key(request), now_seconds=time.time())
    if not allowed:
        raise ApiError.rate_limited()
    try:
        data = await action()
    except ValueError as exc:
        raise ApiError.validation(str(exc)) from exc
    except Exception as exc:
        logger.exception(
            "safety_action_failed",
            extra={"component": "safety_api", "path": request.url.path, "trace_id": get_trace_id()},
        )
        raise ApiError("INTERNAL_ERROR", "Safety service failed", 500) from exc
    return success_response(data.model_dump(), meta={})
