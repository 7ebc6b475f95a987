from __future__ import annotations

from safety_devkit.config import ServiceSettings, load_settings

from safety_api.rate_limit import InMemoryRateLimitStore, SlidingWindowRateLimiter
from safety_api.services.safety_service import SafetyService

_settings = load_settings("hersafety-api")
_safety_service = SafetyService(timezone_name=_settings.APP_TIMEZONE)
_rate_limiter = SlidingWindowRateLimiter(
    InMemoryRateLimitStore(),
    limit_per_minute=_settings.RATE_LIMIT_PER_MINUTE,
    window_seconds=_settings.RATE_LIMIT_WINDOW_SECONDS,
)


def get_settings() -> ServiceSettings:
    return _settings


def get_safety_service() -> SafetyService:
    return _safety_service


def get_rate_limiter() -> SlidingWindowRateLimiter:
    return _rate_limiter
