import pytest
from fastapi.testclient import TestClient

from safety_api.app import create_app
from safety_api.dependencies import get_rate_limiter
from safety_api.rate_limit import InMemoryRateLimitStore, SlidingWindowRateLimiter


@pytest.mark.asyncio
async def test_rate_limiter_blocks_after_limit() -> None:
    limiter = SlidingWindowRateLimiter(InMemoryRateLimitStore(), limit_per_minute=2, window_seconds=60)
    now = 1000.0

    assert await limiter.allow("client-a", now) is True
    assert await limiter.allow("client-a", now + 1) is True
    assert await limiter.allow("client-a", now + 2) is False
    assert await limiter.allow("client-b", now + 2) is True


@pytest.mark.asyncio
async def test_rate_limiter_allows_new_window() -> None:
    limiter = SlidingWindowRateLimiter(InMemoryRateLimitStore(), limit_per_minute=1, window_seconds=60)
    now = 1000.0

    assert await limiter.allow("client-a", now) is True
    assert await limiter.allow("client-a", now + 61) is True


def test_api_returns_429_when_limit_exceeded() -> None:
    app = create_app()
    limiter = SlidingWindowRateLimiter(InMemoryRateLimitStore(), limit_per_minute=1, window_seconds=60)
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    client = TestClient(app)

    first = client.get("/v1/geo/tile-code?lat=28.6139&lng=77.2090", headers={"x-client-id": "phone-1"})
    second = client.get("/v1/geo/tile-code?lat=28.6139&lng=77.2090", headers={"x-client-id": "phone-1"})
    other = client.get("/v1/geo/tile-code?lat=28.6139&lng=77.2090", headers={"x-client-id": "phone-2"})

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
    assert other.status_code == 200


@pytest.mark.asyncio
async def test_in_memory_store_forgets_idle_clients() -> None:
    store = InMemoryRateLimitStore()
    limiter = SlidingWindowRateLimiter(store, limit_per_minute=5, window_seconds=60)
    for index in range(50):
        assert await limiter.allow(f"rotating-{index}", 1000.0) is True
    assert store.tracked_keys() == 50

    for index in range(50):
        assert await store.count_since(f"rotating-{index}", 2000.0) == 0
    assert await store.count_since("never-seen", 2000.0) == 0
    assert store.tracked_keys() == 0
