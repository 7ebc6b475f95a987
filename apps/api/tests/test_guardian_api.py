import random
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from safety_api.app import create_app
from safety_api.dependencies import get_safety_service
from safety_api.services.safety_service import SafetyService


def _client() -> TestClient:
    app = create_app()
    service = SafetyService(
        clock=lambda: datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc),
        rng=random.Random(21),
    )
    app.dependency_overrides[get_safety_service] = lambda: service
    return TestClient(app)


def test_grid_summary_response_shape() -> None:
    client = _client()

    response = client.post(
        "/v1/guardian/grid-summary",
        json={"location": {"lat": 28.6139, "lng": 77.2090}, "time_range": "7d"},
    )
    body = response.json()
    data = body["data"]

    assert response.status_code == 200
    assert body["success"] is True
    assert data["total_tiles"] == 25
    assert len(data["tiles"]) == 25
    assert data["time_range"] == "7d"
    assert data["last_updated"].startswith("2026-10-19T09:00")
    assert sum(data["summary"].values()) == 25
    assert all(len(tile["tile_code"]) == 6 for tile in data["tiles"])


def test_grid_summary_defaults_time_range() -> None:
    client = _client()

    response = client.post("/v1/guardian/grid-summary", json={"location": {"lat": 28.6139, "lng": 77.2090}})

    assert response.status_code == 200
    assert response.json()["data"]["time_range"] == "24h"


def test_grid_summary_requires_location() -> None:
    client = _client()

    response = client.post("/v1/guardian/grid-summary", json={"time_range": "1h"})

    assert response.status_code == 422
    assert response.json()["success"] is False
