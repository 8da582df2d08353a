from fastapi import FastAPI
from fastapi.testclient import TestClient

from careercraft.api.v1.health import router as health_router
from careercraft.main import app


def _registered_paths() -> set[str | None]:
    return {getattr(route, "path", None) for route in app.routes}


def test_careercraft_routes_are_registered() -> None:
    paths = _registered_paths()

    assert "/api/health" in paths
    assert "/api/ats/score" in paths
    assert "/api/chat/ask" in paths
    assert "/api/job-scrape" in paths
    assert "/api/history" in paths
    assert "/api/videos/search" in paths
    assert "/api/videos/id" in paths
    assert "/api/career/create-assessment" in paths
    assert "/api/career/submit-assessment" in paths
    assert "/api/resume/analyze" in paths
    assert "/api/jd/match" in paths


def test_health_endpoint_returns_healthy() -> None:
    test_app = FastAPI()
    test_app.include_router(health_router, prefix="/api")
    client = TestClient(test_app)

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
