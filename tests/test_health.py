"""
Tests for health check endpoints and app wiring.
"""

from fastapi.testclient import TestClient

from portfolio_api.core.config import settings


def test_health_check(client: TestClient) -> None:
    """Test basic health check."""
    response = client.get(f"{settings.API_PREFIX}/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "uploads_writable": True,
    }


def test_database_health_check(client: TestClient) -> None:
    """Test database health check."""
    response = client.get(f"{settings.API_PREFIX}/health/db")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"
    assert data["dialect"] == "sqlite"


def test_openapi_served_under_api_prefix(client: TestClient) -> None:
    response = client.get(f"{settings.API_PREFIX}/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert f"{settings.API_PREFIX}/auth/login" in paths
    assert f"{settings.API_PREFIX}/experience/journey" in paths
