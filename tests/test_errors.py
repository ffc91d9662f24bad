"""
Tests for error mapping on the HTTP surface.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from portfolio_api.core.config import settings
from portfolio_api.db.session import get_session
from portfolio_api.main import app
from portfolio_api.services.skill_service import SkillService


def test_unexpected_error_is_generic_500(session: Session, monkeypatch: pytest.MonkeyPatch) -> None:
    """Internal failures are logged server-side and reported without detail."""

    def broken_list(self, *args, **kwargs):
        raise RuntimeError("connection string postgres://secret@db")

    monkeypatch.setattr(SkillService, "list", broken_list)
    app.dependency_overrides[get_session] = lambda: session
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"{settings.API_PREFIX}/skills")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "secret" not in response.text


def test_unknown_route_is_404(client: TestClient) -> None:
    assert client.get(f"{settings.API_PREFIX}/nothing-here").status_code == 404


def test_malformed_json_is_400(client: TestClient) -> None:
    response = client.post(
        f"{settings.API_PREFIX}/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
