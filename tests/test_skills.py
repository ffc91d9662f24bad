"""
Tests for skill endpoints.
"""

from fastapi.testclient import TestClient

from portfolio_api.core.config import settings


def _create_skill(client: TestClient, headers: dict, name: str, category: str = "BACKEND", **extra) -> dict:
    response = client.post(
        f"{settings.API_PREFIX}/skills",
        json={"name": name, "category": category, **extra},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_skill(client: TestClient, admin_headers: dict) -> None:
    skill = _create_skill(client, admin_headers, "Python", level=90)
    assert skill["name"] == "Python"
    assert skill["category"] == "BACKEND"
    assert skill["level"] == 90


def test_create_skill_lowercase_category(client: TestClient, admin_headers: dict) -> None:
    skill = _create_skill(client, admin_headers, "React", category="frontend")
    assert skill["category"] == "FRONTEND"


def test_create_skill_unknown_category(client: TestClient, admin_headers: dict) -> None:
    response = client.post(
        f"{settings.API_PREFIX}/skills",
        json={"name": "Cooking", "category": "KITCHEN"},
        headers=admin_headers,
    )
    assert response.status_code == 400


def test_list_skills_paginated(client: TestClient, admin_headers: dict) -> None:
    for name in ["Go", "Rust", "Python"]:
        _create_skill(client, admin_headers, name)

    response = client.get(f"{settings.API_PREFIX}/skills", params={"page": 1, "limit": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["page"] == 1
    assert data["limit"] == 2
    assert [s["name"] for s in data["skills"]] == ["Go", "Python"]

    page2 = client.get(f"{settings.API_PREFIX}/skills", params={"page": 2, "limit": 2}).json()
    assert [s["name"] for s in page2["skills"]] == ["Rust"]


def test_list_skills_by_category(client: TestClient, admin_headers: dict) -> None:
    _create_skill(client, admin_headers, "Python", category="BACKEND")
    _create_skill(client, admin_headers, "Docker", category="DEVOPS")

    data = client.get(f"{settings.API_PREFIX}/skills", params={"category": "devops"}).json()
    assert data["total"] == 1
    assert data["skills"][0]["name"] == "Docker"


def test_list_skills_invalid_query(client: TestClient) -> None:
    assert client.get(f"{settings.API_PREFIX}/skills", params={"category": "nope"}).status_code == 400
    assert client.get(f"{settings.API_PREFIX}/skills", params={"page": 0}).status_code == 400


def test_update_skill_partial(client: TestClient, admin_headers: dict) -> None:
    skill = _create_skill(client, admin_headers, "SQL", category="DATABASE", level=50)
    response = client.put(
        f"{settings.API_PREFIX}/skills/{skill['id']}",
        json={"level": 80},
        headers=admin_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["level"] == 80
    assert data["name"] == "SQL"
    assert data["category"] == "DATABASE"


def test_update_missing_skill(client: TestClient, admin_headers: dict) -> None:
    response = client.put(
        f"{settings.API_PREFIX}/skills/missing",
        json={"level": 10},
        headers=admin_headers,
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Skill not found"


def test_delete_skill(client: TestClient, admin_headers: dict) -> None:
    skill = _create_skill(client, admin_headers, "Vim", category="TOOLS")

    response = client.delete(f"{settings.API_PREFIX}/skills/{skill['id']}", headers=admin_headers)
    assert response.status_code == 204
    assert response.content == b""

    again = client.delete(f"{settings.API_PREFIX}/skills/{skill['id']}", headers=admin_headers)
    assert again.status_code == 404


def test_skill_writes_require_admin(client: TestClient, user_token: str) -> None:
    response = client.delete(
        f"{settings.API_PREFIX}/skills/anything",
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403
