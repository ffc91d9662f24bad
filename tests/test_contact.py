"""
Tests for contact submissions and the admin inbox.
"""

from fastapi.testclient import TestClient

from portfolio_api.core.config import settings


def _submit(client: TestClient, name: str = "Visitor", message: str = "Hello there") -> dict:
    response = client.post(
        f"{settings.API_PREFIX}/contact",
        json={"name": name, "email": "visitor@example.com", "message": message},
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_public_submit(client: TestClient) -> None:
    data = _submit(client)
    assert data["message"] == "Your message has been successfully submitted!"
    assert data["submission"]["name"] == "Visitor"
    assert data["submission"]["email"] == "visitor@example.com"


def test_submit_blank_message_rejected(client: TestClient) -> None:
    response = client.post(
        f"{settings.API_PREFIX}/contact",
        json={"name": "Visitor", "email": "visitor@example.com", "message": "   "},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Name, email, and message are required fields."


def test_submit_invalid_email_rejected(client: TestClient) -> None:
    response = client.post(
        f"{settings.API_PREFIX}/contact",
        json={"name": "Visitor", "email": "not-an-email", "message": "Hi"},
    )
    assert response.status_code == 400


def test_list_requires_admin(client: TestClient, user_token: str) -> None:
    _submit(client)
    assert client.get(f"{settings.API_PREFIX}/contact").status_code == 401
    response = client.get(
        f"{settings.API_PREFIX}/contact",
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403


def test_admin_lists_submissions(client: TestClient, admin_headers: dict) -> None:
    _submit(client, name="First")
    _submit(client, name="Second")

    response = client.get(f"{settings.API_PREFIX}/contact", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert {c["name"] for c in data["contacts"]} == {"First", "Second"}


def test_admin_deletes_submission(client: TestClient, admin_headers: dict) -> None:
    submission = _submit(client)["submission"]

    response = client.delete(f"{settings.API_PREFIX}/contact/{submission['id']}", headers=admin_headers)
    assert response.status_code == 204

    missing = client.delete(f"{settings.API_PREFIX}/contact/{submission['id']}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Contact submission not found"
