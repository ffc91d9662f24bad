"""
Pytest configuration and fixtures.
Provides test database, client, and common test utilities.
"""

import os
import tempfile

# Fixture configuration must be in place before the app and settings are imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DISABLE_BOOTSTRAP_USERS"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portfolio-uploads-")

from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

from portfolio_api.api.deps import get_auth_gate  # noqa: E402
from portfolio_api.core.config import settings  # noqa: E402
from portfolio_api.db.session import get_session  # noqa: E402
from portfolio_api.main import app  # noqa: E402
from portfolio_api.models.user import User, UserRole  # noqa: E402
from portfolio_api.services.auth_gate import AuthGate  # noqa: E402
from portfolio_api.services.user_service import UserService  # noqa: E402


@pytest.fixture(name="session")
def session_fixture() -> Generator[Session, None, None]:
    """
    Create a test database session.
    Uses an in-memory SQLite database for fast tests.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with dependency overrides.
    """

    def get_session_override() -> Generator[Session, None, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(name="gate")
def gate_fixture() -> AuthGate:
    """The same gate instance the app uses."""
    return get_auth_gate()


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session) -> User:
    """
    Create a regular (non-admin) user.
    """
    return UserService.register(
        session,
        name="Test User",
        email="test@example.com",
        password="testpassword123",
        role=UserRole.USER,
    )


@pytest.fixture(name="test_admin")
def test_admin_fixture(session: Session) -> User:
    """
    Create a test admin user.
    """
    return UserService.register(
        session,
        name="Admin User",
        email="admin@example.com",
        password="adminpassword123",
        role=UserRole.ADMIN,
    )


@pytest.fixture(name="user_token")
def user_token_fixture(client: TestClient, test_user: User) -> str:
    """
    Get an access token for a regular user.
    """
    response = client.post(
        f"{settings.API_PREFIX}/auth/login",
        json={"email": "test@example.com", "password": "testpassword123"},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture(name="admin_token")
def admin_token_fixture(client: TestClient, test_admin: User) -> str:
    """
    Get an access token for an admin user.
    """
    response = client.post(
        f"{settings.API_PREFIX}/auth/login",
        json={"email": "admin@example.com", "password": "adminpassword123"},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}
