"""
API dependencies for FastAPI dependency injection.
Provides reusable dependencies for authentication and authorization.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_api.core.config import settings
from portfolio_api.core.logging import get_logger
from portfolio_api.schemas.token import AdminPrincipal
from portfolio_api.services.auth_gate import AuthGate
from portfolio_api.services.file_storage_service import FileStorageService, file_storage_service

logger = get_logger(__name__)

# auto_error=False so a missing header reaches the gate and yields 401, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_auth_gate() -> AuthGate:
    """Build the auth gate once from process configuration."""
    return AuthGate.from_settings(settings)


def get_file_storage() -> FileStorageService:
    return file_storage_service


def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[str]:
    """Extract the raw token from an ``Authorization: Bearer`` header, if any."""
    if credentials is None:
        return None
    return credentials.credentials


def get_current_admin(
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
    token: Annotated[Optional[str], Depends(get_bearer_token)],
) -> AdminPrincipal:
    """
    Dependency to ensure the caller holds a valid admin token.

    Args:
        gate: Auth gate built from configuration
        token: Bearer token from the Authorization header

    Returns:
        Decoded admin principal

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
        AuthorizationError: If the token's role is not admin
    """
    principal = gate.verify_admin(token)
    logger.debug(f"Admin access granted to user {principal.user_id}")
    return principal


AdminDep = Annotated[AdminPrincipal, Depends(get_current_admin)]
