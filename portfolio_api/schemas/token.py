"""
Token schemas for JWT authentication.
"""

from pydantic import BaseModel

from portfolio_api.schemas.user import UserPublic


class LoginResponse(BaseModel):
    """Schema for a successful login."""

    token: str
    user: UserPublic


class AdminPrincipal(BaseModel):
    """Identity decoded from a verified admin token."""

    user_id: str
    role: str
    email: str | None = None
