"""Pydantic schemas for request/response validation."""

from portfolio_api.schemas.token import AdminPrincipal, LoginResponse
from portfolio_api.schemas.user import UserCreate, UserLogin, UserPublic, UserResponse

__all__ = ["AdminPrincipal", "LoginResponse", "UserCreate", "UserLogin", "UserPublic", "UserResponse"]
