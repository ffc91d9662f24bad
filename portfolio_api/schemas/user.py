"""
User schemas for API request/response validation.
Separates internal models from API contracts using Pydantic.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr

from portfolio_api.models.user import UserRole


class UserCreate(BaseModel):
    """Schema for user registration."""

    name: str
    email: EmailStr
    password: str
    role: Optional[UserRole] = None


class UserLogin(BaseModel):
    """Schema for user login."""

    email: EmailStr
    password: str


class UserResponse(BaseModel):
    """
    Schema for user data in API responses.
    Excludes sensitive information like hashed_password.
    """

    id: str
    name: str
    email: str
    role: UserRole
    created_at: datetime

    model_config = {"from_attributes": True}


class UserPublic(BaseModel):
    """Projection returned alongside a login token."""

    id: str
    name: str
    email: str
    role: UserRole

    model_config = {"from_attributes": True}
