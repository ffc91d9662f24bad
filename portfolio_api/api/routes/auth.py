"""
Authentication routes for user registration and login.
Provides JWT token-based authentication.

Handlers are plain ``def`` functions, so FastAPI runs them (and their bcrypt
work) on its worker threadpool instead of the event loop.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from portfolio_api.api.deps import get_auth_gate, get_bearer_token
from portfolio_api.core.config import settings
from portfolio_api.core.logging import get_logger
from portfolio_api.db.session import get_session
from portfolio_api.schemas.token import LoginResponse
from portfolio_api.schemas.user import UserCreate, UserLogin, UserResponse
from portfolio_api.services.auth_gate import AuthGate
from portfolio_api.services.user_service import UserService

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: UserCreate,
    session: Annotated[Session, Depends(get_session)],
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
    token: Annotated[Optional[str], Depends(get_bearer_token)],
) -> UserResponse:
    """
    Register a new user.

    Self-registration always gets the configured default role. Asking for
    any other role requires an admin bearer token.

    Raises:
        ValidationError: If a required field is blank
        ConflictError: If the email is already registered
        AuthenticationError / AuthorizationError: If a non-default role is
            requested without an admin token
    """
    if user_in.role is not None and user_in.role != settings.REGISTRATION_DEFAULT_ROLE:
        admin = gate.verify_admin(token)
        logger.info(f"Admin {admin.user_id} assigning role {user_in.role.value} at registration")

    user = UserService.register(
        session,
        name=user_in.name,
        email=user_in.email,
        password=user_in.password,
        role=user_in.role,
    )
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    session: Annotated[Session, Depends(get_session)],
    gate: Annotated[AuthGate, Depends(get_auth_gate)],
) -> LoginResponse:
    """
    Exchange email and password for a bearer token.

    Raises:
        AuthenticationError: Same message for unknown email and wrong password
    """
    return gate.login(session, email=credentials.email, password=credentials.password)
