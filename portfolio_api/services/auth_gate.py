"""
Auth gate: issues bearer tokens on login and verifies them before admin-only
operations.

The gate is built from explicit configuration (secret, algorithm, lifetime)
and never reads settings while handling a request. Verification is purely
signature and claim based; it does not consult the credential store, so a
role change only applies once previously issued tokens expire.
"""

from datetime import datetime, timedelta
from typing import Optional

from jose import ExpiredSignatureError, JWTError
from sqlmodel import Session

from portfolio_api.core.config import Settings
from portfolio_api.core.exceptions import AuthenticationError, AuthorizationError
from portfolio_api.core.logging import get_logger
from portfolio_api.core.security import (
    create_access_token,
    decode_access_token,
    dummy_verify,
    verify_password,
)
from portfolio_api.models.user import User, UserRole
from portfolio_api.schemas.token import AdminPrincipal, LoginResponse
from portfolio_api.schemas.user import UserPublic
from portfolio_api.services.user_service import UserService

logger = get_logger(__name__)

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid credentials"
MISSING_TOKEN = "Access denied. No token provided."
INVALID_TOKEN = "Invalid or expired token"
ADMIN_REQUIRED = "Only admin can access this route"

DEFAULT_TOKEN_LIFETIME = timedelta(days=7)


class AuthGate:
    """Authenticates credentials and authorizes admin-only operations."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        token_lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
    ):
        if not secret_key or not secret_key.strip():
            raise ValueError("AuthGate requires a non-empty secret key")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.token_lifetime = token_lifetime

    @classmethod
    def from_settings(cls, config: Settings) -> "AuthGate":
        return cls(
            secret_key=config.SECRET_KEY,
            algorithm=config.ALGORITHM,
            token_lifetime=timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    def create_token(self, user: User, issued_at: Optional[datetime] = None) -> str:
        """
        Mint a signed token for a user.

        Args:
            user: Authenticated user
            issued_at: Issue time; defaults to now

        Returns:
            Encoded JWT carrying sub, role and email claims
        """
        claims = {
            "sub": str(user.id),
            "role": UserRole(user.role).value,
            "email": user.email,
        }
        return create_access_token(
            claims,
            secret_key=self._secret_key,
            algorithm=self.algorithm,
            expires_delta=self.token_lifetime,
            issued_at=issued_at,
        )

    def login(self, session: Session, email: str, password: str) -> LoginResponse:
        """
        Authenticate a user by email and password.

        Both the unknown-email and wrong-password paths run one bcrypt
        verification and raise the same error.

        Args:
            session: Database session backing the credential store
            email: Email as typed by the user
            password: Plain text password

        Returns:
            Token plus sanitized user projection

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        normalized = UserService.normalize_email(email)
        user = UserService.get_by_email(session, normalized)

        if user is None:
            dummy_verify()
            logger.warning(f"Failed login attempt for email: {normalized}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Failed login attempt for email: {normalized}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.create_token(user)
        logger.info(f"User logged in: {user.email} (ID: {user.id})")
        return LoginResponse(token=token, user=UserPublic.model_validate(user))

    def verify_admin(self, token: Optional[str]) -> AdminPrincipal:
        """
        Verify a bearer token and require the admin role.

        Raises:
            AuthenticationError: Missing token, bad signature, expired token or no subject
            AuthorizationError: Valid token whose role is not admin
        """
        if not token:
            raise AuthenticationError(MISSING_TOKEN)

        try:
            payload = decode_access_token(token, self._secret_key, self.algorithm)
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthenticationError(INVALID_TOKEN)
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError(INVALID_TOKEN)

        user_id = payload.get("sub")
        if not user_id:
            logger.warning("Token missing subject claim")
            raise AuthenticationError(INVALID_TOKEN)

        role = payload.get("role")
        if role != UserRole.ADMIN.value:
            logger.warning(f"Non-admin user {user_id} attempted admin access")
            raise AuthorizationError(ADMIN_REQUIRED)

        return AdminPrincipal(user_id=user_id, role=role, email=payload.get("email"))
