"""
Security utilities for password hashing and JWT token management.

Passwords are hashed with bcrypt through passlib. Token helpers take the
signing secret as an argument; only ``AuthGate`` decides which secret to use.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt
from passlib.context import CryptContext

from portfolio_api.core.config import settings

# bcrypt only reads the first 72 bytes of input
BCRYPT_MAX_PASSWORD_BYTES = 72

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def create_access_token(
    claims: dict[str, Any],
    secret_key: str,
    algorithm: str,
    expires_delta: timedelta,
    issued_at: datetime | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        claims: Extra claims to embed (sub, role, email)
        secret_key: Signing secret
        algorithm: JWS algorithm, e.g. HS256
        expires_delta: Token lifetime
        issued_at: Issue time; defaults to now

    Returns:
        Encoded JWT token string
    """
    iat = issued_at or datetime.now(timezone.utc)
    to_encode = {**claims, "iat": iat, "exp": iat + expires_delta}
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str) -> dict[str, Any]:
    """
    Decode and validate a JWT; raises jose.JWTError on bad signature or expiry.
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm])


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def dummy_verify() -> None:
    """Spend one hash verification's worth of work when there is no user to check."""
    pwd_context.dummy_verify()


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt with the configured cost.

    Args:
        password: Plain text password

    Returns:
        Hashed password string
    """
    return pwd_context.hash(password)
