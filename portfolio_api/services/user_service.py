"""
User service layer: the credential store.
Persists and retrieves user identity records and enforces email uniqueness.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from portfolio_api.core.config import settings
from portfolio_api.core.exceptions import ConflictError, ValidationError
from portfolio_api.core.logging import get_logger
from portfolio_api.core.security import BCRYPT_MAX_PASSWORD_BYTES, get_password_hash
from portfolio_api.models.user import User, UserRole

logger = get_logger(__name__)


class UserService:
    """Service class for user-related operations."""

    @staticmethod
    def normalize_email(email: str) -> str:
        """Emails are stored and looked up lowercased."""
        return email.strip().lower()

    @staticmethod
    def get_by_email(session: Session, email: str) -> Optional[User]:
        """
        Retrieve a user by an already-normalized email address.

        Args:
            session: Database session
            email: Normalized email address to search for

        Returns:
            User if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return session.exec(statement).first()

    @staticmethod
    def get_by_id(session: Session, user_id: str) -> Optional[User]:
        return session.get(User, user_id)

    @staticmethod
    def register(
        session: Session,
        name: str,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> User:
        """
        Create a new user with a hashed password.

        Args:
            session: Database session
            name: Display name
            email: Email address, normalized before lookup and write
            password: Plain text password
            role: User role; defaults to REGISTRATION_DEFAULT_ROLE

        Returns:
            Created user instance

        Raises:
            ValidationError: If a required field is blank or the password is too long
            ConflictError: If the normalized email is already registered
        """
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if not email or not email.strip():
            raise ValidationError("Email is required")
        if not password or not password.strip():
            raise ValidationError("Password is required")
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")

        normalized = UserService.normalize_email(email)
        if UserService.get_by_email(session, normalized):
            logger.warning(f"Registration attempt with existing email: {normalized}")
            raise ConflictError("Email already registered")

        db_user = User(
            email=normalized,
            name=name.strip(),
            hashed_password=get_password_hash(password),
            role=role or settings.REGISTRATION_DEFAULT_ROLE,
        )
        session.add(db_user)
        try:
            session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration; the unique index decides.
            session.rollback()
            logger.warning(f"Concurrent registration rejected for email: {normalized}")
            raise ConflictError("Email already registered") from e
        session.refresh(db_user)
        logger.info(f"New user registered: {db_user.email} (ID: {db_user.id}, role: {db_user.role.value})")
        return db_user
