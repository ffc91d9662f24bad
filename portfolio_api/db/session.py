"""
Database engine and session management using SQLModel.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from portfolio_api.core.config import settings

# Imported for their side effect of registering tables on SQLModel.metadata
from portfolio_api.models import contact, experience, profile, project, skill, user  # noqa: F401


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for a SQLite or PostgreSQL URL.

    SQLite connections are shared with FastAPI's worker threads and wait on
    the file lock instead of failing immediately when another writer holds it.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 30},
        )
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


engine = build_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.DEBUG)


def create_db_and_tables(bind: Engine = engine) -> None:
    """Create all tables that do not exist yet."""
    SQLModel.metadata.create_all(bind)


def get_session() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session for FastAPI routes.

    Yields:
        Database session instance
    """
    with Session(engine) as session:
        yield session
