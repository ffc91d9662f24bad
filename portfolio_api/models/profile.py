"""
Singleton profile content: the home hero block and the about section.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


class Home(SQLModel, table=True):
    """Landing page hero content. At most one row is expected."""

    __tablename__ = "home"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str = Field(max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    hero_image: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class About(SQLModel, table=True):
    """About section with an optional uploaded resume."""

    __tablename__ = "about"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    content: str
    frontend_focus: Optional[str] = None
    performance: Optional[str] = None
    resume_path: Optional[str] = Field(default=None, max_length=500)  # public /uploads/... path
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
