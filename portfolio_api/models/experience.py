"""
Work experience entries for the journey timeline.
"""

from datetime import date, datetime, timezone
from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


class Experience(SQLModel, table=True):
    """A position held; end_date is None for the current role."""

    __tablename__ = "experiences"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    role: str = Field(max_length=255)
    company: str = Field(max_length=255)
    start_date: date = Field(index=True)
    end_date: Optional[date] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
