"""
Project model for portfolio showcase entries.
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlmodel import JSON, Column, Field, SQLModel


class Project(SQLModel, table=True):
    """
    A showcased project.

    Attributes:
        tech_stack: List of technology names
        images: Public /uploads/projects/... paths, in display order
    """

    __tablename__ = "projects"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = None
    tech_stack: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    repo_link: Optional[str] = Field(default=None, max_length=500)
    demo_link: Optional[str] = Field(default=None, max_length=500)
    featured: bool = Field(default=False)
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
