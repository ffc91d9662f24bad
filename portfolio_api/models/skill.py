"""
Skill model with category grouping.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


class SkillCategory(str, Enum):
    """Skill grouping shown as tabs on the portfolio page."""

    FRONTEND = "FRONTEND"
    BACKEND = "BACKEND"
    DATABASE = "DATABASE"
    DEVOPS = "DEVOPS"
    TOOLS = "TOOLS"
    OTHER = "OTHER"


class Skill(SQLModel, table=True):
    __tablename__ = "skills"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    name: str = Field(max_length=255)
    level: Optional[int] = Field(default=None, ge=0, le=100)
    icon_path: Optional[str] = Field(default=None, max_length=500)
    category: SkillCategory = Field(index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
