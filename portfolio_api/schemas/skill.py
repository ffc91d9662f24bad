"""
Skill schemas. Categories are accepted in any case and stored uppercase.
"""

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, Field

from portfolio_api.models.skill import SkillCategory


def _upper(v: Any) -> Any:
    return v.strip().upper() if isinstance(v, str) else v


CategoryField = Annotated[SkillCategory, BeforeValidator(_upper)]


class SkillCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    level: Optional[int] = Field(default=None, ge=0, le=100)
    icon_path: Optional[str] = Field(default=None, max_length=500)
    category: CategoryField


class SkillUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    level: Optional[int] = Field(default=None, ge=0, le=100)
    icon_path: Optional[str] = Field(default=None, max_length=500)
    category: Optional[CategoryField] = None


class SkillResponse(BaseModel):
    id: str
    name: str
    level: Optional[int] = None
    icon_path: Optional[str] = None
    category: SkillCategory
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SkillListResponse(BaseModel):
    skills: List[SkillResponse]
    total: int
    page: int
    limit: int
