"""
Schemas for the home and about singletons.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class HomeUpsert(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    hero_image: Optional[str] = Field(default=None, max_length=500)


class HomeResponse(HomeUpsert):
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AboutResponse(BaseModel):
    id: str
    content: str
    frontend_focus: Optional[str] = None
    performance: Optional[str] = None
    resume_path: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
