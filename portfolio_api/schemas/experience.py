"""
Experience schemas for the journey timeline.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ExperienceCreate(BaseModel):
    role: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None


class ExperienceUpdate(BaseModel):
    """
    Partial update. Only fields present in the request body are applied,
    so an explicit ``"end_date": null`` clears the end date.
    """

    role: Optional[str] = Field(default=None, min_length=1, max_length=255)
    company: Optional[str] = Field(default=None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None


class ExperienceResponse(BaseModel):
    id: str
    role: str
    company: str
    start_date: date
    end_date: Optional[date] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ExperienceListResponse(BaseModel):
    experiences: List[ExperienceResponse]
    total: int
    page: int
    limit: int
