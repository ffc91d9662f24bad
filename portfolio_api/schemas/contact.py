"""
Contact submission schemas.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, EmailStr, Field


class ContactCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1)


class ContactResponse(BaseModel):
    id: str
    name: str
    email: str
    message: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ContactSubmitResponse(BaseModel):
    message: str = "Your message has been successfully submitted!"
    submission: ContactResponse


class ContactListResponse(BaseModel):
    contacts: List[ContactResponse]
    total: int
    page: int
    limit: int
