"""
Contact form submissions.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlmodel import Field, SQLModel


class Contact(SQLModel, table=True):
    __tablename__ = "contacts"  # type: ignore

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
