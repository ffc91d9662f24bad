"""
Project schemas. Create/update input arrives as multipart form fields,
so only response shapes are declared here.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ProjectResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    tech_stack: List[str]
    repo_link: Optional[str] = None
    demo_link: Optional[str] = None
    featured: bool
    images: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProjectListResponse(BaseModel):
    items: List[ProjectResponse]
