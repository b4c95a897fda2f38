# src/modules/projects/schemas.py

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

class ProjectResponse(BaseModel):
    id: UUID
    title: str
    description: Optional[str] = None
    tech_stack: Optional[str] = None
    live_url: Optional[str] = None
    repo_url: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class ProjectDeleteResponse(BaseModel):
    message: str
