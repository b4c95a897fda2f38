# src/modules/blog/schemas.py

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel

class BlogPostResponse(BaseModel):
    id: UUID
    title: str
    content: str
    image: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

class BlogDeleteResponse(BaseModel):
    message: str
