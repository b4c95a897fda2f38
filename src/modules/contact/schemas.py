# src/modules/contact/schemas.py

from typing import Any, Dict, Optional
from pydantic import BaseModel

class ContactFormRequest(BaseModel):
    # Loosely typed so missing or mistyped fields reach the validator
    # and come back as field errors instead of a 422.
    name: Optional[Any] = None
    email: Optional[Any] = None
    message: Optional[Any] = None

class ContactFormResponse(BaseModel):
    success: bool = True
    message: str
    messageId: str

class ContactErrorResponse(BaseModel):
    error: str
    fields: Optional[Dict[str, str]] = None
