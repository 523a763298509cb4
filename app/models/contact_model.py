# /app/models/contact_model.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = None
    message: str = Field(..., min_length=1)


class ContactRecord(ContactCreate):
    model_config = ConfigDict(from_attributes=True)

    id: str
    created_at: Optional[datetime] = None
