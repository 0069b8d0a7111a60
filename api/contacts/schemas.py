"""
Pydantic schemas for contact endpoints.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel


class CreateContactRequest(BaseModel):
    first_name: str
    last_name: str
    phone: str


class UpdateContactRequest(BaseModel):
    # Omitted or null fields keep their stored value.
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None


class Contact(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    phone: str
    created_at: datetime
    updated_at: datetime
