"""
Contact API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Query, status

from . import schemas, service

router = APIRouter()


@router.get("/contacts", response_model=list[schemas.Contact])
async def list_contacts() -> list[schemas.Contact]:
    return await service.list_contacts()


@router.post("/contacts", response_model=schemas.Contact, status_code=status.HTTP_201_CREATED)
async def create_contact(request: schemas.CreateContactRequest) -> schemas.Contact:
    return await service.create_contact(request)


@router.get("/contacts/search", response_model=list[schemas.Contact])
async def search_contacts(phone: str = Query(...)) -> list[schemas.Contact]:
    """
    Exact, case-sensitive match on the stored phone string.
    """
    return await service.search_by_phone(phone)


@router.put("/contacts/{contact_id}", response_model=schemas.Contact)
async def update_contact(contact_id: UUID, request: schemas.UpdateContactRequest) -> schemas.Contact:
    return await service.update_contact(contact_id, request)
