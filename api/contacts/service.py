"""
Contact business logic.

There is very little of it: the only decision made here is the partial
update, which reads the stored row, overlays the supplied fields and writes
all three fields back. The read and the write are separate round trips with
no transaction, so two concurrent updates to the same contact can lose one
of them.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from core.errors import NotFoundError, StorageError

from . import repository, schemas


def _to_contact(row: dict[str, Any]) -> schemas.Contact:
    return schemas.Contact(
        id=row["id"],
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        phone=str(row["phone"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def list_contacts() -> list[schemas.Contact]:
    rows = await repository.list_contacts()
    return [_to_contact(row) for row in rows]


async def create_contact(payload: schemas.CreateContactRequest) -> schemas.Contact:
    row = await repository.insert_contact(
        contact_id=uuid4(),
        first_name=payload.first_name,
        last_name=payload.last_name,
        phone=payload.phone,
    )
    return _to_contact(row)


async def update_contact(contact_id: UUID, payload: schemas.UpdateContactRequest) -> schemas.Contact:
    current = await repository.get_contact(contact_id)
    if current is None:
        raise NotFoundError("Contact not found")

    first_name = payload.first_name if payload.first_name is not None else str(current["first_name"])
    last_name = payload.last_name if payload.last_name is not None else str(current["last_name"])
    phone = payload.phone if payload.phone is not None else str(current["phone"])

    row = await repository.update_contact(
        contact_id,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
    )
    if row is None:
        # Row vanished between the read and the write.
        raise StorageError("no rows returned by a query that expected to return at least one row")
    return _to_contact(row)


async def search_by_phone(phone: str) -> list[schemas.Contact]:
    rows = await repository.find_by_phone(phone)
    return [_to_contact(row) for row in rows]
