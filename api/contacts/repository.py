"""
Contact persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db
from core.errors import StorageError

CONTACT_COLUMNS = "id, first_name, last_name, phone, created_at, updated_at"


async def list_contacts() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {CONTACT_COLUMNS}
        FROM contacts
        ORDER BY first_name, last_name
        """
    )


async def insert_contact(*, contact_id: UUID, first_name: str, last_name: str, phone: str) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO contacts (id, first_name, last_name, phone)
        VALUES ($1, $2, $3, $4)
        RETURNING {CONTACT_COLUMNS}
        """,
        contact_id,
        first_name,
        last_name,
        phone,
    )
    if row is None:
        raise StorageError("Failed to insert contact.")
    return row


async def get_contact(contact_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {CONTACT_COLUMNS}
        FROM contacts
        WHERE id = $1
        """,
        contact_id,
    )


async def update_contact(
    contact_id: UUID,
    *,
    first_name: str,
    last_name: str,
    phone: str,
) -> dict[str, Any] | None:
    """
    Rewrite all three editable fields and refresh `updated_at`.
    Returns None when the row does not exist.
    """
    return await db.fetch_one(
        f"""
        UPDATE contacts
        SET first_name = $1,
            last_name = $2,
            phone = $3,
            updated_at = now()
        WHERE id = $4
        RETURNING {CONTACT_COLUMNS}
        """,
        first_name,
        last_name,
        phone,
        contact_id,
    )


async def find_by_phone(phone: str) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {CONTACT_COLUMNS}
        FROM contacts
        WHERE phone = $1
        """,
        phone,
    )
