"""Phone book: contacts table and phone index.

Revision ID: 0001_phone_book
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

revision: str = "0001_phone_book"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(
        """
        CREATE TABLE contacts (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            phone TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
        """
    )
    op.execute("CREATE INDEX idx_contacts_phone ON contacts(phone)")


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS idx_contacts_phone")
    op.execute("DROP TABLE IF EXISTS contacts")
