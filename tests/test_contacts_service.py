"""Contact service: partial update merge and failure mapping."""

from uuid import uuid4

import pytest

from contacts import schemas, service
from core.errors import NotFoundError, StorageError


async def _seed(first_name="Ada", last_name="Lovelace", phone="555-0100"):
    return await service.create_contact(
        schemas.CreateContactRequest(first_name=first_name, last_name=last_name, phone=phone),
    )


async def test_update_rewrites_all_fields_from_merged_values(store, monkeypatch):
    contact = await _seed()
    captured = {}
    real_update = store.update_contact

    async def spy(contact_id, **fields):
        captured.update(fields)
        return await real_update(contact_id, **fields)

    monkeypatch.setattr("contacts.repository.update_contact", spy)

    await service.update_contact(contact.id, schemas.UpdateContactRequest(last_name="Byron"))

    assert captured == {"first_name": "Ada", "last_name": "Byron", "phone": "555-0100"}


async def test_update_reads_before_writing(store):
    contact = await _seed()
    store.calls.clear()

    await service.update_contact(contact.id, schemas.UpdateContactRequest(phone="1"))

    assert store.calls == ["get_contact", "update_contact"]


async def test_update_unknown_id_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        await service.update_contact(uuid4(), schemas.UpdateContactRequest(phone="1"))

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Contact not found"


async def test_update_of_row_removed_after_read_is_a_storage_error(store, monkeypatch):
    contact = await _seed()

    async def vanished(contact_id, **fields):
        return None

    monkeypatch.setattr("contacts.repository.update_contact", vanished)

    with pytest.raises(StorageError):
        await service.update_contact(contact.id, schemas.UpdateContactRequest(phone="1"))


async def test_update_keeps_empty_string_as_explicit_value(store):
    contact = await _seed()

    updated = await service.update_contact(contact.id, schemas.UpdateContactRequest(phone=""))

    assert updated.phone == ""


async def test_storage_failure_propagates(store):
    store.fail_with = "connection reset by peer"

    with pytest.raises(StorageError, match="connection reset by peer"):
        await service.list_contacts()


def test_create_request_rejects_non_string_fields():
    with pytest.raises(ValueError):
        schemas.CreateContactRequest(first_name="Ada", last_name="Lovelace", phone=5550100)
