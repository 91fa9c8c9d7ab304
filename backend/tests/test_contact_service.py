"""
Tests for ContactService
"""
from uuid import UUID, uuid4

import pytest

from contact_app.core.database import Base
from contact_app.core.exceptions import ContactStoreError
from contact_app.services.contact_service import ContactService

from conftest import ALICE, BOB


def test_insert_assigns_id_and_no_timestamp(db):
    contact = ContactService(db).insert(dict(ALICE))
    assert isinstance(contact.id, UUID)
    assert (contact.name, contact.email, contact.nohp) == ("Alice", "alice@example.com", "081234567890")
    assert contact.last_modified is None


def test_find_all_returns_every_contact(db):
    service = ContactService(db)
    service.insert(dict(BOB))
    service.insert(dict(ALICE))
    assert [c.name for c in service.find_all()] == ["Alice", "Bob"]


def test_find_all_empty(db):
    assert ContactService(db).find_all() == []


def test_find_by_name(db, alice):
    service = ContactService(db)
    assert service.find_by_name("Alice").id == alice.id
    assert service.find_by_name("alice") is None
    assert service.find_by_name("Nobody") is None


def test_find_by_id_accepts_string_and_rejects_garbage(db, alice):
    service = ContactService(db)
    assert service.find_by_id(alice.id).name == "Alice"
    assert service.find_by_id(str(alice.id)).name == "Alice"
    assert service.find_by_id(uuid4()) is None
    assert service.find_by_id("not-a-uuid") is None
    assert service.find_by_id("") is None


def test_update_by_id_replaces_fields_and_touches_timestamp(db, alice):
    service = ContactService(db)
    updated = service.update_by_id(
        str(alice.id),
        {"name": "Alicia", "email": "alicia@example.com", "nohp": "081298765432"},
    )
    assert updated.id == alice.id
    assert (updated.name, updated.email, updated.nohp) == ("Alicia", "alicia@example.com", "081298765432")
    assert updated.last_modified is not None
    assert service.find_by_name("Alice") is None


def test_update_without_touching_timestamp(db, alice):
    updated = ContactService(db).update_by_id(alice.id, dict(ALICE, email="new@example.com"), touch_timestamp=False)
    assert updated.email == "new@example.com"
    assert updated.last_modified is None


def test_update_unknown_id_returns_none(db, alice):
    assert ContactService(db).update_by_id(uuid4(), dict(BOB)) is None
    assert ContactService(db).find_by_name("Bob") is None


def test_delete_by_name(db, alice):
    service = ContactService(db)
    assert service.delete_by_name("Alice") is True
    assert service.find_all() == []
    assert service.delete_by_name("Alice") is False


def test_delete_removes_only_one_contact(db):
    service = ContactService(db)
    service.insert(dict(ALICE))
    service.insert(dict(BOB))
    assert service.delete_by_name("Bob") is True
    assert [c.name for c in service.find_all()] == ["Alice"]


def test_database_failure_becomes_store_error(db, engine):
    Base.metadata.drop_all(bind=engine)
    service = ContactService(db)

    with pytest.raises(ContactStoreError) as exc_info:
        service.find_all()
    assert exc_info.value.operation == "find_all"

    with pytest.raises(ContactStoreError) as exc_info:
        service.insert(dict(ALICE))
    assert exc_info.value.operation == "insert"
