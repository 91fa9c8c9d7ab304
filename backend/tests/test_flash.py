"""
Tests for one-shot flash messages
"""
from contact_app.core.flash import FLASH_KEY, FlashContext


def test_take_flash_returns_message_once():
    session = {}
    FlashContext(session).flash("Saved")

    pending = FlashContext(session).take_flash()
    assert pending.message == "Saved"
    assert pending.errors == []
    assert FlashContext(session).take_flash() is None
    assert FLASH_KEY not in session


def test_flash_errors_round_trip():
    session = {}
    errors = [{"field": "name", "msg": "Name is already used"}]
    FlashContext(session).flash_errors(errors)

    pending = FlashContext(session).take_flash()
    assert pending.message is None
    assert pending.errors == errors


def test_new_flash_replaces_pending_one():
    session = {}
    flash = FlashContext(session)
    flash.flash_errors([{"field": "email", "msg": "Invalid email format"}])
    flash.flash("Contact updated successfully")

    pending = flash.take_flash()
    assert pending.message == "Contact updated successfully"
    assert pending.errors == []

