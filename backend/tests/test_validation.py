"""
Tests for contact form validation rules
"""
import pytest

from contact_app.core.validation import (EMAIL_INVALID, EMAIL_REQUIRED,
                                         NAME_REQUIRED, PHONE_INVALID,
                                         PHONE_NOT_NUMERIC, PHONE_REQUIRED,
                                         Rule, contact_rules, is_email,
                                         is_mobile_phone, is_numeric,
                                         validate)


def _messages(result, field):
    return [error.msg for error in result.errors if error.field == field]


def test_valid_contact_passes_and_is_trimmed():
    result = validate(
        {"name": "  Alice ", "email": " alice@example.com", "nohp": "081234567890  "},
        contact_rules("ID"),
    )
    assert result.is_valid
    assert result.values == {
        "name": "Alice",
        "email": "alice@example.com",
        "nohp": "081234567890",
    }


def test_missing_fields_collect_every_failing_rule():
    result = validate({}, contact_rules("ID"))
    assert not result.is_valid
    assert _messages(result, "name") == [NAME_REQUIRED]
    assert _messages(result, "email") == [EMAIL_REQUIRED, EMAIL_INVALID]
    assert _messages(result, "nohp") == [PHONE_REQUIRED, PHONE_NOT_NUMERIC, PHONE_INVALID]


def test_whitespace_only_counts_as_empty():
    result = validate({"name": "   ", "email": "a@b.co", "nohp": "081234567890"}, contact_rules("ID"))
    assert [e.to_dict() for e in result.errors] == [{"field": "name", "msg": NAME_REQUIRED}]


def test_non_numeric_phone_is_rejected():
    result = validate({"name": "Alice", "email": "a@b.co", "nohp": "abc"}, contact_rules("ID"))
    assert _messages(result, "nohp") == [PHONE_NOT_NUMERIC, PHONE_INVALID]


def test_short_numeric_phone_fails_mobile_format_only():
    result = validate({"name": "Alice", "email": "a@b.co", "nohp": "12345"}, contact_rules("ID"))
    assert _messages(result, "nohp") == [PHONE_INVALID]


def test_error_dicts_are_session_friendly():
    result = validate({"name": "Alice", "email": "nope", "nohp": "081234567890"}, contact_rules("ID"))
    assert result.error_dicts() == [{"field": "email", "msg": EMAIL_INVALID}]


@pytest.mark.parametrize("value,expected", [
    ("a@b.co", True),
    ("alice@example.com", True),
    ("not-an-email", False),
    ("alice@", False),
    ("", False),
])
def test_is_email(value, expected):
    assert is_email(value) is expected


@pytest.mark.parametrize("value,expected", [
    ("081234567890", True),
    ("0", True),
    ("+6281234567890", False),
    ("0812-3456", False),
    ("12.5", False),
    ("", False),
])
def test_is_numeric(value, expected):
    assert is_numeric(value) is expected


@pytest.mark.parametrize("value,expected", [
    ("081234567890", True),
    ("081298765432", True),
    ("6281234567890", True),
    ("0215551234", False),  # Jakarta landline
    ("12345", False),
    ("", False),
])
def test_indonesian_mobile_numbers(value, expected):
    assert is_mobile_phone("ID")(value) is expected


def test_rules_run_in_declared_order():
    calls = []

    def record(tag):
        def check(value):
            calls.append(tag)
            return False
        return check

    result = validate({"x": "1"}, {"x": [Rule(record("first"), "one"), Rule(record("second"), "two")]})
    assert calls == ["first", "second"]
    assert [e.msg for e in result.errors] == ["one", "two"]
