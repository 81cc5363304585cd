"""Tests for E.164 phone parsing and the Phone value."""

import pytest

from addressbook.domain import Phone, ValidationError
from addressbook.domain.phone import PHONE_CONSTRAINTS, to_e164


def test_singapore_number_uses_default_region():
    assert to_e164("8123 4567", default_region="SG") == "+6581234567"
    assert to_e164("  81234567 ", default_region="SG") == "+6581234567"


def test_explicit_country_code_ignores_default_region():
    assert to_e164("+1 (202) 555-1234", default_region="SG") == "+12025551234"
    assert to_e164("+65 8123 4567", default_region=None) == "+6581234567"


@pytest.mark.parametrize(
    "raw, region",
    [
        ("", "SG"),
        (None, "SG"),
        ("call me", "SG"),
        ("81234567", None),
        ("123", "SG"),
        ("+1", None),
    ],
)
def test_rejected_numbers_raise_validation_error(raw, region):
    with pytest.raises(ValidationError) as excinfo:
        to_e164(raw, default_region=region)
    assert str(excinfo.value) == PHONE_CONSTRAINTS


def test_phone_value_stores_e164():
    assert Phone("+65 8123 4567").value == "+6581234567"
    assert Phone("+65 8123 4567") == Phone("+6581234567")
    assert str(Phone("+12025551234")) == "+12025551234"


def test_phone_parse_uses_default_region():
    assert Phone.parse("8123 4567", default_region="SG") == Phone("+6581234567")


def test_phone_without_country_code_rejected():
    with pytest.raises(ValidationError, match="Phone numbers"):
        Phone("8123 4567")
    with pytest.raises(ValidationError, match="Phone numbers"):
        Phone.parse("123", default_region="SG")
