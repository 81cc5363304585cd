"""Tests for value objects and Person."""

from datetime import date
from decimal import Decimal

import pytest

from addressbook.domain import (
    Address,
    Deadline,
    Debt,
    Email,
    Interest,
    MembershipFlag,
    Name,
    Person,
    Phone,
    PostalCode,
    Tag,
    ValidationError,
)


def _person(name: str = "Alex Yeoh", **kwargs) -> Person:
    return Person(
        name=Name(name),
        phone=Phone("+12025551234"),
        email=Email("alex@example.com"),
        address=Address("Blk 30 Geylang Street 29"),
        postal_code=PostalCode("380030"),
        **kwargs,
    )


def test_name_collapses_whitespace():
    assert Name("  Alex   Yeoh ").value == "Alex Yeoh"


@pytest.mark.parametrize("raw", ["", "   ", "Alex*", "peter-jack"])
def test_name_rejects_invalid(raw):
    with pytest.raises(ValidationError, match="Person names"):
        Name(raw)


def test_email_and_address_and_postal_code():
    assert Email(" a.b+c@mail.example.com ").value == "a.b+c@mail.example.com"
    assert Address("  1 Main St ").value == "1 Main St"
    assert PostalCode("018956").value == "018956"
    with pytest.raises(ValidationError):
        Email("no-at-sign")
    with pytest.raises(ValidationError):
        Email("user@localhost")
    with pytest.raises(ValidationError):
        Address("   ")
    with pytest.raises(ValidationError):
        PostalCode("12345")


def test_debt_two_decimal_places():
    assert Debt("10").value == Decimal("10.00")
    assert str(Debt("10.5")) == "10.50"
    assert Debt(Decimal("0.01")).value == Decimal("0.01")
    assert Debt.zero().is_zero()


@pytest.mark.parametrize("raw", ["-1.00", "1.234", "abc", "", "1e3"])
def test_debt_rejects_invalid(raw):
    with pytest.raises(ValidationError, match="non-negative"):
        Debt(raw)


def test_debt_rejects_oversized_amounts():
    assert Debt("9" * 12 + ".99").value == Decimal("999999999999.99")
    with pytest.raises(ValidationError, match="at most 12 digits"):
        Debt("9" * 13)
    with pytest.raises(ValidationError):
        Debt("9" * 27)
    with pytest.raises(ValidationError):
        Interest(Decimal("1" + "0" * 30))


def test_debt_sum_beyond_limit_fails_validation():
    with pytest.raises(ValidationError):
        Debt("9" * 12) + Debt("1")


def test_debt_addition_returns_new_debt():
    total = Debt("10.00") + Debt("5.00")
    assert total == Debt("15.00")
    assert str(total) == "15.00"


def test_interest():
    assert str(Interest("3.5")) == "3.50%"
    with pytest.raises(ValidationError):
        Interest("-2")


def test_deadline_parses_dd_mm_yyyy():
    assert Deadline("25-12-2030").value == date(2030, 12, 25)
    assert str(Deadline(date(2030, 1, 2))) == "02-01-2030"
    with pytest.raises(ValidationError, match="DD-MM-YYYY"):
        Deadline("2030-12-25")
    with pytest.raises(ValidationError):
        Deadline("31-02-2030")


def test_tag_equality_by_name():
    assert Tag("friends") == Tag(" friends ")
    assert Tag("friends") is not Tag("friends")
    with pytest.raises(ValidationError, match="alphanumeric"):
        Tag("best friend")


def test_person_identity_is_case_insensitive_name():
    a = _person("Alex Yeoh")
    b = _person("alex yeoh", debt=Debt("3.00"))
    assert a.is_same_person(b)
    assert a != b


def test_person_deadline_cannot_precede_date_borrowed():
    with pytest.raises(ValidationError, match="Deadline"):
        _person(date_borrowed=date(2030, 1, 10), deadline=Deadline("09-01-2030"))
    person = _person(date_borrowed=date(2030, 1, 10), deadline=Deadline("10-01-2030"))
    assert person.deadline.value == date(2030, 1, 10)


def test_person_copies_are_independent():
    person = _person(tags={Tag("friends")})
    flagged = person.with_flag(MembershipFlag.BLACKLISTED, True)
    assert flagged.is_blacklisted
    assert not person.is_blacklisted
    assert flagged.has_flag(MembershipFlag.BLACKLISTED)
    assert isinstance(person.tags, frozenset)
    assert person.copy() == person
    assert person.copy() is not person


def test_person_str_lists_fields_and_tags():
    text = str(_person(tags={Tag("b"), Tag("a")}, debt=Debt("7")))
    assert text.startswith("Alex Yeoh Phone: +12025551234")
    assert "Debt: 7.00" in text
    assert text.endswith("Tags: [a][b]")
