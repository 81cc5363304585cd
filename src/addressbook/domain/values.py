"""Value objects held by a Person. Each one validates itself on construction."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from addressbook.domain.errors import ValidationError
from addressbook.domain.phone import PHONE_CONSTRAINTS, to_e164

MAX_AMOUNT_DIGITS = 12
_TWO_PLACES = Decimal("0.01")
_AMOUNT_PATTERN = re.compile(r"^\d{1,%d}(\.\d{1,2})?$" % MAX_AMOUNT_DIGITS)
_EMAIL_PATTERN = re.compile(r"^[\w.+-]+@[\w-]+(\.[\w-]+)+$")
_POSTAL_CODE_PATTERN = re.compile(r"^\d{6}$")

DEADLINE_FORMAT = "%d-%m-%Y"


def _parse_amount(raw: object, constraints: str) -> Decimal:
    text = str(raw).strip()
    if not _AMOUNT_PATTERN.match(text):
        raise ValidationError(constraints)
    try:
        return Decimal(text).quantize(_TWO_PLACES)
    except InvalidOperation as e:
        raise ValidationError(constraints) from e


@dataclass(frozen=True)
class Name:
    """A person's name. Words are alphanumeric and separated by single spaces."""

    CONSTRAINTS = "Person names should only contain alphanumeric characters and spaces, and it should not be blank"

    value: str

    def __post_init__(self):
        words = str(self.value or "").split()
        if not words or not all(word.isalnum() for word in words):
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "value", " ".join(words))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """A phone number, always stored in E.164 form."""

    CONSTRAINTS = PHONE_CONSTRAINTS

    value: str

    def __post_init__(self):
        object.__setattr__(self, "value", to_e164(self.value))

    @classmethod
    def parse(cls, raw: str, default_region: str | None = None) -> "Phone":
        """Build a Phone from user input that may lack a country code."""
        return cls(to_e164(raw, default_region))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    CONSTRAINTS = "Person emails should be 2 parts separated by '@', with a dotted domain"

    value: str

    def __post_init__(self):
        email = str(self.value or "").strip()
        if not _EMAIL_PATTERN.match(email):
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "value", email)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    CONSTRAINTS = "Person addresses can take any values, and it should not be blank"

    value: str

    def __post_init__(self):
        address = str(self.value or "").strip()
        if not address:
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "value", address)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PostalCode:
    CONSTRAINTS = "Postal codes should be exactly 6 digits"

    value: str

    def __post_init__(self):
        code = str(self.value or "").strip()
        if not _POSTAL_CODE_PATTERN.match(code):
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "value", code)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Debt:
    """
    An amount of money owed, kept to exactly two decimal places.
    Negative amounts are rejected, so a Debt can also serve as a borrowing increment.
    """

    CONSTRAINTS = "Debt must be a non-negative number with at most 12 digits before and 2 after the decimal point"

    value: Decimal

    def __post_init__(self):
        object.__setattr__(self, "value", _parse_amount(self.value, self.CONSTRAINTS))

    @classmethod
    def zero(cls) -> "Debt":
        return cls(Decimal("0"))

    def is_zero(self) -> bool:
        return self.value == 0

    def __add__(self, other: "Debt") -> "Debt":
        if not isinstance(other, Debt):
            return NotImplemented
        return Debt(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Interest:
    """Interest rate in percent charged on a debt."""

    CONSTRAINTS = "Interest rates must be a non-negative number with at most 12 digits before and 2 after the decimal point"

    value: Decimal

    def __post_init__(self):
        object.__setattr__(self, "value", _parse_amount(self.value, self.CONSTRAINTS))

    def __str__(self) -> str:
        return f"{self.value}%"


@dataclass(frozen=True)
class Deadline:
    """Date by which a debt should be repaid. Accepts a date or a DD-MM-YYYY string."""

    CONSTRAINTS = "Deadlines should be valid dates in the format DD-MM-YYYY"

    value: date

    def __post_init__(self):
        value = self.value
        if isinstance(value, datetime):
            value = value.date()
        elif isinstance(value, str):
            try:
                value = datetime.strptime(value.strip(), DEADLINE_FORMAT).date()
            except ValueError as e:
                raise ValidationError(self.CONSTRAINTS) from e
        elif not isinstance(value, date):
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value.strftime(DEADLINE_FORMAT)


@dataclass(frozen=True)
class Tag:
    """A tag name. Two tags are the same tag when their names are equal."""

    CONSTRAINTS = "Tag names should be alphanumeric"

    name: str

    def __post_init__(self):
        name = str(self.name or "").strip()
        if not name or not name.isalnum():
            raise ValidationError(self.CONSTRAINTS)
        object.__setattr__(self, "name", name)

    def __str__(self) -> str:
        return f"[{self.name}]"
