"""Load a YAML seed file into an AddressBookSnapshot.

Expected shape:

    tags: [friends, colleagues]
    persons:
      - name: Alex Yeoh
        phone: "+6587438807"
        email: alexyeoh@example.com
        address: Blk 30 Geylang Street 29, #06-40
        postal_code: "380030"
        debt: 120.50
        tags: [friends]
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict, Field

from addressbook.domain import (
    Address,
    AddressBookSnapshot,
    Deadline,
    Debt,
    Email,
    Interest,
    Name,
    Person,
    Phone,
    PostalCode,
    Tag,
    ValidationError,
)


class SeedError(ValueError):
    """The seed file is unreadable, malformed, or holds invalid values."""


class PersonRecord(BaseModel):
    """One person as written in the seed file."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    name: str
    phone: str
    email: str
    address: str
    postal_code: str
    debt: Decimal = Decimal("0")
    interest: Decimal | None = None
    deadline: date | str | None = None
    date_borrowed: date | None = None
    tags: list[str] = Field(default_factory=list)
    blacklisted: bool = False
    whitelisted: bool = False

    def to_person(self, default_region: str | None = None) -> Person:
        extra = {}
        if self.date_borrowed is not None:
            extra["date_borrowed"] = self.date_borrowed
        return Person(
            name=Name(self.name),
            phone=Phone.parse(self.phone, default_region),
            email=Email(self.email),
            address=Address(self.address),
            postal_code=PostalCode(self.postal_code),
            debt=Debt(self.debt),
            interest=Interest(self.interest) if self.interest is not None else None,
            deadline=Deadline(self.deadline) if self.deadline is not None else None,
            tags=frozenset(Tag(t) for t in self.tags),
            is_blacklisted=self.blacklisted,
            is_whitelisted=self.whitelisted,
            **extra,
        )


class SeedFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tags: list[str] = Field(default_factory=list)
    persons: list[PersonRecord] = Field(default_factory=list)


def parse_seed(data: object, default_region: str | None = None) -> AddressBookSnapshot:
    """Validate already-loaded seed data and convert it to a snapshot."""
    if data is None:
        data = {}
    try:
        seed = SeedFile.model_validate(data)
    except pydantic.ValidationError as e:
        raise SeedError(f"Seed file has an invalid structure: {e}") from e
    persons = []
    for i, record in enumerate(seed.persons, start=1):
        try:
            persons.append(record.to_person(default_region))
        except ValidationError as e:
            raise SeedError(f"Person #{i} ({record.name}): {e}") from e
    try:
        tags = tuple(Tag(name) for name in seed.tags)
    except ValidationError as e:
        raise SeedError(f"Invalid tag in seed file: {e}") from e
    return AddressBookSnapshot(persons=tuple(persons), tags=tags)


def load_seed(path: Path, default_region: str | None = None) -> AddressBookSnapshot:
    """Read and validate a YAML seed file."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedError(f"Cannot read seed file {path}: {e}") from e
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SeedError(f"Seed file {path} is not valid YAML: {e}") from e
    return parse_seed(data, default_region)
