"""Domain entities: Person and the membership flags it carries."""

import dataclasses
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from addressbook.domain.errors import ValidationError
from addressbook.domain.values import (
    Address,
    Deadline,
    Debt,
    Email,
    Interest,
    Name,
    Phone,
    PostalCode,
    Tag,
)


class MembershipFlag(Enum):
    """Boolean list memberships a person can hold. Values are Person attribute names."""

    BLACKLISTED = "is_blacklisted"
    WHITELISTED = "is_whitelisted"


@dataclass
class Person:
    """
    Represents a contact in the address book.
    Two persons with the same identity_key are the same contact, whatever their debt,
    flags or tags; full equality compares every attribute.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    postal_code: PostalCode
    debt: Debt = field(default_factory=Debt.zero)
    interest: Interest | None = None
    deadline: Deadline | None = None
    date_borrowed: date = field(default_factory=date.today)
    tags: frozenset[Tag] = frozenset()
    is_blacklisted: bool = False
    is_whitelisted: bool = False

    def __post_init__(self):
        self.tags = frozenset(self.tags)
        if self.deadline is not None and self.deadline.value < self.date_borrowed:
            raise ValidationError("Deadline cannot be before the date borrowed.")

    @property
    def identity_key(self) -> str:
        """Case-insensitive name: the equivalence predicate for uniqueness checks."""
        return self.name.value.casefold()

    def is_same_person(self, other: "Person") -> bool:
        return self.identity_key == other.identity_key

    def has_flag(self, flag: MembershipFlag) -> bool:
        return getattr(self, flag.value)

    def copy(self) -> "Person":
        return dataclasses.replace(self)

    def with_tags(self, tags) -> "Person":
        return dataclasses.replace(self, tags=frozenset(tags))

    def with_debt(self, debt: Debt) -> "Person":
        return dataclasses.replace(self, debt=debt)

    def with_flag(self, flag: MembershipFlag, value: bool) -> "Person":
        return dataclasses.replace(self, **{flag.value: value})

    def tag_names(self) -> list[str]:
        return sorted(tag.name for tag in self.tags)

    def __str__(self) -> str:
        parts = [
            self.name.value,
            f" Phone: {self.phone}",
            f" Email: {self.email}",
            f" Address: {self.address}",
            f" Postal Code: {self.postal_code}",
            f" Debt: {self.debt}",
        ]
        if self.interest is not None:
            parts.append(f" Interest: {self.interest}")
        if self.deadline is not None:
            parts.append(f" Deadline: {self.deadline}")
        parts.append(" Tags: " + "".join(f"[{name}]" for name in self.tag_names()))
        return "".join(parts)
