"""Domain layer: value objects, Person, unique lists and the AddressBook. Imports no outer layer; phonenumbers is its only third-party library."""

from addressbook.domain.address_book import (
    SORT_ORDERS,
    AddressBook,
    AddressBookSnapshot,
    ReadOnlyAddressBook,
)
from addressbook.domain.entities import MembershipFlag, Person
from addressbook.domain.errors import (
    AddressBookError,
    DuplicateError,
    DuplicatePersonError,
    DuplicateTagError,
    NotFoundError,
    PersonNotFoundError,
    TagNotFoundError,
    ValidationError,
)
from addressbook.domain.unique_list import UniqueList, UniquePersonList, UniqueTagList
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

__all__ = [
    "SORT_ORDERS",
    "Address",
    "AddressBook",
    "AddressBookError",
    "AddressBookSnapshot",
    "Deadline",
    "Debt",
    "DuplicateError",
    "DuplicatePersonError",
    "DuplicateTagError",
    "Email",
    "Interest",
    "MembershipFlag",
    "Name",
    "NotFoundError",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "PostalCode",
    "ReadOnlyAddressBook",
    "Tag",
    "TagNotFoundError",
    "UniqueList",
    "UniquePersonList",
    "UniqueTagList",
    "ValidationError",
]
