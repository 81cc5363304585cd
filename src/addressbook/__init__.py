"""
Address book core: clean-architecture layout.

- domain: value objects, Person, unique lists, AddressBook. No outer dependencies.
- application: commands, ModelManager (displayed list, selection, undo/redo), parser, DTOs.
- infrastructure: adapters (YAML seed loader).
"""

from addressbook.application import (
    CommandResult,
    Duplicate,
    Invalid,
    ModelManager,
    NotFound,
    ParseError,
    parse_command,
)
from addressbook.domain import (
    AddressBook,
    AddressBookSnapshot,
    DuplicatePersonError,
    DuplicateTagError,
    MembershipFlag,
    Person,
    PersonNotFoundError,
    Tag,
    TagNotFoundError,
    ValidationError,
)
from addressbook.infrastructure import SeedError, load_seed

__all__ = [
    "AddressBook",
    "AddressBookSnapshot",
    "CommandResult",
    "Duplicate",
    "DuplicatePersonError",
    "DuplicateTagError",
    "Invalid",
    "MembershipFlag",
    "ModelManager",
    "NotFound",
    "ParseError",
    "Person",
    "PersonNotFoundError",
    "SeedError",
    "Tag",
    "TagNotFoundError",
    "ValidationError",
    "load_seed",
    "parse_command",
]
