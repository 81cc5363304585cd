"""AddressBook: the single owner of the canonical person list and master tag list."""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from addressbook.domain.entities import MembershipFlag, Person
from addressbook.domain.errors import PersonNotFoundError, ValidationError
from addressbook.domain.unique_list import UniquePersonList, UniqueTagList
from addressbook.domain.values import Debt, Tag

SORT_BY_NAME = "name"
SORT_BY_DEBT = "debt"
SORT_ORDERS = (SORT_BY_NAME, SORT_BY_DEBT)


class ReadOnlyAddressBook(Protocol):
    """Anything that can hand out an ordered person list and a tag list."""

    def get_person_list(self) -> Sequence[Person]:
        ...

    def get_tag_list(self) -> Sequence[Tag]:
        ...


@dataclass(frozen=True)
class AddressBookSnapshot:
    """Point-in-time copy of a book's persons and tags, used for reset and import."""

    persons: tuple[Person, ...] = ()
    tags: tuple[Tag, ...] = ()

    def get_person_list(self) -> tuple[Person, ...]:
        return self.persons

    def get_tag_list(self) -> tuple[Tag, ...]:
        return self.tags


def _sync_tags(person: Person, tags: UniqueTagList) -> Person:
    """
    Return a copy of person whose tags are the instances held in tags,
    adding any tag value tags does not have yet.
    """
    tags.merge_from(person.tags)
    canonical = tags.by_name()
    return person.with_tags(canonical[tag.name] for tag in person.tags)


class AddressBook:
    """
    Wraps all data at the address-book level.
    Persons are unique by Person.identity_key, tags by name. After every successful
    mutation each person's tags are the very instances held in the master tag list.
    """

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._persons = UniquePersonList()
        self._tags = UniqueTagList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # list overwrite operations

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """
        Replace all data with new_data. Both lists are rebuilt aside and swapped in
        together; a duplicate person in new_data raises DuplicatePersonError and
        leaves this book unchanged.
        """
        tags = UniqueTagList()
        tags.merge_from(new_data.get_tag_list())
        persons = UniquePersonList(new_data.get_person_list())
        persons.set_all(_sync_tags(p, tags) for p in persons)
        self._persons = persons
        self._tags = tags

    def snapshot(self) -> AddressBookSnapshot:
        return AddressBookSnapshot(
            persons=tuple(p.copy() for p in self._persons),
            tags=self._tags.as_tuple(),
        )

    # person-level operations

    def sync_tags(self, person: Person) -> Person:
        """Register person's tags in the master list; return a copy that references them."""
        return _sync_tags(person, self._tags)

    def add_person(self, person: Person) -> Person:
        """
        Add a copy of person, with its tags canonicalized against the master list.
        Raises DuplicatePersonError before any tag is registered.
        """
        if self._persons.contains(person):
            raise self._persons.duplicate_error()
        new_person = self.sync_tags(person)
        self._persons.add(new_person)
        return new_person

    def update_person(self, target: Person, edited_person: Person) -> Person:
        """
        Replace target with edited_person at the same position.
        Raises PersonNotFoundError or DuplicatePersonError before any tag is registered.
        """
        self._persons.check_replace(target, edited_person)
        edited = self.sync_tags(edited_person)
        self._persons.replace(target, edited)
        return edited

    def remove_person(self, key: Person) -> bool:
        return self._persons.remove(key)

    def _stored(self, person: Person) -> Person:
        index = self._persons.index_of(person)
        if index == -1:
            raise PersonNotFoundError()
        return self._persons.get(index)

    def set_membership_flag(self, person: Person, flag: MembershipFlag, value: bool) -> Person:
        """Set one membership flag on person in place; its list position does not move."""
        current = self._stored(person)
        updated = current.with_flag(flag, value)
        self._persons.replace(current, updated)
        return updated

    def add_blacklisted_person(self, person: Person) -> Person:
        return self.set_membership_flag(person, MembershipFlag.BLACKLISTED, True)

    def remove_blacklisted_person(self, person: Person) -> Person:
        return self.set_membership_flag(person, MembershipFlag.BLACKLISTED, False)

    def add_whitelisted_person(self, person: Person) -> Person:
        return self.set_membership_flag(person, MembershipFlag.WHITELISTED, True)

    def remove_whitelisted_person(self, person: Person) -> Person:
        return self.set_membership_flag(person, MembershipFlag.WHITELISTED, False)

    def adjust_debt(self, target: Person, amount: Debt | Decimal | str | int) -> Person:
        """
        Increase target's debt by amount. amount must be non-negative with at most
        two decimal places; ValidationError is raised before anything is looked up.
        """
        increment = amount if isinstance(amount, Debt) else Debt(amount)
        current = self._stored(target)
        updated = current.with_debt(current.debt + increment)
        self._persons.replace(current, updated)
        return updated

    def reset_debt(self, target: Person) -> Person:
        """Set target's debt to zero and return the person now held at its index."""
        current = self._stored(target)
        index = self._persons.replace(current, current.with_debt(Debt.zero()))
        return self._persons.get(index)

    def sort_persons(self, order: str) -> None:
        """Sort by name (A to Z, ignoring case) or by debt (largest first)."""
        if order == SORT_BY_NAME:
            self._persons.sort(key=lambda p: p.identity_key)
        elif order == SORT_BY_DEBT:
            self._persons.sort(key=lambda p: (-p.debt.value, p.identity_key))
        else:
            raise ValidationError(
                f"Unknown sort order '{order}'. Use one of: {', '.join(SORT_ORDERS)}."
            )

    # tag-level operations

    def add_tag(self, tag: Tag) -> None:
        self._tags.add(tag)

    def remove_tag(self, tag: Tag) -> None:
        """Remove tag from the master list only; persons keep whatever tags they hold."""
        self._tags.remove(tag)

    def resolve_tag(self, name: str) -> Tag | None:
        """Return the canonical tag instance for name, or None."""
        return self._tags.by_name().get(name)

    # read access

    def get_person_list(self) -> tuple[Person, ...]:
        return self._persons.as_tuple()

    def get_tag_list(self) -> tuple[Tag, ...]:
        return self._tags.as_tuple()

    def get_blacklisted_person_list(self) -> tuple[Person, ...]:
        return tuple(p for p in self._persons if p.is_blacklisted)

    def get_whitelisted_person_list(self) -> tuple[Person, ...]:
        return tuple(p for p in self._persons if p.is_whitelisted)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._tags.equals_order_insensitive(
            other._tags
        )

    def __str__(self) -> str:
        return f"{len(self._persons)} persons, {len(self._tags)} tags"
