"""In-process model the commands operate on: the book plus what the user is looking at."""

import logging
from collections.abc import Callable

from addressbook.domain import (
    AddressBook,
    AddressBookSnapshot,
    Debt,
    MembershipFlag,
    Person,
    ReadOnlyAddressBook,
)

logger = logging.getLogger(__name__)

PersonPredicate = Callable[[Person], bool]

# Number of past books kept for undo.
MAX_HISTORY = 50


def show_all(_person: Person) -> bool:
    return True


def is_blacklisted(person: Person) -> bool:
    return person.is_blacklisted


def is_whitelisted(person: Person) -> bool:
    return person.is_whitelisted


def name_contains_any(keywords: list[str]) -> PersonPredicate:
    """Match persons with a name word equal to any keyword, ignoring case."""
    wanted = {k.casefold() for k in keywords}

    def predicate(person: Person) -> bool:
        return any(word.casefold() in wanted for word in person.name.value.split())

    return predicate


class ModelManager:
    """
    Owns the AddressBook for the session and tracks the displayed (filtered) list,
    the selected person and the undo/redo history. Single-threaded: all calls must
    come from the thread running the command loop.
    """

    def __init__(self, address_book: ReadOnlyAddressBook | None = None) -> None:
        self._book = AddressBook(address_book)
        self._predicate: PersonPredicate = show_all
        self._selected_key: str | None = None
        self._undo: list[AddressBookSnapshot] = []
        self._redo: list[AddressBookSnapshot] = []
        logger.debug("Initialized model with %s", self._book)

    @property
    def address_book(self) -> AddressBook:
        return self._book

    # displayed list and selection

    def get_filtered_person_list(self) -> tuple[Person, ...]:
        return tuple(p for p in self._book.get_person_list() if self._predicate(p))

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def select(self, person: Person | None) -> None:
        self._selected_key = person.identity_key if person is not None else None

    def get_selected_person(self) -> Person | None:
        if self._selected_key is None:
            return None
        for person in self._book.get_person_list():
            if person.identity_key == self._selected_key:
                return person
        return None

    # history

    def record_history(self, before: AddressBookSnapshot) -> None:
        """Remember the book as it was before a successful undoable command."""
        self._undo.append(before)
        del self._undo[:-MAX_HISTORY]
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self) -> None:
        self._redo.append(self._book.snapshot())
        self._book.reset_data(self._undo.pop())
        logger.info("Undo: book is now %s", self._book)

    def redo(self) -> None:
        self._undo.append(self._book.snapshot())
        self._book.reset_data(self._redo.pop())
        logger.info("Redo: book is now %s", self._book)

    # mutations

    def add_person(self, person: Person) -> Person:
        added = self._book.add_person(person)
        self._predicate = show_all
        logger.info("Added person %s", added.name)
        return added

    def delete_person(self, target: Person) -> None:
        self._book.remove_person(target)
        if self._selected_key == target.identity_key:
            self._selected_key = None
        logger.info("Deleted person %s", target.name)

    def update_person(self, target: Person, edited: Person) -> Person:
        updated = self._book.update_person(target, edited)
        if self._selected_key == target.identity_key:
            self._selected_key = updated.identity_key
        logger.info("Updated person %s", updated.name)
        return updated

    def sort_by(self, order: str) -> None:
        self._book.sort_persons(order)
        logger.info("Sorted persons by %s", order)

    def ban_person(self, target: Person) -> Person:
        """Blacklist target. A blacklisted person cannot stay on the whitelist."""
        self._book.set_membership_flag(target, MembershipFlag.WHITELISTED, False)
        banned = self._book.set_membership_flag(target, MembershipFlag.BLACKLISTED, True)
        logger.info("Blacklisted person %s", target.name)
        return banned

    def unban_person(self, target: Person) -> Person:
        unbanned = self._book.remove_blacklisted_person(target)
        logger.info("Removed person %s from blacklist", target.name)
        return unbanned

    def unwhitelist_person(self, target: Person) -> Person:
        updated = self._book.remove_whitelisted_person(target)
        logger.info("Removed person %s from whitelist", target.name)
        return updated

    def add_debt(self, target: Person, amount: Debt) -> Person:
        updated = self._book.adjust_debt(target, amount)
        logger.info("Added %s to debt of %s", amount, target.name)
        return updated

    def repay_debt(self, target: Person) -> Person:
        """Clear target's debt and move them from the blacklist to the whitelist."""
        self._book.reset_debt(target)
        self._book.remove_blacklisted_person(target)
        repaid = self._book.add_whitelisted_person(target)
        logger.info("Person %s has repaid their debt", target.name)
        return repaid
