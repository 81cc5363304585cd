"""Ordered, duplicate-free lists used for the book's persons and tags.

Uniqueness is checked at insertion against a per-type equivalence key, which may be
narrower than full equality (a person is identified by name only). Indices are only
valid against the current contents; any mutation may shift them.
"""

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from addressbook.domain.entities import Person
from addressbook.domain.errors import (
    DuplicateError,
    DuplicatePersonError,
    DuplicateTagError,
    NotFoundError,
    PersonNotFoundError,
    TagNotFoundError,
)
from addressbook.domain.values import Tag

T = TypeVar("T")


class UniqueList(Generic[T]):
    """A list that rejects elements equivalent to one it already holds."""

    duplicate_error: type[DuplicateError] = DuplicateError
    not_found_error: type[NotFoundError] = NotFoundError

    def __init__(self, items: Iterable[T] = (), *, key: Callable[[T], Hashable]) -> None:
        self._key = key
        self._items: list[T] = []
        self.set_all(items)

    def contains(self, item: T) -> bool:
        return self.index_of(item) != -1

    def index_of(self, item: T) -> int:
        """Return the position of the element equivalent to item, or -1."""
        wanted = self._key(item)
        for i, existing in enumerate(self._items):
            if self._key(existing) == wanted:
                return i
        return -1

    def get(self, index: int) -> T:
        return self._items[index]

    def add(self, item: T) -> None:
        self.insert(len(self._items), item)

    def insert(self, index: int, item: T) -> None:
        """Insert item at index. Raises duplicate_error if an equivalent element exists."""
        if self.contains(item):
            raise self.duplicate_error()
        self._items.insert(index, item)

    def remove(self, item: T) -> bool:
        """Remove the element equivalent to item. Raises not_found_error if absent."""
        index = self.index_of(item)
        if index == -1:
            raise self.not_found_error()
        del self._items[index]
        return True

    def check_replace(self, target: T, replacement: T) -> int:
        """Return target's index if replace(target, replacement) would succeed, else raise."""
        index = self.index_of(target)
        if index == -1:
            raise self.not_found_error()
        other = self.index_of(replacement)
        if other != -1 and other != index:
            raise self.duplicate_error()
        return index

    def replace(self, target: T, replacement: T) -> int:
        """Put replacement into target's slot. Nothing changes if either check fails."""
        index = self.check_replace(target, replacement)
        self._items[index] = replacement
        return index

    def merge_from(self, other: Iterable[T]) -> None:
        """Add every element of other that is not already present."""
        for item in other:
            if not self.contains(item):
                self._items.append(item)

    def set_all(self, items: Iterable[T]) -> None:
        """Replace the whole contents. Raises duplicate_error, leaving the list untouched."""
        replacement = list(items)
        seen: set[Hashable] = set()
        for item in replacement:
            k = self._key(item)
            if k in seen:
                raise self.duplicate_error()
            seen.add(k)
        self._items = replacement

    def sort(self, key: Callable[[T], object], reverse: bool = False) -> None:
        self._items.sort(key=key, reverse=reverse)

    def as_tuple(self) -> tuple[T, ...]:
        """Read-only snapshot of the contents in display order."""
        return tuple(self._items)

    def equals_order_insensitive(self, other: "UniqueList[T]") -> bool:
        return len(self._items) == len(other._items) and all(
            item in other._items for item in self._items
        )

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def _person_key(person: Person) -> str:
    return person.identity_key


def _tag_key(tag: Tag) -> str:
    return tag.name


class UniquePersonList(UniqueList[Person]):
    duplicate_error = DuplicatePersonError
    not_found_error = PersonNotFoundError

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        super().__init__(persons, key=_person_key)


class UniqueTagList(UniqueList[Tag]):
    duplicate_error = DuplicateTagError
    not_found_error = TagNotFoundError

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        super().__init__(tags, key=_tag_key)

    def by_name(self) -> dict[str, Tag]:
        """Map each tag name to the instance held in this list."""
        return {tag.name: tag for tag in self._items}
