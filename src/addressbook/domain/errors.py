"""Domain errors. Each kind maps to a distinct, stable user-facing message."""


class AddressBookError(Exception):
    """Base class for every error raised by the address book core."""


class DuplicateError(AddressBookError):
    """An operation would leave two equivalent elements in a unique list."""

    message = "Operation would result in duplicate elements"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NotFoundError(AddressBookError):
    """An operation targets an element that is not in the list."""

    message = "Element not found in the list"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class DuplicatePersonError(DuplicateError):
    message = "Operation would result in duplicate persons"


class PersonNotFoundError(NotFoundError):
    message = "The person could not be found in the address book"


class DuplicateTagError(DuplicateError):
    message = "Operation would result in duplicate tags"


class TagNotFoundError(NotFoundError):
    message = "The tag could not be found in the address book"


class ValidationError(AddressBookError, ValueError):
    """A value object was constructed from malformed input."""
