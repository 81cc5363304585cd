"""Commands: one object per user request, executed against a ModelManager.

Commands translate domain errors into result DTOs; nothing escapes execute() except
programming errors.
"""

import dataclasses
import logging
from dataclasses import dataclass

from addressbook.application.dto import (
    CommandOutcome,
    CommandResult,
    Duplicate,
    Invalid,
    NotFound,
)
from addressbook.application.model import (
    ModelManager,
    is_blacklisted,
    is_whitelisted,
    name_contains_any,
    show_all,
)
from addressbook.domain import (
    SORT_ORDERS,
    Address,
    Deadline,
    Debt,
    DuplicatePersonError,
    Email,
    Interest,
    Name,
    Person,
    PersonNotFoundError,
    Phone,
    PostalCode,
    Tag,
    ValidationError,
)

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "The person index provided is invalid"
MESSAGE_NO_SELECTION = "No person is selected. Provide an INDEX or select a person first."
MESSAGE_PERSON_NOT_FOUND = "The target person cannot be found in the address book"


class Command:
    """Base command. Subclasses set COMMAND_WORD and implement execute()."""

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    def execute(self, model: ModelManager) -> CommandOutcome:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and vars(other) == vars(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)!r})"


class UndoableCommand(Command):
    """A command that changes the book. Successful runs can be reverted with undo."""

    def execute(self, model: ModelManager) -> CommandOutcome:
        logger.debug("Executing %r", self)
        before = model.address_book.snapshot()
        outcome = self.execute_undoable(model)
        if isinstance(outcome, CommandResult):
            model.record_history(before)
        return outcome

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        raise NotImplementedError


def _target_person(model: ModelManager, index: int | None) -> Person | Invalid:
    """Resolve a 1-based index into the displayed list, or the selected person when None."""
    if index is None:
        selected = model.get_selected_person()
        if selected is None:
            return Invalid(reason=MESSAGE_NO_SELECTION)
        return selected
    shown = model.get_filtered_person_list()
    if index < 1 or index > len(shown):
        return Invalid(reason=MESSAGE_INVALID_INDEX)
    return shown[index - 1]


class AddCommand(UndoableCommand):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS c/POSTAL_CODE "
        "[b/DEBT] [int/INTEREST] [dl/DEADLINE] [t/TAG]...\n"
        "Example: add n/John Doe p/+6598765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 c/120311 b/100.50 t/friends"
    )
    MESSAGE_SUCCESS = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(self, person: Person) -> None:
        self.person = person

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        try:
            added = model.add_person(self.person)
        except DuplicatePersonError:
            return Duplicate(message=self.MESSAGE_DUPLICATE_PERSON)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(added), show_list=True)


class DeleteCommand(UndoableCommand):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the selected person or the person identified by the index "
        "number used in the last person listing.\n"
        "Parameters: [INDEX] (must be a positive integer if present)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        try:
            model.delete_person(target)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(target), show_list=True)


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person. None leaves a field as it is; an empty tags set clears all tags."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    postal_code: PostalCode | None = None
    debt: Debt | None = None
    interest: Interest | None = None
    deadline: Deadline | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in dataclasses.fields(self))

    def apply_to(self, person: Person) -> Person:
        changes = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }
        return dataclasses.replace(person, **changes)


class EditCommand(UndoableCommand):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used "
        "in the last person listing. Existing values will be overwritten.\n"
        "Parameters: INDEX [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [c/POSTAL_CODE] "
        "[b/DEBT] [int/INTEREST] [dl/DEADLINE] [t/TAG]...\n"
        "Example: edit 1 p/+6591234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited Person: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."

    def __init__(self, index: int, descriptor: EditPersonDescriptor) -> None:
        self.index = index
        self.descriptor = descriptor

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        if not self.descriptor.is_any_field_edited():
            return Invalid(reason=self.MESSAGE_NOT_EDITED)
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        try:
            edited = self.descriptor.apply_to(target)
            updated = model.update_person(target, edited)
        except ValidationError as e:
            return Invalid(reason=str(e))
        except DuplicatePersonError:
            return Duplicate(message=self.MESSAGE_DUPLICATE_PERSON)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(updated), show_list=True)


class SortCommand(UndoableCommand):
    COMMAND_WORD = "sort"
    MESSAGE_USAGE = (
        "sort: Sorts the address book by the specified ordering.\n"
        f"Parameters: ORDERING (one of: {', '.join(SORT_ORDERS)})\n"
        "Example: sort name"
    )
    MESSAGE_SUCCESS = "Address book has been sorted by {}!"

    def __init__(self, order: str) -> None:
        self.order = order

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        try:
            model.sort_by(self.order)
        except ValidationError as e:
            return Invalid(reason=str(e))
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(self.order), show_list=True)


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: ModelManager) -> CommandOutcome:
        model.update_filtered_person_list(show_all)
        return CommandResult(feedback=self.MESSAGE_SUCCESS, show_list=True)


class BlacklistCommand(Command):
    COMMAND_WORD = "blacklist"
    MESSAGE_SUCCESS = "Listed all blacklisted persons"

    def execute(self, model: ModelManager) -> CommandOutcome:
        model.update_filtered_person_list(is_blacklisted)
        return CommandResult(feedback=self.MESSAGE_SUCCESS, show_list=True)


class WhitelistCommand(Command):
    COMMAND_WORD = "whitelist"
    MESSAGE_SUCCESS = "Listed all whitelisted persons"

    def execute(self, model: ModelManager) -> CommandOutcome:
        model.update_filtered_person_list(is_whitelisted)
        return CommandResult(feedback=self.MESSAGE_SUCCESS, show_list=True)


class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob"
    )
    MESSAGE_SUCCESS = "{} persons listed!"

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = keywords

    def execute(self, model: ModelManager) -> CommandOutcome:
        model.update_filtered_person_list(name_contains_any(self.keywords))
        shown = model.get_filtered_person_list()
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(len(shown)), show_list=True)


class SelectCommand(Command):
    COMMAND_WORD = "select"
    MESSAGE_USAGE = (
        "select: Selects the person identified by the index number used in the last "
        "person listing.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: select 1"
    )
    MESSAGE_SUCCESS = "Selected Person: {}"

    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        model.select(target)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(self.index))


class BanCommand(UndoableCommand):
    COMMAND_WORD = "ban"
    MESSAGE_USAGE = (
        "ban: Adds the selected person or the person at INDEX to the blacklist.\n"
        "Parameters: [INDEX]\n"
        "Example: ban 1"
    )
    MESSAGE_SUCCESS = "{} has been added to the blacklist"
    MESSAGE_ALREADY_BANNED = "{} is already in the blacklist"

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        if target.is_blacklisted:
            return Invalid(reason=self.MESSAGE_ALREADY_BANNED.format(target.name))
        try:
            model.ban_person(target)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(target.name), show_list=True)


class UnbanCommand(UndoableCommand):
    COMMAND_WORD = "unban"
    MESSAGE_USAGE = (
        "unban: Removes the selected person or the person at INDEX from the blacklist.\n"
        "Parameters: [INDEX]\n"
        "Example: unban 1"
    )
    MESSAGE_SUCCESS = "{} has been removed from the blacklist"
    MESSAGE_NOT_BANNED = "{} is not in the blacklist"

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        if not target.is_blacklisted:
            return Invalid(reason=self.MESSAGE_NOT_BANNED.format(target.name))
        try:
            model.unban_person(target)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(target.name), show_list=True)


class RepaidCommand(UndoableCommand):
    COMMAND_WORD = "repaid"
    MESSAGE_USAGE = (
        "repaid: Clears the debt of the selected person or the person at INDEX and "
        "moves them to the whitelist.\n"
        "Parameters: [INDEX]\n"
        "Example: repaid 1"
    )
    MESSAGE_SUCCESS = "{} has now repaid their debt"
    MESSAGE_ALREADY_REPAID = "{} has already repaid their debt"

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        if target.debt.is_zero() and target.is_whitelisted:
            return Invalid(reason=self.MESSAGE_ALREADY_REPAID.format(target.name))
        try:
            model.repay_debt(target)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(target.name), show_list=True)


class UnwhitelistCommand(UndoableCommand):
    COMMAND_WORD = "unwhitelist"
    MESSAGE_USAGE = (
        "unwhitelist: Removes the selected person or the person at INDEX from the whitelist.\n"
        "Parameters: [INDEX]\n"
        "Example: unwhitelist 1"
    )
    MESSAGE_SUCCESS = "{} has been removed from the whitelist"
    MESSAGE_NOT_WHITELISTED = "{} is not in the whitelist"

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        if not target.is_whitelisted:
            return Invalid(reason=self.MESSAGE_NOT_WHITELISTED.format(target.name))
        try:
            model.unwhitelist_person(target)
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(feedback=self.MESSAGE_SUCCESS.format(target.name), show_list=True)


class BorrowCommand(UndoableCommand):
    COMMAND_WORD = "borrow"
    MESSAGE_USAGE = (
        "borrow: Increases the debt of the selected person or the person at INDEX.\n"
        "Parameters: [INDEX] AMOUNT (non-negative, up to 12 digits and 2 decimal places)\n"
        "Example: borrow 1 500.50"
    )
    MESSAGE_SUCCESS = "{} has borrowed ${}, current debt is ${}"

    def __init__(self, index: int | None, amount: Debt) -> None:
        self.index = index
        self.amount = amount

    def execute_undoable(self, model: ModelManager) -> CommandOutcome:
        target = _target_person(model, self.index)
        if isinstance(target, Invalid):
            return target
        try:
            updated = model.add_debt(target, self.amount)
        except ValidationError as e:
            return Invalid(reason=str(e))
        except PersonNotFoundError:
            return NotFound(message=MESSAGE_PERSON_NOT_FOUND)
        return CommandResult(
            feedback=self.MESSAGE_SUCCESS.format(target.name, self.amount, updated.debt),
            show_list=True,
        )


class UndoCommand(Command):
    COMMAND_WORD = "undo"
    MESSAGE_SUCCESS = "Undo success!"
    MESSAGE_FAILURE = "No more commands to undo!"

    def execute(self, model: ModelManager) -> CommandOutcome:
        if not model.can_undo():
            return Invalid(reason=self.MESSAGE_FAILURE)
        model.undo()
        return CommandResult(feedback=self.MESSAGE_SUCCESS, show_list=True)


class RedoCommand(Command):
    COMMAND_WORD = "redo"
    MESSAGE_SUCCESS = "Redo success!"
    MESSAGE_FAILURE = "No more commands to redo!"

    def execute(self, model: ModelManager) -> CommandOutcome:
        if not model.can_redo():
            return Invalid(reason=self.MESSAGE_FAILURE)
        model.redo()
        return CommandResult(feedback=self.MESSAGE_SUCCESS, show_list=True)


class HelpCommand(Command):
    COMMAND_WORD = "help"

    def execute(self, model: ModelManager) -> CommandOutcome:
        usages = [cls.MESSAGE_USAGE for cls in ALL_COMMANDS if cls.MESSAGE_USAGE]
        simple = [cls.COMMAND_WORD for cls in ALL_COMMANDS if not cls.MESSAGE_USAGE]
        usages.append("Other commands: " + ", ".join(simple))
        return CommandResult(feedback="\n\n".join(usages))


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_SUCCESS = "Exiting Address Book as requested ..."

    def execute(self, model: ModelManager) -> CommandOutcome:
        return CommandResult(feedback=self.MESSAGE_SUCCESS, exit=True)


ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    DeleteCommand,
    EditCommand,
    SortCommand,
    ListCommand,
    BlacklistCommand,
    WhitelistCommand,
    FindCommand,
    SelectCommand,
    BanCommand,
    UnbanCommand,
    RepaidCommand,
    UnwhitelistCommand,
    BorrowCommand,
    UndoCommand,
    RedoCommand,
    HelpCommand,
    ExitCommand,
)
