"""Parse one line of user input into a Command.

Arguments use prefixes: n/NAME p/PHONE e/EMAIL a/ADDRESS c/POSTAL_CODE b/DEBT
int/INTEREST dl/DEADLINE t/TAG. Text before the first prefix is the preamble
(an index, a sort order, keywords).
"""

import re
from collections.abc import Callable

from addressbook.application.commands import (
    AddCommand,
    BanCommand,
    BlacklistCommand,
    BorrowCommand,
    Command,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    RedoCommand,
    RepaidCommand,
    SelectCommand,
    SortCommand,
    UnbanCommand,
    UndoCommand,
    UnwhitelistCommand,
    WhitelistCommand,
)
from addressbook.domain import (
    Address,
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

PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_ADDRESS = "a/"
PREFIX_POSTAL_CODE = "c/"
PREFIX_DEBT = "b/"
PREFIX_INTEREST = "int/"
PREFIX_DEADLINE = "dl/"
PREFIX_TAG = "t/"

_PREFIX_SPLIT = re.compile(r"\s+(?=(?:n|p|e|a|c|b|int|dl|t)/)")

MESSAGE_UNKNOWN_COMMAND = "Unknown command. Type 'help' to see available commands."
MESSAGE_INVALID_FORMAT = "Invalid command format!\n{}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

ALIASES = {
    "a": "add",
    "d": "delete",
    "e": "edit",
    "f": "find",
    "l": "list",
    "s": "select",
    "u": "undo",
    "r": "redo",
}


class ParseError(ValueError):
    """The input line does not form a valid command."""


def tokenize(args: str) -> tuple[str, dict[str, list[str]]]:
    """Split arguments into the preamble and the values given for each prefix, in order."""
    chunks = _PREFIX_SPLIT.split(" " + args.strip())
    preamble = chunks[0].strip()
    values: dict[str, list[str]] = {}
    for chunk in chunks[1:]:
        prefix, _, value = chunk.partition("/")
        values.setdefault(prefix + "/", []).append(value.strip())
    return preamble, values


def parse_index(text: str) -> int:
    """Parse a 1-based index."""
    text = text.strip()
    if not text.isdigit() or int(text) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(text)


def _optional_index(preamble: str) -> int | None:
    return parse_index(preamble) if preamble else None


def _last(values: dict[str, list[str]], prefix: str) -> str | None:
    found = values.get(prefix)
    return found[-1] if found else None


def _tags(values: dict[str, list[str]]) -> frozenset[Tag]:
    return frozenset(Tag(name) for name in values.get(PREFIX_TAG, []) if name)


def _parse_add(args: str, default_region: str | None) -> Command:
    preamble, values = tokenize(args)
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_POSTAL_CODE)
    if preamble or any(_last(values, prefix) is None for prefix in required):
        raise ParseError(MESSAGE_INVALID_FORMAT.format(AddCommand.MESSAGE_USAGE))
    debt = _last(values, PREFIX_DEBT)
    interest = _last(values, PREFIX_INTEREST)
    deadline = _last(values, PREFIX_DEADLINE)
    person = Person(
        name=Name(_last(values, PREFIX_NAME)),
        phone=Phone.parse(_last(values, PREFIX_PHONE), default_region),
        email=Email(_last(values, PREFIX_EMAIL)),
        address=Address(_last(values, PREFIX_ADDRESS)),
        postal_code=PostalCode(_last(values, PREFIX_POSTAL_CODE)),
        debt=Debt(debt) if debt else Debt.zero(),
        interest=Interest(interest) if interest else None,
        deadline=Deadline(deadline) if deadline else None,
        tags=_tags(values),
    )
    return AddCommand(person)


def _parse_edit(args: str, default_region: str | None) -> Command:
    preamble, values = tokenize(args)
    if not preamble:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(EditCommand.MESSAGE_USAGE))
    index = parse_index(preamble)

    def field(prefix: str, build: Callable[[str], object]):
        raw = _last(values, prefix)
        return build(raw) if raw is not None else None

    descriptor = EditPersonDescriptor(
        name=field(PREFIX_NAME, Name),
        phone=field(PREFIX_PHONE, lambda raw: Phone.parse(raw, default_region)),
        email=field(PREFIX_EMAIL, Email),
        address=field(PREFIX_ADDRESS, Address),
        postal_code=field(PREFIX_POSTAL_CODE, PostalCode),
        debt=field(PREFIX_DEBT, Debt),
        interest=field(PREFIX_INTEREST, Interest),
        deadline=field(PREFIX_DEADLINE, Deadline),
        tags=_tags(values) if PREFIX_TAG in values else None,
    )
    return EditCommand(index, descriptor)


def _parse_sort(args: str, default_region: str | None) -> Command:
    order = args.strip().lower()
    if not order or len(order.split()) != 1:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(SortCommand.MESSAGE_USAGE))
    return SortCommand(order)


def _parse_find(args: str, default_region: str | None) -> Command:
    keywords = args.split()
    if not keywords:
        raise ParseError(MESSAGE_INVALID_FORMAT.format(FindCommand.MESSAGE_USAGE))
    return FindCommand(keywords)


def _parse_select(args: str, default_region: str | None) -> Command:
    if not args.strip():
        raise ParseError(MESSAGE_INVALID_FORMAT.format(SelectCommand.MESSAGE_USAGE))
    return SelectCommand(parse_index(args))


def _parse_borrow(args: str, default_region: str | None) -> Command:
    parts = args.split()
    if len(parts) == 1:
        return BorrowCommand(None, Debt(parts[0]))
    if len(parts) == 2:
        return BorrowCommand(parse_index(parts[0]), Debt(parts[1]))
    raise ParseError(MESSAGE_INVALID_FORMAT.format(BorrowCommand.MESSAGE_USAGE))


def _index_command(command_cls: type[Command]) -> Callable[[str, str | None], Command]:
    def parse(args: str, default_region: str | None) -> Command:
        return command_cls(_optional_index(args))

    return parse


def _no_args(command_cls: type[Command]) -> Callable[[str, str | None], Command]:
    def parse(args: str, default_region: str | None) -> Command:
        return command_cls()

    return parse


_PARSERS: dict[str, Callable[[str, str | None], Command]] = {
    AddCommand.COMMAND_WORD: _parse_add,
    EditCommand.COMMAND_WORD: _parse_edit,
    SortCommand.COMMAND_WORD: _parse_sort,
    FindCommand.COMMAND_WORD: _parse_find,
    SelectCommand.COMMAND_WORD: _parse_select,
    BorrowCommand.COMMAND_WORD: _parse_borrow,
    DeleteCommand.COMMAND_WORD: _index_command(DeleteCommand),
    BanCommand.COMMAND_WORD: _index_command(BanCommand),
    UnbanCommand.COMMAND_WORD: _index_command(UnbanCommand),
    RepaidCommand.COMMAND_WORD: _index_command(RepaidCommand),
    UnwhitelistCommand.COMMAND_WORD: _index_command(UnwhitelistCommand),
    ListCommand.COMMAND_WORD: _no_args(ListCommand),
    BlacklistCommand.COMMAND_WORD: _no_args(BlacklistCommand),
    WhitelistCommand.COMMAND_WORD: _no_args(WhitelistCommand),
    UndoCommand.COMMAND_WORD: _no_args(UndoCommand),
    RedoCommand.COMMAND_WORD: _no_args(RedoCommand),
    HelpCommand.COMMAND_WORD: _no_args(HelpCommand),
    ExitCommand.COMMAND_WORD: _no_args(ExitCommand),
}


def parse_command(text: str, default_region: str | None = None) -> Command:
    """Parse a command line. Raises ParseError for unknown commands or bad arguments."""
    words = (text or "").strip().split(maxsplit=1)
    if not words:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    word = words[0].lower()
    args = words[1] if len(words) > 1 else ""
    parser = _PARSERS.get(ALIASES.get(word, word))
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    try:
        return parser(args, default_region)
    except ValidationError as e:
        raise ParseError(str(e)) from e
