"""Application layer: commands, the model they run against, result DTOs and the parser."""

from addressbook.application.commands import (
    ALL_COMMANDS,
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
    UndoableCommand,
    UndoCommand,
    UnwhitelistCommand,
    WhitelistCommand,
)
from addressbook.application.dto import (
    CommandOutcome,
    CommandResult,
    Duplicate,
    Invalid,
    NotFound,
)
from addressbook.application.model import ModelManager
from addressbook.application.parser import ParseError, parse_command

__all__ = [
    "ALL_COMMANDS",
    "AddCommand",
    "BanCommand",
    "BlacklistCommand",
    "BorrowCommand",
    "Command",
    "CommandOutcome",
    "CommandResult",
    "DeleteCommand",
    "Duplicate",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "Invalid",
    "ListCommand",
    "ModelManager",
    "NotFound",
    "ParseError",
    "RedoCommand",
    "RepaidCommand",
    "SelectCommand",
    "SortCommand",
    "UnbanCommand",
    "UndoCommand",
    "UndoableCommand",
    "UnwhitelistCommand",
    "WhitelistCommand",
    "parse_command",
]
