"""Result types returned by commands. The presentation layer only ever sees these."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Command succeeded. show_list asks the presenter to redraw the displayed persons."""

    feedback: str
    show_list: bool = False
    exit: bool = False


@dataclass(frozen=True)
class Duplicate:
    """The command would create a second copy of an existing person or tag."""

    message: str


@dataclass(frozen=True)
class NotFound:
    """The command targets a person or tag that is not in the address book."""

    message: str


@dataclass(frozen=True)
class Invalid:
    """The command was malformed or not applicable (bad index, bad value, no-op)."""

    reason: str


CommandOutcome = CommandResult | Duplicate | NotFound | Invalid
