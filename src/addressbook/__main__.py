"""
Interactive command line for the address book.
Run: python -m addressbook (from repo root, with .env or env vars set).
"""

import logging
import sys

from addressbook.application import (
    CommandOutcome,
    CommandResult,
    Duplicate,
    Invalid,
    ModelManager,
    NotFound,
    ParseError,
    parse_command,
)
from addressbook.config import Settings, load_settings
from addressbook.domain import DuplicatePersonError, Person
from addressbook.infrastructure import SeedError, load_seed

logger = logging.getLogger(__name__)

PROMPT = "> "


def format_person(index: int, person: Person) -> str:
    flags = []
    if person.is_blacklisted:
        flags.append("blacklisted")
    if person.is_whitelisted:
        flags.append("whitelisted")
    suffix = f" ({', '.join(flags)})" if flags else ""
    return f"{index}. {person}{suffix}"


def render(outcome: CommandOutcome, model: ModelManager) -> str:
    """Turn a command outcome into the text shown to the user."""
    if isinstance(outcome, CommandResult):
        lines = [outcome.feedback]
        if outcome.show_list:
            shown = model.get_filtered_person_list()
            lines.extend(format_person(i, p) for i, p in enumerate(shown, start=1))
        return "\n".join(lines)
    if isinstance(outcome, Duplicate):
        return f"Duplicate: {outcome.message}"
    if isinstance(outcome, NotFound):
        return f"Not found: {outcome.message}"
    if isinstance(outcome, Invalid):
        return outcome.reason
    raise TypeError(f"Unexpected command outcome: {outcome!r}")


def build_model(settings: Settings) -> ModelManager:
    if settings.seed_path is None:
        return ModelManager()
    snapshot = load_seed(settings.seed_path, default_region=settings.default_region)
    model = ModelManager(snapshot)
    logger.info("Loaded %s from %s", model.address_book, settings.seed_path)
    return model


def run(model: ModelManager, settings: Settings, lines, out=None) -> None:
    """Execute command lines until exhausted or an exit command. Output goes to out, or stdout."""
    if out is None:
        out = sys.stdout
    for line in lines:
        if not line.strip():
            continue
        try:
            command = parse_command(line, default_region=settings.default_region)
        except ParseError as e:
            print(str(e), file=out)
            continue
        outcome = command.execute(model)
        print(render(outcome, model), file=out)
        if isinstance(outcome, CommandResult) and outcome.exit:
            return


def _stdin_lines():
    while True:
        try:
            yield input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level),
    )
    try:
        model = build_model(settings)
    except (SeedError, DuplicatePersonError) as e:
        raise SystemExit(f"Could not load seed file: {e}") from e
    logger.info("Address book ready (%s). Type 'help' for commands.", model.address_book)
    run(model, settings, _stdin_lines())


if __name__ == "__main__":
    main()
