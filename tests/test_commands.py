"""Unit tests for commands run against a ModelManager. No parser involved."""

from addressbook.application import (
    AddCommand,
    BanCommand,
    BlacklistCommand,
    BorrowCommand,
    CommandResult,
    DeleteCommand,
    Duplicate,
    EditCommand,
    EditPersonDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    Invalid,
    ListCommand,
    ModelManager,
    NotFound,
    RedoCommand,
    RepaidCommand,
    SelectCommand,
    SortCommand,
    UnbanCommand,
    UndoCommand,
    UnwhitelistCommand,
    WhitelistCommand,
)
from addressbook.application.commands import (
    MESSAGE_INVALID_INDEX,
    MESSAGE_NO_SELECTION,
    MESSAGE_PERSON_NOT_FOUND,
)
from addressbook.domain import (
    Address,
    Debt,
    Email,
    Name,
    Person,
    PersonNotFoundError,
    Phone,
    PostalCode,
    Tag,
)


def _person(name: str, *tags: str, debt: str = "0") -> Person:
    return Person(
        name=Name(name),
        phone=Phone("+12025551234"),
        email=Email("someone@example.com"),
        address=Address("1 Main St"),
        postal_code=PostalCode("123456"),
        debt=Debt(debt),
        tags=frozenset(Tag(t) for t in tags),
    )


def _model(*names: str) -> ModelManager:
    model = ModelManager()
    for name in names:
        AddCommand(_person(name)).execute(model)
    return model


def _names(model: ModelManager) -> list[str]:
    return [p.name.value for p in model.get_filtered_person_list()]


def test_add_then_duplicate():
    model = ModelManager()
    r1 = AddCommand(_person("Alex")).execute(model)
    assert isinstance(r1, CommandResult)
    assert r1.feedback.startswith("New person added: Alex")

    r2 = AddCommand(_person("ALEX")).execute(model)
    assert isinstance(r2, Duplicate)
    assert r2.message == AddCommand.MESSAGE_DUPLICATE_PERSON
    assert _names(model) == ["Alex"]


def test_delete_by_index_and_invalid_index():
    model = _model("Alex", "Bernice")
    result = DeleteCommand(1).execute(model)
    assert isinstance(result, CommandResult)
    assert _names(model) == ["Bernice"]

    bad = DeleteCommand(5).execute(model)
    assert isinstance(bad, Invalid)
    assert bad.reason == MESSAGE_INVALID_INDEX


def test_delete_without_index_uses_selection():
    model = _model("Alex", "Bernice")
    assert isinstance(DeleteCommand().execute(model), Invalid)

    SelectCommand(2).execute(model)
    assert model.get_selected_person().name.value == "Bernice"
    DeleteCommand().execute(model)
    assert _names(model) == ["Alex"]
    assert model.get_selected_person() is None

    result = DeleteCommand().execute(model)
    assert isinstance(result, Invalid)
    assert result.reason == MESSAGE_NO_SELECTION


def test_index_refers_to_displayed_list():
    model = _model("Alex", "Bernice", "Charlotte")
    FindCommand(["charlotte"]).execute(model)
    assert _names(model) == ["Charlotte"]
    DeleteCommand(1).execute(model)
    ListCommand().execute(model)
    assert _names(model) == ["Alex", "Bernice"]


def test_edit_updates_fields_and_keeps_position():
    model = _model("Alex", "Bernice")
    descriptor = EditPersonDescriptor(email=Email("alex@new.com"), tags=frozenset({Tag("vip")}))
    result = EditCommand(1, descriptor).execute(model)
    assert isinstance(result, CommandResult)
    alex = model.get_filtered_person_list()[0]
    assert alex.email.value == "alex@new.com"
    assert alex.tags == frozenset({Tag("vip")})
    assert model.address_book.resolve_tag("vip") is next(iter(alex.tags))


def test_edit_rename_to_existing_person_is_duplicate():
    model = _model("Alex", "Bernice")
    result = EditCommand(1, EditPersonDescriptor(name=Name("bernice"))).execute(model)
    assert isinstance(result, Duplicate)
    assert _names(model) == ["Alex", "Bernice"]


def test_edit_without_fields_is_invalid():
    model = _model("Alex")
    result = EditCommand(1, EditPersonDescriptor()).execute(model)
    assert isinstance(result, Invalid)
    assert result.reason == EditCommand.MESSAGE_NOT_EDITED


def test_edit_empty_tags_clears_tags():
    model = ModelManager()
    AddCommand(_person("Alex", "friends")).execute(model)
    EditCommand(1, EditPersonDescriptor(tags=frozenset())).execute(model)
    assert model.get_filtered_person_list()[0].tags == frozenset()


def test_sort_command():
    model = _model("charlotte", "Alex", "Bernice")
    result = SortCommand("name").execute(model)
    assert result == CommandResult(
        feedback="Address book has been sorted by name!", show_list=True
    )
    assert _names(model) == ["Alex", "Bernice", "charlotte"]

    bad = SortCommand("email").execute(model)
    assert isinstance(bad, Invalid)
    assert "Unknown sort order" in bad.reason


def test_ban_keeps_position_and_clears_whitelist():
    model = _model("Alex", "Bernice")
    RepaidCommand(1).execute(model)
    assert model.get_filtered_person_list()[0].is_whitelisted

    result = BanCommand(1).execute(model)
    assert isinstance(result, CommandResult)
    alex, bernice = model.get_filtered_person_list()
    assert alex.name.value == "Alex"
    assert alex.is_blacklisted
    assert not alex.is_whitelisted
    assert not bernice.is_blacklisted

    again = BanCommand(1).execute(model)
    assert isinstance(again, Invalid)
    assert "already in the blacklist" in again.reason


def test_blacklist_and_whitelist_listing():
    model = _model("Alex", "Bernice", "Charlotte")
    BanCommand(3).execute(model)
    RepaidCommand(2).execute(model)

    BlacklistCommand().execute(model)
    assert _names(model) == ["Charlotte"]
    WhitelistCommand().execute(model)
    assert _names(model) == ["Bernice"]

    UnwhitelistCommand(1).execute(model)
    assert _names(model) == []
    ListCommand().execute(model)
    assert _names(model) == ["Alex", "Bernice", "Charlotte"]


def test_unban_and_unwhitelist_require_membership():
    model = _model("Alex")
    assert isinstance(UnbanCommand(1).execute(model), Invalid)
    assert isinstance(UnwhitelistCommand(1).execute(model), Invalid)
    BanCommand(1).execute(model)
    assert isinstance(UnbanCommand(1).execute(model), CommandResult)
    assert not model.get_filtered_person_list()[0].is_blacklisted


def test_borrow_and_repaid():
    model = ModelManager()
    AddCommand(_person("Alex", debt="10.00")).execute(model)
    result = BorrowCommand(1, Debt("5.00")).execute(model)
    assert isinstance(result, CommandResult)
    assert result.feedback == "Alex has borrowed $5.00, current debt is $15.00"
    assert model.get_filtered_person_list()[0].debt == Debt("15.00")

    BanCommand(1).execute(model)
    RepaidCommand(1).execute(model)
    alex = model.get_filtered_person_list()[0]
    assert alex.debt.is_zero()
    assert alex.is_whitelisted
    assert not alex.is_blacklisted

    again = RepaidCommand(1).execute(model)
    assert isinstance(again, Invalid)


def test_selection_of_removed_person_is_dropped():
    model = _model("Alex")
    SelectCommand(1).execute(model)
    model.address_book.remove_person(_person("Alex"))
    result = BorrowCommand(None, Debt("1")).execute(model)
    assert result == Invalid(reason=MESSAGE_NO_SELECTION)


def test_person_missing_from_book_reports_not_found(monkeypatch):
    model = _model("Alex")

    def vanish(target):
        raise PersonNotFoundError()

    monkeypatch.setattr(model, "delete_person", vanish)
    result = DeleteCommand(1).execute(model)
    assert result == NotFound(message=MESSAGE_PERSON_NOT_FOUND)
    assert _names(model) == ["Alex"]


def test_undo_and_redo():
    model = _model("Alex")
    AddCommand(_person("Bernice")).execute(model)
    BorrowCommand(1, Debt("3")).execute(model)

    assert isinstance(UndoCommand().execute(model), CommandResult)
    assert model.get_filtered_person_list()[0].debt.is_zero()
    UndoCommand().execute(model)
    assert _names(model) == ["Alex"]

    RedoCommand().execute(model)
    assert _names(model) == ["Alex", "Bernice"]
    RedoCommand().execute(model)
    assert model.get_filtered_person_list()[0].debt == Debt("3.00")
    assert isinstance(RedoCommand().execute(model), Invalid)


def test_failed_command_is_not_recorded_for_undo():
    model = ModelManager()
    assert isinstance(UndoCommand().execute(model), Invalid)
    AddCommand(_person("Alex")).execute(model)
    AddCommand(_person("Alex")).execute(model)
    UndoCommand().execute(model)
    assert _names(model) == []
    assert isinstance(UndoCommand().execute(model), Invalid)


def test_new_command_clears_redo():
    model = _model("Alex")
    UndoCommand().execute(model)
    AddCommand(_person("Bernice")).execute(model)
    assert isinstance(RedoCommand().execute(model), Invalid)


def test_help_and_exit():
    model = ModelManager()
    help_result = HelpCommand().execute(model)
    assert "add: Adds a person" in help_result.feedback
    assert "undo" in help_result.feedback
    exit_result = ExitCommand().execute(model)
    assert exit_result.exit is True

