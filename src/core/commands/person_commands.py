"""Commands acting on the person list."""

from __future__ import annotations

from dataclasses import dataclass, field

from core.commands.base import Command, CommandResult, pick_displayed
from core.domain.index import Index
from core.domain.models import Person
from core.domain.predicates import NameContainsKeywordsPredicate
from core.errors import ClipboardUnavailableError, CommandError
from core.interfaces.clipboard import Clipboard
from core.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_NOT_EDITED,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
)
from core.services.model_manager import SHOW_ALL, ModelManager

MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"


@dataclass
class AddPersonCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS = "New person added: {}"

    to_add: Person

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        if model.has_person(self.to_add):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.to_add)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))


@dataclass
class EditPersonDescriptor:
    """Fields to change; None means "keep the current value"."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tags: frozenset[str] | None = None

    def is_any_field_edited(self) -> bool:
        return bool(self.changes())

    def changes(self) -> dict[str, object]:
        values = {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "tags": self.tags,
        }
        return {key: value for key, value in values.items() if value is not None}

    def apply_to(self, person: Person) -> Person:
        return Person.model_validate({**person.model_dump(), **self.changes()})


@dataclass
class EditPersonCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the person identified by the index number used in the displayed "
        "person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited Person: {}"

    index: Index
    descriptor: EditPersonDescriptor = field(default_factory=EditPersonDescriptor)

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        if not self.descriptor.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)

        target = pick_displayed(model.filtered_person_list, self.index, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        edited = self.descriptor.apply_to(target)

        if not target.is_same_person(edited) and model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON + ".")

        model.set_person(target, edited)
        model.update_filtered_person_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass
class DeletePersonCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Person: {}"

    index: Index

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        target = pick_displayed(model.filtered_person_list, self.index, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        model.delete_person(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass
class FindPersonCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords (case-insensitive) "
        "and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_person_list)))


@dataclass
class ListPersonsCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all persons."
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.update_filtered_person_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass
class ClearPersonsCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Deletes every person (meetings are kept)."
    MESSAGE_SUCCESS = "Person list has been cleared!"

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.clear_persons()
        model.update_filtered_person_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass
class CopyPersonCommand(Command):
    COMMAND_WORD = "copy"
    MESSAGE_USAGE = (
        "copy: Copies the details of the person identified by the index number used in the displayed "
        "person list to the clipboard.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: copy 1"
    )
    MESSAGE_SUCCESS = "Copied Person: {}"

    index: Index

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        target = pick_displayed(model.filtered_person_list, self.index, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        try:
            clipboard.copy(target.describe())
        except ClipboardUnavailableError as exc:
            raise CommandError(str(exc)) from exc
        return CommandResult(self.MESSAGE_SUCCESS.format(target))
