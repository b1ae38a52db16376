"""Command execution: parse, apply to the model, persist.

The CLI hands raw command-box text to `LogicManager.execute` and renders
whatever the model exposes afterwards; it never touches storage itself.
"""

from __future__ import annotations

import logging
from pathlib import Path

from adapters.json_storage import StorageManager
from core.commands.base import CommandResult
from core.domain.address_book import AddressBook
from core.domain.models import Meeting, Person
from core.domain.prefs import UserPrefs
from core.domain.tab import Tab
from core.errors import CommandError
from core.interfaces.clipboard import Clipboard
from core.parser.address_book_parser import AddressBookParser
from core.services.model_manager import ModelManager

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_MESSAGE = "Could not save data to file: {}"


class LogicManager:
    def __init__(
        self,
        model: ModelManager,
        storage: StorageManager,
        clipboard: Clipboard,
        parser: AddressBookParser | None = None,
    ) -> None:
        self.model = model
        self.storage = storage
        self.clipboard = clipboard
        self.parser = parser or AddressBookParser()

    def execute(self, command_text: str) -> CommandResult:
        """Run one line of user input.

        Raises `ParseError` for malformed input and `CommandError` when the
        command cannot be applied or the result cannot be saved.
        """

        logger.info("----------------[USER COMMAND][%s][%s]", self.model.active_tab.value, command_text)

        command = self.parser.parse_command(command_text, self.model.active_tab)
        result = command.execute(self.model, self.clipboard)

        try:
            self.storage.save_address_book(self.model.address_book)
        except OSError as exc:
            logger.error("Saving %s failed: %s", self.storage.address_book_file_path, exc)
            raise CommandError(FILE_OPS_ERROR_MESSAGE.format(exc)) from exc

        logger.info("Result: %s", result.feedback_to_user)
        return result

    def save_user_prefs(self) -> None:
        try:
            self.storage.save_user_prefs(self.model.user_prefs)
        except OSError as exc:
            logger.error("Saving preferences to %s failed: %s", self.storage.prefs_file_path, exc)

    @property
    def address_book(self) -> AddressBook:
        return self.model.address_book

    @property
    def filtered_person_list(self) -> list[Person]:
        return self.model.filtered_person_list

    @property
    def sorted_and_filtered_meeting_list(self) -> list[Meeting]:
        return self.model.sorted_and_filtered_meeting_list

    @property
    def active_tab(self) -> Tab:
        return self.model.active_tab

    @property
    def user_prefs(self) -> UserPrefs:
        return self.model.user_prefs

    @property
    def address_book_file_path(self) -> Path:
        return self.storage.address_book_file_path
