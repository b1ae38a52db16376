"""Application start-up.

This module wires settings, storage, model and clipboard together so every
entry point (interactive shell, `exec`, `doctor`, tests) starts the same
way. Side effects limited to reading files and logging; warnings are
returned for the UI to display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from adapters.clipboard import SystemClipboard
from adapters.json_storage import JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
from adapters.sample_data import sample_address_book
from core.config import AppSettings
from core.domain.address_book import AddressBook
from core.domain.prefs import UserPrefs
from core.domain.tab import Tab
from core.errors import DataConversionError
from core.interfaces.clipboard import Clipboard
from core.services.logic import LogicManager
from core.services.model_manager import ModelManager

logger = logging.getLogger(__name__)


@dataclass
class StartupResult:
    logic: LogicManager
    warnings: list[str] = field(default_factory=list)


def resolve_data_file(settings: AppSettings, prefs: UserPrefs) -> Path:
    """Environment beats preferences, preferences beat the default location."""

    if settings.data_file is not None:
        return settings.data_file
    if prefs.address_book_file_path is not None:
        return prefs.address_book_file_path
    return AppSettings.default_data_file()


def _load_prefs(storage: JsonUserPrefsStorage, warnings: list[str]) -> UserPrefs:
    try:
        prefs = storage.read()
    except DataConversionError as exc:
        message = f"Preferences file {storage.file_path} is not in the correct format. Using default preferences."
        logger.warning("%s (%s)", message, exc)
        warnings.append(message)
        return UserPrefs()
    return prefs if prefs is not None else UserPrefs()


def _load_address_book(storage: JsonAddressBookStorage, warnings: list[str]) -> AddressBook:
    try:
        book = storage.read()
    except DataConversionError as exc:
        message = f"Data file {storage.file_path} could not be loaded ({exc}). Starting with an empty address book."
        logger.warning(message)
        warnings.append(message)
        return AddressBook()

    if book is None:
        logger.info("Data file not found. Starting with a sample address book.")
        return sample_address_book()
    return book


def start(
    settings: AppSettings | None = None,
    *,
    clipboard: Clipboard | None = None,
    tab: Tab | None = None,
) -> StartupResult:
    settings = settings or AppSettings()
    warnings: list[str] = []

    prefs_storage = JsonUserPrefsStorage(settings.prefs_file)
    prefs = _load_prefs(prefs_storage, warnings)

    data_file = resolve_data_file(settings, prefs)
    book_storage = JsonAddressBookStorage(data_file)
    book = _load_address_book(book_storage, warnings)

    model = ModelManager(book, prefs)
    if settings.data_file is None:
        model.address_book_file_path = data_file
    if tab is not None:
        model.set_active_tab(tab)

    logic = LogicManager(
        model,
        StorageManager(book_storage, prefs_storage),
        clipboard if clipboard is not None else SystemClipboard(),
    )
    logger.info("Started with data file %s (%r)", data_file, book)
    return StartupResult(logic=logic, warnings=warnings)
