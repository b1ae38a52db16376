"""Shared fixtures.

Every test runs with the user config directory, preferences and data file
redirected into its own tmp_path, so nothing touches the real home folder.
"""

import pytest

from adapters.clipboard import MemoryClipboard
from core.domain.address_book import AddressBook
from core.services.model_manager import ModelManager
from typical import TYPICAL_MEETINGS, TYPICAL_PERSONS


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "config"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for name in ("MEETBOOK_DATA_FILE", "MEETBOOK_PREFS_FILE", "MEETBOOK_LOG_LEVEL", "MEETBOOK_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def typical_book():
    return AddressBook(TYPICAL_PERSONS, TYPICAL_MEETINGS)


@pytest.fixture
def model(typical_book):
    return ModelManager(typical_book)


@pytest.fixture
def clipboard():
    return MemoryClipboard()
