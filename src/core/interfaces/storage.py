"""Storage contracts.

Design rules:
- `read` returns None when nothing has been saved yet, and raises
  `DataConversionError` when the stored data cannot be used.
- `save` replaces the stored data completely.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.address_book import AddressBook
from core.domain.prefs import UserPrefs


@runtime_checkable
class AddressBookStorage(Protocol):
    @property
    def file_path(self) -> Path: ...

    def read(self) -> AddressBook | None: ...

    def save(self, address_book: AddressBook) -> None: ...


@runtime_checkable
class UserPrefsStorage(Protocol):
    @property
    def file_path(self) -> Path: ...

    def read(self) -> UserPrefs | None: ...

    def save(self, prefs: UserPrefs) -> None: ...
