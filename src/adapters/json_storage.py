"""JSON persistence of the address book and the user preferences.

Why JSON:
- Human-readable and hand-editable; one file holds both entity lists.
- The on-disk shape is owned by the `JsonAdapted*` models below, so the
  domain records can evolve without breaking saved files.

File layout::

    {
      "meetings": [{"title": "...", "link": "...", "startTime": "2022-10-31 1400",
                    "duration": "120", "tagged": ["cs2103"]}],
      "persons":  [{"name": "...", "phone": "...", "email": "...",
                    "address": "...", "tagged": ["friends"]}]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.domain import fields
from core.domain.address_book import AddressBook
from core.domain.models import Meeting, Person
from core.domain.prefs import UserPrefs
from core.errors import (
    DataConversionError,
    DuplicateMeetingError,
    DuplicatePersonError,
    IllegalValueError,
)
from core.interfaces.storage import AddressBookStorage, UserPrefsStorage

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_DUPLICATE_MEETING = "Meetings list contains duplicate meeting(s)."


def _missing(owner: str, field_name: str) -> IllegalValueError:
    return IllegalValueError(f"{owner}'s {field_name} field is missing!")


def _checked(value: str | None, owner: str, field_name: str, is_valid, message: str) -> str:
    if value is None:
        raise _missing(owner, field_name)
    if not is_valid(value):
        raise IllegalValueError(message)
    return value


def _checked_tags(tagged: list[str]) -> frozenset[str]:
    for tag in tagged:
        if not fields.is_valid_tag(tag):
            raise IllegalValueError(fields.TAG_CONSTRAINTS)
    return frozenset(tagged)


class JsonAdaptedPerson(BaseModel):
    """JSON-friendly version of `Person`."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    tagged: list[str] = Field(default_factory=list)

    @field_validator("tagged", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value

    @classmethod
    def from_model(cls, source: Person) -> JsonAdaptedPerson:
        return cls(
            name=source.name,
            phone=source.phone,
            email=source.email,
            address=source.address,
            tagged=sorted(source.tags),
        )

    def to_model_type(self) -> Person:
        """Convert back into a `Person`.

        Raises `IllegalValueError` if any data constraint is violated.
        """

        tags = _checked_tags(self.tagged)
        return Person(
            name=_checked(self.name, "Person", "Name", fields.is_valid_name, fields.NAME_CONSTRAINTS),
            phone=_checked(self.phone, "Person", "Phone", fields.is_valid_phone, fields.PHONE_CONSTRAINTS),
            email=_checked(self.email, "Person", "Email", fields.is_valid_email, fields.EMAIL_CONSTRAINTS),
            address=_checked(
                self.address, "Person", "Address", fields.is_valid_address, fields.ADDRESS_CONSTRAINTS
            ),
            tags=tags,
        )


class JsonAdaptedMeeting(BaseModel):
    """JSON-friendly version of `Meeting`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str | None = None
    link: str | None = None
    start_time: str | None = Field(default=None, alias="startTime")
    duration: str | None = None
    tagged: list[str] = Field(default_factory=list)

    @field_validator("tagged", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("duration", mode="before")
    @classmethod
    def _duration_as_text(cls, value):
        # Hand-edited files often store the duration as a bare number.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_model(cls, source: Meeting) -> JsonAdaptedMeeting:
        return cls(
            title=source.title,
            link=source.link,
            start_time=fields.format_start_time(source.start_time),
            duration=str(source.duration),
            tagged=sorted(source.tags),
        )

    def to_model_type(self) -> Meeting:
        """Convert back into a `Meeting`.

        Raises `IllegalValueError` if any data constraint is violated.
        """

        tags = _checked_tags(self.tagged)
        title = _checked(self.title, "Meeting", "Title", fields.is_valid_title, fields.TITLE_CONSTRAINTS)
        link = _checked(self.link, "Meeting", "Link", fields.is_valid_link, fields.LINK_CONSTRAINTS)
        start_time = _checked(
            self.start_time, "Meeting", "StartTime", fields.is_valid_start_time, fields.START_TIME_CONSTRAINTS
        )
        duration = _checked(
            self.duration, "Meeting", "Duration", fields.is_valid_duration, fields.DURATION_CONSTRAINTS
        )
        start = fields.parse_start_time(start_time)
        if not fields.is_valid_meeting_span(start, int(duration)):
            raise IllegalValueError(fields.MEETING_END_CONSTRAINTS)
        return Meeting(
            title=title,
            link=link,
            start_time=start,
            duration=int(duration),
            tags=tags,
        )


class JsonSerializableAddressBook(BaseModel):
    model_config = ConfigDict(extra="ignore")

    persons: list[JsonAdaptedPerson] = Field(default_factory=list)
    meetings: list[JsonAdaptedMeeting] = Field(default_factory=list)

    @classmethod
    def from_model(cls, source: AddressBook) -> JsonSerializableAddressBook:
        return cls(
            persons=[JsonAdaptedPerson.from_model(person) for person in source.persons],
            meetings=[JsonAdaptedMeeting.from_model(meeting) for meeting in source.meetings],
        )

    def to_model_type(self) -> AddressBook:
        book = AddressBook()
        for adapted in self.persons:
            try:
                book.add_person(adapted.to_model_type())
            except DuplicatePersonError:
                raise IllegalValueError(MESSAGE_DUPLICATE_PERSON) from None
        for adapted in self.meetings:
            try:
                book.add_meeting(adapted.to_model_type())
            except DuplicateMeetingError:
                raise IllegalValueError(MESSAGE_DUPLICATE_MEETING) from None
        return book


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DataConversionError(f"Could not read {path}: {exc}") from exc


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


class JsonAddressBookStorage:
    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> AddressBook | None:
        if not self._file_path.exists():
            logger.info("Data file %s not found", self._file_path)
            return None

        logger.debug("Reading address book from %s", self._file_path)
        data = _read_json(self._file_path)
        try:
            return JsonSerializableAddressBook.model_validate(data).to_model_type()
        except ValidationError as exc:
            logger.warning("Malformed address book in %s: %s", self._file_path, exc)
            raise DataConversionError(f"Malformed data file {self._file_path}") from exc
        except IllegalValueError as exc:
            logger.warning("Illegal values found in %s: %s", self._file_path, exc)
            raise DataConversionError(str(exc)) from exc

    def save(self, address_book: AddressBook) -> None:
        logger.debug("Saving address book to %s", self._file_path)
        payload = JsonSerializableAddressBook.from_model(address_book).model_dump(mode="json", by_alias=True)
        _write_json(self._file_path, payload)


class JsonUserPrefsStorage:
    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read(self) -> UserPrefs | None:
        if not self._file_path.exists():
            logger.info("Preferences file %s not found", self._file_path)
            return None

        data = _read_json(self._file_path)
        try:
            return UserPrefs.model_validate(data)
        except ValidationError as exc:
            logger.warning("Malformed preferences in %s: %s", self._file_path, exc)
            raise DataConversionError(f"Malformed preferences file {self._file_path}") from exc

    def save(self, prefs: UserPrefs) -> None:
        logger.debug("Saving preferences to %s", self._file_path)
        _write_json(self._file_path, prefs.model_dump(mode="json"))


class StorageManager:
    """Address book and preferences storage behind one object."""

    def __init__(self, address_book_storage: AddressBookStorage, prefs_storage: UserPrefsStorage) -> None:
        self.address_book_storage = address_book_storage
        self.prefs_storage = prefs_storage

    @property
    def address_book_file_path(self) -> Path:
        return self.address_book_storage.file_path

    @property
    def prefs_file_path(self) -> Path:
        return self.prefs_storage.file_path

    def read_address_book(self) -> AddressBook | None:
        return self.address_book_storage.read()

    def save_address_book(self, address_book: AddressBook) -> None:
        self.address_book_storage.save(address_book)

    def read_user_prefs(self) -> UserPrefs | None:
        return self.prefs_storage.read()

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self.prefs_storage.save(prefs)
