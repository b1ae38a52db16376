"""Duplicate-free lists of persons and meetings, and the book holding them.

Uniqueness uses the weaker `is_same_*` identity rather than `==`, so two
persons with the same name (or two meetings with the same title and start
time) can never coexist even when their other fields differ.
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

from core.domain.models import Meeting, Person
from core.errors import (
    DuplicateMeetingError,
    DuplicatePersonError,
    MeetbookError,
    MeetingNotFoundError,
    PersonNotFoundError,
)

T = TypeVar("T", Person, Meeting)


class _UniqueList(Generic[T]):
    _duplicate_error: type[MeetbookError]
    _not_found_error: type[MeetbookError]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self.set_all(items)

    def _is_same(self, a: T, b: T) -> bool:
        raise NotImplementedError

    def contains(self, item: T) -> bool:
        return any(self._is_same(existing, item) for existing in self._items)

    def add(self, item: T) -> None:
        if self.contains(item):
            raise self._duplicate_error()
        self._items.append(item)

    def set_item(self, target: T, edited: T) -> None:
        """Replace `target` with `edited`, keeping its position."""

        try:
            position = self._items.index(target)
        except ValueError:
            raise self._not_found_error() from None

        if not self._is_same(target, edited) and self.contains(edited):
            raise self._duplicate_error()
        self._items[position] = edited

    def remove(self, item: T) -> None:
        try:
            self._items.remove(item)
        except ValueError:
            raise self._not_found_error() from None

    def set_all(self, items: Iterable[T]) -> None:
        replacement = list(items)
        if not self._all_unique(replacement):
            raise self._duplicate_error()
        self._items = replacement

    def _all_unique(self, items: list[T]) -> bool:
        for i, first in enumerate(items):
            for second in items[i + 1 :]:
                if self._is_same(first, second):
                    return False
        return True

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, type(self)) and self._items == other._items


class UniquePersonList(_UniqueList[Person]):
    _duplicate_error = DuplicatePersonError
    _not_found_error = PersonNotFoundError

    def _is_same(self, a: Person, b: Person) -> bool:
        return a.is_same_person(b)


class UniqueMeetingList(_UniqueList[Meeting]):
    _duplicate_error = DuplicateMeetingError
    _not_found_error = MeetingNotFoundError

    def _is_same(self, a: Meeting, b: Meeting) -> bool:
        return a.is_same_meeting(b)


class AddressBook:
    """All persons and meetings known to the application."""

    def __init__(self, persons: Iterable[Person] = (), meetings: Iterable[Meeting] = ()) -> None:
        self.persons = UniquePersonList(persons)
        self.meetings = UniqueMeetingList(meetings)

    def reset_data(self, other: AddressBook) -> None:
        self.persons.set_all(other.persons)
        self.meetings.set_all(other.meetings)

    def copy(self) -> AddressBook:
        return AddressBook(self.persons, self.meetings)

    # persons

    def has_person(self, person: Person) -> bool:
        return self.persons.contains(person)

    def add_person(self, person: Person) -> None:
        self.persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self.persons.set_item(target, edited)

    def remove_person(self, person: Person) -> None:
        self.persons.remove(person)

    def clear_persons(self) -> None:
        self.persons.set_all([])

    # meetings

    def has_meeting(self, meeting: Meeting) -> bool:
        return self.meetings.contains(meeting)

    def add_meeting(self, meeting: Meeting) -> None:
        self.meetings.add(meeting)

    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        self.meetings.set_item(target, edited)

    def remove_meeting(self, meeting: Meeting) -> None:
        self.meetings.remove(meeting)

    def clear_meetings(self) -> None:
        self.meetings.set_all([])

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, AddressBook)
            and self.persons == other.persons
            and self.meetings == other.meetings
        )

    def __repr__(self) -> str:
        return f"AddressBook(persons={len(self.persons)}, meetings={len(self.meetings)})"

