"""In-memory application state and the live views the UI renders.

The person view is a filter over the book in insertion order. The meeting
view is always ordered by start time; a comparator installed by `find` is
applied on top with a stable sort, so it becomes the primary key while start
time breaks ties.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.domain.address_book import AddressBook
from core.domain.models import Meeting, Person
from core.domain.predicates import (
    MeetingPredicate,
    MeetingSortKey,
    MeetingTimeSorter,
    PersonPredicate,
    show_all,
)
from core.domain.prefs import UserPrefs
from core.domain.tab import Tab

logger = logging.getLogger(__name__)

SHOW_ALL = show_all


class ModelManager:
    def __init__(self, address_book: AddressBook | None = None, user_prefs: UserPrefs | None = None) -> None:
        self.address_book = address_book.copy() if address_book is not None else AddressBook()
        self.user_prefs = user_prefs.model_copy(deep=True) if user_prefs is not None else UserPrefs()
        self.active_tab: Tab = self.user_prefs.last_tab

        self._person_predicate: PersonPredicate = SHOW_ALL
        self._meeting_predicate: MeetingPredicate = SHOW_ALL
        self._meeting_comparator: MeetingSortKey | None = None

        logger.debug("Initialized model with %r", self.address_book)

    # prefs

    @property
    def address_book_file_path(self) -> Path | None:
        return self.user_prefs.address_book_file_path

    @address_book_file_path.setter
    def address_book_file_path(self, path: Path) -> None:
        self.user_prefs = self.user_prefs.model_copy(update={"address_book_file_path": path})

    def set_active_tab(self, tab: Tab) -> None:
        self.active_tab = tab
        self.user_prefs = self.user_prefs.model_copy(update={"last_tab": tab})

    def set_address_book(self, address_book: AddressBook) -> None:
        self.address_book.reset_data(address_book)

    # persons

    def has_person(self, person: Person) -> bool:
        return self.address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self.address_book.add_person(person)
        self.update_filtered_person_list(SHOW_ALL)

    def set_person(self, target: Person, edited: Person) -> None:
        self.address_book.set_person(target, edited)

    def delete_person(self, target: Person) -> None:
        self.address_book.remove_person(target)

    def clear_persons(self) -> None:
        self.address_book.clear_persons()

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._person_predicate = predicate

    @property
    def filtered_person_list(self) -> list[Person]:
        return [person for person in self.address_book.persons if self._person_predicate(person)]

    # meetings

    def has_meeting(self, meeting: Meeting) -> bool:
        return self.address_book.has_meeting(meeting)

    def add_meeting(self, meeting: Meeting) -> None:
        self.address_book.add_meeting(meeting)
        self.update_filtered_meeting_list(SHOW_ALL)

    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        self.address_book.set_meeting(target, edited)

    def delete_meeting(self, target: Meeting) -> None:
        self.address_book.remove_meeting(target)

    def clear_meetings(self) -> None:
        self.address_book.clear_meetings()

    def update_filtered_meeting_list(self, predicate: MeetingPredicate) -> None:
        self._meeting_predicate = predicate
        if predicate is SHOW_ALL:
            self._meeting_comparator = None

    def sort_filtered_meeting_list(self, comparator: MeetingSortKey | None) -> None:
        """Install the primary sort key of the meeting view.

        Passing `MeetingTimeSorter()` or `None` leaves plain start time order.
        """

        if isinstance(comparator, MeetingTimeSorter):
            comparator = None
        self._meeting_comparator = comparator

    @property
    def sorted_and_filtered_meeting_list(self) -> list[Meeting]:
        meetings = sorted(
            (meeting for meeting in self.address_book.meetings if self._meeting_predicate(meeting)),
            key=MeetingTimeSorter(),
        )
        if self._meeting_comparator is not None:
            meetings.sort(key=self._meeting_comparator)
        return meetings

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ModelManager)
            and self.address_book == other.address_book
            and self.user_prefs == other.user_prefs
            and self.filtered_person_list == other.filtered_person_list
            and self.sorted_and_filtered_meeting_list == other.sorted_and_filtered_meeting_list
        )
