import pytest

from core.domain.address_book import AddressBook, UniqueMeetingList, UniquePersonList
from core.errors import (
    DuplicateMeetingError,
    DuplicatePersonError,
    MeetingNotFoundError,
    PersonNotFoundError,
)
from typical import ALICE, BENSON, LECTURE, TEAM_SYNC, make_meeting, make_person

ALICE_EDITED = make_person(address="Somewhere else", tags=("husband",))


def test_contains_uses_identity_not_equality():
    persons = UniquePersonList([ALICE])
    assert persons.contains(ALICE)
    assert persons.contains(ALICE_EDITED)
    assert not persons.contains(BENSON)


def test_add_duplicate_person_rejected():
    persons = UniquePersonList([ALICE])
    with pytest.raises(DuplicatePersonError):
        persons.add(ALICE_EDITED)


def test_set_item_keeps_position():
    persons = UniquePersonList([ALICE, BENSON])
    persons.set_item(ALICE, ALICE_EDITED)
    assert list(persons) == [ALICE_EDITED, BENSON]


def test_set_item_missing_target():
    with pytest.raises(PersonNotFoundError):
        UniquePersonList([BENSON]).set_item(ALICE, ALICE_EDITED)


def test_set_item_clashing_with_other_entry():
    persons = UniquePersonList([ALICE, BENSON])
    with pytest.raises(DuplicatePersonError):
        persons.set_item(ALICE, BENSON)


def test_remove():
    persons = UniquePersonList([ALICE, BENSON])
    persons.remove(ALICE)
    assert list(persons) == [BENSON]
    with pytest.raises(PersonNotFoundError):
        persons.remove(ALICE)


def test_set_all_rejects_duplicates_and_keeps_old_content():
    persons = UniquePersonList([BENSON])
    with pytest.raises(DuplicatePersonError):
        persons.set_all([ALICE, ALICE_EDITED])
    assert list(persons) == [BENSON]


def test_meeting_list_identity_is_title_and_start():
    meetings = UniqueMeetingList([LECTURE])
    with pytest.raises(DuplicateMeetingError):
        meetings.add(make_meeting(duration=10, tags=()))
    meetings.add(make_meeting(title="CS2103 Lab"))
    assert len(meetings) == 2
    with pytest.raises(MeetingNotFoundError):
        meetings.remove(TEAM_SYNC)


def test_address_book_reset_and_clear(typical_book):
    book = AddressBook()
    book.reset_data(typical_book)
    assert book == typical_book

    book.clear_persons()
    assert len(book.persons) == 0
    assert len(book.meetings) == 4

    book.clear_meetings()
    assert book == AddressBook()


def test_address_book_copy_is_independent(typical_book):
    copy = typical_book.copy()
    copy.remove_person(ALICE)
    assert typical_book.has_person(ALICE)
    assert not copy.has_person(ALICE)
