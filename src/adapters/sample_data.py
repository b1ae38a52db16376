"""Address book used on the very first start, before any data file exists."""

from __future__ import annotations

from datetime import datetime

from core.domain.address_book import AddressBook
from core.domain.models import Meeting, Person


def sample_persons() -> list[Person]:
    return [
        Person(
            name="Alex Yeoh",
            phone="87438807",
            email="alexyeoh@example.com",
            address="Blk 30 Geylang Street 29, #06-40",
            tags=frozenset({"friends"}),
        ),
        Person(
            name="Bernice Yu",
            phone="99272758",
            email="berniceyu@example.com",
            address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            tags=frozenset({"colleagues", "friends"}),
        ),
        Person(
            name="Charlotte Oliveiro",
            phone="93210283",
            email="charlotte@example.com",
            address="Blk 11 Ang Mo Kio Street 74, #11-04",
            tags=frozenset({"neighbours"}),
        ),
        Person(
            name="David Li",
            phone="91031282",
            email="lidavid@example.com",
            address="Blk 436 Serangoon Gardens Street 26, #16-43",
            tags=frozenset({"family"}),
        ),
    ]


def sample_meetings() -> list[Meeting]:
    return [
        Meeting(
            title="CS2103 Lecture",
            link="https://nus-sg.zoom.us/j/85036173457",
            start_time=datetime(2022, 10, 28, 16, 0),
            duration=120,
            tags=frozenset({"cs2103", "lecture"}),
        ),
        Meeting(
            title="CS2103 Team Meeting",
            link="https://meet.google.com/abc-defg-hij",
            start_time=datetime(2022, 10, 30, 20, 0),
            duration=60,
            tags=frozenset({"cs2103", "team"}),
        ),
        Meeting(
            title="CS2101 Tutorial",
            link="https://nus-sg.zoom.us/j/81234567890",
            start_time=datetime(2022, 10, 31, 10, 0),
            duration=90,
            tags=frozenset({"cs2101"}),
        ),
    ]


def sample_address_book() -> AddressBook:
    return AddressBook(sample_persons(), sample_meetings())
