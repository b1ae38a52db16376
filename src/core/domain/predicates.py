"""Filtering predicates and sort keys for the person and meeting views.

Predicates are callables returning ``bool``. Comparators are callables
returning a sort key: the model applies them with a stable ``sorted``, which
is how "sort by matchness, then by start time" is expressed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Sequence

from core.domain.models import Meeting, Person

PersonPredicate = Callable[[Person], bool]
MeetingPredicate = Callable[[Meeting], bool]
MeetingSortKey = Callable[[Meeting], object]


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Whole-word, case-insensitive membership test.

    >>> contains_word_ignore_case("ABc def", "abc")
    True
    >>> contains_word_ignore_case("ABc def", "AB")
    False
    """

    prepared = word.strip()
    if not prepared:
        raise ValueError("Word parameter cannot be empty")
    if len(prepared.split()) != 1:
        raise ValueError("Word parameter should be a single word")

    needle = prepared.lower()
    return any(candidate.lower() == needle for candidate in sentence.split())


def show_all(_item: object) -> bool:
    return True


class _KeywordsBased:
    def __init__(self, keywords: Sequence[str]) -> None:
        self.keywords = list(keywords)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.keywords == self.keywords  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.keywords)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keywords!r})"


class NameContainsKeywordsPredicate(_KeywordsBased):
    """Person name contains any of the keywords."""

    def __call__(self, person: Person) -> bool:
        return any(contains_word_ignore_case(person.name, keyword) for keyword in self.keywords)


def _meeting_matches(meeting: Meeting, keyword: str) -> bool:
    if contains_word_ignore_case(meeting.title, keyword):
        return True
    needle = keyword.lower()
    return any(tag.lower() == needle for tag in meeting.tags)


class MeetingContainsKeywordsPredicate(_KeywordsBased):
    """Meeting title contains any keyword, or one of its tags equals one."""

    def __call__(self, meeting: Meeting) -> bool:
        return any(_meeting_matches(meeting, keyword) for keyword in self.keywords)


class MeetingKeywordMatchnessComparator(_KeywordsBased):
    """Meetings matching more distinct keywords sort first."""

    def matchness(self, meeting: Meeting) -> int:
        distinct = {keyword.lower() for keyword in self.keywords}
        return sum(1 for keyword in distinct if _meeting_matches(meeting, keyword))

    def __call__(self, meeting: Meeting) -> int:
        return -self.matchness(meeting)


class MeetingTimeSorter:
    """Earliest start time first."""

    def __call__(self, meeting: Meeting) -> datetime:
        return meeting.start_time

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MeetingTimeSorter)

    def __hash__(self) -> int:
        return hash(MeetingTimeSorter)
