"""Tabs (entity lists) the user can work in.

Living in the domain layer lets both the parser and the CLI share a single
source of truth for which command family is active.
"""

from __future__ import annotations

from enum import Enum


class Tab(str, Enum):
    """Entity list currently shown and targeted by entity commands."""

    PERSONS = "persons"
    MEETINGS = "meetings"

    @classmethod
    def default(cls) -> "Tab":
        """Return the tab shown when nothing else was remembered."""

        return cls.PERSONS

    def other(self) -> "Tab":
        """The tab `switch` moves to when given no argument."""

        return Tab.MEETINGS if self is Tab.PERSONS else Tab.PERSONS

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Meetings" if self is Tab.MEETINGS else "Persons"
