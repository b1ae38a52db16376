"""Domain records (Pydantic v2).

Why Pydantic in the domain:
- Records are immutable (`frozen=True`) and every field is re-validated at
  construction, so an invalid person or meeting cannot exist in memory.
- Editing never mutates a record: commands build a replacement with
  `model_copy(update=...)` and swap it in.

Note:
- These models describe *what* a contact or meeting is, not *how* it is
  stored (see `adapters.json_storage`) or shown (see `cli.ui_components`).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, Field, PositiveInt, model_validator
from pydantic.config import ConfigDict

from core.domain.fields import (
    MEETING_END_CONSTRAINTS,
    Address,
    Email,
    Link,
    Name,
    Phone,
    StartTime,
    Tag,
    Title,
    format_start_time,
    is_valid_meeting_span,
)


def _format_tags(tags: frozenset[str]) -> str:
    return "[" + ", ".join(sorted(tags)) + "]"


class Person(BaseModel):
    """A contact in the address book.

    Two persons are the *same person* when their names match; full equality
    (`==`) compares every field.
    """

    model_config = ConfigDict(frozen=True)

    name: Name = Field(..., description="Display name, also the identity of the contact.")
    phone: Phone = Field(..., description="Phone number (digits only).")
    email: Email = Field(..., description="Email address.")
    address: Address = Field(..., description="Free-form postal address.")
    tags: frozenset[Tag] = Field(default_factory=frozenset, description="Labels attached to the contact.")

    def is_same_person(self, other: Person | None) -> bool:
        """Weaker notion of equality used to reject duplicates."""

        return other is not None and other.name == self.name

    def describe(self) -> str:
        """Single-line rendering (what `copy` puts on the clipboard)."""

        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Tags: {_format_tags(self.tags)}"
        )

    def __str__(self) -> str:
        return self.describe()


class Meeting(BaseModel):
    """A scheduled meeting with a join link and a duration in minutes.

    Two meetings are the *same meeting* when both title and start time match.
    """

    model_config = ConfigDict(frozen=True)

    title: Title = Field(..., description="What the meeting is about.")
    link: Link = Field(..., description="Web address used to join the meeting.")
    start_time: StartTime = Field(..., description="Local start time, minute precision.")
    duration: PositiveInt = Field(..., description="Length of the meeting in minutes.")
    tags: frozenset[Tag] = Field(default_factory=frozenset, description="Labels attached to the meeting.")

    @model_validator(mode="after")
    def _ends_in_calendar(self) -> Meeting:
        if not is_valid_meeting_span(self.start_time, self.duration):
            raise ValueError(MEETING_END_CONSTRAINTS)
        return self

    @property
    def end_time(self) -> datetime:
        return self.start_time + timedelta(minutes=self.duration)

    def is_same_meeting(self, other: Meeting | None) -> bool:
        """Weaker notion of equality used to reject duplicates."""

        return other is not None and other.title == self.title and other.start_time == self.start_time

    def describe(self) -> str:
        """Single-line rendering (what `copy` puts on the clipboard)."""

        return (
            f"{self.title}; Link: {self.link}; Start: {format_start_time(self.start_time)}; "
            f"Duration: {self.duration} min; Tags: {_format_tags(self.tags)}"
        )

    def __str__(self) -> str:
        return self.describe()
