"""Commands acting on the meeting list.

Indexes always refer to the meeting list as currently displayed, i.e. after
the active filter and sort order have been applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from core.commands.base import Command, CommandResult, pick_displayed
from core.domain import fields
from core.domain.index import Index
from core.domain.models import Meeting
from core.domain.predicates import MeetingContainsKeywordsPredicate, MeetingKeywordMatchnessComparator
from core.errors import ClipboardUnavailableError, CommandError
from core.interfaces.clipboard import Clipboard
from core.messages import (
    MESSAGE_INVALID_MEETING_DISPLAYED_INDEX,
    MESSAGE_MEETINGS_LISTED_OVERVIEW,
    MESSAGE_NOT_EDITED,
)
from core.services.model_manager import SHOW_ALL, ModelManager

MESSAGE_DUPLICATE_MEETING = "This meeting already exists in the address book"


@dataclass
class AddMeetingCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a meeting to the address book. "
        "Parameters: n/TITLE l/LINK s/START_TIME (yyyy-MM-dd HHmm) d/DURATION (minutes) [t/TAG]...\n"
        "Example: add n/CS2103 Lecture l/https://nus-sg.zoom.us/j/123456 s/2022-10-28 1600 d/120 t/cs2103"
    )
    MESSAGE_SUCCESS = "New meeting added: {}"

    to_add: Meeting

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        if model.has_meeting(self.to_add):
            raise CommandError(MESSAGE_DUPLICATE_MEETING)
        model.add_meeting(self.to_add)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))


@dataclass
class EditMeetingDescriptor:
    """Fields to change; None means "keep the current value"."""

    title: str | None = None
    link: str | None = None
    start_time: datetime | None = None
    duration: int | None = None
    tags: frozenset[str] | None = None

    def is_any_field_edited(self) -> bool:
        return bool(self.changes())

    def changes(self) -> dict[str, object]:
        values = {
            "title": self.title,
            "link": self.link,
            "start_time": self.start_time,
            "duration": self.duration,
            "tags": self.tags,
        }
        return {key: value for key, value in values.items() if value is not None}

    def apply_to(self, meeting: Meeting) -> Meeting:
        return Meeting.model_validate({**meeting.model_dump(), **self.changes()})


@dataclass
class EditMeetingCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the meeting identified by the index number used in the displayed "
        "meeting list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/TITLE] [l/LINK] [s/START_TIME] [d/DURATION] [t/TAG]...\n"
        "Example: edit 1 s/2022-10-30 1000 d/90"
    )
    MESSAGE_SUCCESS = "Edited Meeting: {}"

    index: Index
    descriptor: EditMeetingDescriptor = field(default_factory=EditMeetingDescriptor)

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        if not self.descriptor.is_any_field_edited():
            raise CommandError(MESSAGE_NOT_EDITED)

        target = pick_displayed(
            model.sorted_and_filtered_meeting_list, self.index, MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
        )
        start_time = target.start_time if self.descriptor.start_time is None else self.descriptor.start_time
        duration = target.duration if self.descriptor.duration is None else self.descriptor.duration
        if not fields.is_valid_meeting_span(start_time, duration):
            raise CommandError(fields.MEETING_END_CONSTRAINTS)
        edited = self.descriptor.apply_to(target)

        if not target.is_same_meeting(edited) and model.has_meeting(edited):
            raise CommandError(MESSAGE_DUPLICATE_MEETING + ".")

        model.set_meeting(target, edited)
        model.update_filtered_meeting_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass
class DeleteMeetingCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the meeting identified by the index number used in the displayed meeting list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Meeting: {}"

    index: Index

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        target = pick_displayed(
            model.sorted_and_filtered_meeting_list, self.index, MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
        )
        model.delete_meeting(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass
class FindMeetingCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all meetings whose titles or tags contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers, best matches first.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find cs2103 lecture"
    )

    predicate: MeetingContainsKeywordsPredicate
    comparator: MeetingKeywordMatchnessComparator

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.update_filtered_meeting_list(self.predicate)
        model.sort_filtered_meeting_list(self.comparator)
        return CommandResult(
            MESSAGE_MEETINGS_LISTED_OVERVIEW.format(len(model.sorted_and_filtered_meeting_list))
        )


@dataclass
class ListMeetingsCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all meetings, earliest first."
    MESSAGE_SUCCESS = "Listed all meetings"

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.update_filtered_meeting_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass
class ClearMeetingsCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Deletes every meeting (persons are kept)."
    MESSAGE_SUCCESS = "Meeting list has been cleared!"

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        model.clear_meetings()
        model.update_filtered_meeting_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass
class CopyMeetingCommand(Command):
    COMMAND_WORD = "copy"
    MESSAGE_USAGE = (
        "copy: Copies the details of the meeting identified by the index number used in the displayed "
        "meeting list to the clipboard.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: copy 1"
    )
    MESSAGE_SUCCESS = "Copied Meeting: {}"

    index: Index

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        target = pick_displayed(
            model.sorted_and_filtered_meeting_list, self.index, MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
        )
        try:
            clipboard.copy(target.describe())
        except ClipboardUnavailableError as exc:
            raise CommandError(str(exc)) from exc
        return CommandResult(self.MESSAGE_SUCCESS.format(target))
