"""Parsers for the meeting command family."""

from __future__ import annotations

from core.commands.meeting_commands import (
    AddMeetingCommand,
    ClearMeetingsCommand,
    CopyMeetingCommand,
    DeleteMeetingCommand,
    EditMeetingCommand,
    EditMeetingDescriptor,
    FindMeetingCommand,
    ListMeetingsCommand,
)
from core.domain.models import Meeting
from core.domain.predicates import MeetingContainsKeywordsPredicate, MeetingKeywordMatchnessComparator
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_NOT_EDITED
from core.parser import parser_util
from core.parser.syntax import PREFIX_DURATION, PREFIX_LINK, PREFIX_NAME, PREFIX_START_TIME, PREFIX_TAG
from core.parser.tokenizer import tokenize

_MEETING_PREFIXES = (PREFIX_NAME, PREFIX_LINK, PREFIX_START_TIME, PREFIX_DURATION, PREFIX_TAG)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def parse_add_meeting(args: str) -> AddMeetingCommand:
    argmap = tokenize(args, *_MEETING_PREFIXES)
    if not argmap.has(PREFIX_NAME, PREFIX_LINK, PREFIX_START_TIME, PREFIX_DURATION) or argmap.preamble:
        raise _invalid_format(AddMeetingCommand.MESSAGE_USAGE)

    title = parser_util.parse_title(argmap.get_value(PREFIX_NAME))
    link = parser_util.parse_link(argmap.get_value(PREFIX_LINK))
    start_time = parser_util.parse_start_time(argmap.get_value(PREFIX_START_TIME))
    duration = parser_util.parse_duration(argmap.get_value(PREFIX_DURATION))
    parser_util.check_meeting_span(start_time, duration)

    meeting = Meeting(
        title=title,
        link=link,
        start_time=start_time,
        duration=duration,
        tags=parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG)),
    )
    return AddMeetingCommand(meeting)


def parse_edit_meeting(args: str) -> EditMeetingCommand:
    argmap = tokenize(args, *_MEETING_PREFIXES)

    try:
        index = parser_util.parse_index(argmap.preamble)
    except ParseError as exc:
        raise _invalid_format(EditMeetingCommand.MESSAGE_USAGE) from exc

    descriptor = EditMeetingDescriptor()
    if (title := argmap.get_value(PREFIX_NAME)) is not None:
        descriptor.title = parser_util.parse_title(title)
    if (link := argmap.get_value(PREFIX_LINK)) is not None:
        descriptor.link = parser_util.parse_link(link)
    if (start_time := argmap.get_value(PREFIX_START_TIME)) is not None:
        descriptor.start_time = parser_util.parse_start_time(start_time)
    if (duration := argmap.get_value(PREFIX_DURATION)) is not None:
        descriptor.duration = parser_util.parse_duration(duration)
    if descriptor.start_time is not None and descriptor.duration is not None:
        parser_util.check_meeting_span(descriptor.start_time, descriptor.duration)
    descriptor.tags = parser_util.parse_tags_for_edit(argmap.get_all_values(PREFIX_TAG))

    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_NOT_EDITED)
    return EditMeetingCommand(index, descriptor)


def parse_delete_meeting(args: str) -> DeleteMeetingCommand:
    try:
        return DeleteMeetingCommand(parser_util.parse_index(args))
    except ParseError as exc:
        raise _invalid_format(DeleteMeetingCommand.MESSAGE_USAGE) from exc


def parse_copy_meeting(args: str) -> CopyMeetingCommand:
    try:
        return CopyMeetingCommand(parser_util.parse_index(args))
    except ParseError as exc:
        raise _invalid_format(CopyMeetingCommand.MESSAGE_USAGE) from exc


def parse_find_meeting(args: str) -> FindMeetingCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid_format(FindMeetingCommand.MESSAGE_USAGE)
    return FindMeetingCommand(
        MeetingContainsKeywordsPredicate(keywords),
        MeetingKeywordMatchnessComparator(keywords),
    )


MEETING_PARSERS = {
    AddMeetingCommand.COMMAND_WORD: parse_add_meeting,
    EditMeetingCommand.COMMAND_WORD: parse_edit_meeting,
    DeleteMeetingCommand.COMMAND_WORD: parse_delete_meeting,
    CopyMeetingCommand.COMMAND_WORD: parse_copy_meeting,
    FindMeetingCommand.COMMAND_WORD: parse_find_meeting,
    ListMeetingsCommand.COMMAND_WORD: lambda _args: ListMeetingsCommand(),
    ClearMeetingsCommand.COMMAND_WORD: lambda _args: ClearMeetingsCommand(),
}
