from datetime import datetime

import pytest

from core.commands.general_commands import ExitCommand, HelpCommand, SwitchCommand
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
from core.commands.person_commands import (
    AddPersonCommand,
    ClearPersonsCommand,
    CopyPersonCommand,
    DeletePersonCommand,
    EditPersonCommand,
    EditPersonDescriptor,
    FindPersonCommand,
    ListPersonsCommand,
)
from core.domain import fields
from core.domain.index import Index
from core.domain.predicates import (
    MeetingContainsKeywordsPredicate,
    MeetingKeywordMatchnessComparator,
    NameContainsKeywordsPredicate,
)
from core.domain.tab import Tab
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_NOT_EDITED, MESSAGE_UNKNOWN_COMMAND
from core.parser.address_book_parser import AddressBookParser
from core.parser.meeting_parsers import parse_add_meeting, parse_edit_meeting, parse_find_meeting
from core.parser.person_parsers import parse_add_person, parse_edit_person
from typical import AMY, make_meeting

parser = AddressBookParser()
FIRST = Index.from_one_based(1)
THIRD = Index.from_one_based(3)

AMY_ARGS = " n/Amy Bee p/11111111 e/amy@example.com a/Block 312, Amy Street 1"
MEETING_ARGS = " n/CS2103 Lecture l/https://nus-sg.zoom.us/j/123456 s/2022-10-28 1600 d/120 t/cs2103"


def _format_error(usage):
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


# AddressBookParser

def test_general_commands_work_in_both_tabs():
    for tab in Tab:
        assert parser.parse_command("help", tab) == HelpCommand()
        assert parser.parse_command("exit 3", tab) == ExitCommand()
        assert parser.parse_command("switch", tab) == SwitchCommand()


def test_switch_targets():
    assert parser.parse_command("switch meetings") == SwitchCommand(Tab.MEETINGS)
    assert parser.parse_command("switch  PERSONS ") == SwitchCommand(Tab.PERSONS)
    with pytest.raises(ParseError) as excinfo:
        parser.parse_command("switch calendar")
    assert str(excinfo.value) == _format_error(SwitchCommand.MESSAGE_USAGE)


def test_entity_words_follow_active_tab():
    assert parser.parse_command("list", Tab.PERSONS) == ListPersonsCommand()
    assert parser.parse_command("list", Tab.MEETINGS) == ListMeetingsCommand()
    assert parser.parse_command("clear", Tab.PERSONS) == ClearPersonsCommand()
    assert parser.parse_command("clear", Tab.MEETINGS) == ClearMeetingsCommand()
    assert parser.parse_command("delete 1", Tab.PERSONS) == DeletePersonCommand(FIRST)
    assert parser.parse_command("delete 1", Tab.MEETINGS) == DeleteMeetingCommand(FIRST)
    assert parser.parse_command("copy 3", Tab.PERSONS) == CopyPersonCommand(THIRD)
    assert parser.parse_command("copy 3", Tab.MEETINGS) == CopyMeetingCommand(THIRD)


def test_find_in_each_tab():
    assert parser.parse_command("find foo bar  baz", Tab.PERSONS) == FindPersonCommand(
        NameContainsKeywordsPredicate(["foo", "bar", "baz"])
    )
    assert parser.parse_command("find cs2103 lecture", Tab.MEETINGS) == FindMeetingCommand(
        MeetingContainsKeywordsPredicate(["cs2103", "lecture"]),
        MeetingKeywordMatchnessComparator(["cs2103", "lecture"]),
    )


def test_blank_input_is_invalid_format():
    with pytest.raises(ParseError) as excinfo:
        parser.parse_command("   ")
    assert str(excinfo.value) == _format_error(HelpCommand.MESSAGE_USAGE)


def test_unknown_command():
    with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
        parser.parse_command("unknownCommand")


def test_command_words_are_case_sensitive():
    with pytest.raises(ParseError, match=MESSAGE_UNKNOWN_COMMAND):
        parser.parse_command("LIST")


# person parsers

def test_add_person_all_fields():
    command = parse_add_person(AMY_ARGS)
    assert command == AddPersonCommand(AMY)


def test_add_person_repeated_fields_last_wins_and_tags_accumulate():
    command = parse_add_person(" n/Bob Choo n/Amy Bee p/22222222 p/11111111 e/amy@example.com"
                               " a/Block 312, Amy Street 1 t/friend t/husband")
    assert command.to_add.name == "Amy Bee"
    assert command.to_add.phone == "11111111"
    assert command.to_add.tags == frozenset({"friend", "husband"})


@pytest.mark.parametrize(
    "args",
    [
        " Amy Bee p/11111111 e/amy@example.com a/Street",
        " n/Amy Bee e/amy@example.com a/Street",
        " n/Amy Bee p/11111111 a/Street",
        " n/Amy Bee p/11111111 e/amy@example.com",
        " preamble n/Amy Bee p/11111111 e/amy@example.com a/Street",
    ],
)
def test_add_person_missing_prefix_or_preamble(args):
    with pytest.raises(ParseError) as excinfo:
        parse_add_person(args)
    assert str(excinfo.value) == _format_error(AddPersonCommand.MESSAGE_USAGE)


def test_add_person_invalid_value_reports_first_failing_field():
    with pytest.raises(ParseError) as excinfo:
        parse_add_person(" n/Amy& p/11111111 e/amy@example.com a/Street")
    assert str(excinfo.value) == fields.NAME_CONSTRAINTS
    with pytest.raises(ParseError) as excinfo:
        parse_add_person(AMY_ARGS + " t/not_alnum!")
    assert str(excinfo.value) == fields.TAG_CONSTRAINTS


def test_edit_person_some_fields():
    command = parse_edit_person(" 3 p/91234567 e/amy@example.com")
    assert command == EditPersonCommand(THIRD, EditPersonDescriptor(phone="91234567", email="amy@example.com"))


def test_edit_person_reset_tags():
    command = parse_edit_person(" 1 t/")
    assert command == EditPersonCommand(FIRST, EditPersonDescriptor(tags=frozenset()))


def test_edit_person_no_field_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_person(" 1")
    assert str(excinfo.value) == MESSAGE_NOT_EDITED


@pytest.mark.parametrize("args", ["", " n/Amy", " -5 n/Amy", " 0 n/Amy", " 1 some random string", " 1 i/ string"])
def test_edit_person_invalid_preamble(args):
    with pytest.raises(ParseError) as excinfo:
        parse_edit_person(args)
    assert str(excinfo.value) == _format_error(EditPersonCommand.MESSAGE_USAGE)


def test_edit_person_invalid_value():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_person(" 1 e/not-an-email")
    assert str(excinfo.value) == fields.EMAIL_CONSTRAINTS


def test_delete_and_copy_invalid_index():
    with pytest.raises(ParseError) as excinfo:
        parser.parse_command("delete a", Tab.PERSONS)
    assert str(excinfo.value) == _format_error(DeletePersonCommand.MESSAGE_USAGE)
    with pytest.raises(ParseError) as excinfo:
        parser.parse_command("copy", Tab.MEETINGS)
    assert str(excinfo.value) == _format_error(CopyMeetingCommand.MESSAGE_USAGE)


def test_find_without_keywords():
    with pytest.raises(ParseError) as excinfo:
        parser.parse_command("find   ", Tab.PERSONS)
    assert str(excinfo.value) == _format_error(FindPersonCommand.MESSAGE_USAGE)
    with pytest.raises(ParseError) as excinfo:
        parse_find_meeting("  ")
    assert str(excinfo.value) == _format_error(FindMeetingCommand.MESSAGE_USAGE)


# meeting parsers

def test_add_meeting_all_fields():
    assert parse_add_meeting(MEETING_ARGS) == AddMeetingCommand(make_meeting())


def test_add_meeting_link_containing_prefix_like_text():
    command = parse_add_meeting(" n/Sync l/https://example.com/d/1?t/2 s/2022-10-28 1600 d/15")
    assert command.to_add.link == "https://example.com/d/1?t/2"
    assert command.to_add.duration == 15
    assert command.to_add.tags == frozenset()


@pytest.mark.parametrize(
    "args",
    [
        " n/Sync s/2022-10-28 1600 d/15",
        " n/Sync l/https://example.com d/15",
        " n/Sync l/https://example.com s/2022-10-28 1600",
        " l/https://example.com s/2022-10-28 1600 d/15",
        " 1 n/Sync l/https://example.com s/2022-10-28 1600 d/15",
    ],
)
def test_add_meeting_missing_prefix_or_preamble(args):
    with pytest.raises(ParseError) as excinfo:
        parse_add_meeting(args)
    assert str(excinfo.value) == _format_error(AddMeetingCommand.MESSAGE_USAGE)


@pytest.mark.parametrize(
    "args,message",
    [
        (" n/Sync! l/https://example.com s/2022-10-28 1600 d/15", fields.TITLE_CONSTRAINTS),
        (" n/Sync l/example s/2022-10-28 1600 d/15", fields.LINK_CONSTRAINTS),
        (" n/Sync l/https://example.com s/2022-10-28 16:00 d/15", fields.START_TIME_CONSTRAINTS),
        (" n/Sync l/https://example.com s/2022-10-28 1600 d/zero", fields.DURATION_CONSTRAINTS),
        (" n/Sync l/https://example.com s/2022-10-28 1600 d/0", fields.DURATION_CONSTRAINTS),
        (" n/New Year l/https://example.com s/9999-12-31 2359 d/1", fields.MEETING_END_CONSTRAINTS),
        (" n/Long l/https://example.com s/2022-10-28 1600 d/9999999999", fields.MEETING_END_CONSTRAINTS),
    ],
)
def test_add_meeting_invalid_values(args, message):
    with pytest.raises(ParseError) as excinfo:
        parse_add_meeting(args)
    assert str(excinfo.value) == message


def test_edit_meeting_fields():
    command = parse_edit_meeting(" 1 n/Lab Session s/2022-11-01 0900 d/45 l/https://zoom.us/j/5")
    assert command == EditMeetingCommand(
        FIRST,
        EditMeetingDescriptor(
            title="Lab Session",
            link="https://zoom.us/j/5",
            start_time=datetime(2022, 11, 1, 9, 0),
            duration=45,
        ),
    )


def test_edit_meeting_tags_only():
    command = parse_edit_meeting(" 3 t/exam t/cs2103")
    assert command == EditMeetingCommand(THIRD, EditMeetingDescriptor(tags=frozenset({"exam", "cs2103"})))


def test_edit_meeting_with_no_field_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_meeting(" 2")
    assert str(excinfo.value) == MESSAGE_NOT_EDITED


def test_edit_meeting_invalid_index():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_meeting(" zero d/10")
    assert str(excinfo.value) == _format_error(EditMeetingCommand.MESSAGE_USAGE)


def test_edit_meeting_invalid_duration_is_a_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_meeting(" 1 d/ten")
    assert str(excinfo.value) == fields.DURATION_CONSTRAINTS


def test_edit_meeting_start_and_duration_past_the_calendar():
    with pytest.raises(ParseError) as excinfo:
        parse_edit_meeting(" 1 s/9999-12-31 2300 d/61")
    assert str(excinfo.value) == fields.MEETING_END_CONSTRAINTS
    command = parse_edit_meeting(" 1 s/9999-12-31 2300 d/59")
    assert command.descriptor.duration == 59
