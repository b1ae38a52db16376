from datetime import datetime

import pytest

from core.domain import fields
from core.domain.index import Index
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_INDEX
from core.parser import parser_util


def test_parse_index_accepts_positive_integers_with_whitespace():
    assert parser_util.parse_index("1") == Index.from_one_based(1)
    assert parser_util.parse_index("  10  ") == Index.from_one_based(10)


@pytest.mark.parametrize("value", ["", "0", "-1", "+1", "1.0", "a", "1 2", "١"])
def test_parse_index_rejects(value):
    with pytest.raises(ParseError, match=MESSAGE_INVALID_INDEX):
        parser_util.parse_index(value)


def test_field_parsers_trim_and_validate():
    assert parser_util.parse_name("  Rachel Walker ") == "Rachel Walker"
    assert parser_util.parse_phone(" 123456 ") == "123456"
    assert parser_util.parse_email(" rachel@example.com ") == "rachel@example.com"
    assert parser_util.parse_address(" 123 Main Street #0505 ") == "123 Main Street #0505"
    assert parser_util.parse_title(" Weekly Sync ") == "Weekly Sync"
    assert parser_util.parse_link(" https://zoom.us/j/1 ") == "https://zoom.us/j/1"
    assert parser_util.parse_start_time(" 2022-10-31 1400 ") == datetime(2022, 10, 31, 14, 0)
    assert parser_util.parse_duration(" 45 ") == 45


@pytest.mark.parametrize(
    "parse,value,message",
    [
        (parser_util.parse_name, "R@chel", fields.NAME_CONSTRAINTS),
        (parser_util.parse_phone, "+651234", fields.PHONE_CONSTRAINTS),
        (parser_util.parse_email, "example.com", fields.EMAIL_CONSTRAINTS),
        (parser_util.parse_address, " ", fields.ADDRESS_CONSTRAINTS),
        (parser_util.parse_tag, "#friend", fields.TAG_CONSTRAINTS),
        (parser_util.parse_title, "", fields.TITLE_CONSTRAINTS),
        (parser_util.parse_link, "zoom", fields.LINK_CONSTRAINTS),
        (parser_util.parse_start_time, "31/10/2022 2pm", fields.START_TIME_CONSTRAINTS),
        (parser_util.parse_duration, "1h", fields.DURATION_CONSTRAINTS),
    ],
)
def test_field_parsers_surface_constraint_messages(parse, value, message):
    with pytest.raises(ParseError) as excinfo:
        parse(value)
    assert str(excinfo.value) == message


def test_parse_tags_deduplicates():
    assert parser_util.parse_tags(["friend", " friend ", "colleague"]) == frozenset({"friend", "colleague"})
    assert parser_util.parse_tags([]) == frozenset()


def test_parse_tags_for_edit():
    assert parser_util.parse_tags_for_edit([]) is None
    assert parser_util.parse_tags_for_edit([""]) == frozenset()
    assert parser_util.parse_tags_for_edit(["a", "b"]) == frozenset({"a", "b"})
    with pytest.raises(ParseError):
        parser_util.parse_tags_for_edit(["a", ""])
