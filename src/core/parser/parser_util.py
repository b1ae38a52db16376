"""Field parsers shared by every command parser.

Each helper trims its input, validates it and either returns the model value
or raises `ParseError` with the field's constraint message.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from core.domain import fields
from core.domain.index import Index
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_INDEX


def parse_index(one_based_index: str) -> Index:
    trimmed = one_based_index.strip()
    if not (trimmed.isdigit() and trimmed.isascii()) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def _parse(value: str, is_valid, message: str) -> str:
    trimmed = value.strip()
    if not is_valid(trimmed):
        raise ParseError(message)
    return trimmed


def parse_name(name: str) -> str:
    return _parse(name, fields.is_valid_name, fields.NAME_CONSTRAINTS)


def parse_phone(phone: str) -> str:
    return _parse(phone, fields.is_valid_phone, fields.PHONE_CONSTRAINTS)


def parse_email(email: str) -> str:
    return _parse(email, fields.is_valid_email, fields.EMAIL_CONSTRAINTS)


def parse_address(address: str) -> str:
    return _parse(address, fields.is_valid_address, fields.ADDRESS_CONSTRAINTS)


def parse_tag(tag: str) -> str:
    return _parse(tag, fields.is_valid_tag, fields.TAG_CONSTRAINTS)


def parse_tags(tags: Iterable[str]) -> frozenset[str]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_title(title: str) -> str:
    return _parse(title, fields.is_valid_title, fields.TITLE_CONSTRAINTS)


def parse_link(link: str) -> str:
    return _parse(link, fields.is_valid_link, fields.LINK_CONSTRAINTS)


def parse_start_time(start_time: str) -> datetime:
    trimmed = _parse(start_time, fields.is_valid_start_time, fields.START_TIME_CONSTRAINTS)
    return fields.parse_start_time(trimmed)


def parse_duration(duration: str) -> int:
    return int(_parse(duration, fields.is_valid_duration, fields.DURATION_CONSTRAINTS))


def check_meeting_span(start_time: datetime, duration: int) -> None:
    if not fields.is_valid_meeting_span(start_time, duration):
        raise ParseError(fields.MEETING_END_CONSTRAINTS)


def parse_tags_for_edit(tags: list[str]) -> frozenset[str] | None:
    """Tags for an edit command.

    None when no ``t/`` was given (keep the old tags). A single empty ``t/``
    clears every tag.
    """

    if not tags:
        return None
    if tags == [""]:
        return frozenset()
    return parse_tags(tags)
