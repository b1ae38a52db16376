"""Field-level validation for persons and meetings.

Each field comes as three pieces:
- an ``is_valid_*`` predicate over the raw string (used by the parser and
  the JSON adapters before building records),
- a ``*_CONSTRAINTS`` message shown verbatim to the user on rejection,
- an ``Annotated`` type that re-checks the value when a record is built, so a
  `Person`/`Meeting` can never hold an invalid field.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Annotated, Callable

from pydantic import AfterValidator

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special characters, "
    "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
    "separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
TITLE_CONSTRAINTS = "Titles should only contain alphanumeric characters and spaces, and it should not be blank"
LINK_CONSTRAINTS = (
    "Links should be web addresses starting with http:// or https:// followed by a host name, "
    "and they should not contain spaces"
)
START_TIME_CONSTRAINTS = (
    "Start times should be real dates and times in the format yyyy-MM-dd HHmm, e.g. 2022-10-31 1400"
)
DURATION_CONSTRAINTS = "Durations should be a positive whole number of minutes"
MEETING_END_CONSTRAINTS = "Meetings should end no later than 9999-12-31 2359"

START_TIME_FORMAT = "%Y-%m-%d %H%M"

_ALNUM = "A-Za-z0-9"
_NAME_RE = re.compile(rf"[{_ALNUM}][{_ALNUM} ]*")
_PHONE_RE = re.compile(r"\d{3,}")
_EMAIL_LOCAL = rf"[{_ALNUM}]+(?:[+_.\-][{_ALNUM}]+)*"
_EMAIL_LABEL = rf"[{_ALNUM}](?:[{_ALNUM}\-]*[{_ALNUM}])?"
_EMAIL_LAST_LABEL = rf"[{_ALNUM}][{_ALNUM}\-]*[{_ALNUM}]"
_EMAIL_RE = re.compile(rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*{_EMAIL_LAST_LABEL}")
_ADDRESS_RE = re.compile(r"[^\s].*", re.DOTALL)
_TAG_RE = re.compile(rf"[{_ALNUM}]+")
_LINK_RE = re.compile(rf"https?://[{_ALNUM}](?:[{_ALNUM}.\-]*[{_ALNUM}])?(?::\d+)?(?:[/?#]\S*)?")
_START_TIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{4}")
_DURATION_RE = re.compile(r"[1-9]\d{0,9}")


def is_valid_name(value: str) -> bool:
    return bool(_NAME_RE.fullmatch(value))


def is_valid_phone(value: str) -> bool:
    return bool(_PHONE_RE.fullmatch(value))


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.fullmatch(value))


def is_valid_address(value: str) -> bool:
    return bool(_ADDRESS_RE.fullmatch(value))


def is_valid_tag(value: str) -> bool:
    return bool(_TAG_RE.fullmatch(value))


def is_valid_title(value: str) -> bool:
    return bool(_NAME_RE.fullmatch(value))


def is_valid_link(value: str) -> bool:
    return bool(_LINK_RE.fullmatch(value))


def is_valid_start_time(value: str) -> bool:
    """True for ``yyyy-MM-dd HHmm`` strings naming a real calendar minute."""

    if not _START_TIME_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, START_TIME_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_duration(value: str) -> bool:
    return bool(_DURATION_RE.fullmatch(value))


def meeting_end(start_time: datetime, duration: int) -> datetime | None:
    """`start_time` plus `duration` minutes, or None past the last representable minute."""

    try:
        return start_time + timedelta(minutes=duration)
    except OverflowError:
        return None


def is_valid_meeting_span(start_time: datetime, duration: int) -> bool:
    return meeting_end(start_time, duration) is not None


def parse_start_time(value: str) -> datetime:
    """Convert a validated start time string into a naive `datetime`."""

    if not is_valid_start_time(value):
        raise ValueError(START_TIME_CONSTRAINTS)
    return datetime.strptime(value, START_TIME_FORMAT)


def format_start_time(value: datetime) -> str:
    """Inverse of `parse_start_time`; also the JSON form of a start time."""

    return value.strftime(START_TIME_FORMAT)


def _require(predicate: Callable[[str], bool], message: str) -> AfterValidator:
    def _check(value: str) -> str:
        if not predicate(value):
            raise ValueError(message)
        return value

    return AfterValidator(_check)


def _whole_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


Name = Annotated[str, _require(is_valid_name, NAME_CONSTRAINTS)]
Phone = Annotated[str, _require(is_valid_phone, PHONE_CONSTRAINTS)]
Email = Annotated[str, _require(is_valid_email, EMAIL_CONSTRAINTS)]
Address = Annotated[str, _require(is_valid_address, ADDRESS_CONSTRAINTS)]
Tag = Annotated[str, _require(is_valid_tag, TAG_CONSTRAINTS)]
Title = Annotated[str, _require(is_valid_title, TITLE_CONSTRAINTS)]
Link = Annotated[str, _require(is_valid_link, LINK_CONSTRAINTS)]
StartTime = Annotated[datetime, AfterValidator(_whole_minute)]
