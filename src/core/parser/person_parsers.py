"""Parsers for the person command family."""

from __future__ import annotations

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
from core.domain.models import Person
from core.domain.predicates import NameContainsKeywordsPredicate
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_NOT_EDITED
from core.parser import parser_util
from core.parser.syntax import PREFIX_ADDRESS, PREFIX_EMAIL, PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG
from core.parser.tokenizer import tokenize


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def parse_add_person(args: str) -> AddPersonCommand:
    argmap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)
    if not argmap.has(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS) or argmap.preamble:
        raise _invalid_format(AddPersonCommand.MESSAGE_USAGE)

    person = Person(
        name=parser_util.parse_name(argmap.get_value(PREFIX_NAME)),
        phone=parser_util.parse_phone(argmap.get_value(PREFIX_PHONE)),
        email=parser_util.parse_email(argmap.get_value(PREFIX_EMAIL)),
        address=parser_util.parse_address(argmap.get_value(PREFIX_ADDRESS)),
        tags=parser_util.parse_tags(argmap.get_all_values(PREFIX_TAG)),
    )
    return AddPersonCommand(person)


def parse_edit_person(args: str) -> EditPersonCommand:
    argmap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG)

    try:
        index = parser_util.parse_index(argmap.preamble)
    except ParseError as exc:
        raise _invalid_format(EditPersonCommand.MESSAGE_USAGE) from exc

    descriptor = EditPersonDescriptor()
    if (name := argmap.get_value(PREFIX_NAME)) is not None:
        descriptor.name = parser_util.parse_name(name)
    if (phone := argmap.get_value(PREFIX_PHONE)) is not None:
        descriptor.phone = parser_util.parse_phone(phone)
    if (email := argmap.get_value(PREFIX_EMAIL)) is not None:
        descriptor.email = parser_util.parse_email(email)
    if (address := argmap.get_value(PREFIX_ADDRESS)) is not None:
        descriptor.address = parser_util.parse_address(address)
    descriptor.tags = parser_util.parse_tags_for_edit(argmap.get_all_values(PREFIX_TAG))

    if not descriptor.is_any_field_edited():
        raise ParseError(MESSAGE_NOT_EDITED)
    return EditPersonCommand(index, descriptor)


def parse_delete_person(args: str) -> DeletePersonCommand:
    try:
        return DeletePersonCommand(parser_util.parse_index(args))
    except ParseError as exc:
        raise _invalid_format(DeletePersonCommand.MESSAGE_USAGE) from exc


def parse_copy_person(args: str) -> CopyPersonCommand:
    try:
        return CopyPersonCommand(parser_util.parse_index(args))
    except ParseError as exc:
        raise _invalid_format(CopyPersonCommand.MESSAGE_USAGE) from exc


def parse_find_person(args: str) -> FindPersonCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid_format(FindPersonCommand.MESSAGE_USAGE)
    return FindPersonCommand(NameContainsKeywordsPredicate(keywords))


PERSON_PARSERS = {
    AddPersonCommand.COMMAND_WORD: parse_add_person,
    EditPersonCommand.COMMAND_WORD: parse_edit_person,
    DeletePersonCommand.COMMAND_WORD: parse_delete_person,
    CopyPersonCommand.COMMAND_WORD: parse_copy_person,
    FindPersonCommand.COMMAND_WORD: parse_find_person,
    ListPersonsCommand.COMMAND_WORD: lambda _args: ListPersonsCommand(),
    ClearPersonsCommand.COMMAND_WORD: lambda _args: ClearPersonsCommand(),
}
