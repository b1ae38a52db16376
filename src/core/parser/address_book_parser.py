"""Entry point of command parsing.

The first word of the input selects the command. General words work in
every tab; entity words go to the parser family of the active tab, which is
how ``find cs2103`` means one thing among persons and another among
meetings.
"""

from __future__ import annotations

import re
from typing import Callable

from core.commands.base import Command
from core.commands.general_commands import ExitCommand, HelpCommand, SwitchCommand
from core.domain.tab import Tab
from core.errors import ParseError
from core.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from core.parser.meeting_parsers import MEETING_PARSERS
from core.parser.person_parsers import PERSON_PARSERS

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

CommandParser = Callable[[str], Command]


def parse_switch(args: str) -> SwitchCommand:
    target = args.strip().lower()
    if not target:
        return SwitchCommand()
    try:
        return SwitchCommand(Tab(target))
    except ValueError:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(SwitchCommand.MESSAGE_USAGE)) from None


GENERAL_PARSERS: dict[str, CommandParser] = {
    HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
    SwitchCommand.COMMAND_WORD: parse_switch,
}

_FAMILIES: dict[Tab, dict[str, CommandParser]] = {
    Tab.PERSONS: PERSON_PARSERS,
    Tab.MEETINGS: MEETING_PARSERS,
}


class AddressBookParser:
    def parse_command(self, user_input: str, tab: Tab = Tab.PERSONS) -> Command:
        """Parse `user_input` into a command for execution in `tab`.

        Raises `ParseError` when the input does not conform to the expected
        format.
        """

        matcher = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")

        parser = GENERAL_PARSERS.get(command_word) or _FAMILIES[tab].get(command_word)
        if parser is None:
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parser(arguments)
