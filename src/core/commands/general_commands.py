"""Commands available in every tab."""

from __future__ import annotations

from dataclasses import dataclass

from core.commands.base import Command, CommandResult
from core.domain.tab import Tab
from core.interfaces.clipboard import Clipboard
from core.services.model_manager import ModelManager


@dataclass
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting meetbook as requested ..."

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


@dataclass
class SwitchCommand(Command):
    """Change the tab entity commands apply to; None toggles."""

    COMMAND_WORD = "switch"
    MESSAGE_USAGE = (
        "switch: Switches between the person and the meeting list. "
        "Without a parameter, switches to the other list.\n"
        "Parameters: [persons|meetings]\n"
        "Example: switch meetings"
    )
    MESSAGE_SUCCESS = "Switched to {}"

    target: Tab | None = None

    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        tab = self.target or model.active_tab.other()
        model.set_active_tab(tab)
        return CommandResult(self.MESSAGE_SUCCESS.format(tab.label().lower()), switch_to=tab)
