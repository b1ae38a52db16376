"""Command contract and result."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from core.domain.index import Index
from core.domain.tab import Tab
from core.errors import CommandError
from core.interfaces.clipboard import Clipboard
from core.services.model_manager import ModelManager


@dataclass(frozen=True)
class CommandResult:
    """What the UI needs to know after a command ran."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
    switch_to: Tab | None = None


class Command(ABC):
    """A parsed, ready-to-run user command.

    Subclasses are dataclasses, so two commands built from the same input
    compare equal.
    """

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: ModelManager, clipboard: Clipboard) -> CommandResult:
        """Apply the command; raise `CommandError` if it cannot be applied."""


def pick_displayed(items: list, index: Index, invalid_message: str):
    """Entry at `index` of a displayed list, or `CommandError`."""

    if index.zero_based >= len(items):
        raise CommandError(invalid_message)
    return items[index.zero_based]
