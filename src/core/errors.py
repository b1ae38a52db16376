"""Exception hierarchy for meetbook.

Every message raised here is shown to the user as-is, so keep them short and
phrased for a human reading the command box.
"""

from __future__ import annotations


class MeetbookError(Exception):
    """Base class for every error the application reports to the user."""


class IllegalValueError(MeetbookError):
    """A stored value violates the constraints of its field."""


class DataConversionError(MeetbookError):
    """A data file could not be read or converted into model objects."""


class ParseError(MeetbookError):
    """User input does not conform to the expected command format."""


class CommandError(MeetbookError):
    """A well-formed command could not be applied to the model."""


class DuplicatePersonError(MeetbookError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate persons")


class PersonNotFoundError(MeetbookError):
    def __init__(self) -> None:
        super().__init__("The person could not be found")


class DuplicateMeetingError(MeetbookError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate meetings")


class MeetingNotFoundError(MeetbookError):
    def __init__(self) -> None:
        super().__init__("The meeting could not be found")


class ClipboardUnavailableError(MeetbookError):
    """No system clipboard mechanism could be found."""
