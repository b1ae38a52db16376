"""System clipboard backed by pyperclip.

pyperclip picks the mechanism of the platform (pbcopy, xclip/xsel/wl-copy,
the Windows API). Headless machines have none, in which case `copy` raises
`ClipboardUnavailableError` and the command reports it to the user.
"""

from __future__ import annotations

import logging

import pyperclip

from core.errors import ClipboardUnavailableError

logger = logging.getLogger(__name__)

MESSAGE_UNAVAILABLE = "Could not access the system clipboard: {}"


class SystemClipboard:
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            logger.warning("Clipboard copy failed: %s", exc)
            raise ClipboardUnavailableError(MESSAGE_UNAVAILABLE.format(exc)) from exc
        logger.debug("Copied %d characters to the clipboard", len(text))


class MemoryClipboard:
    """Keeps copied text in memory; used by `exec --no-clipboard` and tests."""

    def __init__(self) -> None:
        self.contents: str | None = None

    def copy(self, text: str) -> None:
        self.contents = text


def clipboard_available() -> tuple[bool, str]:
    """Check whether pyperclip found a working mechanism (for `doctor`)."""

    try:
        pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        return False, str(exc)
    return True, "OK"
