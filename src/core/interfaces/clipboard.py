"""Clipboard contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The `copy` commands work the same against the OS clipboard and against
  the in-memory fake used by the tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        """Place `text` on the clipboard, replacing what was there."""

        ...
