"""Prefixes understood by the command parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_LINK = Prefix("l/")
PREFIX_START_TIME = Prefix("s/")
PREFIX_DURATION = Prefix("d/")
