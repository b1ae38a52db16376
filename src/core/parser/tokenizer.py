"""Splits an argument string into prefix/value pairs.

Given ``"1 n/Weekly sync t/work t/team"`` and the prefixes ``n/`` and ``t/``,
the preamble is ``"1"``, ``n/`` maps to ``["Weekly sync"]`` and ``t/`` maps
to ``["work", "team"]``. A prefix only counts when it starts the string or
follows whitespace, so ``https://x.org/d/1`` never starts a new field.
"""

from __future__ import annotations

import re
from collections import defaultdict

from core.parser.syntax import Prefix


class ArgumentMultimap:
    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for `prefix`, or None when it never appeared."""

        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, *prefixes: Prefix) -> bool:
        """True when every prefix appeared at least once."""

        return all(self._values.get(prefix) for prefix in prefixes)


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    if not prefixes:
        return ArgumentMultimap(args_string.strip())

    by_text = {prefix.prefix: prefix for prefix in prefixes}
    alternatives = "|".join(re.escape(text) for text in sorted(by_text, key=len, reverse=True))
    pattern = re.compile(rf"(?<!\S)({alternatives})")

    matches = list(pattern.finditer(args_string))
    if not matches:
        return ArgumentMultimap(args_string.strip())

    multimap = ArgumentMultimap(args_string[: matches[0].start()].strip())
    for current, following in zip(matches, matches[1:] + [None]):
        end = following.start() if following is not None else len(args_string)
        multimap.put(by_text[current.group(1)], args_string[current.end() : end].strip())
    return multimap
