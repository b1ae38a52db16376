"""List positions as seen by the user (one-based) and by the code (zero-based)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise IndexError(f"index must not be negative: {self.zero_based}")

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        return cls(value - 1)
