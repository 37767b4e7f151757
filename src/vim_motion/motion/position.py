"""Immutable document coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, character)`` pair."""

    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Negative coordinates are not positions: {self!r}")

    @classmethod
    def from_tuple(cls, cursor: Tuple[int, int]) -> "Position":
        row, col = cursor
        return cls(row, col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.line, self.character)

    def translate(self, line_delta: int = 0, character_delta: int = 0) -> "Position":
        return Position(self.line + line_delta, self.character + character_delta)

    def with_character(self, character: int) -> "Position":
        return Position(self.line, character)


ORIGIN = Position(0, 0)

__all__ = ["Position", "ORIGIN"]
