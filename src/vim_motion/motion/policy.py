"""Boundary policies: the one thing Caret and Cursor disagree on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .source import TextSource


class BoundaryPolicy(Protocol):
    name: str

    def max_line_length(self, source: TextSource, line: int) -> int:
        """Largest column a position on ``line`` may take."""
        ...


@dataclass(frozen=True, slots=True)
class CaretBounds:
    """Rests on characters only: ``[0, eol)``, column 0 on empty lines."""

    name: str = "caret"

    def max_line_length(self, source: TextSource, line: int) -> int:
        return max(0, len(source.line_text(line)) - 1)


@dataclass(frozen=True, slots=True)
class CursorBounds:
    """May sit one past the last character: ``[0, eol]``."""

    name: str = "cursor"

    def max_line_length(self, source: TextSource, line: int) -> int:
        return len(source.line_text(line))


CARET = CaretBounds()
CURSOR = CursorBounds()

__all__ = ["BoundaryPolicy", "CaretBounds", "CursorBounds", "CARET", "CURSOR"]
