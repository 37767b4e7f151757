"""List-of-lines document storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from vim_motion.motion.source import leading_whitespace


@dataclass(slots=True)
class BufferDocument:
    """Lines joined by ``"\\n"``; any other control character stays in its line."""

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def leading_whitespace_count(self, index: int) -> int:
        return leading_whitespace(self._lines[index])
