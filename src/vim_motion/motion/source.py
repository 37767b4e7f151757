"""Read-only view of the host document consumed by motions."""

from __future__ import annotations

from typing import Protocol

from .position import Position


class TextSource(Protocol):
    """What the motion engine needs to know about a document.

    Implementations are read on every motion call and never cached, so a host
    may change its text between two calls but not during one.
    """

    def line_text(self, line: int) -> str:
        ...

    def line_count(self) -> int:
        ...

    def leading_whitespace_count(self, line: int) -> int:
        ...

    def current_host_position(self) -> Position:
        """Where the host's live caret currently sits."""
        ...


def leading_whitespace(text: str) -> int:
    return len(text) - len(text.lstrip())


__all__ = ["TextSource", "leading_whitespace"]
