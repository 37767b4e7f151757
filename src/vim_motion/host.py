"""Contract between the mode layer and whatever editor hosts it."""

from __future__ import annotations

from typing import Protocol

from vim_motion.motion import Position, TextSource

INSERT_LINE_AFTER = "insert_line_after"
INSERT_LINE_BEFORE = "insert_line_before"
DELETE_LEFT = "delete_left"
TRIGGER_SUGGEST = "trigger_suggest"
HIDE_SUGGEST = "hide_suggest"

HOST_COMMANDS = frozenset(
    {INSERT_LINE_AFTER, INSERT_LINE_BEFORE, DELETE_LEFT, TRIGGER_SUGGEST, HIDE_SUGGEST}
)


class EditorHost(TextSource, Protocol):
    """A text source that can also take the caret and edit requests."""

    def place_caret(self, position: Position) -> None:
        """Collapse the selection onto ``position`` and scroll it into view."""
        ...

    def insert_text(self, text: str) -> None:
        """Insert ``text`` at the caret, leaving the caret after it."""
        ...

    def execute_command(self, name: str) -> None:
        """Run one of ``HOST_COMMANDS``; unknown names raise ``KeyError``."""
        ...


__all__ = [
    "EditorHost",
    "HOST_COMMANDS",
    "INSERT_LINE_AFTER",
    "INSERT_LINE_BEFORE",
    "DELETE_LEFT",
    "TRIGGER_SUGGEST",
    "HIDE_SUGGEST",
]
