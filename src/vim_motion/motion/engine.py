"""Motion engine shared by the Caret and Cursor flavours.

``Motion`` is an immutable state value: every motion returns a new ``Motion``
carrying the next position and sticky column, so calls chain naturally::

    caret(buffer).line_end().left().position

The boundary policy decides how far right a position may go on a line; all
other behaviour is common to both flavours.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from vim_motion.errors import PositionOutOfRangeError

from .policy import CARET, CURSOR, BoundaryPolicy
from .position import ORIGIN, Position
from .segments import NON_WORD_CHARACTERS, next_word_start, previous_word_start
from .source import TextSource


@dataclass(frozen=True, slots=True)
class Motion:
    source: TextSource
    policy: BoundaryPolicy
    position: Position
    # Column the user last chose horizontally; vertical moves aim for it.
    sticky_column: int
    separators: str = NON_WORD_CHARACTERS

    @classmethod
    def at(
        cls,
        source: TextSource,
        policy: BoundaryPolicy,
        position: Position,
        *,
        separators: str = NON_WORD_CHARACTERS,
    ) -> "Motion":
        return cls(
            source=source,
            policy=policy,
            position=position,
            sticky_column=position.character,
            separators=separators,
        )

    @classmethod
    def from_host(
        cls,
        source: TextSource,
        policy: BoundaryPolicy,
        *,
        separators: str = NON_WORD_CHARACTERS,
    ) -> "Motion":
        return cls.at(
            source, policy, source.current_host_position(), separators=separators
        )

    def reset(self) -> "Motion":
        """Resync with the host caret and forget the sticky column."""

        return self._jump(self.source.current_host_position())

    # -- validation ---------------------------------------------------------

    def max_line_length(self, line: int) -> int:
        return self.policy.max_line_length(self.source, line)

    def is_out_of_range(self, position: Optional[Position] = None) -> bool:
        if position is None:
            position = self.position
        return position.character > max(0, self.max_line_length(position.line))

    def is_line_end(self, position: Optional[Position] = None) -> bool:
        if position is None:
            position = self.position
        line_end = self.max_line_length(position.line)
        if self.is_out_of_range(position):
            raise PositionOutOfRangeError(position, max(0, line_end))
        return position.character == line_end

    # -- linear motions -----------------------------------------------------

    def left(self) -> "Motion":
        if self.position.character == 0:
            return self
        return self._jump(self.position.translate(0, -1))

    def right(self) -> "Motion":
        if self.is_line_end():
            return self
        return self._jump(self.position.translate(0, 1))

    def up(self) -> "Motion":
        if self.position.line == 0:
            return self
        return self._vertical(self.position.line - 1)

    def down(self) -> "Motion":
        if self.position.line >= self._last_line():
            return self
        return self._vertical(self.position.line + 1)

    def line_begin(self) -> "Motion":
        return self._place(self.position.with_character(0))

    def line_end(self) -> "Motion":
        line = self.position.line
        return self._place(Position(line, self.max_line_length(line)))

    def first_line_non_blank_char(self) -> "Motion":
        if self._is_empty():
            return self._place(ORIGIN)
        return self._place(Position(0, self.source.leading_whitespace_count(0)))

    def last_line_non_blank_char(self) -> "Motion":
        if self._is_empty():
            return self._place(ORIGIN)
        line = self._last_line()
        return self._place(Position(line, self.source.leading_whitespace_count(line)))

    def document_begin(self) -> "Motion":
        return self._place(ORIGIN)

    def document_end(self) -> "Motion":
        # Full line length on purpose: this ignores the boundary policy.
        if self._is_empty():
            return self._place(ORIGIN)
        line = self._last_line()
        return self._place(Position(line, len(self.source.line_text(line))))

    # -- word motions -------------------------------------------------------

    def word_right(self) -> "Motion":
        line = self.position.line
        if self.position.character == self.max_line_length(line):
            if line >= self._last_line():
                return self
            following = line + 1
            return self._place(
                Position(following, self.source.leading_whitespace_count(following))
            )

        target = next_word_start(
            self.source.line_text(line), self.position.character, self.separators
        )
        if target is None:
            return self.line_end()
        return self._place(self.position.with_character(target))

    def word_left(self) -> "Motion":
        line = self.position.line
        first_non_blank = self.source.leading_whitespace_count(line)
        if self.position.character <= first_non_blank and line != 0:
            previous = line - 1
            return self._place(Position(previous, self.max_line_length(previous)))

        target = previous_word_start(
            self.source.line_text(line), self.position.character, self.separators
        )
        if target is None:
            return self.line_begin()
        return self._place(self.position.with_character(target))

    # -- helpers ------------------------------------------------------------

    def _is_empty(self) -> bool:
        return self.source.line_count() <= 0

    def _last_line(self) -> int:
        return max(0, self.source.line_count() - 1)

    def _vertical(self, line: int) -> "Motion":
        column = min(max(0, self.max_line_length(line)), self.sticky_column)
        return self._place(Position(line, column))

    def _place(self, position: Position) -> "Motion":
        """Move without touching the sticky column."""

        return replace(self, position=position)

    def _jump(self, position: Position) -> "Motion":
        """Move and remember the new column for later vertical motion."""

        return replace(self, position=position, sticky_column=position.character)


def caret(source: TextSource, position: Optional[Position] = None) -> Motion:
    """Normal-mode motion state: never rests past the last character."""

    if position is None:
        return Motion.from_host(source, CARET)
    return Motion.at(source, CARET, position)


def cursor(source: TextSource, position: Optional[Position] = None) -> Motion:
    """Insert-mode motion state: may sit one past the last character."""

    if position is None:
        return Motion.from_host(source, CURSOR)
    return Motion.at(source, CURSOR, position)


__all__ = ["Motion", "caret", "cursor"]
