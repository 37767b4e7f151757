"""Cursor positions and the motions that move them."""

from .engine import Motion, caret, cursor
from .policy import CARET, CURSOR, BoundaryPolicy, CaretBounds, CursorBounds
from .position import ORIGIN, Position
from .segments import (
    NON_WORD_CHARACTERS,
    Segment,
    SegmentKind,
    next_word_start,
    previous_word_start,
    segment_line,
)
from .source import TextSource, leading_whitespace

__all__ = [
    "Motion",
    "caret",
    "cursor",
    "BoundaryPolicy",
    "CaretBounds",
    "CursorBounds",
    "CARET",
    "CURSOR",
    "Position",
    "ORIGIN",
    "NON_WORD_CHARACTERS",
    "Segment",
    "SegmentKind",
    "segment_line",
    "next_word_start",
    "previous_word_start",
    "TextSource",
    "leading_whitespace",
]
