"""Line tokenizer behind the word motions.

A line splits into an ordered run of segments:

* ``BLANK_LINE`` -- the whole line is empty or only spaces/tabs
* ``WORD`` -- characters that are neither whitespace nor separators
* ``SEPARATOR`` -- whitespace and separator characters mixed freely

Word motions stop at a segment's first non-whitespace column. Pure
whitespace segments (and blank lines) have no stop and are skipped.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Pattern, Tuple

NON_WORD_CHARACTERS = "/\\()\"':,.;<>~!@#$%^&*|+=[]{}`?-"


class SegmentKind(enum.Enum):
    BLANK_LINE = "blank_line"
    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True, slots=True)
class Segment:
    kind: SegmentKind
    start: int
    end: int  # exclusive
    stop: Optional[int] = None


@lru_cache(maxsize=8)
def _segment_pattern(separators: str) -> Pattern[str]:
    escaped = re.escape(separators)
    return re.compile(
        r"(?P<blank_line>^[\t ]*\Z)"
        rf"|(?P<word>[^\s{escaped}]+)"
        rf"|(?P<separator>[\s{escaped}]+)"
    )


def segment_line(
    text: str, separators: str = NON_WORD_CHARACTERS
) -> Tuple[Segment, ...]:
    """Tokenize ``text`` in a single left-to-right pass."""

    segments = []
    for match in _segment_pattern(separators).finditer(text):
        kind = SegmentKind(match.lastgroup)
        chunk = match.group()
        stripped = chunk.lstrip()
        stop = None
        if stripped:
            stop = match.start() + len(chunk) - len(stripped)
        segments.append(Segment(kind, match.start(), match.end(), stop))
    return tuple(segments)


def _stops(segments: Iterable[Segment]) -> Iterable[int]:
    for segment in segments:
        if segment.stop is not None:
            yield segment.stop


def next_word_start(
    text: str, column: int, separators: str = NON_WORD_CHARACTERS
) -> Optional[int]:
    """Nearest stop strictly right of ``column``, or ``None``."""

    for stop in _stops(segment_line(text, separators)):
        if column < stop:
            return stop
    return None


def previous_word_start(
    text: str, column: int, separators: str = NON_WORD_CHARACTERS
) -> Optional[int]:
    """Nearest stop strictly left of ``column``, or ``None``."""

    for stop in _stops(reversed(segment_line(text, separators))):
        if column > stop:
            return stop
    return None


__all__ = [
    "NON_WORD_CHARACTERS",
    "Segment",
    "SegmentKind",
    "segment_line",
    "next_word_start",
    "previous_word_start",
]
