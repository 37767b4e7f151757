from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from vim_motion.buffer import Buffer
from vim_motion.errors import PositionOutOfRangeError
from vim_motion.motion import (
    CARET,
    CURSOR,
    Motion,
    Position,
    caret,
    cursor,
    leading_whitespace,
)


@dataclass
class LinesSource:
    """Bare TextSource; unlike Buffer it can report zero lines."""

    lines: List[str] = field(default_factory=list)
    caret_at: Position = Position(0, 0)

    def line_text(self, line: int) -> str:
        return self.lines[line]

    def line_count(self) -> int:
        return len(self.lines)

    def leading_whitespace_count(self, line: int) -> int:
        return leading_whitespace(self.lines[line])

    def current_host_position(self) -> Position:
        return self.caret_at


def make_buffer(text: str, cursor_at=(0, 0)) -> Buffer:
    return Buffer.from_text(text, cursor=cursor_at)


def columns(motion: Motion, step, count: int) -> List[int]:
    visited = []
    for _ in range(count):
        motion = step(motion)
        visited.append(motion.position.character)
    return visited


def test_policies_bound_line_length() -> None:
    buffer = make_buffer("hello\n")

    assert CARET.max_line_length(buffer, 0) == 4
    assert CURSOR.max_line_length(buffer, 0) == 5
    assert CARET.max_line_length(buffer, 1) == 0
    assert CURSOR.max_line_length(buffer, 1) == 0


def test_line_end_and_out_of_range_predicates() -> None:
    buffer = make_buffer("hello")
    state = caret(buffer, Position(0, 0))

    assert state.is_line_end(Position(0, 4)) is True
    assert state.is_line_end(Position(0, 3)) is False
    assert state.is_out_of_range(Position(0, 5)) is True
    with pytest.raises(PositionOutOfRangeError) as excinfo:
        state.is_line_end(Position(0, 5))
    assert excinfo.value.max_column == 4
    assert excinfo.value.cursor == (0, 5)

    insert_state = cursor(buffer, Position(0, 0))
    assert insert_state.is_out_of_range(Position(0, 5)) is False
    assert insert_state.is_line_end(Position(0, 5)) is True
    with pytest.raises(PositionOutOfRangeError):
        insert_state.is_line_end(Position(0, 6))


def test_empty_line_end_is_column_zero() -> None:
    buffer = make_buffer("")

    assert caret(buffer).is_line_end() is True
    assert cursor(buffer).is_line_end() is True


def test_left_right_round_trip_and_boundaries() -> None:
    buffer = make_buffer("hello")
    start = caret(buffer, Position(0, 2))

    assert start.right().left().position == Position(0, 2)
    assert start.left().right().position == Position(0, 2)

    at_begin = caret(buffer, Position(0, 0))
    assert at_begin.left() is at_begin
    at_end = caret(buffer, Position(0, 4))
    assert at_end.right() is at_end
    assert cursor(buffer, Position(0, 4)).right().position == Position(0, 5)
    assert cursor(buffer, Position(0, 5)).right().position == Position(0, 5)


def test_motions_return_new_states() -> None:
    buffer = make_buffer("hello")
    start = caret(buffer, Position(0, 1))

    moved = start.right()

    assert start.position == Position(0, 1)
    assert moved.position == Position(0, 2)
    assert moved.sticky_column == 2


def test_sticky_column_survives_short_lines() -> None:
    buffer = make_buffer("0123456789\nab\n0123456789")
    start = caret(buffer, Position(0, 5))

    down = start.down()
    assert down.position == Position(1, 1)
    assert down.up().position == Position(0, 5)
    assert down.down().position == Position(2, 5)
    assert cursor(buffer, Position(0, 5)).down().position == Position(1, 2)


def test_horizontal_motion_rewrites_sticky_column() -> None:
    buffer = make_buffer("0123456789\nab\n0123456789")

    state = caret(buffer, Position(0, 5)).left().down().down()

    assert state.position == Position(2, 4)


def test_line_jumps_leave_sticky_column_alone() -> None:
    buffer = make_buffer("0123456789\n0123456789")

    state = caret(buffer, Position(0, 5)).line_begin().down()

    assert state.position == Position(1, 5)


def test_vertical_motion_stops_at_document_edges() -> None:
    buffer = make_buffer("one\ntwo")
    top = caret(buffer, Position(0, 1))
    bottom = caret(buffer, Position(1, 1))

    assert top.up() is top
    assert bottom.down() is bottom


def test_word_right_fixture_caret_and_cursor() -> None:
    buffer = make_buffer("foo.bar  baz")

    assert columns(caret(buffer, Position(0, 0)), Motion.word_right, 5) == [
        3,
        4,
        9,
        11,
        11,
    ]
    assert columns(cursor(buffer, Position(0, 0)), Motion.word_right, 5) == [
        3,
        4,
        9,
        12,
        12,
    ]


def test_word_right_from_line_end_enters_next_line() -> None:
    buffer = make_buffer("foo\n   bar")

    state = caret(buffer, Position(0, 2)).word_right()

    assert state.position == Position(1, 3)


def test_word_motions_cross_blank_lines() -> None:
    buffer = make_buffer("foo\n\nbar")

    state = caret(buffer, Position(0, 2)).word_right()
    assert state.position == Position(1, 0)
    state = state.word_right()
    assert state.position == Position(2, 0)
    assert state.word_left().position == Position(1, 0)
    assert state.word_left().word_left().position == Position(0, 2)


def test_word_left_fixture() -> None:
    buffer = make_buffer("foo.bar  baz")

    assert columns(cursor(buffer, Position(0, 12)), Motion.word_left, 5) == [
        9,
        4,
        3,
        0,
        0,
    ]


def test_word_left_from_indent_jumps_to_previous_line_end() -> None:
    buffer = make_buffer("foo bar\n  baz")

    assert caret(buffer, Position(1, 2)).word_left().position == Position(0, 6)
    assert cursor(buffer, Position(1, 1)).word_left().position == Position(0, 7)


def test_line_begin_and_end_follow_policy() -> None:
    buffer = make_buffer("abcde")

    caret_end = caret(buffer, Position(0, 2)).line_end()
    cursor_end = cursor(buffer, Position(0, 2)).line_end()

    assert caret_end.position == Position(0, 4)
    assert cursor_end.position == Position(0, 5)
    assert caret_end.is_line_end() and not caret_end.is_out_of_range()
    assert cursor_end.is_line_end() and not cursor_end.is_out_of_range()
    assert caret_end.line_begin().position == Position(0, 0)


def test_first_and_last_line_non_blank() -> None:
    buffer = make_buffer("   x\nmiddle\n")
    state = caret(buffer, Position(1, 3))

    assert state.first_line_non_blank_char().position == Position(0, 3)
    assert state.last_line_non_blank_char().position == Position(2, 0)


def test_document_begin_and_end() -> None:
    buffer = make_buffer("ab\nxyz")
    state = caret(buffer, Position(0, 1))

    assert state.document_end().document_begin().position == Position(0, 0)
    end = state.document_end()
    assert end.position == Position(1, 3)
    # One past the end even for the caret flavour.
    assert end.is_out_of_range() is True


def test_document_motions_on_empty_source() -> None:
    source = LinesSource()
    state = Motion.at(source, CARET, Position(0, 0))

    assert state.document_end().position == Position(0, 0)
    assert state.first_line_non_blank_char().position == Position(0, 0)
    assert state.last_line_non_blank_char().position == Position(0, 0)
    assert state.down() is state


def test_default_construction_reads_host_caret() -> None:
    buffer = make_buffer("foo\nbar", cursor_at=(1, 2))

    assert caret(buffer).position == Position(1, 2)
    assert cursor(buffer).sticky_column == 2


def test_reset_resyncs_and_forgets_sticky_column() -> None:
    source = LinesSource(["0123456789", "0123456789"], Position(1, 1))
    state = Motion.at(source, CARET, Position(0, 8)).left()

    reset = state.reset()

    assert reset.position == Position(1, 1)
    assert reset.sticky_column == 1
    assert reset.up().position == Position(0, 1)
