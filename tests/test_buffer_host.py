from __future__ import annotations

import pytest

from vim_motion import host
from vim_motion.buffer import Buffer, BufferDocument, BufferValidationError
from vim_motion.motion import Position


def test_document_from_text_keeps_trailing_empty_line() -> None:
    document = BufferDocument.from_text("one\n  two\n")

    assert document.snapshot() == ("one", "  two", "")
    assert document.leading_whitespace_count(1) == 2
    assert BufferDocument.from_text("").snapshot() == ("",)


def test_only_newline_separates_lines() -> None:
    document = BufferDocument.from_text("a\x0cb\rc d")

    assert document.line_count == 1


def test_inserting_crlf_keeps_caret_in_sync() -> None:
    buffer = Buffer.from_text("ab", cursor=(0, 1))

    buffer.insert_text("\r\n")

    assert buffer.text == "a\r\nb"
    assert buffer.document.snapshot() == ("a\r", "b")
    assert buffer.state.cursor == (1, 0)


def test_buffer_is_a_text_source() -> None:
    buffer = Buffer.from_text("alpha\n\tbeta", cursor=(1, 2))

    assert buffer.line_count() == 2
    assert buffer.line_text(1) == "\tbeta"
    assert buffer.leading_whitespace_count(1) == 1
    assert buffer.current_host_position() == Position(1, 2)


def test_from_text_rejects_invalid_cursor() -> None:
    with pytest.raises(BufferValidationError):
        Buffer.from_text("abc", cursor=(0, 4))


def test_place_caret_collapses_selection_and_reveals() -> None:
    buffer = Buffer.from_text("abc\ndef")

    buffer.place_caret(Position(1, 3))

    assert buffer.state.cursor == (1, 3)
    assert buffer.state.selection == ((1, 3), (1, 3))
    assert buffer.revealed == Position(1, 3)
    with pytest.raises(BufferValidationError):
        buffer.place_caret(Position(2, 0))


def test_insert_text_advances_caret() -> None:
    buffer = Buffer.from_text("ad", cursor=(0, 1))

    buffer.insert_text("bc")

    assert buffer.text == "abcd"
    assert buffer.state.cursor == (0, 3)
    assert buffer.document.version == 1
    assert buffer.document.dirty is True


def test_insert_line_after_keeps_indent() -> None:
    buffer = Buffer.from_text("  foo\nbar", cursor=(0, 3))

    buffer.execute_command(host.INSERT_LINE_AFTER)

    assert buffer.text == "  foo\n  \nbar"
    assert buffer.state.cursor == (1, 2)


def test_insert_line_before_keeps_indent() -> None:
    buffer = Buffer.from_text("  foo", cursor=(0, 4))

    buffer.execute_command(host.INSERT_LINE_BEFORE)

    assert buffer.text == "  \n  foo"
    assert buffer.state.cursor == (0, 2)


def test_delete_left_within_and_across_lines() -> None:
    buffer = Buffer.from_text("ab\ncd", cursor=(0, 2))

    buffer.execute_command(host.DELETE_LEFT)
    assert buffer.text == "a\ncd"
    assert buffer.state.cursor == (0, 1)

    buffer.place_caret(Position(1, 0))
    buffer.execute_command(host.DELETE_LEFT)
    assert buffer.text == "acd"
    assert buffer.state.cursor == (0, 1)

    buffer.place_caret(Position(0, 0))
    buffer.execute_command(host.DELETE_LEFT)
    assert buffer.text == "acd"


def test_suggest_commands_toggle_flag() -> None:
    buffer = Buffer()

    buffer.execute_command(host.TRIGGER_SUGGEST)
    assert buffer.state.suggest_visible is True
    buffer.execute_command(host.HIDE_SUGGEST)
    assert buffer.state.suggest_visible is False


def test_unknown_command_raises_key_error() -> None:
    buffer = Buffer()

    with pytest.raises(KeyError):
        buffer.execute_command("editor.action.formatDocument")


def test_mirror_reflects_state() -> None:
    buffer = Buffer.from_text("x\ny", cursor=(1, 1))

    mirror = buffer.mirror(attributes={"mode": "normal"})

    assert mirror.text == "x\ny"
    assert mirror.cursor == (1, 1)
    assert mirror.attributes == {"mode": "normal"}
