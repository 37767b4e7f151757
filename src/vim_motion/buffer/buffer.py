"""In-memory editor host built from a document and caret state."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from vim_motion import host
from vim_motion.motion import Position
from vim_motion.runtime import telemetry

from .document import BufferDocument
from .state import BufferState, Cursor
from .sync import BufferMirror
from .validation import ensure_cursor


class Buffer:
    """Plays the host's part for tests and the demo adapter.

    Implements ``EditorHost``: motions read lines through it and the mode
    layer sends it caret placement, text and named editing commands.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        state: Optional[BufferState] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.state = state or BufferState()
        self.revealed: Optional[Position] = None
        self._commands: Dict[str, Callable[[], None]] = {
            host.INSERT_LINE_AFTER: self._insert_line_after,
            host.INSERT_LINE_BEFORE: self._insert_line_before,
            host.DELETE_LEFT: self._delete_left,
            host.TRIGGER_SUGGEST: lambda: self._set_suggest(True),
            host.HIDE_SUGGEST: lambda: self._set_suggest(False),
        }

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", cursor: Cursor = (0, 0)
    ) -> "Buffer":
        buffer = cls(name=name, document=BufferDocument.from_text(text))
        buffer.state.set_cursor(*ensure_cursor(buffer.document, cursor))
        return buffer

    # -- TextSource ---------------------------------------------------------

    def line_text(self, line: int) -> str:
        return self.document.get_line(line)

    def line_count(self) -> int:
        return self.document.line_count

    def leading_whitespace_count(self, line: int) -> int:
        return self.document.leading_whitespace_count(line)

    def current_host_position(self) -> Position:
        return Position.from_tuple(self.state.cursor)

    # -- EditorHost ---------------------------------------------------------

    def place_caret(self, position: Position) -> None:
        cursor = ensure_cursor(self.document, position.as_tuple())
        self.state.set_cursor(*cursor)
        self.state.set_selection(cursor, cursor)
        self.revealed = position

    def insert_text(self, text: str) -> None:
        if text:
            position = self.state.cursor
            self.replace_range(position, position, text, label="insert_text")

    def execute_command(self, name: str) -> None:
        try:
            command = self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown host command '{name}'") from None
        telemetry.record_event(
            "host.command", level="debug", data={"command": name, "buffer": self.name}
        )
        command()

    # -- editing ------------------------------------------------------------

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        return BufferMirror(
            text=self.text,
            cursor=self.state.cursor,
            selection=self.state.selection,
            attributes=dict(attributes or {}),
        )

    @property
    def text(self) -> str:
        return _flatten_lines(self.document.snapshot())

    def replace_range(
        self, start: Cursor, end: Cursor, text: str, *, label: str
    ) -> None:
        start = ensure_cursor(self.document, start)
        end = ensure_cursor(self.document, end)
        if start > end:
            start, end = end, start
        with telemetry.span(
            name=f"buffer::{label}",
            component=True,
            metadata={"buffer": self.name},
        ):
            before_text = self.text
            start_offset = _offset_for_cursor(self.document, start)
            end_offset = _offset_for_cursor(self.document, end)
            new_text = before_text[:start_offset] + text + before_text[end_offset:]
            version = self.document.version + 1
            self.document = BufferDocument.from_text(new_text)
            self.document.version = version
            self.document.dirty = True
            self.state.set_cursor(
                *_cursor_from_offset(self.document, start_offset + len(text))
            )
            self.state.clear_selection()

    def delete_range(self, start: Cursor, end: Cursor) -> None:
        self.replace_range(start, end, "", label="delete_range")

    def _insert_line_after(self) -> None:
        row, _ = self.state.cursor
        indent = self.document.get_line(row)[: self.leading_whitespace_count(row)]
        line_end = (row, len(self.document.get_line(row)))
        self.replace_range(line_end, line_end, "\n" + indent, label="insert_line_after")

    def _insert_line_before(self) -> None:
        row, _ = self.state.cursor
        indent = self.document.get_line(row)[: self.leading_whitespace_count(row)]
        start = (row, 0)
        self.replace_range(start, start, indent + "\n", label="insert_line_before")
        self.state.set_cursor(row, len(indent))

    def _delete_left(self) -> None:
        row, col = self.state.cursor
        if col > 0:
            self.delete_range((row, col - 1), (row, col))
        elif row > 0:
            previous_end = (row - 1, len(self.document.get_line(row - 1)))
            self.delete_range(previous_end, (row, 0))

    def _set_suggest(self, visible: bool) -> None:
        self.state.suggest_visible = visible


def _flatten_lines(lines) -> str:
    return "\n".join(lines)


def _offset_for_cursor(document: BufferDocument, cursor: Cursor) -> int:
    lines = document.snapshot()
    row, col = cursor
    offset = 0
    for i in range(row):
        offset += len(lines[i]) + 1  # newline
    offset += col
    return offset


def _cursor_from_offset(document: BufferDocument, offset: int) -> Cursor:
    lines = document.snapshot()
    running = 0
    for row, line in enumerate(lines):
        line_len = len(line)
        if offset <= running + line_len:
            return (row, offset - running)
        running += line_len + 1
    return (len(lines) - 1, len(lines[-1]))
