"""EditorHost implementation backed by a Textual ``TextArea``."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from textual.widgets import TextArea

from vim_motion import host
from vim_motion.motion import Position, leading_whitespace


class TextAreaHost:
    """Lets the motion engine and modes drive a live ``TextArea``.

    ``TextArea`` has no completion popup of its own, so suggest commands only
    flip ``suggest_visible`` and notify ``on_suggest``.
    """

    def __init__(
        self,
        text_area: TextArea,
        *,
        on_suggest: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self.text_area = text_area
        self.suggest_visible = False
        self._on_suggest = on_suggest
        self._commands: Dict[str, Callable[[], None]] = {
            host.INSERT_LINE_AFTER: self._insert_line_after,
            host.INSERT_LINE_BEFORE: self._insert_line_before,
            host.DELETE_LEFT: self.text_area.action_delete_left,
            host.TRIGGER_SUGGEST: lambda: self._set_suggest(True),
            host.HIDE_SUGGEST: lambda: self._set_suggest(False),
        }

    def line_text(self, line: int) -> str:
        return self.text_area.document.get_line(line)

    def line_count(self) -> int:
        return self.text_area.document.line_count

    def leading_whitespace_count(self, line: int) -> int:
        return leading_whitespace(self.line_text(line))

    def current_host_position(self) -> Position:
        return Position.from_tuple(self.text_area.cursor_location)

    def place_caret(self, position: Position) -> None:
        self.text_area.move_cursor(position.as_tuple())
        self.text_area.scroll_cursor_visible()

    def insert_text(self, text: str) -> None:
        if text:
            self.text_area.insert(text)

    def execute_command(self, name: str) -> None:
        try:
            command = self._commands[name]
        except KeyError:
            raise KeyError(f"Unknown host command '{name}'") from None
        command()

    def _insert_line_after(self) -> None:
        row, _ = self.text_area.cursor_location
        line = self.line_text(row)
        indent = line[: leading_whitespace(line)]
        self.text_area.insert("\n" + indent, location=(row, len(line)))
        self.text_area.move_cursor((row + 1, len(indent)))

    def _insert_line_before(self) -> None:
        row, _ = self.text_area.cursor_location
        line = self.line_text(row)
        indent = line[: leading_whitespace(line)]
        self.text_area.insert(indent + "\n", location=(row, 0))
        self.text_area.move_cursor((row, len(indent)))

    def _set_suggest(self, visible: bool) -> None:
        self.suggest_visible = visible
        if self._on_suggest is not None:
            self._on_suggest(visible)


__all__ = ["TextAreaHost"]
