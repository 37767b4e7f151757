"""Insert mode: activation keys, text entry and completion hints."""

from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from vim_motion import host as commands
from vim_motion.motion import Motion, cursor
from vim_motion.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult

_LETTER = re.compile(r"[a-zA-Z]")

NAMED_TEXT = {
    "SPACE": " ",
    "ENTER": "\n",
    "TAB": "\t",
}


class InsertMode(Mode):
    name = "insert"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._activation: Dict[str, Callable[[Motion], None]] = {
            "i": lambda c: None,
            "I": lambda c: self._move(c.line_begin()),
            "a": lambda c: self._move(c.right()),
            "A": lambda c: self._move(c.line_end()),
            "o": lambda c: self.host.execute_command(commands.INSERT_LINE_AFTER),
            "O": lambda c: self.host.execute_command(commands.INSERT_LINE_BEFORE),
        }
        self.cursor: Motion = cursor(context.host)

    @property
    def activation_keys(self) -> frozenset[str]:
        return frozenset(self._activation)

    def should_activate(self, key: KeyInput, current_mode: str) -> bool:
        return current_mode == "normal" and key.key in self._activation

    def handle_activation(self, key: KeyInput) -> ModeResult:
        telemetry.record_event("insert.activate", level="debug", data={"key": key.key})
        self.cursor = self.cursor.reset()
        self._activation[key.key](self.cursor)
        return ModeResult(consumed=True, message="enter_insert")

    def handle_key(self, key: KeyInput) -> ModeResult:
        text = self.resolve_key_value(key)
        if text is None:
            return ModeResult(consumed=False)

        self.host.insert_text(text)
        self._update_suggest(key)
        return ModeResult(consumed=True)

    def resolve_key_value(self, key: KeyInput) -> Optional[str]:
        """Text a key inserts; ``None`` for keys insert mode ignores.

        Backspace asks the host to delete and inserts nothing.
        """

        if {"CTRL", "ALT"} & set(key.modifiers):
            return None
        name = key.key
        if len(name) > 1:
            name = name.upper()
        if name == "BACKSPACE":
            self.host.execute_command(commands.DELETE_LEFT)
            return ""
        if name in NAMED_TEXT:
            return NAMED_TEXT[name]
        if key.text:
            return key.text
        if len(name) == 1:
            return name
        return None

    def _update_suggest(self, key: KeyInput) -> None:
        if _LETTER.fullmatch(key.key) and _letter_before_caret(self.cursor.reset()):
            self.host.execute_command(commands.TRIGGER_SUGGEST)
        else:
            self.host.execute_command(commands.HIDE_SUGGEST)

    def _move(self, motion: Motion) -> None:
        self.cursor = self.move(motion)


def _letter_before_caret(motion: Motion) -> bool:
    position = motion.position
    if position.character == 0:
        return False
    text = motion.source.line_text(position.line)
    if position.character > len(text):
        return False
    return bool(_LETTER.fullmatch(text[position.character - 1]))


__all__ = ["InsertMode", "NAMED_TEXT"]
