"""Normal mode: caret motions bound to a fixed key table."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from vim_motion.motion import Motion, caret

from .base_mode import KeyInput, Mode, ModeContext, ModeResult

MotionStep = Callable[[Motion], Motion]

MOTION_KEYS: Dict[str, MotionStep] = {
    "h": Motion.left,
    "LEFT": Motion.left,
    "l": Motion.right,
    "RIGHT": Motion.right,
    "k": Motion.up,
    "UP": Motion.up,
    "j": Motion.down,
    "DOWN": Motion.down,
    "w": Motion.word_right,
    "b": Motion.word_left,
    "0": Motion.line_begin,
    "HOME": Motion.line_begin,
    "$": Motion.line_end,
    "END": Motion.line_end,
    "G": Motion.last_line_non_blank_char,
    "gg": Motion.first_line_non_blank_char,
}

PREFIX_KEYS = frozenset(sequence[0] for sequence in MOTION_KEYS if len(sequence) > 1)


class NormalMode(Mode):
    name = "normal"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._caret: Optional[Motion] = None
        self._pending = ""

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self._caret = None
        self._pending = ""

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._caret = None
        self._pending = ""

    def should_activate(self, key: KeyInput, current_mode: str) -> bool:
        return key.key == "ESC" and current_mode != self.name

    def handle_activation(self, key: KeyInput) -> ModeResult:
        del key
        self._caret = self.move(_clamped(caret(self.host).left()))
        return ModeResult(consumed=True, message="exit_insert")

    def handle_key(self, key: KeyInput) -> ModeResult:
        sequence = self._pending + key.key
        self._pending = ""

        step = MOTION_KEYS.get(sequence)
        if step is not None:
            self._caret = self.move(_clamped(step(self._current_caret())))
            return ModeResult(consumed=True)

        if sequence in PREFIX_KEYS:
            self._pending = sequence
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        return ModeResult(consumed=False, status="unbound")

    def _current_caret(self) -> Motion:
        # Keep the sticky column only while the host caret is where we left it.
        host_position = self.host.current_host_position()
        if self._caret is None or self._caret.position != host_position:
            self._caret = _clamped(caret(self.host, host_position))
        return self._caret


def _clamped(state: Motion) -> Motion:
    """Pull a position past the caret bound back onto the last character."""

    if state.is_out_of_range():
        return state.line_end()
    return state


__all__ = ["NormalMode", "MOTION_KEYS"]
