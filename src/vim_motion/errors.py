"""Exception types shared by the buffer and motion layers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from vim_motion.motion.position import Position


class BufferValidationError(RuntimeError):
    """Raised when hosts or buffers provide out-of-bounds cursor info."""

    def __init__(self, message: str, *, cursor: Tuple[int, int] | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


class PositionOutOfRangeError(BufferValidationError):
    """A position's column lies past the last column its line allows.

    Motions never produce such positions; seeing one means a caller built it
    by hand or the document changed underneath a live motion state.
    """

    def __init__(self, position: "Position", max_column: int) -> None:
        super().__init__(
            f"Column {position.character} out of range on line {position.line} "
            f"(max {max_column})",
            cursor=(position.line, position.character),
        )
        self.position = position
        self.max_column = max_column


__all__ = ["BufferValidationError", "PositionOutOfRangeError"]
