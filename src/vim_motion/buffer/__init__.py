"""In-memory document and host used by tests and the demo."""

from vim_motion.errors import BufferValidationError

from .buffer import Buffer
from .document import BufferDocument
from .state import BufferState
from .sync import BufferMirror
from .validation import ensure_cursor

__all__ = [
    "Buffer",
    "BufferDocument",
    "BufferState",
    "BufferMirror",
    "BufferValidationError",
    "ensure_cursor",
]
