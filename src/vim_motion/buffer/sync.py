"""Snapshot type handed from buffers to UI adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .state import Cursor, Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    text: str
    cursor: Cursor
    selection: Optional[Selection]
    attributes: dict[str, str] = field(default_factory=dict)
