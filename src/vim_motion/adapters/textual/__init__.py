"""Textual host, adapter and demo app."""

from .controller import (
    TextualUIHooks,
    TextualVimAdapter,
    create_default_manager,
    normalize_key,
)
from .host import TextAreaHost

__all__ = [
    "TextAreaHost",
    "TextualUIHooks",
    "TextualVimAdapter",
    "create_default_manager",
    "normalize_key",
]
