"""Vim-style caret motions and modal editing for host text editors."""

__all__ = [
    "adapters",
    "buffer",
    "errors",
    "host",
    "modes",
    "motion",
    "runtime",
]

__version__ = "0.1.0"
