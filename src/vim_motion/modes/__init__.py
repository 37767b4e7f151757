"""Mode manager and the Normal/Insert modes built on the motion engine."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .insert_mode import InsertMode
from .mode_manager import ModeManager
from .normal_mode import MOTION_KEYS, NormalMode

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "ModeManager",
    "NormalMode",
    "InsertMode",
    "MOTION_KEYS",
]
