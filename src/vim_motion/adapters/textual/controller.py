"""Textual-facing adapter that wires ModeManager events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from vim_motion.host import EditorHost
from vim_motion.modes import (
    InsertMode,
    KeyInput,
    ModeBus,
    ModeContext,
    ModeResult,
    NormalMode,
)
from vim_motion.modes.mode_manager import ModeManager
from vim_motion.motion import Position

NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
    "space": "SPACE",
    "left": "LEFT",
    "right": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "home": "HOME",
    "end": "END",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_caret: Callable[[Position], None] = _noop
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


def create_default_manager(host: EditorHost) -> ModeManager:
    """Normal mode first (so it starts active), then insert mode."""

    manager = ModeManager(ModeContext(host=host, bus=ModeBus()))
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    return manager


def normalize_key(key: str, character: Optional[str]) -> Tuple[str, Optional[str]]:
    """Map a Textual key name/character pair onto ``KeyInput`` naming."""

    if key in NAMED_KEYS:
        return NAMED_KEYS[key], None
    if character and character.isprintable():
        return character, character
    return key.upper(), None


class TextualVimAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_status()

    @property
    def mode_name(self) -> str:
        active = self.manager.active_mode
        return active.name if active else "?"

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized, normalized_text = normalize_key(key, text)
        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=normalized, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(
                key=normalized, text=normalized_text, modifiers=normalized_modifiers
            )
        )
        self._refresh_status(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in ("caret.moved", "mode.switch"):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)
        if name == "caret.moved" and isinstance(payload, Position):
            self.hooks.update_caret(payload)

    def _refresh_status(self, result: Optional[ModeResult] = None) -> None:
        label = f"-- {self.mode_name.upper()} --"
        if result is not None and result.status != "ok":
            label = f"{label} {result.message or result.status}"
        self.hooks.update_status(label)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "mode": self.mode_name,
            "caret": self.manager.context.host.current_host_position().as_tuple(),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "TextualVimAdapter",
    "TextualUIHooks",
    "create_default_manager",
    "normalize_key",
]
