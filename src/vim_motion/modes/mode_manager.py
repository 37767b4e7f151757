"""Mode manager coordinating Normal/Insert dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from vim_motion.errors import PositionOutOfRangeError
from vim_motion.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events.

    Before the active mode sees a key, every other registered mode is asked
    whether that key activates it (``i`` from normal, ``ESC`` from insert).
    """

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event("mode.switch", data={"mode": name})
        self.context.bus.emit("mode.switch", name)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            try:
                target = self._activation_target(key, mode)
                if target is not None:
                    self.switch_mode(target.name)
                    result = target.handle_activation(key)
                else:
                    result = mode.handle_key(key)
            except PositionOutOfRangeError as exc:
                telemetry.record_event(
                    "motion.out_of_range",
                    level="warning",
                    data={
                        "mode": mode.name,
                        "key": key.key,
                        "cursor": exc.cursor,
                        "max_column": exc.max_column,
                    },
                )
                raise

        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result

    def _activation_target(self, key: KeyInput, active: Mode) -> Optional[Mode]:
        for mode in self._modes.values():
            if mode is not active and mode.should_activate(key, active.name):
                return mode
        return None
