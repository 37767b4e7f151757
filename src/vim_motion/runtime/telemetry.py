"""Telemetry on top of telelog.

``configure(preset=...)`` picks the logging setup, ``record_event`` writes a
structured ``event::<name>`` line and ``span`` profiles a block as a telelog
component. Everything else reads ``VIM_MOTION_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "VIM_MOTION_"


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class TelemetrySettings:
    logger_name: str = "vim_motion"
    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False
    buffered: bool = False
    buffer_size: int = 2048
    console: bool = True
    colored: bool = True
    preset: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TelemetrySettings":
        return cls(
            logger_name=_env("LOGGER") or "vim_motion",
            level=(_env("LOG_LEVEL") or "INFO").upper(),
            log_file=_env("LOG_FILE") or "",
            json_format=_env_flag("LOG_JSON"),
            buffered=_env_flag("LOG_BUFFERED"),
            buffer_size=int(_env("LOG_BUFFER_SIZE") or "2048"),
            console=not _env_flag("DISABLE_CONSOLE"),
            colored=not _env_flag("NO_COLOR"),
            preset=_env("PRESET"),
        )


PRESETS: Dict[str, TelemetrySettings] = {
    "development": TelemetrySettings(level="DEBUG"),
    "production": TelemetrySettings(
        console=False, log_file="vim_motion.log", buffered=True
    ),
    "performance": TelemetrySettings(
        level="DEBUG",
        console=False,
        json_format=True,
        buffered=True,
        log_file="vim_motion-performance.log",
    ),
}

SETTINGS = TelemetrySettings.from_env()

_LOGGERS: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _resolve(settings: TelemetrySettings, preset: Optional[str]) -> TelemetrySettings:
    if not preset:
        return settings
    try:
        base = PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None
    # An explicit log file still wins over the preset's default one.
    return replace(
        base,
        logger_name=settings.logger_name,
        log_file=settings.log_file or base.log_file,
    )


def _build_config(settings: TelemetrySettings) -> Any:
    config = tl.Config()
    config.with_min_level(settings.level)
    config.with_console_output(settings.console)
    if settings.console:
        config.with_colored_output(settings.colored)
    config.with_json_format(settings.json_format)
    if settings.log_file:
        config.with_file_output(settings.log_file)
    if settings.buffered:
        config.with_buffering(True)
        config.with_buffer_size(settings.buffer_size)
    config.with_profiling(True)
    return config


def configure(
    *, preset: Optional[str] = None, settings: Optional[TelemetrySettings] = None
) -> None:
    """Rebuild the telelog config and drop cached loggers.

    ``preset`` is ``"development"``, ``"production"`` or ``"performance"``;
    without one, ``settings`` (default: the environment) is used as is.
    """

    global _config
    settings = settings or SETTINGS
    _config = _build_config(_resolve(settings, preset or settings.preset))
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or SETTINGS.logger_name
    if logger_name not in _LOGGERS:
        if _config is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _LOGGERS[logger_name]


def _log(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    pairs = [(str(key), str(value)) for key, value in payload.items()]
    with_data = getattr(logger, f"{level}_with", None)
    if with_data is not None:
        with_data(message, pairs)
        return
    method = getattr(logger, level, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _log(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[None]:
    """Profile a block; ``component=True`` also tracks it under ``name``.

    ``metadata`` is attached as logger context while the block runs. An
    exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: str(value) for key, value in (metadata or {}).items()}

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield
        except Exception as exc:
            _log(log, "error", "span::fail", {"span": name, **context, "reason": exc})
            raise


__all__ = [
    "PRESETS",
    "SETTINGS",
    "TelemetrySettings",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
