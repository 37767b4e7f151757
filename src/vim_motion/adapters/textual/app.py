"""Executable Textual app that hosts the modal editing layer."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence, Tuple

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static, TextArea

from vim_motion.motion import Position
from vim_motion.runtime import telemetry

from .controller import TextualUIHooks, TextualVimAdapter, create_default_manager
from .host import TextAreaHost


class ModalTextArea(TextArea):
    """``TextArea`` whose keys go through the mode manager first."""

    def __init__(self, text: str = "", **kwargs) -> None:
        super().__init__(text, **kwargs)
        self.adapter: Optional[TextualVimAdapter] = None

    async def _on_key(self, event: events.Key) -> None:
        # TextArea's own handler runs after this one unless prevented.
        if self.adapter is None:
            return

        result = self.adapter.handle_textual_key(
            event.key, text=event.character, modifiers=_modifiers(event)
        )
        # Normal mode never lets keys through as text.
        if result.consumed or self.adapter.mode_name == "normal":
            event.stop()
            event.prevent_default()


class VimMotionApp(App[None]):
    """Minimal Textual UI embedding Normal/Insert modes."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, text: str = "") -> None:
        super().__init__()
        self._text = text
        self.adapter: TextualVimAdapter | None = None
        self.host: TextAreaHost | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ModalTextArea(self._text, id="editor")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one("#editor", ModalTextArea)
        self.host = TextAreaHost(editor, on_suggest=self._on_suggest)
        hooks = TextualUIHooks(
            update_caret=self._update_caret,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualVimAdapter(create_default_manager(self.host), hooks)
        editor.adapter = self.adapter
        editor.focus()

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)

    def _update_caret(self, position: Position) -> None:
        self.sub_title = f"{position.line + 1}:{position.character + 1}"

    def _on_suggest(self, visible: bool) -> None:
        if visible:
            self.notify("suggestions available", timeout=1)

    def _log_line(self, line: str) -> None:
        telemetry.record_event("textual.adapter", level="debug", data={"line": line})


def _modifiers(event: events.Key) -> Tuple[str, ...]:
    modifiers = []
    if "ctrl+" in event.key:
        modifiers.append("CTRL")
    if "alt+" in event.key or "meta+" in event.key:
        modifiers.append("ALT")
    return tuple(modifiers)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the vim-motion Textual demo.")
    parser.add_argument("path", nargs="?", help="File to open (read only)")
    parser.add_argument(
        "--preset",
        choices=("development", "production", "performance"),
        default=None,
        help="Telemetry preset (default: VIM_MOTION_* environment settings)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    VimMotionApp(text=text).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
