"""Executable Textual app that shows RTL visual-order hints under the cursor line."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Iterator, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use bidi_scope.adapters.textual.app"
    ) from exc

from bidi_scope.config import HintConfig
from bidi_scope.hint import TAB_WIDTH, HintLine, LineKey
from bidi_scope.runtime import telemetry
from bidi_scope.text import PRESCAN_LINE_LIMIT
from bidi_scope.text.codec import as_bytes

from .controller import BufferEntered, HintController, HintHooks

SCRATCH_BUFFER = "[scratch]"
SAMPLE_TEXT = "\n".join(
    [
        "Hello سلام دنیا World",
        "Order مرحبا 123 بك today",
        "Trailing comma: غير مفهوم، then English",
        "Hebrew word: שלום",
        "Compound: \u0645\u06cc\u200c\u062e\u0648\u0627\u0647\u0645 \u06cc\u06a9 \u06a9\u062a\u0627\u0628",
    ]
)

HIGHLIGHT_STYLES: Dict[str, str] = {
    "Normal": "",
    "Comment": "italic grey62",
    "Cursor": "reverse bold",
}

NOTIFY_SEVERITY: Dict[str, str] = {
    "info": "information",
    "warn": "warning",
    "warning": "warning",
    "error": "error",
}


def hint_markup(hint: HintLine, tab_size: int = TAB_WIDTH) -> Text:
    """Convert hint chunks into a Rich ``Text`` using ``HIGHLIGHT_STYLES``."""

    text = Text(no_wrap=True, tab_size=tab_size)
    for chunk in hint.chunks:
        text.append(chunk.text, style=HIGHLIGHT_STYLES.get(chunk.group, ""))
    return text


class BidiScopeApp(App[None]):
    """Editor surface with a visual-order hint line beneath it."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#hint-line {
		height: 1;
		padding: 0 1;
		background: $surface-darken-1;
	}

	#status-line {
		height: 1;
		padding: 0 1;
		background: $surface-darken-2;
	}
	"""

    BINDINGS = [
        Binding("ctrl+t", "toggle_hint", "Toggle hint", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        config: Optional[HintConfig] = None,
    ) -> None:
        super().__init__()
        self._path = path
        self._buffer_name = str(path) if path else SCRATCH_BUFFER
        self._config = config or HintConfig.from_env()
        self.controller: HintController | None = None
        self._editor: TextArea | None = None
        self._hint_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._editor = TextArea(self._initial_text(), id="editor")
        yield self._editor
        self._hint_widget = Static("", id="hint-line")
        self._status_widget = Static("", id="status-line")
        yield self._hint_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = HintHooks(
            show_hint=self._show_hint,
            clear_hint=self._clear_hint,
            notify=self._notify,
            enable_native_motions=self._enable_native_motions,
            extend_keywords=self._extend_keywords,
            log=self._log_line,
        )
        tab_width = self._editor.indent_width if self._editor else TAB_WIDTH
        self.controller = HintController(hooks, config=self._config, tab_width=tab_width)
        self.controller.setup()
        if self._editor is not None:
            self.controller.handle_event(
                "buffer.enter",
                BufferEntered(self._buffer_name, self._leading_lines()),
            )
        self._dispatch("cursor.moved")

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        del event
        self._dispatch("cursor.moved")

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        del event
        self._dispatch("text.changed")

    def action_toggle_hint(self) -> None:
        if self.controller:
            self.controller.command("toggle")

    def _dispatch(self, event: str) -> None:
        key = self._current_key()
        if self.controller and key is not None:
            self.controller.handle_event(event, key)

    def _current_key(self) -> Optional[LineKey]:
        if self._editor is None:
            return None
        row, column = self._editor.cursor_location
        line = self._editor.document.get_line(row)
        cursor_col = len(as_bytes(line[:column])) + 1
        return LineKey(self._buffer_name, row + 1, line, cursor_col)

    def _leading_lines(self, limit: int = PRESCAN_LINE_LIMIT) -> Iterator[str]:
        if self._editor is None:
            return
        document = self._editor.document
        for row in range(min(document.line_count, limit)):
            yield document.get_line(row)

    def _initial_text(self) -> str:
        if self._path is None:
            return SAMPLE_TEXT
        return self._path.read_text(encoding="utf-8", errors="replace")

    def _show_hint(self, buffer: str, line: int, hint: HintLine) -> None:
        del buffer, line
        if self._hint_widget:
            tab_size = self.controller.tab_width if self.controller else TAB_WIDTH
            self._hint_widget.update(hint_markup(hint, tab_size))

    def _clear_hint(self, buffer: str, line: int) -> None:
        del buffer, line
        if self._hint_widget:
            self._hint_widget.update("")

    def _notify(self, message: str, level: str) -> None:
        self.notify(message, severity=NOTIFY_SEVERITY.get(level, "information"))

    def _enable_native_motions(self, buffer: str) -> None:
        self._update_status(f"RTL text detected in {buffer}")

    def _extend_keywords(self, ranges: Tuple[Tuple[int, int], ...]) -> None:
        spans = ",".join(f"{low}-{high}" for low, high in ranges)
        self._update_status(f"keyword ranges += {spans}")

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("bidi_scope.app").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show visual-order hints for right-to-left runs."
    )
    parser.add_argument("path", nargs="?", type=Path, help="File to open")
    parser.add_argument(
        "--hide-unchanged",
        action="store_true",
        help="Hide the hint when every run already reads the same visually",
    )
    parser.add_argument(
        "--joiner-rewrite",
        action="store_true",
        help="Show ZWNJ as a dotted circle",
    )
    parser.add_argument(
        "--joiner-swap",
        action="store_true",
        help="Swap word halves around a single ZWNJ",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=sorted(telemetry.PRESETS),
        default=None,
        help="telelog preset to log with",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> HintConfig:
    """Layer command-line switches over the environment configuration."""

    options = {}
    if args.hide_unchanged:
        options["hide_if_unchanged"] = True
    if args.joiner_rewrite:
        options["joiner_rewrite"] = True
    if args.joiner_swap:
        options["joiner_swap"] = True
    return HintConfig.from_env().with_options(**options)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.telemetry_preset:
        telemetry.configure(preset=args.telemetry_preset)
    app = BidiScopeApp(path=args.path, config=build_config(args))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
