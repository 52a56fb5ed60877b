"""Executable Textual app showing the interlink keyword as you type."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' extra to use interlink_engine.adapters.textual.app"
    ) from exc

from interlink_engine.interlinks import MarkerPair

from .controller import EditorKeyword, InterlinkUIHooks, TextualInterlinkAdapter

SAMPLE_TEXT = (
    "Hexadecimal is made up of [numbers](simplenote://note/123456) and "
    "[letters](simplenote://note/abcdef).\n"
    "Type an opening marker to start a new link: "
)


@dataclass
class UIState:
    keyword: str = ""
    status_text: str = ""


class InterlinkDemoApp(App[None]):
    """TextArea with a status line reporting the keyword under the cursor."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
		border: round $accent;
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

    def __init__(self, *, text: str = SAMPLE_TEXT, markers: MarkerPair) -> None:
        super().__init__()
        self._state = UIState()
        self._initial_text = text
        self._markers = markers
        self.adapter: TextualInterlinkAdapter | None = None
        self._editor: TextArea | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._editor = TextArea(self._initial_text, id="editor")
        yield self._editor
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = InterlinkUIHooks(
            show_keyword=self._show_keyword,
            clear_keyword=self._clear_keyword,
            log=self.log.debug,
        )
        self.adapter = TextualInterlinkAdapter(hooks, markers=self._markers)
        self._update_status(
            f"markers {self._markers.opening}{self._markers.closing} | ctrl+q quits"
        )

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh(event.text_area)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        self._refresh(event.text_area)

    def _refresh(self, editor: TextArea) -> None:
        if self.adapter is None:
            return
        self.adapter.handle_edit(editor.text, editor.cursor_location)

    def _show_keyword(self, found: EditorKeyword) -> None:
        self._state.keyword = found.keyword.value
        (row, start), (_, end) = found.start, found.end
        self._update_status(
            f"keyword {self._state.keyword!r} @ row {row}, columns {start}..{end}"
        )

    def _clear_keyword(self) -> None:
        self._state.keyword = ""
        self._update_status("")

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Type `[keyword` and watch the interlink keyword detection."
    )
    parser.add_argument(
        "--opening",
        default=os.environ.get("INTERLINK_ENGINE_OPENING", "["),
        help="Opening marker character (default: [)",
    )
    parser.add_argument(
        "--closing",
        default=os.environ.get("INTERLINK_ENGINE_CLOSING", "]"),
        help="Closing marker character (default: ])",
    )
    parser.add_argument(
        "--text",
        default=SAMPLE_TEXT,
        help="Initial editor contents",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    try:
        markers = MarkerPair(args.opening, args.closing)
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from exc
    InterlinkDemoApp(text=args.text, markers=markers).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
