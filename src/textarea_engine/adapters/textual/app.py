"""Executable Textual app that hosts a text area."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from textarea_engine.config import ConfigurationError, Frame, TextAreaConfig
from textarea_engine.runtime import telemetry
from textarea_engine.textarea import TextArea

from .controller import TextualTextAreaAdapter, TextualUIHooks
from .widget import TextAreaView


class TextAreaApp(App[tuple[str, ...]]):
    """Minimal Textual UI embedding the text area engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "finish", "Quit"),
    ]

    def __init__(self, textarea: Optional[TextArea] = None) -> None:
        super().__init__()
        self.textarea = textarea or TextArea()
        self.adapter: TextualTextAreaAdapter | None = None
        self._view: TextAreaView | None = None
        self._status_widget: Static | None = None
        self._logger = telemetry.get_logger("textarea_engine.app")

    def compose(self) -> ComposeResult:
        yield Header()
        self._view = TextAreaView(self.textarea, id="text-area")
        yield self._view
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        assert self._view is not None
        hooks = TextualUIHooks(
            update_view=self._view.update_view,
            update_status=self._update_status,
            log=self._logger.debug,
        )
        self.adapter = TextualTextAreaAdapter(self.textarea, hooks)
        self._view.adapter = self.adapter
        self._view.focus()

    def action_finish(self) -> None:
        self.exit(self.textarea.lines())

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    env_config = TextAreaConfig.from_env()
    parser = argparse.ArgumentParser(description="Run the text area Textual demo.")
    parser.add_argument(
        "--tab-width",
        type=int,
        default=len(env_config.tab),
        help="Spaces per indentation stop (0 disables tab, default: TEXTAREA_ENGINE_TAB_WIDTH or 4)",
    )
    parser.add_argument("--title", default=None, help="Frame title")
    parser.add_argument(
        "--border",
        default="round",
        help="Textual border type for the frame, or 'none' (default: round)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        default=env_config.verify_invariants,
        help="Check buffer invariants after every key (default: TEXTAREA_ENGINE_VERIFY)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def build_textarea(args: argparse.Namespace) -> TextArea:
    if args.tab_width < 0:
        raise ConfigurationError(
            "tab width cannot be negative", option="tab", value=args.tab_width
        )
    frame = None if args.border == "none" else Frame(border=args.border, title=args.title)
    config = TextAreaConfig(
        tab=" " * args.tab_width,
        frame=frame,
        verify_invariants=args.verify,
    )
    return TextArea(config)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = TextAreaApp(build_textarea(args))
    lines = app.run()
    if lines is not None:
        print("\n".join(lines))


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
