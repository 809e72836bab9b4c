"""Textual widget that paints a projected text area."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.style import Style
from rich.text import Text
from textual import events
from textual.widget import Widget

from textarea_engine.render import ProjectedArea
from textarea_engine.textarea import TextArea

if TYPE_CHECKING:
    from .controller import TextualTextAreaAdapter

CURSOR_STYLE = Style(reverse=True)


def build_text(area: ProjectedArea) -> Text:
    """Convert projected spans into a rich ``Text`` with the cursor reversed."""

    text = Text(style=area.style or "", no_wrap=True, end="")
    for index, line in enumerate(area.lines):
        if index:
            text.append("\n")
        for span in line:
            text.append(span.text, style=CURSOR_STYLE if span.highlighted else None)
    return text


class TextAreaView(Widget, can_focus=True):
    """Focusable widget rendering a ``TextArea``.

    Key events are handed to the attached adapter; keys it does not consume
    keep bubbling so app-level bindings still work.
    """

    DEFAULT_CSS = """
    TextAreaView {
        height: 1fr;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        textarea: TextArea,
        *,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.textarea = textarea
        self.adapter: TextualTextAreaAdapter | None = None

    def on_mount(self) -> None:
        self.apply_frame()

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None:
            return
        result = self.adapter.handle_key_event(event)
        if result.consumed:
            event.stop()
            event.prevent_default()

    def render(self) -> Text:
        return build_text(self.textarea.widget())

    def apply_frame(self) -> None:
        frame = self.textarea.frame
        if frame is None:
            self.styles.border = ("none", "white")
            self.border_title = None
            return
        self.styles.border = (frame.border, frame.color or "white")
        self.border_title = frame.title

    def update_view(self, area: ProjectedArea) -> None:
        del area  # render() re-projects from the text area
        self.apply_frame()
        self.refresh()


__all__ = ["CURSOR_STYLE", "TextAreaView", "build_text"]
