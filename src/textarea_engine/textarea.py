"""High-level text area façade combining buffer, keymaps, and projection."""

from __future__ import annotations

from typing import Any, Optional

from textarea_engine.buffer import Cursor, EditBuffer
from textarea_engine.config import Frame, TextAreaConfig
from textarea_engine.keymaps import (
    DispatchResult,
    InputDispatcher,
    KeyInput,
    KeymapRegistry,
    load_default_keymaps,
)
from textarea_engine.render import CursorProjector, ProjectedArea


def create_default_registry() -> KeymapRegistry:
    return load_default_keymaps(KeymapRegistry())


class TextArea:
    """An embeddable multi-line editor driven by normalized key input."""

    def __init__(
        self,
        config: Optional[TextAreaConfig] = None,
        *,
        buffer: Optional[EditBuffer] = None,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.config = config or TextAreaConfig()
        self.buffer = buffer or EditBuffer(tab=self.config.tab)
        if buffer is not None:
            self.buffer.tab = self.config.tab
        self.registry = registry or create_default_registry()
        self.dispatcher = InputDispatcher(self.registry)
        self.projector = CursorProjector(self.buffer)
        self.style: Any = self.config.style
        self.frame: Optional[Frame] = self.config.frame

    @classmethod
    def from_text(
        cls, text: str, config: Optional[TextAreaConfig] = None
    ) -> "TextArea":
        config = config or TextAreaConfig()
        return cls(config, buffer=EditBuffer.from_text(text, tab=config.tab))

    def input(self, key: KeyInput) -> DispatchResult:
        result = self.dispatcher.dispatch(self.buffer, key)
        if self.config.verify_invariants:
            self.buffer.check_invariants()
        return result

    def lines(self) -> tuple[str, ...]:
        return self.buffer.lines()

    def cursor(self) -> Cursor:
        return self.buffer.cursor()

    def widget(self) -> ProjectedArea:
        return self.projector.area(style=self.style, frame=self.frame)

    def set_style(self, style: Any) -> "TextArea":
        self.style = style
        return self

    def set_frame(self, frame: Frame) -> "TextArea":
        self.frame = frame
        return self

    def remove_frame(self) -> "TextArea":
        self.frame = None
        return self

    def set_tab(self, tab: str) -> "TextArea":
        self.buffer.tab = tab
        self.config = self.config.with_tab(tab)
        return self


__all__ = ["TextArea", "create_default_registry"]
