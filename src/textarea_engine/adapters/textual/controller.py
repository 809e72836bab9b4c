"""Minimal Textual adapter that feeds key events into a TextArea."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from textarea_engine.keymaps import DispatchResult
from textarea_engine.render import ProjectedArea
from textarea_engine.textarea import TextArea

from .keys import KeyMapper


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[ProjectedArea], None]
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualTextAreaAdapter:
    """Bridges Textual key events to a TextArea and its view."""

    def __init__(
        self,
        textarea: TextArea,
        hooks: TextualUIHooks,
        *,
        mapper: Optional[KeyMapper] = None,
    ) -> None:
        self.textarea = textarea
        self.hooks = hooks
        self.mapper = mapper or KeyMapper()
        self.refresh()

    def handle_key_event(self, event: object) -> DispatchResult:
        """Map a raw event, apply it, and refresh the UI if anything ran."""

        key = self.mapper.map(event)
        self._log_state("key ->", token=key.token)
        result = self.textarea.input(key)
        if result.consumed:
            self.refresh()
        self._log_state("result <-", consumed=result.consumed, action=result.action_id)
        return result

    def refresh(self) -> None:
        self.hooks.update_view(self.textarea.widget())
        self.hooks.update_status(self.status_text())

    def status_text(self) -> str:
        row, col = self.textarea.cursor()
        return f"Ln {row + 1}, Col {col + 1}"

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        buffer = self.textarea.buffer
        return {
            "cursor": buffer.cursor(),
            "lines": buffer.line_count,
            "buffer": buffer.name,
            "buffer_version": buffer.version,
        }


__all__ = ["TextualTextAreaAdapter", "TextualUIHooks"]
