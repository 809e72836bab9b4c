"""Routes normalized key input to buffer actions through the keymap tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from textarea_engine.buffer import EditBuffer
from textarea_engine.runtime.telemetry import record_event, span

from .models import Key, KeyInput
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Outcome of dispatching one key input."""

    consumed: bool
    action_id: Optional[str] = None


UNHANDLED = DispatchResult(consumed=False)


class InputDispatcher:
    """Applies one key input to a buffer.

    Inputs with ``ctrl`` set are looked up in the ctrl table, everything else
    in the plain table. Keys without a binding are silently ignored.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self.registry = registry
        self._logger_name = logger_name

    def dispatch(self, buffer: EditBuffer, key: KeyInput) -> DispatchResult:
        if key.key is Key.NULL:
            return UNHANDLED

        binding = self.registry.lookup(key.table, key.key_token)
        if binding is None:
            record_event(
                "input::unbound",
                data={"token": key.token},
                logger_name=self._logger_name,
            )
            return UNHANDLED

        action = self.registry.get_action(binding.action_id)
        with span(
            "input::dispatch",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "action": action.id},
        ):
            action(buffer, key)
        return DispatchResult(consumed=True, action_id=action.id)


__all__ = ["DispatchResult", "InputDispatcher", "UNHANDLED"]
