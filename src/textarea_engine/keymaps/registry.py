"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from textarea_engine.runtime.telemetry import span

from .models import CHAR_WILDCARD, ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    tables: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding takes a key already bound in its table."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.table}:{binding.key}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the per-table key bindings."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._index: Dict[tuple[str, str], str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "table": binding.table},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            existing_id = self._index.get(binding.signature)
            if existing_id is not None and existing_id != binding.id:
                if not replace:
                    raise KeymapConflictError(binding, self._bindings[existing_id])
                self._drop(existing_id)

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self._drop(binding.id)

            self._bindings[binding.id] = binding
            self._index[binding.signature] = binding.id
            self._revision += 1
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        if binding_id not in self._bindings:
            return None
        binding = self._drop(binding_id)
        self._revision += 1
        return binding

    def lookup(self, table: str, key: str) -> Optional[Binding]:
        """Find the binding for ``key`` in ``table``.

        Single characters fall back to the table's ``<char>`` wildcard.
        """

        binding_id = self._index.get((table, key))
        if binding_id is None and len(key) == 1:
            binding_id = self._index.get((table, CHAR_WILDCARD))
        if binding_id is None:
            return None
        return self._bindings[binding_id]

    def iter_bindings(self, table: Optional[str] = None) -> Iterator[Binding]:
        for binding in self._bindings.values():
            if table is None or binding.table == table:
                yield binding

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            tables=tuple(sorted({binding.table for binding in self._bindings.values()})),
        )

    def _drop(self, binding_id: str) -> Binding:
        binding = self._bindings.pop(binding_id)
        self._index.pop(binding.signature, None)
        return binding


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
