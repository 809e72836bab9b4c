"""Built-in keymaps: plain editing keys plus Emacs-style ctrl bindings."""

from __future__ import annotations

from textarea_engine.actions import editing as editing_actions
from textarea_engine.actions import navigation as navigation_actions

from .models import CHAR_WILDCARD, CTRL_TABLE, PLAIN_TABLE, ActionRef, Binding, Key
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_char",
        handler=editing_actions.insert_char,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.insert_tab",
        handler=editing_actions.insert_tab,
        description="Indent to the next tab stop",
    ),
    ActionRef(
        id="edit.insert_newline",
        handler=editing_actions.insert_newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_char",
        handler=editing_actions.delete_char,
        description="Delete the character before the cursor",
    ),
    ActionRef(
        id="cursor.forward",
        handler=navigation_actions.cursor_forward,
        description="Move cursor forward",
    ),
    ActionRef(
        id="cursor.back",
        handler=navigation_actions.cursor_back,
        description="Move cursor back",
    ),
    ActionRef(
        id="cursor.up",
        handler=navigation_actions.cursor_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="cursor.down",
        handler=navigation_actions.cursor_down,
        description="Move cursor down",
    ),
    ActionRef(
        id="cursor.start",
        handler=navigation_actions.cursor_start,
        description="Move cursor to line start",
    ),
    ActionRef(
        id="cursor.end",
        handler=navigation_actions.cursor_end,
        description="Move cursor to line end",
    ),
)


def _special(key: Key) -> str:
    return f"<{key.value}>"


PLAIN_KEYS: tuple[tuple[str, str], ...] = (
    (CHAR_WILDCARD, "edit.insert_char"),
    (_special(Key.BACKSPACE), "edit.delete_char"),
    (_special(Key.TAB), "edit.insert_tab"),
    (_special(Key.ENTER), "edit.insert_newline"),
    (_special(Key.UP), "cursor.up"),
    (_special(Key.RIGHT), "cursor.forward"),
    (_special(Key.DOWN), "cursor.down"),
    (_special(Key.LEFT), "cursor.back"),
    (_special(Key.HOME), "cursor.start"),
    (_special(Key.END), "cursor.end"),
)

CTRL_KEYS: tuple[tuple[str, str], ...] = (
    ("h", "edit.delete_char"),
    ("m", "edit.insert_newline"),
    ("p", "cursor.up"),
    ("n", "cursor.down"),
    ("f", "cursor.forward"),
    ("b", "cursor.back"),
    ("a", "cursor.start"),
    ("e", "cursor.end"),
)


def _binding_id(table: str, key: str) -> str:
    name = key.strip("<>")
    return f"{table}.{name}"


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(id=_binding_id(table, key), table=table, key=key, action_id=action_id)
    for table, keys in ((PLAIN_TABLE, PLAIN_KEYS), (CTRL_TABLE, CTRL_KEYS))
    for key, action_id in keys
)


def load_default_keymaps(
    registry: KeymapRegistry, *, replace: bool = False
) -> KeymapRegistry:
    """Register the default actions and bindings on ``registry``."""

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        registry.register_binding(binding, replace=replace)
    return registry


__all__ = [
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
