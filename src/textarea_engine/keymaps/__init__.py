"""Key input model, keybinding tables, and dispatch."""

from .models import (
    CHAR_WILDCARD,
    CTRL_TABLE,
    PLAIN_TABLE,
    ActionRef,
    Binding,
    Key,
    KeyInput,
)
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import load_default_keymaps
from .dispatcher import DispatchResult, InputDispatcher

__all__ = [
    "ActionRef",
    "Binding",
    "CHAR_WILDCARD",
    "CTRL_TABLE",
    "PLAIN_TABLE",
    "Key",
    "KeyInput",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DispatchResult",
    "InputDispatcher",
    "load_default_keymaps",
]
