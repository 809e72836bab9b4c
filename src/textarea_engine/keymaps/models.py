"""Normalized key input and the binding metadata that maps it to actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

PLAIN_TABLE = "plain"
CTRL_TABLE = "ctrl"
TABLES = (PLAIN_TABLE, CTRL_TABLE)

# Binding key that matches any character input in its table.
CHAR_WILDCARD = "<char>"


class Key(str, Enum):
    CHAR = "char"
    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    NULL = "null"


@dataclass(frozen=True, slots=True)
class KeyInput:
    """A key press reduced to the key itself plus the ctrl modifier.

    ``char`` is set exactly when ``key`` is ``Key.CHAR``.
    """

    key: Key = Key.NULL
    char: Optional[str] = None
    ctrl: bool = False

    def __post_init__(self) -> None:
        if self.key is Key.CHAR:
            if self.char is None or len(self.char) != 1:
                raise ValueError(f"CHAR input needs exactly one character, got {self.char!r}")
        elif self.char is not None:
            raise ValueError(f"{self.key.name} input cannot carry a character")

    @classmethod
    def char_input(cls, char: str, *, ctrl: bool = False) -> "KeyInput":
        return cls(Key.CHAR, char, ctrl)

    @classmethod
    def of(cls, key: Key, *, ctrl: bool = False) -> "KeyInput":
        return cls(key, None, ctrl)

    @property
    def table(self) -> str:
        return CTRL_TABLE if self.ctrl else PLAIN_TABLE

    @property
    def key_token(self) -> str:
        if self.key is Key.CHAR:
            assert self.char is not None
            return self.char
        return f"<{self.key.value}>"

    @property
    def token(self) -> str:
        if self.ctrl:
            return f"ctrl+{self.key_token}"
        return self.key_token


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Callable metadata used during binding execution."""

    id: str
    handler: Callable[..., object]
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key token in one table with an action."""

    id: str
    table: str
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if self.table not in TABLES:
            raise ValueError(f"binding table must be one of {TABLES}, got {self.table!r}")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def signature(self) -> tuple[str, str]:
        return (self.table, self.key)


__all__ = [
    "ActionRef",
    "Binding",
    "CHAR_WILDCARD",
    "CTRL_TABLE",
    "Key",
    "KeyInput",
    "PLAIN_TABLE",
    "TABLES",
]
