"""Cursor movement verbs bound to keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textarea_engine.buffer import EditBuffer

if TYPE_CHECKING:
    from textarea_engine.keymaps.models import KeyInput


def cursor_forward(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_forward()


def cursor_back(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_back()


def cursor_up(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_up()


def cursor_down(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_down()


def cursor_start(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_start()


def cursor_end(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.cursor_end()


__all__ = [
    "cursor_forward",
    "cursor_back",
    "cursor_up",
    "cursor_down",
    "cursor_start",
    "cursor_end",
]
