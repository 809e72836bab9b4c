"""Editing verbs bound to keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textarea_engine.buffer import EditBuffer
from textarea_engine.buffer.line import contains_line_break

if TYPE_CHECKING:
    from textarea_engine.keymaps.models import KeyInput


def insert_char(buffer: EditBuffer, key: KeyInput) -> None:
    # Line breaks arrive as Key.ENTER; a raw break character is ignored.
    if key.char is None or contains_line_break(key.char):
        return
    buffer.insert_char(key.char)


def insert_tab(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.insert_tab()


def insert_newline(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.insert_newline()


def delete_char(buffer: EditBuffer, key: KeyInput) -> None:
    del key
    buffer.delete_char()


__all__ = ["insert_char", "insert_tab", "insert_newline", "delete_char"]
