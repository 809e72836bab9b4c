"""Editing and navigation verbs the keymaps dispatch to."""

from .editing import delete_char, insert_char, insert_newline, insert_tab
from .navigation import (
    cursor_back,
    cursor_down,
    cursor_end,
    cursor_forward,
    cursor_start,
    cursor_up,
)

__all__ = [
    "insert_char",
    "insert_tab",
    "insert_newline",
    "delete_char",
    "cursor_forward",
    "cursor_back",
    "cursor_up",
    "cursor_down",
    "cursor_start",
    "cursor_end",
]
