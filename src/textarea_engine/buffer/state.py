"""Cursor state for edit buffers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Cursor = Tuple[int, int]  # (row, column), column counted in characters


@dataclass(slots=True)
class BufferState:
    """Mutable cursor position tied to an EditBuffer."""

    cursor: Cursor = (0, 0)

    @property
    def row(self) -> int:
        return self.cursor[0]

    @property
    def column(self) -> int:
        return self.cursor[1]

    def set_cursor(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def set_column(self, col: int) -> None:
        self.cursor = (self.cursor[0], col)
