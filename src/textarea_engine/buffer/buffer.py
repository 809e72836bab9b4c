"""Edit buffer: lines plus a cursor, mutated by editing and navigation verbs."""

from __future__ import annotations

from typing import Iterable, Optional

from textarea_engine.config import DEFAULT_TAB, validate_tab
from textarea_engine.runtime import telemetry

from .line import Line, contains_line_break
from .state import BufferState, Cursor
from .validation import ensure_invariants

LOGGER_NAME = "textarea_engine.buffer"


class EditBuffer:
    """Owns the lines of a text area and its single cursor.

    Every operation either applies fully or is a no-op; none of them fail for
    a buffer whose invariants hold. ``check_invariants`` verifies that on
    demand.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        lines: Optional[Iterable[Line]] = None,
        tab: str = DEFAULT_TAB,
    ) -> None:
        self.name = name
        self._lines: list[Line] = list(lines) if lines is not None else []
        if not self._lines:
            self._lines.append(Line())
        self.state = BufferState()
        self._tab = validate_tab(tab)
        self.version = 0

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, name: str = "default", tab: str = DEFAULT_TAB
    ) -> "EditBuffer":
        return cls(name=name, lines=[Line(text) for text in lines], tab=tab)

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", tab: str = DEFAULT_TAB
    ) -> "EditBuffer":
        lines = text.splitlines()
        if text.endswith(("\n", "\r")):
            lines.append("")
        return cls.from_lines(lines, name=name, tab=tab)

    @property
    def tab(self) -> str:
        return self._tab

    @tab.setter
    def tab(self, value: str) -> None:
        self._tab = validate_tab(value)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def lines(self) -> tuple[str, ...]:
        """Logical lines, without the trailing sentinel."""

        return tuple(line.text for line in self._lines)

    def raw_lines(self) -> tuple[str, ...]:
        return tuple(line.raw for line in self._lines)

    def line(self, row: int) -> Line:
        return self._lines[row]

    def cursor(self) -> Cursor:
        """0-based character-wise (row, column) cursor position."""

        return self.state.cursor

    def check_invariants(self) -> None:
        ensure_invariants(self._lines, self.state.cursor)

    # Editing

    def insert_char(self, c: str) -> None:
        if len(c) != 1:
            raise ValueError(f"insert_char expects a single character, got {c!r}")
        self._insert(c, label="insert_char")

    def insert_text(self, s: str) -> None:
        if contains_line_break(s):
            raise ValueError(
                "string given to insert_text must not contain a line break; "
                "use insert_newline"
            )
        if s:
            self._insert(s, label="insert_text")

    insert_str = insert_text

    def insert_tab(self) -> None:
        width = len(self._tab)
        if not width:
            return
        self.insert_text(" " * (width - self.state.column % width))

    def insert_newline(self) -> None:
        row, col = self.state.cursor
        head, tail = self._lines[row].split(col)
        self._lines[row : row + 1] = [head, tail]
        self.state.set_cursor(row + 1, 0)
        self._touch("insert_newline")

    def delete_char(self) -> None:
        row, col = self.state.cursor
        if col > 0:
            self._lines[row] = self._lines[row].remove(col - 1)
            self.state.set_column(col - 1)
            self._touch("delete_char")
            return
        if row == 0:
            return

        previous = self._lines[row - 1]
        join_point = previous.last_index
        self._lines[row - 1 : row + 1] = [previous.join(self._lines[row])]
        self.state.set_cursor(row - 1, join_point)
        self._touch("merge_lines")

    # Navigation

    def cursor_forward(self) -> None:
        row, col = self.state.cursor
        if col < self._lines[row].last_index:
            self.state.set_column(col + 1)
        elif row + 1 < len(self._lines):
            self.state.set_cursor(row + 1, 0)

    def cursor_back(self) -> None:
        row, col = self.state.cursor
        if col > 0:
            self.state.set_column(col - 1)
        elif row > 0:
            self.state.set_cursor(row - 1, self._lines[row - 1].last_index)

    def cursor_down(self) -> None:
        row, col = self.state.cursor
        if row + 1 < len(self._lines):
            self._move_row(row + 1, col)

    def cursor_up(self) -> None:
        row, col = self.state.cursor
        if row > 0:
            self._move_row(row - 1, col)

    def cursor_start(self) -> None:
        self.state.set_column(0)

    def cursor_end(self) -> None:
        self.state.set_column(self._lines[self.state.row].last_index)

    def _move_row(self, target: int, col: int) -> None:
        self.state.set_cursor(target, min(col, self._lines[target].last_index))

    def _insert(self, text: str, *, label: str) -> None:
        row, col = self.state.cursor
        self._lines[row] = self._lines[row].insert(col, text)
        self.state.set_column(col + len(text))
        self._touch(label)

    def _touch(self, label: str) -> None:
        self.version += 1
        telemetry.record_event(
            f"buffer::{label}",
            data={
                "buffer": self.name,
                "version": self.version,
                "cursor": self.state.cursor,
            },
            logger_name=LOGGER_NAME,
        )


__all__ = ["EditBuffer"]
