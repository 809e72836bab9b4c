"""Structural self-checks for edit buffers."""

from __future__ import annotations

from typing import Sequence

from .line import Line
from .state import Cursor


class BufferInvariantError(RuntimeError):
    """Raised when a buffer is found in a state its operations cannot produce.

    This signals a defect in the buffer logic, never bad user input.
    """

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_invariants(lines: Sequence[Line], cursor: Cursor) -> None:
    if not lines:
        raise BufferInvariantError("buffer has no lines", cursor=cursor)

    for index, line in enumerate(lines):
        # Line appends the sentinel itself, so only foreign values can lack it.
        if not isinstance(line, Line):
            raise BufferInvariantError(
                f"line {index + 1} is not a Line and may lack the sentinel: {line!r}",
                cursor=cursor,
            )

    row, col = cursor
    if row < 0 or row >= len(lines):
        raise BufferInvariantError(
            f"cursor {cursor} exceeds max lines {len(lines)}", cursor=cursor
        )
    line = lines[row]
    if col < 0 or col >= line.char_count:
        raise BufferInvariantError(
            f"cursor {cursor} exceeds max col {line.char_count} at line {line.raw!r}",
            cursor=cursor,
        )
