"""Span decomposition of a buffer with the cursor cell highlighted."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from textarea_engine.buffer import EditBuffer
from textarea_engine.config import Frame


@dataclass(frozen=True, slots=True)
class StyledSpan:
    text: str
    highlighted: bool = False


ProjectedLine = tuple[StyledSpan, ...]


@dataclass(frozen=True, slots=True)
class ProjectedArea:
    """Everything a renderer needs to draw the text area.

    ``style`` and ``frame`` are passed through from configuration untouched.
    """

    lines: tuple[ProjectedLine, ...]
    cursor: tuple[int, int]
    style: Any = None
    frame: Optional[Frame] = None

    @property
    def plain(self) -> str:
        return "\n".join("".join(span.text for span in line) for line in self.lines)


class CursorProjector:
    """Read-only view over an EditBuffer for rendering."""

    def __init__(self, buffer: EditBuffer) -> None:
        self.buffer = buffer

    def project(self) -> tuple[ProjectedLine, ...]:
        cursor_row, cursor_col = self.buffer.cursor()
        projected: list[ProjectedLine] = []
        for row, raw in enumerate(self.buffer.raw_lines()):
            if row == cursor_row:
                projected.append(
                    (
                        StyledSpan(raw[:cursor_col]),
                        StyledSpan(raw[cursor_col], highlighted=True),
                        StyledSpan(raw[cursor_col + 1 :]),
                    )
                )
            else:
                projected.append((StyledSpan(raw),))
        return tuple(projected)

    def lines(self) -> tuple[str, ...]:
        return self.buffer.lines()

    def area(self, *, style: Any = None, frame: Optional[Frame] = None) -> ProjectedArea:
        return ProjectedArea(
            lines=self.project(),
            cursor=self.buffer.cursor(),
            style=style,
            frame=frame,
        )


__all__ = ["CursorProjector", "ProjectedArea", "ProjectedLine", "StyledSpan"]
