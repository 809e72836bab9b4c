"""Sentinel-terminated line values."""

from __future__ import annotations

from dataclasses import dataclass

SENTINEL = " "
LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


def contains_line_break(text: str) -> bool:
    return any(ch in LINE_BREAKS for ch in text)


@dataclass(frozen=True, slots=True)
class Line:
    """One buffer line.

    ``text`` is the logical content. The sentinel is never stored in ``text``;
    it is appended by ``raw`` and counted by ``char_count`` so a cursor can sit
    one cell past the last real character and still address something.
    Offsets are code point indices, which is what Python ``str`` indexes by.
    """

    text: str = ""

    def __post_init__(self) -> None:
        if contains_line_break(self.text):
            raise ValueError(f"line text must not contain a line break: {self.text!r}")

    @property
    def raw(self) -> str:
        return self.text + SENTINEL

    @property
    def char_count(self) -> int:
        return len(self.text) + 1

    @property
    def last_index(self) -> int:
        """Offset of the sentinel cell."""

        return len(self.text)

    def char_at(self, offset: int) -> str:
        return self.raw[offset]

    def insert(self, offset: int, text: str) -> "Line":
        if not 0 <= offset <= self.last_index:
            raise IndexError(f"offset {offset} outside line of {self.char_count} cells")
        return Line(self.text[:offset] + text + self.text[offset:])

    def remove(self, offset: int) -> "Line":
        """Drop the real character at ``offset``; the sentinel cannot be removed."""

        if not 0 <= offset < self.last_index:
            raise IndexError(f"no removable character at offset {offset}")
        return Line(self.text[:offset] + self.text[offset + 1 :])

    def split(self, offset: int) -> tuple["Line", "Line"]:
        """Return ``(head, tail)``; the tail carries the cell at ``offset`` onward."""

        if not 0 <= offset <= self.last_index:
            raise IndexError(f"offset {offset} outside line of {self.char_count} cells")
        return Line(self.text[:offset]), Line(self.text[offset:])

    def join(self, other: "Line") -> "Line":
        """Drop this line's sentinel and append ``other`` with its own sentinel."""

        return Line(self.text + other.text)


__all__ = ["LINE_BREAKS", "Line", "SENTINEL", "contains_line_break"]
