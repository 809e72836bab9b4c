"""Line storage, cursor state, and the edit buffer built on them."""

from .buffer import EditBuffer
from .line import SENTINEL, Line
from .state import BufferState, Cursor
from .validation import BufferInvariantError, ensure_invariants

__all__ = [
    "EditBuffer",
    "Line",
    "SENTINEL",
    "BufferState",
    "Cursor",
    "BufferInvariantError",
    "ensure_invariants",
]
