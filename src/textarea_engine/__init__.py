"""Embeddable multi-line text editing engine."""

from .buffer import BufferInvariantError, EditBuffer
from .config import ConfigurationError, Frame, TextAreaConfig
from .keymaps import Key, KeyInput
from .textarea import TextArea

__all__ = [
    "BufferInvariantError",
    "ConfigurationError",
    "EditBuffer",
    "Frame",
    "Key",
    "KeyInput",
    "TextArea",
    "TextAreaConfig",
]

__version__ = "0.1.0"
