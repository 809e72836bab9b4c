"""Textual host integration for the text area engine."""

from .controller import TextualTextAreaAdapter, TextualUIHooks
from .keys import KeyMapper
from .widget import TextAreaView, build_text

__all__ = [
    "KeyMapper",
    "TextAreaView",
    "TextualTextAreaAdapter",
    "TextualUIHooks",
    "build_text",
]
