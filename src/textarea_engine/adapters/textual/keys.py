"""Normalize Textual key events into ``KeyInput``."""

from __future__ import annotations

from typing import Mapping

from textual import events

from textarea_engine.keymaps import Key, KeyInput

SPECIAL_KEYS: Mapping[str, Key] = {
    "backspace": Key.BACKSPACE,
    "enter": Key.ENTER,
    "tab": Key.TAB,
    "left": Key.LEFT,
    "right": Key.RIGHT,
    "up": Key.UP,
    "down": Key.DOWN,
    "delete": Key.DELETE,
    "home": Key.HOME,
    "end": Key.END,
}

# Textual spells a few printable keys out by name.
NAMED_CHARACTERS: Mapping[str, str] = {
    "space": " ",
}


class KeyMapper:
    """Total mapping from host events to ``KeyInput``.

    Anything that is not a key event, or a key this engine has no code for,
    becomes the null input.
    """

    def map(self, event: object) -> KeyInput:
        if not isinstance(event, events.Key):
            return KeyInput()

        *modifiers, name = event.key.split("+")
        ctrl = "ctrl" in modifiers
        if name == "tab" and "shift" in modifiers:
            return KeyInput()

        special = SPECIAL_KEYS.get(name)
        if special is not None:
            return KeyInput.of(special, ctrl=ctrl)

        if ctrl:
            char = NAMED_CHARACTERS.get(name, name)
            if len(char) == 1:
                return KeyInput.char_input(char, ctrl=True)
            return KeyInput()

        character = event.character
        if character is not None and len(character) == 1 and character.isprintable():
            return KeyInput.char_input(character)
        return KeyInput()

__all__ = ["KeyMapper", "SPECIAL_KEYS"]
