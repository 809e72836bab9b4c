"""Text area configuration: indentation, visual style, and frame."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Optional

ENV_PREFIX = "TEXTAREA_ENGINE_"
DEFAULT_TAB = "    "


class ConfigurationError(ValueError):
    """Raised immediately when a configuration value is rejected."""

    def __init__(self, message: str, *, option: str, value: object) -> None:
        super().__init__(message)
        self.option = option
        self.value = value


def validate_tab(tab: str) -> str:
    """Return ``tab`` unchanged, or raise if it holds anything but spaces."""

    if any(ch != " " for ch in tab):
        raise ConfigurationError(
            f"tab string must consist of spaces but got {tab!r}",
            option="tab",
            value=tab,
        )
    return tab


@dataclass(frozen=True, slots=True)
class Frame:
    """Decorative frame drawn around the text area by the host.

    ``border`` is a Textual border type (``"round"``, ``"heavy"``, ...). The
    engine never interprets these values; they are handed to the renderer.
    """

    border: str = "round"
    title: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TextAreaConfig:
    tab: str = DEFAULT_TAB
    style: Any = None
    frame: Optional[Frame] = None
    verify_invariants: bool = False

    def __post_init__(self) -> None:
        validate_tab(self.tab)

    def with_tab(self, tab: str) -> "TextAreaConfig":
        return replace(self, tab=tab)

    @classmethod
    def from_env(cls) -> "TextAreaConfig":
        """Build a config from ``TEXTAREA_ENGINE_*`` environment variables."""

        tab = DEFAULT_TAB
        raw_width = os.getenv(f"{ENV_PREFIX}TAB_WIDTH")
        if raw_width is not None:
            try:
                width = int(raw_width)
            except ValueError as exc:
                raise ConfigurationError(
                    f"TAB_WIDTH must be an integer but got {raw_width!r}",
                    option="tab",
                    value=raw_width,
                ) from exc
            if width < 0:
                raise ConfigurationError(
                    "TAB_WIDTH cannot be negative", option="tab", value=width
                )
            tab = " " * width

        raw_verify = os.getenv(f"{ENV_PREFIX}VERIFY", "")
        verify = raw_verify.lower() in {"1", "true", "yes", "on"}
        return cls(tab=tab, verify_invariants=verify)


__all__ = [
    "ConfigurationError",
    "DEFAULT_TAB",
    "Frame",
    "TextAreaConfig",
    "validate_tab",
]
