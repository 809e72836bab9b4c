from __future__ import annotations

import pytest

from textarea_engine import (
    BufferInvariantError,
    ConfigurationError,
    Frame,
    Key,
    KeyInput,
    TextArea,
    TextAreaConfig,
)


def type_text(area: TextArea, text: str) -> None:
    for ch in text:
        area.input(KeyInput.char_input(ch))


def test_typing_into_fresh_text_area() -> None:
    area = TextArea()

    type_text(area, "ab")

    assert area.lines() == ("ab",)
    assert area.cursor() == (0, 2)


def test_input_verifies_invariants_when_enabled() -> None:
    area = TextArea(TextAreaConfig(verify_invariants=True))
    type_text(area, "ab")
    area.buffer.state.set_cursor(0, 9)

    with pytest.raises(BufferInvariantError):
        area.input(KeyInput())


def test_from_text_uses_config_tab() -> None:
    area = TextArea.from_text("x", TextAreaConfig(tab="  "))
    area.input(KeyInput.of(Key.TAB))

    assert area.lines() == ("  x",)


def test_set_tab_validates_immediately() -> None:
    area = TextArea()

    with pytest.raises(ConfigurationError) as info:
        area.set_tab(" -")
    assert info.value.option == "tab"
    assert area.buffer.tab == "    "

    area.set_tab("")
    area.input(KeyInput.of(Key.TAB))
    assert area.lines() == ("",)
    assert area.config.tab == ""


def test_widget_carries_style_and_frame() -> None:
    area = TextArea()
    frame = Frame(border="heavy", title="draft")

    assert area.set_style("bold").set_frame(frame) is area
    projected = area.widget()

    assert projected.style == "bold"
    assert projected.frame == frame
    assert area.remove_frame().widget().frame is None


def test_config_rejects_non_space_tab() -> None:
    with pytest.raises(ConfigurationError):
        TextAreaConfig(tab="\t")


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXTAREA_ENGINE_TAB_WIDTH", "2")
    monkeypatch.setenv("TEXTAREA_ENGINE_VERIFY", "yes")

    config = TextAreaConfig.from_env()

    assert config.tab == "  "
    assert config.verify_invariants is True


@pytest.mark.parametrize("value", ["two", "-1"])
def test_config_from_env_rejects_bad_width(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    monkeypatch.setenv("TEXTAREA_ENGINE_TAB_WIDTH", value)

    with pytest.raises(ConfigurationError):
        TextAreaConfig.from_env()


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEXTAREA_ENGINE_TAB_WIDTH", raising=False)
    monkeypatch.delenv("TEXTAREA_ENGINE_VERIFY", raising=False)

    config = TextAreaConfig.from_env()

    assert config == TextAreaConfig()
    assert config.tab == "    "
    assert config.style is None
    assert config.frame is None
