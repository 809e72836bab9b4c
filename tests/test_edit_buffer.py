from __future__ import annotations

import random

import pytest

from textarea_engine.buffer import BufferInvariantError, EditBuffer
from textarea_engine.config import ConfigurationError


def type_text(buffer: EditBuffer, text: str) -> None:
    for ch in text:
        buffer.insert_char(ch)


def assert_consistent(buffer: EditBuffer) -> None:
    buffer.check_invariants()
    for logical, raw in zip(buffer.lines(), buffer.raw_lines()):
        assert raw == logical + " "


def test_fresh_buffer_has_one_empty_line() -> None:
    buffer = EditBuffer()

    assert buffer.lines() == ("",)
    assert buffer.cursor() == (0, 0)
    assert buffer.line_count == 1
    assert_consistent(buffer)


def test_typing_appends_text_and_advances_cursor() -> None:
    buffer = EditBuffer()

    type_text(buffer, "ab")

    assert buffer.lines() == ("ab",)
    assert buffer.cursor() == (0, 2)


def test_newline_splits_at_cursor() -> None:
    buffer = EditBuffer.from_lines(["ab"])
    buffer.cursor_forward()

    buffer.insert_newline()

    assert buffer.lines() == ("a", "b")
    assert buffer.cursor() == (1, 0)
    assert_consistent(buffer)


def test_backspace_at_line_start_merges_into_previous() -> None:
    buffer = EditBuffer.from_lines(["a", "b"])
    buffer.cursor_down()

    buffer.delete_char()

    assert buffer.lines() == ("ab",)
    assert buffer.cursor() == (0, 1)
    assert_consistent(buffer)


def test_merge_places_cursor_at_join_point() -> None:
    buffer = EditBuffer.from_lines(["ab", "cd"])
    buffer.cursor_down()

    buffer.delete_char()

    assert buffer.lines() == ("abcd",)
    assert buffer.cursor() == (0, 2)


def test_newline_then_backspace_round_trips() -> None:
    buffer = EditBuffer()
    type_text(buffer, "ab")

    buffer.insert_newline()
    assert buffer.lines() == ("ab", "")
    buffer.delete_char()

    assert buffer.lines() == ("ab",)
    assert buffer.cursor() == (0, 2)


def test_backspace_on_empty_buffer_is_noop() -> None:
    buffer = EditBuffer()

    buffer.delete_char()

    assert buffer.lines() == ("",)
    assert buffer.cursor() == (0, 0)
    assert buffer.version == 0
    assert_consistent(buffer)


def test_backspace_removes_previous_character() -> None:
    buffer = EditBuffer.from_lines(["abc"])
    buffer.cursor_forward()
    buffer.cursor_forward()

    buffer.delete_char()

    assert buffer.lines() == ("ac",)
    assert buffer.cursor() == (0, 1)


def test_insert_char_goes_before_addressed_character() -> None:
    buffer = EditBuffer.from_lines(["ac"])
    buffer.cursor_forward()

    buffer.insert_char("b")

    assert buffer.lines() == ("abc",)
    assert buffer.cursor() == (0, 2)


def test_wide_characters_count_as_one_column() -> None:
    buffer = EditBuffer()

    buffer.insert_char("漢")
    assert buffer.cursor() == (0, 1)
    buffer.insert_char("😀")
    assert buffer.cursor() == (0, 2)

    buffer.cursor_back()
    assert buffer.cursor() == (0, 1)
    buffer.cursor_back()
    assert buffer.cursor() == (0, 0)
    buffer.cursor_forward()
    buffer.delete_char()

    assert buffer.lines() == ("😀",)
    assert buffer.cursor() == (0, 0)


def test_insert_text_advances_by_code_points() -> None:
    buffer = EditBuffer()

    buffer.insert_text("héllo😀")

    assert buffer.cursor() == (0, 6)
    assert buffer.lines() == ("héllo😀",)


def test_insert_str_is_insert_text() -> None:
    buffer = EditBuffer()

    buffer.insert_str("xy")

    assert buffer.lines() == ("xy",)


def test_insert_text_rejects_line_break() -> None:
    buffer = EditBuffer()

    with pytest.raises(ValueError):
        buffer.insert_text("a\nb")
    assert buffer.lines() == ("",)


def test_insert_char_requires_single_character() -> None:
    buffer = EditBuffer()

    with pytest.raises(ValueError):
        buffer.insert_char("ab")


def test_insert_tab_pads_to_next_stop() -> None:
    buffer = EditBuffer()
    buffer.insert_tab()
    assert buffer.cursor() == (0, 4)

    type_text(buffer, "ab")
    buffer.insert_tab()

    assert buffer.lines() == ("    ab  ",)
    assert buffer.cursor() == (0, 8)


def test_insert_tab_with_custom_width() -> None:
    buffer = EditBuffer(tab="  ")
    type_text(buffer, "a")

    buffer.insert_tab()

    assert buffer.lines() == ("a ",)


def test_insert_tab_is_noop_when_tab_empty() -> None:
    buffer = EditBuffer(tab="")

    buffer.insert_tab()

    assert buffer.lines() == ("",)
    assert buffer.cursor() == (0, 0)


def test_tab_must_be_spaces() -> None:
    with pytest.raises(ConfigurationError):
        EditBuffer(tab="\t")

    buffer = EditBuffer()
    with pytest.raises(ConfigurationError):
        buffer.tab = "  x"
    assert buffer.tab == "    "


def test_cursor_forward_wraps_to_next_line() -> None:
    buffer = EditBuffer.from_lines(["a", "b"])

    buffer.cursor_forward()
    assert buffer.cursor() == (0, 1)
    buffer.cursor_forward()
    assert buffer.cursor() == (1, 0)
    buffer.cursor_forward()
    buffer.cursor_forward()

    assert buffer.cursor() == (1, 1)


def test_cursor_back_wraps_to_previous_line_end() -> None:
    buffer = EditBuffer.from_lines(["abc", "d"])
    buffer.cursor_down()

    buffer.cursor_back()
    assert buffer.cursor() == (0, 3)

    buffer.cursor_start()
    buffer.cursor_back()
    assert buffer.cursor() == (0, 0)


def test_vertical_moves_clamp_column() -> None:
    buffer = EditBuffer.from_lines(["abcd", "x", "wxyz"])
    buffer.cursor_end()
    assert buffer.cursor() == (0, 4)

    buffer.cursor_down()
    assert buffer.cursor() == (1, 1)
    buffer.cursor_down()
    assert buffer.cursor() == (2, 1)
    buffer.cursor_down()
    assert buffer.cursor() == (2, 1)

    buffer.cursor_up()
    buffer.cursor_up()
    buffer.cursor_up()
    assert buffer.cursor() == (0, 1)


def test_start_and_end_of_line() -> None:
    buffer = EditBuffer.from_lines(["abc"])

    buffer.cursor_end()
    assert buffer.cursor() == (0, 3)
    buffer.cursor_start()
    assert buffer.cursor() == (0, 0)


def test_end_of_empty_line_lands_on_sentinel() -> None:
    buffer = EditBuffer.from_lines(["abc", ""])
    buffer.cursor_down()

    buffer.cursor_end()

    assert buffer.cursor() == (1, 0)


def test_from_text_keeps_trailing_empty_line() -> None:
    buffer = EditBuffer.from_text("a\nb\n")

    assert buffer.lines() == ("a", "b", "")


def test_from_text_of_empty_string() -> None:
    assert EditBuffer.from_text("").lines() == ("",)


def test_version_tracks_mutations_only() -> None:
    buffer = EditBuffer()

    buffer.insert_char("a")
    buffer.cursor_back()
    buffer.cursor_forward()

    assert buffer.version == 1


def test_check_invariants_detects_bad_cursor() -> None:
    buffer = EditBuffer.from_lines(["ab"])
    buffer.state.set_cursor(0, 3)

    with pytest.raises(BufferInvariantError) as info:
        buffer.check_invariants()
    assert info.value.cursor == (0, 3)

    buffer.state.set_cursor(1, 0)
    with pytest.raises(BufferInvariantError):
        buffer.check_invariants()


def test_check_invariants_detects_foreign_line() -> None:
    buffer = EditBuffer.from_lines(["ab"])
    buffer._lines[0] = "ab "

    with pytest.raises(BufferInvariantError, match="may lack the sentinel"):
        buffer.check_invariants()


def test_check_invariants_detects_empty_buffer() -> None:
    buffer = EditBuffer()
    buffer._lines.clear()

    with pytest.raises(BufferInvariantError):
        buffer.check_invariants()


def test_invariants_hold_for_random_operations() -> None:
    rng = random.Random(20240517)
    buffer = EditBuffer(tab="   ")
    operations = [
        buffer.insert_tab,
        buffer.insert_newline,
        buffer.delete_char,
        buffer.cursor_forward,
        buffer.cursor_back,
        buffer.cursor_up,
        buffer.cursor_down,
        buffer.cursor_start,
        buffer.cursor_end,
    ]
    alphabet = "ab é漢😀"

    for _ in range(2000):
        if rng.random() < 0.4:
            buffer.insert_char(rng.choice(alphabet))
        else:
            rng.choice(operations)()
        assert_consistent(buffer)
