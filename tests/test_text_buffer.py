from __future__ import annotations

import pytest

from rediff_engine.text import TextBuffer


def make_buffer(text: str = "") -> TextBuffer:
    buffer = TextBuffer()
    buffer.insert(0, text)
    return buffer


def test_new_buffer_has_one_empty_line() -> None:
    buffer = TextBuffer()

    assert buffer.len() == 0
    assert buffer.as_str() == ""
    assert buffer.is_empty()
    assert buffer.line_count() == 1
    assert buffer.line(0) == ""


def test_insert_at_offsets() -> None:
    buffer = TextBuffer()

    buffer.insert(0, "Hello")
    buffer.insert(5, " World")
    buffer.insert(5, ",")

    assert buffer.as_str() == "Hello, World"
    assert len(buffer) == 12


def test_insert_past_end_appends() -> None:
    buffer = make_buffer("abc")

    buffer.insert(99, "d")
    buffer.insert(-4, "_")

    assert buffer.as_str() == "_abcd"


def test_delete_range() -> None:
    buffer = make_buffer("Hello World")

    buffer.delete(5, 6)
    assert buffer.as_str() == "Hello"

    buffer.delete(0, 2)
    assert buffer.as_str() == "llo"


@pytest.mark.parametrize(
    ("index", "length", "expected"),
    [
        (3, 100, "Hel"),
        (5, 3, "Hello"),
        (42, 1, "Hello"),
        (1, 0, "Hello"),
        (1, -2, "Hello"),
    ],
)
def test_delete_clamps_to_available_text(
    index: int, length: int, expected: str
) -> None:
    buffer = make_buffer("Hello")

    buffer.delete(index, length)

    assert buffer.as_str() == expected


def test_line_count_tracks_newlines() -> None:
    buffer = TextBuffer()
    assert buffer.line_count() == 1

    buffer.insert(0, "Line 1\n")
    assert buffer.line_count() == 2

    buffer.insert(7, "Line 2\n")
    assert buffer.line_count() == 3

    buffer.insert(14, "Line 3")
    assert buffer.line_count() == 3


def test_line_includes_trailing_newline() -> None:
    buffer = make_buffer("First\nSecond\nThird")

    assert buffer.line(0) == "First\n"
    assert buffer.line(1) == "Second\n"
    assert buffer.line(2) == "Third"
    assert buffer.line(3) is None
    assert buffer.line(-1) is None


def test_trailing_newline_opens_an_empty_last_line() -> None:
    buffer = make_buffer("a\n")

    assert buffer.line_count() == 2
    assert buffer.line(1) == ""
    assert buffer.char_to_line_col(2) == (1, 0)


def test_line_len_excludes_newline() -> None:
    buffer = make_buffer("Hello\n\nab")

    assert buffer.line_len(0) == 5
    assert buffer.line_len(1) == 0
    assert buffer.line_len(2) == 2
    assert buffer.line_len(7) == 0


def test_char_to_line_col() -> None:
    buffer = make_buffer("Hello\nWorld\nTest")

    assert buffer.char_to_line_col(0) == (0, 0)
    assert buffer.char_to_line_col(4) == (0, 4)
    assert buffer.char_to_line_col(5) == (0, 5)
    assert buffer.char_to_line_col(6) == (1, 0)
    assert buffer.char_to_line_col(10) == (1, 4)
    assert buffer.char_to_line_col(12) == (2, 0)
    assert buffer.char_to_line_col(15) == (2, 3)
    assert buffer.char_to_line_col(500) == (2, 4)


def test_line_col_to_char() -> None:
    buffer = make_buffer("Hello\nWorld\nTest")

    assert buffer.line_col_to_char(0, 0) == 0
    assert buffer.line_col_to_char(0, 5) == 5
    assert buffer.line_col_to_char(1, 0) == 6
    assert buffer.line_col_to_char(2, 0) == 12
    assert buffer.line_col_to_char(2, 4) == 16


def test_line_col_to_char_out_of_bounds() -> None:
    buffer = make_buffer("Hello\nWorld")

    assert buffer.line_col_to_char(10, 0) == buffer.len()
    # clamped to the end of the line, newline included
    assert buffer.line_col_to_char(0, 100) == 6


@pytest.mark.parametrize(
    "text",
    ["", "Line 1\nLine 2\nLine 3\n", "\n\n", "Hello 🌍\nwörld\té"],
)
def test_char_to_line_col_round_trip(text: str) -> None:
    buffer = make_buffer(text)

    for index in range(buffer.len() + 1):
        line, col = buffer.char_to_line_col(index)
        assert buffer.line_col_to_char(line, col) == index, index


def test_unicode_scalars_count_as_one_character() -> None:
    buffer = make_buffer("Hello 🌍 World")
    assert buffer.len() == 13

    buffer.insert(6, "😀")

    assert buffer.as_str() == "Hello 😀🌍 World"
    assert buffer.len() == 14
    assert TextBuffer.from_text("e\u0301").len() == 2


def test_slice_orders_and_clamps_bounds() -> None:
    buffer = make_buffer("Hello 🌍 World")

    assert buffer.slice(6, 7) == "🌍"
    assert buffer.slice(11, 6) == "🌍 Wor"
    assert buffer.slice(8, 99) == "World"


def test_version_bumps_only_on_changes() -> None:
    buffer = TextBuffer.from_text("abc")
    assert buffer.version == 0

    buffer.insert(1, "x")
    buffer.insert(1, "")
    buffer.delete(10, 3)
    buffer.delete(0, 1)

    assert buffer.version == 2
    assert buffer.as_str() == "xbc"
