from __future__ import annotations

import pytest

from rediff_engine.cursor import (
    SegmentKind,
    classify,
    find_word_boundaries,
    is_word_char,
)
from rediff_engine.text import TextBuffer


def make_buffer(text: str) -> TextBuffer:
    return TextBuffer.from_text(text)


def test_is_word_char() -> None:
    for ch in ("a", "Z", "0", "_", "é", "ж"):
        assert is_word_char(ch), ch
    for ch in (" ", ".", "-", "\n", "🗿"):
        assert not is_word_char(ch), ch


@pytest.mark.parametrize(
    ("ch", "kind"),
    [
        ("\n", SegmentKind.NEWLINE),
        (" ", SegmentKind.WHITESPACE),
        ("\t", SegmentKind.WHITESPACE),
        ("\u00a0", SegmentKind.WHITESPACE),
        ("x", SegmentKind.WORD),
        ("_", SegmentKind.WORD),
        ("7", SegmentKind.WORD),
        (".", SegmentKind.NON_WORD),
        ("🌍", SegmentKind.NON_WORD),
    ],
)
def test_classify(ch: str, kind: SegmentKind) -> None:
    assert classify(ch) is kind


def test_find_word_boundaries_simple() -> None:
    buffer = make_buffer("hello world test")

    assert find_word_boundaries(buffer, 2) == (0, 5)
    assert find_word_boundaries(buffer, 6) == (6, 11)
    assert find_word_boundaries(buffer, 8) == (6, 11)
    assert find_word_boundaries(buffer, 12) == (12, 16)


def test_find_word_boundaries_with_punctuation() -> None:
    buffer = make_buffer("hello.world")

    assert find_word_boundaries(buffer, 0) == (0, 5)
    assert find_word_boundaries(buffer, 5) == (5, 6)
    assert find_word_boundaries(buffer, 6) == (6, 11)


def test_find_word_boundaries_groups_spaces() -> None:
    buffer = make_buffer("hello   world")

    assert find_word_boundaries(buffer, 0) == (0, 5)
    assert find_word_boundaries(buffer, 5) == (5, 8)
    assert find_word_boundaries(buffer, 6) == (5, 8)
    assert find_word_boundaries(buffer, 8) == (8, 13)


def test_find_word_boundaries_with_emoji() -> None:
    buffer = make_buffer("hello 🌍 world")

    assert find_word_boundaries(buffer, 0) == (0, 5)
    assert find_word_boundaries(buffer, 5) == (5, 6)
    assert find_word_boundaries(buffer, 6) == (6, 7)
    assert find_word_boundaries(buffer, 7) == (7, 8)
    assert find_word_boundaries(buffer, 8) == (8, 13)


def test_adjacent_symbols_merge_but_whitespace_splits() -> None:
    merged = make_buffer("a!?🗿b")
    split = make_buffer("🗿 🗿 🗿")

    assert find_word_boundaries(merged, 2) == (1, 4)
    assert find_word_boundaries(split, 0) == (0, 1)
    assert find_word_boundaries(split, 1) == (1, 2)
    assert find_word_boundaries(split, 2) == (2, 3)


def test_newline_is_its_own_segment() -> None:
    buffer = make_buffer("ab\n\ncd")

    assert find_word_boundaries(buffer, 2) == (2, 3)
    assert find_word_boundaries(buffer, 3) == (3, 4)
    assert find_word_boundaries(buffer, 1) == (0, 2)


def test_whitespace_run_stops_at_newline() -> None:
    buffer = make_buffer("a  \n  b")

    assert find_word_boundaries(buffer, 1) == (1, 3)
    assert find_word_boundaries(buffer, 4) == (4, 6)


def test_find_word_boundaries_at_edges() -> None:
    buffer = make_buffer("test")

    assert find_word_boundaries(buffer, 0) == (0, 4)
    assert find_word_boundaries(buffer, 4) == (0, 4)
    assert find_word_boundaries(buffer, 99) == (0, 4)
    assert find_word_boundaries(buffer, -3) == (0, 4)


def test_combining_vowel_signs_stay_inside_words() -> None:
    hindi = "\u0939\u093f\u0902\u0926\u0940"
    buffer = make_buffer(f"{hindi} text")

    assert find_word_boundaries(buffer, 0) == (0, 5)
    assert find_word_boundaries(buffer, 3) == (0, 5)
    assert find_word_boundaries(buffer, 5) == (5, 6)
    assert is_word_char("\u093f")


@pytest.mark.parametrize("ch", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_information_separators_are_not_whitespace(ch: str) -> None:
    assert classify(ch) is SegmentKind.NON_WORD


def test_find_word_boundaries_empty_buffer() -> None:
    assert find_word_boundaries(TextBuffer(), 0) == (0, 0)
    assert find_word_boundaries(TextBuffer(), 5) == (0, 0)


def test_segments_are_idempotent() -> None:
    buffer = make_buffer("foo_bar, baz!!  🗿🗿\nnext\tline  \n\n🌍x")

    for position in range(buffer.len()):
        start, end = find_word_boundaries(buffer, position)
        assert start <= position < end
        for inner in range(start, end):
            assert find_word_boundaries(buffer, inner) == (start, end)
