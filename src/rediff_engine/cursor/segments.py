"""Word-boundary segmentation shared by word motion, word deletion and
double-click selection.

A buffer is split into segments of one ``SegmentKind``:

- ``NEWLINE``: a single ``"\\n"``, always its own segment;
- ``WHITESPACE``: a run of any other Unicode whitespace;
- ``WORD``: a run of alphanumerics and underscores;
- ``NON_WORD``: a run of everything else (punctuation, emoji, symbols).

Non-word characters merge only when directly adjacent, so ``"🗿 🗿 🗿"`` is
five segments: glyph, space, glyph, space, glyph.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

import regex

from rediff_engine.text import NEWLINE, TextBuffer

# Alphabetic includes combining vowel signs such as Devanagari matras.
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}_]")
_WHITESPACE = regex.compile(r"\p{White_Space}")


class SegmentKind(Enum):
    NEWLINE = "newline"
    WHITESPACE = "whitespace"
    WORD = "word"
    NON_WORD = "non_word"


def is_word_char(ch: str) -> bool:
    return _WORD_CHAR.fullmatch(ch) is not None


def classify(ch: str) -> SegmentKind:
    if ch == NEWLINE:
        return SegmentKind.NEWLINE
    if _WHITESPACE.fullmatch(ch) is not None:
        return SegmentKind.WHITESPACE
    if is_word_char(ch):
        return SegmentKind.WORD
    return SegmentKind.NON_WORD


def find_word_boundaries(buffer: TextBuffer, position: int) -> Tuple[int, int]:
    """Return ``(start, end)`` of the segment containing ``position``.

    ``position`` is clamped to the buffer; the end-of-buffer position resolves
    to the last character's segment. An empty buffer yields ``(0, 0)``.
    """

    text = buffer.as_str()
    size = len(text)
    if size == 0:
        return (0, 0)

    anchor = max(0, min(position, size))
    if anchor == size:
        anchor -= 1

    kind = classify(text[anchor])
    if kind is SegmentKind.NEWLINE:
        return (anchor, anchor + 1)

    start = anchor
    while start > 0 and classify(text[start - 1]) is kind:
        start -= 1
    end = anchor + 1
    while end < size and classify(text[end]) is kind:
        end += 1
    return (start, end)


__all__ = ["SegmentKind", "classify", "find_word_boundaries", "is_word_char"]
