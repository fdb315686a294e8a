"""Character-indexed text storage with line/column addressing."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

NEWLINE = "\n"


def _line_starts(text: str) -> List[int]:
    starts = [0]
    index = text.find(NEWLINE)
    while index != -1:
        starts.append(index + 1)
        index = text.find(NEWLINE, index + 1)
    return starts


@dataclass(slots=True)
class TextBuffer:
    """Mutable text addressed by character offsets in ``[0, len(buffer)]``.

    Offsets count Unicode scalar values, so an emoji or a combining mark is a
    single position. Lines are delimited by ``"\\n"``; an empty buffer still
    has one (empty) line. ``version`` increases on every mutation that changes
    the text and lets renderers invalidate per-line caches.
    """

    _text: str = ""
    version: int = 0
    _starts: List[int] = field(default_factory=lambda: [0], repr=False)

    def __post_init__(self) -> None:
        self._starts = _line_starts(self._text)

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(_text=text)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def len(self) -> int:
        return len(self._text)

    def is_empty(self) -> bool:
        return not self._text

    def as_str(self) -> str:
        return self._text

    def insert(self, index: int, text: str) -> None:
        """Insert ``text`` at ``index`` (clamped to the buffer bounds)."""

        if not text:
            return
        index = self._clamp(index)
        self._text = self._text[:index] + text + self._text[index:]
        self._touch()

    def delete(self, index: int, length: int) -> None:
        """Remove up to ``length`` characters starting at ``index``.

        The range is clamped to what remains of the buffer, so over-long or
        out-of-range deletions shrink or become no-ops instead of failing.
        """

        start = self._clamp(index)
        end = self._clamp(start + max(0, length))
        if start == end:
            return
        self._text = self._text[:start] + self._text[end:]
        self._touch()

    def slice(self, start: int, end: int) -> str:
        """Return the characters in ``[start, end)`` after clamping the bounds."""

        start, end = self._clamp(start), self._clamp(end)
        if start > end:
            start, end = end, start
        return self._text[start:end]

    def line_count(self) -> int:
        return len(self._starts)

    def line(self, line_idx: int) -> Optional[str]:
        """Return line ``line_idx`` including its trailing newline, if any."""

        if line_idx < 0 or line_idx >= len(self._starts):
            return None
        return self._text[self._starts[line_idx] : self._line_end(line_idx)]

    def line_len(self, line_idx: int) -> int:
        """Length of a line without its trailing newline (0 when out of range)."""

        content = self.line(line_idx)
        if content is None:
            return 0
        return len(content.rstrip(NEWLINE))

    def char_to_line_col(self, char_idx: int) -> Tuple[int, int]:
        char_idx = self._clamp(char_idx)
        line = bisect_right(self._starts, char_idx) - 1
        return (line, char_idx - self._starts[line])

    def line_col_to_char(self, line: int, col: int) -> int:
        if line < 0 or line >= len(self._starts):
            return len(self._text)
        line_start = self._starts[line]
        return min(line_start + max(0, col), self._line_end(line))

    def _line_end(self, line_idx: int) -> int:
        if line_idx + 1 < len(self._starts):
            return self._starts[line_idx + 1]
        return len(self._text)

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self._text)))

    def _touch(self) -> None:
        self._starts = _line_starts(self._text)
        self.version += 1
