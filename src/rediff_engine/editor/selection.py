"""Selection value type over two buffer offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

SelectionRange = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Selection:
    """Ordered ``[start, end)`` range that remembers which way it was made.

    ``reversed`` is true for right-to-left selections, where the moving end
    (``head``) is ``start`` and the anchor (``tail``) is ``end``.
    """

    start: int
    end: int
    reversed: bool = False

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("Selection start must not exceed end")

    @classmethod
    def between(cls, anchor: int, head: int) -> "Selection":
        return cls(
            start=min(anchor, head),
            end=max(anchor, head),
            reversed=anchor > head,
        )

    def range(self) -> SelectionRange:
        return (self.start, self.end)

    def is_empty(self) -> bool:
        return self.start == self.end

    def head(self) -> int:
        return self.start if self.reversed else self.end

    def tail(self) -> int:
        return self.end if self.reversed else self.start

    def __len__(self) -> int:
        return self.end - self.start


__all__ = ["Selection", "SelectionRange"]
