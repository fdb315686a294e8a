"""Goal column remembered across vertical cursor movement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Column:
    """The column vertical movement tries to return to."""

    column: int


CursorGoal = Optional[Column]

__all__ = ["Column", "CursorGoal"]
