"""Adapter boundary types for rendering hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol, Tuple

from .selection import SelectionRange


@dataclass(frozen=True, slots=True)
class EditorMirror:
    """Host-friendly snapshot describing what a renderer should paint."""

    text: str
    cursor: int
    cursor_line_col: Tuple[int, int]
    selection: Optional[SelectionRange]
    line_count: int
    version: int
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def lines(self) -> list[str]:
        """Split ``text`` the way the buffer counts lines."""

        return self.text.split("\n")


class EditorSync(Protocol):
    """Protocol describing how rendering adapters read editor state."""

    def pull_editor(self) -> EditorMirror:
        """Return the latest editor snapshot that the host should render."""
        ...


__all__ = ["EditorMirror", "EditorSync"]
