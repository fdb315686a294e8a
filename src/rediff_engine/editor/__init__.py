"""Selection-based editing on top of the buffer and cursor."""

from .editor import EditTransaction, Editor
from .selection import Selection, SelectionRange
from .sync import EditorMirror, EditorSync

__all__ = [
    "EditTransaction",
    "Editor",
    "EditorMirror",
    "EditorSync",
    "Selection",
    "SelectionRange",
]
