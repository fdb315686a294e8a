"""UI-agnostic editing core for a text/diff viewer."""

from .cursor import Column, Cursor, SegmentKind, find_word_boundaries
from .editor import Editor, EditorMirror, Selection
from .text import TextBuffer

__all__ = [
    "Column",
    "Cursor",
    "Editor",
    "EditorMirror",
    "SegmentKind",
    "Selection",
    "TextBuffer",
    "find_word_boundaries",
    "actions",
    "cursor",
    "editor",
    "runtime",
    "text",
]

__version__ = "0.1.0"
