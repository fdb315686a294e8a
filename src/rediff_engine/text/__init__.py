"""Text storage for the editing core."""

from .buffer import NEWLINE, TextBuffer

__all__ = ["NEWLINE", "TextBuffer"]
