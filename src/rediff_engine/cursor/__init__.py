"""Cursor state, goal columns and word-boundary segmentation."""

from .cursor import Cursor
from .goal import Column, CursorGoal
from .segments import SegmentKind, classify, find_word_boundaries, is_word_char

__all__ = [
    "Column",
    "Cursor",
    "CursorGoal",
    "SegmentKind",
    "classify",
    "find_word_boundaries",
    "is_word_char",
]
