"""Cursor position and movement over a ``TextBuffer``."""

from __future__ import annotations

from dataclasses import dataclass

from rediff_engine.text import TextBuffer

from .goal import Column, CursorGoal
from .segments import find_word_boundaries


@dataclass(slots=True)
class Cursor:
    """Character offset plus the goal column used by vertical moves.

    Only ``move_up``/``move_down`` set ``goal``; every other movement clears
    it, so the remembered column survives a trip through shorter lines but
    not a horizontal move.
    """

    index: int = 0
    goal: CursorGoal = None

    def clamp(self, max_index: int) -> None:
        self.index = max(0, min(self.index, max_index))

    def move_left(self) -> None:
        if self.index > 0:
            self.index -= 1
        self.goal = None

    def move_right(self, max_index: int) -> None:
        if self.index < max_index:
            self.index += 1
        self.goal = None

    def move_up(self, buffer: TextBuffer) -> None:
        line, col = buffer.char_to_line_col(self.index)
        goal_col = self.goal.column if self.goal is not None else col

        if line > 0:
            target_line = line - 1
            new_col = min(goal_col, buffer.line_len(target_line))
            self.index = buffer.line_col_to_char(target_line, new_col)
        else:
            self.index = 0

        self.goal = Column(goal_col)

    def move_down(self, buffer: TextBuffer) -> None:
        line, col = buffer.char_to_line_col(self.index)
        goal_col = self.goal.column if self.goal is not None else col

        if line < buffer.line_count() - 1:
            target_line = line + 1
            new_col = min(goal_col, buffer.line_len(target_line))
            self.index = buffer.line_col_to_char(target_line, new_col)
        else:
            self.index = buffer.len()

        self.goal = Column(goal_col)

    def move_to_line_start(self, buffer: TextBuffer) -> None:
        self.goal = None
        line, _col = buffer.char_to_line_col(self.index)
        self.index = buffer.line_col_to_char(line, 0)

    def move_to_line_end(self, buffer: TextBuffer) -> None:
        """Move before the line's newline, not onto the next line."""

        self.goal = None
        line, _col = buffer.char_to_line_col(self.index)
        self.index = buffer.line_col_to_char(line, buffer.line_len(line))

    def move_to_buffer_start(self) -> None:
        self.index = 0
        self.goal = None

    def move_to_buffer_end(self, buffer: TextBuffer) -> None:
        self.index = buffer.len()
        self.goal = None

    def move_word_left(self, buffer: TextBuffer) -> None:
        """Step back to the start of the previous segment.

        Stays on the current line unless the cursor already sits at column 0,
        in which case it moves onto the previous line's newline.
        """

        self.goal = None
        if self.index <= 0:
            self.index = 0
            return
        if self.index > buffer.len():
            self.index = buffer.len()
            return

        line, col = buffer.char_to_line_col(self.index)
        line_start = buffer.line_col_to_char(line, 0)
        start, _end = find_word_boundaries(buffer, self.index - 1)
        self.index = max(start, line_start) if col > 0 else start

    def move_word_right(self, buffer: TextBuffer) -> None:
        """Step forward to the end of the current segment.

        May land on the next line's first offset, never beyond it.
        """

        self.goal = None
        size = buffer.len()
        if self.index >= size:
            self.index = size
            return

        line, _col = buffer.char_to_line_col(self.index)
        if line + 1 < buffer.line_count():
            line_end = buffer.line_col_to_char(line + 1, 0)
        else:
            line_end = size

        _start, end = find_word_boundaries(buffer, self.index)
        self.index = min(end, line_end)
