"""Editor façade combining buffer, cursor, and selection."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable, ContextManager, Optional

from rediff_engine.cursor import Cursor, find_word_boundaries
from rediff_engine.runtime import telemetry
from rediff_engine.runtime.telemetry import SpanHandle
from rediff_engine.text import TextBuffer

from .selection import Selection, SelectionRange
from .sync import EditorMirror


class Editor:
    """Owns one ``TextBuffer``, one ``Cursor`` and an optional ``Selection``.

    Every operation is total: offsets are clamped to the buffer and deletions
    past the end shrink to what exists. Mutating operations run inside an
    ``EditTransaction`` and leave the editor with no selection, no goal
    column, and the cursor at the edit site.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        buffer: Optional[TextBuffer] = None,
        cursor: Optional[Cursor] = None,
    ) -> None:
        self.name = name
        self.buffer = buffer if buffer is not None else TextBuffer()
        self.cursor = cursor if cursor is not None else Cursor()
        self.selection: Optional[Selection] = None

    @classmethod
    def from_text(cls, text: str, *, name: str = "default") -> "Editor":
        return cls(name=name, buffer=TextBuffer.from_text(text))

    def set_cursor(self, index: int) -> None:
        """Place the cursor at ``index`` (a click), dropping selection and goal."""

        self.cursor.index = self._clamp(index)
        self.cursor.goal = None
        self.selection = None

    # -- selection state -------------------------------------------------

    def has_selection(self) -> bool:
        return self.selection is not None

    def selection_range(self) -> Optional[SelectionRange]:
        if self.selection is None:
            return None
        return self.selection.range()

    def select_range(self, start: int, end: int) -> None:
        """Select from anchor ``start`` to head ``end`` (either order)."""

        self.selection = Selection.between(self._clamp(start), self._clamp(end))

    def select_all(self) -> None:
        self.selection = Selection.between(0, self.buffer.len())

    def clear_selection(self) -> None:
        self.selection = None

    def select_word_at(self, index: int) -> None:
        start, end = find_word_boundaries(self.buffer, index)
        self.select_range(start, end)

    def select_line_at(self, index: int) -> None:
        line, _col = self.buffer.char_to_line_col(index)
        start = self.buffer.line_col_to_char(line, 0)
        if line + 1 < self.buffer.line_count():
            end = self.buffer.line_col_to_char(line + 1, 0)
        else:
            end = self.buffer.len()
        self.select_range(start, end)

    def get_selected_text(self) -> Optional[str]:
        if self.selection is None:
            return None
        return self.buffer.slice(self.selection.start, self.selection.end)

    # -- selection extension ---------------------------------------------

    def extend_selection_left(self) -> None:
        self._extend_selection(self.cursor.move_left)

    def extend_selection_right(self) -> None:
        self._extend_selection(lambda: self.cursor.move_right(self.buffer.len()))

    def extend_selection_up(self) -> None:
        self._extend_selection(lambda: self.cursor.move_up(self.buffer))

    def extend_selection_down(self) -> None:
        self._extend_selection(lambda: self.cursor.move_down(self.buffer))

    def extend_selection_to_line_start(self) -> None:
        self._extend_selection(lambda: self.cursor.move_to_line_start(self.buffer))

    def extend_selection_to_line_end(self) -> None:
        self._extend_selection(lambda: self.cursor.move_to_line_end(self.buffer))

    def extend_selection_to_buffer_start(self) -> None:
        self._extend_selection(self.cursor.move_to_buffer_start)

    def extend_selection_to_buffer_end(self) -> None:
        self._extend_selection(lambda: self.cursor.move_to_buffer_end(self.buffer))

    def extend_selection_word_left(self) -> None:
        self._extend_selection(lambda: self.cursor.move_word_left(self.buffer))

    def extend_selection_word_right(self) -> None:
        self._extend_selection(lambda: self.cursor.move_word_right(self.buffer))

    def _extend_selection(self, move: Callable[[], None]) -> None:
        self.cursor.clamp(self.buffer.len())
        if self.selection is None:
            self.selection = Selection.between(self.cursor.index, self.cursor.index)
        anchor = self.selection.tail()
        move()
        self.selection = Selection.between(anchor, self.cursor.index)

    # -- clipboard verbs -------------------------------------------------

    def copy(self) -> Optional[str]:
        return self.get_selected_text()

    def cut(self) -> Optional[str]:
        return self.delete_selection()

    def paste(self, text: str) -> None:
        with self._transaction("paste"):
            self._replace_selection(text)

    def replace_selection(self, replacement: str) -> None:
        with self._transaction("replace_selection"):
            self._replace_selection(replacement)

    def delete_selection(self) -> Optional[str]:
        """Delete the selected range and return its text (``None`` if unselected)."""

        if self.selection is None:
            return None
        with self._transaction("delete_selection"):
            return self._delete_selection()

    # -- editing primitives ----------------------------------------------

    def insert_char(self, ch: str) -> None:
        with self._transaction("insert_char"):
            self._insert(ch)

    def insert_text(self, text: str) -> None:
        with self._transaction("insert_text"):
            self._insert(text)

    def backspace(self) -> None:
        with self._transaction("backspace"):
            if self.cursor.index > 0:
                self.cursor.index -= 1
                self.buffer.delete(self.cursor.index, 1)

    def delete_word(self) -> None:
        """Delete back to the previous word boundary.

        Stays on the current line unless the cursor is at column 0, where the
        preceding newline is consumed and the two lines merge.
        """

        with self._transaction("delete_word"):
            origin = self.cursor.index
            if origin == 0:
                return
            line, col = self.buffer.char_to_line_col(origin)
            line_start = self.buffer.line_col_to_char(line, 0)

            self.cursor.move_word_left(self.buffer)
            delete_from = self.cursor.index
            if col > 0:
                delete_from = max(delete_from, line_start)

            self.buffer.delete(delete_from, origin - delete_from)
            self.cursor.index = delete_from

    def delete_line(self) -> None:
        """Delete the current line, including its trailing newline."""

        with self._transaction("delete_line"):
            line, _col = self.buffer.char_to_line_col(self.cursor.index)
            line_start = self.buffer.line_col_to_char(line, 0)
            content = self.buffer.line(line) or ""
            self.buffer.delete(line_start, len(content))
            self.cursor.index = line_start

    # -- rendering surface -----------------------------------------------

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> EditorMirror:
        self.cursor.clamp(self.buffer.len())
        return EditorMirror(
            text=self.buffer.as_str(),
            cursor=self.cursor.index,
            cursor_line_col=self.buffer.char_to_line_col(self.cursor.index),
            selection=self.selection_range(),
            line_count=self.buffer.line_count(),
            version=self.buffer.version,
            attributes=dict(attributes or {}),
        )

    # -- internals -------------------------------------------------------

    def _insert(self, text: str) -> None:
        self.buffer.insert(self.cursor.index, text)
        self.cursor.index += len(text)

    def _delete_selection(self) -> Optional[str]:
        if self.selection is None:
            return None
        start, end = self.selection.range()
        text = self.buffer.slice(start, end)
        self.buffer.delete(start, end - start)
        self.cursor.index = start
        self.selection = None
        return text

    def _replace_selection(self, replacement: str) -> None:
        self._delete_selection()
        self._insert(replacement)

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.buffer.len()))

    def _transaction(self, label: str) -> "EditTransaction":
        return EditTransaction(self, label)


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Wraps one mutating editor call in a telemetry span.

    On entry the cursor is pulled back into the buffer; on exit the selection
    is dropped (its offsets may no longer match the text) and the goal column
    is reset.
    """

    def __init__(self, editor: Editor, label: str) -> None:
        self.editor = editor
        self.label = label
        self._span_cm: Optional[ContextManager[SpanHandle]] = None
        self._handle: Optional[SpanHandle] = None
        self._version_before = 0

    def __enter__(self) -> "EditTransaction":
        self.editor.cursor.clamp(self.editor.buffer.len())
        self._version_before = self.editor.buffer.version
        self._span_cm = telemetry.span(
            name=f"editor::{self.label}",
            component="editor",
            metadata={"editor": self.editor.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        editor = self.editor
        if exc_type is None:
            editor.selection = None
            editor.cursor.goal = None
            editor.cursor.clamp(editor.buffer.len())
            if self._handle is not None:
                self._handle.add_metadata(
                    "changed", editor.buffer.version != self._version_before
                )
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Editor", "EditTransaction"]
