"""Plain cursor motion: every move drops the active selection first."""

from __future__ import annotations

from typing import Callable

from rediff_engine.editor import Editor

from .base import ActionContext, ActionResult, is_offset


def _move(context: ActionContext, step: Callable[[Editor], None]) -> ActionResult:
    editor = context.editor
    editor.clear_selection()
    editor.cursor.clamp(editor.buffer.len())
    step(editor)
    return ActionResult(consumed=True, status="cursor_move")


def move_left(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_left())


def move_right(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_right(editor.buffer.len()))


def move_up(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_up(editor.buffer))


def move_down(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_down(editor.buffer))


def move_word_left(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_word_left(editor.buffer))


def move_word_right(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_word_right(editor.buffer))


def move_to_line_start(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(
        context, lambda editor: editor.cursor.move_to_line_start(editor.buffer)
    )


def move_to_line_end(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_to_line_end(editor.buffer))


def move_to_buffer_start(
    context: ActionContext, payload: object = None
) -> ActionResult:
    del payload
    return _move(context, lambda editor: editor.cursor.move_to_buffer_start())


def move_to_buffer_end(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _move(
        context, lambda editor: editor.cursor.move_to_buffer_end(editor.buffer)
    )


def place_cursor(context: ActionContext, payload: object = None) -> ActionResult:
    """Single click: payload is the buffer offset under the pointer."""

    if not is_offset(payload):
        return ActionResult(consumed=False, status="missing_index")
    context.editor.set_cursor(payload)
    return ActionResult(consumed=True, status="cursor_place")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_word_left",
    "move_word_right",
    "move_to_line_start",
    "move_to_line_end",
    "move_to_buffer_start",
    "move_to_buffer_end",
    "place_cursor",
]
