"""Actions that create, grow, and consume selections."""

from __future__ import annotations

from typing import Callable

from rediff_engine.editor import Editor

from .base import ActionContext, ActionResult, is_offset


def _extend(context: ActionContext, grow: Callable[[Editor], None]) -> ActionResult:
    grow(context.editor)
    return ActionResult(consumed=True, status="selection_extend")


def extend_left(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_left)


def extend_right(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_right)


def extend_up(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_up)


def extend_down(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_down)


def extend_word_left(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_word_left)


def extend_word_right(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_word_right)


def extend_to_line_start(
    context: ActionContext, payload: object = None
) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_to_line_start)


def extend_to_line_end(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_to_line_end)


def extend_to_buffer_start(
    context: ActionContext, payload: object = None
) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_to_buffer_start)


def extend_to_buffer_end(
    context: ActionContext, payload: object = None
) -> ActionResult:
    del payload
    return _extend(context, Editor.extend_selection_to_buffer_end)


def select_all(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    context.editor.select_all()
    return ActionResult(consumed=True, status="select_all")


def select_word_at(context: ActionContext, payload: object = None) -> ActionResult:
    """Double click: payload is the buffer offset under the pointer."""

    if not is_offset(payload):
        return ActionResult(consumed=False, status="missing_index")
    context.editor.select_word_at(payload)
    return ActionResult(consumed=True, status="select_word")


def select_line_at(context: ActionContext, payload: object = None) -> ActionResult:
    """Triple click: payload is the buffer offset under the pointer."""

    if not is_offset(payload):
        return ActionResult(consumed=False, status="missing_index")
    context.editor.select_line_at(payload)
    return ActionResult(consumed=True, status="select_line")


def drag_select(context: ActionContext, payload: object = None) -> ActionResult:
    """Pointer drag: payload is ``(anchor, index)``; the cursor follows ``index``."""

    if (
        not isinstance(payload, (tuple, list))
        or len(payload) != 2
        or not all(is_offset(value) for value in payload)
    ):
        return ActionResult(consumed=False, status="missing_range")
    anchor, index = payload
    editor = context.editor
    editor.select_range(anchor, index)
    editor.cursor.index = max(0, min(index, editor.buffer.len()))
    editor.cursor.goal = None
    return ActionResult(consumed=True, status="select_range")


def copy_selection(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    text = context.editor.copy()
    if text is None:
        return ActionResult(consumed=False, status="no_selection")
    context.bus.emit("editor.clipboard", {"action": "copy", "text": text})
    return ActionResult(consumed=True, status="copy", text=text)


def cut_selection(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    text = context.editor.cut()
    if text is None:
        return ActionResult(consumed=False, status="no_selection")
    context.bus.emit("editor.clipboard", {"action": "cut", "text": text})
    return ActionResult(consumed=True, status="cut", text=text)


def paste(context: ActionContext, payload: object = None) -> ActionResult:
    if not isinstance(payload, str):
        return ActionResult(consumed=False, status="missing_text")
    context.editor.paste(payload)
    return ActionResult(consumed=True, status="paste")


__all__ = [
    "extend_left",
    "extend_right",
    "extend_up",
    "extend_down",
    "extend_word_left",
    "extend_word_right",
    "extend_to_line_start",
    "extend_to_line_end",
    "extend_to_buffer_start",
    "extend_to_buffer_end",
    "select_all",
    "select_word_at",
    "select_line_at",
    "drag_select",
    "copy_selection",
    "cut_selection",
    "paste",
]
