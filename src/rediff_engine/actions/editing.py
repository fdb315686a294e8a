"""Typing and deletion verbs as a keyboard front end composes them.

Typed text replaces the selection; every backward deletion removes the
selection instead of its own unit when one exists.
"""

from __future__ import annotations

from typing import Callable

from rediff_engine.editor import Editor

from .base import ActionContext, ActionResult


def type_text(context: ActionContext, payload: object = None) -> ActionResult:
    if not isinstance(payload, str) or not payload:
        return ActionResult(consumed=False, status="missing_text")
    context.editor.replace_selection(payload)
    return ActionResult(consumed=True, status="type")


def newline(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    context.editor.replace_selection("\n")
    return ActionResult(consumed=True, status="newline")


def _delete_backward(
    context: ActionContext, fallback: Callable[[Editor], None], status: str
) -> ActionResult:
    editor = context.editor
    removed = editor.delete_selection()
    if removed is not None:
        return ActionResult(consumed=True, status="delete_selection", text=removed)
    fallback(editor)
    return ActionResult(consumed=True, status=status)


def delete_backward(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _delete_backward(context, Editor.backspace, "backspace")


def delete_word_backward(
    context: ActionContext, payload: object = None
) -> ActionResult:
    del payload
    return _delete_backward(context, Editor.delete_word, "delete_word")


def delete_line(context: ActionContext, payload: object = None) -> ActionResult:
    del payload
    return _delete_backward(context, Editor.delete_line, "delete_line")


__all__ = [
    "type_text",
    "newline",
    "delete_backward",
    "delete_word_backward",
    "delete_line",
]
