"""Built-in actions covering every editor verb a front end needs."""

from __future__ import annotations

from typing import Iterable

from . import editing as editing_actions
from . import motion as motion_actions
from . import selection as selection_actions
from .base import ActionRef
from .registry import ActionRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="cursor.left",
        handler=motion_actions.move_left,
        description="Move one character left",
    ),
    ActionRef(
        id="cursor.right",
        handler=motion_actions.move_right,
        description="Move one character right",
    ),
    ActionRef(
        id="cursor.up",
        handler=motion_actions.move_up,
        description="Move one line up, keeping the goal column",
    ),
    ActionRef(
        id="cursor.down",
        handler=motion_actions.move_down,
        description="Move one line down, keeping the goal column",
    ),
    ActionRef(
        id="cursor.word_left",
        handler=motion_actions.move_word_left,
        description="Move to the previous word boundary",
    ),
    ActionRef(
        id="cursor.word_right",
        handler=motion_actions.move_word_right,
        description="Move to the next word boundary",
    ),
    ActionRef(
        id="cursor.line_start",
        handler=motion_actions.move_to_line_start,
        description="Move to the start of the line",
    ),
    ActionRef(
        id="cursor.line_end",
        handler=motion_actions.move_to_line_end,
        description="Move to the end of the line",
    ),
    ActionRef(
        id="cursor.buffer_start",
        handler=motion_actions.move_to_buffer_start,
        description="Move to the start of the buffer",
    ),
    ActionRef(
        id="cursor.buffer_end",
        handler=motion_actions.move_to_buffer_end,
        description="Move to the end of the buffer",
    ),
    ActionRef(
        id="cursor.place",
        handler=motion_actions.place_cursor,
        description="Place the cursor at an offset",
    ),
    ActionRef(
        id="selection.extend_left",
        handler=selection_actions.extend_left,
        description="Extend selection left",
    ),
    ActionRef(
        id="selection.extend_right",
        handler=selection_actions.extend_right,
        description="Extend selection right",
    ),
    ActionRef(
        id="selection.extend_up",
        handler=selection_actions.extend_up,
        description="Extend selection up",
    ),
    ActionRef(
        id="selection.extend_down",
        handler=selection_actions.extend_down,
        description="Extend selection down",
    ),
    ActionRef(
        id="selection.extend_word_left",
        handler=selection_actions.extend_word_left,
        description="Extend selection to the previous word boundary",
    ),
    ActionRef(
        id="selection.extend_word_right",
        handler=selection_actions.extend_word_right,
        description="Extend selection to the next word boundary",
    ),
    ActionRef(
        id="selection.extend_line_start",
        handler=selection_actions.extend_to_line_start,
        description="Extend selection to the start of the line",
    ),
    ActionRef(
        id="selection.extend_line_end",
        handler=selection_actions.extend_to_line_end,
        description="Extend selection to the end of the line",
    ),
    ActionRef(
        id="selection.extend_buffer_start",
        handler=selection_actions.extend_to_buffer_start,
        description="Extend selection to the start of the buffer",
    ),
    ActionRef(
        id="selection.extend_buffer_end",
        handler=selection_actions.extend_to_buffer_end,
        description="Extend selection to the end of the buffer",
    ),
    ActionRef(
        id="selection.all",
        handler=selection_actions.select_all,
        description="Select the whole buffer",
    ),
    ActionRef(
        id="selection.word_at",
        handler=selection_actions.select_word_at,
        description="Select the word segment at an offset",
    ),
    ActionRef(
        id="selection.line_at",
        handler=selection_actions.select_line_at,
        description="Select the line at an offset",
    ),
    ActionRef(
        id="selection.drag",
        handler=selection_actions.drag_select,
        description="Select from an anchor to the pointer offset",
    ),
    ActionRef(
        id="clipboard.copy",
        handler=selection_actions.copy_selection,
        description="Copy the selection",
    ),
    ActionRef(
        id="clipboard.cut",
        handler=selection_actions.cut_selection,
        description="Cut the selection",
    ),
    ActionRef(
        id="clipboard.paste",
        handler=selection_actions.paste,
        description="Paste text over the selection or at the cursor",
    ),
    ActionRef(
        id="edit.type",
        handler=editing_actions.type_text,
        description="Type text over the selection or at the cursor",
    ),
    ActionRef(
        id="edit.newline",
        handler=editing_actions.newline,
        description="Insert a line break",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=editing_actions.delete_backward,
        description="Delete the selection or the previous character",
    ),
    ActionRef(
        id="edit.delete_word_backward",
        handler=editing_actions.delete_word_backward,
        description="Delete the selection or back to the word boundary",
    ),
    ActionRef(
        id="edit.delete_line",
        handler=editing_actions.delete_line,
        description="Delete the selection or the current line",
    ),
)


def load_default_actions(
    registry: ActionRegistry,
    *,
    actions: Iterable[ActionRef] | None = None,
    replace: bool = False,
) -> ActionRegistry:
    """Seed ``registry`` with ``DEFAULT_ACTIONS`` (or a custom set)."""

    for action in actions if actions is not None else DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    return registry


__all__ = ["DEFAULT_ACTIONS", "load_default_actions"]
