"""Named editor verbs an input front end can dispatch."""

from .base import ActionContext, ActionHandler, ActionRef, ActionResult, EditorBus
from .defaults import DEFAULT_ACTIONS, load_default_actions
from .registry import ActionRegistry, RegistryStats

__all__ = [
    "ActionContext",
    "ActionHandler",
    "ActionRef",
    "ActionResult",
    "ActionRegistry",
    "DEFAULT_ACTIONS",
    "EditorBus",
    "RegistryStats",
    "load_default_actions",
]
