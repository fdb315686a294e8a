"""Shared types every editor action handler receives and returns."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from rediff_engine.editor import Editor


@dataclass(slots=True)
class ActionResult:
    """Result returned from an action handler."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    text: Optional[str] = None


class EditorBus:
    """Minimal event bus letting hosts observe editor changes."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


@dataclass(slots=True)
class ActionContext:
    """Services an action can reach: the editor and the host's event bus."""

    editor: Editor
    bus: EditorBus = field(default_factory=EditorBus)
    extras: Dict[str, object] = field(default_factory=dict)


ActionHandler = Callable[[ActionContext, object], ActionResult]


def is_offset(payload: object) -> bool:
    """True for an ``int`` buffer offset; ``bool`` payloads are rejected."""

    return isinstance(payload, int) and not isinstance(payload, bool)


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler plus the metadata used when it is dispatched."""

    id: str
    handler: ActionHandler
    telemetry_name: str | None = None
    description: str = ""
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    @property
    def group(self) -> str:
        return self.id.split(".", 1)[0]

    def __call__(self, context: ActionContext, payload: object = None) -> ActionResult:
        return self.handler(context, payload)


__all__ = [
    "ActionContext",
    "ActionHandler",
    "ActionRef",
    "ActionResult",
    "EditorBus",
    "is_offset",
]
