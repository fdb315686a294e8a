"""Action registry responsible for storing and dispatching editor verbs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from rediff_engine.runtime.telemetry import record_event, span

from .base import ActionContext, ActionRef, ActionResult


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    groups: tuple[str, ...]


class ActionRegistry:
    """Owns action references and dispatches them by id."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._actions

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "actions::register",
            logger_name=self._logger_name,
            component="actions",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            self._touch()
            return action

    def unregister_action(self, action_id: str) -> Optional[ActionRef]:
        action = self._actions.pop(action_id, None)
        if action is not None:
            self._touch()
        return action

    def iter_actions(self, group: Optional[str] = None) -> Iterator[ActionRef]:
        for action in self._actions.values():
            if group is None or action.group == group:
                yield action

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            groups=tuple(sorted({action.group for action in self._actions.values()})),
        )

    def dispatch(
        self, action_id: str, context: ActionContext, payload: object = None
    ) -> ActionResult:
        """Run ``action_id`` against ``context``.

        Unknown ids are reported as an unconsumed result rather than raised,
        since a front end may forward keys for verbs it never registered.
        After a consumed action the bus receives ``editor.changed`` with a
        fresh ``EditorMirror``.
        """

        action = self._actions.get(action_id)
        if action is None:
            record_event(
                "actions.unknown",
                level="warning",
                data={"action_id": action_id},
                logger_name=self._logger_name,
            )
            return ActionResult(
                consumed=False, status="unknown_action", message=action_id
            )

        with span(
            "actions::dispatch",
            logger_name=self._logger_name,
            component="actions",
            metadata={"action": action.telemetry_name},
        ) as handle:
            result = action(context, payload)
            handle.add_metadata("status", result.status)

        if result.consumed:
            context.bus.emit("editor.changed", context.editor.mirror())
        return result

    def _touch(self) -> None:
        self._revision += 1


__all__ = ["ActionRegistry", "RegistryStats"]
