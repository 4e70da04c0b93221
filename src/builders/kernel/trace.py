"""Composition trace - separate from the composed value.

A Trace records what a builder did while folding fragments: which fragments
were combined, in which order, and how large the result was. It never feeds
back into the accumulator. Tree relationships are reconstructed only on
demand via as_tree().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TraceEvent:
    """A single recorded composition event.

    Attributes:
        action: What happened ("compose_begin", "combine", "compose_end")
        id: Sequential event id, unique within one Trace
        parent_id: Id of the enclosing event, if any
        info: Additional context (builder label, fragment kind, sizes)
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    info: dict[str, Any] = field(default_factory=dict)


class Trace:
    """Append-only event log for one or more compositions.

    Uses stack-based nesting via push/pop: events recorded without an explicit
    parent attach to the event on top of the stack.

    - Trace disabled -> record() is a single flag check
    - Event append is O(1)
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[TraceEvent] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        """Make event_id the implicit parent of subsequent events."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Drop the current parent, returning it (None if the stack is empty)."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
    ) -> int | None:
        """Record an event.

        Args:
            action: What happened
            info: Additional context
            parent_id: Explicit parent, overriding the stack top

        Returns:
            The new event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if parent_id is None and self._stack:
            parent_id = self._stack[-1]

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            TraceEvent(action=action, id=event_id, parent_id=parent_id, info=info or {})
        )
        return event_id

    def get_events(self) -> list[TraceEvent]:
        return list(self._events)

    def find_all(self, action: str | None = None, **info: Any) -> list[TraceEvent]:
        """Events matching an action and/or info values.

        Example: trace.find_all("combine", kind="absent")
        """
        return [
            ev
            for ev in self._events
            if (action is None or ev.action == action)
            and all(ev.info.get(k) == v for k, v in info.items())
        ]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
