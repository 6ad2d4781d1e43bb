"""Sinks that observe committed document states."""

from dataclasses import dataclass
from typing import Callable

from mindmap.models.document import MindMapDocument


@dataclass(frozen=True)
class StateChange:
    """A committed transition of one session's document."""

    action: str  # "drag_node", "toggle_node", "auto_arrange", ...
    document: MindMapDocument
    node_id: str | None = None


class StateSink:
    """Protocol for receiving committed state changes."""

    def append(self, change: StateChange) -> None:
        """Append a change to the sink."""
        raise NotImplementedError


class ListSink(StateSink):
    """Stores changes in a list."""

    def __init__(self) -> None:
        self.changes: list[StateChange] = []

    def append(self, change: StateChange) -> None:
        self.changes.append(change)

    def clear(self) -> None:
        self.changes.clear()


class CallbackSink(StateSink):
    """Forwards each change to a callable, e.g. a renderer refresh."""

    def __init__(self, callback: Callable[[StateChange], None]) -> None:
        self.callback = callback

    def append(self, change: StateChange) -> None:
        self.callback(change)
