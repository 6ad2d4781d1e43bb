"""View state transitions, load normalization and editing sessions."""

from mindmap.state.view_model import (
    MutationResult,
    initialize_view_state,
    set_node_style,
    set_position,
    set_viewport,
    toggle_collapsed,
)
from mindmap.state.normalize import (
    DocumentLoadResult,
    LEGACY_POSITION_KEY,
    load_document,
    normalize_view_state,
)
from mindmap.state.sinks import CallbackSink, ListSink, StateChange, StateSink
from mindmap.state.session import MindMapSession

__all__ = [
    # Transitions
    "MutationResult",
    "initialize_view_state",
    "set_node_style",
    "set_position",
    "set_viewport",
    "toggle_collapsed",
    # Loading
    "DocumentLoadResult",
    "LEGACY_POSITION_KEY",
    "load_document",
    "normalize_view_state",
    # Sessions
    "CallbackSink",
    "ListSink",
    "StateChange",
    "StateSink",
    "MindMapSession",
]
