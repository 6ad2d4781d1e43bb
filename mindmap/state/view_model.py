"""Pure transitions on ViewState.

Every function takes the current ViewState and returns a new one; the input
is never modified. A node id that is not in the view state (for example a
stale click after the tree was replaced) is rejected as a no-op with an
error message instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mindmap.config import get_layout_config, get_zoom_range
from mindmap.layout.tree_layout import compute_layout
from mindmap.models.layout import ORIGIN, LayoutConfig, Position
from mindmap.models.semantic_tree import SemanticTree
from mindmap.models.view_state import NodeViewState, Viewport, ViewState, ZoomRange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a view state transition.

    ``state`` is the new ViewState when applied, otherwise the unchanged
    input.
    """

    applied: bool
    state: ViewState
    error: str | None = None

    @classmethod
    def ok(cls, state: ViewState) -> MutationResult:
        return cls(applied=True, state=state)

    @classmethod
    def unknown_node(cls, state: ViewState, node_id: str, action: str) -> MutationResult:
        message = f"{action}: node {node_id} is not part of this map"
        logger.warning(message)
        return cls(applied=False, state=state, error=message)


def initialize_view_state(
    tree: SemanticTree,
    config: LayoutConfig | None = None,
    viewport: Viewport | None = None,
) -> ViewState:
    """Lay the tree out and seed every node unlocked and expanded."""
    positions = compute_layout(tree, config or get_layout_config()).positions
    node_state = {
        node_id: NodeViewState(pos=positions.get(node_id, ORIGIN))
        for node_id in tree.nodes
    }
    return ViewState(viewport=viewport or Viewport(), node_state=node_state)


def _replace_node(state: ViewState, node_id: str, node: NodeViewState) -> ViewState:
    return state.model_copy(update={"node_state": {**state.node_state, node_id: node}})


def set_position(state: ViewState, node_id: str, x: float, y: float) -> MutationResult:
    """Move a node and lock it. Manual placement is always sticky."""
    current = state.node_state.get(node_id)
    if current is None:
        return MutationResult.unknown_node(state, node_id, "set_position")
    moved = current.model_copy(update={"pos": Position(x=x, y=y), "locked": True})
    return MutationResult.ok(_replace_node(state, node_id, moved))


def toggle_collapsed(state: ViewState, node_id: str) -> MutationResult:
    current = state.node_state.get(node_id)
    if current is None:
        return MutationResult.unknown_node(state, node_id, "toggle_collapsed")
    flipped = current.model_copy(update={"collapsed": not current.collapsed})
    return MutationResult.ok(_replace_node(state, node_id, flipped))


def set_node_style(
    state: ViewState,
    node_id: str,
    color: str | None = None,
    icon: str | None = None,
) -> MutationResult:
    """Set cosmetic overrides. Passing None clears the override."""
    current = state.node_state.get(node_id)
    if current is None:
        return MutationResult.unknown_node(state, node_id, "set_node_style")
    styled = current.model_copy(update={"color": color, "icon": icon})
    return MutationResult.ok(_replace_node(state, node_id, styled))


def set_viewport(
    state: ViewState,
    x: float,
    y: float,
    zoom: float,
    zoom_range: ZoomRange | None = None,
) -> ViewState:
    """Pan and zoom; zoom is clamped to the allowed range."""
    zoom_range = zoom_range or get_zoom_range()
    viewport = Viewport(x=x, y=y, zoom=zoom_range.clamp(zoom))
    return state.model_copy(update={"viewport": viewport})
