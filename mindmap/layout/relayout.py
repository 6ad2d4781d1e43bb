"""Auto-arrange that keeps user-placed nodes where the user put them."""

from mindmap.config import get_layout_config
from mindmap.layout.tree_layout import compute_layout
from mindmap.models.layout import LayoutConfig
from mindmap.models.semantic_tree import SemanticTree
from mindmap.models.view_state import NodeViewState, ViewState


def relayout(
    tree: SemanticTree,
    existing: ViewState,
    config: LayoutConfig | None = None,
) -> ViewState:
    """Recompute positions for unlocked nodes only.

    The full layout is computed first, blind to locking, then blended: a
    locked node keeps its existing position, every other node takes the
    fresh one. Collapse flags, cosmetics and the viewport carry over. Nodes
    missing from ``existing`` start unlocked and expanded; entries for ids
    no longer in the tree are dropped.
    """
    fresh = compute_layout(tree, config or get_layout_config()).positions

    node_state: dict[str, NodeViewState] = {}
    for node_id, position in fresh.items():
        current = existing.node_state.get(node_id)
        if current is None:
            node_state[node_id] = NodeViewState(pos=position)
        elif current.locked:
            node_state[node_id] = current
        else:
            node_state[node_id] = current.model_copy(update={"pos": position})

    return ViewState(viewport=existing.viewport, node_state=node_state)
