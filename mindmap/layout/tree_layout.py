"""Deterministic tidy-tree layout.

Three passes over a validated tree:

1. subtree widths, post-order. A leaf is one node wide; an internal node is
   as wide as its children side by side plus the gaps between them, and
   never narrower than a single node.
2. positions, pre-order from the root at (0, 0). Children fill their
   parent's width left to right, each centred in a slot as wide as its own
   subtree, one level step further from the root.
3. centering. Everything is translated so the bounding box of all node
   centres is centred on the origin.

The computation runs in (breadth, depth) coordinates. For top-to-bottom
trees breadth is x and depth is y; left-to-right trees swap both the axes
and the node box, so node_height becomes the breadth extent.

The layout knows nothing about view state: locked nodes, collapse flags and
previous positions never influence the result.
"""

from mindmap.config import get_layout_config
from mindmap.models.layout import (
    Bounds,
    LayoutConfig,
    LayoutDirection,
    LayoutResult,
    Position,
)
from mindmap.models.semantic_tree import SemanticTree


def _breadth_extent(config: LayoutConfig) -> float:
    if config.direction == LayoutDirection.left_to_right:
        return config.node_height
    return config.node_width


def _level_step(config: LayoutConfig) -> float:
    if config.direction == LayoutDirection.left_to_right:
        return config.node_width + config.vertical_gap
    return config.node_height + config.vertical_gap


def compute_subtree_widths(
    tree: SemanticTree,
    config: LayoutConfig | None = None,
) -> dict[str, float]:
    """Breadth needed by each node's subtree so sibling subtrees never overlap."""
    config = config or get_layout_config()
    extent = _breadth_extent(config)
    widths: dict[str, float] = {}

    # reversed pre-order visits every child before its parent
    for node_id in reversed(list(tree.iter_preorder())):
        children = tree.children_of(node_id)
        if not children:
            widths[node_id] = extent
            continue
        total = sum(widths[child_id] for child_id in children)
        total += (len(children) - 1) * config.horizontal_gap
        widths[node_id] = max(extent, total)

    return widths


def compute_layout(
    tree: SemanticTree,
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """Compute a centred position for every node reachable from the root.

    The tree must already have passed validation.
    """
    config = config or get_layout_config()
    widths = compute_subtree_widths(tree, config)
    step = _level_step(config)

    # node id -> (breadth, depth)
    placed: dict[str, tuple[float, float]] = {tree.root_id: (0.0, 0.0)}
    for node_id in tree.iter_preorder():
        breadth, depth = placed[node_id]
        cursor = breadth - widths[node_id] / 2
        for child_id in tree.children_of(node_id):
            child_width = widths[child_id]
            placed[child_id] = (cursor + child_width / 2, depth + step)
            cursor += child_width + config.horizontal_gap

    if config.direction == LayoutDirection.left_to_right:
        raw = {node_id: Position(x=d, y=b) for node_id, (b, d) in placed.items()}
    else:
        raw = {node_id: Position(x=b, y=d) for node_id, (b, d) in placed.items()}

    return _centered(raw)


def _centered(positions: dict[str, Position]) -> LayoutResult:
    center = Bounds.of(positions).center
    shifted = {
        node_id: Position(x=p.x - center.x, y=p.y - center.y)
        for node_id, p in positions.items()
    }
    return LayoutResult(positions=shifted, bounds=Bounds.of(shifted))
