"""Layout engine and partial relayout."""

from mindmap.layout.tree_layout import compute_layout, compute_subtree_widths
from mindmap.layout.relayout import relayout

__all__ = [
    "compute_layout",
    "compute_subtree_widths",
    "relayout",
]
