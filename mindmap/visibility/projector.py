"""Derive what the renderer should draw from a tree and its view state.

Collapsing never hides nodes, only the edges in the collapsed subtree.
Positions are passed through untouched, so expanding again restores the
exact previous picture without any layout work.
"""

from pydantic import BaseModel

from mindmap.models.layout import Position
from mindmap.models.semantic_tree import NodeKind, SemanticTree
from mindmap.models.view_state import NodeViewState, ViewState


class RenderNode(BaseModel):
    """A node as the canvas draws it."""

    node_id: str
    label: str
    kind: NodeKind
    position: Position
    collapsed: bool
    locked: bool
    has_children: bool
    color: str | None = None
    icon: str | None = None


class RenderEdge(BaseModel):
    """A parent-to-child connector."""

    edge_id: str
    source: str
    target: str


class VisibleGraph(BaseModel):
    nodes: list[RenderNode]
    edges: list[RenderEdge]

    def edge_pairs(self) -> set[tuple[str, str]]:
        return {(edge.source, edge.target) for edge in self.edges}


def project_visibility(
    tree: SemanticTree,
    state: ViewState,
    parent_only: bool = False,
) -> VisibleGraph:
    """Nodes and edges to render.

    The edge walk stops at collapsed nodes, so nothing below a collapsed
    node is connected. With ``parent_only`` only the collapsed node's own
    outgoing edges are hidden and deeper edges are still emitted.
    """
    nodes: list[RenderNode] = []
    edges: list[RenderEdge] = []
    hidden_below: set[str] = set()

    for node_id in tree.iter_preorder():
        node = tree.nodes[node_id]
        view = state.node_state.get(node_id) or NodeViewState()
        nodes.append(RenderNode(
            node_id=node_id,
            label=node.label,
            kind=node.kind,
            position=view.pos,
            collapsed=view.collapsed,
            locked=view.locked,
            has_children=not node.is_leaf,
            color=view.color,
            icon=view.icon,
        ))

        children = tree.children_of(node_id)
        if view.collapsed or node_id in hidden_below:
            if not parent_only:
                hidden_below.update(children)
            continue
        for child_id in children:
            edges.append(RenderEdge(
                edge_id=f"{node_id}-{child_id}",
                source=node_id,
                target=child_id,
            ))

    return VisibleGraph(nodes=nodes, edges=edges)
