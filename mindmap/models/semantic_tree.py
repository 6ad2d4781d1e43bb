"""Semantic tree models for the content layer.

The tree is stored arena-style: a mapping from node id to node record, with
children referenced by id. Positions and other visual state never live here.
"""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class NodeKind(str, Enum):
    """Descriptive category of a node. Does not affect layout."""

    topic = "topic"
    detail = "detail"
    risk = "risk"
    action = "action"
    definition = "definition"
    example = "example"


class EvidenceRef(BaseModel):
    """A citation pointing back into a source document."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    source_id: str
    page: int | None = None
    quote: str  # <= 200 chars when produced by the generator
    locator: str | None = None  # "Section 2.1", "Paragraph 3"


class SemanticNode(BaseModel):
    """A single node of the mind map content graph."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    id: str  # stable across edits
    label: str
    kind: NodeKind
    bullets: list[str] | None = None
    children: list[str] | None = None  # left-to-right sibling order
    evidence: list[EvidenceRef] | None = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children (absent or empty list)."""
        return not self.children


class SemanticTree(BaseModel):
    """One rooted tree of semantic nodes.

    Structural invariants (root present, children present, acyclic, single
    parent) are checked by the tree validator, not here. Everything that
    consumes a SemanticTree assumes they hold.
    """

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    root_id: str
    nodes: dict[str, SemanticNode]

    def get(self, node_id: str) -> SemanticNode | None:
        return self.nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def children_of(self, node_id: str) -> list[str]:
        """Child ids of a node, empty for leaves and unknown ids."""
        node = self.nodes.get(node_id)
        if node is None or node.children is None:
            return []
        return list(node.children)

    def iter_preorder(self, start: str | None = None) -> Iterator[str]:
        """Yield node ids in pre-order, siblings left to right."""
        stack = [self.root_id if start is None else start]
        while stack:
            node_id = stack.pop()
            yield node_id
            stack.extend(reversed(self.children_of(node_id)))

    def parents(self) -> dict[str, str]:
        """Map each non-root node id to its parent id."""
        result: dict[str, str] = {}
        for node_id in self.iter_preorder():
            for child_id in self.children_of(node_id):
                result[child_id] = node_id
        return result

    def descendants(self, node_id: str) -> list[str]:
        """All ids below node_id in pre-order, excluding node_id itself."""
        return list(self.iter_preorder(node_id))[1:]
