"""Structural validation of candidate semantic trees.

A candidate is usually freshly parsed generator output. Checks run in a
fixed priority order and stop at the first violation:

    1. missing_root        root id absent from the node mapping
    2. missing_field       node lacks id, label or kind
       invalid_field       wrong type, unknown kind, id/key mismatch
    3. missing_child       a child id that is not in the node mapping
    4. cycle               found while traversing from the root
    5. multiple_parents    a node listed as a child more than once
    6. unreachable_node    a node the root never reaches

The validator reports; it never repairs.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from mindmap.models.semantic_tree import NodeKind, SemanticNode, SemanticTree

logger = logging.getLogger(__name__)

REQUIRED_NODE_FIELDS = ("id", "label", "kind")

_VISITING = 1
_DONE = 2


class ViolationKind(str, Enum):
    """Kinds of structural violation, in reporting priority order."""

    invalid_json = "invalid_json"
    missing_root = "missing_root"
    missing_field = "missing_field"
    invalid_field = "invalid_field"
    missing_child = "missing_child"
    cycle = "cycle"
    multiple_parents = "multiple_parents"
    unreachable_node = "unreachable_node"


class TreeViolation(BaseModel):
    """The first structural problem found in a candidate tree."""

    kind: ViolationKind
    node_id: str | None = None  # offending node
    related_id: str | None = None  # the other end: child, second parent, ...
    message: str


class TreeValidationError(ValueError):
    """Raised by ValidationResult.raise_for_violation()."""

    def __init__(self, violation: TreeViolation) -> None:
        super().__init__(violation.message)
        self.violation = violation


class ValidationResult(BaseModel):
    """Outcome of validating a candidate tree."""

    is_valid: bool
    tree: SemanticTree | None = None
    violation: TreeViolation | None = None

    @classmethod
    def accepted(cls, tree: SemanticTree) -> "ValidationResult":
        return cls(is_valid=True, tree=tree)

    @classmethod
    def rejected(
        cls,
        kind: ViolationKind,
        message: str,
        node_id: str | None = None,
        related_id: str | None = None,
    ) -> "ValidationResult":
        logger.info("rejected semantic tree: %s (%s)", message, kind.value)
        return cls(
            is_valid=False,
            violation=TreeViolation(
                kind=kind, node_id=node_id, related_id=related_id, message=message
            ),
        )

    def raise_for_violation(self) -> SemanticTree:
        """Return the accepted tree or raise TreeValidationError."""
        if self.tree is None:
            raise TreeValidationError(self.violation)
        return self.tree


def validate_tree(candidate: Mapping[str, Any] | SemanticTree) -> ValidationResult:
    """Check a candidate tree and return it as an accepted SemanticTree."""
    if isinstance(candidate, SemanticTree):
        candidate = candidate.model_dump(mode="json", by_alias=True, exclude_none=True)

    if not isinstance(candidate, Mapping):
        return ValidationResult.rejected(
            ViolationKind.missing_root, "tree must be a JSON object"
        )

    # 1. root
    nodes = candidate.get("nodes")
    if not isinstance(nodes, Mapping):
        return ValidationResult.rejected(
            ViolationKind.missing_root, "missing or invalid nodes"
        )
    root_id = candidate.get("rootId", candidate.get("root_id"))
    if not isinstance(root_id, str) or not root_id:
        return ValidationResult.rejected(ViolationKind.missing_root, "missing rootId")
    if root_id not in nodes:
        return ValidationResult.rejected(
            ViolationKind.missing_root,
            f"root node {root_id} not found in nodes",
            node_id=root_id,
        )

    # 2. required fields and per-node shape
    parsed: dict[str, SemanticNode] = {}
    for key, raw_node in nodes.items():
        result = _check_node_fields(key, raw_node)
        if isinstance(result, ValidationResult):
            return result
        parsed[key] = result

    # 3. dangling child references
    for node_id, node in parsed.items():
        for child_id in node.children or []:
            if child_id not in parsed:
                return ValidationResult.rejected(
                    ViolationKind.missing_child,
                    f"child {child_id} of node {node_id} not found in nodes",
                    node_id=node_id,
                    related_id=child_id,
                )

    # 4. cycles, starting from the root, then any detached remainder
    marks: dict[str, int] = {}
    for start in [root_id, *parsed]:
        if start in marks:
            continue
        back_edge = _find_cycle(start, parsed, marks)
        if back_edge is not None:
            parent_id, child_id = back_edge
            return ValidationResult.rejected(
                ViolationKind.cycle,
                f"cycle detected: node {parent_id} lists ancestor {child_id} as a child",
                node_id=child_id,
                related_id=parent_id,
            )

    # 5. single parent
    parent_of: dict[str, str] = {}
    for node_id, node in parsed.items():
        for child_id in node.children or []:
            if child_id in parent_of:
                return ValidationResult.rejected(
                    ViolationKind.multiple_parents,
                    f"node {child_id} is listed as a child of both "
                    f"{parent_of[child_id]} and {node_id}",
                    node_id=child_id,
                    related_id=node_id,
                )
            parent_of[child_id] = node_id

    tree = SemanticTree(root_id=root_id, nodes=parsed)

    # 6. reachability
    reachable = set(tree.iter_preorder())
    for node_id in parsed:
        if node_id not in reachable:
            return ValidationResult.rejected(
                ViolationKind.unreachable_node,
                f"node {node_id} is not reachable from root {root_id}",
                node_id=node_id,
            )

    return ValidationResult.accepted(tree)


def _check_node_fields(key: str, raw_node: Any) -> SemanticNode | ValidationResult:
    if not isinstance(raw_node, Mapping):
        return ValidationResult.rejected(
            ViolationKind.invalid_field, f"node {key} must be an object", node_id=key
        )

    for field in REQUIRED_NODE_FIELDS:
        value = raw_node.get(field)
        if value is None or value == "":
            return ValidationResult.rejected(
                ViolationKind.missing_field,
                f"node {key} missing required field '{field}'",
                node_id=key,
            )

    if raw_node["id"] != key:
        return ValidationResult.rejected(
            ViolationKind.invalid_field,
            f"node {key} has mismatched id {raw_node['id']!r}",
            node_id=key,
        )
    kind = raw_node["kind"]
    if not isinstance(kind, str) or kind not in {k.value for k in NodeKind}:
        return ValidationResult.rejected(
            ViolationKind.invalid_field,
            f"node {key} has unknown kind {kind!r}",
            node_id=key,
        )

    try:
        return SemanticNode.model_validate(raw_node)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return ValidationResult.rejected(
            ViolationKind.invalid_field,
            f"node {key} field '{location}': {first['msg']}",
            node_id=key,
        )


def _find_cycle(
    start: str,
    nodes: dict[str, SemanticNode],
    marks: dict[str, int],
) -> tuple[str, str] | None:
    """Iterative DFS; returns the (parent, child) back edge of a cycle."""
    marks[start] = _VISITING
    stack = [(start, iter(nodes[start].children or []))]
    while stack:
        node_id, pending = stack[-1]
        child_id = next(pending, None)
        if child_id is None:
            marks[node_id] = _DONE
            stack.pop()
            continue
        mark = marks.get(child_id)
        if mark == _VISITING:
            return node_id, child_id
        if mark is None:
            marks[child_id] = _VISITING
            stack.append((child_id, iter(nodes[child_id].children or [])))
    return None
