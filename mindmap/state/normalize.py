"""Normalization of persisted view state and documents on load.

Persisted view entries come from several schema generations. Older ones
stored the node position under ``position`` instead of ``pos``; some have no
position at all. Loading never fails because of a single bad view entry:
the entry is normalized and the rest of the document loads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from mindmap.config import get_layout_config, get_zoom_range
from mindmap.layout.tree_layout import compute_layout
from mindmap.models.document import MindMapDocument
from mindmap.models.layout import ORIGIN, LayoutConfig, Position
from mindmap.models.semantic_tree import SemanticTree
from mindmap.models.view_state import NodeViewState, Viewport, ViewState, ZoomRange
from mindmap.state.view_model import initialize_view_state
from mindmap.validation.tree_validator import TreeViolation, validate_tree

logger = logging.getLogger(__name__)

POSITION_KEY = "pos"
LEGACY_POSITION_KEY = "position"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce_position(value: Any) -> Position | None:
    if isinstance(value, Position):
        return value
    if isinstance(value, Mapping) and _is_number(value.get("x")) and _is_number(value.get("y")):
        return Position(x=value["x"], y=value["y"])
    return None


def _normalize_viewport(raw: Any, zoom_range: ZoomRange) -> Viewport:
    if not isinstance(raw, Mapping):
        return Viewport()
    x = raw.get("x") if _is_number(raw.get("x")) else 0
    y = raw.get("y") if _is_number(raw.get("y")) else 0
    zoom = raw.get("zoom") if _is_number(raw.get("zoom")) and raw["zoom"] > 0 else 1
    return Viewport(x=x, y=y, zoom=zoom_range.clamp(zoom))


def _normalize_entry(node_id: str, raw: Mapping[str, Any]) -> NodeViewState:
    position = _coerce_position(raw.get(POSITION_KEY))
    if position is None:
        position = _coerce_position(raw.get(LEGACY_POSITION_KEY))
        if position is not None:
            logger.debug("migrated legacy position field for node %s", node_id)
    if position is None:
        logger.debug("node %s has no usable position, defaulting to origin", node_id)
        position = ORIGIN

    color = raw.get("color")
    icon = raw.get("icon")
    return NodeViewState(
        pos=position,
        collapsed=raw.get("collapsed") is True,
        locked=raw.get("locked") is True,
        color=color if isinstance(color, str) else None,
        icon=icon if isinstance(icon, str) else None,
    )


def normalize_view_state(
    raw: Mapping[str, Any] | ViewState | None,
    tree: SemanticTree,
    config: LayoutConfig | None = None,
    zoom_range: ZoomRange | None = None,
) -> ViewState:
    """Make a persisted view state consistent with ``tree``.

    Every tree node ends up with exactly one entry. Entries for ids that are
    not in the tree are pruned. Tree nodes without an entry get the freshly
    computed layout position.
    """
    if raw is None:
        return initialize_view_state(tree, config)
    if isinstance(raw, ViewState):
        raw = raw.model_dump(by_alias=True)
    elif not isinstance(raw, Mapping):
        raw = {}

    zoom_range = zoom_range or get_zoom_range()
    viewport = _normalize_viewport(raw.get("viewport"), zoom_range)

    entries = raw.get("nodeState", raw.get("node_state"))
    if not isinstance(entries, Mapping):
        entries = {}

    stale = [node_id for node_id in entries if node_id not in tree.nodes]
    if stale:
        logger.debug("pruning %d stale view entries: %s", len(stale), ", ".join(stale))

    fresh: dict[str, Position] | None = None
    node_state: dict[str, NodeViewState] = {}
    for node_id in tree.nodes:
        if node_id in entries:
            entry = entries[node_id]
            node_state[node_id] = _normalize_entry(
                node_id, entry if isinstance(entry, Mapping) else {}
            )
            continue
        if fresh is None:
            fresh = compute_layout(tree, config or get_layout_config()).positions
        node_state[node_id] = NodeViewState(pos=fresh.get(node_id, ORIGIN))

    return ViewState(viewport=viewport, node_state=node_state)


@dataclass(frozen=True)
class DocumentLoadResult:
    """Outcome of loading a persisted document."""

    document: MindMapDocument | None = None
    violation: TreeViolation | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None


def load_document(
    payload: Mapping[str, Any],
    config: LayoutConfig | None = None,
    zoom_range: ZoomRange | None = None,
) -> DocumentLoadResult:
    """Validate the tree of a persisted document and normalize its view."""
    validation = validate_tree(payload.get("semantic"))
    if not validation.is_valid:
        return DocumentLoadResult(
            violation=validation.violation,
            error=validation.violation.message,
        )

    tree = validation.tree
    raw_view = payload.get("view", payload.get("viewState"))
    view = normalize_view_state(raw_view, tree, config, zoom_range)

    fields = {key: value for key, value in payload.items() if key not in ("view", "viewState")}
    fields["semantic"] = tree
    fields["view"] = view
    try:
        document = MindMapDocument.model_validate(fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        return DocumentLoadResult(error=f"invalid document field '{location}': {first['msg']}")
    return DocumentLoadResult(document=document)
