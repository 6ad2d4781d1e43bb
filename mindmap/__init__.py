"""Mind map core - document model, validation, and layout engine."""

from mindmap.models import (
    LayoutConfig,
    LayoutDirection,
    MindMapDocument,
    NodeKind,
    NodeViewState,
    Position,
    SemanticNode,
    SemanticTree,
    Viewport,
    ViewState,
)
from mindmap.validation import (
    TreeValidationError,
    ValidationResult,
    ViolationKind,
    parse_generator_output,
    validate_tree,
)
from mindmap.layout import compute_layout, compute_subtree_widths, relayout
from mindmap.state import (
    MindMapSession,
    MutationResult,
    initialize_view_state,
    load_document,
    normalize_view_state,
    set_position,
    set_viewport,
    toggle_collapsed,
)
from mindmap.visibility import VisibleGraph, project_visibility

__all__ = [
    # Models
    "LayoutConfig",
    "LayoutDirection",
    "MindMapDocument",
    "NodeKind",
    "NodeViewState",
    "Position",
    "SemanticNode",
    "SemanticTree",
    "Viewport",
    "ViewState",
    # Validation
    "TreeValidationError",
    "ValidationResult",
    "ViolationKind",
    "parse_generator_output",
    "validate_tree",
    # Layout
    "compute_layout",
    "compute_subtree_widths",
    "relayout",
    # View state
    "MindMapSession",
    "MutationResult",
    "initialize_view_state",
    "load_document",
    "normalize_view_state",
    "set_position",
    "set_viewport",
    "toggle_collapsed",
    # Rendering
    "VisibleGraph",
    "project_visibility",
]
