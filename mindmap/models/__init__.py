"""Core data models for the mind map."""

from mindmap.models.semantic_tree import (
    EvidenceRef,
    NodeKind,
    SemanticNode,
    SemanticTree,
)
from mindmap.models.layout import (
    ORIGIN,
    Bounds,
    LayoutConfig,
    LayoutDirection,
    LayoutResult,
    Position,
)
from mindmap.models.view_state import (
    NodeViewState,
    Viewport,
    ViewState,
    ZoomRange,
)
from mindmap.models.document import (
    DocumentMeta,
    MindMapDocument,
    PdfSource,
    Source,
    SourceType,
    StylePreset,
    TextSource,
    TopicSource,
)

__all__ = [
    # Semantic tree
    "EvidenceRef",
    "NodeKind",
    "SemanticNode",
    "SemanticTree",
    # Layout
    "ORIGIN",
    "Bounds",
    "LayoutConfig",
    "LayoutDirection",
    "LayoutResult",
    "Position",
    # View state
    "NodeViewState",
    "Viewport",
    "ViewState",
    "ZoomRange",
    # Documents
    "DocumentMeta",
    "MindMapDocument",
    "PdfSource",
    "Source",
    "SourceType",
    "StylePreset",
    "TextSource",
    "TopicSource",
]
