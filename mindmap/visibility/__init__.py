"""Render-set projection for the canvas."""

from mindmap.visibility.projector import (
    RenderEdge,
    RenderNode,
    VisibleGraph,
    project_visibility,
)

__all__ = [
    "RenderEdge",
    "RenderNode",
    "VisibleGraph",
    "project_visibility",
]
