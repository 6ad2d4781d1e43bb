"""Single-writer holder of one open mind map document.

Each operation computes the next document from the current one with the pure
transitions in ``view_model`` and ``relayout``, then installs it with a single
assignment. Observers only ever see whole committed documents, never a state
where, say, a node moved but is not yet locked.

Usage:
    session = MindMapSession(document)
    session.subscribe(CallbackSink(redraw))
    session.drag_node("node_3", 120.0, -40.0)
    session.auto_arrange()
"""

from __future__ import annotations

from mindmap.config import get_layout_config, get_zoom_range
from mindmap.layout.relayout import relayout
from mindmap.models.document import MindMapDocument
from mindmap.models.layout import LayoutConfig
from mindmap.models.semantic_tree import SemanticTree
from mindmap.models.view_state import ViewState, ZoomRange
from mindmap.state import view_model
from mindmap.state.sinks import StateChange, StateSink
from mindmap.state.view_model import MutationResult
from mindmap.utils.identifiers import utc_timestamp
from mindmap.visibility.projector import VisibleGraph, project_visibility


class MindMapSession:
    """Interactive editing session for one document."""

    def __init__(
        self,
        document: MindMapDocument,
        config: LayoutConfig | None = None,
        zoom_range: ZoomRange | None = None,
        sinks: list[StateSink] | None = None,
    ) -> None:
        self._config = config or get_layout_config()
        self._zoom_range = zoom_range or get_zoom_range()
        self._document = self._clamped(document)
        self._sinks: list[StateSink] = list(sinks or [])
        self._dirty = False

    @property
    def document(self) -> MindMapDocument:
        return self._document

    @property
    def tree(self) -> SemanticTree:
        return self._document.semantic

    @property
    def view(self) -> ViewState:
        return self._document.view

    @property
    def is_dirty(self) -> bool:
        """True when there are changes since the last mark_clean()."""
        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    def subscribe(self, sink: StateSink) -> None:
        self._sinks.append(sink)

    def unsubscribe(self, sink: StateSink) -> None:
        self._sinks.remove(sink)

    def drag_node(self, node_id: str, x: float, y: float) -> MutationResult:
        """Drag end: move the node and lock it."""
        return self._apply("drag_node", node_id, view_model.set_position(self.view, node_id, x, y))

    def toggle_node(self, node_id: str) -> MutationResult:
        return self._apply("toggle_node", node_id, view_model.toggle_collapsed(self.view, node_id))

    def style_node(
        self,
        node_id: str,
        color: str | None = None,
        icon: str | None = None,
    ) -> MutationResult:
        result = view_model.set_node_style(self.view, node_id, color=color, icon=icon)
        return self._apply("style_node", node_id, result)

    def set_viewport(self, x: float, y: float, zoom: float) -> ViewState:
        view = view_model.set_viewport(self.view, x, y, zoom, self._zoom_range)
        self._commit("set_viewport", None, view)
        return view

    def auto_arrange(self) -> ViewState:
        """Re-run layout for every unlocked node."""
        view = relayout(self.tree, self.view, self._config)
        self._commit("auto_arrange", None, view)
        return view

    def visible_graph(self, parent_only: bool = False) -> VisibleGraph:
        return project_visibility(self.tree, self.view, parent_only)

    def _clamped(self, document: MindMapDocument) -> MindMapDocument:
        """Bring an out-of-range zoom back into the allowed range."""
        viewport = document.view.viewport
        zoom = self._zoom_range.clamp(viewport.zoom)
        if zoom == viewport.zoom:
            return document
        view = document.view.model_copy(
            update={"viewport": viewport.model_copy(update={"zoom": zoom})}
        )
        return document.model_copy(update={"view": view})

    def _apply(self, action: str, node_id: str, result: MutationResult) -> MutationResult:
        if result.applied:
            self._commit(action, node_id, result.state)
        return result

    def _commit(self, action: str, node_id: str | None, view: ViewState) -> None:
        meta = self._document.meta.model_copy(update={"updated_at": utc_timestamp()})
        self._document = self._document.model_copy(update={"view": view, "meta": meta})
        self._dirty = True
        for sink in self._sinks:
            sink.append(StateChange(action=action, document=self._document, node_id=node_id))

    def __repr__(self) -> str:
        return f"MindMapSession(document_id={self._document.id!r}, dirty={self._dirty})"
