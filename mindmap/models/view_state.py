"""View state models: the interactive overlay on top of a semantic tree.

A ViewState is never modified in place. Transitions build a new instance
(see mindmap.state.view_model), so a reader holding a reference always sees
a consistent snapshot.
"""

from typing import Self

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from mindmap.models.layout import ORIGIN, Position


class ZoomRange(BaseModel):
    """Allowed zoom interval for the viewport."""

    model_config = {"frozen": True}

    min_zoom: float = Field(default=0.1, gt=0)
    max_zoom: float = Field(default=2.0, gt=0)

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        if self.min_zoom > self.max_zoom:
            raise ValueError("min_zoom must not exceed max_zoom")
        return self

    def clamp(self, zoom: float) -> float:
        return min(self.max_zoom, max(self.min_zoom, zoom))


class Viewport(BaseModel):
    """Pan and zoom of the canvas."""

    model_config = {"frozen": True}

    x: float = 0
    y: float = 0
    zoom: float = Field(default=1, gt=0)


class NodeViewState(BaseModel):
    """Visual state of one node."""

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    pos: Position = ORIGIN
    collapsed: bool = False
    locked: bool = False  # set once the user drags the node; auto-layout skips it
    color: str | None = None  # hex override
    icon: str | None = None


class ViewState(BaseModel):
    """Viewport plus one NodeViewState per tree node."""

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    viewport: Viewport = Viewport()
    node_state: dict[str, NodeViewState]

    def positions(self) -> dict[str, Position]:
        return {node_id: state.pos for node_id, state in self.node_state.items()}

    def locked_ids(self) -> set[str]:
        return {node_id for node_id, state in self.node_state.items() if state.locked}
