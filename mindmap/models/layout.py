"""Layout parameters and layout output models."""

from enum import Enum

from pydantic import BaseModel, Field


class LayoutDirection(str, Enum):
    """Growth direction of the tree."""

    top_to_bottom = "TB"
    left_to_right = "LR"


class LayoutConfig(BaseModel):
    """Immutable parameters for one layout call.

    Invalid dimensions raise a ValidationError at construction time.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    node_width: float = Field(default=200, gt=0)
    node_height: float = Field(default=60, gt=0)
    horizontal_gap: float = Field(default=80, ge=0)  # between siblings
    vertical_gap: float = Field(default=100, ge=0)  # between levels
    direction: LayoutDirection = LayoutDirection.top_to_bottom


class Position(BaseModel):
    """A point in layout units."""

    model_config = {"frozen": True}

    x: float
    y: float


ORIGIN = Position(x=0, y=0)


class Bounds(BaseModel):
    """Axis-aligned bounding box of node centre points."""

    model_config = {"frozen": True}

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def center(self) -> Position:
        return Position(
            x=(self.min_x + self.max_x) / 2,
            y=(self.min_y + self.max_y) / 2,
        )

    @classmethod
    def of(cls, positions: dict[str, Position]) -> "Bounds":
        """Bounding box of a set of positions, all zero when empty."""
        if not positions:
            return cls(min_x=0, max_x=0, min_y=0, max_y=0)
        xs = [p.x for p in positions.values()]
        ys = [p.y for p in positions.values()]
        return cls(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))


class LayoutResult(BaseModel):
    """Positions per node id and their bounding box."""

    positions: dict[str, Position]
    bounds: Bounds
