"""Environment-driven defaults for layout and viewport.

Values are read on every call so a host application can change its
environment (or .env file) between documents. Nothing is cached at module
level. Invalid values raise a pydantic ValidationError.
"""

import os

from dotenv import load_dotenv

from mindmap.models.layout import LayoutConfig, LayoutDirection
from mindmap.models.view_state import ZoomRange

# load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def get_layout_config() -> LayoutConfig:
    """Build the default LayoutConfig from MINDMAP_* environment variables."""
    return LayoutConfig(
        node_width=_env_float("MINDMAP_NODE_WIDTH", 200),
        node_height=_env_float("MINDMAP_NODE_HEIGHT", 60),
        horizontal_gap=_env_float("MINDMAP_HORIZONTAL_GAP", 80),
        vertical_gap=_env_float("MINDMAP_VERTICAL_GAP", 100),
        direction=LayoutDirection(os.getenv("MINDMAP_LAYOUT_DIRECTION", "TB").upper()),
    )


def get_zoom_range() -> ZoomRange:
    """Allowed viewport zoom interval, 0.1 to 2.0 unless overridden."""
    return ZoomRange(
        min_zoom=_env_float("MINDMAP_MIN_ZOOM", 0.1),
        max_zoom=_env_float("MINDMAP_MAX_ZOOM", 2.0),
    )
