"""Viewport functionality: world-space visibility, clamping, and render positions."""

from chronolane.core.viewport.models import (
    CardRect,
    ClampedBounds,
    RenderPosition,
    ViewportState,
    Visibility,
    WorldRange,
)
from chronolane.core.viewport.operations import (
    MIN_VISIBLE_PX,
    clamped_bounds,
    classify,
    filter_visible,
    render_position,
    render_positions,
    screen_to_world_point,
    viewport_to_world_range,
    world_to_screen_point,
)

__all__ = [
    # Models
    "ViewportState",
    "CardRect",
    "WorldRange",
    "Visibility",
    "ClampedBounds",
    "RenderPosition",
    # Operations
    "MIN_VISIBLE_PX",
    "viewport_to_world_range",
    "classify",
    "clamped_bounds",
    "render_position",
    "render_positions",
    "filter_visible",
    "screen_to_world_point",
    "world_to_screen_point",
]
