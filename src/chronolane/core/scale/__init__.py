"""Scale functionality: day/world/screen transforms and ruler markers."""

from chronolane.core.scale.models import Marker, ScaleInfo
from chronolane.core.scale.operations import (
    MARKER_ITERATION_LIMIT,
    MAX_SCALE_LEVEL,
    MIN_MARKER_SPACING,
    choose_scale_level,
    day_to_screen,
    day_to_screen_rounded,
    day_to_world,
    days_per_unit,
    format_marker_label,
    generate_markers,
    min_resize_width,
    scale_info,
    screen_to_day,
    screen_to_world,
    snap_to_unit,
    visible_day_range,
    visible_world_range,
    world_to_day,
    world_to_screen,
    world_to_screen_rounded,
    years_per_unit,
)

__all__ = [
    # Models
    "Marker",
    "ScaleInfo",
    # Constants
    "MIN_MARKER_SPACING",
    "MAX_SCALE_LEVEL",
    "MARKER_ITERATION_LIMIT",
    # Levels
    "choose_scale_level",
    "days_per_unit",
    "years_per_unit",
    "scale_info",
    # Transforms
    "day_to_world",
    "world_to_day",
    "world_to_screen",
    "screen_to_world",
    "day_to_screen",
    "screen_to_day",
    "world_to_screen_rounded",
    "day_to_screen_rounded",
    "visible_world_range",
    "visible_day_range",
    # Markers and snapping
    "generate_markers",
    "format_marker_label",
    "snap_to_unit",
    "min_resize_width",
]
