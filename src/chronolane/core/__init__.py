"""Core functionalities: stateless calendar, scale, layer, and viewport math.

Architecture Note:
    core/ contains pure functions over immutable values. Nothing here keeps
    state between calls or reads configuration; callers pass every parameter
    explicitly. For stateful services, see history/ and layout/.
"""

from chronolane.core.calendar import (
    YMD,
    CalendarDate,
    DateOrder,
    FormatOptions,
    Ordering,
    compare,
    format_for_level,
    from_day_offset,
    parse,
    to_canonical_string,
)
from chronolane.core.layer import (
    LayerAssignment,
    TimelineColor,
    TimelineEntity,
    assign,
    layer_to_offset,
    offset_to_layer,
    overlaps,
    sort_for_assignment,
)
from chronolane.core.scale import (
    Marker,
    ScaleInfo,
    choose_scale_level,
    generate_markers,
    min_resize_width,
    snap_to_unit,
)
from chronolane.core.viewport import (
    CardRect,
    ClampedBounds,
    RenderPosition,
    ViewportState,
    Visibility,
    WorldRange,
    clamped_bounds,
    classify,
    render_position,
    viewport_to_world_range,
)

__all__ = [
    # Calendar
    "CalendarDate",
    "YMD",
    "DateOrder",
    "FormatOptions",
    "Ordering",
    "parse",
    "from_day_offset",
    "compare",
    "format_for_level",
    "to_canonical_string",
    # Scale
    "Marker",
    "ScaleInfo",
    "choose_scale_level",
    "generate_markers",
    "snap_to_unit",
    "min_resize_width",
    # Layer
    "TimelineEntity",
    "TimelineColor",
    "LayerAssignment",
    "overlaps",
    "sort_for_assignment",
    "assign",
    "layer_to_offset",
    "offset_to_layer",
    # Viewport
    "ViewportState",
    "CardRect",
    "WorldRange",
    "Visibility",
    "ClampedBounds",
    "RenderPosition",
    "viewport_to_world_range",
    "classify",
    "clamped_bounds",
    "render_position",
]
