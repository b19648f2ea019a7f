"""Chronolane: timeline layout math for arbitrarily distant dates.

Usage:
    from chronolane import parse, compute_layout, RawRecord, ViewportState

    date = parse("5000 BCE-01-01")
    result = compute_layout([RawRecord("a.md", "1066-10-14", "1066-12-25")])

    camera = ViewportState(width=800, height=600, pan_x=-200, zoom=1.5)
    for item in result.entities:
        pos = render_position(CardRect(item.x, item.y, item.width), camera)
"""

import logging

__version__ = "0.1.0"

# Calendar
from chronolane.core.calendar import (
    YMD,
    CalendarDate,
    DateOrder,
    FormatOptions,
    Ordering,
    compare,
    format_for_level,
    from_day_offset,
    from_ymd,
    parse,
    to_canonical_string,
)

# Scale
from chronolane.core.scale import (
    Marker,
    ScaleInfo,
    choose_scale_level,
    generate_markers,
    min_resize_width,
    snap_to_unit,
)

# Layer
from chronolane.core.layer import (
    LayerAssignment,
    TimelineColor,
    TimelineEntity,
    assign,
    find_available_layer,
    layer_to_offset,
    offset_to_layer,
    sort_for_assignment,
)

# Viewport
from chronolane.core.viewport import (
    CardRect,
    RenderPosition,
    ViewportState,
    Visibility,
    WorldRange,
    clamped_bounds,
    classify,
    render_position,
    viewport_to_world_range,
)

# History
from chronolane.history import EditHistory, EditKind, EditLog, EntityState, HistoryEntry

# Layout
from chronolane.layout import (
    LayoutResult,
    PositionedEntity,
    RawRecord,
    SkippedRecord,
    compute_layout,
    dates_from_position,
    dates_from_resize,
    fit_span,
    new_history,
    render_cards,
    span_for_click,
)

# Config
from chronolane.config import DisplaySettings, LayoutSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Calendar
    "CalendarDate",
    "YMD",
    "DateOrder",
    "FormatOptions",
    "Ordering",
    "parse",
    "from_ymd",
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
    "sort_for_assignment",
    "assign",
    "find_available_layer",
    "layer_to_offset",
    "offset_to_layer",
    # Viewport
    "ViewportState",
    "CardRect",
    "WorldRange",
    "Visibility",
    "RenderPosition",
    "viewport_to_world_range",
    "classify",
    "clamped_bounds",
    "render_position",
    # History
    "EditLog",
    "EditHistory",
    "EditKind",
    "EntityState",
    "HistoryEntry",
    # Layout
    "RawRecord",
    "SkippedRecord",
    "PositionedEntity",
    "LayoutResult",
    "compute_layout",
    "dates_from_position",
    "dates_from_resize",
    "span_for_click",
    "fit_span",
    "render_cards",
    "new_history",
    # Config
    "DisplaySettings",
    "LayoutSettings",
]
