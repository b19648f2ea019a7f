"""Layer functionality: overlap tests and greedy lane assignment."""

from chronolane.core.layer.models import LayerAssignment, TimelineColor, TimelineEntity
from chronolane.core.layer.operations import (
    DEFAULT_LAYER_SPACING,
    DEFAULT_SEARCH_FLOOR,
    apply_assignments,
    assign,
    find_available_layer,
    is_layer_busy,
    layer_to_offset,
    offset_to_layer,
    overlaps,
    search_bound,
    sort_for_assignment,
)

__all__ = [
    # Models
    "TimelineEntity",
    "TimelineColor",
    "LayerAssignment",
    # Constants
    "DEFAULT_LAYER_SPACING",
    "DEFAULT_SEARCH_FLOOR",
    # Operations
    "overlaps",
    "sort_for_assignment",
    "search_bound",
    "assign",
    "apply_assignments",
    "is_layer_busy",
    "find_available_layer",
    "layer_to_offset",
    "offset_to_layer",
]
