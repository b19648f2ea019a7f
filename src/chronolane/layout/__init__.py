"""Layout pipeline: host records in, positioned cards and lane changes out."""

from chronolane.layout.models import (
    DateSpan,
    FitSpan,
    LayoutResult,
    NewCardSpan,
    PositionedEntity,
    RawRecord,
    SkippedRecord,
)
from chronolane.layout.pipeline import (
    build_entities,
    compute_layout,
    dates_from_position,
    dates_from_resize,
    fit_span,
    new_history,
    parse_color,
    parse_layer,
    position_entity,
    render_cards,
    span_for_click,
    world_to_date,
)

__all__ = [
    # Models
    "RawRecord",
    "SkippedRecord",
    "PositionedEntity",
    "LayoutResult",
    "DateSpan",
    "NewCardSpan",
    "FitSpan",
    # Pipeline
    "build_entities",
    "compute_layout",
    "position_entity",
    "render_cards",
    "new_history",
    "parse_layer",
    "parse_color",
    # Edit conversions
    "world_to_date",
    "dates_from_position",
    "dates_from_resize",
    "span_for_click",
    "fit_span",
]
