"""Recompute pipeline and edit conversions.

Turns host records into positioned, lane-assigned entities, and turns
pointer edits (drags, resizes, clicks) back into canonical date texts.

Usage:
    result = compute_layout(records, DisplaySettings(), LayoutSettings())
    for change in result.changed:
        host.write_layer(change.identity, change.layer)

    span = dates_from_position(card.x + dx, card.width, display.time_scale)
"""

from __future__ import annotations

import logging
import re
import statistics
from collections.abc import Iterable, Sequence

from chronolane.config import DisplaySettings, LayoutSettings
from chronolane.core.calendar import (
    CalendarDate,
    FormatOptions,
    from_day_offset,
    parse,
    to_canonical_string,
)
from chronolane.core.layer import (
    TimelineColor,
    TimelineEntity,
    apply_assignments,
    assign,
    find_available_layer,
    layer_to_offset,
    offset_to_layer,
    sort_for_assignment,
)
from chronolane.core.scale import (
    choose_scale_level,
    day_to_world,
    days_per_unit,
    snap_to_unit,
    world_to_day,
)
from chronolane.core.viewport import CardRect, RenderPosition, ViewportState, render_positions
from chronolane.history import EditHistory, EntityState
from chronolane.layout.models import (
    DateSpan,
    FitSpan,
    LayoutResult,
    NewCardSpan,
    PositionedEntity,
    RawRecord,
    SkippedRecord,
)

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_layer(value: int | str | None) -> int | None:
    """Lane from a stored value; text keeps its leading integer, if any."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def parse_color(value: str | None) -> TimelineColor | None:
    if value is None:
        return None
    try:
        return TimelineColor(value.strip().lower())
    except ValueError:
        return None


def build_entities(
    records: Iterable[RawRecord], options: FormatOptions | None = None
) -> tuple[list[TimelineEntity], list[SkippedRecord]]:
    """Parse host records into entities.

    Records whose dates do not parse are skipped, never raised. Unknown
    colors and unreadable lanes are dropped silently.

    Args:
        records: Host records.
        options: Format options for display-form dates.

    Returns:
        Tuple of (entities, skipped) in input order.
    """
    entities: list[TimelineEntity] = []
    skipped: list[SkippedRecord] = []

    for record in records:
        start = parse(record.date_start_text, options)
        end = parse(record.date_end_text, options)
        reason = None
        if start is None:
            reason = f"invalid start date {record.date_start_text!r}"
        elif end is None:
            reason = f"invalid end date {record.date_end_text!r}"
        if reason is not None:
            logger.info("Skipping %r: %s", record.identity, reason)
            skipped.append(SkippedRecord(identity=record.identity, reason=reason))
            continue

        layer = parse_layer(record.layer)
        entities.append(
            TimelineEntity(
                identity=record.identity,
                date_start=start,
                date_end=end,
                assigned_layer=0 if layer is None else layer,
                preferred_layer=layer,
                color=parse_color(record.color),
            )
        )

    return entities, skipped


def position_entity(
    entity: TimelineEntity, time_scale: float, layer_spacing: float
) -> PositionedEntity:
    """World rectangle of an entity. Zero-length ranges are one day wide."""
    start = entity.date_start.day_offset
    duration = entity.date_end.day_offset - start
    return PositionedEntity(
        entity=entity,
        x=day_to_world(start, time_scale),
        y=layer_to_offset(entity.assigned_layer, layer_spacing),
        width=max(duration, 1) * time_scale,
        date_start=to_canonical_string(entity.date_start),
        date_end=to_canonical_string(entity.date_end),
    )


def compute_layout(
    records: Iterable[RawRecord],
    display: DisplaySettings | None = None,
    layout: LayoutSettings | None = None,
) -> LayoutResult:
    """Full recompute: parse, sort, assign lanes, position.

    Args:
        records: Host records.
        display: Display settings (defaults loaded from the environment).
        layout: Layout settings (defaults loaded from the environment).

    Returns:
        LayoutResult with entities in assignment order.
    """
    display = display or DisplaySettings()
    layout = layout or LayoutSettings()

    entities, skipped = build_entities(records, display.format_options())
    ordered = sort_for_assignment(entities)
    assignments = assign(ordered, search_floor=layout.layer_search_floor)
    placed = apply_assignments(ordered, assignments)

    logger.debug(
        "Laid out %d entities (%d skipped, %d lane changes)",
        len(placed),
        len(skipped),
        sum(1 for a in assignments if a.changed),
    )
    return LayoutResult(
        entities=[position_entity(e, display.time_scale, layout.layer_spacing) for e in placed],
        assignments=assignments,
        skipped=skipped,
    )


def render_cards(
    positioned: Iterable[PositionedEntity],
    camera: ViewportState,
    card_height: float,
    display: DisplaySettings | None = None,
) -> list[RenderPosition]:
    """Screen placement of laid-out cards, in input order.

    Cards narrower on screen than ``display.min_visible_px`` come back with
    ``visible=False``.
    """
    display = display or DisplaySettings()
    cards = [CardRect(p.x, p.y, p.width, card_height) for p in positioned]
    return render_positions(cards, camera, display.min_visible_px)


def new_history(layout: LayoutSettings | None = None) -> EditHistory[EntityState]:
    """Edit log for one editing surface, bounded by ``layout.history_limit``."""
    layout = layout or LayoutSettings()
    return EditHistory(max_entries=layout.history_limit)


def world_to_date(world_x: float, time_scale: float) -> CalendarDate:
    """Date under a world x, rounded to the nearest day."""
    return from_day_offset(float(world_to_day(world_x, time_scale)))


def dates_from_position(new_x: float, width: float, time_scale: float) -> DateSpan:
    """Dates for a card dragged to ``new_x``, keeping its width."""
    return dates_from_resize(new_x, width, time_scale)


def dates_from_resize(new_x: float, new_width: float, time_scale: float) -> DateSpan:
    """Dates for a card whose edges now sit at ``new_x`` and ``new_x + new_width``."""
    return DateSpan(
        date_start=to_canonical_string(world_to_date(new_x, time_scale)),
        date_end=to_canonical_string(world_to_date(new_x + new_width, time_scale)),
    )


def span_for_click(
    world_x: float,
    world_y: float,
    time_scale: float,
    placed: Sequence[TimelineEntity],
    layout: LayoutSettings | None = None,
) -> NewCardSpan:
    """Placement for a card created by clicking empty canvas.

    The start snaps to the unit containing the clicked day at the current
    scale level; the card spans ``new_card_units`` units and takes the
    nearest free lane to the clicked one.
    """
    layout = layout or LayoutSettings()
    level = choose_scale_level(time_scale)
    day_at_click = world_to_day(world_x, time_scale)
    start_day = snap_to_unit(float(day_at_click), level)
    end_day = start_day + days_per_unit(level) * layout.new_card_units

    start = CalendarDate(start_day)
    end = CalendarDate(end_day)
    target = offset_to_layer(world_y, layout.layer_spacing)
    layer = find_available_layer(
        target, start, end, placed, search_floor=layout.layer_search_floor
    )
    return NewCardSpan(
        start_day=start_day,
        end_day=end_day,
        layer=layer,
        date_start=to_canonical_string(start),
        date_end=to_canonical_string(end),
    )


def fit_span(positioned: Iterable[PositionedEntity], time_scale: float) -> FitSpan | None:
    """Day range of a selection and the median of the card centers.

    Returns:
        FitSpan, or None for an empty selection or a degenerate scale.
    """
    if not time_scale > 0:
        return None
    starts: list[float] = []
    ends: list[float] = []
    for item in positioned:
        starts.append(world_to_day(item.x, time_scale))
        ends.append(world_to_day(item.x + item.width, time_scale))
    if not starts:
        return None

    centers = [(s + e) / 2 for s, e in zip(starts, ends, strict=True)]
    return FitSpan(
        start_day=min(starts),
        end_day=max(ends),
        center_day=statistics.median(centers),
    )
