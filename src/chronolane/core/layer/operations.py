"""Lane assignment for date-ranged entities.

A single greedy left-to-right sweep: each entity takes its preferred lane when
free, otherwise the nearest free lane in the alternating order +1, -1, +2,
-2, ... from it. The result is deterministic and stays stable under small
edits to the entity set. It is not an optimal interval colouring.

Usage:
    ordered = sort_for_assignment(entities)
    assignments = assign(ordered)
    entities = apply_assignments(ordered, assignments)
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any

from chronolane.core.calendar import CalendarDate
from chronolane.core.layer.models import LayerAssignment, TimelineEntity

logger = logging.getLogger(__name__)

DEFAULT_LAYER_SPACING = 50.0
"""Vertical world distance between adjacent lanes."""

DEFAULT_SEARCH_FLOOR = 100
"""Minimum number of alternating offsets tried before giving up."""


def overlaps(start1: Any, end1: Any, start2: Any, end2: Any) -> bool:
    """Closed-interval overlap test; ranges that touch at an endpoint overlap."""
    return not (end1 < start2) and not (end2 < start1)


def sort_for_assignment(entities: Iterable[TimelineEntity]) -> list[TimelineEntity]:
    """Stable sort by start date, shorter ranges first on equal starts."""
    return sorted(entities, key=lambda e: (e.date_start.day_offset, e.date_end.day_offset))


def search_bound(count: int, floor: int = DEFAULT_SEARCH_FLOOR) -> int:
    return max(2 * count, floor)


def _candidate_layers(target: int, bound: int) -> Iterator[int]:
    yield target
    for step in range(1, bound):
        yield target + step
        yield target - step


def _first_free(target: int, bound: int, is_free: Callable[[int], bool]) -> int | None:
    for layer in _candidate_layers(target, bound):
        if is_free(layer):
            return layer
    return None


def is_layer_busy(
    layer: int,
    start: CalendarDate,
    end: CalendarDate,
    placed: Iterable[TimelineEntity],
    exclude: Hashable | None = None,
) -> bool:
    """Check whether an entity already on ``layer`` overlaps [start, end].

    Args:
        layer: Lane to test.
        start: Start of the candidate range.
        end: End of the candidate range.
        placed: Entities whose ``assigned_layer`` is authoritative.
        exclude: Identity to ignore, typically the entity being moved.
    """
    for entity in placed:
        if exclude is not None and entity.identity == exclude:
            continue
        if entity.assigned_layer != layer:
            continue
        if overlaps(start, end, entity.date_start, entity.date_end):
            return True
    return False


def find_available_layer(
    target: int,
    start: CalendarDate,
    end: CalendarDate,
    placed: Sequence[TimelineEntity],
    exclude: Hashable | None = None,
    search_floor: int = DEFAULT_SEARCH_FLOOR,
) -> int:
    """Nearest free lane to ``target`` for a single new or moved range.

    Falls back to ``target`` (accepting the overlap) when the bounded search
    finds nothing.
    """
    placed = list(placed)
    bound = search_bound(len(placed), search_floor)
    layer = _first_free(
        target, bound, lambda candidate: not is_layer_busy(candidate, start, end, placed, exclude)
    )
    if layer is None:
        logger.warning("No free layer within %d of %d, overlapping", bound, target)
        return target
    return layer


def assign(
    entities: Sequence[TimelineEntity], search_floor: int = DEFAULT_SEARCH_FLOOR
) -> list[LayerAssignment]:
    """Assign a lane to every entity, in the given order.

    The input is not mutated; merge the result back with apply_assignments.
    Each placed entity constrains the ones after it. Every entity receives a
    lane: when no free lane exists within the search bound it keeps its
    preferred lane and the assignment is flagged ``overlapping``.

    Args:
        entities: Entities, usually ordered by sort_for_assignment.
        search_floor: Minimum alternating search distance.

    Returns:
        One LayerAssignment per entity, in input order.
    """
    bound = search_bound(len(entities), search_floor)
    occupied: dict[int, list[tuple[CalendarDate, CalendarDate]]] = {}
    assignments: list[LayerAssignment] = []

    for entity in entities:
        start, end = entity.date_start, entity.date_end

        def is_free(layer: int) -> bool:
            return not any(overlaps(start, end, s, e) for s, e in occupied.get(layer, ()))

        target = entity.target_layer
        layer = _first_free(target, bound, is_free)
        overlapping = layer is None
        if layer is None:
            logger.warning(
                "No free layer within %d of %d for %r, overlapping", bound, target, entity.identity
            )
            layer = target

        occupied.setdefault(layer, []).append((start, end))
        assignments.append(
            LayerAssignment(
                identity=entity.identity,
                layer=layer,
                previous_layer=entity.assigned_layer,
                overlapping=overlapping,
            )
        )

    return assignments


def apply_assignments(
    entities: Iterable[TimelineEntity], assignments: Iterable[LayerAssignment]
) -> list[TimelineEntity]:
    """New entity values with ``assigned_layer`` taken from the assignments."""
    layers = {a.identity: a.layer for a in assignments}
    return [
        dataclasses.replace(entity, assigned_layer=layers[entity.identity])
        if entity.identity in layers
        else entity
        for entity in entities
    ]


def layer_to_offset(layer: int, spacing: float = DEFAULT_LAYER_SPACING) -> float:
    """Vertical world position of a lane. Positive lanes sit above lane 0."""
    return 0.0 - layer * spacing


def offset_to_layer(offset: float, spacing: float = DEFAULT_LAYER_SPACING) -> int:
    """Nearest lane to a vertical world position, e.g. where a card was dropped."""
    if not spacing > 0:
        return 0
    return math.floor(-offset / spacing + 0.5)
