"""Data models for the layout pipeline.

RawRecord is what a host hands in (date texts straight from storage);
LayoutResult is what comes back: positioned entities, the lane
assignments to persist, and the records that could not be placed.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from chronolane.core.layer import LayerAssignment, TimelineEntity


@dataclass(frozen=True, slots=True)
class RawRecord:
    """One host record before parsing.

    Attributes:
        identity: Stable host identity (e.g. a file path).
        date_start_text: Start date as stored.
        date_end_text: End date as stored.
        layer: Stored lane, as a number or the stored text.
        color: Stored color name, if any.
    """

    identity: Hashable
    date_start_text: str
    date_end_text: str
    layer: int | str | None = None
    color: str | None = None


@dataclass(frozen=True, slots=True)
class SkippedRecord:
    """A record left out of the layout, with the reason."""

    identity: Hashable
    reason: str


@dataclass(frozen=True, slots=True)
class PositionedEntity:
    """An entity with its world-space rectangle.

    Attributes:
        entity: The entity, with its assigned lane.
        x: World x of the start date.
        y: World y of the lane.
        width: World width, at least one day.
        date_start: Canonical start text.
        date_end: Canonical end text.
    """

    entity: TimelineEntity
    x: float
    y: float
    width: float
    date_start: str
    date_end: str

    @property
    def identity(self) -> Hashable:
        return self.entity.identity

    @property
    def layer(self) -> int:
        return self.entity.assigned_layer


@dataclass(slots=True)
class LayoutResult:
    """Output of one recompute pass."""

    entities: list[PositionedEntity] = field(default_factory=list)
    assignments: list[LayerAssignment] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)

    @property
    def changed(self) -> list[LayerAssignment]:
        """Assignments whose lane differs from the stored one."""
        return [a for a in self.assignments if a.changed]


@dataclass(frozen=True, slots=True)
class DateSpan:
    """Canonical start and end texts produced by a drag or resize."""

    date_start: str
    date_end: str


@dataclass(frozen=True, slots=True)
class NewCardSpan:
    """Placement for a click-created card."""

    start_day: int
    end_day: int
    layer: int
    date_start: str
    date_end: str


@dataclass(frozen=True, slots=True)
class FitSpan:
    """Day range covering a selection, and the day to center on."""

    start_day: float
    end_day: float
    center_day: float

    @property
    def length_days(self) -> float:
        return self.end_day - self.start_day
