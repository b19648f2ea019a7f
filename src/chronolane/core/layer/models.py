"""Layer models: date-ranged entities and their lane assignments.

Usage:
    entity = TimelineEntity(
        identity="notes/battle.md",
        date_start=parse("1066-10-14"),
        date_end=parse("1066-10-14"),
        preferred_layer=2,
    )
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

from chronolane.core.calendar import CalendarDate


class TimelineColor(Enum):
    """Card accent colors a record may declare."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


@dataclass(frozen=True, slots=True)
class TimelineEntity:
    """A date-ranged record placed on the timeline.

    Entities are rebuilt from host records on every recompute. ``date_start``
    is expected not to exceed ``date_end``; reversed ranges are tolerated but
    their placement is unspecified.
    """

    identity: Hashable
    date_start: CalendarDate
    date_end: CalendarDate
    assigned_layer: int = 0
    preferred_layer: int | None = None
    color: TimelineColor | None = None

    @property
    def target_layer(self) -> int:
        """Lane the assigner tries first (preferred layer, default 0)."""
        return 0 if self.preferred_layer is None else self.preferred_layer

    @property
    def duration_days(self) -> int:
        return self.date_end.day_offset - self.date_start.day_offset


@dataclass(frozen=True, slots=True)
class LayerAssignment:
    """Lane computed for one entity.

    Attributes:
        identity: Identity of the entity.
        layer: Assigned lane.
        previous_layer: Lane the entity held before this pass.
        overlapping: True when no free lane was found and the entity shares
            its preferred lane with an overlapping entity.
    """

    identity: Hashable
    layer: int
    previous_layer: int
    overlapping: bool = False

    @property
    def changed(self) -> bool:
        return self.layer != self.previous_layer
