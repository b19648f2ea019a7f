"""Scale models: ruler markers and scale-level descriptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Marker:
    """One ruler tick, regenerated every render pass.

    Attributes:
        screen_position: Horizontal screen coordinate of the tick.
        unit_index: Day-offset (level 0), month count since year 0 (level 1),
            or the astronomical year starting the unit (level 2 and above).
        day_offset: Day-offset of the unit start.
        is_major: True for the larger grouping (month, year, decade, ...).
    """

    screen_position: float
    unit_index: int
    day_offset: int
    is_major: bool


@dataclass(frozen=True, slots=True)
class ScaleInfo:
    """Human-readable description of a scale level."""

    level: int
    unit_name: str
    major_unit_name: str
    days_per_unit: int
