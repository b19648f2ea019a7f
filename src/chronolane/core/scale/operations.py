"""Scale operations: coordinate transforms, scale levels, markers, snapping.

Three coordinate spaces are involved:
- day: integer day-offset from 1970-01-01 (fractional while dragging)
- world: ``day * px_per_day``, independent of the camera
- screen: ``world * zoom + pan``

On the time axis the zoom is folded into ``px_per_day`` and the camera only
translates, so ``zoom`` defaults to 1. Multiplying a large world coordinate
by a large zoom would compound precision loss.

Usage:
    level = choose_scale_level(px_per_day=0.05)
    markers = generate_markers(level, 0.05, pan=-1200.0, viewport_width=800)
    start = snap_to_unit(day=19_000, level=level)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

from chronolane.core.calendar import CalendarDate, FormatOptions, format_for_level
from chronolane.core.calendar.julian import civil_to_day_offset, day_offset_to_civil
from chronolane.core.scale.models import Marker, ScaleInfo

logger = logging.getLogger(__name__)

MIN_MARKER_SPACING = 8.0
"""Smallest legible distance between adjacent markers, in pixels."""

MAX_SCALE_LEVEL = 20
MARKER_ITERATION_LIMIT = 10_000
MARKER_MARGIN = 1.0

_BASE_DAYS_PER_UNIT = (1, 30, 365, 3650, 36500)
_UNIT_NAMES = (
    ("day", "month"),
    ("month", "year"),
    ("year", "decade"),
    ("decade", "century"),
    ("century", "millennium"),
)


# Scale levels


def days_per_unit(level: int) -> int:
    """Approximate days in one marker unit at a level.

    Levels 0-4 are day, month, year, decade, century; beyond that each level
    is ten times the previous one (365 * 10**(level - 2)).
    """
    level = max(level, 0)
    if level < len(_BASE_DAYS_PER_UNIT):
        return _BASE_DAYS_PER_UNIT[level]
    return 365 * 10 ** (level - 2)


def years_per_unit(level: int) -> int:
    """Calendar years per unit for levels 2 and above."""
    return 10 ** max(level - 2, 0)


def choose_scale_level(px_per_day: float) -> int:
    """Smallest level whose markers are at least MIN_MARKER_SPACING apart.

    Args:
        px_per_day: Pixels per day at the current zoom.

    Returns:
        Scale level in [0, MAX_SCALE_LEVEL]. Zero, negative, or NaN input
        yields MAX_SCALE_LEVEL.
    """
    if math.isnan(px_per_day) or px_per_day <= 0:
        logger.debug("Degenerate px_per_day=%r, using level %d", px_per_day, MAX_SCALE_LEVEL)
        return MAX_SCALE_LEVEL

    for level in range(MAX_SCALE_LEVEL):
        if px_per_day * days_per_unit(level) >= MIN_MARKER_SPACING:
            return level

    logger.debug("No level fits px_per_day=%r, capping at %d", px_per_day, MAX_SCALE_LEVEL)
    return MAX_SCALE_LEVEL


def _year_unit_name(years: int) -> str:
    if years == 1_000:
        return "millennium"
    if years < 1_000_000:
        return f"{years // 1_000}k years"
    if years < 1_000_000_000:
        return f"{years // 1_000_000}M years"
    return f"{years // 1_000_000_000}B years"


def scale_info(level: int) -> ScaleInfo:
    """Unit names and size for a scale level."""
    level = max(level, 0)
    if level < len(_UNIT_NAMES):
        unit, major = _UNIT_NAMES[level]
    else:
        years = years_per_unit(level)
        unit = _year_unit_name(years)
        major = _year_unit_name(years * 10)
    return ScaleInfo(
        level=level,
        unit_name=unit,
        major_unit_name=major,
        days_per_unit=days_per_unit(level),
    )


# Coordinate transforms


def day_to_world(day: float, px_per_day: float) -> float:
    return day * px_per_day


def world_to_day(world: float, px_per_day: float) -> float:
    """Inverse of day_to_world. Degenerate scales map everything to day 0."""
    if px_per_day <= 0:
        return 0.0
    return world / px_per_day


def world_to_screen(world: float, pan: float, zoom: float = 1.0) -> float:
    return world * zoom + pan


def screen_to_world(screen: float, pan: float, zoom: float = 1.0) -> float:
    """Inverse of world_to_screen. Degenerate zoom maps everything to 0."""
    if zoom <= 0:
        return 0.0
    return (screen - pan) / zoom


def day_to_screen(day: float, px_per_day: float, pan: float, zoom: float = 1.0) -> float:
    return world_to_screen(day_to_world(day, px_per_day), pan, zoom)


def screen_to_day(screen: float, px_per_day: float, pan: float, zoom: float = 1.0) -> float:
    return world_to_day(screen_to_world(screen, pan, zoom), px_per_day)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def world_to_screen_rounded(world: float, pan: float, zoom: float = 1.0) -> int:
    """Pixel-aligned screen coordinate for rendering."""
    return _round_half_up(world_to_screen(world, pan, zoom))


def day_to_screen_rounded(day: float, px_per_day: float, pan: float, zoom: float = 1.0) -> int:
    return _round_half_up(day_to_screen(day, px_per_day, pan, zoom))


def visible_world_range(pan: float, viewport_width: float, zoom: float = 1.0) -> tuple[float, float]:
    """World coordinates of the left and right viewport edges.

    A zero, negative, or non-finite zoom yields the empty range (inf, -inf).
    """
    if not (zoom > 0 and math.isfinite(zoom)):
        return math.inf, -math.inf
    return (0.0 - pan) / zoom, (viewport_width - pan) / zoom


def visible_day_range(
    px_per_day: float, pan: float, viewport_width: float, zoom: float = 1.0
) -> tuple[int, int] | None:
    """Whole days covering the viewport, or None when nothing is visible."""
    if not px_per_day > 0 or not zoom > 0 or not viewport_width > 0:
        return None
    world_left, world_right = visible_world_range(pan, viewport_width, zoom)
    start = world_left / px_per_day
    end = world_right / px_per_day
    if not (math.isfinite(start) and math.isfinite(end)):
        return None
    return math.floor(start), math.ceil(end)


# Markers


@dataclass(frozen=True, slots=True)
class _Tier:
    """Closed-form description of the units at one scale level."""

    first: int
    last: int
    start_of: Callable[[int], int]
    index_of: Callable[[int], int]
    major_of: Callable[[int], bool]


def _day_tier(start_day: int, end_day: int) -> _Tier:
    return _Tier(
        first=start_day,
        last=end_day,
        start_of=lambda day: day,
        index_of=lambda day: day,
        major_of=lambda day: day_offset_to_civil(day)[2] == 1,
    )


def _month_tier(start_day: int, end_day: int) -> _Tier:
    start_year, start_month, _ = day_offset_to_civil(start_day)
    end_year, end_month, _ = day_offset_to_civil(end_day)

    def start_of(months: int) -> int:
        year, month0 = divmod(months, 12)
        return civil_to_day_offset(year, month0 + 1, 1)

    return _Tier(
        first=start_year * 12 + start_month - 1,
        last=end_year * 12 + end_month - 1,
        start_of=start_of,
        index_of=lambda months: months,
        major_of=lambda months: months % 12 == 0,
    )


def _year_tier(start_day: int, end_day: int, level: int) -> _Tier:
    step = years_per_unit(level)
    start_year = day_offset_to_civil(start_day)[0]
    end_year = day_offset_to_civil(end_day)[0]
    return _Tier(
        first=start_year // step,
        last=end_year // step + 1,
        start_of=lambda unit: civil_to_day_offset(unit * step, 1, 1),
        index_of=lambda unit: unit * step,
        major_of=lambda unit: unit % 10 == 0,
    )


def _tier_for_level(level: int, start_day: int, end_day: int) -> _Tier:
    if level <= 0:
        return _day_tier(start_day, end_day)
    if level == 1:
        return _month_tier(start_day, end_day)
    return _year_tier(start_day, end_day, level)


def generate_markers(
    level: int,
    px_per_day: float,
    pan: float,
    viewport_width: float,
    zoom: float = 1.0,
) -> list[Marker]:
    """Markers for every unit start visible in the viewport.

    Level 0 places one marker per day (major on the 1st of the month),
    level 1 one per month (major in January), level 2 one per year (major
    on multiples of 10), and level L >= 3 one per 10**(L-2) years (major on
    multiples of ten units). Unit starts are computed in closed form, so
    there is no accumulated drift over long spans.

    Args:
        level: Scale level, usually from choose_scale_level.
        px_per_day: Pixels per day at the current zoom.
        pan: Horizontal camera translation in pixels.
        viewport_width: Width of the render surface in pixels.
        zoom: Extra multiplicative zoom (1 on the time axis).

    Returns:
        Markers ordered left to right, each within
        [-MARKER_MARGIN, viewport_width + MARKER_MARGIN]. Empty for degenerate
        input.
    """
    day_range = visible_day_range(px_per_day, pan, viewport_width, zoom)
    if day_range is None:
        return []

    tier = _tier_for_level(level, *day_range)
    count = tier.last - tier.first + 1
    if count > MARKER_ITERATION_LIMIT:
        logger.debug(
            "Level %d spans %d units, truncating to %d", level, count, MARKER_ITERATION_LIMIT
        )
        count = MARKER_ITERATION_LIMIT

    # Subtract the viewport's left edge before multiplying by zoom
    world_left = (0.0 - pan) / zoom
    low = -MARKER_MARGIN
    high = viewport_width + MARKER_MARGIN

    markers: list[Marker] = []
    for unit in range(tier.first, tier.first + count):
        day = tier.start_of(unit)
        screen = (day * px_per_day - world_left) * zoom
        if low <= screen <= high:
            markers.append(
                Marker(
                    screen_position=screen,
                    unit_index=tier.index_of(unit),
                    day_offset=day,
                    is_major=tier.major_of(unit),
                )
            )
    return markers


def format_marker_label(day: int, level: int, options: FormatOptions | None = None) -> str:
    """Ruler label for a marker's unit start."""
    return format_for_level(CalendarDate(day), level, options)


# Snapping


def snap_to_unit(day: float, level: int) -> int:
    """Start of the unit at ``level`` that contains ``day``.

    Level 0 snaps to the nearest whole day; higher levels snap to the 1st of
    the month, January 1st, or January 1st of the decade/century/... start.
    """
    whole = _round_half_up(day) if isinstance(day, float) else int(day)
    if level <= 0:
        return whole

    year, month, _ = day_offset_to_civil(whole)
    if level == 1:
        return civil_to_day_offset(year, month, 1)
    step = years_per_unit(level)
    return civil_to_day_offset((year // step) * step, 1, 1)


def min_resize_width(px_per_day: float) -> float:
    """Narrowest legal card width in world pixels: one unit at the current level."""
    if not (px_per_day > 0 and math.isfinite(px_per_day)):
        return 0.0
    return days_per_unit(choose_scale_level(px_per_day)) * px_per_day
