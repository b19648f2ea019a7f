"""Tests for the scale engine.

Why these tests exist:
- The ruler must stay readable at every zoom, from days to billions of years
- Markers must never be emitted off screen or at degenerate zoom
- Snapping decides where click-created cards start
"""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from chronolane.core.calendar import from_ymd, parse
from chronolane.core.scale import (
    MAX_SCALE_LEVEL,
    MIN_MARKER_SPACING,
    choose_scale_level,
    day_to_screen,
    days_per_unit,
    format_marker_label,
    generate_markers,
    min_resize_width,
    scale_info,
    screen_to_day,
    screen_to_world,
    snap_to_unit,
    visible_day_range,
    visible_world_range,
    world_to_screen,
    world_to_screen_rounded,
)

positive_scales = st.floats(min_value=1e-12, max_value=1e6, allow_nan=False)


@pytest.mark.parametrize(
    ("level", "expected"),
    [(0, 1), (1, 30), (2, 365), (3, 3650), (4, 36500), (5, 365_000), (11, 365 * 10**9)],
    ids=["day", "month", "year", "decade", "century", "millennium", "billion-years"],
)
def test_days_per_unit(level, expected) -> None:
    assert days_per_unit(level) == expected


@pytest.mark.parametrize(
    ("px_per_day", "expected"),
    [(10.0, 0), (8.0, 0), (5.0, 1), (0.05, 2), (0.01, 3), (1e-8, 9)],
    ids=["default-scale", "exact-threshold", "months", "years", "decades", "deep-time"],
)
def test_choose_scale_level(px_per_day, expected) -> None:
    assert choose_scale_level(px_per_day) == expected


@pytest.mark.parametrize(
    "px_per_day",
    [0.0, -1.0, math.nan, 1e-30],
    ids=["zero", "negative", "nan", "beyond-last-level"],
)
def test_choose_scale_level_degenerate_caps(px_per_day) -> None:
    assert choose_scale_level(px_per_day) == MAX_SCALE_LEVEL


@given(positive_scales, positive_scales)
def test_level_monotone_in_scale(a, b) -> None:
    """PROPERTY: Zooming in never raises the scale level."""
    low, high = min(a, b), max(a, b)
    assert choose_scale_level(high) <= choose_scale_level(low)


@given(positive_scales)
def test_chosen_level_spacing_meets_minimum(px_per_day) -> None:
    level = choose_scale_level(px_per_day)
    if level < MAX_SCALE_LEVEL:
        assert px_per_day * days_per_unit(level) >= MIN_MARKER_SPACING
    if 0 < level < MAX_SCALE_LEVEL:
        assert px_per_day * days_per_unit(level - 1) < MIN_MARKER_SPACING


@pytest.mark.parametrize(
    ("level", "unit", "major"),
    [
        (0, "day", "month"),
        (2, "year", "decade"),
        (5, "millennium", "10k years"),
        (8, "1M years", "10M years"),
        (11, "1B years", "10B years"),
    ],
    ids=["day", "year", "millennium", "million", "billion"],
)
def test_scale_info_names(level, unit, major) -> None:
    info = scale_info(level)
    assert (info.unit_name, info.major_unit_name) == (unit, major)
    assert info.days_per_unit == days_per_unit(level)


def test_day_markers_one_per_day() -> None:
    markers = generate_markers(0, 10.0, 0.0, 100.0)
    assert [m.day_offset for m in markers] == list(range(11))
    assert [m.screen_position for m in markers] == [d * 10.0 for d in range(11)]
    assert markers[0].is_major  # 1970-01-01
    assert not markers[1].is_major


def test_month_markers_major_in_january() -> None:
    markers = generate_markers(1, 1.0, 0.0, 365.0)
    assert len(markers) == 13
    assert markers[0].day_offset == 0
    assert markers[-1].day_offset == parse("1971-01-01").day_offset
    assert [m.is_major for m in markers] == [True] + [False] * 11 + [True]
    assert markers[1].unit_index == 1970 * 12 + 1


def test_year_markers_major_every_decade() -> None:
    markers = generate_markers(2, 0.05, 0.0, 800.0)
    years = [m.unit_index for m in markers]
    assert years == list(range(1970, 2014))
    assert [y for y, m in zip(years, markers, strict=True) if m.is_major] == [
        1970,
        1980,
        1990,
        2000,
        2010,
    ]


def test_deep_time_markers() -> None:
    """CRITICAL: Markers 5 billion years before the epoch are exact and evenly spaced.

    Why: Unit starts are closed-form; stepping would drift at this range.
    """
    px_per_day = 1e-8
    level = choose_scale_level(px_per_day)
    world_left = parse("-5000000000-01-01").day_offset * px_per_day
    markers = generate_markers(level, px_per_day, -world_left + 400.0, 800.0)

    step = 10 ** (level - 2)
    assert markers
    assert all(m.unit_index % step == 0 for m in markers)
    assert all(from_ymd(m.unit_index, 1, 1).day_offset == m.day_offset for m in markers)
    gaps = [b.screen_position - a.screen_position for a, b in zip(markers, markers[1:])]
    assert all(gap >= MIN_MARKER_SPACING for gap in gaps)


@settings(deadline=None)
@given(
    st.integers(min_value=0, max_value=12),
    st.floats(min_value=1e-9, max_value=100.0),
    st.floats(min_value=-1e9, max_value=1e9),
    st.floats(min_value=1.0, max_value=2000.0),
)
def test_markers_within_viewport(level, px_per_day, pan, width) -> None:
    """PROPERTY: Every marker lies in [-1, width + 1], left to right."""
    markers = generate_markers(level, px_per_day, pan, width)
    positions = [m.screen_position for m in markers]
    assert all(-1.0 <= p <= width + 1.0 for p in positions)
    assert positions == sorted(positions)


@pytest.mark.parametrize(
    ("px_per_day", "pan", "width", "zoom"),
    [(0.0, 0.0, 800.0, 1.0), (-5.0, 0.0, 800.0, 1.0), (10.0, 0.0, 0.0, 1.0), (10.0, 0.0, 800.0, 0.0)],
    ids=["zero-scale", "negative-scale", "zero-width", "zero-zoom"],
)
def test_degenerate_inputs_produce_no_markers(px_per_day, pan, width, zoom) -> None:
    assert generate_markers(0, px_per_day, pan, width, zoom) == []


def test_format_marker_label() -> None:
    day = parse("2024-03-15").day_offset
    assert format_marker_label(day, 0) == "15/03/2024"
    assert format_marker_label(day, 2) == "2024 CE"


@pytest.mark.parametrize(
    ("day", "level", "expected"),
    [
        (10.4, 0, 10),
        (10.5, 0, 11),
        (parse("1970-03-15").day_offset, 1, parse("1970-03-01").day_offset),
        (parse("2024-06-01").day_offset, 2, parse("2024-01-01").day_offset),
        (parse("2024-06-01").day_offset, 3, parse("2020-01-01").day_offset),
        (parse("2024-06-01").day_offset, 4, parse("2000-01-01").day_offset),
        (parse("-4999-06-01").day_offset, 3, parse("-5000-01-01").day_offset),
    ],
    ids=["day-down", "day-half-up", "month", "year", "decade", "century", "bce-decade"],
)
def test_snap_to_unit(day, level, expected) -> None:
    assert snap_to_unit(day, level) == expected


@pytest.mark.parametrize(
    ("px_per_day", "expected"),
    [(10.0, 10.0), (5.0, 150.0), (0.05, 18.25), (0.0, 0.0)],
    ids=["day", "month", "year", "degenerate"],
)
def test_min_resize_width(px_per_day, expected) -> None:
    assert min_resize_width(px_per_day) == pytest.approx(expected)


@given(
    st.floats(min_value=-1e6, max_value=1e6),
    st.floats(min_value=-1e6, max_value=1e6),
    st.floats(min_value=0.01, max_value=100.0),
)
def test_screen_world_inverse(world, pan, zoom) -> None:
    screen = world_to_screen(world, pan, zoom)
    assert screen_to_world(screen, pan, zoom) == pytest.approx(world, rel=1e-9, abs=1e-6)


def test_day_screen_inverse() -> None:
    assert day_to_screen(10, 10.0, -50.0) == 50.0
    assert screen_to_day(50.0, 10.0, -50.0) == 10.0
    assert world_to_screen_rounded(10.5, 0.0) == 11
    assert world_to_screen_rounded(-10.5, 0.0) == -10


def test_visible_ranges() -> None:
    assert visible_world_range(-100.0, 800.0) == (100.0, 900.0)
    assert visible_day_range(10.0, -100.0, 800.0) == (10, 90)
    assert visible_world_range(0.0, 800.0, zoom=0.0) == (math.inf, -math.inf)
    assert visible_day_range(10.0, 0.0, 800.0, zoom=0.0) is None


@pytest.mark.parametrize("zoom", [math.inf, math.nan], ids=["infinite", "nan"])
def test_non_finite_zoom_gives_empty_range(zoom) -> None:
    assert visible_world_range(0.0, 800.0, zoom=zoom) == (math.inf, -math.inf)
    assert visible_day_range(10.0, 0.0, 800.0, zoom=zoom) is None
    assert generate_markers(0, 10.0, 0.0, 800.0, zoom=zoom) == []
