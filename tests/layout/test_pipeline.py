"""Tests for the layout pipeline.

Why these tests exist:
- Host records arrive as raw text; bad ones must be skipped, not raised
- World positions are what the renderer and the hit tests agree on
- Drags, resizes and clicks are written back as canonical date text
"""

import math

import pytest

from chronolane.config import DisplaySettings, LayoutSettings
from chronolane.core.layer import TimelineColor
from chronolane.core.viewport import ViewportState
from chronolane.layout import (
    RawRecord,
    build_entities,
    compute_layout,
    dates_from_position,
    dates_from_resize,
    fit_span,
    new_history,
    parse_layer,
    render_cards,
    span_for_click,
    world_to_date,
)

DISPLAY = DisplaySettings(time_scale=10.0)
LAYOUT = LayoutSettings(layer_spacing=50.0, new_card_units=3)


def test_compute_layout_positions_and_lanes(records) -> None:
    result = compute_layout(records, DISPLAY, LAYOUT)

    assert [e.identity for e in result.entities] == ["a.md", "b.md", "c.md"]
    assert [e.layer for e in result.entities] == [0, 1, -1]
    assert [e.y for e in result.entities] == [0.0, -50.0, 50.0]
    first = result.entities[0]
    assert first.x == 19723 * 10.0
    assert first.width == 9 * 10.0
    assert (first.date_start, first.date_end) == ("2024-01-01", "2024-01-10")


def test_compute_layout_reports_skipped(records) -> None:
    result = compute_layout(records, DISPLAY, LAYOUT)
    assert len(result.skipped) == 1
    assert result.skipped[0].identity == "broken.md"
    assert "invalid start date" in result.skipped[0].reason


def test_changed_lists_only_moved_lanes(records) -> None:
    result = compute_layout(records, DISPLAY, LAYOUT)
    assert [(a.identity, a.layer) for a in result.changed] == [("b.md", 1), ("c.md", -1)]


def test_single_day_card_has_minimum_width() -> None:
    result = compute_layout([RawRecord("d.md", "2024-01-01", "2024-01-01")], DISPLAY, LAYOUT)
    assert result.entities[0].width == 10.0


def test_stored_lane_and_color_carried() -> None:
    records = [RawRecord("a.md", "2024-01-01", "2024-01-10", layer="4", color="Red")]
    entities, skipped = build_entities(records)
    assert skipped == []
    assert entities[0].preferred_layer == 4
    assert entities[0].assigned_layer == 4
    assert entities[0].color is TimelineColor.RED


def test_invalid_end_date_skipped() -> None:
    entities, skipped = build_entities([RawRecord("a.md", "2024-01-01", "2024-02-30")])
    assert entities == []
    assert skipped[0].reason == "invalid end date '2024-02-30'"


def test_unknown_color_dropped() -> None:
    entities, _ = build_entities([RawRecord("a.md", "2024-01-01", "2024-01-10", color="purple")])
    assert entities[0].color is None


def test_display_form_dates_follow_settings() -> None:
    display = DisplaySettings(time_scale=10.0, date_order="MM/DD/YYYY")
    result = compute_layout([RawRecord("a.md", "03/15/2024", "03/20/2024")], display, LAYOUT)
    assert result.entities[0].date_start == "2024-03-15"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(3, 3), ("3", 3), ("3abc", 3), (" -2", -2), ("abc", None), (None, None), (True, None)],
    ids=["int", "text", "trailing-text", "negative", "garbage", "missing", "bool"],
)
def test_parse_layer(value, expected) -> None:
    assert parse_layer(value) == expected


@pytest.mark.parametrize(
    ("world_x", "expected"),
    [(0.0, "1970-01-01"), (100.0, "1970-01-11"), (-10.0, "1969-12-31"), (104.0, "1970-01-11")],
    ids=["epoch", "positive", "negative", "rounds-to-nearest"],
)
def test_world_to_date(world_x, expected) -> None:
    from chronolane.core.calendar import to_canonical_string

    assert to_canonical_string(world_to_date(world_x, 10.0)) == expected


@pytest.mark.parametrize(
    ("x", "width", "start", "end"),
    [(0.0, 100.0, "1970-01-01", "1970-01-11"), (0.0, 3650.0, "1970-01-01", "1971-01-01")],
    ids=["ten-days", "one-year"],
)
def test_dates_from_resize(x, width, start, end) -> None:
    span = dates_from_resize(x, width, 10.0)
    assert (span.date_start, span.date_end) == (start, end)


def test_dates_from_position_keeps_width() -> None:
    span = dates_from_position(105.0, 90.0, 10.0)
    assert (span.date_start, span.date_end) == ("1970-01-12", "1970-01-21")


def test_span_for_click_snaps_and_uses_clicked_lane() -> None:
    span = span_for_click(105.0, -50.0, 10.0, [], LAYOUT)
    assert (span.start_day, span.end_day) == (11, 14)
    assert span.layer == 1
    assert (span.date_start, span.date_end) == ("1970-01-12", "1970-01-15")


def test_span_for_click_avoids_occupied_lane(make_entity) -> None:
    placed = [make_entity("p.md", "1970-01-12", "1970-01-13", assigned=1)]
    assert span_for_click(105.0, -50.0, 10.0, placed, LAYOUT).layer == 2


def test_span_for_click_month_level() -> None:
    span = span_for_click(45.0, 0.0, 1.0, [], LAYOUT)
    assert span.start_day == 31  # 1970-02-01
    assert span.end_day == 31 + 3 * 30


def test_fit_span_median_center() -> None:
    records = [
        RawRecord("a.md", "2024-01-01", "2024-01-10"),
        RawRecord("b.md", "2024-01-05", "2024-01-20"),
        RawRecord("c.md", "2024-02-01", "2024-02-03"),
    ]
    result = compute_layout(records, DISPLAY, LAYOUT)
    fit = fit_span(result.entities, DISPLAY.time_scale)
    assert (fit.start_day, fit.end_day) == (19723.0, 19756.0)
    assert fit.center_day == 19734.5
    assert fit.length_days == 33.0


def test_fit_span_empty_or_degenerate() -> None:
    assert fit_span([], 10.0) is None
    result = compute_layout([RawRecord("a.md", "2024-01-01", "2024-01-10")], DISPLAY, LAYOUT)
    assert fit_span(result.entities, 0.0) is None


@pytest.mark.parametrize(
    ("x", "width"),
    [(math.nan, 100.0), (0.0, math.inf), (-math.inf, 100.0)],
    ids=["nan-x", "infinite-width", "negative-infinite-x"],
)
def test_non_finite_pointer_input_does_not_raise(x, width) -> None:
    span = dates_from_resize(x, width, 10.0)
    assert span.date_start
    assert span.date_end


def test_world_to_date_overflowing_day_is_clamped() -> None:
    from chronolane.core.calendar import MAX_ABS_YEAR

    assert world_to_date(1e300, 1e-300).year == MAX_ABS_YEAR


def test_render_cards_uses_min_visible_px() -> None:
    result = compute_layout([RawRecord("a.md", "1970-01-02", "1970-01-02")], DISPLAY, LAYOUT)
    camera = ViewportState(width=800, height=600, pan_y=100.0)

    hidden = render_cards(result.entities, camera, 40.0, DisplaySettings(min_visible_px=15.0))
    shown = render_cards(result.entities, camera, 40.0, DisplaySettings(min_visible_px=5.0))
    assert [p.visible for p in hidden] == [False]
    assert [p.visible for p in shown] == [True]
    assert (shown[0].x, shown[0].width, shown[0].height) == (10.0, 10.0, 40.0)


def test_new_history_bounded_by_settings() -> None:
    history = new_history(LayoutSettings(history_limit=2))
    assert history.max_entries == 2
