"""Precision-safe visibility and clamping of world-space cards.

``screen = world * zoom + pan`` loses precision when both the world coordinate
and the zoom are large, because the product exceeds what a double can hold
exactly. Cards then vanish or jump. Visibility is therefore decided in world
space: only the two viewport edges are converted, by division. Screen
coordinates are produced last, after subtracting the viewport's left edge, so
every multiplied operand is small.

Usage:
    camera = ViewportState(width=800, height=600, pan_x=-1200.0, zoom=1.0)
    world = viewport_to_world_range(camera.pan_x, camera.zoom, camera.width)
    classify(card, world)                 # Visibility.CLIPPED_LEFT
    render_position(card, camera)         # small screen coordinates
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from chronolane.core.viewport.models import (
    CardRect,
    ClampedBounds,
    RenderPosition,
    ViewportState,
    Visibility,
    WorldRange,
)

MIN_VISIBLE_PX = 15.0
"""Cards narrower than this on screen are not drawn."""


def viewport_to_world_range(pan: float, zoom: float, viewport_width: float) -> WorldRange:
    """World interval between the viewport edges, ``(edge - pan) / zoom``.

    Zero, negative, or non-finite zoom yields an empty range, against which
    every card is fully outside.
    """
    if not (zoom > 0 and math.isfinite(zoom)):
        return WorldRange.empty()
    left = (0.0 - pan) / zoom
    right = (viewport_width - pan) / zoom
    return WorldRange(left, right)


def classify(card: CardRect, world_range: WorldRange) -> Visibility:
    """Compare card edges against the viewport edges in world space."""
    if world_range.is_empty():
        return Visibility.FULLY_OUTSIDE
    if card.right < world_range.left or card.left > world_range.right:
        return Visibility.FULLY_OUTSIDE

    clipped_left = card.left < world_range.left
    clipped_right = card.right > world_range.right
    if clipped_left and clipped_right:
        return Visibility.CLIPPED_BOTH
    if clipped_left:
        return Visibility.CLIPPED_LEFT
    if clipped_right:
        return Visibility.CLIPPED_RIGHT
    return Visibility.FULLY_INSIDE


def clamped_bounds(card: CardRect, world_range: WorldRange) -> ClampedBounds:
    """Visible part of a card in world coordinates.

    Fully outside cards keep their x with zero width so callers always get
    well-formed bounds.
    """
    visibility = classify(card, world_range)
    match visibility:
        case Visibility.FULLY_OUTSIDE:
            x, width = card.x, 0.0
        case Visibility.CLIPPED_BOTH:
            x, width = world_range.left, world_range.right - world_range.left
        case Visibility.CLIPPED_RIGHT:
            x, width = card.x, world_range.right - card.x
        case Visibility.CLIPPED_LEFT:
            x, width = world_range.left, card.right - world_range.left
        case _:
            x, width = card.x, card.width
    return ClampedBounds(x=x, width=width, visibility=visibility)


def render_position(
    card: CardRect, camera: ViewportState, min_visible_px: float = MIN_VISIBLE_PX
) -> RenderPosition:
    """Screen placement of the visible part of a card.

    Args:
        card: Card rectangle in world coordinates.
        camera: Current viewport.
        min_visible_px: Cards whose full on-screen width is below this are
            reported as not visible.

    Returns:
        RenderPosition with coordinates relative to the viewport. A degenerate
        camera yields an all-zero, not-visible position.
    """
    if camera.is_degenerate():
        return RenderPosition.hidden()

    zoom = camera.zoom
    world_range = viewport_to_world_range(camera.pan_x, zoom, camera.width)
    visibility = classify(card, world_range)

    full_width = card.width * zoom
    y = card.y * zoom + camera.pan_y
    height = card.height * zoom
    on_screen_vertically = not (y + height < 0 or y > camera.height)

    if (
        visibility is Visibility.FULLY_OUTSIDE
        or not on_screen_vertically
        or full_width < min_visible_px
    ):
        return RenderPosition(
            x=(card.x - world_range.left) * zoom if not world_range.is_empty() else 0.0,
            y=y,
            width=full_width,
            height=height,
            visible=False,
        )

    bounds = clamped_bounds(card, world_range)
    x = (bounds.x - world_range.left) * zoom
    width = bounds.width * zoom
    if bounds.is_clamped_left:
        x = 0.0
    if bounds.is_clamped_right:
        width = camera.width - x

    return RenderPosition(
        x=x,
        y=y,
        width=width,
        height=height,
        visible=True,
        clamped_left=bounds.is_clamped_left,
        clamped_right=bounds.is_clamped_right,
    )


def render_positions(
    cards: Iterable[CardRect], camera: ViewportState, min_visible_px: float = MIN_VISIBLE_PX
) -> list[RenderPosition]:
    return [render_position(card, camera, min_visible_px) for card in cards]


def filter_visible(positions: Iterable[RenderPosition]) -> list[RenderPosition]:
    return [p for p in positions if p.visible]


def screen_to_world_point(
    screen_x: float, screen_y: float, camera: ViewportState
) -> tuple[float, float] | None:
    """World point under a screen point, or None for a degenerate camera."""
    if camera.is_degenerate():
        return None
    return (
        (screen_x - camera.pan_x) / camera.zoom,
        (screen_y - camera.pan_y) / camera.zoom,
    )


def world_to_screen_point(world_x: float, world_y: float, camera: ViewportState) -> tuple[float, float]:
    """Screen point of a world point.

    Loses precision for large world coordinates at high zoom; prefer
    render_position for anything decided per card.
    """
    return (
        world_x * camera.zoom + camera.pan_x,
        world_y * camera.zoom + camera.pan_y,
    )
