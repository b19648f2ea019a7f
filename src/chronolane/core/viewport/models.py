"""Viewport models: camera state, card rectangles, and clipping results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto


@dataclass(slots=True)
class ViewportState:
    """Live camera: ``screen = world * zoom + pan`` on each axis."""

    width: float
    height: float
    pan_x: float = 0.0
    pan_y: float = 0.0
    zoom: float = 1.0

    def is_degenerate(self) -> bool:
        """True when the zoom cannot map world space onto the screen."""
        return not (self.zoom > 0 and math.isfinite(self.zoom))


@dataclass(frozen=True, slots=True)
class CardRect:
    """Axis-aligned card rectangle in world coordinates."""

    x: float
    y: float
    width: float
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True, slots=True)
class WorldRange:
    """Horizontal world interval covered by the viewport."""

    left: float
    right: float

    @classmethod
    def empty(cls) -> WorldRange:
        return cls(math.inf, -math.inf)

    def is_empty(self) -> bool:
        return not self.left <= self.right

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty() else self.right - self.left


class Visibility(Enum):
    """How a card's horizontal extent relates to the viewport."""

    FULLY_OUTSIDE = auto()
    FULLY_INSIDE = auto()
    CLIPPED_LEFT = auto()
    CLIPPED_RIGHT = auto()
    CLIPPED_BOTH = auto()


@dataclass(frozen=True, slots=True)
class ClampedBounds:
    """Visible part of a card in world coordinates."""

    x: float
    width: float
    visibility: Visibility

    @property
    def is_clamped_left(self) -> bool:
        return self.visibility in (Visibility.CLIPPED_LEFT, Visibility.CLIPPED_BOTH)

    @property
    def is_clamped_right(self) -> bool:
        return self.visibility in (Visibility.CLIPPED_RIGHT, Visibility.CLIPPED_BOTH)

    @property
    def is_outside(self) -> bool:
        return self.visibility is Visibility.FULLY_OUTSIDE


@dataclass(frozen=True, slots=True)
class RenderPosition:
    """Screen-space placement of a card's visible part.

    Attributes:
        x: Left edge on screen.
        y: Top edge on screen.
        width: Visible width on screen.
        height: Height on screen.
        visible: False when the card should not be drawn.
        clamped_left: The card continues past the left viewport edge.
        clamped_right: The card continues past the right viewport edge.
    """

    x: float
    y: float
    width: float
    height: float
    visible: bool
    clamped_left: bool = False
    clamped_right: bool = False

    @classmethod
    def hidden(cls) -> RenderPosition:
        return cls(x=0.0, y=0.0, width=0.0, height=0.0, visible=False)
