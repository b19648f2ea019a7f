"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
display and layout services.

Usage:
    from chronolane.config import DisplaySettings, LayoutSettings

    # Load from environment variables (TIMELINE_DISPLAY_*, TIMELINE_LAYOUT_*)
    display = DisplaySettings()
    layout = LayoutSettings()

    # Or override with explicit values
    display = DisplaySettings(date_order=DateOrder.MONTH_FIRST)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chronolane.core.calendar import DateOrder, FormatOptions


class DisplaySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for how dates and cards are displayed.

    Attributes:
        date_order: Field order for day-level dates (DD/MM/YYYY or MM/DD/YYYY).
        time_scale: Pixels per day at zoom 1.
        min_visible_px: Narrowest on-screen width at which a card is rendered.

    Environment Variables:
        TIMELINE_DISPLAY_DATE_ORDER
        TIMELINE_DISPLAY_TIME_SCALE
        TIMELINE_DISPLAY_MIN_VISIBLE_PX
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMELINE_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    date_order: DateOrder = DateOrder.DAY_FIRST
    time_scale: float = Field(default=10.0, gt=0)
    min_visible_px: float = Field(default=15.0, ge=0)

    def format_options(self) -> FormatOptions:
        return FormatOptions(date_order=self.date_order)


class LayoutSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for lane assignment and editing.

    Attributes:
        layer_spacing: Vertical world distance between adjacent lanes.
        layer_search_floor: Minimum number of offsets tried when looking for a free lane.
        history_limit: Maximum number of undoable edits kept.
        new_card_units: Length of a click-created card, in scale units.

    Environment Variables:
        TIMELINE_LAYOUT_LAYER_SPACING
        TIMELINE_LAYOUT_LAYER_SEARCH_FLOOR
        TIMELINE_LAYOUT_HISTORY_LIMIT
        TIMELINE_LAYOUT_NEW_CARD_UNITS
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMELINE_LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    layer_spacing: float = Field(default=50.0, gt=0)
    layer_search_floor: int = Field(default=100, ge=1)
    history_limit: int = Field(default=50, ge=1)
    new_card_units: int = Field(default=3, ge=1)
