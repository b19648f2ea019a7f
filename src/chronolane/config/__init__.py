"""Configuration module using Pydantic Settings.

Usage:
    from chronolane.config import DisplaySettings, LayoutSettings

    display = DisplaySettings(time_scale=20.0)
    layout = LayoutSettings(history_limit=100)
"""

from chronolane.config.settings import DisplaySettings, LayoutSettings

__all__ = [
    "DisplaySettings",
    "LayoutSettings",
]
