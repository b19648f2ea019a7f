"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from chronolane import EditHistory, EntityState, ViewportState, parse
from chronolane.config import DisplaySettings, LayoutSettings
from chronolane.core.layer import TimelineEntity
from chronolane.layout import RawRecord


@pytest.fixture
def clean_env(monkeypatch):
    """Keep host TIMELINE_* variables out of settings defaults."""
    for name in list(os.environ):
        if name.startswith("TIMELINE_"):
            monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def display():
    return DisplaySettings()


@pytest.fixture
def layout_settings():
    return LayoutSettings()


@pytest.fixture
def camera():
    """800x600 viewport at the origin, zoom 1."""
    return ViewportState(width=800, height=600)


@pytest.fixture
def history():
    """Fresh EditHistory with a deterministic clock."""
    ticks = iter(range(1_000_000))
    return EditHistory[EntityState](max_entries=50, clock=lambda: float(next(ticks)))


@pytest.fixture
def make_entity():
    """Build a TimelineEntity from canonical date texts."""

    def _make(identity, start, end, layer=None, assigned=None):
        return TimelineEntity(
            identity=identity,
            date_start=parse(start),
            date_end=parse(end),
            assigned_layer=(layer or 0) if assigned is None else assigned,
            preferred_layer=layer,
        )

    return _make


@pytest.fixture
def records():
    """Three overlapping records plus one that cannot be parsed."""
    return [
        RawRecord("a.md", "2024-01-01", "2024-01-10"),
        RawRecord("b.md", "2024-01-01", "2024-01-10"),
        RawRecord("c.md", "2024-01-01", "2024-01-10"),
        RawRecord("broken.md", "not a date", "2024-01-10"),
    ]
