"""Edit workflow integration tests: recompute, drag, undo, redo."""

import sys
from dataclasses import replace

sys.path.insert(0, "src")

from chronolane import (
    CardRect,
    DisplaySettings,
    EditKind,
    EntityState,
    LayoutSettings,
    RawRecord,
    ViewportState,
    compute_layout,
    dates_from_position,
    new_history,
    render_position,
)

DISPLAY = DisplaySettings(time_scale=10.0)
LAYOUT = LayoutSettings()


class HostStore:
    """Minimal stand-in for the host's record storage."""

    def __init__(self, records):
        self.records = {r.identity: r for r in records}

    def recompute(self):
        result = compute_layout(self.records.values(), DISPLAY, LAYOUT)
        for change in result.changed:
            self.write(change.identity, layer=change.layer)
        return result

    def write(self, identity, **changes):
        self.records[identity] = replace(self.records[identity], **changes)

    def apply(self, identity, state: EntityState):
        self.write(
            identity,
            date_start_text=state.date_start,
            date_end_text=state.date_end,
            layer=state.layer,
        )

    def state_of(self, identity) -> EntityState:
        r = self.records[identity]
        return EntityState(r.date_start_text, r.date_end_text, int(r.layer or 0))


def by_id(result):
    return {e.identity: e for e in result.entities}


def test_recompute_persists_lanes():
    """Lanes written back after one recompute are stable on the next."""
    store = HostStore(
        [
            RawRecord("a.md", "2024-01-01", "2024-01-10"),
            RawRecord("b.md", "2024-01-01", "2024-01-10"),
        ]
    )
    first = store.recompute()
    assert [a.layer for a in first.assignments] == [0, 1]
    assert store.records["b.md"].layer == 1

    second = store.recompute()
    assert second.changed == []
    assert [e.layer for e in second.entities] == [0, 1]


def test_drag_undo_redo_round_trip():
    """A drag is recorded, undone to the original dates, and redone."""
    store = HostStore([RawRecord("a.md", "2024-01-01", "2024-01-10")])
    history = new_history(LAYOUT)
    card = by_id(store.recompute())["a.md"]

    before = store.state_of("a.md")
    span = dates_from_position(card.x + 100.0, card.width, DISPLAY.time_scale)
    after = EntityState(span.date_start, span.date_end, before.layer)
    store.apply("a.md", after)
    history.record("a.md", before, after, EditKind.MOVE)

    moved = by_id(store.recompute())["a.md"]
    assert (moved.date_start, moved.date_end) == ("2024-01-11", "2024-01-20")
    assert moved.x == card.x + 100.0

    entry = history.undo()
    store.apply(entry.target, entry.previous_state)
    restored = by_id(store.recompute())["a.md"]
    assert (restored.date_start, restored.date_end) == ("2024-01-01", "2024-01-10")

    entry = history.redo()
    store.apply(entry.target, entry.new_state)
    assert by_id(store.recompute())["a.md"].date_start == "2024-01-11"


def test_layout_feeds_renderer():
    """Positioned cards render inside a camera centered on them."""
    store = HostStore([RawRecord("deep.md", "-4999-01-01", "-4990-01-01")])
    card = by_id(store.recompute())["deep.md"]

    camera = ViewportState(width=800, height=600, pan_x=-card.x + 100.0, pan_y=300.0)
    pos = render_position(CardRect(card.x, card.y, card.width, 40.0), camera)
    assert pos.visible
    assert pos.x == 100.0
    assert pos.y == 300.0
