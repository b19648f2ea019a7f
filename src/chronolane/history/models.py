"""Data models for edit history.

Entries are generic over the recorded state, so the log works with any state
snapshot. EntityState is the shape used for timeline cards.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

S = TypeVar("S")


class EditKind(Enum):
    """Kind of geometry edit being recorded."""

    RESIZE = "resize"
    MOVE = "move"
    LAYER_CHANGE = "layer-change"


@dataclass(frozen=True, slots=True)
class EntityState:
    """Persisted geometry of one card: canonical date texts and lane."""

    date_start: str
    date_end: str
    layer: int

    def to_dict(self) -> dict[str, Any]:
        return {"date_start": self.date_start, "date_end": self.date_end, "layer": self.layer}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EntityState:
        return cls(
            date_start=data["date_start"],
            date_end=data["date_end"],
            layer=data["layer"],
        )


@dataclass(frozen=True)
class HistoryEntry(Generic[S]):
    """One recorded edit. Immutable once recorded.

    Attributes:
        target: Identity of the edited entity.
        previous_state: State to restore on undo.
        new_state: State to restore on redo.
        kind: Kind of edit.
        timestamp: Unix timestamp when the edit was recorded.
    """

    target: Hashable
    previous_state: S
    new_state: S
    kind: EditKind
    timestamp: float


@dataclass(frozen=True, slots=True)
class HistoryStats:
    """Snapshot of the log's cursor state, for diagnostics."""

    size: int
    cursor: int
    can_undo: bool
    can_redo: bool
