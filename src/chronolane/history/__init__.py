"""Edit history for undoing and redoing geometry edits.

Usage:
    from chronolane.history import EditHistory, EditKind, EntityState

    history: EditHistory[EntityState] = EditHistory(max_entries=50)
    history.record("a.md", before, after, EditKind.RESIZE)

    entry = history.undo()
    if entry is not None:
        restore(entry.target, entry.previous_state)
"""

from chronolane.history.log import DEFAULT_MAX_ENTRIES, EditHistory
from chronolane.history.models import EditKind, EntityState, HistoryEntry, HistoryStats
from chronolane.history.protocol import EditLog

__all__ = [
    "EditLog",
    "EditHistory",
    "DEFAULT_MAX_ENTRIES",
    "EditKind",
    "EntityState",
    "HistoryEntry",
    "HistoryStats",
]
