"""Protocols for edit history.

These protocols define the interface an undo/redo log offers a host, allowing
different implementations (bounded in-memory, persisted per session).
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from chronolane.history.models import EditKind, HistoryEntry

S = TypeVar("S")


@runtime_checkable
class EditLog(Protocol[S]):
    """Protocol for a linear undo/redo log of geometry edits.

    A log is owned by exactly one editing surface. The cursor points at the
    entry the next undo returns; recording a new edit discards every entry
    after the cursor.

    Usage:
        log = EditHistory(max_entries=50)
        log.record("a.md", before, after, EditKind.MOVE)

        entry = log.undo()
        if entry is not None:
            apply(entry.previous_state)
    """

    def record(
        self, target: Hashable, previous_state: S, new_state: S, kind: EditKind
    ) -> HistoryEntry[S]:
        """Append an edit, discarding any redo branch.

        Note:
            Implementations may be bounded. The oldest entries are evicted
            once the limit is exceeded.
        """
        ...

    def undo(self) -> HistoryEntry[S] | None:
        """Step back. Returns the entry whose previous_state to apply, or None."""
        ...

    def redo(self) -> HistoryEntry[S] | None:
        """Step forward. Returns the entry whose new_state to apply, or None."""
        ...

    def peek_undo(self) -> HistoryEntry[S] | None:
        """Entry the next undo would return, without moving the cursor."""
        ...

    def peek_redo(self) -> HistoryEntry[S] | None:
        """Entry the next redo would return, without moving the cursor."""
        ...

    def clear(self) -> None:
        """Drop all entries."""
        ...
