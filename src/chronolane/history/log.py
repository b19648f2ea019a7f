"""Bounded, linear undo/redo log.

EditHistory is a stateful service owned by one editing surface. It never
touches entity storage: undo and redo hand back entries, and the caller
applies the recorded state and re-derives dependent geometry.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from chronolane.history.models import EditKind, HistoryEntry, HistoryStats

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 50

S = TypeVar("S")


class EditHistory(Generic[S]):
    """Linear history with a cursor and FIFO eviction.

    The cursor ranges over [-1, len - 1]. At -1 nothing can be undone; at
    len - 1 nothing can be redone. Recording while the cursor is behind the
    tip discards the redo branch.

    Args:
        max_entries: Maximum number of entries kept (default 50).
        clock: Source of entry timestamps (default time.time).
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self._max_entries = max_entries
        self._clock = clock
        self._entries: list[HistoryEntry[S]] = []
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def record(
        self, target: Hashable, previous_state: S, new_state: S, kind: EditKind
    ) -> HistoryEntry[S]:
        """Append an edit at the cursor, discarding any redo branch.

        Args:
            target: Identity of the edited entity.
            previous_state: State before the edit.
            new_state: State after the edit.
            kind: Kind of edit.

        Returns:
            The recorded entry.
        """
        if self._cursor < len(self._entries) - 1:
            del self._entries[self._cursor + 1 :]

        entry = HistoryEntry(
            target=target,
            previous_state=previous_state,
            new_state=new_state,
            kind=kind,
            timestamp=self._clock(),
        )
        self._entries.append(entry)
        self._cursor += 1

        if len(self._entries) > self._max_entries:
            evicted = self._entries.pop(0)
            self._cursor -= 1
            logger.debug("History full, evicted %s edit of %r", evicted.kind.value, evicted.target)

        return entry

    def can_undo(self) -> bool:
        return self._cursor >= 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def peek_undo(self) -> HistoryEntry[S] | None:
        if not self.can_undo():
            return None
        return self._entries[self._cursor]

    def peek_redo(self) -> HistoryEntry[S] | None:
        if not self.can_redo():
            return None
        return self._entries[self._cursor + 1]

    def undo(self) -> HistoryEntry[S] | None:
        """Return the entry at the cursor and step back.

        Returns:
            The entry whose previous_state the caller should apply, or None
            when there is nothing to undo.
        """
        entry = self.peek_undo()
        if entry is not None:
            self._cursor -= 1
        return entry

    def redo(self) -> HistoryEntry[S] | None:
        """Step forward and return the entry now at the cursor.

        Returns:
            The entry whose new_state the caller should apply, or None when
            there is nothing to redo.
        """
        entry = self.peek_redo()
        if entry is not None:
            self._cursor += 1
        return entry

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = -1

    def stats(self) -> HistoryStats:
        return HistoryStats(
            size=len(self._entries),
            cursor=self._cursor,
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
        )
