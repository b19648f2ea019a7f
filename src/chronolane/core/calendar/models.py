"""Calendar value types.

Usage:
    date = CalendarDate(day_offset=0)       # 1970-01-01
    date.ymd                                # YMD(year=1970, month=1, day=1)
    options = FormatOptions(date_order=DateOrder.MONTH_FIRST)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NamedTuple

from chronolane.core.calendar.julian import EPOCH_JDN, day_offset_to_civil


class YMD(NamedTuple):
    """Civil decomposition of a date in astronomical year numbering."""

    year: int
    month: int  # 1-12
    day: int  # 1-31


class DateOrder(Enum):
    """Day/month order used for day-level display text."""

    DAY_FIRST = "DD/MM/YYYY"
    MONTH_FIRST = "MM/DD/YYYY"


class Ordering(Enum):
    """Result of comparing two dates."""

    BEFORE = auto()
    EQUAL = auto()
    AFTER = auto()


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Display options passed explicitly into formatting and display parsing."""

    date_order: DateOrder = DateOrder.DAY_FIRST
    """Order of day and month in DD/MM/YYYY-style text."""


@dataclass(frozen=True, slots=True, order=True)
class CalendarDate:
    """Immutable date stored as an integer day-offset from 1970-01-01.

    The offset is the only canonical state. The civil decomposition is derived
    on first access and memoized in a cell that takes no part in equality,
    ordering, or hashing.
    """

    day_offset: int
    _ymd: YMD | None = field(default=None, init=False, repr=False, compare=False, hash=False)

    @property
    def ymd(self) -> YMD:
        """Year/month/day via a Julian Day Number round trip (cached)."""
        cached = self._ymd
        if cached is None:
            cached = YMD(*day_offset_to_civil(self.day_offset))
            object.__setattr__(self, "_ymd", cached)
        return cached

    @property
    def year(self) -> int:
        return self.ymd.year

    @property
    def month(self) -> int:
        return self.ymd.month

    @property
    def day(self) -> int:
        return self.ymd.day

    @property
    def jdn(self) -> int:
        """Julian Day Number of this date."""
        return self.day_offset + EPOCH_JDN

    def day_of_week(self) -> int:
        """Day of week, 0=Sunday through 6=Saturday."""
        return (self.jdn + 1) % 7

    def add_days(self, days: int) -> CalendarDate:
        return CalendarDate(self.day_offset + days)

    def days_between(self, other: CalendarDate) -> int:
        """Signed number of days from this date to other."""
        return other.day_offset - self.day_offset

    def is_before(self, other: CalendarDate) -> bool:
        return self.day_offset < other.day_offset

    def is_after(self, other: CalendarDate) -> bool:
        return self.day_offset > other.day_offset
