"""Calendar operations: parsing, construction, comparison, and formatting.

Era translation happens only here, once when text is parsed and once when a
date is displayed. Everything in between works on astronomical numbering,
where comparison and addition are plain integer operations.

Usage:
    date = parse("5000 BCE-01-01")
    date.year                          # -4999
    to_canonical_string(date)          # "-4999-01-01"
    format_for_level(date, 2)          # "5000 BCE"
"""

from __future__ import annotations

import datetime as dt
import math
import re

from chronolane.core.calendar.julian import (
    civil_to_day_offset,
    days_in_month,
)
from chronolane.core.calendar.models import (
    YMD,
    CalendarDate,
    DateOrder,
    FormatOptions,
    Ordering,
)

MAX_ABS_YEAR = 20_000_000_000
"""Largest accepted |year|; about 7.3e12 days, well inside 2**53."""

_MAX_DAY_OFFSET = civil_to_day_offset(MAX_ABS_YEAR, 12, 31)
_MIN_DAY_OFFSET = civil_to_day_offset(-MAX_ABS_YEAR, 1, 1)

_ORDINAL_EPOCH = 719163  # datetime.date(1970, 1, 1).toordinal()
_SHORT_YEAR_LIMIT = 10_000

# Year digits are bounded so int() never meets an oversized literal
_CANONICAL_RE = re.compile(
    r"^([+-]?)(\d{1,15})(?:\s+(BCE|BC|CE|AD))?-(\d{1,2})-(\d{1,2})$",
    re.IGNORECASE | re.ASCII,
)
_TRAILING_ERA_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})\s+(BCE|BC|CE|AD)$",
    re.IGNORECASE | re.ASCII,
)
_DISPLAY_RE = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d{1,15})(?:\s+(BCE|BC|CE|AD))?$",
    re.IGNORECASE | re.ASCII,
)

_BCE_ERAS = frozenset({"BCE", "BC"})
_ABBREVIATIONS = ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "k"))


# Construction


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check month range, leap-aware day range, and the year ceiling."""
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= days_in_month(year, month):
        return False
    return abs(year) <= MAX_ABS_YEAR


def ymd_to_day_offset(year: int, month: int, day: int) -> int:
    """Closed-form day-offset of a civil date, without validation."""
    return civil_to_day_offset(year, month, day)


def from_ymd(year: int, month: int, day: int) -> CalendarDate | None:
    """Build a date from astronomical year, month, day.

    Returns:
        The date, or None if the components are not a valid date.
    """
    if not is_valid_date(year, month, day):
        return None
    return CalendarDate(civil_to_day_offset(year, month, day))


def from_day_offset(offset: int | float) -> CalendarDate:
    """Build a date from a day-offset. Never raises.

    Fractional offsets round half up. Float offsets are clamped to the
    supported range of +/-MAX_ABS_YEAR years; NaN maps to the epoch.
    """
    if isinstance(offset, float):
        if math.isnan(offset):
            return CalendarDate(0)
        offset = math.floor(min(max(offset, _MIN_DAY_OFFSET), _MAX_DAY_OFFSET) + 0.5)
    return CalendarDate(int(offset))


def from_date(date: dt.date) -> CalendarDate:
    """Bridge from the standard library's limited-range date type."""
    return CalendarDate(date.toordinal() - _ORDINAL_EPOCH)


def today() -> CalendarDate:
    return from_date(dt.date.today())


def epoch() -> CalendarDate:
    """1970-01-01, day-offset 0."""
    return CalendarDate(0)


# Parsing


def _historical_to_astronomical(year: int, era: str | None) -> int:
    if era is not None and era.upper() in _BCE_ERAS:
        return 1 - year
    return year


def parse(text: str, options: FormatOptions | None = None) -> CalendarDate | None:
    """Parse date text into a CalendarDate.

    Accepted forms:
    - ``[+-]YYYY[ ERA]-MM-DD`` with any number of year digits, e.g.
      ``2024-03-15``, ``-5000000000-01-01``, ``5000 BCE-01-01``
    - ``YYYY-MM-DD ERA``, e.g. ``0753-04-21 BC``
    - day-level display text, ``DD/MM/YYYY[ ERA]`` or ``MM/DD/YYYY[ ERA]``
      depending on ``options.date_order``

    ERA is one of BCE, BC, CE, AD (case-insensitive). BCE/BC years use
    historical numbering and are remapped so 1 BCE becomes year 0. An era
    cannot be combined with an explicit sign, and historical year 0 does
    not exist.

    Args:
        text: Text to parse. Surrounding whitespace is ignored.
        options: Display options deciding day/month order of slash text.

    Returns:
        The parsed date, or None if the text is not a valid date.
    """
    if not isinstance(text, str):
        return None
    text = text.strip()

    match = _CANONICAL_RE.match(text)
    if match:
        sign, digits, era, month, day = match.groups()
        if era is not None and sign:
            return None
        year = int(digits)
        if era is not None:
            if year == 0:
                return None
            year = _historical_to_astronomical(year, era)
        elif sign == "-":
            year = -year
        return from_ymd(year, int(month), int(day))

    match = _TRAILING_ERA_RE.match(text)
    if match:
        digits, month, day, era = match.groups()
        year = int(digits)
        if year == 0:
            return None
        return from_ymd(_historical_to_astronomical(year, era), int(month), int(day))

    match = _DISPLAY_RE.match(text)
    if match:
        first, second, digits, era = match.groups()
        order = (options or FormatOptions()).date_order
        if order is DateOrder.MONTH_FIRST:
            month, day = first, second
        else:
            day, month = first, second
        year = int(digits)
        if year == 0:
            return None
        return from_ymd(_historical_to_astronomical(year, era), int(month), int(day))

    return None


# Arithmetic and comparison


def to_day_offset(date: CalendarDate) -> int:
    return date.day_offset


def add_days(date: CalendarDate, days: int) -> CalendarDate:
    return date.add_days(days)


def compare(a: CalendarDate, b: CalendarDate) -> Ordering:
    """Order two dates by their day-offsets."""
    if a.day_offset < b.day_offset:
        return Ordering.BEFORE
    if a.day_offset > b.day_offset:
        return Ordering.AFTER
    return Ordering.EQUAL


def decompose(date: CalendarDate) -> YMD:
    return date.ymd


# Formatting


def _era_year(year: int) -> tuple[int, bool]:
    """Historical year magnitude and whether it is BCE."""
    if year <= 0:
        return 1 - year, True
    return year, False


def format_year(year: int) -> str:
    """Year with era suffix, abbreviated to k/M/B beyond 10,000 years.

    Examples:
        2024 -> "2024 CE", 0 -> "1 BCE", -4_999_999_999 -> "5B BCE"
    """
    magnitude, bce = _era_year(year)
    suffix = "BCE" if bce else "CE"
    if magnitude < _SHORT_YEAR_LIMIT:
        return f"{magnitude} {suffix}"

    # Round to tenths first so 999_999 reads "1M", not "1000.0k"
    for unit, tag in _ABBREVIATIONS:
        tenths = (magnitude * 10 + unit // 2) // unit
        if tenths >= 10:
            whole, fraction = divmod(tenths, 10)
            value = str(whole) if fraction == 0 else f"{whole}.{fraction}"
            return f"{value}{tag} {suffix}"
    return f"{magnitude} {suffix}"


def format_for_level(
    date: CalendarDate, level: int, options: FormatOptions | None = None
) -> str:
    """Display text for a date at a scale level.

    Level 0 shows the full date in the configured day/month order, level 1
    shows month and year, and higher levels show the year only.
    """
    ymd = date.ymd
    magnitude, bce = _era_year(ymd.year)
    era = " BCE" if bce else ""

    if level <= 0:
        order = (options or FormatOptions()).date_order
        if order is DateOrder.MONTH_FIRST:
            date_part = f"{ymd.month:02d}/{ymd.day:02d}"
        else:
            date_part = f"{ymd.day:02d}/{ymd.month:02d}"
        return f"{date_part}/{magnitude}{era}"
    if level == 1:
        return f"{ymd.month:02d}/{magnitude}{era}"
    return format_year(ymd.year)


def to_canonical_string(date: CalendarDate) -> str:
    """Persisted form ``[-]YYYY-MM-DD`` in astronomical numbering.

    The year is zero-padded to at least four digits, so parsing the output
    gives back the same date. The text itself is normalized: an input such as
    ``+2024-01-01`` or ``2024-1-1`` is re-serialized as ``2024-01-01``.
    """
    year, month, day = date.ymd
    sign = "-" if year < 0 else ""
    return f"{sign}{abs(year):04d}-{month:02d}-{day:02d}"


def to_display_string(date: CalendarDate) -> str:
    """Human-readable ``YYYY-MM-DD ERA`` in historical numbering."""
    year, month, day = date.ymd
    magnitude, bce = _era_year(year)
    return f"{magnitude}-{month:02d}-{day:02d} {'BCE' if bce else 'CE'}"
