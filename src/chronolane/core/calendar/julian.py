"""Julian Day Number conversions for the proleptic Gregorian calendar.

All arithmetic is integer floor division, so results are exact for any year,
including the astronomical year 0 and years billions of years before the epoch.
Conversion cost is constant: no loop walks the calendar.

Usage:
    jdn = civil_to_jdn(1970, 1, 1)  # 2440588
    year, month, day = jdn_to_civil(jdn)
"""

from __future__ import annotations

EPOCH_JDN = 2440588
"""Julian Day Number of 1970-01-01, the zero day-offset."""

_DAYS_PER_ERA = 146097  # days in a 400-year Gregorian cycle
_ERA_SHIFT = 719468  # days from 0000-03-01 to 1970-01-01

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check the Gregorian leap rule in astronomical numbering (year 0 is leap)."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap-aware.

    Args:
        year: Astronomical year.
        month: Month number, 1-12.

    Returns:
        Days in that month.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def civil_to_day_offset(year: int, month: int, day: int) -> int:
    """Days from 1970-01-01 to the given civil date (no validation)."""
    # Shift so the year starts in March; February's leap day lands at year end
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * _DAYS_PER_ERA + doe - _ERA_SHIFT


def day_offset_to_civil(offset: int) -> tuple[int, int, int]:
    """Inverse of civil_to_day_offset: (year, month, day) for a day-offset."""
    z = offset + _ERA_SHIFT
    era = z // _DAYS_PER_ERA
    doe = z - era * _DAYS_PER_ERA
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def civil_to_jdn(year: int, month: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian date."""
    return civil_to_day_offset(year, month, day) + EPOCH_JDN


def jdn_to_civil(jdn: int) -> tuple[int, int, int]:
    """Proleptic Gregorian (year, month, day) of a Julian Day Number."""
    return day_offset_to_civil(jdn - EPOCH_JDN)
