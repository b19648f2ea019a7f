"""Calendar functionality: arbitrary-range dates as integer day-offsets."""

from chronolane.core.calendar.julian import (
    EPOCH_JDN,
    civil_to_jdn,
    days_in_month,
    is_leap_year,
    jdn_to_civil,
)
from chronolane.core.calendar.models import (
    YMD,
    CalendarDate,
    DateOrder,
    FormatOptions,
    Ordering,
)
from chronolane.core.calendar.operations import (
    MAX_ABS_YEAR,
    add_days,
    compare,
    decompose,
    epoch,
    format_for_level,
    format_year,
    from_date,
    from_day_offset,
    from_ymd,
    is_valid_date,
    parse,
    to_canonical_string,
    to_day_offset,
    to_display_string,
    today,
    ymd_to_day_offset,
)

__all__ = [
    # Models
    "CalendarDate",
    "YMD",
    "DateOrder",
    "FormatOptions",
    "Ordering",
    # Julian Day Numbers
    "EPOCH_JDN",
    "civil_to_jdn",
    "jdn_to_civil",
    "is_leap_year",
    "days_in_month",
    # Operations
    "MAX_ABS_YEAR",
    "parse",
    "from_ymd",
    "from_day_offset",
    "from_date",
    "today",
    "epoch",
    "is_valid_date",
    "ymd_to_day_offset",
    "to_day_offset",
    "add_days",
    "compare",
    "decompose",
    "format_for_level",
    "format_year",
    "to_canonical_string",
    "to_display_string",
]
