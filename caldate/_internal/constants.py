"""Internal constants for caldate.

Fixed calendar data and the limits of the yyyy-mm-dd wire format.
This module is not part of the public API.
"""

from __future__ import annotations

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

THIRTY_ONE_DAY_MONTHS: frozenset[int] = frozenset({1, 3, 5, 7, 8, 10, 12})

# A 400-year Gregorian cycle always has the same number of days
DAYS_PER_400_YEARS: int = 146_097

# yyyy-mm-dd
DATE_STRING_LENGTH: int = 10
YEAR_SLICE: slice = slice(0, 4)
MONTH_SLICE: slice = slice(5, 7)
DAY_SLICE: slice = slice(8, 10)

# Years above this are written without padding
MAX_PADDED_YEAR: int = 9999

# Negative years cannot be written in the wire format
NEGATIVE_YEAR_PLACEHOLDER: str = "0000"

MONTH_NAMES: tuple[str, ...] = (
    "",  # Placeholder for 1-indexed access
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday = 0, matching datetime.date.weekday()
DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


__all__ = [
    "DAYS_IN_MONTH",
    "THIRTY_ONE_DAY_MONTHS",
    "DAYS_PER_400_YEARS",
    "DATE_STRING_LENGTH",
    "YEAR_SLICE",
    "MONTH_SLICE",
    "DAY_SLICE",
    "MAX_PADDED_YEAR",
    "NEGATIVE_YEAR_PLACEHOLDER",
    "MONTH_NAMES",
    "DAY_NAMES",
]
