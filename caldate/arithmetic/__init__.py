"""Calendar date arithmetic.

Offset Operations (from caldate.arithmetic.offset):
    - offset_date: Move a date by a signed number of days
    - next_date, previous_date: Step one day

Difference Operations (from caldate.arithmetic.difference):
    - days_between: Signed count of whole days strictly between two dates
"""

from __future__ import annotations

from caldate.arithmetic.difference import days_between
from caldate.arithmetic.offset import next_date, offset_date, previous_date

__all__ = [
    # Offset operations
    "offset_date",
    "next_date",
    "previous_date",
    # Difference operations
    "days_between",
]
