"""Internal utilities for caldate.

This module contains private implementation details:
    - Calendar lookups (leap years, month lengths, ordinals)
    - Constants for month tables and the wire format
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
)

__all__: list[str] = [
    "validate_date",
    "validate_day",
    "validate_month",
]
