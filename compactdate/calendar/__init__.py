"""
Gregorian calendar rules and the constant month tables.
"""

from .rules import (
    MAX_YEAR,
    MIN_YEAR,
    days_before_year,
    days_in_year,
    is_leap_year,
    leap_years_before,
    month_length,
    tables_for,
    validate_ymd,
)
from .tables import (
    COMMON_YEAR,
    DAYS_BEFORE_MONTH,
    DAYS_BEFORE_MONTH_LEAP_YEAR,
    LEAP_YEAR,
    MONTH_DAYS,
    MONTH_DAYS_LEAP_YEAR,
    CalendarTables,
)

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "is_leap_year",
    "leap_years_before",
    "days_before_year",
    "days_in_year",
    "month_length",
    "tables_for",
    "validate_ymd",
    "CalendarTables",
    "COMMON_YEAR",
    "LEAP_YEAR",
    "MONTH_DAYS",
    "MONTH_DAYS_LEAP_YEAR",
    "DAYS_BEFORE_MONTH",
    "DAYS_BEFORE_MONTH_LEAP_YEAR",
]
