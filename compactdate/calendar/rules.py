"""Proleptic Gregorian calendar rules shared by every codec."""

from __future__ import annotations

import operator

from compactdate.calendar.tables import CalendarTables, COMMON_YEAR, LEAP_YEAR
from compactdate.errors import InvalidDate

MIN_YEAR = 1
MAX_YEAR = 0xFFFF

DAYS_IN_COMMON_YEAR = 365
DAYS_IN_LEAP_YEAR = 366


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` (counted from year 1) has a 29th of February."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def leap_years_before(year: int) -> int:
    """Count the leap years among ``1 .. year - 1`` without iterating."""
    elapsed = year - 1
    return elapsed // 4 - elapsed // 100 + elapsed // 400


def days_before_year(year: int) -> int:
    """Days elapsed between 0001-01-01 and January 1st of ``year``."""
    leaps = leap_years_before(year)
    return leaps * DAYS_IN_LEAP_YEAR + (year - 1 - leaps) * DAYS_IN_COMMON_YEAR


def days_in_year(year: int) -> int:
    return DAYS_IN_LEAP_YEAR if is_leap_year(year) else DAYS_IN_COMMON_YEAR


def tables_for(year: int) -> CalendarTables:
    """Select the month tables matching the leap status of ``year``."""
    return LEAP_YEAR if is_leap_year(year) else COMMON_YEAR


def month_length(year: int, month: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""
    if not 1 <= month <= 12:
        raise InvalidDate(f"month must be in 1..12, got {month}")
    return tables_for(year).month_days[month - 1]


def as_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{field} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{field} must be an integer, got {value!r}") from exc


def validate_ymd(year, month, day) -> tuple[int, int, int]:
    """
    Check a ``(year, month, day)`` triple and return it as plain ints.

    Raises
    ------
    InvalidDate
        If the year is outside ``MIN_YEAR..MAX_YEAR``, the month outside
        1..12 or the day outside the month's actual length.
    TypeError
        If any field is not an integer.
    """
    year = as_int(year, "year")
    month = as_int(month, "month")
    day = as_int(day, "day")

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDate(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    length = month_length(year, month)
    if not 1 <= day <= length:
        raise InvalidDate(
            f"day must be in 1..{length} for {year:04d}-{month:02d}, got {day}"
        )
    return year, month, day
