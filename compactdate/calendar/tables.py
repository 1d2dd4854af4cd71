"""
Month-length and days-before-month tables.

Built once at import time from the Gregorian month lengths and shared
read-only by every encoder and decoder. Index 0 is January.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

_COMMON_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class CalendarTables:
    """Per-month lengths and completed days at each month start for one kind of year."""

    leap: bool
    month_days: Tuple[int, ...]
    days_before_month: Tuple[int, ...]

    @property
    def days_in_year(self) -> int:
        return self.days_before_month[-1] + self.month_days[-1]


def _build(leap: bool) -> CalendarTables:
    month_days = np.array(_COMMON_MONTH_DAYS, dtype=np.int64)
    if leap:
        month_days[1] = 29
    # Days completed before each month: [0, 31, 59, ...]
    days_before = np.concatenate(([0], np.cumsum(month_days[:-1])))
    return CalendarTables(
        leap=leap,
        month_days=tuple(int(d) for d in month_days),
        days_before_month=tuple(int(d) for d in days_before),
    )


COMMON_YEAR = _build(leap=False)
LEAP_YEAR = _build(leap=True)

MONTH_DAYS = COMMON_YEAR.month_days
MONTH_DAYS_LEAP_YEAR = LEAP_YEAR.month_days
DAYS_BEFORE_MONTH = COMMON_YEAR.days_before_month
DAYS_BEFORE_MONTH_LEAP_YEAR = LEAP_YEAR.days_before_month


def _frozen_array(values: Tuple[int, ...]) -> np.ndarray:
    arr = np.array(values, dtype=np.int64)
    arr.setflags(write=False)
    return arr


# Array views used by the vectorised codecs; row 0 = common, row 1 = leap.
MONTH_DAYS_ARRAY = _frozen_array(MONTH_DAYS + MONTH_DAYS_LEAP_YEAR).reshape(2, 12)
DAYS_BEFORE_MONTH_ARRAY = _frozen_array(
    DAYS_BEFORE_MONTH + DAYS_BEFORE_MONTH_LEAP_YEAR
).reshape(2, 12)
