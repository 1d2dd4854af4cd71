"""Dense date encoding: zero-based day count since 0001-01-01.

Every valid date from year 1 through ``MAX_YEAR`` maps to exactly one
ordinal and consecutive days map to consecutive integers, so the whole
range fits in a ``uint32``.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from compactdate.calendar import rules
from compactdate.calendar.tables import DAYS_BEFORE_MONTH_ARRAY, MONTH_DAYS_ARRAY
from compactdate.errors import InvalidDate

from .base import DateCodec, YMDArrays, leap_mask, validate_ymd_arrays

logger = logging.getLogger(__name__)

# Mean Gregorian year length over a 400-year cycle: 365.2425 days.
DAYS_PER_YEAR = (400 * 365 + 100 - 4 + 1) / 400


def ordinal_from_ymd(year: int, month: int, day: int) -> int:
    """Return the dense ordinal of ``year-month-day``.

    ``ordinal_from_ymd(1, 1, 1) == 0``. Runs in constant time.

    Raises
    ------
    InvalidDate
        If the triple is not a valid date in the supported range.
    """
    year, month, day = rules.validate_ymd(year, month, day)
    year_day = rules.tables_for(year).days_before_month[month - 1] + (day - 1)
    return rules.days_before_year(year) + year_day


MAX_ORDINAL = ordinal_from_ymd(rules.MAX_YEAR, 12, 31)


def ymd_from_ordinal(ordinal: int) -> Tuple[int, int, int]:
    """Return the ``(year, month, day)`` encoded by a dense ``ordinal``.

    The year is estimated from the mean year length and then corrected;
    the month is estimated as ``day_of_year // 31`` and corrected against
    the days-before-month table. No day-by-day or year-by-year scan.
    """
    ordinal = rules.as_int(ordinal, "ordinal")
    if not 0 <= ordinal <= MAX_ORDINAL:
        raise InvalidDate(f"ordinal must be in 0..{MAX_ORDINAL}, got {ordinal}")

    year = int(ordinal / DAYS_PER_YEAR) + 1
    day_of_year = ordinal - rules.days_before_year(year)

    while day_of_year < 0:
        logger.debug("Year estimate %s overshot ordinal %s", year, ordinal)
        year -= 1
        day_of_year += rules.days_in_year(year)
    while day_of_year >= rules.days_in_year(year):
        logger.debug("Year estimate %s undershot ordinal %s", year, ordinal)
        day_of_year -= rules.days_in_year(year)
        year += 1

    tables = rules.tables_for(year)
    days_before_month = tables.days_before_month

    # 31 is the longest month, so this never lands past the true month.
    month0 = day_of_year // 31
    while days_before_month[month0] > day_of_year:
        month0 -= 1
    day0 = day_of_year - days_before_month[month0]

    # The month estimate can fall one short (1 March gives February). The
    # year wrap is only a boundary guard: the year is already exact here.
    if day0 >= tables.month_days[month0]:
        day0 -= tables.month_days[month0]
        month0 += 1
        if month0 > 11:
            month0 = 0
            year += 1

    return year, month0 + 1, day0 + 1


def _days_before_year_array(years: np.ndarray) -> np.ndarray:
    elapsed = years - 1
    leaps = elapsed // 4 - elapsed // 100 + elapsed // 400
    return leaps * 366 + (elapsed - leaps) * 365


def _days_in_year_array(years: np.ndarray) -> np.ndarray:
    return np.where(leap_mask(years), 366, 365)


def ordinals_from_ymd_arrays(years, months, days) -> np.ndarray:
    """Vectorised ``ordinal_from_ymd``; returns a ``uint32`` array."""
    years, months, days = validate_ymd_arrays(years, months, days)
    leap = leap_mask(years).astype(np.int64)
    ordinals = (
        _days_before_year_array(years)
        + DAYS_BEFORE_MONTH_ARRAY[leap, months - 1]
        + (days - 1)
    )
    return ordinals.astype(np.uint32)


def ymd_arrays_from_ordinals(ordinals) -> YMDArrays:
    """Vectorised ``ymd_from_ordinal`` applying the same corrections element-wise.

    The three result arrays keep the shape of ``ordinals``.
    """
    ordinals = np.asarray(ordinals)
    shape = ordinals.shape
    ordinals = ordinals.ravel()
    if ordinals.size and not np.issubdtype(ordinals.dtype, np.integer):
        raise TypeError(f"ordinals must be an integer array, got dtype {ordinals.dtype}")
    ordinals = ordinals.astype(np.int64)
    bad = (ordinals < 0) | (ordinals > MAX_ORDINAL)
    if bad.any():
        i = int(np.flatnonzero(bad)[0])
        raise InvalidDate(
            f"ordinal must be in 0..{MAX_ORDINAL}, got {ordinals[i]} at index {i}"
        )

    years = np.floor(ordinals / DAYS_PER_YEAR).astype(np.int64) + 1
    day_of_year = ordinals - _days_before_year_array(years)

    over = day_of_year < 0
    while over.any():
        years = np.where(over, years - 1, years)
        day_of_year = np.where(over, day_of_year + _days_in_year_array(years), day_of_year)
        over = day_of_year < 0
    under = day_of_year >= _days_in_year_array(years)
    while under.any():
        day_of_year = np.where(under, day_of_year - _days_in_year_array(years), day_of_year)
        years = np.where(under, years + 1, years)
        under = day_of_year >= _days_in_year_array(years)

    leap = leap_mask(years).astype(np.int64)
    month0 = day_of_year // 31
    ahead = DAYS_BEFORE_MONTH_ARRAY[leap, month0] > day_of_year
    while ahead.any():
        month0 = np.where(ahead, month0 - 1, month0)
        ahead = DAYS_BEFORE_MONTH_ARRAY[leap, month0] > day_of_year
    day0 = day_of_year - DAYS_BEFORE_MONTH_ARRAY[leap, month0]

    # Month estimate one short, as in the scalar decoder. The year is exact
    # here, so advancing never passes December.
    spill = day0 >= MONTH_DAYS_ARRAY[leap, month0]
    day0 = np.where(spill, day0 - MONTH_DAYS_ARRAY[leap, month0], day0)
    month0 = np.where(spill, month0 + 1, month0)

    return years.reshape(shape), (month0 + 1).reshape(shape), (day0 + 1).reshape(shape)


class DenseDateCodec(DateCodec):
    """Ordinal day count since 0001-01-01, dense over the whole supported range."""

    name = "DENSE"

    def encode(self, year: int, month: int, day: int) -> int:
        return ordinal_from_ymd(year, month, day)

    def decode(self, value: int) -> Tuple[int, int, int]:
        return ymd_from_ordinal(value)

    def encode_array(self, years, months, days) -> np.ndarray:
        return ordinals_from_ymd_arrays(years, months, days)

    def decode_array(self, values) -> YMDArrays:
        return ymd_arrays_from_ordinals(values)
