"""
Base class for compact date codecs.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Tuple

import numpy as np

from compactdate.calendar import rules
from compactdate.calendar.tables import MONTH_DAYS_ARRAY
from compactdate.errors import InvalidDate
from compactdate.utils.date import DateLike, format_ymd, to_ymd

YMDArrays = Tuple[np.ndarray, np.ndarray, np.ndarray]


def leap_mask(years: np.ndarray) -> np.ndarray:
    """Element-wise leap-year rule, identical to ``rules.is_leap_year``."""
    return (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))


def _first_bad(mask: np.ndarray) -> int:
    return int(np.flatnonzero(mask)[0])


def validate_ymd_arrays(years, months, days) -> YMDArrays:
    """
    Vectorised counterpart of ``rules.validate_ymd``.

    Returns the three inputs as int64 arrays of their common broadcast
    shape. The first offending element is reported in the ``InvalidDate``
    message by its flat (row-major) index.
    """
    years, months, days = np.broadcast_arrays(
        np.asarray(years), np.asarray(months), np.asarray(days)
    )
    for name, arr in (("years", years), ("months", months), ("days", days)):
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise TypeError(f"{name} must be an integer array, got dtype {arr.dtype}")
    shape = years.shape
    years = years.astype(np.int64).ravel()
    months = months.astype(np.int64).ravel()
    days = days.astype(np.int64).ravel()

    bad = (years < rules.MIN_YEAR) | (years > rules.MAX_YEAR)
    if bad.any():
        i = _first_bad(bad)
        raise InvalidDate(
            f"year must be in {rules.MIN_YEAR}..{rules.MAX_YEAR}, got {years[i]} at index {i}"
        )
    bad = (months < 1) | (months > 12)
    if bad.any():
        i = _first_bad(bad)
        raise InvalidDate(f"month must be in 1..12, got {months[i]} at index {i}")
    lengths = MONTH_DAYS_ARRAY[leap_mask(years).astype(np.int64), months - 1]
    bad = (days < 1) | (days > lengths)
    if bad.any():
        i = _first_bad(bad)
        raise InvalidDate(
            f"day must be in 1..{lengths[i]} for {years[i]:04d}-{months[i]:02d}, "
            f"got {days[i]} at index {i}"
        )
    return years.reshape(shape), months.reshape(shape), days.reshape(shape)


class DateCodec(ABC):
    """Base class for codecs mapping calendar dates to fixed-width integers."""

    name: str = ""

    @abstractmethod
    def encode(self, year: int, month: int, day: int) -> int:
        """Encode a calendar date."""
        pass

    @abstractmethod
    def decode(self, value: int) -> Tuple[int, int, int]:
        """Decode an encoded value back to ``(year, month, day)``."""
        pass

    @abstractmethod
    def encode_array(self, years, months, days) -> np.ndarray:
        """Encode three integer arrays into a ``uint32`` array."""
        pass

    @abstractmethod
    def decode_array(self, values) -> YMDArrays:
        """Decode an array of encoded values into year, month and day arrays."""
        pass

    def is_leap_year(self, year: int) -> bool:
        return rules.is_leap_year(year)

    def format(self, value: int) -> str:
        """Render an encoded value as 'YYYY-MM-DD'."""
        return format_ymd(*self.decode(value))

    def encode_date(self, date_like: DateLike) -> int:
        """Encode any value accepted by ``to_ymd``."""
        return self.encode(*to_ymd(date_like))

    def decode_date(self, value: int) -> date:
        """Decode to a ``datetime.date``; only years up to 9999 are representable."""
        year, month, day = self.decode(value)
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise InvalidDate(
                f"{format_ymd(year, month, day)} is outside the datetime.date range"
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
