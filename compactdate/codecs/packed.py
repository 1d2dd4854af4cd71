"""Packed date encoding: year, month and day in disjoint bit fields.

Layout (least significant bit first)::

    bits 0-4   day    (1-31)
    bits 5-8   month  (1-12)
    bits 9-24  year   (1-65535)

Ordering of packed values follows calendar ordering but the range is not
dense: unused day and month slots are never produced.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from compactdate.calendar import rules
from compactdate.errors import InvalidDate

from .base import DateCodec, YMDArrays, validate_ymd_arrays

DAY_BITS = 5
MONTH_BITS = 4
YEAR_BITS = 16

MONTH_SHIFT = DAY_BITS
YEAR_SHIFT = DAY_BITS + MONTH_BITS

DAY_MASK = (1 << DAY_BITS) - 1
MONTH_MASK = (1 << MONTH_BITS) - 1
YEAR_MASK = (1 << YEAR_BITS) - 1

PACKED_BITS = YEAR_SHIFT + YEAR_BITS


def packed_from_ymd(year: int, month: int, day: int) -> int:
    year, month, day = rules.validate_ymd(year, month, day)
    return (year << YEAR_SHIFT) | (month << MONTH_SHIFT) | day


def ymd_from_packed(value: int) -> Tuple[int, int, int]:
    """Extract and validate the fields of a packed value.

    Negative values and values with bits set above the year field raise
    ``InvalidDate``.
    """
    value = rules.as_int(value, "value")
    if value < 0 or value >> PACKED_BITS:
        raise InvalidDate(f"packed value must be in 0..{(1 << PACKED_BITS) - 1}, got {value}")
    return rules.validate_ymd(
        (value >> YEAR_SHIFT) & YEAR_MASK,
        (value >> MONTH_SHIFT) & MONTH_MASK,
        value & DAY_MASK,
    )


MAX_PACKED = packed_from_ymd(rules.MAX_YEAR, 12, 31)


class PackedDateCodec(DateCodec):
    """Bit-field codec: trivial masking in both directions, sparse value range."""

    name = "PACKED"

    def encode(self, year: int, month: int, day: int) -> int:
        return packed_from_ymd(year, month, day)

    def decode(self, value: int) -> Tuple[int, int, int]:
        return ymd_from_packed(value)

    def encode_array(self, years, months, days) -> np.ndarray:
        years, months, days = validate_ymd_arrays(years, months, days)
        packed = (years << YEAR_SHIFT) | (months << MONTH_SHIFT) | days
        return packed.astype(np.uint32)

    def decode_array(self, values) -> YMDArrays:
        values = np.asarray(values)
        if not values.size:
            values = values.astype(np.int64)
        elif not np.issubdtype(values.dtype, np.integer):
            raise TypeError(f"values must be an integer array, got dtype {values.dtype}")
        # Checked before the int64 cast so large uint64 values cannot wrap.
        bad = (values < 0) | ((values >> PACKED_BITS) != 0)
        if bad.any():
            i = int(np.flatnonzero(bad)[0])
            raise InvalidDate(
                f"packed value must be in 0..{(1 << PACKED_BITS) - 1}, "
                f"got {values.ravel()[i]} at index {i}"
            )
        values = values.astype(np.int64)
        return validate_ymd_arrays(
            (values >> YEAR_SHIFT) & YEAR_MASK,
            (values >> MONTH_SHIFT) & MONTH_MASK,
            values & DAY_MASK,
        )
