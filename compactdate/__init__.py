"""Compact calendar-date encodings.

Stores a proleptic Gregorian ``(year, month, day)`` in a single ``uint32``.

Key modules:
- calendar: leap-year rule and the constant month tables
- codecs: dense (day ordinal) and packed (bit field) codecs
- columns: pandas column helpers built on the vectorised codecs
- utils: date coercion, formatting and ordinal arithmetic
- settings: package defaults, including the default codec
"""

from compactdate.calendar.rules import is_leap_year
from compactdate.codecs import (
    DateCodec,
    DenseDateCodec,
    PackedDateCodec,
    available_codecs,
    create_codec,
    register_codec,
)
from compactdate.codecs.dense import MAX_ORDINAL, ordinal_from_ymd, ymd_from_ordinal
from compactdate.errors import InvalidDate
from compactdate.settings import get_default_codec, set_default_codec
from compactdate.utils.date import format_ymd, to_ymd
from compactdate.utils.ordinal import (
    date_from_ordinal,
    days_between,
    ordinal_from_date,
    shift_months,
    string_from_ordinal,
)

__version__ = "0.1.0"


def encode(year: int, month: int, day: int) -> int:
    """Dense ordinal of a date; ``encode(1, 1, 1) == 0``."""
    return ordinal_from_ymd(year, month, day)


def decode(ordinal: int):
    """Inverse of ``encode``."""
    return ymd_from_ordinal(ordinal)


def encode_with_default(year: int, month: int, day: int) -> int:
    """Encode with the configured default codec."""
    return get_default_codec().encode(year, month, day)


def decode_with_default(value: int):
    return get_default_codec().decode(value)


__all__ = [
    "__version__",
    "encode",
    "decode",
    "is_leap_year",
    "format_ymd",
    "string_from_ordinal",
    "encode_with_default",
    "decode_with_default",
    "InvalidDate",
    "MAX_ORDINAL",
    "DateCodec",
    "DenseDateCodec",
    "PackedDateCodec",
    "create_codec",
    "register_codec",
    "available_codecs",
    "get_default_codec",
    "set_default_codec",
    "to_ymd",
    "ordinal_from_date",
    "date_from_ordinal",
    "shift_months",
    "days_between",
]
