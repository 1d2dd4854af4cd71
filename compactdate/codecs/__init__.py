"""
Date codecs.

Two interchangeable encodings of calendar dates into a ``uint32``:
dense day ordinals and packed bit fields.
"""

from .base import DateCodec
from .dense import (
    DAYS_PER_YEAR,
    MAX_ORDINAL,
    DenseDateCodec,
    ordinal_from_ymd,
    ymd_from_ordinal,
)
from .factory import (
    available_codecs,
    create_codec,
    register_codec,
    unregister_codec,
)
from .packed import MAX_PACKED, PackedDateCodec, packed_from_ymd, ymd_from_packed

__all__ = [
    # Base class
    "DateCodec",

    # Dense encoding
    "DenseDateCodec",
    "ordinal_from_ymd",
    "ymd_from_ordinal",
    "DAYS_PER_YEAR",
    "MAX_ORDINAL",

    # Packed encoding
    "PackedDateCodec",
    "packed_from_ymd",
    "ymd_from_packed",
    "MAX_PACKED",

    # Factory
    "create_codec",
    "register_codec",
    "unregister_codec",
    "available_codecs",
]
