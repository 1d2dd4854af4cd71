"""Helpers working directly on dense ordinals."""

from __future__ import annotations

from datetime import date
from typing import Union

from dateutil.relativedelta import relativedelta

from compactdate.calendar.rules import as_int
from compactdate.codecs.dense import ordinal_from_ymd, ymd_from_ordinal
from compactdate.errors import InvalidDate

from .date import DateLike, format_ymd, to_ymd

# date.toordinal() counts 0001-01-01 as 1; dense ordinals start at 0.
_DATE_ORDINAL_OFFSET = 1


def string_from_ordinal(ordinal: int) -> str:
    """Return 'YYYY-MM-DD' for a dense ordinal."""
    return format_ymd(*ymd_from_ordinal(ordinal))


def ordinal_from_date(date_like: DateLike) -> int:
    return ordinal_from_ymd(*to_ymd(date_like))


def date_from_ordinal(ordinal: int) -> date:
    """Convert a dense ordinal to a ``datetime.date`` (years up to 9999)."""
    year, month, day = ymd_from_ordinal(ordinal)
    if year > date.max.year:
        raise InvalidDate(
            f"{format_ymd(year, month, day)} is outside the datetime.date range"
        )
    return date.fromordinal(ordinal + _DATE_ORDINAL_OFFSET)


def shift_months(ordinal: int, months: int) -> int:
    """
    Move a dense ordinal by whole calendar months.
    Days past the end of the target month clamp to its last day
    (2024-01-31 + 1 month -> 2024-02-29).
    """
    start = date_from_ordinal(ordinal)
    try:
        shifted = start + relativedelta(months=months)
    except (ValueError, OverflowError) as exc:
        raise InvalidDate(
            f"shifting {start.isoformat()} by {months} months leaves the supported range"
        ) from exc
    return ordinal_from_ymd(shifted.year, shifted.month, shifted.day)


def days_between(start: Union[int, DateLike], end: Union[int, DateLike]) -> int:
    """Signed number of days from ``start`` to ``end`` (ordinals or date-likes)."""
    return _coerce(end) - _coerce(start)


def _coerce(value: Union[int, DateLike]) -> int:
    if isinstance(value, (str, date, tuple)):
        return ordinal_from_date(value)
    ordinal = as_int(value, "ordinal")
    # Range check only.
    ymd_from_ordinal(ordinal)
    return ordinal
