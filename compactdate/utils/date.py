from datetime import date, datetime
from typing import Tuple, Union

from pandas import Timestamp

from compactdate.calendar.rules import validate_ymd

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

YMD = Tuple[int, int, int]
DateLike = Union[str, date, datetime, Timestamp, YMD]


def to_ymd(date_like: DateLike) -> YMD:
    """
    Convert a date-like value to a validated ``(year, month, day)`` triple.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' strings, dates, datetimes, pandas
    Timestamps and ready-made triples (the only way to reach years past 9999).
    """
    if isinstance(date_like, Timestamp):
        return validate_ymd(date_like.year, date_like.month, date_like.day)
    if isinstance(date_like, (date, datetime)):
        return validate_ymd(date_like.year, date_like.month, date_like.day)
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                parsed = datetime.strptime(date_like.strip(), fmt)
            except ValueError:
                continue
            return validate_ymd(parsed.year, parsed.month, parsed.day)
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    if isinstance(date_like, tuple) and len(date_like) == 3:
        return validate_ymd(*date_like)
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def format_ymd(year: int, month: int, day: int) -> str:
    """
    Format a triple as 'YYYY-MM-DD' (year padded to at least four digits).
    """
    return f"{year:04d}-{month:02d}-{day:02d}"
