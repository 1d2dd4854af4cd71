"""
pandas helpers for storing date columns as compact ``uint32`` codes.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from compactdate.codecs.base import DateCodec
from compactdate.errors import InvalidDate
from compactdate.settings import get_default_codec
from compactdate.utils.date import format_ymd, to_ymd

logger = logging.getLogger(__name__)


def _resolve(codec: Optional[DateCodec]) -> DateCodec:
    return codec if codec is not None else get_default_codec()


def _check_missing(series: pd.Series) -> None:
    missing = series.isna()
    if missing.any():
        raise InvalidDate(f"missing date at index {missing.idxmax()}")


def encode_series(series: pd.Series, codec: Optional[DateCodec] = None) -> pd.Series:
    """
    Encode a column of dates.

    Accepts datetime64 columns and object columns holding anything
    ``to_ymd`` understands (dates, Timestamps, 'YYYY-MM-DD' strings, triples).
    The result keeps the index and name of the input.
    """
    codec = _resolve(codec)
    _check_missing(series)

    if pd.api.types.is_datetime64_any_dtype(series):
        years = series.dt.year.to_numpy(dtype=np.int64)
        months = series.dt.month.to_numpy(dtype=np.int64)
        days = series.dt.day.to_numpy(dtype=np.int64)
    else:
        triples = [to_ymd(value) for value in series]
        if triples:
            years, months, days = (np.array(col, dtype=np.int64) for col in zip(*triples))
        else:
            years = months = days = np.array([], dtype=np.int64)

    codes = codec.encode_array(years, months, days)
    logger.debug("Encoded %s dates with %s codec", len(codes), codec.name)
    return pd.Series(codes, index=series.index, name=series.name, dtype=np.uint32)


def encode_frame(
    frame: pd.DataFrame,
    year: str = "year",
    month: str = "month",
    day: str = "day",
    codec: Optional[DateCodec] = None,
) -> pd.Series:
    """Encode three integer columns of ``frame`` into one ``uint32`` Series."""
    codec = _resolve(codec)
    for column in (year, month, day):
        if column not in frame.columns:
            raise KeyError(f"column {column!r} not found in frame")
        _check_missing(frame[column])

    codes = codec.encode_array(
        frame[year].to_numpy(dtype=np.int64),
        frame[month].to_numpy(dtype=np.int64),
        frame[day].to_numpy(dtype=np.int64),
    )
    return pd.Series(codes, index=frame.index, dtype=np.uint32)


def decode_series(series: pd.Series, codec: Optional[DateCodec] = None) -> pd.DataFrame:
    """Decode a column of codes into a frame with ``year``, ``month``, ``day``."""
    codec = _resolve(codec)
    _check_missing(series)
    years, months, days = codec.decode_array(series.to_numpy(dtype=np.int64))
    return pd.DataFrame(
        {
            "year": years.astype(np.int64),
            "month": months.astype(np.int64),
            "day": days.astype(np.int64),
        },
        index=series.index,
    )


def format_series(series: pd.Series, codec: Optional[DateCodec] = None) -> pd.Series:
    """Render a column of codes as 'YYYY-MM-DD' strings."""
    decoded = decode_series(series, codec)
    rendered = [
        format_ymd(y, m, d)
        for y, m, d in zip(decoded["year"], decoded["month"], decoded["day"])
    ]
    return pd.Series(rendered, index=series.index, name=series.name, dtype=object)
