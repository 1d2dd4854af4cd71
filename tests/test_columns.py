"""
Tests for the pandas column helpers.
"""

from datetime import date

import numpy as np
import pandas as pd
import pytest

from compactdate import settings
from compactdate.codecs import PackedDateCodec, packed_from_ymd
from compactdate.columns import (
    decode_series,
    encode_frame,
    encode_series,
    format_series,
)
from compactdate.errors import InvalidDate


@pytest.fixture
def trade_dates() -> pd.Series:
    return pd.Series(
        pd.to_datetime(["2022-07-06", "2022-05-23", "2024-02-29"]),
        index=["a", "b", "c"],
        name="trade_date",
    )


class TestEncodeSeries:

    def test_datetime64_column(self, trade_dates):
        codes = encode_series(trade_dates)
        assert codes.dtype == np.uint32
        assert codes.name == "trade_date"
        assert list(codes.index) == ["a", "b", "c"]
        assert codes.tolist()[:2] == [738341, 738297]

    def test_object_column(self):
        series = pd.Series(["2022-07-06", date(2022, 5, 23), (2022, 7, 7)])
        assert encode_series(series).tolist() == [738341, 738297, 738342]

    def test_missing_value(self):
        series = pd.Series(pd.to_datetime(["2022-07-06", None]))
        with pytest.raises(InvalidDate, match="missing date at index 1"):
            encode_series(series)

    def test_empty(self):
        codes = encode_series(pd.Series([], dtype=object))
        assert codes.empty
        assert codes.dtype == np.uint32

    def test_explicit_codec(self, trade_dates):
        codes = encode_series(trade_dates, codec=PackedDateCodec())
        assert codes.iloc[0] == packed_from_ymd(2022, 7, 6)

    def test_default_codec_setting(self, trade_dates):
        settings.set_default_codec("PACKED")
        assert encode_series(trade_dates).iloc[0] == packed_from_ymd(2022, 7, 6)


class TestEncodeFrame:

    def test_columns(self):
        frame = pd.DataFrame({"y": [2022, 2024], "m": [7, 2], "d": [6, 29]})
        codes = encode_frame(frame, year="y", month="m", day="d")
        assert codes.iloc[0] == 738341
        assert codes.iloc[1] == codes.iloc[0] + (date(2024, 2, 29) - date(2022, 7, 6)).days

    def test_invalid_row(self):
        frame = pd.DataFrame({"year": [2023], "month": [2], "day": [29]})
        with pytest.raises(InvalidDate, match="at index 0"):
            encode_frame(frame)

    def test_missing_column(self):
        with pytest.raises(KeyError, match="'day'"):
            encode_frame(pd.DataFrame({"year": [2022], "month": [1]}))


class TestDecodeSeries:

    def test_round_trip(self, trade_dates):
        decoded = decode_series(encode_series(trade_dates))
        assert list(decoded.columns) == ["year", "month", "day"]
        assert list(decoded.index) == ["a", "b", "c"]
        assert decoded.loc["c"].tolist() == [2024, 2, 29]

    def test_format_series(self, trade_dates):
        rendered = format_series(encode_series(trade_dates))
        assert rendered.tolist() == ["2022-07-06", "2022-05-23", "2024-02-29"]
        assert rendered.name == "trade_date"

    def test_out_of_range_code(self):
        with pytest.raises(InvalidDate):
            decode_series(pd.Series([738341, 99_999_999]))
