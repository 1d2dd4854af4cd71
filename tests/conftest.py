"""
Shared fixtures for the compactdate test suite.
"""

from datetime import date, timedelta
from typing import Iterator, Tuple

import pytest

from compactdate import settings
from compactdate.calendar.tables import MONTH_DAYS, MONTH_DAYS_LEAP_YEAR
from compactdate.calendar.rules import is_leap_year
from compactdate.codecs import DenseDateCodec, PackedDateCodec


def iter_calendar(first_year: int, last_year: int) -> Iterator[Tuple[int, int, int]]:
    """Every valid date from January 1st of ``first_year`` to December 31st of ``last_year``."""
    for year in range(first_year, last_year + 1):
        month_days = MONTH_DAYS_LEAP_YEAR if is_leap_year(year) else MONTH_DAYS
        for month in range(1, 13):
            for day in range(1, month_days[month - 1] + 1):
                yield year, month, day


@pytest.fixture
def dense() -> DenseDateCodec:
    return DenseDateCodec()


@pytest.fixture
def packed() -> PackedDateCodec:
    return PackedDateCodec()


@pytest.fixture
def known_dates():
    """Encodings that must never change between releases."""
    return [
        ((2022, 7, 6), 738341),
        ((2022, 5, 23), 738297),
        ((1, 1, 1), 0),
        ((1979, 1, 22), date(1979, 1, 22).toordinal() - 1),
    ]


@pytest.fixture
def sample_dates():
    """A spread of stdlib dates across leap/century boundaries."""
    anchors = [
        date(1, 1, 1),
        date(4, 2, 29),
        date(100, 12, 31),
        date(101, 1, 1),
        date(400, 2, 29),
        date(1900, 2, 28),
        date(1900, 3, 1),
        date(2000, 2, 29),
        date(2000, 12, 31),
        date(2024, 2, 29),
        date(9999, 12, 31),
    ]
    return anchors + [a + timedelta(days=1) for a in anchors if a.year < 9999]


@pytest.fixture(autouse=True)
def clean_default_codec(monkeypatch):
    """Each test starts with an unresolved default codec and no env override."""
    monkeypatch.delenv(settings.CODEC_ENV_VAR, raising=False)
    settings.reset_default_codec()
    yield
    settings.reset_default_codec()


@pytest.fixture
def calendar_days():
    """The ``iter_calendar`` generator, for tests that walk whole years."""
    return iter_calendar
