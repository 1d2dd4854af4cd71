"""
Tests for the codec registry and the default codec setting.
"""

import pytest

import compactdate
from compactdate import settings
from compactdate.codecs import (
    DenseDateCodec,
    PackedDateCodec,
    available_codecs,
    create_codec,
    register_codec,
    unregister_codec,
)


class OffsetDenseCodec(DenseDateCodec):
    """Dense codec counted from 1970-01-01 instead of the era start."""

    name = "UNIX_DAYS"
    _offset = DenseDateCodec().encode(1970, 1, 1)

    def encode(self, year, month, day):
        return super().encode(year, month, day) - self._offset

    def decode(self, value):
        return super().decode(value + self._offset)


class TestCreateCodec:

    def test_builtin_names(self):
        assert available_codecs() == ["DENSE", "PACKED"]

    @pytest.mark.parametrize(
        "name,cls",
        [("DENSE", DenseDateCodec), ("dense", DenseDateCodec), (" Packed ", PackedDateCodec)],
    )
    def test_lookup_is_case_insensitive(self, name, cls):
        assert isinstance(create_codec(name), cls)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown date codec: nope"):
            create_codec("nope")


class TestRegisterCodec:

    def test_register_and_unregister(self):
        register_codec("unix_days", OffsetDenseCodec)
        try:
            codec = create_codec("UNIX_DAYS")
            assert codec.encode(1970, 1, 2) == 1
            assert codec.decode(0) == (1970, 1, 1)
            assert "UNIX_DAYS" in available_codecs()
        finally:
            unregister_codec("unix_days")
        assert "UNIX_DAYS" not in available_codecs()

    def test_duplicate_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            register_codec("dense", DenseDateCodec)

    def test_non_codec_rejected(self):
        with pytest.raises(TypeError):
            register_codec("other", dict)

    def test_builtin_cannot_be_removed(self):
        with pytest.raises(ValueError, match="built-in"):
            unregister_codec("PACKED")


class TestDefaultCodec:

    def test_dense_when_unset(self):
        assert isinstance(settings.get_default_codec(), DenseDateCodec)

    def test_resolved_once(self):
        assert settings.get_default_codec() is settings.get_default_codec()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv(settings.CODEC_ENV_VAR, "packed")
        assert isinstance(settings.get_default_codec(), PackedDateCodec)

    def test_bad_environment_value(self, monkeypatch):
        monkeypatch.setenv(settings.CODEC_ENV_VAR, "bogus")
        with pytest.raises(ValueError, match="Unknown date codec"):
            settings.get_default_codec()

    def test_set_default_codec(self):
        compactdate.set_default_codec("PACKED")
        assert compactdate.encode_with_default(2022, 7, 6) == (2022 << 9) | (7 << 5) | 6
        assert compactdate.decode_with_default((2022 << 9) | (7 << 5) | 6) == (2022, 7, 6)
        # The core pair always stays dense.
        assert compactdate.encode(2022, 7, 6) == 738341

    def test_set_default_codec_logs(self, caplog):
        with caplog.at_level("INFO", logger="compactdate.settings"):
            settings.set_default_codec("dense")
        assert "Default date codec set to DENSE" in caplog.text

    def test_limits(self):
        assert settings.MIN_YEAR == 1
        assert settings.MAX_YEAR == 65535
        assert settings.MAX_ORDINAL == compactdate.encode(65535, 12, 31)
