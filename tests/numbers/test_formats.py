"""Tests for fptensor/numbers/formats.py: the packaged format table."""

import pytest

from fptensor.errors import FormatError
from fptensor.numbers.formats import format_table, get_format, parse_tag
from fptensor.numbers.types import FormatTag


class TestFormatTable:
    def test_every_tag_has_an_entry(self):
        assert set(format_table()) == set(FormatTag)

    def test_fp8x23(self):
        fmt = get_format(FormatTag.FP8x23)
        assert fmt.frac_bits == 23
        assert fmt.one == 8388608
        assert fmt.half == 4194304
        assert len(fmt.exp2_poly) == 8

    def test_fp16x16(self):
        fmt = get_format("FP16x16")
        assert fmt.one == 65536
        assert fmt.log2_e == 94548

    def test_default_is_fp16x16(self):
        assert get_format(None).tag is FormatTag.FP16x16

    def test_unknown_name(self):
        with pytest.raises(FormatError):
            parse_tag("FP32x32")
