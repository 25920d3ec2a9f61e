"""Tests for fptensor/numbers/arith.py: scalar arithmetic per element kind."""

import pytest

from fptensor.errors import DivisionByZeroError
from fptensor.numbers.arith import (
    INTEGER,
    FixedArithmetic,
    arithmetic_for,
    convert,
    fixed_arithmetic,
)
from fptensor.numbers.formats import get_format
from fptensor.numbers.types import Fixed, FormatTag

FP = fixed_arithmetic(FormatTag.FP8x23)
ONE = 1 << 23


# ---------------------------------------------------------------------------
# Fixed value type
# ---------------------------------------------------------------------------

class TestFixedValue:
    def test_negative_zero_normalized(self):
        assert Fixed(0, True).sign is False
        assert Fixed(0, True) == Fixed(0)

    def test_signed(self):
        assert Fixed(5, True).signed == -5
        assert Fixed(5).signed == 5

    def test_ordering_uses_signed_value(self):
        assert Fixed(10, True) < Fixed(1, True) < Fixed(0) < Fixed(1)

    def test_negative_mag_rejected(self):
        with pytest.raises(ValueError):
            Fixed(-1)

    def test_bool_mag_rejected(self):
        with pytest.raises(TypeError):
            Fixed(True)


# ---------------------------------------------------------------------------
# Fixed-point arithmetic
# ---------------------------------------------------------------------------

class TestFixedArithmetic:
    def test_from_unscaled(self):
        assert FP.from_unscaled(3) == Fixed(3 * ONE)
        assert FP.from_unscaled(3, True) == Fixed(3 * ONE, True)

    def test_from_unscaled_negative_int(self):
        assert FP.from_unscaled(-2) == Fixed(2 * ONE, True)

    def test_add_same_sign(self):
        assert FP.add(Fixed(5, True), Fixed(3, True)) == Fixed(8, True)

    def test_add_mixed_sign(self):
        assert FP.add(Fixed(5), Fixed(8, True)) == Fixed(3, True)
        assert FP.add(Fixed(8), Fixed(5, True)) == Fixed(3)

    def test_add_to_zero_is_unsigned(self):
        assert FP.add(Fixed(5, True), Fixed(5)) == Fixed(0)

    def test_sub(self):
        assert FP.sub(FP.from_unscaled(2), FP.from_unscaled(5)) == FP.from_unscaled(3, True)

    def test_mul_truncates_toward_zero(self):
        # 1.5 * 1/ONE = 1.5 raw -> 1
        assert FP.mul(Fixed(ONE + ONE // 2), Fixed(1)) == Fixed(1)
        assert FP.mul(Fixed(ONE + ONE // 2, True), Fixed(1)) == Fixed(1, True)

    def test_mul_sign(self):
        assert FP.mul(FP.from_unscaled(2, True), FP.from_unscaled(3, True)) == FP.from_unscaled(6)

    def test_div(self):
        assert FP.div(FP.from_unscaled(1), FP.from_unscaled(2)) == Fixed(ONE // 2)
        assert FP.div(FP.from_unscaled(6), FP.from_unscaled(3, True)) == FP.from_unscaled(2, True)

    def test_div_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            FP.div(FP.from_unscaled(1), Fixed(0))

    def test_div_by_zero_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            FP.div(FP.one(), FP.zero())

    def test_compare(self):
        assert FP.compare(Fixed(1, True), Fixed(0)) == -1
        assert FP.compare(Fixed(7), Fixed(7)) == 0
        assert FP.compare(Fixed(2), Fixed(1)) == 1


# ---------------------------------------------------------------------------
# Integer arithmetic
# ---------------------------------------------------------------------------

class TestIntegerArithmetic:
    def test_div_truncates_toward_zero(self):
        assert INTEGER.div(7, 2) == 3
        assert INTEGER.div(-7, 2) == -3
        assert INTEGER.div(7, -2) == -3

    def test_div_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            INTEGER.div(1, 0)

    def test_from_unscaled(self):
        assert INTEGER.from_unscaled(4, True) == -4


# ---------------------------------------------------------------------------
# Dispatch and conversion
# ---------------------------------------------------------------------------

class TestDispatch:
    def test_integer(self):
        assert arithmetic_for(None, fixed=False) is INTEGER

    def test_fixed_tag(self):
        arith = arithmetic_for(FormatTag.FP16x16, fixed=True)
        assert isinstance(arith, FixedArithmetic)
        assert arith.tag is FormatTag.FP16x16

    def test_fixed_default(self):
        assert arithmetic_for(None, fixed=True).tag is FormatTag.FP16x16

    def test_cached_per_format(self):
        assert fixed_arithmetic("FP8x23") is fixed_arithmetic(FormatTag.FP8x23)


class TestConvert:
    def test_widen(self):
        one16 = get_format(FormatTag.FP16x16).one
        assert convert(Fixed(one16, True), FormatTag.FP16x16, FormatTag.FP8x23) == Fixed(ONE, True)

    def test_narrow_truncates(self):
        assert convert(Fixed(ONE + 127), FormatTag.FP8x23, FormatTag.FP16x16) == Fixed(1 << 16)
