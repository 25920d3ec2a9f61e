"""Tests for fptensor/tensor/reduce.py: reduce_sum, min/max, argmax/argmin."""

import pytest

from fptensor.budget import Budget
from fptensor.errors import DimensionMismatchError, EmptyTensorError, ResourceExhaustedError
from fptensor.numbers.arith import fixed_arithmetic
from fptensor.numbers.types import Fixed, FormatTag
from fptensor.tensor import Tensor, argmax, argmin, max_value, min_value, reduce_sum

A8 = fixed_arithmetic(FormatTag.FP8x23)

M23 = Tensor.new([2, 3], [0, 1, 2, 3, 4, 5])


# ---------------------------------------------------------------------------
# reduce_sum
# ---------------------------------------------------------------------------

class TestReduceSum:
    def test_axis0(self):
        out = reduce_sum(M23, 0)
        assert out.shape == (3,)
        assert out.data == (3, 5, 7)

    def test_axis1(self):
        out = M23.reduce_sum(1)
        assert out.shape == (2,)
        assert out.data == (3, 12)

    def test_keepdims_preserves_rank(self):
        out = M23.reduce_sum(1, keepdims=True)
        assert out.shape == (2, 1)
        assert out.rank == M23.rank

    def test_rank3_middle_axis(self):
        t = Tensor.new([2, 2, 2], range(8))
        out = t.reduce_sum(1)
        assert out.shape == (2, 2)
        assert out.data == (2, 4, 10, 12)

    def test_vector_to_scalar(self):
        out = Tensor.new([4], [1, 2, 3, 4]).reduce_sum(0)
        assert out.shape == ()
        assert out.data == (10,)

    def test_fixed(self):
        t = Tensor.new([2], [A8.from_unscaled(2), A8.from_unscaled(5, True)], FormatTag.FP8x23)
        out = t.reduce_sum(0)
        assert out.data == (A8.from_unscaled(3, True),)
        assert out.format is FormatTag.FP8x23

    def test_axis_out_of_range(self):
        with pytest.raises(DimensionMismatchError):
            M23.reduce_sum(2)

    def test_budget(self):
        with pytest.raises(ResourceExhaustedError):
            M23.reduce_sum(0, budget=Budget(4))


# ---------------------------------------------------------------------------
# min / max
# ---------------------------------------------------------------------------

class TestMinMax:
    def test_integers(self):
        t = Tensor.new([5], [3, -1, 7, 0, 7])
        assert min_value(t) == -1
        assert max_value(t) == 7

    def test_fixed_signed_compare(self):
        t = Tensor.new([3], [Fixed(5, True), Fixed(1), Fixed(9, True)], FormatTag.FP8x23)
        assert t.min() == Fixed(9, True)
        assert t.max() == Fixed(1)

    def test_empty(self):
        empty = Tensor.new([0], [])
        with pytest.raises(EmptyTensorError):
            empty.min()
        with pytest.raises(EmptyTensorError):
            empty.max()


# ---------------------------------------------------------------------------
# argmax / argmin
# ---------------------------------------------------------------------------

class TestArgmax:
    def test_lowest_index_wins_ties(self):
        out = argmax(Tensor.new([4], [3, 5, 5, 1]), 0)
        assert out.data == (1,)
        assert out.shape == ()

    def test_axis1(self):
        t = Tensor.new([2, 3], [1, 9, 9, 7, 2, 7])
        out = t.argmax(1)
        assert out.shape == (2,)
        assert out.data == (1, 0)

    def test_axis0_keepdims(self):
        t = Tensor.new([2, 3], [1, 9, 3, 7, 2, 3])
        out = t.argmax(0, keepdims=True)
        assert out.shape == (1, 3)
        assert out.data == (1, 0, 0)

    def test_output_is_integer_tensor(self):
        t = Tensor.new([2], [Fixed(1), Fixed(2)], FormatTag.FP8x23)
        out = t.argmax(0)
        assert out.format is None
        assert not out.is_fixed

    def test_axis_out_of_range(self):
        with pytest.raises(DimensionMismatchError):
            M23.argmax(3)

    def test_empty_axis(self):
        with pytest.raises(EmptyTensorError):
            Tensor.new([2, 0], []).argmax(1)


class TestArgmin:
    def test_lowest_index_wins_ties(self):
        assert argmin(Tensor.new([4], [3, 1, 1, 5]), 0).data == (1,)

    def test_fixed(self):
        t = Tensor.new([3], [Fixed(1), Fixed(4, True), Fixed(2, True)], FormatTag.FP8x23)
        assert t.argmin(0).data == (1,)
