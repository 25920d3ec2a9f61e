"""Tests for fptensor/tensor/tensor.py: construction, indexing, reshape."""

import pytest

from fptensor.errors import DimensionMismatchError, IndexOutOfRangeError, ShapeMismatchError
from fptensor.numbers.types import Fixed, FormatTag
from fptensor.tensor import Tensor


def _ints(shape, n):
    return Tensor.new(shape, list(range(n)))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_valid(self):
        t = Tensor.new([2, 3], range(6))
        assert t.shape == (2, 3)
        assert t.data == (0, 1, 2, 3, 4, 5)
        assert t.rank == 2
        assert t.format is None

    def test_length_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            Tensor.new([2, 3], [1, 2, 3])

    def test_scalar(self):
        t = Tensor.new([], [7])
        assert t.rank == 0
        assert t.at([]) == 7

    def test_format_name_is_parsed(self):
        t = Tensor.new([1], [Fixed(1)], "FP8x23")
        assert t.format is FormatTag.FP8x23

    def test_format_requires_fixed_elements(self):
        with pytest.raises(TypeError):
            Tensor.new([1], [1], FormatTag.FP8x23)

    def test_mixed_elements_rejected(self):
        with pytest.raises(TypeError):
            Tensor.new([2], [Fixed(1), 1])
        with pytest.raises(TypeError):
            Tensor.new([2], [1, Fixed(1)])

    def test_bool_elements_rejected(self):
        with pytest.raises(TypeError):
            Tensor.new([2], [True, False])

    def test_negative_dimension(self):
        with pytest.raises(ShapeMismatchError):
            Tensor.new([-1], [])

    def test_zero_dimension_is_empty(self):
        t = Tensor.new([0, 3], [])
        assert t.size == 0

    def test_immutable(self):
        t = _ints([2], 2)
        with pytest.raises(AttributeError):
            t.shape = (1, 2)  # type: ignore[misc]

    def test_is_fixed(self):
        assert Tensor.new([1], [Fixed(3)]).is_fixed
        assert not _ints([1], 1).is_fixed


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------

class TestIndexing:
    def test_at(self):
        t = _ints([2, 3, 4], 24)
        assert t.at([1, 2, 3]) == 23
        assert t.at([0, 1, 0]) == 4

    def test_at_arity(self):
        with pytest.raises(DimensionMismatchError):
            _ints([2, 3], 6).at([1])

    def test_at_offset_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            _ints([2, 3], 6).at([2, 0])
        with pytest.raises(IndexOutOfRangeError):
            _ints([2, 3], 6).at([0, -1])

    def test_stride_and_ravel(self):
        t = _ints([2, 3, 4], 24)
        assert t.stride() == (12, 4, 1)
        assert t.ravel_index([1, 1, 1]) == 17
        assert t.unravel_index(17) == (1, 1, 1)


# ---------------------------------------------------------------------------
# Reshape
# ---------------------------------------------------------------------------

class TestReshape:
    def test_reshape_keeps_data(self):
        t = _ints([2, 3], 6)
        r = t.reshape([3, 2])
        assert r.shape == (3, 2)
        assert r.data == t.data
        assert t.shape == (2, 3)

    def test_reshape_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            _ints([2, 3], 6).reshape([4, 2])

    def test_flatten(self):
        t = Tensor.new([2, 2], [Fixed(1), Fixed(2), Fixed(3), Fixed(4)], FormatTag.FP8x23)
        f = t.flatten()
        assert f.shape == (4,)
        assert f.format is FormatTag.FP8x23
