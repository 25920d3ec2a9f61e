"""Tests for fptensor/tensor/transform.py: transpose and reshape."""

import pytest

from fptensor.budget import Budget
from fptensor.errors import DimensionMismatchError, ResourceExhaustedError, ShapeMismatchError
from fptensor.numbers.types import Fixed, FormatTag
from fptensor.tensor import Tensor, inverse_permutation, reshape, transpose


class TestTranspose:
    def test_matrix(self):
        t = Tensor.new([2, 3], [0, 1, 2, 3, 4, 5])
        out = transpose(t, [1, 0])
        assert out.shape == (3, 2)
        assert out.data == (0, 3, 1, 4, 2, 5)

    def test_rank3(self):
        t = Tensor.new([2, 3, 4], range(24))
        out = t.transpose([2, 0, 1])
        assert out.shape == (4, 2, 3)
        for i in range(4):
            for j in range(2):
                for k in range(3):
                    assert out.at([i, j, k]) == t.at([j, k, i])

    def test_identity(self):
        t = Tensor.new([2, 2], [1, 2, 3, 4])
        assert t.transpose([0, 1]) == t

    def test_inverse_round_trip(self):
        t = Tensor.new([2, 3, 4], range(24))
        axes = [1, 2, 0]
        assert t.transpose(axes).transpose(inverse_permutation(axes)) == t

    def test_keeps_format(self):
        t = Tensor.new([1, 2], [Fixed(1), Fixed(2)], FormatTag.FP8x23)
        assert t.transpose([1, 0]).format is FormatTag.FP8x23

    def test_wrong_arity(self):
        with pytest.raises(DimensionMismatchError):
            Tensor.new([2, 2], [1, 2, 3, 4]).transpose([0])

    def test_not_a_permutation(self):
        with pytest.raises(DimensionMismatchError):
            Tensor.new([2, 2], [1, 2, 3, 4]).transpose([0, 0])

    def test_budget(self):
        with pytest.raises(ResourceExhaustedError):
            Tensor.new([2, 2], [1, 2, 3, 4]).transpose([1, 0], budget=Budget(3))


class TestInversePermutation:
    def test_inverse(self):
        assert inverse_permutation([2, 0, 1]) == (1, 2, 0)


class TestReshapeFunction:
    def test_to_scalar(self):
        assert reshape(Tensor.new([1, 1], [9]), []).shape == ()

    def test_mismatch(self):
        with pytest.raises(ShapeMismatchError):
            reshape(Tensor.new([4], [1, 2, 3, 4]), [3])
