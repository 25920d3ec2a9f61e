"""Shape algebra: products, strides, ravel/unravel and broadcasting rules.

Layout is row-major: the rightmost axis varies fastest.
"""

from __future__ import annotations

from typing import Sequence

from ..errors import DimensionMismatchError, IndexOutOfRangeError, ShapeMismatchError

Shape = tuple[int, ...]


def product(shape: Sequence[int]) -> int:
    """Number of elements. The empty shape (a scalar) has one."""
    total = 1
    for dim in shape:
        total *= dim
    return total


def stride(shape: Sequence[int]) -> Shape:
    """``stride[i] = product(shape[i+1:])``."""
    out = [0] * len(shape)
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        out[i] = acc
        acc *= shape[i]
    return tuple(out)


def ravel_index(shape: Sequence[int], indices: Sequence[int]) -> int:
    if len(indices) != len(shape):
        raise DimensionMismatchError(
            f"expected {len(shape)} indices for shape {tuple(shape)}, got {len(indices)}"
        )
    return sum(i * s for i, s in zip(indices, stride(shape)))


def unravel_index(flat: int, shape: Sequence[int]) -> Shape:
    """Inverse of `ravel_index` for offsets in ``[0, product(shape))``."""
    if flat < 0 or flat >= product(shape):
        raise IndexOutOfRangeError(f"flat index {flat} out of range for shape {tuple(shape)}")
    coords = []
    for s in stride(shape):
        q, flat = divmod(flat, s)
        coords.append(q)
    return tuple(coords)


def broadcast_shape(a: Sequence[int], b: Sequence[int]) -> Shape:
    """Broadcast two shapes, right-aligned. Fails with ShapeMismatchError."""
    rank = max(len(a), len(b))
    pa = (1,) * (rank - len(a)) + tuple(a)
    pb = (1,) * (rank - len(b)) + tuple(b)
    out = []
    for x, y in zip(pa, pb):
        if x == y or y == 1:
            out.append(x)
        elif x == 1:
            out.append(y)
        else:
            raise ShapeMismatchError(f"shapes {tuple(a)} and {tuple(b)} do not broadcast")
    return tuple(out)


def broadcast_index_mapping(shape: Sequence[int], indices: Sequence[int]) -> int:
    """Flat index into a tensor of `shape` for broadcasted coordinates `indices`.

    `indices` are right-aligned with `shape`; axes of size 1 always read
    coordinate 0.
    """
    if len(shape) > len(indices):
        raise DimensionMismatchError(
            f"shape {tuple(shape)} has more axes than indices {tuple(indices)}"
        )
    tail = indices[len(indices) - len(shape):]
    local = [0 if dim == 1 else i for dim, i in zip(shape, tail)]
    return ravel_index(shape, local)


def normalize_axis(axis: int, rank: int) -> int:
    if not isinstance(axis, int) or isinstance(axis, bool):
        raise TypeError("axis must be an int")
    if axis < 0 or axis >= rank:
        raise DimensionMismatchError(f"axis {axis} out of range for rank {rank}")
    return axis


def reduced_shape(shape: Sequence[int], axis: int, keepdims: bool) -> Shape:
    if keepdims:
        return tuple(1 if i == axis else d for i, d in enumerate(shape))
    return tuple(d for i, d in enumerate(shape) if i != axis)
