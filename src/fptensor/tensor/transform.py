"""Shape transforms: reshape, flatten and N-dimensional transpose."""

from __future__ import annotations

from typing import Optional, Sequence

from ..budget import Budget, resolve
from ..errors import DimensionMismatchError, ShapeMismatchError
from .shape import product, ravel_index, unravel_index
from .tensor import Tensor


def reshape(t: Tensor, target: Sequence[int]) -> Tensor:
    """Same data under a new shape. Fails with ShapeMismatchError if sizes differ."""
    target = tuple(target)
    if any(d < 0 for d in target) or product(target) != len(t.data):
        raise ShapeMismatchError(f"cannot reshape {t.shape} ({len(t.data)} elements) to {target}")
    return Tensor(target, t.data, t.format)


def flatten(t: Tensor) -> Tensor:
    return Tensor((len(t.data),), t.data, t.format)


def inverse_permutation(axes: Sequence[int]) -> tuple[int, ...]:
    """`inv` such that ``inv[axes[k]] == k``."""
    inv = [0] * len(axes)
    for k, a in enumerate(axes):
        inv[a] = k
    return tuple(inv)


def _check_permutation(axes: Sequence[int], rank: int) -> tuple[int, ...]:
    axes = tuple(axes)
    if len(axes) != rank:
        raise DimensionMismatchError(f"expected {rank} axes, got {len(axes)}")
    if sorted(axes) != list(range(rank)):
        raise DimensionMismatchError(f"axes {axes} are not a permutation of range({rank})")
    return axes


def transpose(t: Tensor, axes: Sequence[int], *, budget: Optional[Budget] = None) -> Tensor:
    """Permute axes: ``out.shape[i] == t.shape[axes[i]]``.

    For each output element the output coordinates are unraveled; input axis
    ``axes[k]`` takes output coordinate ``k``; the assembled input coordinates
    are raveled against the input shape.
    """
    axes = _check_permutation(axes, t.rank)
    budget = resolve(budget)
    out_shape = tuple(t.shape[a] for a in axes)
    inv = inverse_permutation(axes)
    result = []
    for n in range(len(t.data)):
        budget.consume()
        out_coords = unravel_index(n, out_shape)
        in_coords = [out_coords[inv[j]] for j in range(t.rank)]
        result.append(t.data[ravel_index(t.shape, in_coords)])
    return Tensor(out_shape, tuple(result), t.format)
