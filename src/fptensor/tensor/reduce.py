"""Reductions: axis sum, global min/max, argmax/argmin.

Axis reductions iterate the output positions and, for each, walk the reduced
axis. Output shape follows `reduced_shape`: the axis is kept as 1 with
``keepdims=True`` and removed otherwise.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from ..budget import Budget, resolve
from ..errors import EmptyTensorError
from .shape import normalize_axis, product, ravel_index, reduced_shape, unravel_index
from .tensor import Tensor


def _groups(t: Tensor, axis: int, budget: Budget) -> Iterator[list[int]]:
    """Yield, per output position, the flat offsets along `axis`."""
    kept = reduced_shape(t.shape, axis, keepdims=True)
    dim = t.shape[axis]
    for n in range(product(kept)):
        budget.consume()
        coords = list(unravel_index(n, kept))
        offsets = []
        for j in range(dim):
            budget.consume()
            coords[axis] = j
            offsets.append(ravel_index(t.shape, coords))
        yield offsets


def reduce_sum(t: Tensor, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> Tensor:
    """Sum along `axis`. Fails with DimensionMismatchError if `axis` >= rank."""
    axis = normalize_axis(axis, t.rank)
    budget = resolve(budget)
    arith = t.arithmetic()
    result = []
    for offsets in _groups(t, axis, budget):
        acc = arith.zero()
        for off in offsets:
            acc = arith.add(acc, t.data[off])
        result.append(acc)
    return Tensor(reduced_shape(t.shape, axis, keepdims), tuple(result), t.format)


def _extreme(t: Tensor, want: int, budget: Optional[Budget]) -> Any:
    if not t.data:
        raise EmptyTensorError("min/max of an empty tensor")
    budget = resolve(budget)
    arith = t.arithmetic()
    best = t.data[0]
    for x in t.data[1:]:
        budget.consume()
        if arith.compare(x, best) == want:
            best = x
    return best


def min_value(t: Tensor, *, budget: Optional[Budget] = None) -> Any:
    """Smallest element. Fails with EmptyTensorError on an empty tensor."""
    return _extreme(t, -1, budget)


def max_value(t: Tensor, *, budget: Optional[Budget] = None) -> Any:
    """Largest element. Fails with EmptyTensorError on an empty tensor."""
    return _extreme(t, 1, budget)


def _arg_extreme(t: Tensor, axis: int, keepdims: bool, want: int, budget: Optional[Budget]) -> Tensor:
    axis = normalize_axis(axis, t.rank)
    if t.shape[axis] == 0:
        raise EmptyTensorError(f"axis {axis} of shape {t.shape} is empty")
    budget = resolve(budget)
    arith = t.arithmetic()
    result = []
    for offsets in _groups(t, axis, budget):
        best_idx = 0
        best = t.data[offsets[0]]
        # Strict comparison: the lowest index wins ties.
        for j in range(1, len(offsets)):
            x = t.data[offsets[j]]
            if arith.compare(x, best) == want:
                best, best_idx = x, j
        result.append(best_idx)
    return Tensor(reduced_shape(t.shape, axis, keepdims), tuple(result))


def argmax(t: Tensor, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> Tensor:
    """Index of the maximum along `axis`, lowest index on ties. Returns an integer tensor."""
    return _arg_extreme(t, axis, keepdims, 1, budget)


def argmin(t: Tensor, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> Tensor:
    """Index of the minimum along `axis`, lowest index on ties."""
    return _arg_extreme(t, axis, keepdims, -1, budget)
