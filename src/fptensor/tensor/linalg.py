"""Rank-bounded matrix multiplication.

Operands are rank 1 or rank 2:

- 1 x 1: dot product, returned as a scalar tensor (shape ``()``),
- 2 x 2: matrix product,
- 1 x 2: the vector is a ``1 x n`` row; the leading 1 is dropped,
- 2 x 1: the vector is an ``n x 1`` column; the trailing 1 is dropped.
"""

from __future__ import annotations

from typing import Any, Optional

from ..budget import Budget, resolve
from ..errors import ShapeMismatchError, UnsupportedRankError
from ..numbers.arith import Arithmetic
from .broadcast import common_kind
from .tensor import Tensor


def _dot(arith: Arithmetic, xs: list[Any], ys: list[Any], budget: Budget) -> Any:
    acc = arith.zero()
    for x, y in zip(xs, ys):
        budget.consume()
        acc = arith.add(acc, arith.mul(x, y))
    return acc


def _matmul_2d(
    arith: Arithmetic,
    a: tuple[Any, ...], m: int, n: int,
    b: tuple[Any, ...], p: int,
    budget: Budget,
) -> list[Any]:
    """(m x n) @ (n x p) on flat row-major data."""
    out = []
    for i in range(m):
        row = list(a[i * n:(i + 1) * n])
        for j in range(p):
            budget.consume()
            col = [b[k * p + j] for k in range(n)]
            out.append(_dot(arith, row, col, budget))
    return out


def matmul(a: Tensor, b: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    """Matrix product of rank 1 or rank 2 operands.

    Scalars (rank 0) and rank >= 3 fail with UnsupportedRankError; scale by a
    scalar with `mul`.
    """
    for t in (a, b):
        if t.rank not in (1, 2):
            raise UnsupportedRankError(f"matmul supports rank 1 or 2 operands, got rank {t.rank}")
    arith, out_format = common_kind(a, b)
    budget = resolve(budget)

    if a.rank == 1 and b.rank == 1:
        if a.shape != b.shape:
            raise ShapeMismatchError(f"dot product of {a.shape} and {b.shape}")
        return Tensor((), (_dot(arith, list(a.data), list(b.data), budget),), out_format)

    m, n = (1, a.shape[0]) if a.rank == 1 else a.shape
    n2, p = (b.shape[0], 1) if b.rank == 1 else b.shape
    if n != n2:
        raise ShapeMismatchError(f"inner dimensions differ: {a.shape} @ {b.shape}")

    data = _matmul_2d(arith, a.data, m, n, b.data, p, budget)
    if a.rank == 1:
        out_shape: tuple[int, ...] = (p,)
    elif b.rank == 1:
        out_shape = (m,)
    else:
        out_shape = (m, p)
    return Tensor(out_shape, tuple(data), out_format)
