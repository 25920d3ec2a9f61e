"""Broadcasting executor.

`broadcast_apply()` is the single loop behind every binary tensor operation:

1. ``out_shape = broadcast_shape(a.shape, b.shape)``
2. for each output flat index ``n`` (one budget step each): unravel ``n``,
   map the coordinates into each operand with `broadcast_index_mapping`, apply
   the scalar operation.

`add`, `sub`, `mul` and `div` plug the operands' scalar arithmetic into it.
`map_unary()` is the unary counterpart and keeps the shape unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..budget import Budget, resolve
from ..errors import FormatMismatchError
from ..numbers.arith import Arithmetic
from ..numbers.types import FormatTag
from .shape import broadcast_index_mapping, broadcast_shape, product, unravel_index
from .tensor import Tensor

BinaryFn = Callable[[Any, Any], Any]
UnaryFn = Callable[[Any], Any]


def common_kind(a: Tensor, b: Tensor) -> tuple[Arithmetic, Optional[FormatTag]]:
    """Shared arithmetic and output format of two operands.

    Integer and fixed-point operands never mix, and two fixed-point operands
    must resolve to the same format (an untagged tensor uses the default).
    """
    if a.is_fixed != b.is_fixed:
        raise FormatMismatchError("cannot combine an integer tensor with a fixed-point tensor")
    if not a.is_fixed:
        return a.arithmetic(), None
    fa = a.fixed_format().tag
    fb = b.fixed_format().tag
    if fa != fb:
        raise FormatMismatchError(f"format mismatch: {fa.value} vs {fb.value}")
    out_format = a.format if a.format is not None else b.format
    return a.arithmetic(), out_format


def broadcast_apply(
    op: BinaryFn,
    a: Tensor,
    b: Tensor,
    *,
    budget: Optional[Budget] = None,
    out_format: Optional[FormatTag] = None,
) -> Tensor:
    budget = resolve(budget)
    out_shape = broadcast_shape(a.shape, b.shape)
    result = []
    for n in range(product(out_shape)):
        budget.consume()
        coords = unravel_index(n, out_shape)
        x = a.data[broadcast_index_mapping(a.shape, coords)]
        y = b.data[broadcast_index_mapping(b.shape, coords)]
        result.append(op(x, y))
    return Tensor(out_shape, tuple(result), out_format)


def _arith_op(name: str, a: Tensor, b: Tensor, budget: Optional[Budget]) -> Tensor:
    arith, out_format = common_kind(a, b)
    return broadcast_apply(getattr(arith, name), a, b, budget=budget, out_format=out_format)


def add(a: Tensor, b: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _arith_op("add", a, b, budget)


def sub(a: Tensor, b: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _arith_op("sub", a, b, budget)


def mul(a: Tensor, b: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _arith_op("mul", a, b, budget)


def div(a: Tensor, b: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    """Elementwise division. Fails with DivisionByZeroError on a zero divisor."""
    return _arith_op("div", a, b, budget)


def map_unary(
    fn: UnaryFn,
    t: Tensor,
    *,
    budget: Optional[Budget] = None,
    out_format: Optional[FormatTag] = None,
) -> Tensor:
    """Apply `fn` to every element. The output keeps `t`'s shape."""
    budget = resolve(budget)
    result = []
    for x in t.data:
        budget.consume()
        result.append(fn(x))
    return Tensor(t.shape, tuple(result), out_format)
