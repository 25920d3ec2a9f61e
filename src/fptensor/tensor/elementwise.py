"""Scalar maps lifted to tensors.

Each function applies one scalar routine from `fptensor.numbers.math` to every
element through `map_unary`. The transcendental maps need a fixed-point tensor;
they run in the tensor's format (the configured default when untagged) and the
same budget is shared by the element loop and the scalar routine.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..budget import Budget, resolve
from ..numbers import math as fpmath
from ..numbers.formats import FixedFormat
from ..numbers.types import Fixed
from .broadcast import map_unary
from .tensor import Tensor

ScalarFn = Callable[[FixedFormat, Fixed, Optional[Budget]], Fixed]


def _fixed_map(name: str, fn: ScalarFn, t: Tensor, budget: Optional[Budget]) -> Tensor:
    if not t.is_fixed:
        raise TypeError(f"{name} requires a fixed-point tensor")
    fmt = t.fixed_format()
    budget = resolve(budget)
    return map_unary(lambda x: fn(fmt, x, budget), t, budget=budget, out_format=t.format)


def ln(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    """Natural log of every element. Fails with DomainError on any element <= 0."""
    return _fixed_map("ln", fpmath.ln, t, budget)


def log2(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("log2", fpmath.log2, t, budget)


def log10(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("log10", fpmath.log10, t, budget)


def exp(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("exp", fpmath.exp, t, budget)


def exp2(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("exp2", fpmath.exp2, t, budget)


def sqrt(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("sqrt", lambda fmt, x, _: fpmath.sqrt(fmt, x), t, budget)


def tanh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("tanh", fpmath.tanh, t, budget)


def cosh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("cosh", fpmath.cosh, t, budget)


def sinh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("sinh", fpmath.sinh, t, budget)


def acosh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    """Inverse hyperbolic cosine. Fails with DomainError on any element < 1."""
    return _fixed_map("acosh", fpmath.acosh, t, budget)


def asinh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("asinh", fpmath.asinh, t, budget)


def atanh(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("atanh", fpmath.atanh, t, budget)


def sigmoid(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return _fixed_map("sigmoid", fpmath.sigmoid, t, budget)


def neg(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return map_unary(t.arithmetic().neg, t, budget=budget, out_format=t.format)


def abs_(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    return map_unary(t.arithmetic().abs, t, budget=budget, out_format=t.format)
