"""Thresholded activations.

`leaky_relu` takes an integer tensor of raw, unscaled values and produces a
fixed-point tensor. The threshold test is done on the raw integer, before the
value is scaled into the format:

    x >= threshold  ->  from_unscaled(x)
    x <  threshold  ->  from_unscaled(x) * alpha

`alpha` must have magnitude strictly below ONE of the target format.
"""

from __future__ import annotations

from typing import Optional, Union

from ..budget import Budget
from ..errors import DomainError
from ..numbers.arith import fixed_arithmetic
from ..numbers.types import Fixed, FormatTag
from .broadcast import map_unary
from .tensor import Tensor


def leaky_relu(
    t: Tensor,
    alpha: Fixed,
    format: Optional[Union[FormatTag, str]] = None,
    threshold: int = 0,
    *,
    budget: Optional[Budget] = None,
) -> Tensor:
    if t.is_fixed:
        raise TypeError("leaky_relu takes an integer tensor of raw values")
    arith = fixed_arithmetic(format)
    if alpha.mag >= arith.fmt.one:
        raise DomainError(f"alpha must be less than one unit of {arith.tag.value}: {alpha!r}")

    def _apply(x: int) -> Fixed:
        scaled = arith.from_unscaled(x)
        if x >= threshold:
            return scaled
        return arith.mul(scaled, alpha)

    out_format = arith.tag if format is not None else None
    return map_unary(_apply, t, budget=budget, out_format=out_format)


def relu(t: Tensor, *, budget: Optional[Budget] = None) -> Tensor:
    """Zero for negative elements, identity otherwise. Keeps the element kind."""
    arith = t.arithmetic()
    zero = arith.zero()

    def _apply(x):
        return zero if arith.compare(x, zero) < 0 else x

    return map_unary(_apply, t, budget=budget, out_format=t.format)
