"""Scalar arithmetic behind every tensor routine.

Tensor code never touches element representations directly. It asks
`arithmetic_for()` for an `Arithmetic` and calls its methods, so one tensor
implementation serves integer tensors and every fixed-point format.

Rounding is explicit:
- fixed-point ``mul`` is ``(magA * magB) // ONE`` and ``div`` is
  ``(magA * ONE) // magB``; both truncate the magnitude, i.e. round toward zero;
- integer ``div`` also truncates toward zero (not Python's floor division).
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union

from ..errors import DivisionByZeroError
from .formats import FixedFormat, get_format
from .types import Fixed, FormatTag


class Arithmetic(Protocol):
    """Operations a tensor element type must provide."""

    def zero(self) -> Any: ...

    def one(self) -> Any: ...

    def from_unscaled(self, n: int, sign: bool = False) -> Any: ...

    def add(self, a: Any, b: Any) -> Any: ...

    def sub(self, a: Any, b: Any) -> Any: ...

    def mul(self, a: Any, b: Any) -> Any: ...

    def div(self, a: Any, b: Any) -> Any: ...

    def neg(self, a: Any) -> Any: ...

    def abs(self, a: Any) -> Any: ...

    def compare(self, a: Any, b: Any) -> int: ...


def _cmp(x: int, y: int) -> int:
    return (x > y) - (x < y)


class IntegerArithmetic:
    """Plain Python integers."""

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def from_unscaled(self, n: int, sign: bool = False) -> int:
        return -n if sign else n

    def add(self, a: int, b: int) -> int:
        return a + b

    def sub(self, a: int, b: int) -> int:
        return a - b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def div(self, a: int, b: int) -> int:
        if b == 0:
            raise DivisionByZeroError("integer division by zero")
        q = abs(a) // abs(b)
        return -q if (a < 0) != (b < 0) else q

    def neg(self, a: int) -> int:
        return -a

    def abs(self, a: int) -> int:
        return a if a >= 0 else -a

    def compare(self, a: int, b: int) -> int:
        return _cmp(a, b)

    def __repr__(self) -> str:
        return "IntegerArithmetic()"


class FixedArithmetic:
    """Signed-magnitude fixed-point arithmetic for one format."""

    def __init__(self, fmt: FixedFormat) -> None:
        self.fmt = fmt
        self._one = fmt.one

    @property
    def tag(self) -> FormatTag:
        return self.fmt.tag

    def zero(self) -> Fixed:
        return Fixed(0)

    def one(self) -> Fixed:
        return Fixed(self._one)

    def from_unscaled(self, n: int, sign: bool = False) -> Fixed:
        """Scale an integer by ONE. A negative `n` flips `sign`."""
        if n < 0:
            return Fixed(-n * self._one, not sign)
        return Fixed(n * self._one, sign)

    def add(self, a: Fixed, b: Fixed) -> Fixed:
        if a.sign == b.sign:
            return Fixed(a.mag + b.mag, a.sign)
        if a.mag >= b.mag:
            return Fixed(a.mag - b.mag, a.sign)
        return Fixed(b.mag - a.mag, b.sign)

    def sub(self, a: Fixed, b: Fixed) -> Fixed:
        return self.add(a, -b)

    def mul(self, a: Fixed, b: Fixed) -> Fixed:
        return Fixed((a.mag * b.mag) // self._one, a.sign != b.sign)

    def div(self, a: Fixed, b: Fixed) -> Fixed:
        if b.mag == 0:
            raise DivisionByZeroError("fixed-point division by zero")
        return Fixed((a.mag * self._one) // b.mag, a.sign != b.sign)

    def neg(self, a: Fixed) -> Fixed:
        return -a

    def abs(self, a: Fixed) -> Fixed:
        return Fixed(a.mag)

    def compare(self, a: Fixed, b: Fixed) -> int:
        return _cmp(a.signed, b.signed)

    def __repr__(self) -> str:
        return f"FixedArithmetic({self.fmt.tag.value})"


INTEGER = IntegerArithmetic()

_FIXED_CACHE: dict[FormatTag, FixedArithmetic] = {}


def fixed_arithmetic(tag: Optional[Union[FormatTag, str]] = None) -> FixedArithmetic:
    fmt = get_format(tag)
    arith = _FIXED_CACHE.get(fmt.tag)
    if arith is None:
        arith = FixedArithmetic(fmt)
        _FIXED_CACHE[fmt.tag] = arith
    return arith


def arithmetic_for(tag: Optional[FormatTag], fixed: bool) -> Arithmetic:
    """Integer arithmetic, or fixed-point arithmetic for `tag` (default format when None)."""
    if not fixed:
        return INTEGER
    return fixed_arithmetic(tag)


def convert(value: Fixed, src: Union[FormatTag, str], dst: Union[FormatTag, str]) -> Fixed:
    """Re-express `value` from format `src` in format `dst` (truncating extra bits)."""
    shift = get_format(dst).frac_bits - get_format(src).frac_bits
    if shift >= 0:
        return Fixed(value.mag << shift, value.sign)
    return Fixed(value.mag >> -shift, value.sign)
