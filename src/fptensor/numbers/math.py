"""Transcendental functions on fixed-point scalars.

Every function takes the format descriptor first, then the operand, and an
optional `Budget` consulted on each loop iteration. All arithmetic is on Python
ints; results are bit-exact for a given format.

Two evaluation schemes are used:

- Exponentials (``exp2``, ``exp`` and the hyperbolic functions built on them)
  split the binary exponent into an integer part, applied as an exact power of
  two, and a fractional part, evaluated with the format's Horner polynomial
  from ``formats.yaml``.
- Logarithms (``ln``, ``log2``, ``log10``) are evaluated with 64 guard bits:
  binary range reduction to ``m`` in [1, 2), then ``ln(m) = 2*atanh((m-1)/(m+1))``
  summed until the series term vanishes. The guard-precision result is rounded
  to the format's decimal reference grid (6 places) and then into the format,
  both round-half-even.
"""

from __future__ import annotations

from math import isqrt
from typing import Optional

from ..budget import Budget, resolve
from ..errors import DomainError
from .arith import FixedArithmetic, fixed_arithmetic
from .formats import FixedFormat
from .types import Fixed

GUARD_BITS: int = 64
GUARD_ONE: int = 1 << GUARD_BITS
LN2_GUARD: int = 12786308645202655659  # floor(ln(2) * 2**64)
LN10_GUARD: int = 42475197918399869019  # floor(ln(10) * 2**64)


def _arith(fmt: FixedFormat) -> FixedArithmetic:
    return fixed_arithmetic(fmt.tag)


def _round_half_even(numerator: int, denominator: int) -> int:
    q, r = divmod(numerator, denominator)
    twice = 2 * r
    if twice > denominator or (twice == denominator and q % 2 == 1):
        q += 1
    return q


# -- Exponentials ------------------------------------------------------------

def exp2(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """``2**a``. Negative exponents return ``ONE / 2**|a|``."""
    budget = resolve(budget)
    arith = _arith(fmt)
    if a.mag == 0:
        return arith.one()

    int_part, frac_part = divmod(a.mag, fmt.one)
    res = arith.from_unscaled(1 << int_part)
    if frac_part != 0:
        frac = Fixed(frac_part)
        head, *tail = fmt.exp2_poly
        budget.consume()
        r = arith.mul(Fixed(head), frac)
        for coeff in tail:
            budget.consume()
            r = arith.mul(arith.add(r, Fixed(coeff)), frac)
        res = arith.mul(res, arith.add(r, arith.one()))

    if a.sign:
        return arith.div(arith.one(), res)
    return res


def exp(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """``e**a`` computed as ``2**(log2(e) * a)``."""
    arith = _arith(fmt)
    return exp2(fmt, arith.mul(Fixed(fmt.log2_e), a), budget)


# -- Logarithms --------------------------------------------------------------

def _ln_mantissa(m: int, budget: Budget) -> int:
    """ln(m / 2**64) for m in [2**64, 2**65), at guard precision."""
    z = ((m - GUARD_ONE) << GUARD_BITS) // (m + GUARD_ONE)
    z2 = (z * z) >> GUARD_BITS
    total = 0
    term = z
    n = 0
    while term:
        budget.consume()
        total += term // (2 * n + 1)
        term = (term * z2) >> GUARD_BITS
        n += 1
    return 2 * total


def _ln_guard(fmt: FixedFormat, a: Fixed, budget: Budget) -> int:
    """Signed ln(a) scaled by 2**64. Requires a > 0."""
    k = a.mag.bit_length() - 1 - fmt.frac_bits
    shift = GUARD_BITS - fmt.frac_bits - k
    m = a.mag << shift if shift >= 0 else a.mag >> -shift
    return k * LN2_GUARD + _ln_mantissa(m, budget)


def _snap(fmt: FixedFormat, y: int) -> Fixed:
    """Round a guard-precision value to the reference grid, then into `fmt`."""
    scale = 10 ** fmt.reference_places
    units = _round_half_even(abs(y) * scale, GUARD_ONE)
    return Fixed(_round_half_even(units * fmt.one, scale), y < 0)


def _require_positive(name: str, a: Fixed) -> None:
    if a.sign or a.mag == 0:
        raise DomainError(f"{name} requires a positive operand: {a!r}")


def _rescale(y: int, divisor: int) -> int:
    q = (abs(y) << GUARD_BITS) // divisor
    return -q if y < 0 else q


def ln(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """Natural logarithm. Fails with DomainError when a <= 0."""
    _require_positive("ln", a)
    return _snap(fmt, _ln_guard(fmt, a, resolve(budget)))


def log2(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    _require_positive("log2", a)
    return _snap(fmt, _rescale(_ln_guard(fmt, a, resolve(budget)), LN2_GUARD))


def log10(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    _require_positive("log10", a)
    return _snap(fmt, _rescale(_ln_guard(fmt, a, resolve(budget)), LN10_GUARD))


# -- Roots -------------------------------------------------------------------

def sqrt(fmt: FixedFormat, a: Fixed) -> Fixed:
    """Floor square root. Fails with DomainError when a < 0."""
    if a.sign:
        raise DomainError(f"sqrt requires a non-negative operand: {a!r}")
    return Fixed(isqrt(a.mag * fmt.one))


# -- Hyperbolic functions ----------------------------------------------------
#
# cosh is evaluated on |a|, and the odd functions (sinh, tanh, asinh, atanh)
# on |a| with the sign restored. exp() is never taken of a large negative
# argument, which would underflow to 0 and make ONE / exp(a) divide by zero.

def _exp_pair(fmt: FixedFormat, a: Fixed, budget: Optional[Budget]) -> tuple[Fixed, Fixed]:
    arith = _arith(fmt)
    ea = exp(fmt, abs(a), budget)
    return ea, arith.div(arith.one(), ea)


def cosh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    arith = _arith(fmt)
    ea, ea_inv = _exp_pair(fmt, a, budget)
    return arith.div(arith.add(ea, ea_inv), arith.from_unscaled(2))


def sinh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    arith = _arith(fmt)
    ea, ea_inv = _exp_pair(fmt, a, budget)
    res = arith.div(arith.sub(ea, ea_inv), arith.from_unscaled(2))
    return -res if a.sign else res


def tanh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    arith = _arith(fmt)
    ea, ea_inv = _exp_pair(fmt, a, budget)
    res = arith.div(arith.sub(ea, ea_inv), arith.add(ea, ea_inv))
    return -res if a.sign else res


def acosh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """``ln(a + sqrt(a*a - 1))``. Fails with DomainError when a < 1."""
    arith = _arith(fmt)
    if a.sign or a.mag < fmt.one:
        raise DomainError(f"acosh requires an operand >= 1: {a!r}")
    root = sqrt(fmt, arith.sub(arith.mul(a, a), arith.one()))
    return ln(fmt, arith.add(a, root), budget)


def asinh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    arith = _arith(fmt)
    x = abs(a)
    root = sqrt(fmt, arith.add(arith.mul(x, x), arith.one()))
    res = ln(fmt, arith.add(x, root), budget)
    return -res if a.sign else res


def atanh(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """``ln((1 + a) / (1 - a)) / 2``. Fails with DomainError when |a| >= 1."""
    arith = _arith(fmt)
    if a.mag >= fmt.one:
        raise DomainError(f"atanh requires |operand| < 1: {a!r}")
    one = arith.one()
    x = abs(a)
    ratio = arith.div(arith.add(one, x), arith.sub(one, x))
    res = arith.div(ln(fmt, ratio, budget), arith.from_unscaled(2))
    return -res if a.sign else res


def sigmoid(fmt: FixedFormat, a: Fixed, budget: Optional[Budget] = None) -> Fixed:
    """``1 / (1 + e**-a)``."""
    arith = _arith(fmt)
    one = arith.one()
    return arith.div(one, arith.add(one, exp(fmt, -a, budget)))
