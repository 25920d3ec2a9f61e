"""Value types for the fixed-point number kernel.

Units/conventions:
- A `Fixed` is a sign-magnitude integer. Its real value is ``±mag / 2**F`` where
  ``F`` is the fractional bit width of the format it belongs to.
- A `Fixed` does not record its format. Mixing values of different formats is a
  caller error; use `fptensor.numbers.arith.convert` to move between formats.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from functools import total_ordering


@unique
class FormatTag(Enum):
    """One member per supported fixed-point format."""
    FP8x23 = "FP8x23"
    FP16x16 = "FP16x16"


@total_ordering
@dataclass(frozen=True)
class Fixed:
    """Sign-magnitude fixed-point value. Zero is always unsigned."""

    mag: int
    sign: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.mag, int) or isinstance(self.mag, bool):
            raise TypeError("mag must be an int")
        if self.mag < 0:
            raise ValueError(f"mag must be non-negative: {self.mag}")
        if not isinstance(self.sign, bool):
            raise TypeError("sign must be a bool")
        if self.mag == 0 and self.sign:
            object.__setattr__(self, "sign", False)

    @property
    def signed(self) -> int:
        """Signed raw integer: ``-mag`` when negative."""
        return -self.mag if self.sign else self.mag

    def is_zero(self) -> bool:
        return self.mag == 0

    def __neg__(self) -> "Fixed":
        return Fixed(self.mag, not self.sign)

    def __abs__(self) -> "Fixed":
        return Fixed(self.mag, False)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fixed):
            return NotImplemented
        return self.signed < other.signed

    def __repr__(self) -> str:
        return f"Fixed({'-' if self.sign else ''}{self.mag})"
