"""Fixed-point number kernel.

- `Fixed`: sign-magnitude scaled integer,
- `FormatTag` / `FixedFormat`: the supported formats and their constants,
- `arith`: the generic scalar arithmetic interface (integer and fixed-point),
- `math`: bit-exact transcendental approximations.
"""

from . import math
from .arith import (
    Arithmetic,
    FixedArithmetic,
    IntegerArithmetic,
    arithmetic_for,
    convert,
    fixed_arithmetic,
)
from .formats import FixedFormat, format_table, get_format
from .types import Fixed, FormatTag

__all__ = [
    "math",
    "Arithmetic",
    "FixedArithmetic",
    "IntegerArithmetic",
    "arithmetic_for",
    "convert",
    "fixed_arithmetic",
    "FixedFormat",
    "format_table",
    "get_format",
    "Fixed",
    "FormatTag",
]
