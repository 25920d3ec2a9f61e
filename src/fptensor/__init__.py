"""`fptensor`: deterministic fixed-point N-dimensional tensor kernel.

- integer-only arithmetic (sign-magnitude fixed point, no floats),
- immutable tensors (frozen dataclasses),
- every loop bounded by an explicit step `Budget`,
- fail-fast errors from `fptensor.errors`.

Public API:
- `Tensor.new(shape, data, format=None) -> Tensor`
- `Fixed`, `FormatTag`, `get_format`, `arithmetic_for`
- `Budget`
- `KernelConfig`, `load_config`, `default_config`
"""

from .budget import Budget
from .config import KernelConfig, config_from_dict, default_config, load_config
from .errors import (
    DimensionMismatchError,
    DivisionByZeroError,
    DomainError,
    EmptyTensorError,
    FormatError,
    FormatMismatchError,
    IndexOutOfRangeError,
    KernelError,
    ResourceExhaustedError,
    ShapeMismatchError,
    UnsupportedRankError,
)
from .numbers import (
    FixedArithmetic,
    IntegerArithmetic,
    Fixed,
    FixedFormat,
    FormatTag,
    arithmetic_for,
    convert,
    get_format,
)
from .tensor import Tensor, leaky_relu, matmul, relu

__all__ = [
    "Budget",
    "KernelConfig",
    "config_from_dict",
    "default_config",
    "load_config",
    "DimensionMismatchError",
    "DivisionByZeroError",
    "DomainError",
    "EmptyTensorError",
    "FormatError",
    "FormatMismatchError",
    "IndexOutOfRangeError",
    "KernelError",
    "ResourceExhaustedError",
    "ShapeMismatchError",
    "UnsupportedRankError",
    "FixedArithmetic",
    "IntegerArithmetic",
    "Fixed",
    "FixedFormat",
    "FormatTag",
    "arithmetic_for",
    "convert",
    "get_format",
    "Tensor",
    "leaky_relu",
    "matmul",
    "relu",
]
