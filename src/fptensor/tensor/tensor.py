"""Immutable N-dimensional tensor container.

A `Tensor` is a frozen value: ``shape`` and ``data`` are tuples, and every
operation returns a new tensor. Elements are homogeneous, either all `Fixed`
(a fixed-point tensor, optionally tagged with a `FormatTag`) or all `int`.

The methods below are thin wrappers over the operation modules
(`broadcast`, `elementwise`, `reduce`, `transform`, `linalg`), which hold the
algorithms and can also be called directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from ..budget import Budget
from ..errors import DimensionMismatchError, IndexOutOfRangeError, ShapeMismatchError
from ..numbers.arith import Arithmetic, arithmetic_for
from ..numbers.formats import FixedFormat, get_format, parse_tag
from ..numbers.types import Fixed, FormatTag
from . import shape as _shape


def _is_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


@dataclass(frozen=True)
class Tensor:
    """Shape, flat row-major data and an optional fixed-point format tag."""

    shape: tuple[int, ...]
    data: tuple[Any, ...]
    format: Optional[FormatTag] = None

    def __post_init__(self) -> None:
        shape = tuple(self.shape)
        data = tuple(self.data)
        for dim in shape:
            if not _is_int(dim):
                raise TypeError(f"shape entries must be ints: {shape!r}")
            if dim < 0:
                raise ShapeMismatchError(f"negative dimension in shape {shape}")
        if len(data) != _shape.product(shape):
            raise ShapeMismatchError(
                f"data length {len(data)} does not match shape {shape} "
                f"(expected {_shape.product(shape)})"
            )

        fmt = self.format
        if fmt is not None:
            fmt = parse_tag(fmt)
        if data and isinstance(data[0], Fixed):
            if not all(isinstance(x, Fixed) for x in data):
                raise TypeError("tensor elements must all be Fixed or all be int")
        else:
            if fmt is not None and data:
                raise TypeError("a tensor with a format must hold Fixed elements")
            if not all(_is_int(x) for x in data):
                raise TypeError("tensor elements must all be Fixed or all be int")

        object.__setattr__(self, "shape", shape)
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "format", fmt)

    @classmethod
    def new(
        cls,
        shape: Sequence[int],
        data: Sequence[Any],
        format: Optional[Union[FormatTag, str]] = None,
    ) -> "Tensor":
        return cls(tuple(shape), tuple(data), format)  # type: ignore[arg-type]

    # -- Introspection -------------------------------------------------------

    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_fixed(self) -> bool:
        return self.format is not None or (bool(self.data) and isinstance(self.data[0], Fixed))

    def arithmetic(self) -> Arithmetic:
        return arithmetic_for(self.format, self.is_fixed)

    def fixed_format(self) -> FixedFormat:
        """Format descriptor of a fixed-point tensor (configured default when untagged)."""
        if not self.is_fixed:
            raise TypeError("integer tensors have no fixed-point format")
        return get_format(self.format)

    def stride(self) -> tuple[int, ...]:
        return _shape.stride(self.shape)

    def ravel_index(self, indices: Sequence[int]) -> int:
        return _shape.ravel_index(self.shape, indices)

    def unravel_index(self, flat: int) -> tuple[int, ...]:
        return _shape.unravel_index(flat, self.shape)

    def at(self, indices: Sequence[int]) -> Any:
        if len(indices) != self.rank:
            raise DimensionMismatchError(
                f"expected {self.rank} indices for shape {self.shape}, got {len(indices)}"
            )
        offset = _shape.ravel_index(self.shape, indices)
        if offset < 0 or offset >= len(self.data):
            raise IndexOutOfRangeError(f"indices {tuple(indices)} out of range for shape {self.shape}")
        return self.data[offset]

    # -- Shape ops -----------------------------------------------------------

    def reshape(self, target: Sequence[int]) -> "Tensor":
        from .transform import reshape

        return reshape(self, target)

    def flatten(self) -> "Tensor":
        from .transform import flatten

        return flatten(self)

    def transpose(self, axes: Sequence[int], *, budget: Optional[Budget] = None) -> "Tensor":
        from .transform import transpose

        return transpose(self, axes, budget=budget)

    # -- Reductions ----------------------------------------------------------

    def reduce_sum(self, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> "Tensor":
        from .reduce import reduce_sum

        return reduce_sum(self, axis, keepdims, budget=budget)

    def min(self, *, budget: Optional[Budget] = None) -> Any:
        from .reduce import min_value

        return min_value(self, budget=budget)

    def max(self, *, budget: Optional[Budget] = None) -> Any:
        from .reduce import max_value

        return max_value(self, budget=budget)

    def argmax(self, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> "Tensor":
        from .reduce import argmax

        return argmax(self, axis, keepdims, budget=budget)

    def argmin(self, axis: int, keepdims: bool = False, *, budget: Optional[Budget] = None) -> "Tensor":
        from .reduce import argmin

        return argmin(self, axis, keepdims, budget=budget)

    # -- Linear algebra ------------------------------------------------------

    def matmul(self, other: "Tensor", *, budget: Optional[Budget] = None) -> "Tensor":
        from .linalg import matmul

        return matmul(self, other, budget=budget)

    def __matmul__(self, other: object) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.matmul(other)

    # -- Elementwise ---------------------------------------------------------

    def _coerce(self, other: object) -> Optional["Tensor"]:
        if isinstance(other, Tensor):
            return other
        if isinstance(other, Fixed):
            return Tensor((), (other,), self.format if self.is_fixed else None)
        if _is_int(other):
            return Tensor((), (other,))
        return None

    def _binary(self, name: str, other: object, reflected: bool = False) -> "Tensor":
        from . import broadcast

        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented  # type: ignore[return-value]
        op = getattr(broadcast, name)
        return op(rhs, self) if reflected else op(self, rhs)

    def __add__(self, other: object) -> "Tensor":
        return self._binary("add", other)

    def __radd__(self, other: object) -> "Tensor":
        return self._binary("add", other, reflected=True)

    def __sub__(self, other: object) -> "Tensor":
        return self._binary("sub", other)

    def __rsub__(self, other: object) -> "Tensor":
        return self._binary("sub", other, reflected=True)

    def __mul__(self, other: object) -> "Tensor":
        return self._binary("mul", other)

    def __rmul__(self, other: object) -> "Tensor":
        return self._binary("mul", other, reflected=True)

    def __truediv__(self, other: object) -> "Tensor":
        return self._binary("div", other)

    def __rtruediv__(self, other: object) -> "Tensor":
        return self._binary("div", other, reflected=True)

    def __neg__(self) -> "Tensor":
        from .elementwise import neg

        return neg(self)

    def __abs__(self) -> "Tensor":
        from .elementwise import abs_

        return abs_(self)

    def _map(self, name: str, budget: Optional[Budget]) -> "Tensor":
        from . import elementwise as _elementwise

        return getattr(_elementwise, name)(self, budget=budget)

    def ln(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("ln", budget)

    def log2(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("log2", budget)

    def log10(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("log10", budget)

    def exp(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("exp", budget)

    def exp2(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("exp2", budget)

    def sqrt(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("sqrt", budget)

    def tanh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("tanh", budget)

    def cosh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("cosh", budget)

    def sinh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("sinh", budget)

    def acosh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("acosh", budget)

    def asinh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("asinh", budget)

    def atanh(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("atanh", budget)

    def sigmoid(self, *, budget: Optional[Budget] = None) -> "Tensor":
        return self._map("sigmoid", budget)

    def relu(self, *, budget: Optional[Budget] = None) -> "Tensor":
        from .activations import relu

        return relu(self, budget=budget)
