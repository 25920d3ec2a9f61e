"""Exception types for the fptensor kernel.

Every kernel routine raises one of these directly at the point of detection.
Nothing inside the kernel catches or retries them; a raised error ends the
operation with no partial result.
"""

from __future__ import annotations


class KernelError(Exception):
    """Base class for all kernel failures."""


class ShapeMismatchError(KernelError):
    """Raised when shapes are incompatible (broadcast, reshape, matmul, construction)."""


class DimensionMismatchError(KernelError):
    """Raised when an index tuple or axis argument does not match the tensor rank."""


class IndexOutOfRangeError(KernelError):
    """Raised when a computed offset falls outside the tensor data."""


class DomainError(KernelError):
    """Raised when a scalar function receives an argument outside its domain."""


class DivisionByZeroError(KernelError, ZeroDivisionError):
    """Raised when dividing by a zero-valued operand."""


class EmptyTensorError(KernelError):
    """Raised when a reduction needs at least one element and has none."""


class UnsupportedRankError(KernelError):
    """Raised when an operation is called on a tensor of unsupported rank."""


class ResourceExhaustedError(KernelError):
    """Raised when the step budget runs out.

    The budget stays exhausted afterwards: no further steps may be taken with it.
    """

    def __init__(self, limit: int, spent: int) -> None:
        self.limit = limit
        self.spent = spent
        super().__init__(f"step budget exhausted after {spent} of {limit} steps")


class FormatMismatchError(KernelError):
    """Raised when operands use different element kinds or fixed-point formats."""


class FormatError(KernelError):
    """Raised for an unknown format name or a malformed format table."""
