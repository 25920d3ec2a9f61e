"""Tensor container and the operations built on it.

Public API:
- `Tensor` (construction, introspection, method wrappers),
- `shape`: stride / ravel / unravel / broadcasting rules,
- `broadcast`: the broadcasting executor `broadcast_apply` and ``add/sub/mul/div``,
- `elementwise`, `activations`: scalar maps,
- `reduce`, `transform`, `linalg`.
"""

from .activations import leaky_relu, relu
from .broadcast import add, broadcast_apply, div, map_unary, mul, sub
from .linalg import matmul
from .reduce import argmax, argmin, max_value, min_value, reduce_sum
from .shape import (
    broadcast_index_mapping,
    broadcast_shape,
    product,
    ravel_index,
    stride,
    unravel_index,
)
from .tensor import Tensor
from .transform import flatten, inverse_permutation, reshape, transpose

__all__ = [
    "Tensor",
    "leaky_relu",
    "relu",
    "add",
    "sub",
    "mul",
    "div",
    "broadcast_apply",
    "map_unary",
    "matmul",
    "argmax",
    "argmin",
    "max_value",
    "min_value",
    "reduce_sum",
    "broadcast_index_mapping",
    "broadcast_shape",
    "product",
    "ravel_index",
    "stride",
    "unravel_index",
    "flatten",
    "inverse_permutation",
    "reshape",
    "transpose",
]
