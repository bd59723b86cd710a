"""
Tensor module: dense named-leg tensors and elementwise operations.
"""

from tat.tensor.tensor import Tensor
from tat.tensor.ops import zip_to_new, map_to_new

__all__ = [
    "Tensor",
    "zip_to_new",
    "map_to_new",
]
