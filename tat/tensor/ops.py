"""
tat/tensor/ops.py

Out-of-place binary elementwise operations on Tensors.
"""

from __future__ import annotations

from typing import Any, Callable

from tat.tensor.tensor import Tensor, check_same_size, collect


def zip_to_new(f: Callable[[Any, Any], Any], a: Tensor, b: Tensor, dtype: Any = None) -> Tensor:
    """
    New tensor shaped like a with result.data[i] = f(a.data[i], b.data[i]).

    a and b are paired by flat index; their dims and legs may differ as
    long as the element counts agree.

    Args:
        f: Binary element function
        a: Left operand; provides dims and legs of the result
        b: Right operand
        dtype: Element type of the result, inferred when None

    Raises:
        ShapeMismatch: If a.size != b.size
    """
    check_same_size(a, b, "zip_to_new")
    values = [f(x, y) for x, y in zip(a.data, b.data)]
    return Tensor._wrap(a.dims, a.legs, collect(values, dtype))


def map_to_new(f: Callable[[Any], Any], t: Tensor, dtype: Any = None) -> Tensor:
    """Function form of Tensor.map_to_new."""
    return t.map_to_new(f, dtype=dtype)
