"""
tat/tensor/tensor.py

Dense tensor whose axes are identified by Legs.

A Tensor stores:
- dims: extent of each axis
- legs: Leg identity of each axis, positionally paired with dims
- data: flat numpy buffer of product(dims) elements in row-major order

Elements are addressed either positionally (a coordinate per axis, in
leg order) or by a mapping from Leg to coordinate, which the tensor
resolves through its own leg order. Both forms reach the same slot.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from tat.core.exceptions import IndexOutOfRange, RankMismatch, ShapeMismatch, UnknownLeg
from tat.core.registry import Leg

logger = logging.getLogger(__name__)

Position = Tuple[int, ...]
Coords = Mapping  # Mapping[Leg, int]
Key = Union[int, Sequence[int], Coords]


def allocate(size: int, dtype: Any) -> np.ndarray:
    """Default-initialised flat buffer: zeros, or None for object dtype."""
    dt = np.dtype(dtype)
    if dt == object:
        return np.full(size, None, dtype=object)
    return np.zeros(size, dtype=dt)


_NUMERIC = (bool, int, float, complex, np.number, np.bool_)


def collect(values: Sequence[Any], dtype: Any = None) -> np.ndarray:
    """
    Pack per-element results into a flat buffer.

    With dtype=None a numeric dtype is inferred only when every result is
    a number; anything else (strings, sequences, mixed kinds) is kept
    as-is in an object buffer.
    """
    if dtype is not None and np.dtype(dtype) != object:
        return np.asarray(values, dtype=dtype)
    if dtype is None and all(isinstance(v, _NUMERIC) for v in values):
        arr = np.array(values)
        if arr.ndim == 1 and arr.dtype != object:
            return arr
    out = np.empty(len(values), dtype=object)
    for i, v in enumerate(values):
        out[i] = v
    return out


def _format_value(v: Any) -> str:
    if isinstance(v, (float, np.floating)):
        return f"{v:g}"
    return str(v)


class Tensor:
    """
    Dense rectangular array with named axes.

    Attributes:
        rank: Number of axes
        size: Number of elements, product of dims (1 for rank 0)
        dims: Extent of each axis
        legs: Leg of each axis
        data: Flat element buffer of length size
    """

    def __init__(self, dims: Iterable[int], legs: Iterable[Leg], dtype: Any = float):
        dims = tuple(operator.index(d) for d in dims)
        legs = tuple(legs)
        if len(dims) != len(legs):
            raise RankMismatch(
                f"Tensor dims/legs mismatch: {len(dims)} dims but {len(legs)} legs",
                expected=len(dims),
                got=len(legs),
            )
        for axis, d in enumerate(dims):
            if d < 0:
                raise ValueError(f"Tensor axis {axis} has negative extent {d}")

        self.dims: Tuple[int, ...] = dims
        self.legs: Tuple[Leg, ...] = legs
        self.rank: int = len(dims)
        self.size: int = int(np.prod(dims, dtype=np.int64))
        self.strides: Tuple[int, ...] = self._row_major_strides(dims)
        self.data: np.ndarray = allocate(self.size, dtype)
        logger.debug("allocated tensor dims=%s legs=%s dtype=%s", dims, legs, self.data.dtype)

    @staticmethod
    def _row_major_strides(dims: Tuple[int, ...]) -> Tuple[int, ...]:
        strides = []
        acc = 1
        for d in reversed(dims):
            strides.append(acc)
            acc *= d
        return tuple(reversed(strides))

    @classmethod
    def _wrap(cls, dims: Tuple[int, ...], legs: Tuple[Leg, ...], data: np.ndarray) -> "Tensor":
        """Build a tensor around an existing flat buffer whose length is already known to match."""
        t = cls.__new__(cls)
        t.dims = dims
        t.legs = legs
        t.rank = len(dims)
        t.size = len(data)
        t.strides = cls._row_major_strides(dims)
        t.data = data
        return t

    @classmethod
    def from_numpy(cls, array: Any, legs: Iterable[Leg]) -> "Tensor":
        """Tensor with array's shape and a copy of its elements in row-major order."""
        array = np.asarray(array)
        legs = tuple(legs)
        if array.ndim != len(legs):
            raise RankMismatch(
                f"from_numpy: array has {array.ndim} dims but {len(legs)} legs given",
                expected=array.ndim,
                got=len(legs),
            )
        return cls._wrap(tuple(array.shape), legs, array.reshape(-1).copy())

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.dims

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def index_of(self, position: Sequence[int]) -> int:
        """
        Row-major flat index of a full positional coordinate.

        Raises:
            RankMismatch: If len(position) != rank
            IndexOutOfRange: If a coordinate is negative or >= its extent
        """
        position = tuple(position)
        if len(position) != self.rank:
            raise RankMismatch(
                f"position {position} has {len(position)} coordinates, tensor rank is {self.rank}",
                expected=self.rank,
                got=len(position),
            )
        index = 0
        for axis, (p, d) in enumerate(zip(position, self.dims)):
            p = operator.index(p)
            if p < 0 or p >= d:
                raise IndexOutOfRange(axis, p, d, self.legs[axis])
            index = index * d + p
        return index

    def _index_unchecked(self, position: Sequence[int]) -> int:
        # Caller guarantees len(position) == rank and every coordinate is in range.
        index = 0
        for p, d in zip(position, self.dims):
            index = index * d + p
        return index

    def position_of(self, coords: Coords) -> Position:
        """
        Positional coordinate for a Leg -> coordinate mapping.

        Keys of coords that are not legs of this tensor are ignored.

        Raises:
            UnknownLeg: If one of the tensor's legs has no entry in coords
        """
        position = []
        for leg in self.legs:
            if leg not in coords:
                raise UnknownLeg(leg)
            position.append(coords[leg])
        return tuple(position)

    def axis_of(self, leg: Leg) -> int:
        """Position of leg in this tensor's leg order (first occurrence)."""
        try:
            return self.legs.index(leg)
        except ValueError:
            raise UnknownLeg(leg, f"leg {leg} is not an axis of this tensor") from None

    def _flat(self, key: Key) -> int:
        if isinstance(key, Mapping):
            return self.index_of(self.position_of(key))
        if isinstance(key, (int, np.integer)):
            return self.index_of((key,))
        return self.index_of(key)

    def __getitem__(self, key: Key) -> Any:
        return self.data[self._flat(key)]

    def __setitem__(self, key: Key, value: Any) -> None:
        self.data[self._flat(key)] = value

    def get(self, key: Key) -> Any:
        """Element at a positional or name-keyed coordinate."""
        return self[key]

    def set(self, key: Key, value: Any) -> None:
        """Store value at a positional or name-keyed coordinate."""
        self[key] = value

    def items(self) -> Iterator[Tuple[Position, Any]]:
        """Yield (position, value) pairs in flat index order."""
        for i, position in enumerate(np.ndindex(*self.dims)):
            yield position, self.data[i]

    def __len__(self) -> int:
        return self.size

    # ------------------------------------------------------------------
    # Bulk population and elementwise transforms
    # ------------------------------------------------------------------

    def fill(self, values: Iterable[Any]) -> None:
        """Overwrite data with values given in flat index order."""
        values = list(values)
        if len(values) != self.size:
            raise ShapeMismatch(
                f"fill: got {len(values)} values for a tensor of size {self.size}",
                expected=self.size,
                got=len(values),
            )
        for i, v in enumerate(values):
            self.data[i] = v

    def generate(self, producer: Callable[[], Any]) -> None:
        """
        Overwrite every element with successive calls to producer().

        producer is called exactly once per element, in increasing flat
        index order.
        """
        for i in range(self.size):
            self.data[i] = producer()

    def map_in_place(self, f: Callable[[Any], Any]) -> None:
        """Replace every element x with f(x)."""
        for i in range(self.size):
            self.data[i] = f(self.data[i])

    def map_to_new(self, f: Callable[[Any], Any], dtype: Any = None) -> "Tensor":
        """New tensor with the same dims/legs holding f applied to each element."""
        values = [f(x) for x in self.data]
        return Tensor._wrap(self.dims, self.legs, collect(values, dtype))

    def zip_in_place(self, f: Callable[[Any, Any], Any], other: "Tensor") -> None:
        """
        data[i] = f(data[i], other.data[i]) for every flat index i.

        Only total sizes must agree; axes are paired by flat position,
        not by leg.

        Raises:
            ShapeMismatch: If other.size != self.size
        """
        check_same_size(self, other, "zip_in_place")
        for i in range(self.size):
            self.data[i] = f(self.data[i], other.data[i])

    def copy(self) -> "Tensor":
        return Tensor._wrap(self.dims, self.legs, self.data.copy())

    def to_numpy(self) -> np.ndarray:
        """Copy of the data shaped as dims."""
        return self.data.reshape(self.dims).copy()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def format(self, fmt: Optional[Callable[[Any], str]] = None) -> str:
        """
        Render the elements as text.

        One line per coordinate of the leading axis; within a line the
        innermost axis runs are space separated and runs are separated
        by ", ".
        """
        fmt = fmt or _format_value
        if self.rank == 0:
            return fmt(self.data[0])
        if self.rank == 1:
            return " ".join(fmt(v) for v in self.data)
        inner = self.dims[-1]
        row_size = self.strides[0]
        lines = []
        for r in range(self.dims[0]):
            row = self.data[r * row_size:(r + 1) * row_size]
            runs = [
                " ".join(fmt(v) for v in row[s:s + inner])
                for s in range(0, row_size, inner)
            ] if inner else []
            lines.append(", ".join(runs))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        legs = ", ".join(str(leg) for leg in self.legs)
        return f"Tensor(dims={self.dims}, legs=({legs}), dtype={self.data.dtype})"


def check_same_size(a: Tensor, b: Tensor, op: str) -> None:
    """Raise ShapeMismatch unless a and b hold the same number of elements."""
    if a.size != b.size:
        raise ShapeMismatch(
            f"{op}: operand sizes differ ({a.size} with dims {a.dims} vs {b.size} with dims {b.dims})",
            expected=a.size,
            got=b.size,
        )
