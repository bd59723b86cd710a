"""
tat/core/exceptions.py

Error types raised by tensor construction, addressing and elementwise ops.

Each error also derives from the builtin exception a caller would expect
(ValueError, IndexError, LookupError), so generic handlers keep working.
"""

from __future__ import annotations

from typing import Any, Optional


class TATError(Exception):
    """Base class for tat-specific exceptions."""


class RankMismatch(TATError, ValueError):
    """dims, legs or a position disagree in length with the tensor rank."""

    def __init__(self, message: str, *, expected: Optional[int] = None, got: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.got = got


class IndexOutOfRange(TATError, IndexError):
    """A positional coordinate falls outside its axis extent."""

    def __init__(self, axis: int, coordinate: Any, extent: int, leg: Any = None):
        where = f"axis {axis}" if leg is None else f"axis {axis} ({leg})"
        super().__init__(f"coordinate {coordinate} out of range for {where} with extent {extent}")
        self.axis = axis
        self.coordinate = coordinate
        self.extent = extent
        self.leg = leg


class UnknownLeg(TATError, LookupError):
    """A name-keyed access does not cover one of the tensor's legs."""

    def __init__(self, leg: Any, message: Optional[str] = None):
        super().__init__(message or f"no coordinate given for leg {leg}")
        self.leg = leg


class ShapeMismatch(TATError, ValueError):
    """Operands of an elementwise operation differ in element count."""

    def __init__(self, message: str, *, expected: Optional[int] = None, got: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.got = got
