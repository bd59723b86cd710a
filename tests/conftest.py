"""
Shared fixtures: an isolated leg registry, the legs used across tests
and a builder for counter-filled tensors.
"""

import itertools

import pytest

from tat.core.registry import LegRegistry
from tat.tensor.tensor import Tensor


@pytest.fixture
def registry():
    return LegRegistry.with_standard_legs()


@pytest.fixture
def legs3(registry):
    return tuple(registry.leg_from_name(n) for n in ("Up", "Down", "Left"))


@pytest.fixture
def counter_tensor():
    """Builder for tensors filled with start, start+1, ... in flat index order."""

    def build(dims, legs, start=0, dtype=float):
        t = Tensor(dims, legs, dtype=dtype)
        counter = itertools.count(start)
        t.generate(lambda: next(counter))
        return t

    return build
