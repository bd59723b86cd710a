"""
Tests for Tensor construction and addressing.
"""

import itertools

import numpy as np
import pytest

from tat.core.exceptions import (
    IndexOutOfRange,
    RankMismatch,
    ShapeMismatch,
    TATError,
    UnknownLeg,
)
from tat.core.registry import Leg
from tat.tensor.tensor import Tensor


class TestConstruction:
    def test_creation(self, legs3):
        t = Tensor([2, 3, 4], legs3)

        assert t.rank == 3
        assert t.size == 24
        assert t.dims == (2, 3, 4)
        assert t.shape == (2, 3, 4)
        assert t.legs == legs3
        assert t.data.shape == (24,)
        assert np.all(t.data == 0.0)
        assert len(t) == 24

    def test_rank_mismatch_raises(self, legs3):
        with pytest.raises(RankMismatch):
            Tensor([2, 3], legs3)
        with pytest.raises(ValueError):
            Tensor([2, 3, 4, 5], legs3)

    def test_scalar_tensor(self):
        t = Tensor([], [])

        assert t.rank == 0
        assert t.size == 1
        assert t[()] == 0.0
        t[{}] = 7.0
        assert t[()] == 7.0

    def test_zero_extent(self, legs3):
        t = Tensor([2, 0, 4], legs3)
        assert t.size == 0
        assert t.data.shape == (0,)

    def test_negative_extent_raises(self, legs3):
        with pytest.raises(ValueError):
            Tensor([2, -1, 4], legs3)

    def test_strides_row_major(self, legs3):
        assert Tensor([2, 3, 4], legs3).strides == (12, 4, 1)

    def test_dtype(self, legs3):
        assert Tensor([2, 3, 4], legs3, dtype=np.int32).dtype == np.int32
        assert Tensor([2, 3, 4], legs3, dtype=complex).data[0] == 0j

    def test_object_dtype_defaults_to_none(self, legs3):
        t = Tensor([1, 2, 1], legs3, dtype=object)
        assert t.data.tolist() == [None, None]

    def test_from_numpy(self, legs3):
        arr = np.arange(24.0).reshape(2, 3, 4)
        t = Tensor.from_numpy(arr, legs3)

        assert t.dims == (2, 3, 4)
        assert t[1, 2, 3] == 23.0
        arr[0, 0, 0] = 99.0
        assert t[0, 0, 0] == 0.0

    def test_from_numpy_rank_mismatch(self, legs3):
        with pytest.raises(RankMismatch):
            Tensor.from_numpy(np.zeros((2, 3)), legs3)

    def test_to_numpy(self, legs3, counter_tensor):
        t = counter_tensor([2, 3, 4], legs3)
        arr = t.to_numpy()

        assert arr.shape == (2, 3, 4)
        assert np.allclose(arr, np.arange(24).reshape(2, 3, 4))

    def test_copy_is_independent(self, legs3, counter_tensor):
        t = counter_tensor([2, 3, 4], legs3)
        c = t.copy()
        c[0, 0, 0] = -1.0

        assert t[0, 0, 0] == 0.0
        assert c.dims == t.dims and c.legs == t.legs


class TestPositionalIndexing:
    def test_index_formula(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        for i, j, k in itertools.product(range(2), range(3), range(4)):
            assert t.index_of([i, j, k]) == i * 12 + j * 4 + k

    def test_indices_are_permutation(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        indices = [t.index_of(p) for p in itertools.product(range(2), range(3), range(4))]
        assert sorted(indices) == list(range(24))

    def test_unchecked_agrees(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        for p in itertools.product(range(2), range(3), range(4)):
            assert t._index_unchecked(p) == t.index_of(p)

    def test_wrong_length_raises(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        with pytest.raises(RankMismatch) as info:
            t.index_of([1, 2])
        assert info.value.expected == 3
        assert info.value.got == 2

    def test_out_of_range_raises(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        with pytest.raises(IndexOutOfRange) as info:
            t[1, 3, 0]
        assert info.value.axis == 1
        assert info.value.coordinate == 3
        assert info.value.extent == 3
        assert "Down" in str(info.value)

    def test_negative_coordinate_raises(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        with pytest.raises(IndexError):
            t[0, 0, -1]

    def test_rank_one_int_key(self, registry):
        t = Tensor([5], [registry.leg_from_name("Phy")])
        t[3] = 1.5
        assert t[3] == 1.5
        assert t.data[3] == 1.5

    def test_items_in_flat_order(self, legs3, counter_tensor):
        t = counter_tensor([2, 3, 4], legs3)
        items = list(t.items())

        assert len(items) == 24
        assert items[0] == ((0, 0, 0), 0.0)
        assert items[23] == ((1, 2, 3), 23.0)
        for position, value in items:
            assert t.index_of(position) == value


class TestNamedIndexing:
    def test_named_access_equivalence(self, legs3, counter_tensor):
        up, down, left = legs3
        t = counter_tensor([2, 3, 4], legs3)
        for i, j, k in itertools.product(range(2), range(3), range(4)):
            assert t[{up: i, down: j, left: k}] == t[[i, j, k]]

    def test_end_to_end(self, legs3, counter_tensor):
        up, down, left = legs3
        t = counter_tensor([2, 3, 4], legs3)
        assert t[{up: 1, down: 2, left: 3}] == 23.0

    def test_mapping_order_irrelevant(self, legs3, counter_tensor):
        up, down, left = legs3
        t = counter_tensor([2, 3, 4], legs3)
        assert t[{left: 3, up: 1, down: 2}] == 23.0

    def test_position_of(self, legs3):
        up, down, left = legs3
        t = Tensor([2, 3, 4], legs3)
        assert t.position_of({left: 3, down: 1, up: 0}) == (0, 1, 3)

    def test_extra_keys_ignored(self, registry, legs3, counter_tensor):
        up, down, left = legs3
        t = counter_tensor([2, 3, 4], legs3)
        right = registry.leg_from_name("Right")
        assert t[{up: 0, down: 0, left: 1, right: 99}] == 1.0

    def test_missing_leg_raises(self, legs3):
        up, down, left = legs3
        t = Tensor([2, 3, 4], legs3)

        with pytest.raises(UnknownLeg) as info:
            t[{up: 0, down: 0}]
        assert info.value.leg == left
        assert "Left" in str(info.value)
        assert isinstance(info.value, LookupError)
        assert isinstance(info.value, TATError)

    def test_named_out_of_range_raises(self, legs3):
        up, down, left = legs3
        t = Tensor([2, 3, 4], legs3)
        with pytest.raises(IndexOutOfRange):
            t[{up: 2, down: 0, left: 0}]

    def test_write_by_name_read_by_position(self, legs3):
        up, down, left = legs3
        t = Tensor([2, 3, 4], legs3)
        t[{up: 1, down: 0, left: 2}] = 5.0

        assert t[1, 0, 2] == 5.0
        assert t.get((1, 0, 2)) == 5.0
        t.set({up: 0, down: 0, left: 0}, 2.0)
        assert t.data[0] == 2.0

    def test_direct_id_legs(self, counter_tensor):
        a, b = Leg(1000), Leg(1001)
        t = counter_tensor([2, 2], [a, b])
        assert t[{Leg(1000): 1, Leg(1001): 0}] == 2.0

    def test_duplicate_legs_share_coordinate(self, legs3, counter_tensor):
        up = legs3[0]
        t = counter_tensor([2, 2], [up, up])
        assert t[{up: 1}] == t[1, 1] == 3.0

    def test_axis_of(self, registry, legs3):
        t = Tensor([2, 3, 4], legs3)
        assert t.axis_of(legs3[2]) == 2
        with pytest.raises(UnknownLeg):
            t.axis_of(registry.leg_from_name("Phy"))


class TestFill:
    def test_fill(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        t.fill(range(24))
        assert t[1, 2, 3] == 23.0

    def test_fill_wrong_length(self, legs3):
        t = Tensor([2, 3, 4], legs3)
        with pytest.raises(ShapeMismatch):
            t.fill(range(23))


class TestDisplay:
    def test_format_demo_layout(self, legs3, counter_tensor):
        t = counter_tensor([2, 3, 4], legs3)
        lines = t.format().splitlines()

        assert lines == [
            "0 1 2 3, 4 5 6 7, 8 9 10 11",
            "12 13 14 15, 16 17 18 19, 20 21 22 23",
        ]

    def test_format_low_rank(self, legs3, counter_tensor):
        assert counter_tensor([3], legs3[:1], start=1).format() == "1 2 3"
        assert Tensor([], []).format() == "0"
        assert counter_tensor([2, 2], legs3[:2]).format() == "0 1\n2 3"

    def test_repr_names_legs(self, legs3):
        text = repr(Tensor([2, 3, 4], legs3))
        assert "Up, Down, Left" in text
        assert "(2, 3, 4)" in text

    def test_repr_placeholder_leg(self):
        assert "UserDefinedLeg77" in repr(Tensor([1], [Leg(77)]))
