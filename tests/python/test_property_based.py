"""
Property-based tests using Hypothesis.

Checks the layout guarantees over randomly generated shapes:
- total element count is the product of the shape
- last stride is 1 and the maximal coordinate maps to the last slot
- flat indices of valid coordinates are in range and injective
- elementwise transforms preserve shape
"""

import itertools
import math

import numpy as np
from hypothesis import given, settings, strategies as st

from tensorlib import Tensor, compute_strides, compute_total, flat_index

shapes = st.lists(st.integers(min_value=1, max_value=5), min_size=1, max_size=4)


class TestLayoutProperties:
    """Properties of the layout calculator."""

    @given(shapes)
    @settings(max_examples=100)
    def test_total_is_product(self, shape):
        assert compute_total(shape) == math.prod(shape)

    @given(shapes)
    @settings(max_examples=100)
    def test_last_stride_is_one(self, shape):
        assert compute_strides(shape)[-1] == 1

    @given(shapes)
    @settings(max_examples=100)
    def test_max_coordinate_maps_to_last_slot(self, shape):
        strides = compute_strides(shape)
        assert sum((s - 1) * st_ for s, st_ in zip(shape, strides)) == compute_total(shape) - 1

    @given(shapes)
    @settings(max_examples=50)
    def test_strides_match_numpy(self, shape):
        arr = np.empty(shape, dtype=np.int8)
        assert compute_strides(shape) == arr.strides

    @given(shapes)
    @settings(max_examples=30)
    def test_flat_index_in_range_and_injective(self, shape):
        strides = compute_strides(shape)
        total = compute_total(shape)
        seen = set()
        for coord in itertools.product(*(range(s) for s in shape)):
            offset = flat_index(coord, shape, strides)
            assert 0 <= offset < total
            seen.add(offset)
        assert len(seen) == total


class TestTensorProperties:
    """Properties of Tensor construction and transforms."""

    @given(shapes)
    @settings(max_examples=30)
    def test_round_trip(self, shape):
        elements = list(range(math.prod(shape)))
        t = Tensor(shape, elements)
        read = [t.at(c) for c in itertools.product(*(range(s) for s in shape))]
        assert read == elements

    @given(shapes, st.integers(min_value=-10, max_value=10))
    @settings(max_examples=50)
    def test_apply_preserves_shape(self, shape, k):
        t = Tensor(shape, list(range(math.prod(shape))))
        assert t.element_wise_apply(lambda x: x * k).get_shape() == t.get_shape()

    @given(shapes)
    @settings(max_examples=50)
    def test_identity(self, shape):
        t = Tensor(shape, list(range(math.prod(shape))))
        assert t.element_wise_apply(lambda x: x) == t

    @given(shapes)
    @settings(max_examples=30)
    def test_row_and_column_identity(self, shape):
        t = Tensor(shape, list(range(math.prod(shape))))
        assert t.row_wise_apply(list) == t
        assert t.column_wise_apply(list) == t
