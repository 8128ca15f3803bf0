import math

import pytest

from rangekit.bounds import WithMax
from rangekit.segment_tree_util import (
    SegmentTreeMaxBuilder,
    SegmentTreeMinBuilder,
    SegmentTreeSumBuilder,
    segment_tree_builder_max,
    segment_tree_builder_min,
    segment_tree_builder_sum,
    segment_tree_new_max,
    segment_tree_new_min,
    segment_tree_new_sum,
)

DATA = [1, 4, 2, 3, 8, 3, 4]


def test_max_fold_and_set():
    seg = segment_tree_new_max(DATA)
    assert seg.fold(slice(1, 5)) == 8
    seg.set(4, 0)
    assert seg.fold() == 4


def test_max_empty_range_is_lower_bound():
    seg = segment_tree_new_max(DATA)
    assert seg.fold(slice(0, 0)) == -math.inf


def test_max_find_index_to_start():
    seg = segment_tree_new_max(DATA)
    assert seg.find_index_to_start(4, lambda x, _: x < 3) == 4
    assert seg.find_index_to_start(4, lambda x, _: x < 4) == 2
    assert seg.find_index_to_start(4, lambda x, _: x < 8) == 0


def test_max_find_index_to_end():
    seg = segment_tree_new_max(DATA)
    assert seg.find_index_to_end(0, lambda x, _: x < 4) == 1
    assert seg.find_index_to_end(0, lambda x, _: x < 8) == 4
    assert seg.find_index_to_end(0, lambda x, _: x < 100) == 7


def test_min_matches_builtin_min_over_all_ranges():
    seg = segment_tree_new_min(DATA)
    for l in range(len(DATA)):
        for r in range(l + 1, len(DATA) + 1):
            assert seg.fold(slice(l, r)) == min(DATA[l:r])


def test_min_empty_range_is_upper_bound():
    seg = segment_tree_new_min(DATA)
    assert seg.fold(slice(3, 3)) == math.inf


def test_min_uses_type_max_exists():
    values = [WithMax(3), WithMax(1), WithMax(2)]
    seg = segment_tree_new_min(values)
    assert seg.fold() == WithMax(1)
    assert seg.fold(slice(0, 0)) == WithMax.max_exists()


def test_sum_matches_builtin_sum():
    seg = segment_tree_new_sum(DATA)
    for l in range(len(DATA)):
        for r in range(l, len(DATA) + 1):
            assert seg.fold(slice(l, r)) == sum(DATA[l:r])


def test_sum_empty_input_folds_to_zero():
    seg = segment_tree_new_sum([])
    assert seg.fold() == 0
    assert len(seg) == 0


def test_sum_float_zero_default():
    seg = segment_tree_new_sum([1.5, 2.5])
    assert seg.fold(slice(1, 1)) == 0.0
    assert seg.fold() == 4.0


def test_mul_builder_matches_product():
    seg = segment_tree_builder_sum(DATA).set_add_zero_by_mul().build()
    assert seg.fold() == math.prod(DATA)
    assert seg.fold(slice(2, 2)) == 1


def test_custom_add_and_zero():
    seg = (
        SegmentTreeSumBuilder(["a", "b", "c"])
        .set_add(lambda a, b: a + b)
        .set_zero(lambda: "")
        .build()
    )
    assert seg.fold() == "abc"
    assert seg.fold(slice(1, 3)) == "bc"


def test_sum_build_without_add_raises():
    with pytest.raises(ValueError):
        segment_tree_builder_sum(DATA).set_zero_by_default().build()


def test_sum_build_without_zero_raises():
    with pytest.raises(ValueError):
        segment_tree_builder_sum(DATA).set_add_by_add().build()


def test_min_build_without_ord_raises():
    with pytest.raises(ValueError):
        segment_tree_builder_min(DATA).set_max_exists_auto().build()


def test_max_build_without_bound_raises():
    with pytest.raises(ValueError):
        segment_tree_builder_max(DATA).set_ord_auto().build()


def test_partial_order_raises():
    with pytest.raises(ValueError):
        segment_tree_new_min([1.0, math.nan])


def test_reversed_ord_turns_min_into_max():
    seg = (
        SegmentTreeMinBuilder(DATA)
        .set_ord(lambda a, b: (b > a) - (b < a))
        .set_max_exists(lambda: -math.inf)
        .build()
    )
    assert seg.fold() == max(DATA)


def test_ties_keep_leftmost():
    values = [(1, "a"), (1, "b"), (0, "c"), (0, "d")]
    key_ord = lambda a, b: (a[0] > b[0]) - (a[0] < b[0])  # noqa: E731
    mn = (
        SegmentTreeMinBuilder(values)
        .set_ord(key_ord)
        .set_max_exists(lambda: (math.inf, ""))
        .build()
    )
    mx = (
        SegmentTreeMaxBuilder(values)
        .set_ord(key_ord)
        .set_min_exists(lambda: (-math.inf, ""))
        .build()
    )
    assert mn.fold() == (0, "c")
    assert mx.fold() == (1, "a")
    assert mx.fold(slice(2, 4)) == (0, "c")


def test_max_update_tracks_builtin_max():
    values = list(DATA)
    seg = segment_tree_new_max(values)
    for index, value in [(0, 0), (4, 0), (1, 1), (6, 9)]:
        seg.set(index, value)
        values[index] = value
        assert seg.fold() == max(values)
        assert seg.get(index) == value