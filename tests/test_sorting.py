import pytest
from hypothesis import given, strategies as st

from algobox.sorting import (
    bubble_sort,
    bucket_sort,
    counting_sort,
    cycle_sort,
    heap_sort,
    hoare_partition,
    insertion_sort,
    lomuto_partition,
    merge_sort,
    merge_sorted,
    naive_partition,
    quick_sort,
    quick_sort_lomuto,
    radix_sort,
    selection_sort,
)

SAMPLE = [2, 3, 6, 4, 9, 5, 1, 2, 7, 4]
SAMPLE_SORTED = [1, 2, 2, 3, 4, 4, 5, 6, 7, 9]


def test_sorts_sample():
    original = list(SAMPLE)
    assert bubble_sort(SAMPLE) == SAMPLE_SORTED
    assert insertion_sort(SAMPLE) == SAMPLE_SORTED
    assert selection_sort(SAMPLE) == SAMPLE_SORTED
    assert merge_sort(SAMPLE) == SAMPLE_SORTED
    assert quick_sort(SAMPLE) == SAMPLE_SORTED
    assert quick_sort_lomuto(SAMPLE) == SAMPLE_SORTED
    assert heap_sort(SAMPLE) == SAMPLE_SORTED
    assert cycle_sort(SAMPLE) == SAMPLE_SORTED
    assert SAMPLE == original


@given(values=st.lists(st.integers(-1000, 1000), max_size=60))
def test_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert quick_sort_lomuto(values) == expected
    assert heap_sort(values) == expected
    assert cycle_sort(values) == expected


@given(values=st.lists(st.integers(-50, 50), min_size=1, max_size=40))
def test_hoare_partition_splits(values):
    items = list(values)
    pivot = values[0]
    j = hoare_partition(items, 0, len(items) - 1)
    assert sorted(items) == sorted(values)
    assert 0 <= j < len(items)
    assert max(items[: j + 1]) <= pivot
    assert all(v >= pivot for v in items[j + 1:])


@given(values=st.lists(st.integers(-50, 50), min_size=1, max_size=40))
def test_lomuto_partition_places_pivot(values):
    items = list(values)
    pivot = values[-1]
    p = lomuto_partition(items, 0, len(items) - 1)
    assert items[p] == pivot
    assert all(v < pivot for v in items[:p])
    assert all(v >= pivot for v in items[p + 1:])
    assert sorted(items) == sorted(values)


def test_lomuto_partition_leaves_outside_untouched():
    items = [9, 5, 1, 7, 3, 8]
    p = lomuto_partition(items, 1, 4)
    assert items[0] == 9 and items[5] == 8
    assert items[p] == 3
    assert sorted(items[1:5]) == [1, 3, 5, 7]


@given(
    values=st.lists(st.integers(-20, 20), min_size=1, max_size=40),
    data=st.data(),
)
def test_naive_partition_is_stable_split(values, data):
    pivot_index = data.draw(st.integers(0, len(values) - 1))
    key = values[pivot_index]
    items = list(values)
    res = naive_partition(items, 0, len(items) - 1, pivot_index)
    assert items[res] == key
    assert items[: res + 1] == [v for v in values if v < key] + [v for v in values if v == key]
    assert items[res + 1:] == [v for v in values if v > key]


def test_partitions_reject_bad_ranges():
    with pytest.raises(IndexError):
        lomuto_partition([1, 2], 0, 5)
    with pytest.raises(IndexError):
        hoare_partition([], 0, 0)
    with pytest.raises(IndexError):
        naive_partition([1, 2, 3], 0, 1, 2)


@given(
    a=st.lists(st.integers(-100, 100), max_size=30),
    b=st.lists(st.integers(-100, 100), max_size=30),
)
def test_merge_sorted(a, b):
    a.sort()
    b.sort()
    assert merge_sorted(a, b) == sorted(a + b)


@given(values=st.lists(st.integers(0, 19), max_size=60))
def test_counting_sort(values):
    assert counting_sort(values, 20) == sorted(values)


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([5], 5)
    with pytest.raises(ValueError):
        counting_sort([-1], 5)


@given(values=st.lists(st.integers(0, 10**6), max_size=60))
def test_radix_sort(values):
    assert radix_sort(values) == sorted(values)


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1])


@given(
    values=st.lists(st.integers(0, 500), max_size=60),
    k=st.integers(1, 10),
)
def test_bucket_sort(values, k):
    assert bucket_sort(values, k) == sorted(values)


def test_bucket_sort_rejects_bad_input():
    with pytest.raises(ValueError):
        bucket_sort([1, 2], 0)
    with pytest.raises(ValueError):
        bucket_sort([1, -2], 3)