import pytest
from hypothesis import given, strategies as st

from algobox.array_ops import (
    Interval,
    chocolate_distribution,
    count_inversions,
    count_inversions_naive,
    intersection,
    kth_smallest,
    max_guests,
    merge_intervals,
    min_difference,
    sort_three_way,
    union,
)

ints = st.lists(st.integers(-100, 100), max_size=40)


@given(values=st.lists(st.integers(-100, 100), min_size=1, max_size=40), data=st.data())
def test_kth_smallest_matches_sorted(values, data):
    k = data.draw(st.integers(1, len(values)))
    original = list(values)
    assert kth_smallest(values, k) == sorted(values)[k - 1]
    assert values == original


def test_kth_smallest_rejects_bad_k():
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 2], 0)
    with pytest.raises(ValueError):
        kth_smallest([3, 1, 2], 4)


@given(values=ints)
def test_inversion_counts_agree(values):
    assert count_inversions(values) == count_inversions_naive(values)


@given(values=ints)
def test_sorted_input_has_no_inversions(values):
    assert count_inversions(sorted(values)) == 0


@given(a=st.integers(-1000, 1000), d=st.integers(0, 1000))
def test_min_difference_of_pair(a, d):
    assert min_difference([a + d, a]) == d


@given(values=st.lists(st.integers(-100, 100), min_size=2, max_size=30))
def test_min_difference_is_order_independent(values):
    result = min_difference(values)
    assert result >= 0
    assert result == min_difference(list(reversed(values)))
    assert any(abs(x - y) == result for i, x in enumerate(values) for y in values[i + 1:])


def test_min_difference_needs_two_values():
    with pytest.raises(ValueError):
        min_difference([4])


@given(values=st.lists(st.integers(0, 100), min_size=1, max_size=30))
def test_chocolate_all_packets(values):
    assert chocolate_distribution(values, len(values)) == max(values) - min(values)
    assert chocolate_distribution(values, 1) == 0


def test_chocolate_rejects_too_many_students():
    with pytest.raises(ValueError):
        chocolate_distribution([1, 2, 3], 4)


def test_max_guests_disjoint_visits():
    assert max_guests([1, 3, 5], [2, 4, 6]) == 1


@given(n=st.integers(1, 20))
def test_max_guests_everyone_overlaps(n):
    arrivals = list(range(n))
    departures = [n + 10] * n
    assert max_guests(arrivals, departures) == n


def test_max_guests_rejects_mismatched_lists():
    with pytest.raises(ValueError):
        max_guests([1, 2], [3])


def test_merge_intervals_example():
    intervals = [Interval(5, 7), Interval(1, 3), Interval(6, 8), Interval(2, 4)]
    assert merge_intervals(intervals) == [Interval(1, 4), Interval(5, 8)]


@given(pairs=st.lists(st.tuples(st.integers(0, 50), st.integers(0, 20)), max_size=20))
def test_merged_intervals_are_disjoint_and_cover(pairs):
    intervals = [Interval(s, s + w) for s, w in pairs]
    merged = merge_intervals(intervals)
    for first, second in zip(merged, merged[1:]):
        assert first.end < second.start
    for iv in intervals:
        assert any(m.start <= iv.start and iv.end <= m.end for m in merged)


@given(a=ints, b=ints)
def test_intersection_and_union(a, b):
    a.sort()
    b.sort()
    assert intersection(a, b) == sorted(set(a) & set(b))
    assert union(a, b) == sorted(set(a) | set(b))


@given(values=st.lists(st.sampled_from([0, 1, 2]), max_size=50))
def test_sort_three_way(values):
    assert sort_three_way(values) == sorted(values)


def test_sort_three_way_rejects_other_values():
    with pytest.raises(ValueError):
        sort_three_way([0, 3, 1])