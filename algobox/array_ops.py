"""Array problems solved with sorting: inversions, intervals, set merges."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import combinations, groupby
from typing import Any

from algobox.sorting import lomuto_partition, merge_sorted


@dataclass(frozen=True)
class Interval:
    """A closed interval from ``start`` to ``end``."""

    start: Any
    end: Any


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """The ``k``-th smallest value (1-based), found by quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k must lie between 1 and the number of values")
    low, high = 0, len(items) - 1
    while True:
        p = lomuto_partition(items, low, high)
        if p == k - 1:
            return items[p]
        if p > k - 1:
            high = p - 1
        else:
            low = p + 1


def count_inversions_naive(values: Sequence[Any]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]`` by checking each pair."""
    return sum(1 for first, second in combinations(values, 2) if first > second)


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    crossing = 0
    i = 0
    for value in right:
        while i < len(left) and left[i] <= value:
            i += 1
        crossing += len(left) - i
    return merge_sorted(left, right), left_count + right_count + crossing


def count_inversions(values: Iterable[Any]) -> int:
    """Count inversions in ``O(n log n)`` while merge sorting."""
    return _sort_and_count(list(values))[1]


def min_difference(values: Iterable[Any]) -> Any:
    """Smallest difference between any two of the values."""
    items = sorted(values)
    if len(items) < 2:
        raise ValueError("at least two values are needed")
    return min(b - a for a, b in zip(items, items[1:]))


def chocolate_distribution(values: Iterable[int], m: int) -> int:
    """Smallest spread between the largest and smallest of ``m`` chosen packets."""
    items = sorted(values)
    if not 1 <= m <= len(items):
        raise ValueError("m must lie between 1 and the number of packets")
    return min(items[i + m - 1] - items[i] for i in range(len(items) - m + 1))


def max_guests(arrivals: Iterable[Any], departures: Iterable[Any]) -> int:
    """Largest number of guests present at once.

    A guest arriving at the moment another leaves is counted with them.
    """
    arr = sorted(arrivals)
    dep = sorted(departures)
    if len(arr) != len(dep):
        raise ValueError("every guest needs an arrival and a departure")
    n = len(arr)
    if n == 0:
        return 0
    i, j, current, best = 1, 0, 1, 1
    while i < n and j < n:
        if arr[i] <= dep[j]:
            current += 1
            i += 1
        else:
            current -= 1
            j += 1
        best = max(best, current)
    return best


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Merge overlapping intervals; the result is ordered by start."""
    merged: list[Interval] = []
    for interval in sorted(intervals, key=lambda iv: iv.start):
        if merged and merged[-1].end >= interval.start:
            last = merged[-1]
            merged[-1] = Interval(last.start, max(last.end, interval.end))
        else:
            merged.append(interval)
    return merged


def intersection(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Distinct values common to two sorted sequences, in order."""
    result: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if i > 0 and a[i] == a[i - 1]:
            i += 1
            continue
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            result.append(a[i])
            i += 1
            j += 1
    return result


def union(a: Iterable[Any], b: Iterable[Any]) -> list[Any]:
    """Distinct values found in either of two sorted sequences, in order."""
    return [value for value, _ in groupby(heapq.merge(a, b))]


def sort_three_way(values: Iterable[int]) -> list[int]:
    """Sort values drawn from 0, 1 and 2 in one pass (Dutch national flag)."""
    items = list(values)
    if any(value not in (0, 1, 2) for value in items):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items