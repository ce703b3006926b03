"""Sorting algorithms and the partition schemes behind quicksort."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate
from typing import Any


def _check_range(values: Sequence[Any], low: int, high: int) -> None:
    if not 0 <= low <= high < len(values):
        raise IndexError(f"range {low}..{high} is outside the sequence")


def hoare_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[low]``.

    Returns ``j`` such that every element in ``low .. j`` is no greater
    than the pivot and every element in ``j + 1 .. high`` is no smaller.
    """
    _check_range(values, low, high)
    pivot = values[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while values[i] < pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            return j
        values[i], values[j] = values[j], values[i]


def lomuto_partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[high]``.

    Returns the pivot's final index; smaller elements lie before it.
    """
    _check_range(values, low, high)
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def naive_partition(values: MutableSequence[Any], low: int, high: int, pivot: int) -> int:
    """Stable partition of ``values[low:high + 1]`` around ``values[pivot]``.

    Smaller elements come first, then those equal to the pivot, then the
    larger ones, each group keeping its original order. Returns the index
    of the last element equal to the pivot.
    """
    _check_range(values, low, high)
    if not low <= pivot <= high:
        raise IndexError(f"pivot {pivot} is outside {low}..{high}")
    segment = list(values[low:high + 1])
    key = values[pivot]
    less = [v for v in segment if v < key]
    equal = [v for v in segment if v == key]
    greater = [v for v in segment if v > key]
    values[low:high + 1] = less + equal + greater
    return low + len(less) + len(equal) - 1


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swap."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Stable insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort: swap the smallest remaining element into place."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sorted(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences; on ties elements of ``a`` come first."""
    result: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] <= b[j]:
            result.append(a[i])
            i += 1
        else:
            result.append(b[j])
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort using the middle element as pivot and Hoare-style scans."""
    items = list(values)
    stack = [(0, len(items) - 1)] if items else []
    while stack:
        left, right = stack.pop()
        i, j = left, right
        pivot = items[(left + right) // 2]
        while i <= j:
            while items[i] < pivot:
                i += 1
            while items[j] > pivot:
                j -= 1
            if i <= j:
                items[i], items[j] = items[j], items[i]
                i += 1
                j -= 1
        if left < j:
            stack.append((left, j))
        if i < right:
            stack.append((i, right))
    return items


def quick_sort_lomuto(values: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element as pivot and Lomuto partitioning."""
    items = list(values)
    stack = [(0, len(items) - 1)] if items else []
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue
        position = lomuto_partition(items, low, high)
        stack.append((low, position - 1))
        stack.append((position + 1, high))
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Heap sort with a max-heap."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def counting_sort(values: Iterable[int], k: int) -> list[int]:
    """Stable counting sort of integers in ``0 .. k - 1``."""
    items = list(values)
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} is outside 0 .. {k - 1}")
    counts = [0] * max(k, 0)
    for value in items:
        counts[value] += 1
    ends = list(accumulate(counts))
    output: list[int] = [0] * len(items)
    for value in reversed(items):
        ends[value] -= 1
        output[ends[value]] = value
    return output


def radix_sort(values: Iterable[int]) -> list[int]:
    """LSD radix sort of non-negative integers, one decimal digit per pass."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def bucket_sort(values: Iterable[int], k: int) -> list[int]:
    """Sort non-negative integers by spreading them over ``k`` buckets."""
    if k < 1:
        raise ValueError("at least one bucket is needed")
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("bucket sort needs non-negative integers")
    if not items:
        return items
    bound = max(items) + 1
    buckets: list[list[int]] = [[] for _ in range(k)]
    for value in items:
        buckets[k * value // bound].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Cycle sort, which writes each element to its final place at most once."""
    items = list(values)
    n = len(items)
    for start in range(n - 1):
        item = items[start]
        pos = start + sum(1 for v in items[start + 1:] if v < item)
        if pos == start:
            continue
        while items[pos] == item:
            pos += 1
        items[pos], item = item, items[pos]
        while pos != start:
            pos = start + sum(1 for v in items[start + 1:] if v < item)
            while items[pos] == item:
                pos += 1
            items[pos], item = item, items[pos]
    return items