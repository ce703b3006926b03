"""Searching in arrays: binary searches, peaks, repeats and page allocation."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from math import inf
from typing import Any, Optional


def _check_allocation(pages: Sequence[int], k: int) -> None:
    if not pages:
        raise ValueError("there must be at least one book")
    if k < 1:
        raise ValueError("there must be at least one student")


def _naive_pages(pages: Sequence[int], n: int, k: int) -> int:
    if k == 1:
        return sum(pages[:n])
    if n == 1:
        return pages[0]
    return min(
        max(_naive_pages(pages, cut, k - 1), sum(pages[cut:n])) for cut in range(1, n)
    )


def min_pages_naive(pages: Sequence[int], k: int) -> int:
    """Smallest possible maximum of contiguous page sums over ``k`` readers.

    Tries every placement of the cuts; exponential time.
    """
    _check_allocation(pages, k)
    return _naive_pages(pages, len(pages), k)


def is_feasible(pages: Sequence[int], k: int, limit: int) -> bool:
    """True if ``k`` readers suffice when none may read more than ``limit``."""
    required, running = 1, 0
    for count in pages:
        if running + count > limit:
            required += 1
            running = count
        else:
            running += count
    return required <= k


def min_pages(pages: Sequence[int], k: int) -> int:
    """Same answer as :func:`min_pages_naive`, by binary search on the limit."""
    _check_allocation(pages, k)
    low, high = max(pages), sum(pages)
    result = high
    while low <= high:
        mid = (low + high) // 2
        if is_feasible(pages, k, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def count_ones(bits: Sequence[int]) -> int:
    """Number of ones in a sequence of zeros followed by ones."""
    return len(bits) - bisect_left(bits, 1)


def linear_first_occurrence(values: Iterable[Any], x: Any) -> Optional[int]:
    """Index of the first ``x`` by scanning, or None when absent."""
    return next((index for index, value in enumerate(values) if value == x), None)


def first_occurrence(values: Sequence[Any], x: Any) -> Optional[int]:
    """Index of the first ``x`` in a sorted sequence, or None when absent."""
    index = bisect_left(values, x)
    return index if index < len(values) and values[index] == x else None


def last_occurrence(values: Sequence[Any], x: Any) -> Optional[int]:
    """Index of the last ``x`` in a sorted sequence, or None when absent."""
    index = bisect_right(values, x) - 1
    return index if index >= 0 and values[index] == x else None


def count_occurrences(values: Sequence[Any], x: Any) -> int:
    """How many times ``x`` occurs in a sorted sequence."""
    first = first_occurrence(values, x)
    if first is None:
        return 0
    return last_occurrence(values, x) - first + 1


def count_pairs_with_sum(values: Iterable[int], k: int) -> int:
    """Number of index pairs ``i < j`` with ``values[i] + values[j] == k``."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in values:
        pairs += seen[k - value]
        seen[value] += 1
    return pairs


def peak_naive(values: Sequence[Any]) -> Any:
    """A value no smaller than its neighbours, found by a linear scan."""
    if not values:
        raise ValueError("no peak in an empty sequence")
    if len(values) == 1 or values[0] >= values[1]:
        return values[0]
    if values[-1] >= values[-2]:
        return values[-1]
    for before, value, after in zip(values, values[1:], values[2:]):
        if value >= before and value >= after:
            return value
    raise AssertionError("a peak always exists")


def peak_index(values: Sequence[Any]) -> int:
    """Index of a value no smaller than its neighbours, by binary search."""
    if not values:
        raise ValueError("no peak in an empty sequence")
    n = len(values)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        left_ok = mid == 0 or values[mid - 1] <= values[mid]
        right_ok = mid == n - 1 or values[mid + 1] <= values[mid]
        if left_ok and right_ok:
            return mid
        if mid > 0 and values[mid - 1] >= values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    raise AssertionError("a peak always exists")


def median_of_sorted(a: Sequence[float], b: Sequence[float]) -> float:
    """Median of the union of two sorted sequences, in logarithmic time."""
    if len(a) > len(b):
        a, b = b, a
    n1, n2 = len(a), len(b)
    if n1 + n2 == 0:
        raise ValueError("median of no values")
    low, high = 0, n1
    while low <= high:
        i1 = (low + high) // 2
        i2 = (n1 + n2 + 1) // 2 - i1
        min1 = a[i1] if i1 < n1 else inf
        max1 = a[i1 - 1] if i1 > 0 else -inf
        min2 = b[i2] if i2 < n2 else inf
        max2 = b[i2 - 1] if i2 > 0 else -inf
        if max1 <= min2 and max2 <= min1:
            if (n1 + n2) % 2 == 0:
                return (max(max1, max2) + min(min1, min2)) / 2
            return float(max(max1, max2))
        if max1 > min2:
            high = i1 - 1
        else:
            low = i1 + 1
    raise ValueError("inputs must be sorted")


def find_repeating_naive(values: Iterable[Any]) -> Any:
    """A value that occurs more than once, found by sorting."""
    ordered = sorted(values)
    for current, following in zip(ordered, ordered[1:]):
        if current == following:
            return current
    raise ValueError("no value repeats")


def find_repeating(values: Sequence[int]) -> int:
    """The repeated value among ``n`` values drawn from ``0 .. n - 2``.

    Uses cycle detection in constant extra space.
    """
    n = len(values)
    if n < 2 or any(not 0 <= value <= n - 2 for value in values):
        raise ValueError("values must lie in 0 .. len(values) - 2")
    slow = fast = values[0] + 1
    while True:
        slow = values[slow] + 1
        fast = values[values[fast] + 1] + 1
        if slow == fast:
            break
    slow = values[0] + 1
    while slow != fast:
        slow = values[slow] + 1
        fast = values[fast] + 1
    return slow - 1


def search_unbounded(values: Iterable[Any], x: Any) -> Optional[int]:
    """Index of ``x`` in a sorted, possibly endless, stream, or None."""
    for index, value in enumerate(values):
        if value == x:
            return index
        if value > x:
            return None
    return None


def search_rotated(values: Sequence[Any], x: Any) -> Optional[int]:
    """Index of ``x`` in a rotated sorted sequence of distinct values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == x:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= x < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < x <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def isqrt_floor(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    if x < 2:
        return x
    low, high, answer = 1, x, 1
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == x:
            return mid
        if square > x:
            high = mid - 1
        else:
            answer = mid
            low = mid + 1
    return answer