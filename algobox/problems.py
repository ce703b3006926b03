"""Assorted small problems on numbers and sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

MOD = 10**9 + 7


def concatenated_binary(n: int) -> int:
    """Value of the binary digits of 1..n written one after another, mod 1e9+7."""
    answer = 0
    for i in range(1, n + 1):
        answer = ((answer << i.bit_length()) + i) % MOD
    return answer


def closest_elements(values: Sequence[int], k: int, x: int) -> list[int]:
    """The ``k`` values of a sorted sequence closest to ``x``, in order.

    On a tie the smaller values are preferred.
    """
    if not 0 <= k <= len(values):
        raise ValueError("k must lie between 0 and the number of values")
    left, right = 0, len(values) - k
    while left < right:
        mid = (left + right) // 2
        if x - values[mid] > values[mid + k] - x:
            left = mid + 1
        else:
            right = mid
    return list(values[left:left + k])


def majority_element(values: Iterable[Any]) -> Any:
    """The candidate left by a Boyer-Moore vote.

    It is the majority element whenever one occurs more than half the time.
    """
    count = 0
    candidate: Any = None
    seen = False
    for value in values:
        seen = True
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    if not seen:
        raise ValueError("no majority in an empty sequence")
    return candidate


def scholarship(rank: int) -> int:
    """Scholarship percentage for a rank: 100 for 1-50, 50 for 51-100, else 0."""
    if 1 <= rank <= 50:
        return 100
    if 51 <= rank <= 100:
        return 50
    return 0


def fibonacci_series(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers, starting 0, 1."""
    series = []
    current, following = 0, 1
    for _ in range(max(n, 0)):
        series.append(current)
        current, following = following, current + following
    return series