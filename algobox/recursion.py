"""Classic recursive exercises: Josephus, factorial, powers, Hanoi and more."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from math import prod
from typing import Any


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def josephus(n: int, k: int) -> int:
    """Safe 1-based position when every ``k``-th of ``n`` people is removed."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    position = 1
    for size in range(2, n + 1):
        position = (position + k - 1) % size + 1
    return position


def factorial(n: int) -> int:
    """Return ``n!``."""
    _require_non_negative("n", n)
    return prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def power(x: Any, n: int) -> Any:
    """Return ``x`` raised to ``n`` by repeated multiplication."""
    _require_non_negative("n", n)
    result = 1
    for _ in range(n):
        result *= x
    return result


def fast_power(x: Any, n: int) -> Any:
    """Return ``x`` raised to ``n`` by repeated squaring."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    half = fast_power(x, n // 2)
    square = half * half
    return x * square if n % 2 else square


def _hanoi(n: int, source: str, auxiliary: str, target: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield 1, source, target
        return
    yield from _hanoi(n - 1, source, target, auxiliary)
    yield n, source, target
    yield from _hanoi(n - 1, auxiliary, source, target)


def hanoi_moves(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> list[tuple[int, str, str]]:
    """Moves that carry ``n`` discs from ``source`` to ``target``.

    Each move is ``(disc, from_peg, to_peg)``; disc 1 is the smallest.
    """
    _require_non_negative("n", n)
    if n == 0:
        return []
    return list(_hanoi(n, source, auxiliary, target))


def count_down(n: int) -> list[int]:
    """Return ``n, n - 1, ..., 1``."""
    _require_non_negative("n", n)
    return list(range(n, 0, -1))


def count_up(n: int) -> list[int]:
    """Return ``1, 2, ..., n``."""
    _require_non_negative("n", n)
    return list(range(1, n + 1))


def contains(values: Iterable[Any], target: Any) -> bool:
    """Sort ``values`` and binary-search them for ``target``."""
    ordered = sorted(values)
    index = bisect_left(ordered, target)
    return index < len(ordered) and ordered[index] == target