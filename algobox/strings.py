"""String puzzles: palindromes, jewel counting and subsequence gaps."""

from __future__ import annotations


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    """Widest palindrome bounds around a centre, or an empty span if none."""
    best = (0, 0)
    while left >= 0 and right < len(s) and s[left] == s[right]:
        best = (left, right)
        left -= 1
        right += 1
    return best


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring; the earliest one wins a tie."""
    best_left, best_right = 0, 0
    for mid in range(len(s)):
        odd = _expand(s, mid - 1, mid + 1)
        even = _expand(s, mid, mid + 1)
        left, right = max(odd, even, key=lambda span: span[1] - span[0])
        if right - left > best_right - best_left:
            best_left, best_right = left, right
    return s[best_left:best_right + 1]


def count_jewels(jewels: str, stones: str) -> int:
    """Count stones whose character is a jewel; a repeated jewel counts again."""
    return sum(stones.count(jewel) for jewel in jewels)


def missing_characters(target: str, text: str) -> int:
    """How many characters of ``target`` remain unmatched after greedily
    matching it as a subsequence of ``text``."""
    matched = 0
    for char in text:
        if matched == len(target):
            break
        if char == target[matched]:
            matched += 1
    return len(target) - matched