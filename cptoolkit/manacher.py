"""Palindrome radii by Manacher's algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple


class PalindromeCounts(NamedTuple):
    """Per-position counts of odd- and even-length palindromes centred there.

    ``odd[i]`` palindromes have centre ``i`` (longest is ``2*odd[i]-1``);
    ``even[i]`` have their centre just before ``i`` (longest is ``2*even[i]``).
    """

    odd: list[int]
    even: list[int]


def _radii(seq: Sequence[Any], odd: bool) -> list[int]:
    n = len(seq)
    shift = 0 if odd else 1
    radii = [0] * n
    left, right = 0, -1
    for i in range(n):
        if i > right:
            k = 1 if odd else 0
        else:
            k = min(radii[left + right - i + shift], right - i + 1)
        while i + k < n and i - k - shift >= 0 and seq[i + k] == seq[i - k - shift]:
            k += 1
        radii[i] = k
        k -= 1
        if i + k - shift > right:
            left = i - k - shift
            right = i + k
    return radii


def palindrome_counts(seq: Sequence[Any]) -> PalindromeCounts:
    """Odd and even palindrome counts for every centre of ``seq``."""
    return PalindromeCounts(_radii(seq, odd=True), _radii(seq, odd=False))


def longest_palindromes_from(seq: Sequence[Any]) -> list[int]:
    """Length of the longest palindrome starting at each position of ``seq``."""
    odd, even = palindrome_counts(seq)
    longest = [1] * len(seq)
    for i, (o, e) in enumerate(zip(odd, even)):
        odd_len, even_len = 2 * o - 1, 2 * e
        start = i - odd_len // 2
        longest[start] = max(longest[start], odd_len)
        start = i - even_len // 2
        longest[start] = max(longest[start], even_len)
    for i in range(1, len(longest)):
        longest[i] = max(longest[i], longest[i - 1] - 2)
    return longest