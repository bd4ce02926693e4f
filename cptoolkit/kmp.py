"""Knuth-Morris-Pratt matching over arbitrary sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def prefix_function(seq: Sequence[Any]) -> list[int]:
    """For each position, the length of the longest proper border of ``seq[:i+1]``."""
    table = [0] * len(seq)
    for i in range(1, len(seq)):
        j = table[i - 1]
        while j > 0 and seq[j] != seq[i]:
            j = table[j - 1]
        if seq[j] == seq[i]:
            j += 1
        table[i] = j
    return table


def kmp_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Zero-based start indices of every (possibly overlapping) match of ``pattern``."""
    m = len(pattern)
    if m == 0:
        return list(range(len(text) + 1))
    separator = object()  # equal to nothing, so no border crosses it
    combined = [*pattern, separator, *text]
    table = prefix_function(combined)
    return [i - 2 * m for i in range(m + 1, len(combined)) if table[i] >= m]