"""Longest strictly increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from typing import Any


def longest_increasing_subsequence(values: Sequence[Any]) -> list[Any]:
    """One longest strictly increasing subsequence, in O(n log n).

    When no two elements increase, the first element is returned alone.
    """
    if not values:
        return []
    tails: list[Any] = []
    tail_index: list[int] = []
    parent = [-1] * len(values)
    for i, x in enumerate(values):
        pos = bisect_left(tails, x)
        if pos < len(tails) and tails[pos] == x:
            continue
        if pos == len(tails):
            tails.append(x)
            tail_index.append(i)
        else:
            tails[pos] = x
            tail_index[pos] = i
        parent[i] = tail_index[pos - 1] if pos else -1

    if len(tails) == 1:
        return [values[0]]
    seq = []
    i = tail_index[-1]
    while i != -1:
        seq.append(values[i])
        i = parent[i]
    seq.reverse()
    return seq