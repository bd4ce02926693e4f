"""Longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def longest_common_subsequence(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """One longest common subsequence of ``a`` and ``b``, as a list."""
    m = len(b)
    table = [[0] * (m + 1)]
    for x in a:
        prev = table[-1]
        cur = [0] * (m + 1)
        for j, y in enumerate(b, start=1):
            cur[j] = prev[j - 1] + 1 if x == y else max(prev[j], cur[j - 1])
        table.append(cur)

    result: list[Any] = []
    i, j = len(a), m
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result