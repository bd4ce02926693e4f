"""Distinct AND values of all subarrays sharing one endpoint."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Run:
    """A stretch of other endpoints over which the AND stays ``value``.

    For forward runs ``start <= end``; for reverse runs ``start >= end``.
    """

    start: int
    end: int
    value: int


def _check(values: Sequence[int], bits: int) -> None:
    limit = 1 << bits
    for v in values:
        if not 0 <= v < limit:
            raise ValueError(f"value {v} does not fit in {bits} unsigned bits")


def forward_distinct(values: Sequence[int], bits: int = 32) -> list[list[Run]]:
    """For each ``i``, the runs of ``r >= i`` with constant ``AND(values[i..r])``."""
    _check(values, bits)
    n = len(values)
    next_zero = [n] * bits
    result: list[list[Run]] = [[] for _ in range(n)]
    for i in range(n - 1, -1, -1):
        v = values[i]
        changes = sorted({next_zero[b] for b in range(bits) if v >> b & 1 and next_zero[b] < n})
        runs = []
        start, acc = i, v
        for j in changes:
            runs.append(Run(start, j - 1, acc))
            acc &= values[j]
            start = j
        runs.append(Run(start, n - 1, acc))
        result[i] = runs
        for b in range(bits):
            if not v >> b & 1:
                next_zero[b] = i
    return result


def reverse_distinct(values: Sequence[int], bits: int = 32) -> list[list[Run]]:
    """For each ``i``, the runs of ``l <= i`` with constant ``AND(values[l..i])``."""
    _check(values, bits)
    n = len(values)
    prev_zero = [-1] * bits
    result: list[list[Run]] = [[] for _ in range(n)]
    for i, v in enumerate(values):
        changes = sorted(
            {prev_zero[b] for b in range(bits) if v >> b & 1 and prev_zero[b] >= 0},
            reverse=True,
        )
        runs = []
        start, acc = i, v
        for j in changes:
            runs.append(Run(start, j + 1, acc))
            acc &= values[j]
            start = j
        runs.append(Run(start, 0, acc))
        result[i] = runs
        for b in range(bits):
            if not v >> b & 1:
                prev_zero[b] = i
    return result