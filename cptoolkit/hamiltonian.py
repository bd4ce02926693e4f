"""Cheapest Hamiltonian path by dynamic programming over vertex subsets."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import NamedTuple


class HamiltonianPath(NamedTuple):
    """Total cost of a path and the order in which it visits the vertices."""

    cost: float
    order: list[int]


def shortest_hamiltonian_path(cost: Sequence[Sequence[float]]) -> HamiltonianPath:
    """Cheapest path that starts at vertex 0 and visits every vertex once.

    ``cost[j][i]`` is the price of moving from ``j`` to ``i``; use ``math.inf``
    for a missing edge. When no such path exists the cost is ``math.inf`` and
    the order is empty.
    """
    n = len(cost)
    if any(len(row) != n for row in cost):
        raise ValueError("cost matrix must be square")
    if n <= 1:
        return HamiltonianPath(0, list(range(n)))

    size = 1 << n
    best = [[math.inf] * n for _ in range(size)]
    came_from = [[-1] * n for _ in range(size)]
    best[1][0] = 0
    # Every useful subset contains vertex 0, so only odd masks are visited.
    for mask in range(3, size, 2):
        row = best[mask]
        for i in range(1, n):
            if not mask >> i & 1:
                continue
            prev = mask ^ (1 << i)
            prev_row = best[prev]
            for j in range(n):
                if prev >> j & 1:
                    candidate = prev_row[j] + cost[j][i]
                    if candidate < row[i]:
                        row[i] = candidate
                        came_from[mask][i] = j

    full = size - 1
    end = min(range(1, n), key=lambda i: best[full][i])
    total = best[full][end]
    if total == math.inf:
        return HamiltonianPath(math.inf, [])

    order: list[int] = []
    mask, vertex = full, end
    while vertex != -1:
        order.append(vertex)
        vertex, mask = came_from[mask][vertex], mask ^ (1 << vertex)
    order.reverse()
    return HamiltonianPath(total, order)