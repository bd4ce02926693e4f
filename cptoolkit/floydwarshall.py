"""All-pairs shortest paths."""

from __future__ import annotations

from collections.abc import Sequence


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """Shortest distances from a square matrix of direct edge weights.

    Use ``math.inf`` for missing edges. The input is left unchanged.
    """
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("distance matrix must be square")
    d = [list(row) for row in dist]
    for k in range(n):
        row_k = d[k]
        for row in d:
            via = row[k]
            for j, w in enumerate(row_k):
                if via + w < row[j]:
                    row[j] = via + w
    return d