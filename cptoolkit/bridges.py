"""Bridges of an undirected graph."""

from __future__ import annotations

from collections.abc import Iterable


def find_bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the bridges of a graph on vertices ``1..n``.

    Each bridge is given as ``(smaller, larger)``, in the order the depth-first
    search finishes them.
    """
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)

    tin = [-1] * (n + 1)
    low = [0] * (n + 1)
    timer = 0
    bridges: list[tuple[int, int]] = []
    for root in range(1, n + 1):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        stack = [(root, 0, iter(adj[root]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(adj[v])))
                    break
            else:
                stack.pop()
                if parent:
                    low[parent] = min(low[parent], low[u])
                    if low[u] > tin[parent]:
                        bridges.append((min(parent, u), max(parent, u)))
    return bridges