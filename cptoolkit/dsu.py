"""Disjoint set union, plain and with rollback and parity."""

from __future__ import annotations


class DSU:
    """Union-find over ``0..n`` with path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.connected = n

    def find(self, u: int) -> int:
        """Representative of ``u``'s set."""
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def size(self, u: int) -> int:
        """Number of elements in ``u``'s set."""
        return self._size[self.find(u)]

    def union(self, u: int, v: int) -> bool:
        """Join ``v``'s set into ``u``'s; return whether they were separate."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        self.connected -= 1
        self._size[root_u] += self._size[root_v]
        self._size[root_v] = 0
        self._parent[root_v] = root_u
        return True


class RollbackDSU:
    """Union-find by size with undo and parity to the root (for bipartiteness)."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._parity = [0] * (n + 1)
        self._history: list[tuple[int, int, int, int, int]] = []
        self.connected = n

    def find(self, u: int) -> int:
        """Representative of ``u``'s set."""
        while self._parent[u] != u:
            u = self._parent[u]
        return u

    def size(self, u: int) -> int:
        """Number of elements in ``u``'s set."""
        return self._size[self.find(u)]

    def parity(self, u: int) -> int:
        """Parity of the path from ``u`` to its representative."""
        result = 0
        while self._parent[u] != u:
            result ^= self._parity[u]
            u = self._parent[u]
        return result

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v`` with opposite parity.

        Returns whether the sets were separate.
        """
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            u, v = v, u
            root_u, root_v = root_v, root_u
        self.connected -= 1
        self._history.append(
            (root_v, self._parent[root_v], root_u, self._size[root_u], self._parity[root_v])
        )
        self._parity[root_v] = self.parity(u) ^ self.parity(v) ^ 1
        self._size[root_u] += self._size[root_v]
        self._parent[root_v] = root_u
        return True

    def rollback(self) -> bool:
        """Undo the latest successful union; return whether one was undone."""
        if not self._history:
            return False
        root_v, parent, root_u, size, parity = self._history.pop()
        self.connected += 1
        self._size[root_u] = size
        self._parent[root_v] = parent
        self._parity[root_v] = parity
        return True