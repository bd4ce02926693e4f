import random

import pytest

from cptoolkit.bridges import find_bridges


def _components(n, edges):
    parent = list(range(n + 1))

    def root(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for u, v in edges:
        parent[root(u)] = root(v)
    return len({root(x) for x in range(1, n + 1)})


def test_path_all_bridges():
    assert sorted(find_bridges(3, [(1, 2), (2, 3)])) == [(1, 2), (2, 3)]


def test_cycle_has_none():
    assert find_bridges(3, [(1, 2), (2, 3), (3, 1)]) == []


def test_cycle_with_tail():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5)]
    assert sorted(find_bridges(5, edges)) == [(3, 4), (4, 5)]


def test_pairs_normalised():
    assert find_bridges(2, [(2, 1)]) == [(1, 2)]


def test_disconnected_and_isolated():
    edges = [(1, 2), (4, 5), (5, 6), (6, 4)]
    assert find_bridges(6, edges) == [(1, 2)]


@pytest.mark.parametrize("seed", range(6))
def test_matches_edge_removal(seed):
    rng = random.Random(seed)
    n = 9
    edges = set()
    while len(edges) < 11:
        u, v = rng.sample(range(1, n + 1), 2)
        edges.add((min(u, v), max(u, v)))
    edges = sorted(edges)
    base = _components(n, edges)
    expected = sorted(e for e in edges
                      if _components(n, [f for f in edges if f != e]) > base)
    assert sorted(find_bridges(n, edges)) == expected


def test_bad_vertex():
    with pytest.raises(ValueError):
        find_bridges(3, [(1, 4)])