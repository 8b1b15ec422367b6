from __future__ import annotations

from typing import Dict, Set

import pytest

from fenwick import FenwickTree, lowbit

from test_utils import gen_values, rng


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 100, 1023, 1024, 4097])
def test_build_is_linear(n: int) -> None:
    debug: Dict[str, object] = {}
    tree = FenwickTree(n)
    tree.build(gen_values(rng(n), n), debug=debug)
    propagations = debug["parent_propagations"]
    # every node except the roots of the implicit forest feeds one parent
    roots = sum(1 for i in range(1, n + 1) if i + lowbit(i) > n)
    assert propagations == n - roots
    assert propagations < n


class _CountingList(list):
    """List that counts element reads and writes."""

    def __init__(self, items):
        super().__init__(items)
        self.reads = 0
        self.writes = 0

    def __getitem__(self, idx):
        self.reads += 1
        return super().__getitem__(idx)

    def __setitem__(self, idx, value):
        self.writes += 1
        super().__setitem__(idx, value)


def _instrument(tree: FenwickTree) -> _CountingList:
    counted = _CountingList(tree._tree)
    tree._tree = counted
    return counted


def _starts(n: int) -> Set[int]:
    return {1, 2 if n >= 2 else 1, n // 2 or 1, n - 1 or 1, n}


@pytest.mark.parametrize("n", [1, 5, 64, 1000, 65535, 65536])
def test_update_touches_logarithmic_nodes(n: int) -> None:
    bound = n.bit_length() + 1
    tree = FenwickTree(n)
    for start in _starts(n):
        counted = _instrument(tree)
        tree.update(start, 1)
        assert 1 <= counted.writes <= bound
        assert counted.reads <= bound


@pytest.mark.parametrize("n", [1, 5, 64, 1000, 65535, 65536])
def test_query_touches_logarithmic_nodes(n: int) -> None:
    bound = n.bit_length() + 1
    tree = FenwickTree.from_values([1] * n)
    for start in _starts(n) | {0}:
        counted = _instrument(tree)
        assert tree.query(start) == start
        assert counted.writes == 0
        assert counted.reads <= bin(start).count("1")
        assert counted.reads <= bound


@pytest.mark.parametrize("n", [5, 1000, 65536])
def test_range_and_point_reads_are_logarithmic(n: int) -> None:
    bound = n.bit_length() + 1
    tree = FenwickTree.from_values([2] * n)
    for start in _starts(n):
        counted = _instrument(tree)
        assert tree.query_range(1, start) == 2 * start
        assert counted.reads <= 2 * bound

        counted = _instrument(tree)
        assert tree.point_value(start) == 2
        assert counted.reads <= bound


@pytest.mark.slow
def test_large_tree_smoke() -> None:
    n = 200_000
    tree = FenwickTree.from_values(range(1, n + 1))
    assert tree.total() == n * (n + 1) // 2
    assert tree.query_range(n // 2, n // 2) == n // 2
    tree.update(1, -1)
    assert tree.query(1) == 0
