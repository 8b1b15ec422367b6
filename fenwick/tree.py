# fenwick/tree.py
"""
Fenwick (Binary Indexed) Tree supporting point updates and prefix-sum
queries in O(log n), with an O(n) bulk build.

The public API is 1-based: logical elements live at indices 1..n and index 0
is the sentinel that terminates the query walk.  Node ``x`` of the tree holds
the sum of the ``lowbit(x)`` logical elements ending at ``x``::

    tree[x] = A[x - lowbit(x) + 1] + ... + A[x]

Accumulators are plain Python ints (or floats), so prefix sums never overflow
regardless of the width of the input element type.
"""

from __future__ import annotations

import operator
from typing import Any, Dict, List, Optional, Sequence

from .utils import Number, as_number, as_values, log

__all__ = ["FenwickTree", "lowbit"]


def lowbit(x: int) -> int:
    """Return the value of the lowest set bit of *x* (``lowbit(12) == 4``).

    Relies on two's-complement negation; Python ints behave as infinitely
    sign-extended two's complement, so no word width is involved.
    """
    return x & -x


class FenwickTree:
    """
    Prefix sums over a fixed-size array of ``n`` numbers.

    The size is fixed at construction.  Growing the array means building a
    new tree from the old values (see :meth:`values`).  Instances are not
    thread safe.
    """

    __slots__ = ("_n", "_tree")

    def __init__(self, n: int):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        # 1-based indexing, _tree[0] is never read
        self._tree: List[Number] = [0] * (n + 1)

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> "FenwickTree":
        """Build a tree from the ``n`` logical values given 0-indexed."""
        coerced = as_values(values)
        tree = cls(len(coerced))
        tree.build([0] + coerced)
        return tree

    # ------------------------------------------------------------------ #
    #  Size & bounds                                                     #
    # ------------------------------------------------------------------ #
    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def _check_index(self, i: Any, lo: int) -> int:
        i = operator.index(i)
        if not lo <= i <= self._n:
            raise IndexError(f"index {i} out of range [{lo}, {self._n}]")
        return i

    # ------------------------------------------------------------------ #
    #  Mutation                                                          #
    # ------------------------------------------------------------------ #
    def build(
        self,
        values: Sequence[Any],
        *,
        debug: Optional[Dict[str, object]] = None,
    ) -> None:
        """
        Replace the contents with ``values[1..n]`` in O(n).

        ``values`` is 1-indexed and must have length ``n + 1``; ``values[0]``
        is ignored.  Each node is folded into its parent exactly once instead
        of issuing ``n`` separate updates.
        """
        n = self._n
        if len(values) != n + 1:
            raise ValueError(
                f"build expects {n + 1} values (index 0 unused), got {len(values)}"
            )
        # self._tree is only replaced once every element has been coerced
        tree: List[Number] = [0] + as_values(values[1:])

        propagations = 0
        for i in range(1, n + 1):
            j = i + lowbit(i)
            if j <= n:
                tree[j] += tree[i]
                propagations += 1
        self._tree = tree

        log(f"[fenwick] build n={n} propagations={propagations}")
        if debug is not None:
            debug["parent_propagations"] = propagations

    def update(self, i: int, delta: Any) -> None:
        """Add ``delta`` to ``A[i]``, ``1 <= i <= n``."""
        x = self._check_index(i, 1)
        delta = as_number(delta)
        n = self._n
        tree = self._tree
        while x <= n:
            tree[x] += delta
            x += x & -x

    def set_value(self, i: int, value: Any) -> None:
        """Overwrite ``A[i]`` with ``value``."""
        self.update(i, as_number(value) - self.point_value(i))

    # ------------------------------------------------------------------ #
    #  Queries                                                           #
    # ------------------------------------------------------------------ #
    def query(self, i: int) -> Number:
        """Return ``A[1] + ... + A[i]`` for ``0 <= i <= n``; ``query(0) == 0``."""
        x = self._check_index(i, 0)
        tree = self._tree
        total: Number = 0
        while x > 0:
            total += tree[x]
            x -= x & -x
        return total

    def query_range(self, l: int, r: int) -> Number:
        """
        Return ``A[l] + ... + A[r]``.

        An empty range (``l > r``) sums to 0 and is not bounds checked.
        """
        l = operator.index(l)
        r = operator.index(r)
        if l > r:
            return 0
        self._check_index(l, 1)
        self._check_index(r, 1)
        return self.query(r) - self.query(l - 1)

    def total(self) -> Number:
        return self.query(self._n)

    def point_value(self, i: int) -> Number:
        """
        Return the current value of ``A[i]`` in O(log n).

        ``tree[i]`` covers ``(i - lowbit(i), i]``; subtracting the nodes that
        tile ``(i - lowbit(i), i - 1]`` leaves ``A[i]``.
        """
        x = self._check_index(i, 1)
        tree = self._tree
        value = tree[x]
        stop = x - lowbit(x)
        j = x - 1
        while j != stop:
            value -= tree[j]
            j -= j & -j
        return value

    def values(self) -> List[Number]:
        """Reconstruct the logical array (0-indexed, length n) in O(n)."""
        n = self._n
        tree = self._tree
        out = tree[1:]
        for i in range(1, n + 1):
            j = i + lowbit(i)
            if j <= n:
                out[j - 1] -= tree[i]
        return out

    def lower_bound(self, target: Any) -> int:
        """
        Return the smallest ``i`` in ``1..n`` with ``query(i) >= target``.

        Only meaningful when every logical value is non-negative, so that
        prefix sums are monotone.  Returns ``n + 1`` when even ``total()``
        falls short of ``target``.
        """
        target = as_number(target)
        n = self._n
        tree = self._tree
        pos = 0
        remaining = target
        step = 1 << (n.bit_length() - 1) if n else 0
        while step:
            nxt = pos + step
            if nxt <= n and tree[nxt] < remaining:
                pos = nxt
                remaining -= tree[nxt]
            step >>= 1
        return pos + 1

    # ------------------------------------------------------------------ #
    #  Dunder helpers                                                    #
    # ------------------------------------------------------------------ #
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FenwickTree):
            return NotImplemented
        return self._n == other._n and self._tree == other._tree

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._n <= 16:
            return f"FenwickTree(n={self._n}, values={self.values()})"
        return f"FenwickTree(n={self._n})"
