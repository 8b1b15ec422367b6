"""Plain-array reference with the same interface as :class:`FenwickTree`."""

from __future__ import annotations

import operator
from typing import Any, List, Sequence

from fenwick.utils import Number, as_number, as_values

__all__ = ["NaivePrefixArray"]


class NaivePrefixArray:
    """
    Keeps the raw values and their running sums side by side.

    Updates cost O(n) because every later prefix is rewritten; queries are
    O(1).  Used as an oracle in tests and as the benchmark baseline.
    """

    def __init__(self, n: int):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._n = n
        self._values: List[Number] = [0] * (n + 1)
        self._prefix: List[Number] = [0] * (n + 1)

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def _check_index(self, i: Any, lo: int) -> int:
        i = operator.index(i)
        if not lo <= i <= self._n:
            raise IndexError(f"index {i} out of range [{lo}, {self._n}]")
        return i

    def build(self, values: Sequence[Any]) -> None:
        if len(values) != self._n + 1:
            raise ValueError(
                f"build expects {self._n + 1} values (index 0 unused), got {len(values)}"
            )
        self._values = [0] + as_values(values[1:])
        running: Number = 0
        for i in range(1, self._n + 1):
            running += self._values[i]
            self._prefix[i] = running

    def update(self, i: int, delta: Any) -> None:
        i = self._check_index(i, 1)
        delta = as_number(delta)
        self._values[i] += delta
        for j in range(i, self._n + 1):
            self._prefix[j] += delta

    def set_value(self, i: int, value: Any) -> None:
        self.update(i, as_number(value) - self.point_value(i))

    def query(self, i: int) -> Number:
        return self._prefix[self._check_index(i, 0)]

    def query_range(self, l: int, r: int) -> Number:
        l = operator.index(l)
        r = operator.index(r)
        if l > r:
            return 0
        self._check_index(l, 1)
        self._check_index(r, 1)
        return self._prefix[r] - self._prefix[l - 1]

    def total(self) -> Number:
        return self._prefix[self._n]

    def point_value(self, i: int) -> Number:
        return self._values[self._check_index(i, 1)]

    def values(self) -> List[Number]:
        return self._values[1:]

    def lower_bound(self, target: Any) -> int:
        target = as_number(target)
        i = 1
        while i <= self._n and self._prefix[i] < target:
            i += 1
        return i
