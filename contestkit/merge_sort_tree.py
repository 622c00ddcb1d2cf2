"""Merge sort tree counting values not above a bound, positions start at 1."""

import heapq
from bisect import bisect_right
from collections.abc import Iterable


class MergeSortTree:
    """Static tree whose nodes keep the sorted values of their range."""

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("merge sort tree needs at least one value")
        self.n = len(values)
        self._nodes: list[list[int]] = [[] for _ in range(4 * self.n + 5)]
        self._build(1, 1, self.n, values)

    def _build(self, nd: int, st: int, ed: int, values: list[int]) -> None:
        if st == ed:
            self._nodes[nd] = [values[st - 1]]
            return
        mid = (st + ed) // 2
        self._build(2 * nd, st, mid, values)
        self._build(2 * nd + 1, mid + 1, ed, values)
        self._nodes[nd] = list(heapq.merge(self._nodes[2 * nd], self._nodes[2 * nd + 1]))

    def _count(self, nd: int, st: int, ed: int, l: int, r: int, value: int) -> int:
        if st > r or ed < l:
            return 0
        if l <= st and ed <= r:
            return bisect_right(self._nodes[nd], value)
        mid = (st + ed) // 2
        return self._count(2 * nd, st, mid, l, r, value) + self._count(
            2 * nd + 1, mid + 1, ed, l, r, value
        )

    def count_at_most(self, l: int, r: int, value: int) -> int:
        """Number of positions in ``l..r`` holding a value ``<= value``."""
        return self._count(1, 1, self.n, l, r, value)