"""Offline distinct-value counting over subarrays with Mo's ordering."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from math import isqrt


@dataclass(frozen=True)
class MoQuery:
    """Inclusive 0-based range ``l..r`` whose answer goes to slot ``index``."""

    l: int
    r: int
    index: int


class DistinctCountQueries:
    """Collects range queries, then answers them all in one sweep."""

    def __init__(self, values: Iterable[Hashable]):
        self._values = list(values)
        self._queries: list[MoQuery] = []
        self._block = max(1, isqrt(len(self._values)))

    def add_query(self, l: int, r: int, index: int) -> None:
        """Ask for the number of distinct values in ``values[l..r]``."""
        if not 0 <= l <= r < len(self._values):
            raise IndexError(f"range {l}..{r} outside 0..{len(self._values) - 1}")
        self._queries.append(MoQuery(l, r, index))

    def _order(self, query: MoQuery) -> tuple[int, int]:
        block = query.l // self._block
        return block, query.r if block & 1 else -query.r

    def process(self) -> list[int]:
        """Answers to every query, placed at each query's ``index``."""
        count = len(self._queries)
        for query in self._queries:
            if not 0 <= query.index < count:
                raise IndexError(f"answer slot {query.index} outside 0..{count - 1}")

        values = self._values
        answers = [0] * count
        freq: Counter[Hashable] = Counter()
        distinct = 0

        def add(pos: int) -> None:
            nonlocal distinct
            value = values[pos]
            if freq[value] == 0:
                distinct += 1
            freq[value] += 1

        def remove(pos: int) -> None:
            nonlocal distinct
            value = values[pos]
            if freq[value] == 1:
                distinct -= 1
            freq[value] -= 1

        cur_l, cur_r = 0, -1
        for query in sorted(self._queries, key=self._order):
            while cur_r < query.r:
                cur_r += 1
                add(cur_r)
            while cur_r > query.r:
                remove(cur_r)
                cur_r -= 1
            while cur_l < query.l:
                remove(cur_l)
                cur_l += 1
            while cur_l > query.l:
                cur_l -= 1
                add(cur_l)
            answers[query.index] = distinct
        return answers