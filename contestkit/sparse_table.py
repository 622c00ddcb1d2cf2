"""Sparse tables for idempotent range queries on a static array, 0-based."""

from collections.abc import Callable, Iterable
from typing import Any


class SparseTable:
    """Range query with an idempotent ``combine`` (``min`` by default)."""

    def __init__(self, values: Iterable[Any], combine: Callable[[Any, Any], Any] = min):
        values = list(values)
        if not values:
            raise ValueError("sparse table needs at least one value")
        self._combine = combine
        self._table = [values]
        length = 1
        while 2 * length <= len(values):
            prev = self._table[-1]
            self._table.append([combine(a, b) for a, b in zip(prev, prev[length:])])
            length *= 2

    def __len__(self) -> int:
        return len(self._table[0])

    def query(self, l: int, r: int) -> Any:
        """Combine positions ``l..r`` inclusive."""
        if not 0 <= l <= r < len(self):
            raise IndexError(f"range {l}..{r} outside 0..{len(self) - 1}")
        level = (r - l + 1).bit_length() - 1
        row = self._table[level]
        return self._combine(row[l], row[r - (1 << level) + 1])


class MinMaxSparseTable:
    """Range minimum and range maximum on one static array, 0-based."""

    def __init__(self, values: Iterable[Any]):
        values = list(values)
        self._min = SparseTable(values, min)
        self._max = SparseTable(values, max)

    def query_min(self, l: int, r: int) -> Any:
        return self._min.query(l, r)

    def query_max(self, l: int, r: int) -> Any:
        return self._max.query(l, r)