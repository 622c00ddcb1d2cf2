"""Dynamic upper envelope of lines for maximum queries."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from math import inf


class DynamicConvexHull:
    """Lines ``y = m * x + b`` added in any order; queries give the maximum."""

    def __init__(self) -> None:
        self._m: list[int] = []
        self._b: list[int] = []
        # _p[i] is the last x at which line i is on top.
        self._p: list[float] = []

    def __len__(self) -> int:
        return len(self._m)

    def _erase(self, i: int) -> None:
        """Drop line ``i`` from the envelope."""
        self._m.pop(i)
        self._b.pop(i)
        self._p.pop(i)

    def _intersect(self, i: int, j: int) -> bool:
        """Recompute where line ``i`` stops, given its successor ``j``."""
        if j == len(self._m):
            self._p[i] = inf
            return False
        if self._m[i] == self._m[j]:
            self._p[i] = inf if self._b[i] > self._b[j] else -inf
        else:
            self._p[i] = (self._b[j] - self._b[i]) // (self._m[i] - self._m[j])
        return self._p[i] >= self._p[j]

    def add(self, m: int, b: int) -> None:
        """Insert the line ``y = m * x + b``."""
        y = bisect_right(self._m, m)
        self._m.insert(y, m)
        self._b.insert(y, b)
        self._p.insert(y, 0)
        while self._intersect(y, y + 1):
            self._erase(y + 1)
        x = y
        if x > 0:
            x -= 1
            if self._intersect(x, y):
                self._erase(y)
                self._intersect(x, y)
                return
        y = x
        while y > 0 and self._p[y - 1] >= self._p[y]:
            x = y - 1
            self._erase(y)
            self._intersect(x, y)
            y = x

    def query(self, x: int) -> int:
        """Maximum of ``m * x + b`` over all lines."""
        if not self._m:
            raise ValueError("no lines have been added")
        i = bisect_left(self._p, x)
        return self._m[i] * x + self._b[i]