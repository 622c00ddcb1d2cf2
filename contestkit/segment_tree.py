"""Sum segment tree with point assignment, positions start at 1."""

from collections.abc import Iterable


class SegmentTree:
    """Range sum and point assignment over positions ``1..n``."""

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("segment tree needs at least one value")
        self.n = len(values)
        self._tree = [0] * self.n + values
        for i in range(self.n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``; parts outside ``1..n`` count as zero."""
        lo = max(l, 1) - 1 + self.n
        hi = min(r, self.n) + self.n
        total = 0
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo >>= 1
            hi >>= 1
        return total

    def update(self, idx: int, value: int) -> None:
        """Set position ``idx`` to ``value``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"position {idx} outside 1..{self.n}")
        i = idx - 1 + self.n
        self._tree[i] = value
        while i > 1:
            i >>= 1
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]