"""Binary indexed trees in one and two dimensions, positions start at 1."""

from collections.abc import Hashable, Iterable


class FenwickTree:
    """Point add, prefix sum over positions ``1..n``."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._tree = [0] * (n + 1)

    def update(self, idx: int, delta: int) -> None:
        """Add ``delta`` at position ``idx``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"position {idx} outside 1..{self.n}")
        while idx <= self.n:
            self._tree[idx] += delta
            idx += idx & -idx

    def query(self, idx: int) -> int:
        """Sum of positions ``1..idx``."""
        if not 0 <= idx <= self.n:
            raise IndexError(f"prefix {idx} outside 0..{self.n}")
        total = 0
        while idx > 0:
            total += self._tree[idx]
            idx -= idx & -idx
        return total

    def range_query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``."""
        return self.query(r) - self.query(l - 1)


def count_inversions(values: Iterable[Hashable]) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``."""
    values = list(values)
    ranks = {v: rank for rank, v in enumerate(sorted(set(values)), start=1)}
    tree = FenwickTree(len(ranks))
    total = 0
    for v in reversed(values):
        rank = ranks[v]
        total += tree.query(rank - 1)
        tree.update(rank, 1)
    return total


class FenwickTree2D:
    """Point add, rectangle sum over an ``n`` by ``n`` grid."""

    def __init__(self, n: int):
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._tree = [[0] * (n + 1) for _ in range(n + 1)]

    def _check(self, coord: int, low: int) -> None:
        if not low <= coord <= self.n:
            raise IndexError(f"coordinate {coord} outside {low}..{self.n}")

    def update(self, x: int, y: int, delta: int) -> None:
        self._check(x, 1)
        self._check(y, 1)
        i = x
        while i <= self.n:
            row = self._tree[i]
            j = y
            while j <= self.n:
                row[j] += delta
                j += j & -j
            i += i & -i

    def query(self, x: int, y: int) -> int:
        """Sum of the rectangle ``(1, 1)..(x, y)``."""
        self._check(x, 0)
        self._check(y, 0)
        total = 0
        i = x
        while i > 0:
            row = self._tree[i]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle ``(x1, y1)..(x2, y2)``."""
        return (
            self.query(x2, y2)
            - self.query(x1 - 1, y2)
            - self.query(x2, y1 - 1)
            + self.query(x1 - 1, y1 - 1)
        )