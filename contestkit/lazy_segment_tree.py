"""Range-maximum segment tree with lazy range assignment, positions start at 1."""

from collections.abc import Iterable


class LazySegmentTree:
    """Maximum over ranges with range assignment over positions ``1..n``.

    A pending value of zero means nothing is pending. Pending values pushed
    down to a child are added to whatever the child already has pending.
    Ranges outside the tree contribute zero to a maximum.
    """

    def __init__(self, values: Iterable[int]):
        values = list(values)
        if not values:
            raise ValueError("segment tree needs at least one value")
        self.n = len(values)
        size = 4 * self.n + 5
        self._tree = [0] * size
        self._lazy = [0] * size
        self._build(1, 1, self.n, values)

    def _build(self, nd: int, st: int, ed: int, values: list[int]) -> None:
        if st == ed:
            self._tree[nd] = values[st - 1]
            return
        mid = (st + ed) // 2
        self._build(2 * nd, st, mid, values)
        self._build(2 * nd + 1, mid + 1, ed, values)
        self._tree[nd] = max(self._tree[2 * nd], self._tree[2 * nd + 1])

    def _push(self, nd: int, st: int, ed: int) -> None:
        pending = self._lazy[nd]
        if pending:
            self._tree[nd] = pending
            if st != ed:
                self._lazy[2 * nd] += pending
                self._lazy[2 * nd + 1] += pending
            self._lazy[nd] = 0

    def _update(self, nd: int, st: int, ed: int, l: int, r: int, value: int) -> None:
        self._push(nd, st, ed)
        if st > r or ed < l:
            return
        if l <= st and ed <= r:
            self._lazy[nd] = value
            self._push(nd, st, ed)
            return
        mid = (st + ed) // 2
        self._update(2 * nd, st, mid, l, r, value)
        self._update(2 * nd + 1, mid + 1, ed, l, r, value)
        self._tree[nd] = max(self._tree[2 * nd], self._tree[2 * nd + 1])

    def _query(self, nd: int, st: int, ed: int, l: int, r: int) -> int:
        self._push(nd, st, ed)
        if st > r or ed < l:
            return 0
        if l <= st and ed <= r:
            return self._tree[nd]
        mid = (st + ed) // 2
        return max(
            self._query(2 * nd, st, mid, l, r),
            self._query(2 * nd + 1, mid + 1, ed, l, r),
        )

    def update_range(self, l: int, r: int, value: int) -> None:
        """Assign ``value`` to positions ``l..r``."""
        self._update(1, 1, self.n, l, r, value)

    def query_range(self, l: int, r: int) -> int:
        """Maximum over positions ``l..r``."""
        return self._query(1, 1, self.n, l, r)

    def update_point(self, idx: int, value: int) -> None:
        self.update_range(idx, idx, value)

    def query_point(self, idx: int) -> int:
        return self.query_range(idx, idx)