"""Two-dimensional sum segment tree with point assignment, positions start at 1."""

from collections.abc import Iterable


def _square(grid: Iterable[Iterable[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows:
        raise ValueError("grid must be non-empty")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("grid must be square")
    return rows


class SegmentTree2D:
    """Rectangle sums and point assignment over an ``n`` by ``n`` grid.

    ``grid[x - 1][y - 1]`` holds the starting value of cell ``(x, y)``.
    Parts of a queried rectangle outside the grid count as zero.
    """

    def __init__(self, grid: Iterable[Iterable[int]]):
        rows = _square(grid)
        self.n = len(rows)
        size = 4 * self.n + 1
        self._tree = [[0] * size for _ in range(size)]
        self._build_x(1, 1, self.n, rows)

    def _build_x(self, ndx: int, stx: int, edx: int, rows: list[list[int]]) -> None:
        if stx != edx:
            mid = (stx + edx) // 2
            self._build_x(2 * ndx, stx, mid, rows)
            self._build_x(2 * ndx + 1, mid + 1, edx, rows)
        self._build_y(ndx, stx, edx, 1, 1, self.n, rows)

    def _build_y(
        self, ndx: int, stx: int, edx: int, ndy: int, sty: int, edy: int, rows: list[list[int]]
    ) -> None:
        tree = self._tree
        if sty == edy:
            if stx == edx:
                tree[ndx][ndy] = rows[stx - 1][sty - 1]
            else:
                tree[ndx][ndy] = tree[2 * ndx][ndy] + tree[2 * ndx + 1][ndy]
            return
        mid = (sty + edy) // 2
        self._build_y(ndx, stx, edx, 2 * ndy, sty, mid, rows)
        self._build_y(ndx, stx, edx, 2 * ndy + 1, mid + 1, edy, rows)
        tree[ndx][ndy] = tree[ndx][2 * ndy] + tree[ndx][2 * ndy + 1]

    def _update_x(self, ndx: int, stx: int, edx: int, x: int, y: int, value: int) -> None:
        if stx != edx:
            mid = (stx + edx) // 2
            if x <= mid:
                self._update_x(2 * ndx, stx, mid, x, y, value)
            else:
                self._update_x(2 * ndx + 1, mid + 1, edx, x, y, value)
        self._update_y(ndx, stx, edx, 1, 1, self.n, y, value)

    def _update_y(
        self, ndx: int, stx: int, edx: int, ndy: int, sty: int, edy: int, y: int, value: int
    ) -> None:
        tree = self._tree
        if sty == edy:
            if stx == edx:
                tree[ndx][ndy] = value
            else:
                tree[ndx][ndy] = tree[2 * ndx][ndy] + tree[2 * ndx + 1][ndy]
            return
        mid = (sty + edy) // 2
        if y <= mid:
            self._update_y(ndx, stx, edx, 2 * ndy, sty, mid, y, value)
        else:
            self._update_y(ndx, stx, edx, 2 * ndy + 1, mid + 1, edy, y, value)
        tree[ndx][ndy] = tree[ndx][2 * ndy] + tree[ndx][2 * ndy + 1]

    def _query_y(self, ndx: int, ndy: int, sty: int, edy: int, y1: int, y2: int) -> int:
        if y1 > edy or y2 < sty:
            return 0
        if y1 <= sty and edy <= y2:
            return self._tree[ndx][ndy]
        mid = (sty + edy) // 2
        return self._query_y(ndx, 2 * ndy, sty, mid, y1, y2) + self._query_y(
            ndx, 2 * ndy + 1, mid + 1, edy, y1, y2
        )

    def _query_x(
        self, ndx: int, stx: int, edx: int, x1: int, x2: int, y1: int, y2: int
    ) -> int:
        if x1 > edx or x2 < stx:
            return 0
        if x1 <= stx and edx <= x2:
            return self._query_y(ndx, 1, 1, self.n, y1, y2)
        mid = (stx + edx) // 2
        return self._query_x(2 * ndx, stx, mid, x1, x2, y1, y2) + self._query_x(
            2 * ndx + 1, mid + 1, edx, x1, x2, y1, y2
        )

    def update(self, x: int, y: int, value: int) -> None:
        """Set cell ``(x, y)`` to ``value``."""
        if not (1 <= x <= self.n and 1 <= y <= self.n):
            raise IndexError(f"cell ({x}, {y}) outside 1..{self.n}")
        self._update_x(1, 1, self.n, x, y, value)

    def query(self, x1: int, x2: int, y1: int, y2: int) -> int:
        """Sum of cells with ``x1 <= x <= x2`` and ``y1 <= y <= y2``."""
        return self._query_x(1, 1, self.n, x1, x2, y1, y2)