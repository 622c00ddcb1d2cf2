"""Two-dimensional tree with lazy rectangle assignment and rectangle sums.

Each node covers a rectangle of cells and splits it in half along both
axes, so a pending assignment is handed down to all of its children.
Positions start at 1.
"""

from __future__ import annotations

from collections.abc import Iterable


def _halves(lo: int, hi: int) -> tuple[tuple[int, int], ...]:
    if lo == hi:
        return ((lo, hi),)
    mid = (lo + hi) // 2
    return ((lo, mid), (mid + 1, hi))


class _Block:
    __slots__ = ("x1", "x2", "y1", "y2", "total", "pending", "children")

    def __init__(self, x1: int, x2: int, y1: int, y2: int):
        self.x1, self.x2, self.y1, self.y2 = x1, x2, y1, y2
        self.total = 0
        self.pending: int | None = None
        self.children: tuple[_Block, ...] = ()

    def area(self) -> int:
        return (self.x2 - self.x1 + 1) * (self.y2 - self.y1 + 1)

    def disjoint(self, lx: int, rx: int, ly: int, ry: int) -> bool:
        return self.x1 > rx or self.x2 < lx or self.y1 > ry or self.y2 < ly

    def inside(self, lx: int, rx: int, ly: int, ry: int) -> bool:
        return lx <= self.x1 and self.x2 <= rx and ly <= self.y1 and self.y2 <= ry

    def assign(self, value: int) -> None:
        self.total = value * self.area()
        if self.children:
            self.pending = value

    def push(self) -> None:
        if self.pending is not None:
            for child in self.children:
                child.assign(self.pending)
            self.pending = None


class LazySegmentTree2D:
    """Rectangle assignment and rectangle sums over an ``n`` by ``n`` grid.

    ``grid[x - 1][y - 1]`` holds the starting value of cell ``(x, y)``.
    Parts of a rectangle outside the grid are ignored.
    """

    def __init__(self, grid: Iterable[Iterable[int]]):
        rows = [list(row) for row in grid]
        if not rows:
            raise ValueError("grid must be non-empty")
        if any(len(row) != len(rows) for row in rows):
            raise ValueError("grid must be square")
        self.n = len(rows)
        self._root = self._build(1, self.n, 1, self.n, rows)

    def _build(self, x1: int, x2: int, y1: int, y2: int, rows: list[list[int]]) -> _Block:
        block = _Block(x1, x2, y1, y2)
        if x1 == x2 and y1 == y2:
            block.total = rows[x1 - 1][y1 - 1]
            return block
        block.children = tuple(
            self._build(a, b, c, d, rows)
            for a, b in _halves(x1, x2)
            for c, d in _halves(y1, y2)
        )
        block.total = sum(child.total for child in block.children)
        return block

    def _update(self, block: _Block, lx: int, rx: int, ly: int, ry: int, value: int) -> None:
        if block.disjoint(lx, rx, ly, ry):
            return
        if block.inside(lx, rx, ly, ry):
            block.assign(value)
            return
        block.push()
        for child in block.children:
            self._update(child, lx, rx, ly, ry, value)
        block.total = sum(child.total for child in block.children)

    def _query(self, block: _Block, lx: int, rx: int, ly: int, ry: int) -> int:
        if block.disjoint(lx, rx, ly, ry):
            return 0
        if block.inside(lx, rx, ly, ry):
            return block.total
        block.push()
        return sum(self._query(child, lx, rx, ly, ry) for child in block.children)

    def update_range(self, lx: int, rx: int, ly: int, ry: int, value: int) -> None:
        """Set every cell with ``lx <= x <= rx`` and ``ly <= y <= ry`` to ``value``."""
        self._update(self._root, lx, rx, ly, ry, value)

    def query_range(self, lx: int, rx: int, ly: int, ry: int) -> int:
        """Sum of cells with ``lx <= x <= rx`` and ``ly <= y <= ry``."""
        return self._query(self._root, lx, rx, ly, ry)