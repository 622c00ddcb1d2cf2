"""Persistent segment tree keeping sum, minimum and maximum of assigned values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def _pick(choose: Callable[[int, int], int], a: int | None, b: int | None) -> int | None:
    if a is None:
        return b
    if b is None:
        return a
    return choose(a, b)


@dataclass(frozen=True)
class RangeSummary:
    """Sum, minimum and maximum of a range; ``None`` where nothing is assigned."""

    total: int = 0
    min_val: int | None = None
    max_val: int | None = None

    @classmethod
    def of(cls, value: int) -> RangeSummary:
        return cls(value, value, value)

    def merge(self, other: RangeSummary) -> RangeSummary:
        return RangeSummary(
            self.total + other.total,
            _pick(min, self.min_val, other.min_val),
            _pick(max, self.max_val, other.max_val),
        )


@dataclass(frozen=True)
class PersistentNode:
    """One immutable node; versions share the nodes they did not change."""

    summary: RangeSummary
    left: PersistentNode | None = None
    right: PersistentNode | None = None


class PersistentSegmentTree:
    """Point assignment producing new versions, positions ``1..n``.

    ``root`` is the starting version, in which no position holds a value.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("size must be at least 1")
        self.n = n
        self.root = self._build(1, n)

    def _build(self, st: int, ed: int) -> PersistentNode:
        if st == ed:
            return PersistentNode(RangeSummary())
        mid = (st + ed) // 2
        return PersistentNode(RangeSummary(), self._build(st, mid), self._build(mid + 1, ed))

    def _update(
        self, node: PersistentNode, st: int, ed: int, idx: int, value: int
    ) -> PersistentNode:
        if st == ed:
            return PersistentNode(RangeSummary.of(value))
        mid = (st + ed) // 2
        left, right = node.left, node.right
        if idx <= mid:
            left = self._update(left, st, mid, idx, value)
        else:
            right = self._update(right, mid + 1, ed, idx, value)
        return PersistentNode(left.summary.merge(right.summary), left, right)

    def _query(
        self, node: PersistentNode | None, st: int, ed: int, l: int, r: int
    ) -> RangeSummary:
        if node is None or st > r or ed < l:
            return RangeSummary()
        if l <= st and ed <= r:
            return node.summary
        mid = (st + ed) // 2
        return self._query(node.left, st, mid, l, r).merge(
            self._query(node.right, mid + 1, ed, l, r)
        )

    def update(self, root: PersistentNode, idx: int, value: int) -> PersistentNode:
        """Return the root of a new version with position ``idx`` set to ``value``."""
        if not 1 <= idx <= self.n:
            raise IndexError(f"position {idx} outside 1..{self.n}")
        return self._update(root, 1, self.n, idx, value)

    def query(self, root: PersistentNode, l: int, r: int) -> RangeSummary:
        """Summary of positions ``l..r`` in the version rooted at ``root``."""
        return self._query(root, 1, self.n, l, r)