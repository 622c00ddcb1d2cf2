"""Heavy-light decomposition with range add and sum over paths and subtrees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class RangeAddSegmentTree:
    """Range add and range sum over positions ``1..n``."""

    def __init__(self, n: int, values: Iterable[int] | None = None):
        if n < 1:
            raise ValueError("size must be at least 1")
        self.n = n
        size = 4 * n + 5
        self._tree = [0] * size
        self._lazy = [0] * size
        if values is not None:
            values = list(values)
            if len(values) != n:
                raise ValueError(f"expected {n} values, got {len(values)}")
            self._build(1, 1, n, values)

    def _build(self, nd: int, st: int, ed: int, values: list[int]) -> None:
        if st == ed:
            self._tree[nd] = values[st - 1]
            return
        mid = (st + ed) // 2
        self._build(2 * nd, st, mid, values)
        self._build(2 * nd + 1, mid + 1, ed, values)
        self._tree[nd] = self._tree[2 * nd] + self._tree[2 * nd + 1]

    def _push(self, nd: int, st: int, ed: int) -> None:
        add = self._lazy[nd]
        if add:
            self._tree[nd] += add * (ed - st + 1)
            if st != ed:
                self._lazy[2 * nd] += add
                self._lazy[2 * nd + 1] += add
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
        self._tree[nd] = self._tree[2 * nd] + self._tree[2 * nd + 1]

    def _query(self, nd: int, st: int, ed: int, l: int, r: int) -> int:
        self._push(nd, st, ed)
        if st > r or ed < l:
            return 0
        if l <= st and ed <= r:
            return self._tree[nd]
        mid = (st + ed) // 2
        return self._query(2 * nd, st, mid, l, r) + self._query(2 * nd + 1, mid + 1, ed, l, r)

    def update(self, l: int, r: int, value: int) -> None:
        """Add ``value`` to every position in ``l..r``; empty when ``l > r``."""
        if l <= r:
            self._update(1, 1, self.n, l, r, value)

    def query(self, l: int, r: int) -> int:
        """Sum of positions ``l..r``; zero when ``l > r``."""
        if l > r:
            return 0
        return self._query(1, 1, self.n, l, r)

    def update_point(self, idx: int, value: int) -> None:
        self.update(idx, idx, value)

    def query_point(self, idx: int) -> int:
        return self.query(idx, idx)


class HeavyLightDecomposition:
    """Tree on vertices ``1..n`` with values on vertices.

    Path operations on edges store each edge's value at its lower vertex,
    so the topmost vertex of the path is left out. Path queries return the
    sum along the path.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("tree needs at least one vertex")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._values = RangeAddSegmentTree(n)
        self._reset()
        self._built = False

    def _reset(self) -> None:
        size = self.n + 1
        self.parent = [-1] * size
        self.depth = [0] * size
        self.heavy = [-1] * size
        self.head = [0] * size
        self.pos = [0] * size
        self.subtree_size = [0] * size

    def add_edge(self, u: int, v: int) -> None:
        self._adj[u].append(v)
        self._adj[v].append(u)

    def build(self, root: int = 1) -> None:
        """Root the tree at ``root`` and lay out its heavy chains."""
        self._reset()
        adj, parent, depth = self._adj, self.parent, self.depth

        order = []
        stack = [root]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if v != parent[u]:
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)

        for u in reversed(order):
            size, best = 1, 0
            for v in adj[u]:
                if v == parent[u]:
                    continue
                size += self.subtree_size[v]
                if self.subtree_size[v] > best:
                    best = self.subtree_size[v]
                    self.heavy[u] = v
            self.subtree_size[u] = size

        position = 1
        chains = [(root, root)]
        while chains:
            u, head = chains.pop()
            self.head[u] = head
            self.pos[u] = position
            position += 1
            for v in reversed(adj[u]):
                if v != parent[u] and v != self.heavy[u]:
                    chains.append((v, v))
            if self.heavy[u] != -1:
                chains.append((self.heavy[u], head))
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("call build() before using the decomposition")

    def _segments(self, u: int, v: int, edges: bool) -> Iterator[tuple[int, int]]:
        self._require_built()
        head, depth, pos, parent = self.head, self.depth, self.pos, self.parent
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            yield pos[head[u]], pos[u]
            u = parent[head[u]]
        if depth[u] > depth[v]:
            u, v = v, u
        yield pos[u] + int(edges), pos[v]

    def update_path(self, u: int, v: int, value: int, edges: bool = False) -> None:
        """Add ``value`` along the path from ``u`` to ``v``."""
        for l, r in self._segments(u, v, edges):
            self._values.update(l, r, value)

    def query_path(self, u: int, v: int, edges: bool = False) -> int:
        """Sum along the path from ``u`` to ``v``."""
        return sum(self._values.query(l, r) for l, r in self._segments(u, v, edges))

    def update_vertex_path(self, u: int, v: int, value: int) -> None:
        self.update_path(u, v, value, False)

    def query_vertex_path(self, u: int, v: int) -> int:
        return self.query_path(u, v, False)

    def update_edge_path(self, u: int, v: int, value: int) -> None:
        self.update_path(u, v, value, True)

    def query_edge_path(self, u: int, v: int) -> int:
        return self.query_path(u, v, True)

    def update_subtree(self, u: int, value: int) -> None:
        """Add ``value`` to every vertex in the subtree of ``u``."""
        self._require_built()
        self._values.update(self.pos[u], self.pos[u] + self.subtree_size[u] - 1, value)

    def query_subtree(self, u: int) -> int:
        """Sum over the subtree of ``u``."""
        self._require_built()
        return self._values.query(self.pos[u], self.pos[u] + self.subtree_size[u] - 1)