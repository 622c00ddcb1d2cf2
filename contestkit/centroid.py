"""Centroid decomposition answering nearest-marked-vertex queries on a tree."""

from __future__ import annotations

import heapq
from collections import Counter, deque


class CentroidDecomposition:
    """Tree on vertices ``1..n``; mark vertices and ask for the nearest mark.

    After ``decompose``, ``parent[c]`` is the parent of centroid ``c`` in the
    centroid tree (the root is its own parent).
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("tree needs at least one vertex")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.parent = [-1] * (n + 1)
        self._paths: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self._best: list[list[int]] = [[] for _ in range(n + 1)]
        self._removed: list[Counter[int]] = [Counter() for _ in range(n + 1)]
        self._marked: set[int] = set()
        self._decomposed = False

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _centroid(self, root: int, cut: list[bool]) -> int:
        up = {root: 0}
        order = [root]
        stack = [root]
        while stack:
            u = stack.pop()
            for v in self._adj[u]:
                if v != up[u] and not cut[v]:
                    up[v] = u
                    order.append(v)
                    stack.append(v)
        size = dict.fromkeys(order, 1)
        for u in reversed(order):
            if up[u]:
                size[up[u]] += size[u]
        total = size[root]
        u = root
        while True:
            for v in self._adj[u]:
                if v != up[u] and not cut[v] and size[v] > total // 2:
                    u = v
                    break
            else:
                return u

    def _record_distances(self, c: int, cut: list[bool]) -> None:
        seen = {c}
        queue = deque([(c, 0)])
        while queue:
            u, d = queue.popleft()
            self._paths[u].append((c, d))
            for v in self._adj[u]:
                if v not in seen and not cut[v]:
                    seen.add(v)
                    queue.append((v, d + 1))

    def decompose(self, root: int = 1) -> int:
        """Build the centroid tree from ``root``'s component; return its root."""
        self._check(root)
        cut = [False] * (self.n + 1)
        top = -1
        work = [(root, -1)]
        while work:
            start, above = work.pop()
            c = self._centroid(start, cut)
            cut[c] = True
            self.parent[c] = c if above == -1 else above
            if top == -1:
                top = c
            self._record_distances(c, cut)
            work.extend((v, c) for v in self._adj[c] if not cut[v])
        self._decomposed = True
        return top

    def _require(self) -> None:
        if not self._decomposed:
            raise RuntimeError("call decompose() first")

    def mark(self, v: int) -> bool:
        """Mark ``v``; False if it was already marked."""
        self._check(v)
        self._require()
        if v in self._marked:
            return False
        self._marked.add(v)
        for c, d in self._paths[v]:
            if self._removed[c][d]:
                self._removed[c][d] -= 1
            else:
                heapq.heappush(self._best[c], d)
        return True

    def unmark(self, v: int) -> bool:
        """Unmark ``v``; False if it was not marked."""
        self._check(v)
        self._require()
        if v not in self._marked:
            return False
        self._marked.discard(v)
        for c, d in self._paths[v]:
            self._removed[c][d] += 1
        return True

    def _smallest(self, c: int) -> int | None:
        heap, removed = self._best[c], self._removed[c]
        while heap and removed[heap[0]]:
            removed[heapq.heappop(heap)] -= 1
        return heap[0] if heap else None

    def nearest(self, v: int) -> int | None:
        """Distance from ``v`` to the closest marked vertex, or None if none is marked."""
        self._check(v)
        self._require()
        best = None
        for c, d in self._paths[v]:
            m = self._smallest(c)
            if m is not None and (best is None or d + m < best):
                best = d + m
        return best