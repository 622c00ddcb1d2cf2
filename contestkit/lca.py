"""Lowest common ancestors and path queries by binary lifting."""

from __future__ import annotations


class BinaryLiftingLCA:
    """Rooted tree on vertices ``1..n`` answering ancestor queries."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("tree needs at least one vertex")
        self.n = n
        self._log = n.bit_length()
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self._up: list[list[int]] = []
        self.depth = [0] * (n + 1)

    def add_edge(self, u: int, v: int) -> None:
        self._adj[u].append(v)
        self._adj[v].append(u)

    def preprocess(self, root: int) -> None:
        """Root the tree at ``root`` and fill the ancestor tables."""
        up = [[-1] * (self.n + 1) for _ in range(self._log)]
        depth = [0] * (self.n + 1)
        stack = [root]
        while stack:
            u = stack.pop()
            for k in range(1, self._log):
                above = up[k - 1][u]
                if above != -1:
                    up[k][u] = up[k - 1][above]
            for v in self._adj[u]:
                if v != up[0][u]:
                    up[0][v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)
        self._up = up
        self.depth = depth

    def _require(self) -> None:
        if not self._up:
            raise RuntimeError("call preprocess() first")

    def lca(self, u: int, v: int) -> int:
        self._require()
        up, depth = self._up, self.depth
        if depth[u] < depth[v]:
            u, v = v, u
        for k in reversed(range(self._log)):
            a = up[k][u]
            if a != -1 and depth[a] >= depth[v]:
                u = a
        if u == v:
            return u
        for k in reversed(range(self._log)):
            if up[k][u] != up[k][v]:
                u, v = up[k][u], up[k][v]
        return up[0][u]

    def kth_ancestor(self, u: int, k: int) -> int | None:
        """The ancestor ``k`` levels above ``u``, or None if there is none."""
        self._require()
        if k < 0:
            raise ValueError("k must be non-negative")
        if k > self.depth[u]:
            return None
        for i in range(self._log):
            if k >> i & 1:
                u = self._up[i][u]
        return u

    def distance(self, u: int, v: int) -> int:
        """Number of edges between ``u`` and ``v``."""
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]

    def kth_node_on_path(self, u: int, v: int, k: int) -> int | None:
        """Vertex ``k`` steps from ``u`` towards ``v``, or None past ``v``."""
        if k < 0:
            raise ValueError("k must be non-negative")
        top = self.lca(u, v)
        up_part = self.depth[u] - self.depth[top]
        total = up_part + self.depth[v] - self.depth[top]
        if k > total:
            return None
        if k <= up_part:
            return self.kth_ancestor(u, k)
        return self.kth_ancestor(v, total - k)

    def ancestor_at_depth(self, u: int, target_depth: int) -> int | None:
        """Ancestor of ``u`` at ``target_depth``, or None if ``u`` is shallower."""
        self._require()
        if self.depth[u] < target_depth:
            return None
        return self.kth_ancestor(u, self.depth[u] - target_depth)