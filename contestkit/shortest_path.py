"""Single-source and all-pairs shortest paths on an undirected weighted graph."""

from __future__ import annotations

import heapq
from collections import deque
from math import inf


class ShortestPath:
    """Weighted undirected graph on vertices ``1..n``.

    ``dist`` and ``parent`` hold the results of the last single-source run;
    unreachable vertices have distance ``inf`` and parent ``-1``.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("graph needs at least one vertex")
        self.n = n
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self.negative = [False] * (n + 1)
        self.reset()

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add an undirected edge of weight ``w``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, w))
        self._adj[v].append((u, w))

    def reset(self) -> None:
        """Forget distances and parents from earlier runs."""
        self.dist: list[float] = [inf] * (self.n + 1)
        self.parent = [-1] * (self.n + 1)

    def dijkstra(self, source: int) -> list[float]:
        """Distances from ``source`` for non-negative weights, indexed by vertex."""
        self._check(source)
        self.reset()
        dist, parent = self.dist, self.parent
        done = [False] * (self.n + 1)
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if done[u]:
                continue
            done[u] = True
            for v, w in self._adj[u]:
                if d + w < dist[v]:
                    dist[v] = d + w
                    parent[v] = u
                    heapq.heappush(heap, (dist[v], v))
        return list(dist)

    def get_path(self, dest: int) -> list[int]:
        """Vertices from the last source to ``dest``; empty if unreachable."""
        self._check(dest)
        if self.dist[dest] == inf:
            return []
        path = []
        v = dest
        while v != -1:
            path.append(v)
            v = self.parent[v]
        path.reverse()
        return path

    def _edges(self):
        for u in range(1, self.n + 1):
            for v, w in self._adj[u]:
                yield u, v, w

    def bellman_ford(self, source: int) -> bool:
        """Relax edges ``n - 1`` times; True if a negative cycle is still relaxable."""
        self._check(source)
        self.reset()
        dist, parent = self.dist, self.parent
        dist[source] = 0
        for _ in range(self.n - 1):
            for u, v, w in self._edges():
                if dist[u] != inf and dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    parent[v] = u
        found = False
        for u, v, w in self._edges():
            if dist[u] != inf and dist[u] + w < dist[v]:
                self.negative[v] = True
                found = True
        return found

    def mark_negative_reachable(self) -> list[int]:
        """Spread the negative-cycle flags to every connected vertex; return them."""
        queue = deque(v for v in range(1, self.n + 1) if self.negative[v])
        while queue:
            u = queue.popleft()
            for v, _ in self._adj[u]:
                if not self.negative[v]:
                    self.negative[v] = True
                    queue.append(v)
        return [v for v in range(1, self.n + 1) if self.negative[v]]

    def floyd_warshall(self) -> list[list[float]]:
        """All-pairs distance matrix indexed ``[u][v]`` from 1; ``inf`` if unreachable."""
        n = self.n
        dist: list[list[float]] = [[inf] * (n + 1) for _ in range(n + 1)]
        for i in range(1, n + 1):
            dist[i][i] = 0
        for u, v, w in self._edges():
            dist[u][v] = min(dist[u][v], w)
        for k in range(1, n + 1):
            row_k = dist[k]
            for i in range(1, n + 1):
                dik = dist[i][k]
                if dik == inf:
                    continue
                row_i = dist[i]
                for j in range(1, n + 1):
                    if row_k[j] != inf and dik + row_k[j] < row_i[j]:
                        row_i[j] = dik + row_k[j]
        return dist