"""Maximum flow, minimum-cost flow and bipartite matching on vertices ``1..n``."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import pairwise
from math import inf


def _check_capacity(cap: int) -> None:
    if cap < 0:
        raise ValueError("capacity must be non-negative")


class _MatrixNetwork:
    """Residual capacities kept in an adjacency matrix."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("network needs at least one vertex")
        self.n = n
        self._cap = [[0] * (n + 1) for _ in range(n + 1)]
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def _check_terminals(self, s: int, t: int) -> None:
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")

    def _add(self, u: int, v: int, cap: int) -> None:
        self._check(u)
        self._check(v)
        _check_capacity(cap)
        self._cap[u][v] += cap
        self._adj[u].append(v)
        self._adj[v].append(u)

    def _augment(self, path: list[int]) -> int:
        cap = self._cap
        pushed = min(cap[u][v] for u, v in pairwise(path))
        for u, v in pairwise(path):
            cap[u][v] -= pushed
            cap[v][u] += pushed
        return pushed


class FordFulkerson(_MatrixNetwork):
    """Augmenting paths found by depth-first search."""

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v``; parallel edges add up."""
        self._add(u, v, cap)

    def _find_path(self, s: int, t: int) -> list[int] | None:
        cap, adj = self._cap, self._adj
        visited = [False] * (self.n + 1)
        visited[s] = True
        stack = [s]
        iters = [iter(adj[s])]
        while stack:
            u = stack[-1]
            for v in iters[-1]:
                if not visited[v] and cap[u][v] > 0:
                    visited[v] = True
                    stack.append(v)
                    iters.append(iter(adj[v]))
                    break
            else:
                stack.pop()
                iters.pop()
                continue
            if stack[-1] == t:
                return stack
        return None

    def max_flow(self, s: int, t: int) -> int:
        """Value of a maximum flow from ``s`` to ``t``."""
        self._check_terminals(s, t)
        total = 0
        while (path := self._find_path(s, t)) is not None:
            total += self._augment(path)
        return total


class EdmondsKarp(_MatrixNetwork):
    """Shortest augmenting paths found by breadth-first search."""

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v``; parallel edges add up."""
        self._add(u, v, cap)

    def _find_path(self, s: int, t: int) -> list[int] | None:
        cap, adj = self._cap, self._adj
        parent = [-1] * (self.n + 1)
        parent[s] = s
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if parent[v] == -1 and cap[u][v] > 0:
                    parent[v] = u
                    if v == t:
                        path = [t]
                        while path[-1] != s:
                            path.append(parent[path[-1]])
                        path.reverse()
                        return path
                    queue.append(v)
        return None

    def max_flow(self, s: int, t: int) -> int:
        """Value of a maximum flow from ``s`` to ``t``."""
        self._check_terminals(s, t)
        total = 0
        while (path := self._find_path(s, t)) is not None:
            total += self._augment(path)
        return total


class Dinic(_MatrixNetwork):
    """Blocking flows on the level graph."""

    def add_edge(self, u: int, v: int, cap: int) -> None:
        """Add a directed edge ``u -> v``; parallel edges add up."""
        self._add(u, v, cap)

    def _levels(self, s: int, t: int) -> bool:
        cap, adj = self._cap, self._adj
        level = [-1] * (self.n + 1)
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if level[v] == -1 and cap[u][v] > 0:
                    level[v] = level[u] + 1
                    queue.append(v)
        self._level = level
        return level[t] != -1

    def _push(self, u: int, t: int, limit: float) -> int:
        if u == t:
            return int(limit)
        cap, level, ptr = self._cap, self._level, self._ptr
        neighbours = self._adj[u]
        while ptr[u] < len(neighbours):
            v = neighbours[ptr[u]]
            if level[v] == level[u] + 1 and cap[u][v] > 0:
                pushed = self._push(v, t, min(limit, cap[u][v]))
                if pushed > 0:
                    cap[u][v] -= pushed
                    cap[v][u] += pushed
                    return pushed
            ptr[u] += 1
        return 0

    def max_flow(self, s: int, t: int) -> int:
        """Value of a maximum flow from ``s`` to ``t``."""
        self._check_terminals(s, t)
        total = 0
        while self._levels(s, t):
            self._ptr = [0] * (self.n + 1)
            while (pushed := self._push(s, t, inf)) > 0:
                total += pushed
        return total


@dataclass
class _CostEdge:
    v: int
    rev: int
    cap: int
    cost: int


class MinCostMaxFlow:
    """Maximum flow of least total cost, paths found by SPFA."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("network needs at least one vertex")
        self.n = n
        self._adj: list[list[_CostEdge]] = [[] for _ in range(n + 1)]

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def add_edge(self, u: int, v: int, cap: int, cost: int) -> None:
        """Add a directed edge ``u -> v`` with a capacity and a unit cost."""
        self._check(u)
        self._check(v)
        _check_capacity(cap)
        self._adj[u].append(_CostEdge(v, len(self._adj[v]), cap, cost))
        self._adj[v].append(_CostEdge(u, len(self._adj[u]) - 1, 0, -cost))

    def _shortest(self, s: int, t: int):
        size = self.n + 1
        dist: list[float] = [inf] * size
        parent = [-1] * size
        edge_index = [-1] * size
        in_queue = [False] * size
        dist[s] = 0
        queue = deque([s])
        in_queue[s] = True
        while queue:
            u = queue.popleft()
            in_queue[u] = False
            for i, e in enumerate(self._adj[u]):
                if e.cap > 0 and dist[u] + e.cost < dist[e.v]:
                    dist[e.v] = dist[u] + e.cost
                    parent[e.v] = u
                    edge_index[e.v] = i
                    if not in_queue[e.v]:
                        queue.append(e.v)
                        in_queue[e.v] = True
        if dist[t] == inf:
            return None
        return dist[t], parent, edge_index

    def max_flow(self, s: int, t: int) -> tuple[int, int]:
        """``(flow, cost)`` of a cheapest maximum flow from ``s`` to ``t``."""
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        total_flow = total_cost = 0
        while (found := self._shortest(s, t)) is not None:
            distance, parent, edge_index = found
            path = []
            cur = t
            while cur != s:
                prev = parent[cur]
                path.append(self._adj[prev][edge_index[cur]])
                cur = prev
            pushed = min(e.cap for e in path)
            for e in path:
                e.cap -= pushed
                self._adj[e.v][e.rev].cap += pushed
            total_flow += pushed
            total_cost += pushed * int(distance)
        return total_flow, total_cost


@dataclass
class _UnitEdge:
    v: int
    rev: int
    cap: int
    forward: bool
    flow: int = 0


class _UnitNetwork:
    """Unit-capacity edges with breadth-first augmenting paths."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("network needs at least one vertex")
        self.n = n
        self._adj: list[list[_UnitEdge]] = [[] for _ in range(n + 1)]

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def _add(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._adj[u].append(_UnitEdge(v, len(self._adj[v]), 1, True))
        self._adj[v].append(_UnitEdge(u, len(self._adj[u]) - 1, 0, False))

    def _find_path(self, s: int, t: int) -> list[_UnitEdge] | None:
        size = self.n + 1
        visited = [False] * size
        parent = [-1] * size
        via: list[_UnitEdge | None] = [None] * size
        visited[s] = True
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                if not visited[e.v] and e.cap > 0:
                    visited[e.v] = True
                    parent[e.v] = u
                    via[e.v] = e
                    if e.v == t:
                        path = []
                        cur = t
                        while cur != s:
                            path.append(via[cur])
                            cur = parent[cur]
                        return path
                    queue.append(e.v)
        return None

    def _run_max_flow(self, s: int, t: int) -> int:
        self._check(s)
        self._check(t)
        if s == t:
            raise ValueError("source and sink must differ")
        total = 0
        while (path := self._find_path(s, t)) is not None:
            pushed = min(e.cap for e in path)
            for e in path:
                back = self._adj[e.v][e.rev]
                e.cap -= pushed
                e.flow += pushed
                back.cap += pushed
                back.flow -= pushed
            total += pushed
        return total


class UnitMaxFlow(_UnitNetwork):
    """Unit-capacity maximum flow with a minimum cut."""

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge ``u -> v`` of capacity 1."""
        self._add(u, v)

    def max_flow(self, s: int, t: int) -> int:
        """Value of a maximum flow from ``s`` to ``t``."""
        return self._run_max_flow(s, t)

    def min_cut(self, s: int) -> list[tuple[int, int]]:
        """Saturated edges leaving the part reachable from ``s`` after ``max_flow``."""
        self._check(s)
        visited = [False] * (self.n + 1)
        visited[s] = True
        stack = [s]
        while stack:
            u = stack.pop()
            for e in self._adj[u]:
                if e.cap > 0 and not visited[e.v]:
                    visited[e.v] = True
                    stack.append(e.v)
        return [
            (u, e.v)
            for u in range(1, self.n + 1)
            if visited[u]
            for e in self._adj[u]
            if e.forward and not visited[e.v] and e.cap == 0
        ]


class DisjointPaths(_UnitNetwork):
    """Edge-disjoint paths read off a unit-capacity maximum flow."""

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge ``u -> v`` of capacity 1."""
        self._add(u, v)

    def max_flow(self, s: int, t: int) -> int:
        """Value of a maximum flow from ``s`` to ``t``."""
        return self._run_max_flow(s, t)

    def disjoint_paths(self, s: int, count: int) -> list[list[int]]:
        """Follow ``count`` units of flow from ``s``, each as a vertex list."""
        self._check(s)
        if count < 0:
            raise ValueError("count must be non-negative")
        paths = []
        for _ in range(count):
            path = [s]
            u = s
            while True:
                for e in self._adj[u]:
                    if e.flow > 0:
                        e.flow -= 1
                        u = e.v
                        path.append(u)
                        break
                else:
                    break
            paths.append(path)
        return paths


class HopcroftKarp:
    """Maximum matching between left vertices ``1..n`` and right vertices ``1..m``.

    ``match_left[u]`` and ``match_right[v]`` hold the partner, or 0 if unmatched.
    """

    def __init__(self, n: int, m: int):
        if n < 0 or m < 0:
            raise ValueError("sides must be non-negative")
        self.n = n
        self.m = m
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.match_left = [0] * (n + 1)
        self.match_right = [0] * (m + 1)
        self._dist: list[float] = [0] * (n + 1)

    def add_edge(self, u: int, v: int) -> None:
        """Allow left vertex ``u`` to be matched with right vertex ``v``."""
        if not 1 <= u <= self.n:
            raise IndexError(f"left vertex {u} outside 1..{self.n}")
        if not 1 <= v <= self.m:
            raise IndexError(f"right vertex {v} outside 1..{self.m}")
        self._adj[u].append(v)

    def _bfs(self) -> bool:
        dist = self._dist
        queue: deque[int] = deque()
        for u in range(1, self.n + 1):
            if self.match_left[u] == 0:
                dist[u] = 0
                queue.append(u)
            else:
                dist[u] = inf
        dist[0] = inf
        while queue:
            u = queue.popleft()
            if dist[u] < dist[0]:
                for v in self._adj[u]:
                    w = self.match_right[v]
                    if dist[w] == inf:
                        dist[w] = dist[u] + 1
                        queue.append(w)
        return dist[0] != inf

    def _dfs(self, u: int) -> bool:
        if u == 0:
            return True
        dist = self._dist
        for v in self._adj[u]:
            w = self.match_right[v]
            if dist[w] == dist[u] + 1 and self._dfs(w):
                self.match_right[v] = u
                self.match_left[u] = v
                return True
        dist[u] = inf
        return False

    def max_matching(self) -> int:
        """Size of a maximum matching."""
        while self._bfs():
            for u in range(1, self.n + 1):
                if self.match_left[u] == 0:
                    self._dfs(u)
        return sum(1 for v in self.match_left[1:] if v)