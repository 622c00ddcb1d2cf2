"""Traversals, cycles, orderings and connectivity on vertices ``1..n``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Graph:
    """Directed or undirected graph given by adjacency lists."""

    def __init__(self, n: int, directed: bool = False):
        if n < 1:
            raise ValueError("graph needs at least one vertex")
        self.n = n
        self.directed = directed
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]

    def _check(self, v: int) -> None:
        if not 1 <= v <= self.n:
            raise IndexError(f"vertex {v} outside 1..{self.n}")

    def add_edge(self, u: int, v: int) -> None:
        """Add ``u -> v``, and ``v -> u`` too when undirected."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        if not self.directed:
            self._adj[v].append(u)

    def _distances(self, src: int) -> tuple[list[int], list[int]]:
        dist = [-1] * (self.n + 1)
        dist[src] = 0
        order = []
        queue = deque([src])
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._adj[u]:
                if dist[v] == -1:
                    dist[v] = dist[u] + 1
                    queue.append(v)
        return order, dist

    def bfs(self, src: int) -> list[int]:
        """Vertices reachable from ``src`` in breadth-first order."""
        self._check(src)
        return self._distances(src)[0]

    def _postorder(self, src: int, visited: list[bool]) -> Iterator[int]:
        visited[src] = True
        stack = [(src, iter(self._adj[src]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(self._adj[v])))
                    break
            else:
                stack.pop()
                yield u

    def dfs(self, src: int) -> list[int]:
        """Vertices reachable from ``src`` in depth-first post-order."""
        self._check(src)
        return list(self._postorder(src, [False] * (self.n + 1)))

    def farthest_node(self, src: int) -> tuple[int, int]:
        """Lowest-numbered vertex farthest from ``src`` and its distance in edges."""
        self._check(src)
        dist = self._distances(src)[1]
        best = max(dist[1:])
        return dist.index(best), best

    def diameter(self) -> int:
        """Longest shortest path, in edges, within the component of vertex 1."""
        u, _ = self.farthest_node(1)
        return self.farthest_node(u)[1]

    def directed_cycles(self) -> list[list[int]]:
        """One cycle per back edge met during depth-first search, in path order."""
        color = [0] * (self.n + 1)
        cycles: list[list[int]] = []
        for start in range(1, self.n + 1):
            if color[start]:
                continue
            color[start] = 1
            path = [start]
            iters = [iter(self._adj[start])]
            while path:
                u = path[-1]
                for v in iters[-1]:
                    if color[v] == 0:
                        color[v] = 1
                        path.append(v)
                        iters.append(iter(self._adj[v]))
                        break
                    if color[v] == 1:
                        cycles.append(path[path.index(v):])
                else:
                    color[u] = 2
                    path.pop()
                    iters.pop()
        return cycles

    def has_undirected_cycle(self) -> bool:
        """Whether depth-first search meets an edge to a visited non-parent vertex."""
        visited = [False] * (self.n + 1)
        for start in range(1, self.n + 1):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, -1, iter(self._adj[start]))]
            while stack:
                u, parent, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, u, iter(self._adj[v])))
                        break
                    if v != parent:
                        return True
                else:
                    stack.pop()
        return False

    def topo_sort_kahn(self) -> list[int]:
        """Topological order by Kahn's algorithm; ``ValueError`` on a cycle."""
        indeg = [0] * (self.n + 1)
        for u in range(1, self.n + 1):
            for v in self._adj[u]:
                indeg[v] += 1
        queue = deque(i for i in range(1, self.n + 1) if indeg[i] == 0)
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self._adj[u]:
                indeg[v] -= 1
                if indeg[v] == 0:
                    queue.append(v)
        if len(order) != self.n:
            raise ValueError("graph has a cycle")
        return order

    def topo_sort_dfs(self) -> list[int]:
        """Reverse depth-first post-order over all vertices."""
        visited = [False] * (self.n + 1)
        post: list[int] = []
        for i in range(1, self.n + 1):
            if not visited[i]:
                post.extend(self._postorder(i, visited))
        post.reverse()
        return post

    def strongly_connected_components(self) -> list[list[int]]:
        """Components in Tarjan's completion order, each sorted ascending."""
        n = self.n
        index = [0] * (n + 1)
        low = [0] * (n + 1)
        on_stack = [False] * (n + 1)
        comp = [0] * (n + 1)
        stack: list[int] = []
        time = count = 0
        for start in range(1, n + 1):
            if index[start]:
                continue
            time += 1
            index[start] = low[start] = time
            stack.append(start)
            on_stack[start] = True
            work = [(start, iter(self._adj[start]))]
            while work:
                u, neighbours = work[-1]
                for v in neighbours:
                    if not index[v]:
                        time += 1
                        index[v] = low[v] = time
                        stack.append(v)
                        on_stack[v] = True
                        work.append((v, iter(self._adj[v])))
                        break
                    if on_stack[v]:
                        low[u] = min(low[u], index[v])
                else:
                    work.pop()
                    if work:
                        p = work[-1][0]
                        low[p] = min(low[p], low[u])
                    if low[u] == index[u]:
                        count += 1
                        while True:
                            w = stack.pop()
                            on_stack[w] = False
                            comp[w] = count
                            if w == u:
                                break
        components: list[list[int]] = [[] for _ in range(count)]
        for v in range(1, n + 1):
            components[comp[v] - 1].append(v)
        return components

    def bridges_and_articulation_points(self) -> tuple[list[tuple[int, int]], list[int]]:
        """Bridges as ``(parent, child)`` in the search tree, and articulation points."""
        n = self.n
        disc = [0] * (n + 1)
        low = [0] * (n + 1)
        children = [0] * (n + 1)
        is_art = [False] * (n + 1)
        bridges: list[tuple[int, int]] = []
        time = 0
        for start in range(1, n + 1):
            if disc[start]:
                continue
            time += 1
            disc[start] = low[start] = time
            work = [(start, -1, iter(self._adj[start]))]
            while work:
                u, parent, neighbours = work[-1]
                for v in neighbours:
                    if not disc[v]:
                        children[u] += 1
                        time += 1
                        disc[v] = low[v] = time
                        work.append((v, u, iter(self._adj[v])))
                        break
                    if v != parent:
                        low[u] = min(low[u], disc[v])
                else:
                    work.pop()
                    if parent == -1:
                        if children[u] > 1:
                            is_art[u] = True
                        continue
                    low[parent] = min(low[parent], low[u])
                    if work[-1][1] != -1 and low[u] >= disc[parent]:
                        is_art[parent] = True
                    if low[u] > disc[parent]:
                        bridges.append((parent, u))
        return bridges, [v for v in range(1, n + 1) if is_art[v]]