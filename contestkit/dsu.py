"""Disjoint-set unions over elements ``1..n``."""


class DSU:
    """Union by size with path compression."""

    def __init__(self, n: int):
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self.components = n

    def make(self, v: int) -> None:
        """Reset ``v`` to a singleton set."""
        self._parent[v] = v
        self._size[v] = 1

    def find(self, v: int) -> int:
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def same(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def merge(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        self.components -= 1
        if self._size[u] < self._size[v]:
            u, v = v, u
        self._parent[v] = u
        self._size[u] += self._size[v]
        return True

    def size(self, v: int) -> int:
        return self._size[self.find(v)]


class RankDSU:
    """Union by rank with path compression."""

    def __init__(self, n: int):
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self.components = n

    def make(self, v: int) -> None:
        self._parent[v] = v
        self._rank[v] = 0

    def find(self, v: int) -> int:
        root = v
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[v] != root:
            self._parent[v], v = root, self._parent[v]
        return root

    def same(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def merge(self, u: int, v: int) -> bool:
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        self.components -= 1
        if self._rank[u] < self._rank[v]:
            u, v = v, u
        self._parent[v] = u
        if self._rank[u] == self._rank[v]:
            self._rank[u] += 1
        return True


class RollbackDSU:
    """Union by size without path compression, able to undo merges."""

    def __init__(self, n: int):
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._history: list[tuple[int, int, int, int]] = []
        self.components = n

    def find(self, v: int) -> int:
        while self._parent[v] != v:
            v = self._parent[v]
        return v

    def merge(self, u: int, v: int) -> bool:
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._size[u] < self._size[v]:
            u, v = v, u
        self._history.append((u, self._size[u], v, self._size[v]))
        self._parent[v] = u
        self._size[u] += self._size[v]
        self.components -= 1
        return True

    def rollback(self) -> None:
        """Undo the most recent successful merge."""
        if not self._history:
            raise IndexError("no merge to roll back")
        u, old_size_u, v, old_size_v = self._history.pop()
        self._parent[v] = v
        self._size[u] = old_size_u
        self._size[v] = old_size_v
        self.components += 1

    def same(self, u: int, v: int) -> bool:
        return self.find(u) == self.find(v)

    def size(self, v: int) -> int:
        return self._size[self.find(v)]