"""2-SAT over variables ``1..n``; literal ``x`` means true, ``-x`` means false."""

from __future__ import annotations


class TwoSat:
    """Implication graph with strongly connected components."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("need at least one variable")
        self.n = n
        size = 2 * n + 1
        self._adj: list[list[int]] = [[] for _ in range(size)]
        self._radj: list[list[int]] = [[] for _ in range(size)]
        self._assignment: list[bool] | None = None

    def _node(self, literal: int) -> int:
        if literal == 0 or abs(literal) > self.n:
            raise ValueError(f"literal {literal} outside ±1..{self.n}")
        return literal if literal > 0 else self.n - literal

    def add_implication(self, a: int, b: int) -> None:
        """Require that literal ``a`` implies literal ``b``."""
        u, v = self._node(a), self._node(b)
        self._adj[u].append(v)
        self._radj[v].append(u)
        self._assignment = None

    def add_or(self, a: int, b: int) -> None:
        self.add_implication(-a, b)
        self.add_implication(-b, a)

    def add_xor(self, a: int, b: int) -> None:
        self.add_or(a, b)
        self.add_or(-a, -b)

    def add_and(self, a: int, b: int) -> None:
        self.add_or(a, b)
        self.add_or(a, -b)
        self.add_or(-a, b)

    def add_xnor(self, a: int, b: int) -> None:
        self.add_or(a, -b)
        self.add_or(-a, b)

    def add_nand(self, a: int, b: int) -> None:
        self.add_or(-a, -b)

    def add_nor(self, a: int, b: int) -> None:
        self.add_and(-a, -b)

    def force_true(self, x: int) -> None:
        self.add_implication(-x, x)

    def force_false(self, x: int) -> None:
        self.add_implication(x, -x)

    def _finish_order(self) -> list[int]:
        visited = [False] * (2 * self.n + 1)
        order = []
        for start in range(1, 2 * self.n + 1):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                u, neighbours = stack[-1]
                for v in neighbours:
                    if not visited[v]:
                        visited[v] = True
                        stack.append((v, iter(self._adj[v])))
                        break
                else:
                    stack.pop()
                    order.append(u)
        return order

    def satisfiable(self) -> bool:
        """Solve; on success ``value`` reports a satisfying assignment."""
        comp = [-1] * (2 * self.n + 1)
        label = 0
        for start in reversed(self._finish_order()):
            if comp[start] != -1:
                continue
            comp[start] = label
            stack = [start]
            while stack:
                u = stack.pop()
                for v in self._radj[u]:
                    if comp[v] == -1:
                        comp[v] = label
                        stack.append(v)
            label += 1
        n = self.n
        if any(comp[x] == comp[x + n] for x in range(1, n + 1)):
            self._assignment = None
            return False
        self._assignment = [False] + [comp[x] > comp[x + n] for x in range(1, n + 1)]
        return True

    def value(self, i: int) -> bool:
        """Truth value of literal ``i`` in the assignment found by ``satisfiable``."""
        self._node(i)
        if self._assignment is None:
            raise RuntimeError("no assignment: call satisfiable() and check it succeeded")
        result = self._assignment[abs(i)]
        return result if i > 0 else not result