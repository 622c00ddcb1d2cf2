"""Factorials, binomials and related counts modulo a prime."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cached_property

MOD = 1_000_000_007


class Combinatorics:
    """Tables of counts for arguments up to ``n`` modulo the prime ``mod``."""

    def __init__(self, n: int, mod: int = MOD):
        if n < 0:
            raise ValueError("size must be non-negative")
        if mod < 2:
            raise ValueError("modulus must be at least 2")
        self.n = n
        self.mod = mod
        facts = [1] * (n + 1)
        invs = [1] * (n + 1)
        finvs = [1] * (n + 1)
        for i in range(2, n + 1):
            invs[i] = pow(i, mod - 2, mod)
        for i in range(1, n + 1):
            facts[i] = facts[i - 1] * i % mod
            finvs[i] = finvs[i - 1] * invs[i] % mod
        self._facts, self._invs, self._finvs = facts, invs, finvs

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.n:
            raise IndexError(f"argument {n} outside 0..{self.n}")

    def fact(self, n: int) -> int:
        self._check(n)
        return self._facts[n]

    def inv(self, n: int) -> int:
        """Modular inverse of ``n``."""
        self._check(n)
        return self._invs[n]

    def finv(self, n: int) -> int:
        """Modular inverse of ``n!``."""
        self._check(n)
        return self._finvs[n]

    def ncr(self, n: int, r: int) -> int:
        if r > n or r < 0:
            return 0
        self._check(n)
        return self._facts[n] * self._finvs[r] % self.mod * self._finvs[n - r] % self.mod

    def npr(self, n: int, r: int) -> int:
        if r > n or r < 0:
            return 0
        self._check(n)
        return self._facts[n] * self._finvs[n - r] % self.mod

    def catalan(self, n: int) -> int:
        if n == 0:
            return 1
        return self.ncr(2 * n, n) * self.inv(n + 1) % self.mod

    def multinomial(self, counts: Iterable[int]) -> int:
        """``(sum counts)! / prod(count!)``."""
        counts = list(counts)
        result = self.fact(sum(counts))
        for count in counts:
            result = result * self.finv(count) % self.mod
        return result

    @cached_property
    def _derangements(self) -> list[int]:
        table = [1, 0][: self.n + 1]
        for i in range(2, self.n + 1):
            table.append((i - 1) * (table[i - 1] + table[i - 2]) % self.mod)
        return table

    @cached_property
    def _stirling_second(self) -> list[list[int]]:
        return self._stirling(lambda i, j: j)

    @cached_property
    def _stirling_first(self) -> list[list[int]]:
        return self._stirling(lambda i, j: i - 1)

    def _stirling(self, weight) -> list[list[int]]:
        size = self.n + 1
        table = [[0] * size for _ in range(size)]
        table[0][0] = 1
        for i in range(1, size):
            prev, row = table[i - 1], table[i]
            for j in range(1, i + 1):
                row[j] = (weight(i, j) * prev[j] + prev[j - 1]) % self.mod
        return table

    def derangement(self, n: int) -> int:
        """Permutations of ``n`` items with no fixed point."""
        self._check(n)
        return self._derangements[n]

    def stirling_second(self, n: int, k: int) -> int:
        """Ways to split ``n`` items into ``k`` non-empty sets."""
        self._check(n)
        self._check(k)
        return self._stirling_second[n][k]

    def stirling_first(self, n: int, k: int) -> int:
        """Permutations of ``n`` items with ``k`` cycles (unsigned)."""
        self._check(n)
        self._check(k)
        return self._stirling_first[n][k]