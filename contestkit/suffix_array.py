"""Suffix array with LCP queries and substring utilities."""

from __future__ import annotations

from itertools import pairwise

from .sparse_table import SparseTable

_SENTINEL = 0
_SEPARATOR = 1


def _codes(text: str) -> list[int]:
    return [ord(ch) + 2 for ch in text]


def _suffix_array(codes: list[int]) -> list[int]:
    """Sorted suffix starts; ``codes`` must end with a unique smallest code."""
    n = len(codes)
    order = sorted(range(n), key=codes.__getitem__)
    classes = [0] * n
    for prev, cur in pairwise(order):
        classes[cur] = classes[prev] + (codes[cur] != codes[prev])
    k = 1
    while k < n and classes[order[-1]] < n - 1:

        def key(i: int, c: list[int] = classes, step: int = k) -> tuple[int, int]:
            return c[i], c[(i + step) % n]

        order.sort(key=key)
        fresh = [0] * n
        for prev, cur in pairwise(order):
            fresh[cur] = fresh[prev] + (key(cur) != key(prev))
        classes = fresh
        k *= 2
    return order


class _SuffixIndex:
    """Suffix array, ranks and adjacent LCPs of a code sequence."""

    def __init__(self, codes: list[int]):
        self.codes = codes
        self.n = n = len(codes)
        self.sa = _suffix_array(codes)
        self.rank = [0] * n
        for r, p in enumerate(self.sa):
            self.rank[p] = r
        self.lcp = [0] * (n - 1)
        k = 0
        for i in range(n):
            r = self.rank[i]
            if r == 0:
                k = 0
                continue
            j = self.sa[r - 1]
            while i + k < n and j + k < n and codes[i + k] == codes[j + k]:
                k += 1
            self.lcp[r - 1] = k
            if k:
                k -= 1
        self._table = SparseTable(self.lcp, min) if self.lcp else None

    def lcp_of(self, i: int, j: int) -> int:
        if i == j:
            return self.n - 1 - i
        x, y = sorted((self.rank[i], self.rank[j]))
        return self._table.query(x, y - 1)


class SuffixArray:
    """Suffix array of ``text`` with LCP and substring queries, 0-based."""

    def __init__(self, text: str):
        self.text = text
        self._index = _SuffixIndex(_codes(text) + [_SENTINEL])

    @property
    def order(self) -> list[int]:
        """Start positions of the suffixes of ``text`` in sorted order."""
        return self._index.sa[1:]

    @property
    def lcp(self) -> list[int]:
        """LCP of each pair of neighbours in ``order``."""
        return self._index.lcp[1:]

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self.text):
            raise IndexError(f"position {i} outside 0..{len(self.text) - 1}")

    def lcp_of(self, i: int, j: int) -> int:
        """Length of the longest common prefix of ``text[i:]`` and ``text[j:]``."""
        self._check(i)
        self._check(j)
        return self._index.lcp_of(i, j)

    def contains(self, pattern: str) -> bool:
        """Whether ``pattern`` occurs in ``text``."""
        target = _codes(pattern)
        m = len(target)
        codes, sa = self._index.codes, self._index.sa
        lo, hi = 0, self._index.n - 1
        while lo <= hi:
            mid = (lo + hi) // 2
            start = sa[mid]
            piece = codes[start : start + m]
            if piece == target:
                return True
            if piece < target:
                lo = mid + 1
            else:
                hi = mid - 1
        return False

    def compare_substrings(self, l1: int, r1: int, l2: int, r2: int) -> int:
        """-1, 0 or 1 as ``text[l1..r1]`` is below, equal to or above ``text[l2..r2]``."""
        for l, r in ((l1, r1), (l2, r2)):
            if not 0 <= l <= r < len(self.text):
                raise IndexError(f"range {l}..{r} outside 0..{len(self.text) - 1}")
        len1, len2 = r1 - l1 + 1, r2 - l2 + 1
        common = min(len1, len2, self._index.lcp_of(l1, l2))
        if common == len1 and common == len2:
            return 0
        if common == len1:
            return -1
        if common == len2:
            return 1
        codes = self._index.codes
        return -1 if codes[l1 + common] < codes[l2 + common] else 1

    def kth_substring(self, k: int) -> str:
        """The ``k``-th distinct substring in sorted order, from 1; empty if too large."""
        if k < 1:
            raise ValueError("k must be at least 1")
        index = self._index
        for i, start in enumerate(index.sa):
            shared = index.lcp[i - 1] if i else 0
            fresh = index.n - 1 - start - shared
            if k <= fresh:
                return self.text[start : start + shared + k]
            k -= fresh
        return ""

    def longest_palindromic_substring(self) -> str:
        """The first longest palindrome in ``text``."""
        m = len(self.text)
        if m == 0:
            return ""
        forward = _codes(self.text)
        combined = _SuffixIndex(forward + [_SEPARATOR] + forward[::-1] + [_SENTINEL])

        def mirrored(i: int) -> int:
            return m + 1 + (m - 1 - i)

        best_len, best_pos = 0, 0
        for i in range(m):
            reach = combined.lcp_of(i, mirrored(i))
            if 2 * reach - 1 > best_len:
                best_len, best_pos = 2 * reach - 1, i - reach + 1
            if i > 0:
                reach = combined.lcp_of(i, mirrored(i - 1))
                if 2 * reach > best_len:
                    best_len, best_pos = 2 * reach, i - reach
        return self.text[best_pos : best_pos + best_len]


def longest_common_substring(s1: str, s2: str) -> tuple[int, str]:
    """Length and text of the first longest substring common to ``s1`` and ``s2``."""
    n1, n2 = len(s1), len(s2)
    index = _SuffixIndex(_codes(s1) + [_SEPARATOR] + _codes(s2) + [_SENTINEL])

    def side(p: int) -> int:
        if p < n1:
            return 1
        if n1 < p < n1 + 1 + n2:
            return 2
        return 0

    best, pos = 0, 0
    for i, (prev, cur) in enumerate(pairwise(index.sa)):
        sides = {side(prev), side(cur)}
        if sides == {1, 2} and index.lcp[i] > best:
            best, pos = index.lcp[i], cur
    if pos < n1:
        return best, s1[pos : pos + best]
    start = pos - n1 - 1
    return best, s2[start : start + best]