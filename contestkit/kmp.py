"""Prefix function and Knuth-Morris-Pratt search."""

from collections.abc import Sequence


def prefix_function(s: Sequence) -> list[int]:
    """``pi[i]`` is the length of the longest proper border of ``s[:i + 1]``."""
    n = len(s)
    pi = [0] * n
    for i in range(1, n):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def kmp_search(text: Sequence, pattern: Sequence) -> list[int]:
    """Start positions of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if len(pattern) == 0:
        raise ValueError("pattern must be non-empty")
    pi = prefix_function(pattern)
    positions = []
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = pi[j - 1]
        if ch == pattern[j]:
            j += 1
        if j == len(pattern):
            positions.append(i - j + 1)
            j = pi[j - 1]
    return positions