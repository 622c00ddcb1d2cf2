"""Manacher's palindrome radii with constant-time palindrome checks."""

from collections.abc import Sequence


class Manacher:
    """Palindrome radii of a sequence.

    ``odd[i]`` is half (rounded down) of the longest odd palindrome centred
    at ``i``; ``even[i]`` is the same for even palindromes whose right
    centre is ``i``.
    """

    def __init__(self, s: Sequence):
        n = len(s)
        self._n = n
        self.even = [0] * (n + 1)
        self.odd = [0] * n
        for radii, shift in ((self.even, 1), (self.odd, 0)):
            l = r = 0
            for i in range(n):
                t = r - i + shift
                if i < r:
                    radii[i] = min(t, radii[l + t])
                lo = i - radii[i]
                hi = i + radii[i] - shift
                while lo >= 1 and hi + 1 < n and s[lo - 1] == s[hi + 1]:
                    radii[i] += 1
                    lo -= 1
                    hi += 1
                if hi > r:
                    l, r = lo, hi

    def is_palindrome(self, l: int, r: int) -> bool:
        """Whether ``s[l..r]`` (inclusive) reads the same both ways."""
        if not 0 <= l <= r < self._n:
            raise IndexError(f"range {l}..{r} outside 0..{self._n - 1}")
        length = r - l + 1
        mid = (l + r + 1) // 2
        radii = self.odd if length % 2 else self.even
        return 2 * radii[mid] + length % 2 >= length