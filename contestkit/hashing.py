"""Polynomial rolling hashes of substrings and reversed substrings."""

_OFFSET = 1007


class SimpleHash:
    """Forward and reverse polynomial hashes of ``text`` modulo ``mod``.

    Ranges are 0-based and inclusive.
    """

    def __init__(self, text: str, base: int, mod: int):
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.base = base
        self.mod = mod
        self._len = len(text)
        codes = [ord(ch) + _OFFSET for ch in text]

        self._powers = [1 % mod]
        for _ in range(self._len + 3):
            self._powers.append(self._powers[-1] * base % mod)

        self._forward = [0]
        for code in codes:
            self._forward.append((self._forward[-1] * base + code) % mod)

        backward = [0]
        for code in reversed(codes):
            backward.append((backward[-1] * base + code) % mod)
        backward.reverse()
        self._backward = backward

    def _check(self, l: int, r: int) -> None:
        if not 0 <= l <= r < self._len:
            raise IndexError(f"range {l}..{r} outside 0..{self._len - 1}")

    def range_hash(self, l: int, r: int) -> int:
        """Hash of ``text[l..r]``."""
        self._check(l, r)
        return (self._forward[r + 1] - self._powers[r - l + 1] * self._forward[l]) % self.mod

    def reverse_hash(self, l: int, r: int) -> int:
        """Hash of ``text[l..r]`` read backwards."""
        self._check(l, r)
        return (self._backward[l] - self._powers[r - l + 1] * self._backward[r + 1]) % self.mod


class DoubleHash:
    """Two independent hashes packed into one integer."""

    def __init__(self, text: str):
        self._first = SimpleHash(text, 1949313259, 2091573227)
        self._second = SimpleHash(text, 1997293877, 2117566807)

    def range_hash(self, l: int, r: int) -> int:
        return (self._first.range_hash(l, r) << 32) ^ self._second.range_hash(l, r)

    def reverse_hash(self, l: int, r: int) -> int:
        return (self._first.reverse_hash(l, r) << 32) ^ self._second.reverse_hash(l, r)