"""Number theory: gcd, modular arithmetic, factorisation and a prime sieve."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from math import gcd as _gcd
from math import isqrt, prod


@dataclass(frozen=True)
class ExtGcd:
    """``gcd`` of ``a`` and ``b`` with ``a * x + b * y == gcd``."""

    gcd: int
    x: int
    y: int


def ext_gcd(a: int, b: int) -> ExtGcd:
    """Extended Euclidean algorithm."""
    if b == 0:
        return ExtGcd(a, 1, 0)
    inner = ext_gcd(b, a % b)
    return ExtGcd(inner.gcd, inner.y, inner.x - (a // b) * inner.y)


def gcd(a: int, b: int) -> int:
    return _gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple; both zero raises ``ZeroDivisionError``."""
    return (a // _gcd(a, b)) * b


def _check_modulus(m: int) -> None:
    if m < 1:
        raise ValueError("modulus must be positive")


def mod_inverse(a: int, m: int) -> int:
    """Inverse of ``a`` modulo ``m``; raises ``ValueError`` if none exists."""
    _check_modulus(m)
    result = ext_gcd(a % m, m)
    if result.gcd != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return result.x % m


def mod_inverse_fermat(a: int, m: int) -> int:
    """Inverse of ``a`` modulo a prime ``m`` by Fermat's little theorem."""
    _check_modulus(m)
    if _gcd(a, m) != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return pow(a, m - 2, m)


def mod_mul(a: int, b: int, m: int) -> int:
    """``a * b`` modulo ``m`` by doubling and adding."""
    _check_modulus(m)
    if b < 0:
        raise ValueError("multiplier must be non-negative")
    result = 0
    a %= m
    while b > 0:
        if b & 1:
            result = (result + a) % m
        a = a * 2 % m
        b >>= 1
    return result


def mod_pow(a: int, b: int, m: int) -> int:
    """``a ** b`` modulo ``m``."""
    _check_modulus(m)
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, m)


def _check_positive(n: int) -> None:
    if n < 1:
        raise ValueError("number must be at least 1")


def prime_factors(n: int) -> list[tuple[int, int]]:
    """``(prime, exponent)`` pairs of ``n`` by trial division, primes ascending."""
    _check_positive(n)
    factors = []
    count = 0
    while n % 2 == 0:
        n //= 2
        count += 1
    if count:
        factors.append((2, count))
    p = 3
    while p <= isqrt(n):
        count = 0
        while n % p == 0:
            n //= p
            count += 1
        if count:
            factors.append((p, count))
        p += 2
    if n > 2:
        factors.append((n, 1))
    return factors


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in increasing order."""
    _check_positive(n)
    found = set()
    for i in range(1, isqrt(n) + 1):
        if n % i == 0:
            found.update((i, n // i))
    return sorted(found)


def totients_up_to(n: int) -> list[int]:
    """``phi[i]`` for ``i`` in ``0..n`` (``phi[0]`` is 0)."""
    if n < 0:
        raise ValueError("bound must be non-negative")
    phi = list(range(n + 1))
    for i in range(2, n + 1):
        if phi[i] == i:
            for j in range(i, n + 1, i):
                phi[j] = phi[j] * (i - 1) // i
    return phi


def chinese_remainder(moduli: Iterable[int], remainders: Iterable[int]) -> int:
    """Smallest non-negative ``x`` with ``x % m == r`` for pairwise coprime moduli."""
    pairs = list(zip(moduli, remainders, strict=True))
    total = prod(m for m, _ in pairs)
    result = 0
    for m, r in pairs:
        part = total // m
        result += r * mod_inverse(part, m) * part
    return result % total


class Sieve:
    """Smallest prime factors of every number below ``limit``."""

    def __init__(self, limit: int = 200_002):
        if limit < 3:
            raise ValueError("limit must be at least 3")
        self.limit = limit
        spf = [0] * limit
        primes = []
        for i in range(2, limit):
            if spf[i] == 0:
                spf[i] = i
                primes.append(i)
                for j in range(i * i, limit, i):
                    if spf[j] == 0:
                        spf[j] = i
        self._spf = spf
        self.primes = primes

    def factorize(self, n: int) -> list[tuple[int, int]]:
        """Factorise ``n`` below ``limit`` with the smallest-factor table."""
        if not 1 <= n < self.limit:
            raise ValueError(f"{n} outside 1..{self.limit - 1}")
        factors = []
        while n != 1:
            p = self._spf[n]
            count = 0
            while n % p == 0:
                n //= p
                count += 1
            factors.append((p, count))
        return factors

    def factorize_large(self, n: int) -> list[tuple[int, int]]:
        """Factorise ``n`` by trial division with the sieved primes."""
        _check_positive(n)
        factors = []
        for p in self.primes:
            if p * p > n:
                break
            if n % p == 0:
                count = 0
                while n % p == 0:
                    n //= p
                    count += 1
                factors.append((p, count))
        if n > 1:
            factors.append((n, 1))
        return factors

    def segmented(self, l: int, r: int) -> list[int]:
        """Primes in ``l..r`` inclusive."""
        if not 1 <= l <= r:
            raise ValueError("need 1 <= l <= r")
        if isqrt(r) >= self.limit:
            raise ValueError(f"{r} is too large for a sieve below {self.limit}")
        flags = [True] * (r - l + 1)
        if l == 1:
            flags[0] = False
        for p in self.primes:
            if p * p > r:
                break
            start = max(p * p, -(-l // p) * p)
            hits = range(start, r + 1, p)
            flags[start - l :: p] = [False] * len(hits)
        return [l + i for i, prime in enumerate(flags) if prime]

    def euler_phi(self, n: int) -> int:
        """Euler's totient of ``n``."""
        result = n
        for p, _ in self.factorize_large(n):
            result -= result // p
        return result

    def sum_of_divisors(self, n: int) -> int:
        total = 1
        for p, a in self.factorize_large(n):
            total *= (p ** (a + 1) - 1) // (p - 1)
        return total

    def sum_of_divisors_mod(self, n: int, mod: int = 1_000_000_007) -> int:
        """Sum of divisors of ``n`` modulo a prime ``mod``."""
        total = 1
        for p, a in self.factorize_large(n):
            term = (pow(p, a + 1, mod) - 1) % mod
            total = total * term * mod_inverse(p - 1, mod) % mod
        return total % mod

    def number_of_divisors(self, n: int) -> int:
        return prod(a + 1 for _, a in self.factorize_large(n))