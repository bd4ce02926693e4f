"""Modular arithmetic, sieves, primality testing and interpolation."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

MOD = 998244353


def md(x: int, mod: int = MOD) -> int:
    """Reduce ``x`` into the range ``[0, mod)``."""
    return x % mod


def mul_mod(a: int, b: int, mod: int = MOD) -> int:
    """Multiply ``a`` by a non-negative ``b`` modulo ``mod``."""
    if b < 0:
        raise ValueError("multiplier must be non-negative")
    return md(md(a, mod) * b, mod)


def pwr(a: int, n: int, mod: int = MOD) -> int:
    """Raise ``a`` to the non-negative power ``n`` modulo ``mod``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    return pow(md(a, mod), n, mod)


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if a == 0:
        return b, 0, 1
    g, x1, y1 = ext_gcd(b % a, a)
    return g, y1 - (b // a) * x1, x1


def modinv(a: int, m: int = MOD) -> int:
    """Return the inverse of ``a`` modulo ``m``; raise if none exists."""
    g, x, _ = ext_gcd(a % m, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m}")
    return x % m


class Factorials:
    """Precomputed factorials and inverse factorials up to ``n``."""

    def __init__(self, n: int, mod: int = MOD) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.mod = mod
        self.fact = [1] * (n + 1)
        for i in range(1, n + 1):
            self.fact[i] = self.fact[i - 1] * i % mod
        self.inv_fact = [1] * (n + 1)
        self.inv_fact[n] = modinv(self.fact[n], mod)
        for i in range(n, 0, -1):
            self.inv_fact[i - 1] = self.inv_fact[i] * i % mod

    def ncr(self, n: int, r: int) -> int:
        """Binomial coefficient modulo ``mod``; 0 outside the valid range."""
        if n < 0 or r < 0 or n < r:
            return 0
        if n > self.n:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.n}")
        return self.fact[n] * self.inv_fact[r] % self.mod * self.inv_fact[n - r] % self.mod


def prime_factor_table(n: int) -> list[list[int]]:
    """Distinct prime factors, in increasing order, of every number 0..n."""
    table: list[list[int]] = [[] for _ in range(n + 1)]
    for i in range(2, n + 1):
        if not table[i]:
            for j in range(i, n + 1, i):
                table[j].append(i)
    return table


def sieve(n: int) -> tuple[list[int], list[int]]:
    """Linear sieve below ``n``.

    Returns the primes in ``[2, n)`` and a list whose entry ``x`` is the
    smallest prime divisor of ``x`` (0 for 0 and 1).
    """
    spf = [0] * max(n, 0)
    primes: list[int] = []
    for i in range(2, n):
        if spf[i] == 0:
            spf[i] = i
            primes.append(i)
        for p in primes:
            if p * i >= n or p > spf[i]:
                break
            spf[p * i] = p
    return primes, spf


def ncr_table(size: int, mod: int = MOD) -> list[list[int]]:
    """Pascal's triangle modulo ``mod`` as a ``size`` x ``size`` table."""
    table = [[0] * size for _ in range(size)]
    for i, row in enumerate(table):
        for j in range(i + 1):
            if j in (0, i):
                row[j] = 1 % mod
            else:
                row[j] = (table[i - 1][j - 1] + table[i - 1][j]) % mod
    return table


def _miller(d: int, n: int, rng: random.Random) -> bool:
    a = rng.randint(2, n - 2)
    x = pow(a, d, n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_prime(n: int, rounds: int = 4, rng: random.Random | None = None) -> bool:
    """Miller-Rabin primality test with ``rounds`` random bases."""
    if n < 2:
        return False
    if n in (2, 3, 5):
        return True
    if n % 2 == 0 or n % 3 == 0 or n % 5 == 0:
        return False
    if n < 49:
        return True
    rng = rng or random.Random()
    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(_miller(d, n, rng) for _ in range(rounds))


def _icbrt(n: int) -> int:
    c = round(n ** (1 / 3))
    while c > 0 and c ** 3 > n:
        c -= 1
    while (c + 1) ** 3 <= n:
        c += 1
    return c


def count_divisors(n: int) -> int:
    """Number of divisors of ``n`` in roughly O(n^(1/3))."""
    if n < 1:
        raise ValueError("n must be positive")
    primes, _ = sieve(_icbrt(n) + 2)
    total = 1
    for p in primes:
        if p ** 3 > n:
            break
        exponent = 1
        while n % p == 0:
            n //= p
            exponent += 1
        total *= exponent
    root = math.isqrt(n)
    if is_prime(n, rounds=16):
        total *= 2
    elif root * root == n and is_prime(root, rounds=16):
        total *= 3
    elif n != 1:
        total *= 4
    return total


def lagrange_polynomial(values: Sequence[int], k: int, mod: int = MOD) -> int:
    """Evaluate at ``k`` the polynomial with ``f(i) == values[i]``, modulo ``mod``."""
    if k < 0:
        raise ValueError("k must be non-negative")
    n = len(values)
    if k < n:
        return values[k]
    facts = Factorials(n, mod)
    numerator = 1
    for i in range(n):
        numerator = numerator * md(k - i, mod) % mod
    ans = 0
    for i, value in enumerate(values):
        denominator = modinv(md(k - i, mod), mod) * facts.inv_fact[i] % mod
        denominator = denominator * facts.inv_fact[n - 1 - i] % mod
        term = numerator * denominator % mod * value % mod
        ans = (ans + term) % mod if (n - i) % 2 else (ans - term) % mod
    return ans