"""Number theory: gcd, lcm, divisors, totient, primality, factorisation, sieve."""

from __future__ import annotations

from math import isqrt
from typing import Iterator

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; undefined when both arguments are zero."""
    g = gcd(a, b)
    if g == 0:
        raise ValueError("lcm(0, 0) is undefined")
    return a * b // g


def extgcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g, where g is gcd(a, b)."""
    if a == 0:
        return b, 0, 1
    p = b // a
    g, y, x = extgcd(b - p * a, a)
    x -= p * y
    return g, x, y


def diophantine(a: int, b: int, c: int) -> tuple[int, int, int] | None:
    """One solution (x, y, g) of a*x + b*y == c with g = gcd(a, b), or None."""
    if a == 0 and b == 0:
        return (0, 0, 0) if c == 0 else None
    g, x, y = extgcd(a, b)
    if c % g != 0:
        return None
    factor = c // g
    return x * factor, y * factor, g


def divisors(n: int) -> list[int]:
    """Positive divisors of n, each small divisor followed by its cofactor."""
    result: list[int] = []
    for i in range(1, isqrt(n) + 1 if n > 0 else 1):
        if n % i == 0:
            result.append(i)
            if n // i != i:
                result.append(n // i)
    return result


def phi(n: int) -> int:
    """Euler's totient: how many of 1..n are coprime with n."""
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def _witness(a: int, s: int, d: int, n: int) -> bool:
    x = pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = x * x % n
        if x == 1:
            return True
        if x == n - 1:
            return False
    return True


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin test, exact for n below 3.8e18."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    return not any(_witness(a, s, d, n) for a in _WITNESSES if a < n)


def prime_factors(n: int) -> dict[int, int]:
    """Prime factorisation of n as {prime: exponent}, primes ascending."""
    if n < 1:
        raise ValueError("prime_factors() needs a positive integer")
    factors: dict[int, int] = {}
    while n % 2 == 0:
        factors[2] = factors.get(2, 0) + 1
        n //= 2
    i = 3
    while i * i <= n:
        while n % i == 0:
            factors[i] = factors.get(i, 0) + 1
            n //= i
        i += 2
    if n > 2:
        factors[n] = factors.get(n, 0) + 1
    return factors


def sieve(limit: int = 10**6) -> list[int]:
    """All primes up to and including limit, by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    marked = bytearray(limit + 1)
    marked[0] = marked[1] = 1
    primes: list[int] = []
    for i in range(2, limit + 1):
        if marked[i]:
            continue
        primes.append(i)
        start = i * i
        if start <= limit:
            marked[start::i] = b"\x01" * len(range(start, limit + 1, i))
    return primes


def quotient_blocks(n: int) -> Iterator[tuple[int, int, int]]:
    """Maximal ranges (l, r, q) of divisors d in 1..n sharing the quotient n // d = q."""
    left = 1
    while left <= n:
        quotient = n // left
        right = n // quotient
        yield left, right, quotient
        left = right + 1