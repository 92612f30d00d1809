"""Arithmetic modulo a prime, fast exponentiation and numeric helpers."""

from __future__ import annotations

MOD = 10**9 + 7
PI = 3.141592653589793238462643383279502884
E = 2.718281828459045235360287471352662497
EPS = 1e-9


def mod_add(a: int, b: int) -> int:
    return (a % MOD + b % MOD) % MOD


def mod_sub(a: int, b: int) -> int:
    return (a - b) % MOD


def mod_mul(a: int, b: int) -> int:
    return (a % MOD) * (b % MOD) % MOD


def mod_pow(a: int, b: int) -> int:
    """a to the power b modulo MOD, by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    a %= MOD
    while b > 0:
        if b & 1:
            result = mod_mul(result, a)
        a = mod_mul(a, a)
        b >>= 1
    return result


def mod_inverse(a: int) -> int:
    """Multiplicative inverse of a modulo MOD, by the extended Euclidean algorithm."""
    a %= MOD
    b, u, v = MOD, 0, 1
    while a:
        t = b // a
        b -= t * a
        a, b = b, a
        u -= t * v
        u, v = v, u
    if b != 1:
        raise ValueError("value has no inverse modulo MOD")
    return u % MOD


def mod_div(a: int, b: int) -> int:
    return mod_mul(a, mod_inverse(b))


def fastpow(a, b: int):
    """a to the power b for a non-negative integer b, by repeated squaring."""
    if b < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    while b > 0:
        if b & 1:
            result = result * a
        a = a * a
        b >>= 1
    return result


def compare(a: float, b: float) -> int:
    """-1, 0 or 1 as a is below, within EPS of, or above b."""
    if a + EPS < b:
        return -1
    if b + EPS < a:
        return 1
    return 0


def ceiling_division(numerator: int, denominator: int) -> int:
    if denominator == 0:
        raise ZeroDivisionError("denominator must not be zero")
    return (numerator + denominator - 1) // denominator


def distance_divisible(n: int, k: int) -> int:
    """For n below k, what to add to n to reach a multiple of k; otherwise n mod k."""
    if k <= 0:
        raise ValueError("k must be positive")
    if n < k:
        return k - n % k
    return n % k