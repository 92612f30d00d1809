"""Combinations, binomial coefficients and k-th permutations."""

from __future__ import annotations

import math
from string import ascii_lowercase
from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def combinations(n: int, k: int) -> list[list[int]]:
    """All k-element subsets of 1..n as increasing lists, in lexicographic order."""
    answer: list[list[int]] = []
    current: list[int] = []

    def extend(start: int) -> None:
        if len(current) == k:
            answer.append(list(current))
            return
        for value in range(start, n + 1):
            current.append(value)
            extend(value + 1)
            current.pop()

    extend(1)
    return answer


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient; 0 when r is negative or above n."""
    if r < 0 or n < r:
        return 0
    r = min(r, n - r)
    result = 1
    for i in range(1, r + 1):
        result = result * (n - i + 1) // i
    return result


def kth_permutation(items: Sequence[T], k: int) -> list[T]:
    """The k-th (1-based) permutation of items in the order of their positions."""
    remaining = list(items)
    n = len(remaining)
    if n == 0 or not 1 <= k <= math.factorial(n):
        raise ValueError(f"permutation {k} out of range")
    k -= 1
    block = math.factorial(n - 1)
    answer: list[T] = []
    while remaining:
        index, k = divmod(k, block)
        answer.append(remaining.pop(index))
        if remaining:
            block //= len(remaining)
    return answer


def kth_permutation_range(n: int, k: int, start: int = 0) -> list[int]:
    """The k-th (1-based) permutation of start, start+1, ..., start+n-1."""
    return kth_permutation(range(start, start + n), k)


def kth_perm_string(n: int, k: int) -> str:
    """The k-th (1-based) permutation of the first n lowercase letters."""
    if not 1 <= n <= 26:
        raise ValueError("n must be between 1 and 26")
    return "".join(ascii_lowercase[i] for i in kth_permutation_range(n, k))


def next_combination(comb: Sequence[int], n: int) -> list[int] | None:
    """The combination of 1..n following comb lexicographically, or None if last."""
    result = list(comb)
    k = len(result)
    for i in reversed(range(k)):
        if result[i] <= n - k + i:
            result[i] += 1
            for j in range(i + 1, k):
                result[j] = result[j - 1] + 1
            return result
    return None


def all_combinations(n: int, k: int) -> Iterator[list[int]]:
    """Every k-element combination of 1..n, lexicographically."""
    comb: list[int] | None = list(range(1, k + 1))
    while comb is not None:
        yield comb
        comb = next_combination(comb, n)