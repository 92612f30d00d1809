"""Binary, ternary and merge-sort based searching and sorting."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def binary_search_first(n: int, ok: Callable[[int], bool]) -> int:
    """Smallest x in 1..n with ok(x), for a predicate false then true; n if none."""
    low, high = 0, n
    while high - low > 1:
        mid = low + (high - low) // 2
        if not ok(mid):
            low = mid
        else:
            high = mid
    return high


def binary_search_jump(n: int, ok: Callable[[int], bool]) -> int:
    """Smallest x in 0..n-1 with ok(x), found by halving jumps; n if none."""
    index = -1
    jump = n + 1
    while jump >= 1:
        while jump + index < n and not ok(jump + index):
            index += jump
        jump //= 2
    return index + 1


def binary_search_real(
    ok: Callable[[float], bool], low: float, high: float, eps: float = 1e-9
) -> float:
    """Boundary where ok turns true in [low, high], narrowed to within eps."""
    while high - low > eps:
        mid = (high + low) / 2.0
        if not ok(mid):
            low = mid
        else:
            high = mid
    return high


def binary_search_real_fixed(
    ok: Callable[[float], bool], low: float, high: float, iterations: int = 300
) -> float:
    """Boundary where ok turns true in [low, high], after a fixed number of halvings."""
    for _ in range(iterations):
        mid = (high + low) / 2.0
        if not ok(mid):
            low = mid
        else:
            high = mid
    return high


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        elif right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            merged.append(right[j])
            i += 1
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """A new list holding values in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def ternary_search(
    func: Callable[[float], float], low: float, high: float, iterations: int = 100
) -> float:
    """Minimum value of a unimodal func on [low, high], after a fixed number of steps."""
    for _ in range(iterations):
        diff = (high - low) / 3.0
        mid1 = low + diff
        mid2 = high - diff
        if func(mid1) > func(mid2):
            low = mid1
        else:
            high = mid2
    return func(low)


def ternary_search_eps(
    func: Callable[[float], float], low: float, high: float, eps: float = 1e-9
) -> float:
    """Minimum value of a unimodal func on [low, high], narrowing until within eps."""
    while high - low > eps:
        diff = (high - low) / 3.0
        mid1 = low + diff
        mid2 = high - diff
        if func(mid1) > func(mid2):
            low = mid1
        else:
            high = mid2
    return func(low)


def ternary_search_int(func: Callable[[int], float], low: int, high: int) -> float:
    """Minimum value of a unimodal func over the integers low..high."""
    if high < low:
        raise ValueError("high must not be below low")
    while low + 3 < high:
        q1 = (2 * low + high) // 3
        q2 = (low + 2 * high) // 3
        if func(q1) > func(q2):
            low = q1
        else:
            high = q2
    return min(func(k) for k in range(low, high + 1))