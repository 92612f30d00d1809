"""Offline range queries with Mo's ordering, sweep lines and a Monte Carlo estimate."""

from __future__ import annotations

import random
from dataclasses import dataclass
from math import isqrt
from typing import Any, Callable, Iterable


@dataclass(frozen=True)
class Query:
    """An inclusive index range [left, right] and its position among the queries."""

    left: int
    right: int
    index: int


def mo_order(queries: Iterable[Query], n: int) -> list[Query]:
    """Queries sorted by sqrt(n)-sized blocks of left, then by decreasing right."""
    block = max(1, isqrt(n))
    return sorted(queries, key=lambda q: (q.left // block, -q.right))


def mos_algorithm(
    queries: Iterable[tuple[int, int]],
    n: int,
    add: Callable[[int], None],
    remove: Callable[[int], None],
    answer: Callable[[], Any],
) -> list:
    """Answer inclusive (left, right) range queries by moving a window in Mo's order.

    add and remove are called with array indices entering and leaving the
    window; answer reports the result for the current window. Answers come
    back in the order the queries were given.
    """
    ordered = mo_order(
        (Query(left, right, i) for i, (left, right) in enumerate(queries)), n
    )
    results: list = [None] * len(ordered)
    left, right = 0, -1
    for q in ordered:
        while right < q.right:
            right += 1
            add(right)
        while left > q.left:
            left -= 1
            add(left)
        while right > q.right:
            remove(right)
            right -= 1
        while left < q.left:
            remove(left)
            left += 1
        results[q.index] = answer()
    return results


@dataclass(frozen=True)
class Event:
    """A change of delta at a point in time, ordered by time alone."""

    time: int
    delta: int
    idx: int

    def __lt__(self, other: "Event") -> bool:
        return self.time < other.time


def max_overlap(intervals: Iterable[tuple[int, int]]) -> int:
    """Largest number of closed intervals [start, end] sharing a point."""
    events: list[Event] = []
    for i, (start, end) in enumerate(intervals):
        events.append(Event(start, 1, i))
        events.append(Event(end, -1, i))
    events.sort(key=lambda e: (e.time, -e.delta))
    total = best = 0
    for event in events:
        total += event.delta
        best = max(best, total)
    return best


def estimate_pi(interval: int = 5000, rng: random.Random | None = None) -> float:
    """Estimate pi from interval**2 random grid points of the unit square."""
    if interval < 1:
        raise ValueError("interval must be positive")
    generator = rng if rng is not None else random.Random()
    inside = 0
    samples = interval * interval
    for _ in range(samples):
        x = generator.randrange(interval + 1) / interval
        y = generator.randrange(interval + 1) / interval
        if x * x + y * y <= 1:
            inside += 1
    return 4 * inside / samples