"""Dynamic programming: DAG paths, edit distance, knapsack, LCS, LIS, elevator rides."""

from __future__ import annotations

import math
from bisect import bisect_left
from typing import Callable, Hashable, Sequence

from .bits import set_bits
from .graph import CycleError


def _fold_dag(
    successors: Callable[[int], list[int]],
    source: int,
    target: int,
    base,
    combine: Callable[[int, dict], object],
):
    """Evaluate each node from its successors, memoised, in depth-first postorder."""
    memo: dict = {target: base}
    expanded: set[int] = set()
    stack = [source]
    while stack:
        u = stack[-1]
        if u in memo:
            stack.pop()
            continue
        missing = [v for v in successors(u) if v not in memo]
        if missing:
            if u in expanded:
                raise CycleError("graph has a cycle")
            expanded.add(u)
            stack.extend(missing)
            continue
        stack.pop()
        memo[u] = combine(u, memo)
    return memo[source]


def count_paths(adj: Sequence[Sequence[int]], source: int, target: int) -> int:
    """Number of distinct paths from source to target in a directed acyclic graph."""
    return _fold_dag(
        lambda u: list(adj[u]),
        source,
        target,
        1,
        lambda u, memo: sum(memo[v] for v in adj[u]),
    )


def min_path(
    adj: Sequence[Sequence[tuple[int, int]]], source: int, target: int
) -> float:
    """Cheapest path cost from source to target over (neighbour, cost) edges of a DAG.

    Returns math.inf when target cannot be reached.
    """
    return _fold_dag(
        lambda u: [v for v, _ in adj[u]],
        source,
        target,
        0,
        lambda u, memo: min((memo[v] + cost for v, cost in adj[u]), default=math.inf),
    )


def edit_distance(a: Sequence, b: Sequence) -> int:
    """Fewest insertions, removals and replacements turning a into b."""
    previous = list(range(len(b) + 1))
    for i, x in enumerate(a, start=1):
        current = [i]
        for j, y in enumerate(b, start=1):
            if x == y:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(current[j - 1], previous[j], previous[j - 1]))
        previous = current
    return previous[-1]


def elevator_rides(weights: Sequence[int], capacity: int) -> int:
    """Fewest elevator rides carrying everyone, each ride holding at most capacity."""
    n = len(weights)
    best: list[tuple[float, float]] = [(1, 0)] * (1 << n)
    for mask in range(1, 1 << n):
        candidate: tuple[float, float] = (math.inf, math.inf)
        for p in set_bits(mask):
            rides, last = best[mask ^ (1 << p)]
            if last + weights[p] <= capacity:
                option = (rides, last + weights[p])
            else:
                option = (rides + 1, weights[p])
            candidate = min(candidate, option)
        best[mask] = candidate
    return int(best[-1][0])


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """Best total value of items, each taken at most once, within the capacity."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")
    if capacity <= 0:
        return 0
    best = [0] * (capacity + 1)
    for value, weight in zip(values, weights):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs(a: Sequence, b: Sequence) -> int:
    """Length of the longest common subsequence of a and b."""
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0]
        for j, y in enumerate(b, start=1):
            if x == y:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]


def lis_recursive(values: Sequence) -> int:
    """Length of the longest strictly increasing subsequence, in quadratic time."""
    ending: list[int] = []
    for i, x in enumerate(values):
        ending.append(
            1 + max((ending[j] for j in range(i) if values[j] < x), default=0)
        )
    return max(ending, default=0)


def _patience(values: Sequence) -> tuple[list, list[int]]:
    tails: list = []
    ends: list[int] = []
    for x in values:
        i = bisect_left(tails, x)
        if i == len(tails):
            tails.append(x)
        else:
            tails[i] = x
        ends.append(i + 1)
    return tails, ends


def lis_length(values: Sequence) -> int:
    """Length of the longest strictly increasing subsequence, in O(n log n)."""
    return len(_patience(values)[0])


def lis(values: Sequence[Hashable]) -> list:
    """One longest strictly increasing subsequence of values."""
    tails, ends = _patience(values)
    remaining = len(tails)
    current = None
    picked = []
    for x, end in zip(reversed(values), reversed(ends)):
        if remaining and end == remaining and (current is None or x < current):
            picked.append(x)
            current = x
            remaining -= 1
    picked.reverse()
    return picked