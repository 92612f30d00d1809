import math
import random
from collections import Counter

import pytest

from algokit.techniques import (
    Event,
    Query,
    estimate_pi,
    max_overlap,
    mo_order,
    mos_algorithm,
)


def _random_queries(rng, n, count):
    result = []
    for _ in range(count):
        a, b = rng.randrange(n), rng.randrange(n)
        result.append((min(a, b), max(a, b)))
    return result


def test_mo_order_is_block_sorted_permutation():
    rng = random.Random(1)
    n = 50
    queries = [Query(l, r, i) for i, (l, r) in enumerate(_random_queries(rng, n, 40))]
    ordered = mo_order(queries, n)
    assert sorted(ordered, key=lambda q: q.index) == queries
    block = math.isqrt(n)
    for prev, cur in zip(ordered, ordered[1:]):
        assert prev.left // block <= cur.left // block
        if prev.left // block == cur.left // block:
            assert prev.right >= cur.right


def test_mos_algorithm_range_sums():
    rng = random.Random(4)
    values = [rng.randint(-10, 10) for _ in range(60)]
    queries = _random_queries(rng, len(values), 50)
    total = [0]

    def add(i):
        total[0] += values[i]

    def remove(i):
        total[0] -= values[i]

    answers = mos_algorithm(queries, len(values), add, remove, lambda: total[0])
    assert answers == [sum(values[l : r + 1]) for l, r in queries]


def test_mos_algorithm_distinct_counts():
    rng = random.Random(9)
    values = [rng.randint(0, 6) for _ in range(45)]
    queries = _random_queries(rng, len(values), 30)
    seen = Counter()

    def add(i):
        seen[values[i]] += 1

    def remove(i):
        seen[values[i]] -= 1
        if not seen[values[i]]:
            del seen[values[i]]

    answers = mos_algorithm(queries, len(values), add, remove, lambda: len(seen))
    assert answers == [len(set(values[l : r + 1])) for l, r in queries]


def test_event_orders_by_time_only():
    early = Event(1, -1, 5)
    late = Event(2, 1, 0)
    assert early < late
    assert not late < early
    assert sorted([late, early]) == [early, late]


def test_max_overlap_touching_intervals_share_a_point():
    assert max_overlap([(1, 2), (2, 3)]) == 2


def test_max_overlap_nested():
    intervals = [(0, 10), (1, 9), (2, 8), (3, 7)]
    assert max_overlap(intervals) == len(intervals)


def test_max_overlap_disjoint_and_empty():
    assert max_overlap([(0, 1), (3, 4), (6, 7)]) == 1
    assert max_overlap([]) == 0


def test_estimate_pi_close_to_pi():
    result = estimate_pi(200, random.Random(12))
    assert abs(result - math.pi) < 0.1
    assert 0 <= result <= 4


def test_estimate_pi_is_reproducible_with_seed():
    first = estimate_pi(50, random.Random(3))
    second = estimate_pi(50, random.Random(3))
    assert first == second


def test_estimate_pi_rejects_bad_interval():
    with pytest.raises(ValueError):
        estimate_pi(0, random.Random(1))