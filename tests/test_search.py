import math
import random

import pytest

from algokit.search import (
    binary_search_first,
    binary_search_jump,
    binary_search_real,
    binary_search_real_fixed,
    merge_sort,
    ternary_search,
    ternary_search_eps,
    ternary_search_int,
)


@pytest.mark.parametrize("threshold", [1, 2, 37, 64, 99, 100])
def test_binary_search_first_finds_threshold(threshold):
    assert binary_search_first(100, lambda x: x >= threshold) == threshold


def test_binary_search_first_none_true_gives_n():
    assert binary_search_first(50, lambda x: False) == 50


@pytest.mark.parametrize("threshold", [0, 1, 5, 42, 99])
def test_binary_search_jump_finds_threshold(threshold):
    assert binary_search_jump(100, lambda x: x >= threshold) == threshold


def test_binary_search_jump_none_true_gives_n():
    assert binary_search_jump(30, lambda x: False) == 30


def test_binary_search_jump_and_first_agree():
    for limit in range(1, 60):
        ok = lambda x, t=limit: x * x >= t
        first = binary_search_first(100, ok)
        assert binary_search_jump(100, ok) == first
        assert ok(first) and not ok(first - 1)


def test_binary_search_real_square_root():
    result = binary_search_real(lambda x: x * x >= 2.0, 0.0, 10.0)
    assert result == pytest.approx(math.sqrt(2.0), abs=1e-8)


def test_binary_search_real_fixed_square_root():
    result = binary_search_real_fixed(lambda x: x * x >= 3.0, 0.0, 10.0)
    assert result == pytest.approx(math.sqrt(3.0), abs=1e-12)


def test_merge_sort_matches_sorted():
    rng = random.Random(2)
    for _ in range(50):
        values = [rng.randint(-5, 5) for _ in range(rng.randint(0, 20))]
        original = list(values)
        assert merge_sort(values) == sorted(values)
        assert values == original


def test_merge_sort_empty_and_single():
    assert merge_sort([]) == []
    assert merge_sort([4]) == [4]


def test_ternary_search_parabola():
    result = ternary_search(lambda x: (x - 3.0) ** 2 + 1.0, -10.0, 10.0)
    assert result == pytest.approx(1.0, abs=1e-9)


def test_ternary_search_eps_parabola():
    result = ternary_search_eps(lambda x: (x + 2.5) ** 2 + 4.0, -10.0, 10.0)
    assert result == pytest.approx(4.0, abs=1e-9)


@pytest.mark.parametrize("centre", [0, 1, 7, 50, 99, 100])
def test_ternary_search_int_matches_brute_force(centre):
    func = lambda x: abs(x - centre) * 3 + 2
    assert ternary_search_int(func, 0, 100) == min(func(k) for k in range(101))


def test_ternary_search_int_bad_range():
    with pytest.raises(ValueError):
        ternary_search_int(lambda x: x, 5, 4)