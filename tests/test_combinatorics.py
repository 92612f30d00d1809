import itertools
import math

import pytest

from algokit.combinatorics import (
    all_combinations,
    combinations,
    kth_perm_string,
    kth_permutation,
    kth_permutation_range,
    n_choose_r,
    next_combination,
)


@pytest.mark.parametrize("n,k", [(5, 2), (6, 3), (4, 4), (4, 0)])
def test_combinations_invariants(n, k):
    result = combinations(n, k)
    assert len(result) == math.comb(n, k)
    assert result == sorted(result)
    assert all(c == sorted(set(c)) and len(c) == k for c in result)
    assert all(1 <= v <= n for c in result for v in c)


@pytest.mark.parametrize("n,r", [(10, 3), (20, 10), (52, 5), (7, 0), (7, 7)])
def test_n_choose_r_matches_math(n, r):
    assert n_choose_r(n, r) == math.comb(n, r)


def test_n_choose_r_out_of_range():
    assert n_choose_r(5, -1) == 0
    assert n_choose_r(3, 5) == 0


def test_kth_permutation_matches_lexicographic_order():
    items = ["w", "x", "y", "z"]
    expected = [list(p) for p in itertools.permutations(items)]
    assert [kth_permutation(items, k) for k in range(1, 25)] == expected


def test_kth_permutation_range_uses_start():
    perms = [kth_permutation_range(3, k, 5) for k in range(1, 7)]
    assert perms == [list(p) for p in itertools.permutations([5, 6, 7])]


def test_kth_permutation_out_of_range():
    with pytest.raises(ValueError):
        kth_permutation([1, 2, 3], 7)
    with pytest.raises(ValueError):
        kth_permutation([1, 2, 3], 0)


def test_kth_perm_string():
    assert kth_perm_string(3, 1) == "abc"
    assert kth_perm_string(3, 6) == "cba"


def test_kth_perm_string_rejects_bad_n():
    with pytest.raises(ValueError):
        kth_perm_string(0, 1)
    with pytest.raises(ValueError):
        kth_perm_string(27, 1)


def test_next_combination_last_is_none():
    assert next_combination([3, 4, 5], 5) is None


def test_next_combination_does_not_mutate():
    comb = [1, 2, 3]
    following = next_combination(comb, 5)
    assert comb == [1, 2, 3]
    assert following == combinations(5, 3)[1]


@pytest.mark.parametrize("n,k", [(5, 2), (6, 3), (5, 5), (4, 1)])
def test_all_combinations_match_backtracking(n, k):
    assert list(all_combinations(n, k)) == combinations(n, k)