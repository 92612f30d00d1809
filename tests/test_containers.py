import random

import pytest
from sortedcontainers import SortedSet

from algokit.containers import (
    IdMap,
    MaxHeap,
    MinHeap,
    erase_max,
    erase_min,
    find_nearest,
    get_max,
    get_min,
    merge_sorted,
    random_between,
    split,
    unique_sorted,
)


@pytest.fixture
def data():
    rng = random.Random(7)
    return [rng.randint(-50, 50) for _ in range(40)]


def test_idmap_assigns_stable_consecutive_ids():
    ids = IdMap()
    keys = ["x", "y", "x", "z", "y"]
    first = [ids[k] for k in keys]
    assert first == [ids[k] for k in keys]
    assert len(ids) == len(set(keys))
    assert sorted({ids[k] for k in keys}) == list(range(1, len(ids) + 1))
    assert ids["x"] < ids["y"] < ids["z"]


def test_min_heap_pops_in_order(data):
    heap = MinHeap()
    for value in data:
        heap.push(value)
    assert heap.peek() == min(data)
    assert len(heap) == len(data)
    assert [heap.pop() for _ in range(len(data))] == sorted(data)


def test_max_heap_pops_in_order(data):
    heap = MaxHeap()
    for value in data:
        heap.push(value)
    assert heap.peek() == max(data)
    assert [heap.pop() for _ in range(len(data))] == sorted(data, reverse=True)
    assert len(heap) == 0


@pytest.mark.parametrize("heap_type", [MinHeap, MaxHeap])
def test_empty_heap_raises(heap_type):
    heap = heap_type()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_find_nearest_matches_minimal_distance(data):
    values = SortedSet(data)
    for target in range(-60, 61):
        found = find_nearest(values, target)
        assert found in values
        assert abs(found - target) == min(abs(v - target) for v in values)


def test_find_nearest_edges_and_tie():
    assert find_nearest({1, 5}, 3) == 5
    assert find_nearest({1, 5, 10}, -4) == 1
    assert find_nearest({1, 5, 10}, 40) == 10
    with pytest.raises(ValueError):
        find_nearest(set(), 3)


def test_merge_sorted(data):
    big, small = data[:30], data[30:]
    assert merge_sorted(big, small) == sorted(big + small)
    assert merge_sorted(small, big) == sorted(big + small)


@pytest.mark.parametrize("container", [set, SortedSet])
def test_min_max_and_erase(container, data):
    values = container(data)
    assert get_min(values) == min(data)
    assert get_max(values) == max(data)
    assert erase_min(values) == min(data)
    assert erase_max(values) == max(data)
    assert min(data) not in values and max(data) not in values
    assert len(values) == len(set(data)) - 2


@pytest.mark.parametrize("func", [get_min, get_max, erase_min, erase_max])
def test_empty_set_raises(func):
    with pytest.raises(ValueError):
        func(SortedSet())


def test_split_skips_empty_tokens():
    assert split("a,b;;c,", ",;") == ["a", "b", "c"]
    assert split(";;;", ";") == []
    assert split("alpha beta", "") == ["alpha beta"]


def test_unique_sorted(data):
    result = unique_sorted(data)
    assert result == sorted(set(data))


def test_random_between_bounds():
    rng = random.Random(1)
    ints = [random_between(3, 9, rng) for _ in range(200)]
    assert all(isinstance(v, int) and 3 <= v <= 9 for v in ints)
    floats = [random_between(-1.0, 1.0, rng) for _ in range(200)]
    assert all(isinstance(v, float) and -1.0 <= v <= 1.0 for v in floats)