"""Small container helpers: id assignment, heaps, ordered-set utilities."""

from __future__ import annotations

import heapq
import random
import re
from bisect import bisect_left
from itertools import groupby
from typing import Any, Generic, Hashable, Iterable, TypeVar

from sortedcontainers import SortedList, SortedSet

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_SORTED_TYPES = (SortedList, SortedSet)


class IdMap(Generic[K]):
    """Assigns consecutive ids, starting at 1, to keys in order of first lookup."""

    def __init__(self) -> None:
        self._ids: dict[K, int] = {}

    def __getitem__(self, key: K) -> int:
        return self._ids.setdefault(key, len(self._ids) + 1)

    def __len__(self) -> int:
        return len(self._ids)


class MinHeap(Generic[T]):
    """Priority queue that always yields its smallest item first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap: list[T] = list(items)
        heapq.heapify(self._heap)

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, item)

    def pop(self) -> T:
        if not self._heap:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._heap)

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty heap")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)


class _Reversed:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: "_Reversed") -> bool:
        return other.value < self.value


class MaxHeap(Generic[T]):
    """Priority queue that always yields its largest item first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._heap = MinHeap(_Reversed(item) for item in items)

    def push(self, item: T) -> None:
        self._heap.push(_Reversed(item))

    def pop(self) -> T:
        return self._heap.pop().value

    def peek(self) -> T:
        return self._heap.peek().value

    def __len__(self) -> int:
        return len(self._heap)


def _ordered(values: Iterable[T]):
    return values if isinstance(values, _SORTED_TYPES) else sorted(values)


def find_nearest(values: Iterable[T], target: T) -> T:
    """Return the element closest to target; on a tie the larger one wins."""
    ordered = _ordered(values)
    if not ordered:
        raise ValueError("find_nearest() of an empty collection")
    pos = bisect_left(ordered, target)
    if pos == 0:
        return ordered[0]
    if pos == len(ordered):
        return ordered[-1]
    right, left = ordered[pos], ordered[pos - 1]
    if target - left < right - target:
        return left
    return right


def merge_sorted(big: Iterable[T], small: Iterable[T]) -> list[T]:
    """Return the sorted merge of two collections, sorting either one if needed."""
    return list(heapq.merge(sorted(small), sorted(big)))


def get_min(values: Iterable[T]) -> T:
    """Smallest element of a non-empty set."""
    if not values:
        raise ValueError("get_min() of an empty set")
    if isinstance(values, _SORTED_TYPES):
        return values[0]
    return min(values)


def get_max(values: Iterable[T]) -> T:
    """Largest element of a non-empty set."""
    if not values:
        raise ValueError("get_max() of an empty set")
    if isinstance(values, _SORTED_TYPES):
        return values[-1]
    return max(values)


def erase_min(values) -> Any:
    """Remove and return the smallest element of a non-empty set."""
    if not values:
        raise ValueError("erase_min() of an empty set")
    if isinstance(values, _SORTED_TYPES):
        return values.pop(0)
    smallest = min(values)
    values.remove(smallest)
    return smallest


def erase_max(values) -> Any:
    """Remove and return the largest element of a non-empty set."""
    if not values:
        raise ValueError("erase_max() of an empty set")
    if isinstance(values, _SORTED_TYPES):
        return values.pop()
    largest = max(values)
    values.remove(largest)
    return largest


def split(text: str, separators: str) -> list[str]:
    """Split text on any of the separator characters, dropping empty tokens."""
    if not separators:
        return [text] if text else []
    pattern = "[" + re.escape(separators) + "]"
    return [token for token in re.split(pattern, text) if token]


def unique_sorted(values: Iterable[T]) -> list[T]:
    """Sorted list of the distinct values."""
    return [key for key, _ in groupby(sorted(values))]


def random_between(low, high, rng: random.Random | None = None):
    """Uniform random value in [low, high]: an int for int bounds, else a float."""
    generator = rng if rng is not None else random.Random()
    if isinstance(low, int) and isinstance(high, int):
        return generator.randint(low, high)
    return generator.uniform(low, high)