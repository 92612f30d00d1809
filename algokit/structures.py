"""Classic range-query and set data structures."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, Sequence, TypeVar

from sortedcontainers import SortedList

T = TypeVar("T")

NIL = 10**18
"""Neutral value for minimum queries; returned for ranges outside a tree."""


class DSU:
    """Disjoint-set union with path compression and union by size."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._sizes = [1] * n
        self._sets = n

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")

    def find(self, u: int) -> int:
        """Representative of the set holding u."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def unite(self, u: int, v: int) -> bool:
        """Join the sets of u and v; return False if they were already one."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._sizes[u] > self._sizes[v]:
            u, v = v, u
        self._parent[u] = v
        self._sizes[v] += self._sizes[u]
        self._sets -= 1
        return True

    def count(self, u: int) -> int:
        """Number of elements in the set holding u."""
        return self._sizes[self.find(u)]

    def __len__(self) -> int:
        return self._sets


class MinQueue:
    """FIFO queue that reports its minimum in O(1)."""

    def __init__(self) -> None:
        self._items: deque = deque()
        self._mins: deque = deque()

    def push(self, x) -> None:
        self._items.append(x)
        while self._mins and self._mins[-1] > x:
            self._mins.pop()
        self._mins.append(x)

    def pop(self):
        if not self._items:
            raise IndexError("pop from an empty queue")
        x = self._items.popleft()
        if x == self._mins[0]:
            self._mins.popleft()
        return x

    def min(self):
        if not self._mins:
            raise IndexError("min of an empty queue")
        return self._mins[0]

    def __len__(self) -> int:
        return len(self._items)


class PrefixSum(Generic[T]):
    """Immutable range sums over a sequence."""

    def __init__(self, values: Iterable[T]) -> None:
        self._sums = [0]
        for value in values:
            self._sums.append(self._sums[-1] + value)

    def query(self, left: int, right: int) -> T:
        """Sum of values[left..right], both ends inclusive."""
        n = len(self._sums) - 1
        if not 0 <= left <= right <= n - 1:
            raise IndexError(f"invalid range [{left}, {right}]")
        return self._sums[right + 1] - self._sums[left]


class PrefixSum2D(Generic[T]):
    """Immutable rectangle sums over a grid."""

    def __init__(self, grid: Sequence[Sequence[T]]) -> None:
        self._n = len(grid)
        self._m = len(grid[0]) if grid else 0
        if any(len(row) != self._m for row in grid):
            raise ValueError("grid rows must all have the same length")
        self._sums = [[0] * (self._m + 1) for _ in range(self._n + 1)]
        for i, row in enumerate(grid, start=1):
            above, current = self._sums[i - 1], self._sums[i]
            running = 0
            for j, value in enumerate(row, start=1):
                running += value
                current[j] = above[j] + running

    def query(self, x1: int, y1: int, x2: int, y2: int) -> T:
        """Sum of the rectangle with corners (x1, y1) and (x2, y2), inclusive."""
        for x, y in ((x1, y1), (x2, y2)):
            if not (0 <= x < self._n and 0 <= y < self._m):
                raise IndexError(f"cell ({x}, {y}) out of range")
        s = self._sums
        return s[x2 + 1][y2 + 1] - s[x1][y2 + 1] - s[x2 + 1][y1] + s[x1][y1]


class SegmentTree:
    """Point-assign, range-minimum tree over positions low..high."""

    def __init__(self, low: int, high: int) -> None:
        if high < low:
            raise ValueError("high must not be below low")
        self._low = low
        self._n = high - low + 1
        self._tree = [NIL] * (2 * self._n)

    def modify(self, pos: int, value: int) -> None:
        i = pos - self._low
        if not 0 <= i < self._n:
            raise IndexError(f"position {pos} out of range")
        i += self._n
        self._tree[i] = value
        while i > 1:
            i //= 2
            self._tree[i] = min(self._tree[2 * i], self._tree[2 * i + 1])

    def query(self, left: int, right: int) -> int:
        """Minimum over positions left..right; NIL where nothing overlaps."""
        lo = max(left - self._low, 0) + self._n
        hi = min(right - self._low, self._n - 1) + self._n + 1
        best = NIL
        while lo < hi:
            if lo & 1:
                best = min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


class LazySegmentTree:
    """Range-add, range-minimum tree over positions low..high, all starting at 0."""

    def __init__(self, low: int, high: int) -> None:
        if high < low:
            raise ValueError("high must not be below low")
        self._low, self._high = low, high
        size = 4 * (high - low + 1)
        self._min = [0] * size
        self._lazy = [0] * size

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        if pending:
            for child in (2 * node, 2 * node + 1):
                self._min[child] += pending
                self._lazy[child] += pending
            self._lazy[node] = 0

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every position in left..right."""
        self._add(1, self._low, self._high, left, right, value)

    def _add(self, node: int, l: int, r: int, a: int, b: int, v: int) -> None:
        if a > r or b < l:
            return
        if a <= l and r <= b:
            self._min[node] += v
            self._lazy[node] += v
            return
        self._push(node)
        m = (l + r) // 2
        self._add(2 * node, l, m, a, b, v)
        self._add(2 * node + 1, m + 1, r, a, b, v)
        self._min[node] = min(self._min[2 * node], self._min[2 * node + 1])

    def query(self, left: int, right: int) -> int:
        """Minimum over positions left..right; NIL where nothing overlaps."""
        return self._query(1, self._low, self._high, left, right)

    def _query(self, node: int, l: int, r: int, a: int, b: int) -> int:
        if a > r or b < l:
            return NIL
        if a <= l and r <= b:
            return self._min[node]
        self._push(node)
        m = (l + r) // 2
        return min(
            self._query(2 * node, l, m, a, b),
            self._query(2 * node + 1, m + 1, r, a, b),
        )


class SparseTable:
    """Static range-minimum queries in O(1) after O(n log n) building."""

    def __init__(self, values: Iterable) -> None:
        level = list(values)
        self._n = len(level)
        self._table = [level]
        width = 1
        while 2 * width <= self._n:
            prev = self._table[-1]
            self._table.append(
                [min(a, b) for a, b in zip(prev, prev[width:])]
            )
            width *= 2

    def query(self, left: int, right: int):
        """Minimum of values[left..right], both ends inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}]")
        j = (right - left + 1).bit_length() - 1
        row = self._table[j]
        return min(row[left], row[right - (1 << j) + 1])


def _select(items: SortedList, index: int):
    if not 0 <= index < len(items):
        raise IndexError(f"order {index} out of range")
    return items[index]


class IndexedSet:
    """Sorted set with rank and select queries."""

    def __init__(self, iterable: Iterable | None = None) -> None:
        self._items = SortedList()
        for key in iterable or ():
            self.add(key)

    def add(self, key) -> None:
        if key not in self._items:
            self._items.add(key)

    def discard(self, key) -> None:
        """Remove key, if present."""
        self._items.discard(key)

    def find_by_order(self, index: int):
        """Element at 0-based position index in sorted order."""
        return _select(self._items, index)

    def order_of_key(self, key) -> int:
        """Number of elements strictly smaller than key."""
        return self._items.bisect_left(key)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator:
        return iter(self._items)


class IndexedMultiset:
    """Sorted multiset with rank and select queries."""

    def __init__(self, iterable: Iterable | None = None) -> None:
        self._items = SortedList(iterable or ())

    def add(self, key) -> None:
        self._items.add(key)

    def discard(self, key) -> None:
        """Remove one occurrence of key, if present."""
        self._items.discard(key)

    def find_by_order(self, index: int):
        """Element at 0-based position index in sorted order."""
        return _select(self._items, index)

    def order_of_key(self, key) -> int:
        """Number of elements strictly smaller than key."""
        return self._items.bisect_left(key)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator:
        return iter(self._items)