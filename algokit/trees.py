"""Algorithms on rooted trees given as undirected adjacency lists."""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Sequence


def _walk(adj: Sequence[Sequence[int]], root: int) -> Iterator[tuple[bool, int, int]]:
    """Depth-first events (entering, node, parent) in recursive visiting order."""
    yield True, root, -1
    stack = [(root, -1, iter(adj[root]))]
    while stack:
        node, parent, children = stack[-1]
        for child in children:
            if child != parent:
                yield True, child, node
                stack.append((child, node, iter(adj[child])))
                break
        else:
            stack.pop()
            yield False, node, parent


class BinaryLifting:
    """Ancestor jumps and lowest common ancestors in O(log n)."""

    def __init__(self, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        self.root = root
        self.depth = [0] * n
        self._log = max(1, n.bit_length())
        self._up = [[root] * n for _ in range(self._log)]
        self._tin = [0] * n
        self._tout = [0] * n
        timer = 0
        for entering, node, parent in _walk(adj, root):
            timer += 1
            if not entering:
                self._tout[node] = timer
                continue
            self._tin[node] = timer
            if parent != -1:
                self.depth[node] = self.depth[parent] + 1
                self._up[0][node] = parent
            for i in range(1, self._log):
                self._up[i][node] = self._up[i - 1][self._up[i - 1][node]]

    def is_ancestor(self, u: int, v: int) -> bool:
        """True if u lies on the path from the root to v (u itself included)."""
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for level in reversed(self._up):
            if not self.is_ancestor(level[u], v):
                u = level[u]
        return self._up[0][u]

    def jump(self, node: int, k: int) -> int | None:
        """The ancestor k levels above node, or None if that is above the root."""
        if k < 0:
            raise ValueError("k must not be negative")
        if k > self.depth[node]:
            return None
        for i in range(k.bit_length()):
            if (k >> i) & 1:
                node = self._up[i][node]
        return node

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between u and v."""
        return self.depth[u] + self.depth[v] - 2 * self.depth[self.lca(u, v)]


def distinct_colors(
    adj: Sequence[Sequence[int]], colors: Sequence[Hashable], root: int = 0
) -> list[int]:
    """Number of distinct colours in each node's subtree, merging small into large."""
    n = len(adj)
    answer = [0] * n
    sets: list[set | None] = [None] * n
    for entering, node, parent in _walk(adj, root):
        if entering:
            sets[node] = {colors[node]}
            continue
        child_set = sets[node]
        answer[node] = len(child_set)
        if parent != -1:
            parent_set = sets[parent]
            if len(child_set) > len(parent_set):
                child_set, parent_set = parent_set, child_set
            parent_set.update(child_set)
            sets[parent] = parent_set
            sets[node] = None
    return answer


def tree_diameter(adj: Sequence[Sequence[int]]) -> int:
    """Number of edges on the longest path of the tree."""
    n = len(adj)
    if n == 0:
        return 0
    first = [0] * n
    second = [0] * n
    best = 0
    for entering, node, parent in _walk(adj, 0):
        if entering:
            continue
        best = max(best, first[node] + second[node])
        if parent != -1:
            height = first[node] + 1
            if height >= first[parent]:
                second[parent] = first[parent]
                first[parent] = height
            elif height >= second[parent]:
                second[parent] = height
    return best


def path_counts(
    adj: Sequence[Sequence[int]], paths: Iterable[tuple[int, int]]
) -> list[int]:
    """For each node, how many of the given (u, v) paths pass through it."""
    n = len(adj)
    if n == 0:
        return []
    lifting = BinaryLifting(adj, 0)
    diff = [0] * n
    for u, v in paths:
        anc = lifting.lca(u, v)
        diff[u] += 1
        diff[v] += 1
        diff[anc] -= 1
        above = lifting.jump(anc, 1)
        if above is not None:
            diff[above] -= 1
    answer = list(diff)
    for entering, node, parent in _walk(adj, 0):
        if not entering and parent != -1:
            answer[parent] += answer[node]
    return answer


def euler_tour(adj: Sequence[Sequence[int]], root: int = 0) -> list[int]:
    """Nodes in visiting order, repeating a node after each child returns."""
    tour: list[int] = []
    for entering, node, parent in _walk(adj, root):
        if entering:
            tour.append(node)
        elif parent != -1:
            tour.append(parent)
    return tour


def subtree_ranges(
    adj: Sequence[Sequence[int]], root: int = 0
) -> list[tuple[int, int]]:
    """(start, end) preorder positions per node; a subtree occupies start..end."""
    n = len(adj)
    start = [0] * n
    end = [0] * n
    timer = 0
    for entering, node, _ in _walk(adj, root):
        if entering:
            start[node] = timer
            timer += 1
        else:
            end[node] = timer - 1
    return list(zip(start, end))