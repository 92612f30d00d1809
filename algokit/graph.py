"""Graph algorithms over adjacency lists whose nodes are numbered 0..n-1."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Sequence

INF = 10**18
"""Distance reported for nodes that cannot be reached."""


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def articulation_points(adj: Sequence[Sequence[int]]) -> list[int]:
    """Nodes of an undirected graph whose removal disconnects their component."""
    n = len(adj)
    order = [0] * n
    low = [0] * n
    points = [False] * n
    counter = 0
    for root in range(n):
        if order[root]:
            continue
        counter += 1
        order[root] = low[root] = counter
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nb in neighbours:
                if not order[nb]:
                    if node == root:
                        root_children += 1
                    counter += 1
                    order[nb] = low[nb] = counter
                    stack.append((nb, node, iter(adj[nb])))
                    break
                low[node] = min(low[node], order[nb])
            else:
                stack.pop()
                if stack:
                    up, up_parent, _ = stack[-1]
                    low[up] = min(low[up], low[node])
                    if up_parent != -1 and order[up] <= low[node]:
                        points[up] = True
        if root_children > 1:
            points[root] = True
    return [node for node, is_point in enumerate(points) if is_point]


def bellman_ford(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> tuple[list[int], bool]:
    """Shortest distances from source over directed (from, to, cost) edges.

    Returns the distances (INF where unreachable) and whether a negative
    cycle was detected.
    """
    edges = list(edges)
    dist = [INF] * n
    dist[source] = 0
    cycle = False
    for round_ in range(n + 1):
        for u, v, cost in edges:
            if dist[u] != INF and dist[u] + cost < dist[v]:
                dist[v] = dist[u] + cost
                if round_ == n:
                    cycle = True
    return dist, cycle


def bfs(adj: Sequence[Sequence[int]], source: int) -> list[int]:
    """Number of edges on a shortest path from source to each node, -1 if unreachable."""
    dist = [-1] * len(adj)
    dist[source] = 0
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def bridges(adj: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Edges of an undirected graph whose removal disconnects their component."""
    n = len(adj)
    order = [0] * n
    low = [0] * n
    counter = 0
    result: list[tuple[int, int]] = []
    for root in range(n):
        if order[root]:
            continue
        counter += 1
        order[root] = low[root] = counter
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nb in neighbours:
                if not order[nb]:
                    counter += 1
                    order[nb] = low[nb] = counter
                    stack.append((nb, node, iter(adj[nb])))
                    break
                if nb != parent:
                    low[node] = min(low[node], order[nb])
            else:
                stack.pop()
                if stack:
                    up = stack[-1][0]
                    low[up] = min(low[up], low[node])
                    if order[up] < low[node]:
                        result.append((up, node))
    return result


def dijkstra(
    adj: Sequence[Sequence[tuple[int, int]]], source: int
) -> tuple[list[int], list[int]]:
    """Shortest distances from source over non-negative (neighbour, cost) edges.

    Returns the distances (INF where unreachable) and each node's
    predecessor on its shortest path (-1 for the source and unreached nodes).
    """
    n = len(adj)
    dist = [INF] * n
    previous = [-1] * n
    done = [False] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        _, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, cost in adj[u]:
            if not done[v] and dist[v] > dist[u] + cost:
                dist[v] = dist[u] + cost
                previous[v] = u
                heapq.heappush(heap, (dist[v], v))
    return dist, previous


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """All-pairs shortest distances; each (u, v, cost) edge is undirected."""
    dp = [[0 if i == j else INF for j in range(n)] for i in range(n)]
    for u, v, cost in edges:
        dp[u][v] = min(dp[u][v], cost)
        dp[v][u] = min(dp[v][u], cost)
    for k in range(n):
        row_k = dp[k]
        for i in range(n):
            row_i = dp[i]
            through = row_i[k]
            if through >= INF:
                continue
            for j in range(n):
                if row_k[j] < INF and through + row_k[j] < row_i[j]:
                    row_i[j] = through + row_k[j]
    return dp


def scc_kosaraju(adj: Sequence[Sequence[int]]) -> list[list[int]]:
    """Strongly connected components, listed in topological order of the condensation."""
    n = len(adj)
    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nb in neighbours:
                if not visited[nb]:
                    visited[nb] = True
                    stack.append((nb, iter(adj[nb])))
                    break
            else:
                stack.pop()
                finished.append(node)

    radj: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            radj[v].append(u)

    visited = [False] * n
    components: list[list[int]] = []
    for start in reversed(finished):
        if visited[start]:
            continue
        visited[start] = True
        component = [start]
        stack = [iter(radj[start])]
        while stack:
            for nb in stack[-1]:
                if not visited[nb]:
                    visited[nb] = True
                    component.append(nb)
                    stack.append(iter(radj[nb]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def scc_tarjan(adj: Sequence[Sequence[int]]) -> list[int]:
    """Component index of every node; indices follow reverse topological order."""
    n = len(adj)
    pre = [-1] * n
    low: list[float] = [0] * n
    comp = [-1] * n
    pending: list[int] = []
    counter = 0
    components = 0
    for start in range(n):
        if pre[start] != -1:
            continue
        pre[start] = low[start] = counter
        counter += 1
        pending.append(start)
        calls = [(start, iter(adj[start]))]
        while calls:
            u, neighbours = calls[-1]
            for v in neighbours:
                if pre[v] == -1:
                    pre[v] = low[v] = counter
                    counter += 1
                    pending.append(v)
                    calls.append((v, iter(adj[v])))
                    break
                low[u] = min(low[u], low[v])
            else:
                calls.pop()
                if low[u] == pre[u]:
                    while True:
                        v = pending.pop()
                        low[v] = math.inf
                        comp[v] = components
                        if v == u:
                            break
                    components += 1
                if calls:
                    caller = calls[-1][0]
                    low[caller] = min(low[caller], low[u])
    return comp


def topological_sort_dfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Topological order of a directed graph; raises CycleError on a cycle."""
    n = len(adj)
    new, active, done = 0, 1, 2
    state = [new] * n
    postorder: list[int] = []
    for start in range(n):
        if state[start] != new:
            continue
        state[start] = active
        stack = [(start, iter(adj[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nb in neighbours:
                if state[nb] == active:
                    raise CycleError("graph has a cycle")
                if state[nb] == new:
                    state[nb] = active
                    stack.append((nb, iter(adj[nb])))
                    break
            else:
                stack.pop()
                state[node] = done
                postorder.append(node)
    postorder.reverse()
    return postorder


class KahnTopoSort:
    """Incrementally built directed graph sorted with Kahn's algorithm."""

    def __init__(self, n: int) -> None:
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._indegree = [0] * n
        self._order: list[int] = []
        self._solved = False
        self._cyclic = False

    def add_edge(self, source: int, target: int) -> None:
        self._adj[source].append(target)
        self._indegree[target] += 1
        self._solved = False
        self._cyclic = False

    def sort(self) -> list[int]:
        """Topological order, or an empty list if the graph has a cycle."""
        if not self._solved:
            indegree = list(self._indegree)
            queue = deque(i for i, d in enumerate(indegree) if d == 0)
            order: list[int] = []
            while queue:
                node = queue.popleft()
                order.append(node)
                for nb in self._adj[node]:
                    indegree[nb] -= 1
                    if indegree[nb] == 0:
                        queue.append(nb)
            self._solved = True
            self._cyclic = len(order) != len(self._adj)
            self._order = [] if self._cyclic else order
        return list(self._order)

    def is_cyclic(self) -> bool:
        self.sort()
        return self._cyclic