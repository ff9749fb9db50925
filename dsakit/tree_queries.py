"""Ancestor queries on rooted trees: binary lifting, LCA, path minima and diameter."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

__all__ = ["AncestorTable", "RootedTree", "WeightedTree", "tree_diameter"]

_Adjacency = list[list[tuple[int, float]]]


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _build_up(parent: list[int]) -> list[list[int]]:
    """Jump tables: up[j][v] is the 2**j-th ancestor of v, 0 when there is none."""
    levels = max(1, (len(parent) - 1).bit_length())
    up = [parent]
    for _ in range(1, levels):
        prev = up[-1]
        up.append([prev[prev[v]] for v in range(len(prev))])
    return up


def _climb(up: list[list[int]], node: int, k: int) -> int:
    for j in range(k.bit_length()):
        if (k >> j) & 1:
            node = up[j][node]
    return node


def _lca(up: list[list[int]], depth: list[int], a: int, b: int) -> int:
    if depth[a] > depth[b]:
        a, b = b, a
    b = _climb(up, b, depth[b] - depth[a])
    if a == b:
        return a
    for row in reversed(up):
        x, y = row[a], row[b]
        if x != y:
            a, b = x, y
    return up[0][a]


def _rooted(
    n: int, edges: Iterable[tuple[int, int, float]]
) -> tuple[_Adjacency, list[int], list[int], list[float]]:
    """Root a tree at node 1; return adjacency, parents, depths and parent-edge weights."""
    if n < 1:
        raise ValueError("n must be positive")
    adj: _Adjacency = [[] for _ in range(n + 1)]
    edge_count = 0
    for u, v, w in edges:
        _check_node(u, n)
        _check_node(v, n)
        adj[u].append((v, w))
        adj[v].append((u, w))
        edge_count += 1
    if edge_count != n - 1:
        raise ValueError(f"a tree on {n} nodes needs {n - 1} edges, got {edge_count}")
    parent = [0] * (n + 1)
    depth = [-1] * (n + 1)
    weight: list[float] = [math.inf] * (n + 1)
    depth[1] = 0
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for child, w in adj[node]:
            if depth[child] < 0:
                depth[child] = depth[node] + 1
                parent[child] = node
                weight[child] = w
                queue.append(child)
    if any(d < 0 for d in depth[1:]):
        raise ValueError("edges do not connect every node")
    return adj, parent, depth, weight


class AncestorTable:
    """Binary lifting over a parent array; answers k-th ancestor queries in O(log n).

    parents[i - 1] is the parent of node i, and 0 marks a node without one.
    """

    def __init__(self, parents: Sequence[int]) -> None:
        self.n = len(parents)
        parent0 = [0]
        for node, p in enumerate(parents, 1):
            if not 0 <= p <= self.n:
                raise ValueError(f"parent {p} of node {node} is outside 0..{self.n}")
            parent0.append(p)
        self._up = _build_up(parent0)

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """Return the node k steps above node, or None past the root."""
        _check_node(node, self.n)
        if k < 0:
            raise ValueError("k must be non-negative")
        if k.bit_length() > len(self._up):
            return None
        for j in range(k.bit_length()):
            if (k >> j) & 1:
                node = self._up[j][node]
                if node == 0:
                    return None
        return node


class RootedTree:
    """An unweighted tree on nodes 1..n, rooted at node 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        _, parent, depth, _ = _rooted(n, ((u, v, 1) for u, v in edges))
        self.n = n
        self._depth = depth
        self._table = AncestorTable(parent[1:])

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """Return the node k steps above node, or None past the root."""
        return self._table.kth_ancestor(node, k)

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of a and b."""
        _check_node(a, self.n)
        _check_node(b, self.n)
        return _lca(self._table._up, self._depth, a, b)

    def distance(self, a: int, b: int) -> int:
        """Return the number of edges on the path between a and b."""
        common = self.lca(a, b)
        return self._depth[a] + self._depth[b] - 2 * self._depth[common]


class WeightedTree:
    """A tree on nodes 1..n with weighted edges, rooted at node 1."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int, float]]) -> None:
        _, parent, depth, weight = _rooted(n, edges)
        self.n = n
        self._depth = depth
        self._up = _build_up(parent)
        mins = [weight]
        for j in range(1, len(self._up)):
            prev_min, prev_up = mins[-1], self._up[j - 1]
            mins.append([min(prev_min[v], prev_min[prev_up[v]]) for v in range(n + 1)])
        self._mins = mins

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of a and b."""
        _check_node(a, self.n)
        _check_node(b, self.n)
        return _lca(self._up, self._depth, a, b)

    def _climb_min(self, node: int, k: int) -> float:
        best: float = math.inf
        for j in range(k.bit_length()):
            if (k >> j) & 1:
                best = min(best, self._mins[j][node])
                node = self._up[j][node]
        return best

    def min_edge_on_path(self, a: int, b: int) -> float:
        """Return the lightest edge weight on the path a..b; math.inf when a == b."""
        common = self.lca(a, b)
        depth = self._depth
        return min(
            self._climb_min(a, depth[a] - depth[common]),
            self._climb_min(b, depth[b] - depth[common]),
        )


def _farthest(adj: _Adjacency, start: int) -> tuple[int, int]:
    dist = {start: 0}
    far, far_dist = start, 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt, _ in adj[node]:
            if nxt not in dist:
                dist[nxt] = dist[node] + 1
                if dist[nxt] >= far_dist:
                    far, far_dist = nxt, dist[nxt]
                queue.append(nxt)
    return far, far_dist


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of a tree on nodes 1..n."""
    adj, _, _, _ = _rooted(n, ((u, v, 1) for u, v in edges))
    if n == 1:
        return 0
    end, _ = _farthest(adj, 1)
    _, length = _farthest(adj, end)
    return length