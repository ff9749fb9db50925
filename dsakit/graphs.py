"""Graph algorithms: shortest and longest paths, cycles, traversals and grid searches."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = [
    "Graph",
    "BfsResult",
    "longest_path",
    "find_cycle",
    "floyd_warshall",
    "has_negative_cycle",
    "max_area_of_island",
    "knight_shortest_path",
    "shortest_grid_path",
]

_KNIGHT_MOVES = ((2, 1), (1, 2), (1, -2), (2, -1), (-2, -1), (-1, -2), (-1, 2), (-2, 1))
_GRID_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def longest_path(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the heaviest path weight from node 1 to node n in a directed graph.

    Runs Bellman-Ford on negated weights. Returns -1 when a cycle of positive
    total weight is reachable from node 1, since the path is then unbounded.
    Raises ValueError when node n cannot be reached.
    """
    if n < 1:
        raise ValueError("n must be positive")
    negated = []
    for u, v, w in edges:
        _check_node(u, n)
        _check_node(v, n)
        negated.append((u, v, -w))
    dist: list[float] = [math.inf] * (n + 1)
    dist[1] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, w in negated:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break
    if any(dist[u] + w < dist[v] for u, v, w in negated):
        return -1
    if dist[n] == math.inf:
        raise ValueError(f"node {n} is not reachable from node 1")
    return int(-dist[n])


def find_cycle(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Find a cycle in an undirected graph with nodes 1..n.

    Returns the cycle as a closed walk whose first and last node are the same,
    or None when the graph is acyclic.
    """
    adj: dict[int, list[int]] = {v: [] for v in range(1, n + 1)}
    for x, y in edges:
        _check_node(x, n)
        _check_node(y, n)
        adj[x].append(y)
        adj[y].append(x)

    visiting, done = 1, 2
    color: dict[int, int] = {}
    parent: dict[int, int | None] = {}

    for root in adj:
        if root in color:
            continue
        color[root] = visiting
        parent[root] = None
        stack = [(root, iter(adj[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent[node]:
                    continue
                state = color.get(nxt)
                if state is None:
                    parent[nxt] = node
                    color[nxt] = visiting
                    stack.append((nxt, iter(adj[nxt])))
                    break
                if state == visiting:
                    cycle = [nxt]
                    walker: int | None = node
                    while walker != nxt:
                        cycle.append(walker)
                        walker = parent[walker]
                    cycle.append(nxt)
                    cycle.reverse()
                    return cycle
            else:
                color[node] = done
                stack.pop()
    return None


def floyd_warshall(
    n: int, edges: Iterable[tuple[int, int, float]]
) -> dict[int, dict[int, float]]:
    """Return all-pairs shortest distances for a directed graph on nodes 1..n.

    Unreachable pairs hold math.inf; dist[a][b] is the distance from a to b.
    """
    nodes = range(1, n + 1)
    dist: dict[int, dict[int, float]] = {
        i: {j: (0 if i == j else math.inf) for j in nodes} for i in nodes
    }
    for a, b, c in edges:
        _check_node(a, n)
        _check_node(b, n)
        dist[a][b] = min(dist[a][b], c)
    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            via = row_i[k]
            if via == math.inf:
                continue
            for j in nodes:
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    return dist


def has_negative_cycle(dist: dict[int, dict[int, float]]) -> bool:
    """Tell whether a Floyd-Warshall distance table shows a negative cycle."""
    return any(row[node] < 0 for node, row in dist.items())


@dataclass
class BfsResult:
    """Outcome of a breadth-first search."""

    order: list[int]
    distances: dict[int, int]
    parents: dict[int, int | None] = field(default_factory=dict)
    path: list[int] | None = None


class Graph:
    """Adjacency-list graph on vertices 1..vertex_count."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self.vertex_count = vertex_count
        self._adj: dict[int, list[int]] = {v: [] for v in range(1, vertex_count + 1)}

    def _check(self, vertex: int) -> None:
        if vertex not in self._adj:
            raise ValueError(f"vertex {vertex} is outside 1..{self.vertex_count}")

    def add_edge(self, u: int, v: int, undirected: bool = True) -> None:
        """Add an edge u -> v, and v -> u too when undirected."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        if undirected:
            self._adj[v].append(u)

    def __str__(self) -> str:
        lines = ["Graph Adjacency List"]
        lines.extend(
            f"{v} -> " + " ".join(map(str, nbrs)) for v, nbrs in self._adj.items()
        )
        return "\n".join(lines)

    def bfs(self, source: int, destination: int | None = None) -> BfsResult:
        """Breadth-first search from source.

        Distances count edges and cover reached vertices only. When a
        destination is given, the result holds a shortest path to it, or None
        if it cannot be reached.
        """
        self._check(source)
        distances = {source: 0}
        parents: dict[int, int | None] = {source: None}
        order: list[int] = []
        queue = deque([source])
        while queue:
            node = queue.popleft()
            order.append(node)
            for nxt in self._adj[node]:
                if nxt not in distances:
                    distances[nxt] = distances[node] + 1
                    parents[nxt] = node
                    queue.append(nxt)
        result = BfsResult(order=order, distances=distances, parents=parents)
        if destination is not None:
            self._check(destination)
            if destination in parents:
                path = []
                walker: int | None = destination
                while walker is not None:
                    path.append(walker)
                    walker = parents[walker]
                path.reverse()
                result.path = path
        return result

    def dfs(self, source: int) -> list[int]:
        """Return the depth-first visiting order from source."""
        self._check(source)
        visited = {source}
        order = [source]
        stack = [iter(self._adj[source])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self._adj[nxt]))
                    break
            else:
                stack.pop()
        return order

    def contains_cycle(self) -> bool:
        """Tell whether the undirected component holding vertex 1 has a cycle."""
        if not self._adj:
            return False
        visited = {1}
        stack: list[tuple[int, int | None, Iterable[int]]] = [(1, None, iter(self._adj[1]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, node, iter(self._adj[nxt])))
                    break
                if nxt != parent:
                    return True
            else:
                stack.pop()
        return False

    def contains_cycle_directed(self) -> bool:
        """Tell whether the graph, read as directed, has a cycle."""
        on_path, finished = 1, 2
        state: dict[int, int] = {}
        for start in self._adj:
            if start in state:
                continue
            state[start] = on_path
            stack = [(start, iter(self._adj[start]))]
            while stack:
                node, children = stack[-1]
                for child in children:
                    seen = state.get(child)
                    if seen == on_path:
                        return True
                    if seen is None:
                        state[child] = on_path
                        stack.append((child, iter(self._adj[child])))
                        break
                else:
                    state[node] = finished
                    stack.pop()
        return False


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest 4-connected group of non-zero cells."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    best = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if not cell or (r, c) in seen:
                continue
            seen.add((r, c))
            stack = [(r, c)]
            area = 0
            while stack:
                x, y = stack.pop()
                area += 1
                for dx, dy in _GRID_MOVES:
                    nx, ny = x + dx, y + dy
                    if (
                        0 <= nx < rows
                        and 0 <= ny < cols
                        and grid[nx][ny]
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
            best = max(best, area)
    return best


def knight_shortest_path(
    board: Sequence[str],
) -> tuple[int, list[tuple[int, int]]] | None:
    """Find the fewest knight moves from any 'K' cell to any 'T' cell.

    Returns (moves, path) where path runs from the starting knight to the
    target, or None when no target can be reached.
    """
    rows = len(board)
    cols = len(board[0]) if rows else 0
    if any(len(line) != cols for line in board):
        raise ValueError("board rows must all have the same length")

    knights = [(r, c) for r, line in enumerate(board) for c, ch in enumerate(line) if ch == "K"]
    targets = [(r, c) for r, line in enumerate(board) for c, ch in enumerate(line) if ch == "T"]

    dist: dict[tuple[int, int], int] = {}
    parent: dict[tuple[int, int], tuple[int, int] | None] = {}
    queue: deque[tuple[int, int]] = deque()
    for knight in knights:
        dist[knight] = 0
        parent[knight] = None
        queue.append(knight)

    while queue:
        x, y = queue.popleft()
        step = dist[(x, y)] + 1
        for dx, dy in _KNIGHT_MOVES:
            cell = (x + dx, y + dy)
            if 0 <= cell[0] < rows and 0 <= cell[1] < cols and cell not in dist:
                dist[cell] = step
                parent[cell] = (x, y)
                queue.append(cell)

    best: tuple[int, int] | None = None
    for target in targets:
        if target in dist and (best is None or dist[target] < dist[best]):
            best = target
    if best is None:
        return None

    path = []
    walker: tuple[int, int] | None = best
    while walker is not None:
        path.append(walker)
        walker = parent[walker]
    path.reverse()
    return dist[best], path


def shortest_grid_path(grid: Sequence[Sequence[int]]) -> int:
    """Return the least total cell cost from the top-left to the bottom-right cell.

    Both end cells count; moves go in the four axis directions.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    rows, cols = len(grid), len(grid[0])
    dist = {(0, 0): grid[0][0]}
    heap = [(grid[0][0], 0, 0)]
    while heap:
        cost, x, y = heapq.heappop(heap)
        if cost > dist[(x, y)]:
            continue
        for dx, dy in _GRID_MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols:
                candidate = cost + grid[nx][ny]
                if candidate < dist.get((nx, ny), math.inf):
                    dist[(nx, ny)] = candidate
                    heapq.heappush(heap, (candidate, nx, ny))
    return dist[(rows - 1, cols - 1)]