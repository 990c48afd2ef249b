"""Graph algorithms: connected components and minimum spanning trees."""

from __future__ import annotations

import math
from typing import Iterable, Sequence


class DisjointSet:
    """Disjoint sets over 0..n-1 with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements must not be negative")
        self._parent = [-1] * n
        self._rank = [1] * n

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        root = i
        while self._parent[root] != -1:
            root = self._parent[root]
        while self._parent[i] != -1:
            self._parent[i], i = root, self._parent[i]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        s1 = self.find(x)
        s2 = self.find(y)
        if s1 == s2:
            return
        if self._rank[s1] < self._rank[s2]:
            self._parent[s1] = s2
            self._rank[s2] += self._rank[s2]
        else:
            self._parent[s2] = s1
            self._rank[s1] += self._rank[s1]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def connected_components(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return the connected components of an undirected graph.

    Edges are (u, v) or (u, v, weight); weights are ignored. Components are
    listed by their smallest vertex, each in depth-first visiting order.
    """
    if vertex_count < 0:
        raise ValueError("the number of vertices must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for edge in edges:
        u, v = edge[0], edge[1]
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * vertex_count
    components: list[list[int]] = []
    for start in range(vertex_count):
        if visited[start]:
            continue
        component = [start]
        visited[start] = True
        stack = [iter(adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    component.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def kruskal_mst(vertex_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the total weight of a minimum spanning forest.

    Edges are (x, y, weight) triples.
    """
    ordered = sorted((w, x, y) for x, y, w in edges)
    for _, x, y in ordered:
        _check_vertex(x, vertex_count)
        _check_vertex(y, vertex_count)
    sets = DisjointSet(vertex_count)
    total = 0
    for w, x, y in ordered:
        if sets.find(x) != sets.find(y):
            sets.unite(x, y)
            total += w
    return total


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Return the edges (parent, vertex, weight) of a minimum spanning tree.

    ``matrix`` is a symmetric adjacency matrix where 0 means no edge. The tree
    grows from vertex 0; one edge is listed for each vertex 1..n-1.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    if n == 0:
        return []
    value = [math.inf] * n
    parent = [-1] * n
    in_tree = [False] * n
    value[0] = 0

    for _ in range(n - 1):
        candidates = [i for i in range(n) if not in_tree[i] and value[i] < math.inf]
        if not candidates:
            raise ValueError("the graph is not connected")
        u = min(candidates, key=value.__getitem__)
        in_tree[u] = True
        for j, weight in enumerate(matrix[u]):
            if weight != 0 and not in_tree[j] and weight < value[j]:
                value[j] = weight
                parent[j] = u

    if any(v == math.inf for v in value):
        raise ValueError("the graph is not connected")
    return [(parent[i], i, matrix[parent[i]][i]) for i in range(1, n)]