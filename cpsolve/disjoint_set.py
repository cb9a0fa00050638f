"""Disjoint sets with union by rank, and the road problems built on them."""

from __future__ import annotations

from typing import Iterable

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


class DisjointSet:
    """Union-find over the elements ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._height = [0] * size
        self._size = [1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} is outside [0, {len(self._parent)})")

    def find(self, u: int) -> int:
        """Return the representative of the set holding ``u``."""
        self._check(u)
        parent = self._parent
        root = u
        while parent[root] != root:
            root = parent[root]
        while parent[u] != root:
            following = parent[u]
            parent[u] = root
            u = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; return False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._height[u] > self._height[v]:
            u, v = v, u
        elif self._height[u] == self._height[v]:
            self._height[v] += 1
        self._parent[u] = v
        self._size[v] += self._size[u]
        return True

    def component_size(self, u: int) -> int:
        """Number of elements in the set holding ``u``."""
        return self._size[self.find(u)]


def _check_vertex(a: int, b: int, n: int) -> None:
    if not (1 <= a <= n and 1 <= b <= n):
        raise ValueError(f"edge ({a}, {b}) has a vertex outside [1, {n}]")


def road_construction(n: int, edges: Iterable[Edge]) -> list[tuple[int, int]]:
    """After each new road, the number of components and the largest one's size."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    cities = DisjointSet(n + 1)
    components = n
    largest = 1 if n else 0
    report = []
    for a, b in edges:
        _check_vertex(a, b, n)
        if cities.union(a, b):
            components -= 1
            largest = max(largest, cities.component_size(a))
        report.append((components, largest))
    return report


def road_reparation(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Least total cost of repairs connecting every city, or None if impossible."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    ordered = []
    for a, b, cost in edges:
        _check_vertex(a, b, n)
        ordered.append((cost, a, b))
    ordered.sort()
    cities = DisjointSet(n + 1)
    total = 0
    joined = 0
    for cost, a, b in ordered:
        if joined >= n - 1:
            break
        if cities.union(a, b):
            total += cost
            joined += 1
    return total if joined >= n - 1 else None