"""Shortest and longest paths on weighted graphs with 1-based vertices."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Iterable, Sequence

WeightedEdge = tuple[int, int, int]
Query = tuple[int, int]


def _weighted_edges(n: int, edges: Iterable[WeightedEdge]) -> list[WeightedEdge]:
    """Validate 1-based weighted edges and return them 0-based."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    result = []
    for a, b, weight in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside [1, {n}]")
        result.append((a - 1, b - 1, weight))
    return result


def _adjacency(
    n: int, edges: Iterable[WeightedEdge], *, reverse: bool = False
) -> list[list[tuple[int, int]]]:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, weight in edges:
        if reverse:
            adj[b].append((a, weight))
        else:
            adj[a].append((b, weight))
    return adj


def _reachable(n: int, edges: Iterable[WeightedEdge], start: int, *, reverse: bool) -> set[int]:
    adj = _adjacency(n, edges, reverse=reverse)
    seen = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for child, _ in adj[node]:
            if child not in seen:
                seen.add(child)
                queue.append(child)
    return seen


def dijkstra(
    adjacency: Sequence[Sequence[tuple[int, int]]], start: int
) -> list[int | None]:
    """Distances from ``start`` over 0-based ``(target, weight)`` adjacency lists.

    Unreachable vertices get None. Weights must be non-negative.
    """
    size = len(adjacency)
    if not 0 <= start < size:
        raise ValueError(f"start {start} is outside [0, {size})")
    distance: list[int | None] = [None] * size
    distance[start] = 0
    heap = [(0, start)]
    while heap:
        d_u, u = heapq.heappop(heap)
        if d_u > distance[u]:  # type: ignore[operator]
            continue
        for v, weight in adjacency[u]:
            if weight < 0:
                raise ValueError(f"negative weight {weight} on edge ({u}, {v})")
            candidate = d_u + weight
            current = distance[v]
            if current is None or candidate < current:
                distance[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distance


def shortest_routes_1(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Shortest distance from city 1 to every city along one-way flights."""
    checked = _weighted_edges(n, edges)
    return dijkstra(_adjacency(n, checked), 0)


def floyd_warshall(n: int, edges: Iterable[WeightedEdge]) -> list[list[int | None]]:
    """All-pairs shortest distances over two-way roads; None where unreachable."""
    checked = _weighted_edges(n, edges)
    dist: list[list[int | None]] = [[None] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for a, b, weight in checked:
        if weight < 0:
            raise ValueError(f"negative weight {weight} on road ({a + 1}, {b + 1})")
        if a == b:
            continue
        current = dist[a][b]
        if current is None or weight < current:
            dist[a][b] = dist[b][a] = weight
    for k in range(n):
        row_k = dist[k]
        for row_i in dist:
            d_ik = row_i[k]
            if d_ik is None:
                continue
            for j, d_kj in enumerate(row_k):
                if d_kj is None:
                    continue
                candidate = d_ik + d_kj
                current = row_i[j]
                if current is None or candidate < current:
                    row_i[j] = candidate
    return dist


def shortest_routes_2(
    n: int, edges: Iterable[WeightedEdge], queries: Iterable[Query]
) -> list[int]:
    """Answer distance queries over two-way roads; -1 where there is no route."""
    dist = floyd_warshall(n, edges)
    answers = []
    for a, b in queries:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) has a city outside [1, {n}]")
        d = dist[a - 1][b - 1]
        answers.append(-1 if d is None else d)
    return answers


def flight_discount(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Cheapest route from city 1 to city ``n`` when one flight's price is halved.

    Halving rounds down. Returns None if city ``n`` cannot be reached.
    """
    checked = _weighted_edges(n, edges)
    from_first = dijkstra(_adjacency(n, checked), 0)
    to_last = dijkstra(_adjacency(n, checked, reverse=True), n - 1)
    candidates = [
        d_a + d_b + weight // 2
        for a, b, weight in checked
        if (d_a := from_first[a]) is not None and (d_b := to_last[b]) is not None
    ]
    return min(candidates, default=None)


def bellman_ford(n: int, edges: Iterable[WeightedEdge], start: int) -> list[int | None]:
    """Distances from the 1-based ``start``; weights may be negative.

    Raises ValueError if a negative cycle can be reached from ``start``.
    """
    checked = _weighted_edges(n, edges)
    if not 1 <= start <= n:
        raise ValueError(f"start {start} is outside [1, {n}]")
    dist: list[int | None] = [None] * n
    dist[start - 1] = 0
    for _ in range(n - 1):
        changed = False
        for a, b, weight in checked:
            d_a = dist[a]
            if d_a is None:
                continue
            current = dist[b]
            if current is None or d_a + weight < current:
                dist[b] = d_a + weight
                changed = True
        if not changed:
            break
    for a, b, weight in checked:
        d_a = dist[a]
        if d_a is not None and d_a + weight < dist[b]:  # type: ignore[operator]
            raise ValueError("a negative cycle is reachable from the start")
    return dist


def high_score(n: int, edges: Iterable[WeightedEdge]) -> int | None:
    """Largest total score on a route from room 1 to room ``n``.

    Returns None if the score can be made arbitrarily large; raises
    ValueError if room ``n`` cannot be reached.
    """
    checked = _weighted_edges(n, edges)
    negated = [(a, b, -score) for a, b, score in checked]
    useful = _reachable(n, checked, 0, reverse=False) & _reachable(
        n, checked, n - 1, reverse=True
    )
    if n - 1 not in useful:
        raise ValueError(f"room {n} cannot be reached from room 1")
    dist: list[int | None] = [None] * n
    dist[0] = 0
    for _ in range(n - 1):
        changed = False
        for a, b, weight in negated:
            d_a = dist[a]
            if d_a is None:
                continue
            current = dist[b]
            if current is None or d_a + weight < current:
                dist[b] = d_a + weight
                changed = True
        if not changed:
            break
    for a, b, weight in negated:
        d_a = dist[a]
        if d_a is not None and b in useful and d_a + weight < dist[b]:  # type: ignore[operator]
            return None
    return -dist[n - 1]  # type: ignore[operator]


def find_negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """A cycle of negative total weight as 1-based vertices, first equal to last.

    Returns None if the graph has no negative cycle.
    """
    checked = _weighted_edges(n, edges)
    dist = [0] * n
    parent = [-1] * n
    last = None
    for _ in range(n):
        last = None
        for a, b, weight in checked:
            if dist[a] + weight < dist[b]:
                dist[b] = dist[a] + weight
                parent[b] = a
                last = b
        if last is None:
            return None
    for _ in range(n):
        last = parent[last]
    cycle = [last]
    node = parent[last]
    while node != last:
        cycle.append(node)
        node = parent[node]
    cycle.append(last)
    return [vertex + 1 for vertex in reversed(cycle)]