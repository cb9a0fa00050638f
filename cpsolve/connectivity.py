"""Connectivity problems on undirected graphs with 1-based vertices."""

from __future__ import annotations

from collections import deque
from typing import Iterable


Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Build 0-based undirected adjacency lists from 1-based edges."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    adj: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside [1, {n}]")
        adj[a - 1].append(b - 1)
        adj[b - 1].append(a - 1)
    return adj


def _mark_component(adj: list[list[int]], root: int, visited: list[bool]) -> None:
    visited[root] = True
    stack = [root]
    while stack:
        node = stack.pop()
        for child in adj[node]:
            if not visited[child]:
                visited[child] = True
                stack.append(child)


def building_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Roads to add so that every city is reachable from city 1.

    Each new road joins city 1 to the lowest-numbered city of a component
    not yet reached.
    """
    adj = _adjacency(n, edges)
    visited = [False] * n
    roads: list[Edge] = []
    for node in range(n):
        if visited[node]:
            continue
        if node:
            roads.append((1, node + 1))
        _mark_component(adj, node, visited)
    return roads


def building_teams(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Split pupils into teams 1 and 2 so that friends differ, or None."""
    adj = _adjacency(n, edges)
    teams = [0] * n
    for root in range(n):
        if teams[root]:
            continue
        teams[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for child in adj[node]:
                if not teams[child]:
                    teams[child] = 3 - teams[node]
                    queue.append(child)
                elif teams[child] == teams[node]:
                    return None
    return teams


def message_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Shortest route of computers from 1 to ``n``, or None if there is none."""
    adj = _adjacency(n, edges)
    if n == 0:
        return None
    target = n - 1
    visited = [False] * n
    parent = [0] * n
    visited[0] = True
    queue = deque([(0, 0)])
    length = None
    while queue and length is None:
        node, depth = queue.popleft()
        for child in adj[node]:
            if child == target:
                parent[child] = node
                length = depth + 1
                break
            if not visited[child]:
                visited[child] = True
                parent[child] = node
                queue.append((child, depth + 1))
    if length is None:
        return None
    route = [target]
    node = target
    for _ in range(length):
        node = parent[node]
        route.append(node)
    return [node + 1 for node in reversed(route)]


def round_trip(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """A cycle starting and ending at the same city, or None if there is none."""
    adj = _adjacency(n, edges)
    visited = [False] * n
    active = [False] * n
    parent = [-1] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = active[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    parent[child] = node
                    visited[child] = active[child] = True
                    stack.append((child, iter(adj[child])))
                    break
                if child != parent[node] and active[child]:
                    cycle = [child]
                    walk = node
                    while walk != child:
                        cycle.append(walk)
                        walk = parent[walk]
                    cycle.append(child)
                    return [city + 1 for city in cycle]
            else:
                stack.pop()
                active[node] = False
    return None