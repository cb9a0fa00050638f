"""Problems on directed graphs: ordering, cycles, path counting, longest paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator

from .modmath import MOD

Edge = tuple[int, int]


def _directed(n: int, edges: Iterable[Edge]) -> tuple[list[list[int]], list[list[int]]]:
    """Build 0-based forward and reverse adjacency lists from 1-based edges."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    forward: list[list[int]] = [[] for _ in range(n)]
    backward: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside [1, {n}]")
        forward[a - 1].append(b - 1)
        backward[b - 1].append(a - 1)
    return forward, backward


def _postorder(adj: list[list[int]], roots: Iterable[int], visited: list[bool]) -> Iterator[int]:
    """Yield vertices in the order a depth-first search finishes them."""
    for root in roots:
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(adj[child])))
                    break
            else:
                stack.pop()
                yield node


_UNSEEN, _ACTIVE, _DONE = 0, 1, 2


def course_schedule(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Order courses so that each comes after its prerequisites, or None.

    An edge ``(a, b)`` means course ``a`` must come before course ``b``.
    """
    edges = list(edges)
    adj, _ = _directed(n, edges)
    if any(a == b for a, b in edges):
        return None
    state = [_UNSEEN] * n
    finished: list[int] = []
    for root in range(n):
        if state[root]:
            continue
        state[root] = _ACTIVE
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if state[child] == _UNSEEN:
                    state[child] = _ACTIVE
                    stack.append((child, iter(adj[child])))
                    break
                if state[child] == _ACTIVE:
                    return None
            else:
                stack.pop()
                state[node] = _DONE
                finished.append(node)
    return [node + 1 for node in reversed(finished)]


def round_trip_directed(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """A directed cycle that starts and ends at the same city, or None.

    Self-loops are not counted as round trips.
    """
    adj, _ = _directed(n, edges)
    state = [_UNSEEN] * n
    parent = [-1] * n
    for root in range(n):
        if state[root]:
            continue
        state[root] = _ACTIVE
        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if state[child] == _UNSEEN:
                    parent[child] = node
                    state[child] = _ACTIVE
                    stack.append((child, iter(adj[child])))
                    break
                if state[child] == _ACTIVE and child != node:
                    cycle = [node]
                    walk = parent[node]
                    while walk != child:
                        cycle.append(walk)
                        walk = parent[walk]
                    cycle.extend((child, node))
                    return [city + 1 for city in reversed(cycle)]
            else:
                stack.pop()
                state[node] = _DONE
    return None


def game_routes(n: int, edges: Iterable[Edge]) -> int:
    """Number of routes from level 1 to level ``n`` in an acyclic graph, modulo 10**9+7."""
    adj, backward = _directed(n, edges)
    if n < 1:
        raise ValueError("there must be at least one level")
    visited = [False] * n
    reached = list(_postorder(adj, [0], visited))
    order = [*reversed(reached), *(v for v in reversed(range(n)) if not visited[v])]
    paths = [0] * n
    paths[0] = 1
    for node in order:
        for before in backward[node]:
            paths[node] = (paths[node] + paths[before]) % MOD
    return paths[n - 1]


def longest_flight_route(n: int, edges: Iterable[Edge]) -> list[int] | None:
    """Route from city 1 to city ``n`` visiting the most cities, or None.

    The flights must form an acyclic graph; a cycle reachable from city 1
    raises ValueError.
    """
    adj, _ = _directed(n, edges)
    if n == 0:
        return None
    distance = [-1] * n
    parent = [-1] * n
    queue = deque([0])
    while queue:
        node = queue.popleft()
        reach = distance[node] + 1
        for child in adj[node]:
            if distance[child] < reach:
                if reach > n:
                    raise ValueError("flights contain a cycle")
                distance[child] = reach
                parent[child] = node
                queue.append(child)
    if distance[n - 1] == -1:
        return None
    route: list[int] = []
    node = n - 1
    while parent[node] != -1:
        route.append(node + 1)
        node = parent[node]
    route.append(1)
    return route[::-1]