"""Strong connectivity: route checks, kingdoms and a 2-SAT pizza."""

from __future__ import annotations

from typing import Iterable, Iterator

Edge = tuple[int, int]
Wish = tuple[str, int, str, int]


def _graphs(n: int, edges: Iterable[Edge]) -> tuple[list[list[int]], list[list[int]]]:
    """Forward and reverse adjacency lists indexed by 1-based vertex."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    forward: list[list[int]] = [[] for _ in range(n + 1)]
    backward: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside [1, {n}]")
        forward[a].append(b)
        backward[b].append(a)
    return forward, backward


def _finish_order(adj: list[list[int]], roots: Iterable[int]) -> Iterator[int]:
    """Yield vertices as a depth-first search from ``roots`` finishes them."""
    visited = [False] * len(adj)
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


def _label_components(adj: list[list[int]], order: Iterable[int]) -> list[int]:
    """Tag everything reachable from each untagged vertex of ``order`` with 1, 2, ..."""
    labels = [0] * len(adj)
    tag = 0
    for root in order:
        if labels[root]:
            continue
        tag += 1
        labels[root] = tag
        stack = [root]
        while stack:
            node = stack.pop()
            for child in adj[node]:
                if not labels[child]:
                    labels[child] = tag
                    stack.append(child)
    return labels


def _components(
    forward: list[list[int]], backward: list[list[int]], vertices: range
) -> list[int]:
    """Kosaraju labels; label 1 is a sink component of the forward graph."""
    order = list(_finish_order(backward, vertices))
    return _label_components(forward, reversed(order))


def flights_route_check(n: int, edges: Iterable[Edge]) -> tuple[int, int] | None:
    """Return None if every city reaches every other, else a pair ``(a, b)``
    such that there is no route from ``a`` to ``b``."""
    if n < 1:
        raise ValueError("there must be at least one city")
    forward, backward = _graphs(n, edges)
    hub = list(_finish_order(backward, range(1, n + 1)))[-1]
    reached = set(_finish_order(forward, [hub]))
    missing = next((city for city in range(1, n + 1) if city not in reached), None)
    return None if missing is None else (hub, missing)


def planets_and_kingdoms(n: int, edges: Iterable[Edge]) -> tuple[int, list[int]]:
    """Number of kingdoms (strongly connected components) and each planet's kingdom."""
    forward, backward = _graphs(n, edges)
    labels = _components(forward, backward, range(1, n + 1))[1:]
    return max(labels, default=0), labels


def giant_pizza(toppings: int, wishes: Iterable[Wish]) -> str | None:
    """Choose each topping so that every wish holds, or None if impossible.

    Each wish is ``(sign, topping, sign, topping)`` where a sign of ``"+"``
    asks for the topping and ``"-"`` asks to leave it out; a wish holds if at
    least one of its two parts does. The answer has one ``"+"`` or ``"-"``
    per topping.
    """
    if toppings < 0:
        raise ValueError(f"toppings must be non-negative, got {toppings}")
    size = 2 * toppings

    def literal(sign: str, topping: int) -> int:
        if not 1 <= topping <= toppings:
            raise ValueError(f"topping {topping} is outside [1, {toppings}]")
        if sign == "+":
            return topping
        if sign == "-":
            return topping + toppings
        raise ValueError(f"sign must be '+' or '-', got {sign!r}")

    def negate(node: int) -> int:
        return node - toppings if node > toppings else node + toppings

    implications: list[Edge] = []
    for first_sign, first, second_sign, second in wishes:
        a = literal(first_sign, first)
        b = literal(second_sign, second)
        implications += [(negate(a), b), (negate(b), a)]

    forward, backward = _graphs(size, implications)
    labels = _components(forward, backward, range(1, size + 1))
    choice = []
    for topping in range(1, toppings + 1):
        want, skip = labels[topping], labels[topping + toppings]
        if want == skip:
            return None
        choice.append("+" if want < skip else "-")
    return "".join(choice)