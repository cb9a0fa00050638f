"""Walks in graphs where every vertex has exactly one successor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

Query = tuple[int, int]


class SuccessorGraph:
    """Binary lifting over 1-based successors, answering k-step walks."""

    def __init__(self, successors: Iterable[int]) -> None:
        targets = tuple(successors)
        size = len(targets)
        for target in targets:
            if not 1 <= target <= size:
                raise ValueError(f"successor {target} is outside [1, {size}]")
        self.successors = targets
        self._jumps = [[0, *targets]]

    def __len__(self) -> int:
        return len(self.successors)

    def _level(self, j: int) -> list[int]:
        while len(self._jumps) <= j:
            previous = self._jumps[-1]
            self._jumps.append([previous[p] for p in previous])
        return self._jumps[j]

    def _check(self, x: int) -> None:
        if not 1 <= x <= len(self):
            raise ValueError(f"vertex {x} is outside [1, {len(self)}]")

    def walk(self, x: int, k: int) -> int:
        """Vertex reached from ``x`` after ``k`` steps."""
        self._check(x)
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        for j in range(k.bit_length()):
            if k >> j & 1:
                x = self._level(j)[x]
        return x


@dataclass
class _Structure:
    depth: list[int]
    entry: list[int]
    cycle: list[int]
    position: list[int]
    lengths: list[int]


def _structure(graph: SuccessorGraph) -> _Structure:
    """Distance to the cycle, cycle entry, cycle id and position for each vertex."""
    n = len(graph)
    succ = (0, *graph.successors)
    depth = [-1] * (n + 1)
    entry = [0] * (n + 1)
    cycle = [0] * (n + 1)
    position = [0] * (n + 1)
    lengths = [0]
    for start in range(1, n + 1):
        if depth[start] != -1:
            continue
        path: list[int] = []
        index: dict[int, int] = {}
        node = start
        while depth[node] == -1 and node not in index:
            index[node] = len(path)
            path.append(node)
            node = succ[node]
        if depth[node] == -1:
            loop = path[index[node]:]
            lengths.append(len(loop))
            cid = len(lengths) - 1
            for pos, v in enumerate(loop):
                depth[v] = 0
                entry[v] = v
                cycle[v] = cid
                position[v] = pos
            path = path[: index[node]]
        for v in reversed(path):
            nxt = succ[v]
            depth[v] = depth[nxt] + 1
            entry[v] = entry[nxt]
            cycle[v] = cycle[nxt]
    return _Structure(depth, entry, cycle, position, lengths)


def planetary_queries(successors: Iterable[int], queries: Iterable[Query]) -> list[int]:
    """For each ``(x, k)``, the planet reached from ``x`` after ``k`` teleports."""
    graph = SuccessorGraph(successors)
    return [graph.walk(x, k) for x, k in queries]


def planetary_queries_2(successors: Iterable[int], queries: Iterable[Query]) -> list[int]:
    """For each ``(a, b)``, the fewest teleports from ``a`` to ``b``, or -1."""
    graph = SuccessorGraph(successors)
    info = _structure(graph)
    answers = []
    for a, b in queries:
        graph._check(a)
        graph._check(b)
        if info.depth[b] > 0:
            gap = info.depth[a] - info.depth[b]
            answers.append(gap if gap >= 0 and graph.walk(a, gap) == b else -1)
        elif info.cycle[a] != info.cycle[b]:
            answers.append(-1)
        else:
            length = info.lengths[info.cycle[a]]
            offset = (info.position[b] - info.position[info.entry[a]]) % length
            answers.append(info.depth[a] + offset)
    return answers