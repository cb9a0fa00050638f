"""Grid problems: counting rooms, finding a path, escaping monsters."""

from __future__ import annotations

from collections import deque
from typing import Sequence

Cell = tuple[int, int]


def _parse(grid: Sequence[str]) -> list[list[str]]:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _find(rows: list[list[str]], mark: str) -> Cell:
    found = [(i, j) for i, row in enumerate(rows) for j, ch in enumerate(row) if ch == mark]
    if not found:
        raise ValueError(f"grid has no {mark!r} cell")
    return found[-1]


def _inside(rows: list[list[str]], i: int, j: int) -> bool:
    return 0 <= i < len(rows) and 0 <= j < len(rows[0])


def count_rooms(grid: Sequence[str]) -> int:
    """Number of connected regions of '.' floor cells."""
    rows = _parse(grid)
    rooms = 0
    for i, row in enumerate(rows):
        for j, ch in enumerate(row):
            if ch != ".":
                continue
            rooms += 1
            row[j] = "#"
            stack = [(i, j)]
            while stack:
                x, y = stack.pop()
                for nx, ny in ((x + 1, y), (x - 1, y), (x, y - 1), (x, y + 1)):
                    if _inside(rows, nx, ny) and rows[nx][ny] == ".":
                        rows[nx][ny] = "#"
                        stack.append((nx, ny))
    return rooms


def labyrinth(grid: Sequence[str]) -> str | None:
    """Shortest path of moves from 'A' to 'B' as a string of U/D/L/R, or None."""
    rows = _parse(grid)
    start = _find(rows, "A")
    rows[start[0]][start[1]] = "#"
    came_from: dict[Cell, tuple[Cell, str]] = {}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny, move in ((x + 1, y, "D"), (x - 1, y, "U"), (x, y + 1, "R"), (x, y - 1, "L")):
            if not _inside(rows, nx, ny):
                continue
            ch = rows[nx][ny]
            if ch == "B":
                moves = [move]
                cell = (x, y)
                while cell != start:
                    cell, step = came_from[cell]
                    moves.append(step)
                return "".join(reversed(moves))
            if ch == ".":
                rows[nx][ny] = "#"
                came_from[(nx, ny)] = ((x, y), move)
                queue.append((nx, ny))
    return None


def _on_border(rows: list[list[str]], cell: Cell) -> bool:
    i, j = cell
    return i in (0, len(rows) - 1) or j in (0, len(rows[0]) - 1)


def _escape_from(rows: list[list[str]], source: Cell) -> str | None:
    """Search from a border cell towards 'A'; give up on meeting a monster."""
    seen: set[Cell] = {source}
    parents: dict[Cell, Cell] = {}
    queue = deque([source])
    while queue:
        y, x = queue.popleft()
        moves = [(y - 1, x), (y + 1, x), (y, x - 1), (y, x + 1)]
        for cell in moves:
            if not _inside(rows, *cell) or cell in seen:
                continue
            ch = rows[cell[0]][cell[1]]
            if ch == ".":
                seen.add(cell)
                parents[cell] = (y, x)
                queue.append(cell)
            elif ch == "M":
                return None
            elif ch == "A":
                if any(_inside(rows, *m) and rows[m[0]][m[1]] == "M" for m in moves):
                    return None
                parents[cell] = (y, x)
                path = []
                vert = cell
                while not _on_border(rows, vert):
                    parent = parents[vert]
                    dy, dx = parent[0] - vert[0], parent[1] - vert[1]
                    if dx == 1:
                        path.append("R")
                    elif dx == -1:
                        path.append("L")
                    elif dy == 1:
                        path.append("D")
                    else:
                        path.append("U")
                    vert = parent
                return "".join(path)
    return None


def monsters(grid: Sequence[str]) -> str | None:
    """Moves that take 'A' out of the grid past the monsters, or None.

    An empty string means 'A' already stands on the border.
    """
    rows = _parse(grid)
    start = _find(rows, "A")
    if _on_border(rows, start):
        return ""
    borders = [
        (i, j)
        for i, row in enumerate(rows)
        for j, ch in enumerate(row)
        if ch == "." and _on_border(rows, (i, j))
    ]
    for source in borders:
        path = _escape_from(rows, source)
        if path is not None:
            return path
    return None