import pytest

from cpsolve.grids import count_rooms, labyrinth, monsters

MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def _walk(grid, path):
    i, j = next((i, j) for i, row in enumerate(grid) for j, ch in enumerate(row) if ch == "A")
    for step in path:
        di, dj = MOVES[step]
        i, j = i + di, j + dj
        assert 0 <= i < len(grid) and 0 <= j < len(grid[0])
        assert grid[i][j] != "#"
    return i, j


ROOMS = [
    "########",
    "#..#...#",
    "####.#.#",
    "#..#...#",
    "########",
]

MAZE = [
    "########",
    "#.A#...#",
    "#.##.#B#",
    "#......#",
    "########",
]

ESCAPE = [
    "########",
    "#M..A..#",
    "#.#.M#.#",
    "#M#..#..",
    "########",
]


def test_count_rooms_sample():
    assert count_rooms(ROOMS) == 3


def test_count_rooms_does_not_change_input():
    copy = list(ROOMS)
    count_rooms(ROOMS)
    assert ROOMS == copy


def test_count_rooms_all_walls_and_all_floor():
    assert count_rooms(["###", "###"]) == 0
    assert count_rooms(["...", "..."]) == 1


def test_count_rooms_ragged_grid():
    with pytest.raises(ValueError):
        count_rooms(["..", "."])


def test_labyrinth_sample_reaches_b():
    path = labyrinth(MAZE)
    i, j = _walk(MAZE, path)
    assert MAZE[i][j] == "B"
    assert len(path) == 9


def test_labyrinth_corridor():
    path = labyrinth(["A...B"])
    assert set(path) == {"R"}
    assert len(path) == 4


def test_labyrinth_blocked():
    assert labyrinth(["A.#.B"]) is None


def test_labyrinth_without_start():
    with pytest.raises(ValueError):
        labyrinth(["..B"])


def test_monsters_sample():
    assert monsters(ESCAPE) == "RRDDR"


def test_monsters_path_leads_to_border():
    path = monsters(ESCAPE)
    i, j = _walk(ESCAPE, path)
    assert i in (0, len(ESCAPE) - 1) or j in (0, len(ESCAPE[0]) - 1)


def test_monsters_already_on_border():
    assert monsters(["#A#", "#.#", "###"]) == ""


def test_monsters_blocked_by_monster():
    grid = [
        "#####",
        "#.A.#",
        "#.M.#",
        "#...#",
        "##.##",
    ]
    assert monsters(grid) is None


def test_monsters_without_start():
    with pytest.raises(ValueError):
        monsters(["#.#", "#M#"])