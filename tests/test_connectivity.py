import pytest

from cpsolve.connectivity import (
    building_roads,
    building_teams,
    message_route,
    round_trip,
)


def _components(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for a, b in edges:
        parent[find(a)] = find(b)
    return len({find(v) for v in range(1, n + 1)})


def _edge_set(edges):
    return {frozenset(e) for e in edges}


def test_building_roads_sample():
    assert building_roads(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_building_roads_connected_graph_needs_nothing():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


@pytest.mark.parametrize(
    "n, edges",
    [
        (6, [(2, 3), (5, 6)]),
        (7, [(1, 7), (3, 4), (4, 5)]),
        (5, []),
    ],
)
def test_building_roads_connects_everything(n, edges):
    roads = building_roads(n, edges)
    assert len(roads) == _components(n, edges) - 1
    assert _components(n, edges + roads) == 1
    assert all(a == 1 for a, _ in roads)


def test_building_roads_rejects_bad_vertex():
    with pytest.raises(ValueError):
        building_roads(3, [(1, 4)])


@pytest.mark.parametrize(
    "n, edges",
    [
        (5, [(1, 2), (1, 3), (4, 5)]),
        (6, [(1, 2), (2, 3), (3, 4), (4, 1), (5, 6)]),
        (3, []),
    ],
)
def test_building_teams_separates_friends(n, edges):
    teams = building_teams(n, edges)
    assert len(teams) == n
    assert set(teams) <= {1, 2}
    assert teams[0] == 1
    assert all(teams[a - 1] != teams[b - 1] for a, b in edges)


def test_building_teams_odd_cycle_impossible():
    assert building_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_building_teams_self_loop_impossible():
    assert building_teams(2, [(1, 1)]) is None


def test_message_route_takes_shortcut():
    assert message_route(4, [(1, 2), (2, 3), (3, 4), (1, 4)]) == [1, 4]


def test_message_route_unreachable():
    assert message_route(4, [(1, 2), (3, 4)]) is None


def test_message_route_rejects_bad_vertex():
    with pytest.raises(ValueError):
        message_route(2, [(0, 1)])


@pytest.mark.parametrize(
    "n, edges",
    [
        (5, [(1, 3), (1, 2), (5, 3), (1, 5), (2, 4), (4, 5)]),
        (4, [(1, 2), (2, 3), (3, 1), (3, 4)]),
        (6, [(1, 2), (3, 4), (4, 5), (5, 6), (6, 3)]),
    ],
)
def test_round_trip_returns_cycle(n, edges):
    cycle = round_trip(n, edges)
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    known = _edge_set(edges)
    assert all(frozenset(p) in known for p in zip(cycle, cycle[1:]))


def test_round_trip_tree_has_none():
    assert round_trip(5, [(1, 2), (1, 3), (3, 4), (3, 5)]) is None