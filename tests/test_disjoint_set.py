import pytest

from cpsolve.disjoint_set import DisjointSet, road_construction, road_reparation


def test_new_set_has_singletons():
    ds = DisjointSet(4)
    assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert [ds.component_size(i) for i in range(4)] == [1, 1, 1, 1]
    assert len(ds) == 4


def test_union_joins_and_reports_repeat():
    ds = DisjointSet(3)
    assert ds.union(0, 1) is True
    assert ds.find(0) == ds.find(1)
    assert ds.component_size(1) == 2
    assert ds.union(1, 0) is False
    assert ds.find(2) == 2


def test_sizes_cover_all_elements():
    ds = DisjointSet(6)
    for u, v in [(0, 1), (2, 3), (1, 3), (4, 5)]:
        ds.union(u, v)
    roots = {ds.find(i) for i in range(6)}
    assert sum(ds.component_size(r) for r in roots) == 6
    assert ds.component_size(0) == ds.component_size(2) == 4


def test_find_out_of_range():
    with pytest.raises(IndexError):
        DisjointSet(2).find(2)


def test_negative_size():
    with pytest.raises(ValueError):
        DisjointSet(-1)


def test_road_construction_example():
    assert road_construction(5, [(1, 2), (1, 3), (4, 5)]) == [(4, 2), (3, 3), (2, 3)]


def test_road_construction_path_invariants():
    report = road_construction(4, [(1, 2), (2, 3), (3, 4)])
    counts = [c for c, _ in report]
    assert counts == sorted(counts, reverse=True)
    assert len(set(counts)) == len(counts)
    assert report[-1] == (1, 4)


def test_road_construction_repeated_road_changes_nothing():
    report = road_construction(3, [(1, 2), (2, 1)])
    assert report[0] == report[1]


def test_road_construction_bad_vertex():
    with pytest.raises(ValueError):
        road_construction(2, [(1, 3)])


def test_road_reparation_example():
    edges = [(1, 2, 3), (2, 3, 5), (2, 4, 2), (3, 4, 8), (5, 1, 7), (5, 4, 4)]
    assert road_reparation(5, edges) == 14


def test_road_reparation_picks_cheaper_parallel_road():
    assert road_reparation(2, [(1, 2, 7), (2, 1, 5)]) == 5


def test_road_reparation_disconnected():
    assert road_reparation(3, [(1, 2, 1)]) is None


def test_road_reparation_bad_vertex():
    with pytest.raises(ValueError):
        road_reparation(2, [(0, 1, 4)])