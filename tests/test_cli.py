import io

import pytest

from cpsolve.cli import main
from cpsolve.disjoint_set import road_construction
from cpsolve.functional_graph import planetary_queries
from cpsolve.grids import labyrinth
from cpsolve.modmath import exponentiation
from cpsolve.scc import giant_pizza


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_exponentiation(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["exponentiation"], "3\n3 4\n2 8\n123 123\n")
    assert code == 0
    expected = [exponentiation(a, b) for a, b in [(3, 4), (2, 8), (123, 123)]]
    assert out.split() == [str(v) for v in expected]


def test_building_teams_impossible(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["building-teams"], "3 3\n1 2\n2 3\n3 1\n")
    assert code == 0
    assert out.strip() == "IMPOSSIBLE"


def test_road_reparation_impossible(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, ["road-reparation"], "3 1\n1 2 4\n")
    assert out.strip() == "IMPOSSIBLE"


def test_road_construction_lines(monkeypatch, capsys):
    edges = [(1, 2), (1, 3), (4, 5)]
    text = "5 3\n" + "\n".join(f"{a} {b}" for a, b in edges)
    _, out, _ = _run(monkeypatch, capsys, ["road-construction"], text)
    expected = [f"{c} {s}" for c, s in road_construction(5, edges)]
    assert out.strip().split("\n") == expected


def test_labyrinth(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, ["labyrinth"], "1 3\nA.B\n")
    path = labyrinth(["A.B"])
    assert out.strip().split("\n") == ["YES", str(len(path)), path]


def test_flight_routes_connected(monkeypatch, capsys):
    _, out, _ = _run(monkeypatch, capsys, ["flight-routes-check"], "2 2\n1 2\n2 1\n")
    assert out.strip() == "YES"


def test_giant_pizza(monkeypatch, capsys):
    wishes = [("+", 1, "+", 2), ("-", 1, "+", 3), ("+", 4, "-", 2)]
    text = "3 4\n" + "\n".join(f"{a} {b} {c} {d}" for a, b, c, d in wishes)
    _, out, _ = _run(monkeypatch, capsys, ["giant-pizza"], text)
    assert out.split() == list(giant_pizza(4, wishes))


def test_input_and_output_files(tmp_path):
    source = tmp_path / "input.txt"
    target = tmp_path / "output.txt"
    source.write_text("3 2\n2 3 1\n1 4\n2 5\n")
    assert main(["planets-queries-1", "-i", str(source), "-o", str(target)]) == 0
    expected = planetary_queries([2, 3, 1], [(1, 4), (2, 5)])
    assert target.read_text().split() == [str(v) for v in expected]


def test_short_input_fails(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["exponentiation"], "2\n3 4\n")
    assert code == 1
    assert out == ""
    assert "input ended early" in err


def test_unknown_problem():
    with pytest.raises(SystemExit):
        main(["no-such-problem"])