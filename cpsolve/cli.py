"""Command line: solve a problem from whitespace-separated input."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterable

from .connectivity import building_roads, building_teams, message_route, round_trip
from .dag import course_schedule, game_routes, longest_flight_route, round_trip_directed
from .disjoint_set import road_construction, road_reparation
from .functional_graph import planetary_queries, planetary_queries_2
from .grids import count_rooms, labyrinth, monsters
from .modmath import (
    binomial,
    derangements,
    distinct_arrangements,
    distributing_apples,
    exponentiation,
    fibonacci,
    tower_exponentiation,
)
from .numbertheory import (
    count_divisors,
    divisor_analysis,
    max_common_divisor,
    next_prime,
    prime_multiples,
    sum_of_divisors,
)
from .range_queries import RangeSum, SparseTableMin
from .scc import flights_route_check, giant_pizza, planets_and_kingdoms
from .shortest_paths import (
    find_negative_cycle,
    flight_discount,
    high_score,
    shortest_routes_1,
    shortest_routes_2,
)

IMPOSSIBLE = "IMPOSSIBLE"


class _Tokens:
    """Reads whitespace-separated tokens one after another."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("input ended early") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def triples(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.number(), self.number(), self.number()) for _ in range(count)]


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {}


def _problem(name: str) -> Callable[[Callable[[_Tokens], str]], Callable[[_Tokens], str]]:
    def register(func: Callable[[_Tokens], str]) -> Callable[[_Tokens], str]:
        _PROBLEMS[name] = func
        return func

    return register


def _lines(values: Iterable[object]) -> str:
    return "\n".join(map(str, values))


def _row(values: Iterable[object]) -> str:
    return " ".join(map(str, values))


def _route(route: list[int] | None) -> str:
    return IMPOSSIBLE if route is None else f"{len(route)}\n{_row(route)}"


def _graph(t: _Tokens) -> tuple[int, list[tuple[int, int]]]:
    n, m = t.number(), t.number()
    return n, t.pairs(m)


def _weighted(t: _Tokens) -> tuple[int, list[tuple[int, int, int]]]:
    n, m = t.number(), t.number()
    return n, t.triples(m)


def _grid(t: _Tokens) -> list[str]:
    n, _ = t.number(), t.number()
    return [t.word() for _ in range(n)]


@_problem("exponentiation")
def _exponentiation(t: _Tokens) -> str:
    return _lines(exponentiation(a, b) for a, b in t.pairs(t.number()))


@_problem("exponentiation-2")
def _exponentiation_2(t: _Tokens) -> str:
    return _lines(tower_exponentiation(a, b, c) for a, b, c in t.triples(t.number()))


@_problem("binomial-coefficients")
def _binomial(t: _Tokens) -> str:
    return _lines(binomial(a, b) for a, b in t.pairs(t.number()))


@_problem("distributing-apples")
def _apples(t: _Tokens) -> str:
    n, m = t.number(), t.number()
    return str(distributing_apples(n, m))


@_problem("christmas-party")
def _christmas(t: _Tokens) -> str:
    return str(derangements(t.number()))


@_problem("creating-strings-2")
def _creating_strings(t: _Tokens) -> str:
    return str(distinct_arrangements(t.word()))


@_problem("fibonacci-numbers")
def _fibonacci(t: _Tokens) -> str:
    return str(fibonacci(t.number()))


@_problem("common-divisor")
def _common_divisor(t: _Tokens) -> str:
    return str(max_common_divisor(t.numbers(t.number())))


@_problem("counting-divisors")
def _counting_divisors(t: _Tokens) -> str:
    return _lines(count_divisors(x) for x in t.numbers(t.number()))


@_problem("divisor-analysis")
def _divisor_analysis(t: _Tokens) -> str:
    stats = divisor_analysis(t.pairs(t.number()))
    return _row([stats.count, stats.total, stats.product])


@_problem("next-prime")
def _next_prime(t: _Tokens) -> str:
    return _lines(next_prime(n) for n in t.numbers(t.number()))


@_problem("prime-multiples")
def _prime_multiples(t: _Tokens) -> str:
    n, k = t.number(), t.number()
    return str(prime_multiples(n, t.numbers(k)))


@_problem("sum-of-divisors")
def _sum_of_divisors(t: _Tokens) -> str:
    return str(sum_of_divisors(t.number()))


@_problem("static-range-sum-queries")
def _range_sum(t: _Tokens) -> str:
    n, q = t.number(), t.number()
    table = RangeSum(t.numbers(n))
    return _lines(table.query(a, b) for a, b in t.pairs(q))


@_problem("static-range-minimum-queries")
def _range_minimum(t: _Tokens) -> str:
    n, q = t.number(), t.number()
    table = SparseTableMin(t.numbers(n))
    return _lines(table.query(a, b) for a, b in t.pairs(q))


@_problem("building-roads")
def _building_roads(t: _Tokens) -> str:
    roads = building_roads(*_graph(t))
    return _lines([len(roads), *(_row(road) for road in roads)])


@_problem("building-teams")
def _building_teams(t: _Tokens) -> str:
    teams = building_teams(*_graph(t))
    return IMPOSSIBLE if teams is None else _row(teams)


@_problem("message-route")
def _message_route(t: _Tokens) -> str:
    return _route(message_route(*_graph(t)))


@_problem("round-trip")
def _round_trip(t: _Tokens) -> str:
    return _route(round_trip(*_graph(t)))


@_problem("counting-rooms")
def _counting_rooms(t: _Tokens) -> str:
    return str(count_rooms(_grid(t)))


@_problem("labyrinth")
def _labyrinth(t: _Tokens) -> str:
    path = labyrinth(_grid(t))
    return "NO" if path is None else _lines(["YES", len(path), path])


@_problem("monsters")
def _monsters(t: _Tokens) -> str:
    path = monsters(_grid(t))
    if path is None:
        return "NO"
    return _lines(["YES", len(path), *([path] if path else [])])


@_problem("course-schedule")
def _course_schedule(t: _Tokens) -> str:
    order = course_schedule(*_graph(t))
    return IMPOSSIBLE if order is None else _row(order)


@_problem("round-trip-2")
def _round_trip_2(t: _Tokens) -> str:
    return _route(round_trip_directed(*_graph(t)))


@_problem("game-routes")
def _game_routes(t: _Tokens) -> str:
    return str(game_routes(*_graph(t)))


@_problem("longest-flight-route")
def _longest_flight_route(t: _Tokens) -> str:
    return _route(longest_flight_route(*_graph(t)))


@_problem("flight-routes-check")
def _flight_routes_check(t: _Tokens) -> str:
    missing = flights_route_check(*_graph(t))
    return "YES" if missing is None else f"NO\n{_row(missing)}"


@_problem("planets-and-kingdoms")
def _planets_and_kingdoms(t: _Tokens) -> str:
    count, labels = planets_and_kingdoms(*_graph(t))
    return f"{count}\n{_row(labels)}"


@_problem("giant-pizza")
def _giant_pizza(t: _Tokens) -> str:
    wishes_count, toppings = t.number(), t.number()
    wishes = [
        (t.word(), t.number(), t.word(), t.number()) for _ in range(wishes_count)
    ]
    choice = giant_pizza(toppings, wishes)
    return IMPOSSIBLE if choice is None else _row(choice)


@_problem("shortest-routes-1")
def _shortest_routes_1(t: _Tokens) -> str:
    distances = shortest_routes_1(*_weighted(t))
    return _row(-1 if d is None else d for d in distances)


@_problem("shortest-routes-2")
def _shortest_routes_2(t: _Tokens) -> str:
    n, m, q = t.number(), t.number(), t.number()
    edges = t.triples(m)
    return _lines(shortest_routes_2(n, edges, t.pairs(q)))


@_problem("flight-discount")
def _flight_discount(t: _Tokens) -> str:
    cost = flight_discount(*_weighted(t))
    return str(-1 if cost is None else cost)


@_problem("high-score")
def _high_score(t: _Tokens) -> str:
    score = high_score(*_weighted(t))
    return str(-1 if score is None else score)


@_problem("cycle-finding")
def _cycle_finding(t: _Tokens) -> str:
    cycle = find_negative_cycle(*_weighted(t))
    return "NO" if cycle is None else f"YES\n{_row(cycle)}"


@_problem("road-reparation")
def _road_reparation(t: _Tokens) -> str:
    total = road_reparation(*_weighted(t))
    return IMPOSSIBLE if total is None else str(total)


@_problem("road-construction")
def _road_construction(t: _Tokens) -> str:
    return _lines(_row(entry) for entry in road_construction(*_graph(t)))


@_problem("planets-queries-1")
def _planets_queries_1(t: _Tokens) -> str:
    n, q = t.number(), t.number()
    successors = t.numbers(n)
    return _lines(planetary_queries(successors, t.pairs(q)))


@_problem("planets-queries-2")
def _planets_queries_2(t: _Tokens) -> str:
    n, q = t.number(), t.number()
    successors = t.numbers(n)
    return _lines(planetary_queries_2(successors, t.pairs(q)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input, solve it and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cpsolve", description="Solve a problem from its whitespace-separated input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument("-i", "--input", type=Path, help="read input from this file")
    parser.add_argument("-o", "--output", type=Path, help="write the answer to this file")
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        answer = _PROBLEMS[args.problem](_Tokens(text))
    except (ValueError, IndexError) as exc:
        print(f"cpsolve: {exc}", file=sys.stderr)
        return 1

    output = answer + "\n"
    if args.output:
        args.output.write_text(output)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())