# cpsolve

Ready-made solutions to well-known competitive-programming problems,
usable as plain Python functions or from the `cpsolve` command.
It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in the package

- `cpsolve.modmath`: `mod_pow`, `mod_inverse` (Fermat inverse modulo a
  prime), `FactorialTable` (factorials and binomials modulo a prime, filled
  lazily), `binomial`, `exponentiation`, `tower_exponentiation`
  (`a ** (b ** c)`), `distributing_apples`, `derangements`,
  `distinct_arrangements`, `matrix_multiply`, `matrix_power` and
  `fibonacci`. Results are reduced modulo 10^9 + 7.
- `cpsolve.numbertheory`: `count_divisors`, `max_common_divisor` (largest
  divisor shared by two values of a list), `divisor_analysis` (count, sum
  and product of divisors from `(prime, exponent)` pairs, returned as a
  `DivisorStats`), `is_prime`, `next_prime`, `prime_multiples`
  (inclusion–exclusion) and `sum_of_divisors`.
- `cpsolve.range_queries`: `RangeSum` (prefix sums) and `SparseTableMin`,
  both answering 1-based inclusive `query(a, b)`; `pairwise_sum_levels`
  builds levels of adjacent-pair sums.
- `cpsolve.connectivity`: `building_roads`, `building_teams`,
  `message_route`, `round_trip` on undirected graphs.
- `cpsolve.grids`: `count_rooms`, `labyrinth`, `monsters` on grids given as
  lists of strings.
- `cpsolve.dag`: `course_schedule`, `round_trip_directed`, `game_routes`,
  `longest_flight_route` on directed graphs.
- `cpsolve.scc`: `flights_route_check`, `planets_and_kingdoms` and the 2-SAT
  `giant_pizza`.
- `cpsolve.shortest_paths`: `dijkstra` (0-based adjacency lists),
  `shortest_routes_1`, `floyd_warshall`, `shortest_routes_2`,
  `flight_discount`, `bellman_ford`, `high_score`, `find_negative_cycle`.
- `cpsolve.disjoint_set`: `DisjointSet` (union by rank with path
  compression), `road_construction`, `road_reparation`.
- `cpsolve.functional_graph`: `SuccessorGraph` (binary lifting,
  `walk(x, k)`), `planetary_queries`, `planetary_queries_2`.

Where a problem has no answer, the function returns `None`; invalid input
raises `ValueError` (or `IndexError` for out-of-range queries).

## Using the library

```python
from cpsolve.modmath import mod_pow, binomial, derangements, distinct_arrangements, fibonacci
from cpsolve.numbertheory import count_divisors, next_prime

mod_pow(2, 10, 1_000_000_007)   # 1024
binomial(5, 2)                  # 10
derangements(3)                 # 2
distinct_arrangements("aabac")  # 20
fibonacci(10)                   # 55

count_divisors(12)              # 6
next_prime(10)                  # 11
```

Range queries are built once and then answered with 1-based positions:

```python
from cpsolve.range_queries import RangeSum, SparseTableMin

values = [3, 2, 4, 5, 1, 1, 5, 3]
RangeSum(values).query(2, 5)        # 12
SparseTableMin(values).query(2, 5)  # 1
```

Graph functions take the number of vertices and a list of edges given as
pairs (or triples with a weight) of 1-based vertex numbers:

```python
from cpsolve.connectivity import building_roads
from cpsolve.shortest_paths import shortest_routes_1
from cpsolve.disjoint_set import DisjointSet

building_roads(4, [(1, 2), (3, 4)])                              # [(1, 3)]
shortest_routes_1(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)])  # [0, 5, 2]

dsu = DisjointSet(5)
dsu.union(1, 2)         # True
dsu.component_size(1)   # 2
```

## Command line

```
cpsolve PROBLEM [-i INPUT] [-o OUTPUT]
```

The command reads the problem's whitespace-separated input from standard
input (or the file given with `-i`), and writes the answer to standard
output (or the file given with `-o`). Invalid input is reported on standard
error with exit status 1.

```
printf '2\n3 4\n2 8\n' | cpsolve exponentiation
```

prints `81` and `256` on separate lines. The problems it knows are:

`binomial-coefficients`, `building-roads`, `building-teams`,
`christmas-party`, `common-divisor`, `counting-divisors`, `counting-rooms`,
`course-schedule`, `creating-strings-2`, `cycle-finding`,
`distributing-apples`, `divisor-analysis`, `exponentiation`,
`exponentiation-2`, `fibonacci-numbers`, `flight-discount`,
`flight-routes-check`, `game-routes`, `giant-pizza`, `high-score`,
`labyrinth`, `longest-flight-route`, `message-route`, `monsters`,
`next-prime`, `planets-and-kingdoms`, `planets-queries-1`,
`planets-queries-2`, `prime-multiples`, `road-construction`,
`road-reparation`, `round-trip`, `round-trip-2`, `shortest-routes-1`,
`shortest-routes-2`, `static-range-minimum-queries`,
`static-range-sum-queries`, `sum-of-divisors`.

Run `cpsolve --help` for the list at any time.

## What it does not do

There are no range queries with updates: `pairwise_sum_levels` only builds
the static levels of pair sums, and the command line offers no problem for
it.