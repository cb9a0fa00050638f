"""Static range sum and minimum queries, and pairwise sum levels."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def _check_range(a: int, b: int, size: int) -> None:
    if not 1 <= a <= b <= size:
        raise IndexError(f"range [{a}, {b}] is not within [1, {size}]")


class RangeSum:
    """Prefix sums answering 1-based inclusive range sums."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def query(self, a: int, b: int) -> int:
        """Sum of the values at positions ``a`` to ``b``."""
        _check_range(a, b, len(self))
        return self._prefix[b] - self._prefix[a - 1]


class SparseTableMin:
    """Sparse table answering 1-based inclusive range minima."""

    def __init__(self, values: Iterable[int]) -> None:
        levels = [list(values)]
        size = len(levels[0])
        width = 1
        while 2 * width <= size:
            prev = levels[-1]
            levels.append(
                [min(prev[i], prev[i + width]) for i in range(size - 2 * width + 1)]
            )
            width *= 2
        self._levels = levels
        self._size = size

    def __len__(self) -> int:
        return self._size

    def query(self, a: int, b: int) -> int:
        """Minimum of the values at positions ``a`` to ``b``."""
        _check_range(a, b, self._size)
        k = (b - a + 1).bit_length() - 1
        row = self._levels[k]
        return min(row[a - 1], row[b - (1 << k)])


def pairwise_sum_levels(values: Sequence[int]) -> list[list[int]]:
    """Levels of pairwise sums: each level sums adjacent pairs of the one before."""
    if not values:
        raise ValueError("values must not be empty")
    levels = [list(values)]
    while len(levels[-1]) >= 2:
        prev = levels[-1]
        levels.append([x + y for x, y in zip(prev[::2], prev[1::2])])
    return levels