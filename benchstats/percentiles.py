"""Percentile lookups over a sorted copy of a sample."""

from __future__ import annotations

import math
from collections.abc import Iterable


class Percentiles:
    """A sorted view of some data that answers percentile queries in O(1)."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        self._values: tuple[float, ...] = tuple(sorted(float(v) for v in values))

    def __repr__(self) -> str:
        return f"Percentiles({list(self._values)!r})"

    def at(self, p: float) -> float:
        """Return the percentile at ``p`` percent, interpolating linearly.

        Raises ``ValueError`` if ``p`` lies outside ``[0, 100]`` or there is no data.
        """
        if not 0 <= p <= 100:
            raise ValueError(f"percentile must be within [0, 100], got {p!r}")
        if not self._values:
            raise ValueError("cannot take a percentile of no data")

        last = len(self._values) - 1
        if p == 100 or last == 0:
            return self._values[last]

        rank = (p / 100) * last
        integer = math.floor(rank)
        fraction = rank - integer
        floor = self._values[integer]
        ceiling = self._values[integer + 1]
        return floor + (ceiling - floor) * fraction

    def iqr(self) -> float:
        """Return the interquartile range."""
        q1, _, q3 = self.quartiles()
        return q3 - q1

    def median(self) -> float:
        """Return the 50th percentile."""
        return self.at(50)

    def quartiles(self) -> tuple[float, float, float]:
        """Return the 25th, 50th and 75th percentiles."""
        return self.at(25), self.at(50), self.at(75)