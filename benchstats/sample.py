"""Univariate samples, their summary statistics and bootstrap distributions."""

from __future__ import annotations

import enum
import itertools
import math
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from .percentiles import Percentiles
from .resamples import Resamples

_MAD_SCALE = 1.4826


def dot(xs: Iterable[float], ys: Iterable[float]) -> float:
    """Return the dot product of two sequences."""
    return sum((x * y for x, y in zip(xs, ys)), 0.0)


class Tails(enum.IntEnum):
    """Number of tails for significance testing."""

    ONE = 1
    TWO = 2


class Sample(Sequence[float]):
    """A collection of at least two data points, none of them NaN."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float]) -> None:
        data = tuple(float(v) for v in values)
        if len(data) < 2:
            raise ValueError("a sample needs at least two data points")
        if any(math.isnan(v) for v in data):
            raise ValueError("a sample cannot contain NaN")
        self._values = data

    @classmethod
    def _trusted(cls, values: Iterable[float]) -> Sample:
        obj = cls.__new__(cls)
        obj._values = tuple(values)
        return obj

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values)!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: Any) -> Any:
        return self._values[index]

    def max(self) -> float:
        """Return the biggest element."""
        return max(self._values)

    def min(self) -> float:
        """Return the smallest element."""
        return min(self._values)

    def sum(self) -> float:
        """Return the sum of all elements."""
        return sum(self._values, 0.0)

    def mean(self) -> float:
        """Return the arithmetic average."""
        return self.sum() / len(self._values)

    def var(self, mean: float | None = None) -> float:
        """Return the sample variance; ``mean`` may be passed to save work."""
        if mean is None:
            mean = self.mean()
        total = sum(((x - mean) ** 2 for x in self._values), 0.0)
        return total / (len(self._values) - 1)

    def std_dev(self, mean: float | None = None) -> float:
        """Return the standard deviation; ``mean`` may be passed to save work."""
        return math.sqrt(self.var(mean))

    def std_dev_pct(self) -> float:
        """Return the standard deviation as a percentage of the mean."""
        mean = self.mean()
        return (self.std_dev(mean) / mean) * 100

    def median_abs_dev(self, median: float | None = None) -> float:
        """Return the scaled median absolute deviation; ``median`` may be passed."""
        if median is None:
            median = self.percentiles().median()
        abs_devs = Sample(abs(x - median) for x in self._values)
        return abs_devs.percentiles().median() * _MAD_SCALE

    def median_abs_dev_pct(self) -> float:
        """Return the median absolute deviation as a percentage of the median."""
        median = self.percentiles().median()
        return (self.median_abs_dev(median) / median) * 100

    def percentiles(self) -> Percentiles:
        """Return a percentile view of the sample."""
        return Percentiles(self._values)

    def median(self) -> float:
        """Return the 50th percentile."""
        return self.percentiles().median()

    def iqr(self) -> float:
        """Return the interquartile range."""
        return self.percentiles().iqr()

    def t(self, other: Sample) -> float:
        """Return Welch's t score between this sample and ``other``."""
        x_bar, y_bar = self.mean(), other.mean()
        s2_x, s2_y = self.var(x_bar), other.var(y_bar)
        den = math.sqrt(s2_x / len(self) + s2_y / len(other))
        return (x_bar - y_bar) / den

    def bootstrap(
        self, nresamples: int, statistic: Callable[[Sample], tuple[float, ...]]
    ) -> tuple[Distribution, ...]:
        """Return one bootstrap distribution per value the ``statistic`` tuple holds.

        With no resamples there is nothing to build from, and an empty tuple comes back.
        """
        resamples = Resamples(self._values)
        estimates = (
            statistic(Sample._trusted(resample))
            for resample in itertools.islice(resamples, nresamples)
        )
        return tuple(Distribution(column) for column in zip(*estimates))


class Distribution(Sample):
    """The bootstrap distribution of some parameter."""

    __slots__ = ()

    def __init__(self, values: Iterable[float]) -> None:
        self._values = tuple(float(v) for v in values)

    def confidence_interval(self, confidence_level: float) -> tuple[float, float]:
        """Return the percentile confidence interval at ``confidence_level``.

        Raises ``ValueError`` unless the level lies strictly between 0 and 1.
        """
        if not 0 < confidence_level < 1:
            raise ValueError(
                f"confidence level must be within (0, 1), got {confidence_level!r}"
            )
        percentiles = self.percentiles()
        return (
            percentiles.at(50 * (1 - confidence_level)),
            percentiles.at(50 * (1 + confidence_level)),
        )

    def p_value(self, t: float, tails: Tails) -> float:
        """Return the likelihood of seeing ``t`` or a more extreme value."""
        n = len(self._values)
        hits = sum(1 for x in self._values if x < t)
        return min(hits, n - hits) / n * int(tails)