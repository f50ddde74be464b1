"""Bivariate data, paired resampling and regression through the origin."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from .resamples import new_rng
from .sample import Distribution, Sample, dot


class Data:
    """Paired ``(x, y)`` data: equal lengths, at least two points, no NaN."""

    __slots__ = ("_xs", "_ys")

    def __init__(self, xs: Iterable[float], ys: Iterable[float]) -> None:
        xs_t = tuple(float(x) for x in xs)
        ys_t = tuple(float(y) for y in ys)
        if len(xs_t) != len(ys_t):
            raise ValueError(
                f"x and y must have the same length, got {len(xs_t)} and {len(ys_t)}"
            )
        if len(xs_t) < 2:
            raise ValueError("bivariate data needs at least two points")
        if any(math.isnan(v) for v in itertools.chain(xs_t, ys_t)):
            raise ValueError("bivariate data cannot contain NaN")
        self._xs = xs_t
        self._ys = ys_t

    def __repr__(self) -> str:
        return f"Data({list(self._xs)!r}, {list(self._ys)!r})"

    def __len__(self) -> int:
        return len(self._xs)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self._xs, self._ys)

    def x(self) -> Sample:
        """Return the x values as a sample."""
        return Sample(self._xs)

    def y(self) -> Sample:
        """Return the y values as a sample."""
        return Sample(self._ys)

    def bootstrap(
        self, nresamples: int, statistic: Callable[[Data], tuple[float, ...]]
    ) -> tuple[Distribution, ...]:
        """Return one bootstrap distribution per value the ``statistic`` tuple holds.

        With no resamples the result is an empty tuple.
        """
        if nresamples < 0:
            raise ValueError(
                f"number of resamples cannot be negative, got {nresamples!r}"
            )
        estimates = (
            statistic(resample)
            for resample in itertools.islice(PairedResamples(self), nresamples)
        )
        return tuple(Distribution(column) for column in zip(*estimates))


class PairedResamples(Iterator[Data]):
    """Endless iterator of resamples of paired data, drawn with replacement.

    Pairs are kept together: each draw picks an index and takes both values.
    """

    def __init__(self, data: Data) -> None:
        self._pairs = list(data)
        self._rng = new_rng()

    def __iter__(self) -> PairedResamples:
        return self

    def __next__(self) -> Data:
        drawn = self._rng.choices(self._pairs, k=len(self._pairs))
        xs, ys = zip(*drawn)
        return Data(xs, ys)


@dataclass(frozen=True)
class Slope:
    """A straight line through the origin, ``y = value * x``."""

    value: float

    @classmethod
    def fit(cls, data: Data) -> Slope:
        """Fit a line through the origin by ordinary least squares."""
        xs, ys = data.x(), data.y()
        return cls(dot(xs, ys) / dot(xs, xs))

    def r_squared(self, data: Data) -> float:
        """Return the goodness of fit of this line for ``data``.

        The total sum of squares is taken as the residual sum of squares plus
        the squared deviation of the last y value from the mean of y.
        """
        m = self.value
        ys = data.y()
        y_bar = ys.mean()
        ss_res = sum(((y - m * x) ** 2 for x, y in data), 0.0)
        ss_tot = ss_res + (ys[-1] - y_bar) ** 2
        return 1 - ss_res / ss_tot