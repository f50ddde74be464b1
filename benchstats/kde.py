"""Kernel density estimation over a univariate sample."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .sample import Sample

_SQRT_TAU = math.sqrt(2 * math.pi)


class _Kernel(Protocol):
    def evaluate(self, x: float) -> float: ...


@dataclass(frozen=True)
class Gaussian:
    """The standard normal kernel."""

    def evaluate(self, x: float) -> float:
        """Apply the kernel function to ``x``."""
        return math.exp(-(x * x) / 2) / _SQRT_TAU


class Bandwidth(enum.Enum):
    """Method used to estimate the bandwidth of a kernel density estimator."""

    SILVERMAN = "silverman"

    def estimate(self, sample: Sequence[float]) -> float:
        """Estimate the bandwidth for ``sample``."""
        sample = _as_sample(sample)
        if self is Bandwidth.SILVERMAN:
            factor = 4 / 3
            exponent = 1 / 5
            sigma = sample.std_dev()
            return sigma * (factor / len(sample)) ** exponent
        raise ValueError(f"unknown bandwidth method {self!r}")


def _as_sample(values: Sequence[float]) -> Sample:
    return values if isinstance(values, Sample) else Sample(values)


class Kde:
    """Univariate kernel density estimator."""

    __slots__ = ("_sample", "_kernel", "_bandwidth")

    def __init__(
        self,
        sample: Sequence[float],
        kernel: _Kernel | None = None,
        bandwidth: Bandwidth = Bandwidth.SILVERMAN,
    ) -> None:
        self._sample = _as_sample(sample)
        self._kernel: _Kernel = Gaussian() if kernel is None else kernel
        self._bandwidth = bandwidth.estimate(self._sample)

    def __repr__(self) -> str:
        return f"Kde(bandwidth={self._bandwidth!r}, kernel={self._kernel!r})"

    def bandwidth(self) -> float:
        """Return the bandwidth used by the estimator."""
        return self._bandwidth

    def map(self, xs: Iterable[float]) -> tuple[float, ...]:
        """Estimate the density at every point of ``xs``."""
        return tuple(self.estimate(x) for x in xs)

    def estimate(self, x: float) -> float:
        """Estimate the probability density at ``x``."""
        h = self._bandwidth
        evaluate = self._kernel.evaluate
        total = sum((evaluate((x - x_i) / h) for x_i in self._sample), 0.0)
        return total / (h * len(self._sample))