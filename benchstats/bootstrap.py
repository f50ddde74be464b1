"""Two-sample bootstrap procedures."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterable, Iterator, Sequence

from .resamples import Resamples
from .sample import Distribution, Sample

TwoSampleStatistic = Callable[[Sample, Sample], tuple[float, ...]]


def _as_sample(values: Sequence[float]) -> Sample:
    return values if isinstance(values, Sample) else Sample(values)


def _check_count(nresamples: int) -> None:
    if nresamples < 0:
        raise ValueError(f"number of resamples cannot be negative, got {nresamples!r}")


def _distributions(estimates: Iterable[tuple[float, ...]]) -> tuple[Distribution, ...]:
    return tuple(Distribution(column) for column in zip(*estimates))


def bootstrap(
    a: Sequence[float],
    b: Sequence[float],
    nresamples: int,
    statistic: TwoSampleStatistic,
) -> tuple[Distribution, ...]:
    """Perform a two-sample bootstrap.

    The resamples are grouped into about ``sqrt(nresamples)`` chunks; within a
    chunk a single resample of ``a`` is paired with a fresh resample of ``b``
    for every estimate. One distribution comes back per value the statistic
    returns; with no resamples the result is an empty tuple.
    """
    _check_count(nresamples)
    a = _as_sample(a)
    b = _as_sample(b)
    if nresamples == 0:
        return ()

    chunks = math.isqrt(nresamples)
    if chunks * chunks < nresamples:
        chunks += 1
    per_chunk = -(-nresamples // chunks)

    a_resamples = Resamples(a)
    b_resamples = Resamples(b)

    def estimates() -> Iterator[tuple[float, ...]]:
        for i in range(chunks):
            start = i * per_chunk
            end = min(start + per_chunk, nresamples)
            a_resample = Sample(next(a_resamples))
            for _ in range(start, end):
                yield statistic(a_resample, Sample(next(b_resamples)))

    return _distributions(estimates())


def mixed_bootstrap(
    a: Sequence[float],
    b: Sequence[float],
    nresamples: int,
    statistic: TwoSampleStatistic,
) -> tuple[Distribution, ...]:
    """Perform a *mixed* two-sample bootstrap.

    Both samples are pooled; each resample of the pool is split back into
    parts the sizes of ``a`` and ``b`` before the statistic is applied.
    """
    _check_count(nresamples)
    a = _as_sample(a)
    b = _as_sample(b)
    n_a = len(a)
    pooled = [*a, *b]
    resamples = Resamples(pooled)

    estimates = (
        statistic(Sample(resample[:n_a]), Sample(resample[n_a:]))
        for resample in itertools.islice(resamples, nresamples)
    )
    return _distributions(estimates)