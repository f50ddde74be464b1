"""Random number generators and resampling with replacement."""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Iterator, Sequence

_seed_state = threading.local()


def new_rng() -> random.Random:
    """Return a fresh generator seeded from a per-thread, clock-seeded seeder."""
    seeder = getattr(_seed_state, "rng", None)
    if seeder is None:
        seeder = random.Random(time.time_ns() // 1_000_000)
        _seed_state.rng = seeder
    return random.Random(seeder.getrandbits(128))


class Resamples(Iterator[list[float]]):
    """Endless iterator of resamples (drawn with replacement) of a sample.

    Each resample has the same length as the original sample.
    """

    def __init__(self, sample: Sequence[float]) -> None:
        self._data = list(sample)
        if not self._data:
            raise ValueError("cannot resample an empty sample")
        self._rng = new_rng()

    def __iter__(self) -> Resamples:
        return self

    def __next__(self) -> list[float]:
        return self._rng.choices(self._data, k=len(self._data))