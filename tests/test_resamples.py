import itertools
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from benchstats.resamples import Resamples, new_rng


@given(st.integers(min_value=2, max_value=255), st.integers(min_value=0, max_value=255))
def test_subset(size, nresamples):
    values = [float(i) for i in range(size)]
    population = set(values)
    resamples = Resamples(values)
    for resample in itertools.islice(resamples, nresamples):
        assert set(resample) <= population
        assert len(resample) == size


def test_different_subsets():
    values = [float(i) for i in range(1000)]
    population = set(values)
    resamples = Resamples(values)
    duplicated = 0
    for _ in range(1000):
        first = list(next(resamples))
        second = list(next(resamples))
        assert len(first) == len(values)
        assert len(second) == len(values)
        assert set(first) <= population
        assert set(second) <= population
        if first == second:
            duplicated += 1
    assert duplicated <= 1


def test_iter_returns_itself():
    resamples = Resamples([1.0, 2.0, 3.0])
    assert iter(resamples) is resamples


def test_original_is_untouched():
    values = [1.0, 2.0, 3.0, 4.0]
    resamples = Resamples(values)
    list(itertools.islice(resamples, 10))
    assert values == [1.0, 2.0, 3.0, 4.0]


def test_empty_sample_raises():
    with pytest.raises(ValueError):
        Resamples([])


def test_new_rng_gives_independent_generators():
    a = new_rng()
    b = new_rng()
    assert isinstance(a, random.Random)
    draws_a = [a.random() for _ in range(8)]
    draws_b = [b.random() for _ in range(8)]
    assert all(0.0 <= x < 1.0 for x in draws_a + draws_b)
    assert draws_a != draws_b