import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from benchstats.bootstrap import bootstrap, mixed_bootstrap
from benchstats.sample import Sample

unit_floats = st.floats(min_value=0.0, max_value=1.0, exclude_max=True)
values = st.lists(unit_floats, min_size=2, max_size=40)
counts = st.integers(min_value=1, max_value=120)


def _within(x, low, high):
    tol = 1e-9
    return (x > low or math.isclose(x, low, abs_tol=tol)) and (
        x < high or math.isclose(x, high, abs_tol=tol)
    )


def _diff_bounds(a, b):
    low = min(a.min() - b.max(), b.min() - a.max())
    high = max(a.max() - b.min(), b.max() - a.min())
    return low, high


@settings(max_examples=60, deadline=None)
@given(values, values, counts)
def test_two_sample(a_values, b_values, nresamples):
    a, b = Sample(a_values), Sample(b_values)
    (distribution,) = bootstrap(a, b, nresamples, lambda x, y: (x.mean() - y.mean(),))
    low, high = _diff_bounds(a, b)
    assert len(distribution) == nresamples
    assert all(_within(d, low, high) for d in distribution)


@settings(max_examples=60, deadline=None)
@given(values, values, counts)
def test_mixed_two_sample(a_values, b_values, nresamples):
    a, b = Sample(a_values), Sample(b_values)
    (distribution,) = mixed_bootstrap(
        a, b, nresamples, lambda x, y: (x.mean() - y.mean(),)
    )
    low, high = _diff_bounds(a, b)
    assert len(distribution) == nresamples
    assert all(_within(d, low, high) for d in distribution)


@pytest.mark.parametrize("nresamples", [1, 2, 5, 10, 17, 100])
def test_two_sample_count_matches_request(nresamples):
    a = Sample([1.0, 2.0, 3.0])
    b = Sample([4.0, 5.0])
    distributions = bootstrap(
        a, b, nresamples, lambda x, y: (x.mean(), y.mean())
    )
    assert len(distributions) == 2
    assert [len(d) for d in distributions] == [nresamples, nresamples]


def test_mixed_split_keeps_sizes():
    a = Sample([1.0, 2.0, 3.0])
    b = Sample([10.0, 20.0])
    sizes = mixed_bootstrap(a, b, 30, lambda x, y: (len(x), len(y)))
    assert set(sizes[0]) == {3.0}
    assert set(sizes[1]) == {2.0}


def test_mixed_draws_from_pool():
    a = Sample([1.0, 1.0])
    b = Sample([3.0, 3.0])
    (maxima,) = mixed_bootstrap(a, b, 200, lambda x, y: (x.max(),))
    assert set(maxima) <= {1.0, 3.0}


def test_two_sample_keeps_samples_apart():
    a = Sample([1.0, 1.0])
    b = Sample([3.0, 3.0])
    (diffs,) = bootstrap(a, b, 50, lambda x, y: (x.mean() - y.mean(),))
    assert set(diffs) == {-2.0}


def test_zero_resamples_gives_nothing():
    a = Sample([1.0, 2.0])
    assert bootstrap(a, a, 0, lambda x, y: (x.mean(),)) == ()
    assert mixed_bootstrap(a, a, 0, lambda x, y: (x.mean(),)) == ()


def test_negative_resamples_rejected():
    a = Sample([1.0, 2.0])
    with pytest.raises(ValueError):
        bootstrap(a, a, -1, lambda x, y: (x.mean(),))
    with pytest.raises(ValueError):
        mixed_bootstrap(a, a, -1, lambda x, y: (x.mean(),))


def test_plain_sequences_are_validated():
    with pytest.raises(ValueError):
        bootstrap([1.0], [1.0, 2.0], 3, lambda x, y: (x.mean(),))
    (means,) = bootstrap([2.0, 2.0], [1.0, 5.0], 4, lambda x, y: (x.mean(),))
    assert list(means) == [2.0, 2.0, 2.0, 2.0]