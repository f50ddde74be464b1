# benchstats

Statistics for analysing benchmark measurements, in plain Python with no
dependencies outside the standard library.

## Modules

- `benchstats.sample`
  - `Sample`: an immutable sequence of at least two floats, none of them NaN.
    It provides `min`, `max`, `sum`, `mean`, `var(mean)`, `std_dev(mean)`, `std_dev_pct`,
    `median_abs_dev(median)` (scaled by 1.4826), `median_abs_dev_pct`, `median`, `iqr`,
    `percentiles`, `t(other)` (Welch's t score) and `bootstrap(nresamples, statistic)`.
  - `Distribution`: a bootstrap distribution. `confidence_interval(level)` returns
    percentile bounds and raises `ValueError` unless `0 < level < 1`.
    `p_value(t, tails)` takes `Tails.ONE` or `Tails.TWO`.
  - `dot(xs, ys)`: the dot product of two sequences.
- `benchstats.percentiles.Percentiles`: a sorted copy of the data. `at(p)` gives the
  linearly interpolated percentile for `p` in `[0, 100]`. It also has `median`,
  `quartiles` and `iqr`.
- `benchstats.resamples`
  - `Resamples(sample)`: an endless iterator. Each item is a list the same length as the
    sample, drawn with replacement.
  - `new_rng()`: returns a freshly seeded `random.Random`.
- `benchstats.bootstrap`
  - `bootstrap(a, b, nresamples, statistic)`: a two-sample bootstrap. Resamples of `a`
    are reused across chunks of about `sqrt(nresamples)` estimates.
  - `mixed_bootstrap(a, b, nresamples, statistic)`: pools both samples, then splits each
    resample of the pool back into parts the sizes of `a` and `b`.
- `benchstats.bivariate`
  - `Data(xs, ys)`: paired data. Both sides must have equal length, at least two points,
    and no NaN. It provides `x()`, `y()`, iteration over pairs, and
    `bootstrap(nresamples, statistic)`.
  - `PairedResamples(data)`: resamples pairs with replacement.
  - `Slope`: a line through the origin with a `value` field. `Slope.fit(data)` makes the
    least-squares fit. `r_squared(data)` returns `1 - ss_res / ss_tot`, where `ss_tot` is
    the residual sum of squares plus the squared deviation of the last y value from the
    mean of y.
- `benchstats.kde`
  - `Kde(sample, kernel=Gaussian(), bandwidth=Bandwidth.SILVERMAN)`: provides
    `bandwidth()`, `estimate(x)` and `map(xs)`.
  - `Gaussian`: the standard normal kernel.
  - `Bandwidth.SILVERMAN`: Silverman's rule of thumb.
- `benchstats.tukey`
  - `classify(sample)`: returns a `LabeledSample`. It provides `fences()` (low severe,
    low mild, high mild, high severe), `count()`, iteration over `(value, Label)` pairs,
    and indexing by position to get a label.
  - `Label`: has `is_high`, `is_low`, `is_mild`, `is_severe` and `is_outlier`.

Every `statistic` passed to a bootstrap returns a tuple. The bootstrap returns one
`Distribution` per element of that tuple. With zero resamples it returns an empty tuple.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Example

```python
from benchstats.sample import Sample, Tails
from benchstats.bootstrap import bootstrap
from benchstats.tukey import classify
from benchstats.kde import Kde, Gaussian, Bandwidth

times = Sample([10.2, 10.4, 10.1, 10.3, 12.9, 10.2, 10.5])
print(times.mean(), times.std_dev(), times.median())

(means,) = times.bootstrap(1000, lambda s: (s.mean(),))
low, high = means.confidence_interval(0.95)

other = Sample([10.0, 10.1, 9.9, 10.2, 10.0])
(diffs,) = bootstrap(times, other, 1000, lambda a, b: (a.mean() - b.mean(),))
p = diffs.p_value(0.0, Tails.TWO)

labeled = classify(times)
low_severe, low_mild, normal, high_mild, high_severe = labeled.count()

kde = Kde(times, Gaussian(), Bandwidth.SILVERMAN)
densities = kde.map([10.0, 10.5, 11.0])
```

## What it does not do

This is a library of statistical routines only. It does not run or time code, and it has
no command-line tool. It does not store baselines and does not write reports or plots.
The caller must supply the measurements.

## Running the tests

```
pytest
```