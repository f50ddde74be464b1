"""Outlier classification by Tukey's fences.

Points inside the inner fences (quartiles -/+ 1.5 IQR) are normal, points
between the inner and outer fences (quartiles -/+ 3 IQR) are mild outliers,
and points beyond the outer fences are severe outliers.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from typing import Any

from .sample import Sample

_K_MILD = 1.5
_K_SEVERE = 3.0

Fences = tuple[float, float, float, float]


class Label(enum.Enum):
    """Classification of a data point."""

    HIGH_MILD = "high mild"
    HIGH_SEVERE = "high severe"
    LOW_MILD = "low mild"
    LOW_SEVERE = "low severe"
    NOT_AN_OUTLIER = "not an outlier"

    def is_high(self) -> bool:
        """Whether the point has an unusually high value."""
        return self in (Label.HIGH_MILD, Label.HIGH_SEVERE)

    def is_mild(self) -> bool:
        """Whether the point is a mild outlier."""
        return self in (Label.HIGH_MILD, Label.LOW_MILD)

    def is_low(self) -> bool:
        """Whether the point has an unusually low value."""
        return self in (Label.LOW_MILD, Label.LOW_SEVERE)

    def is_outlier(self) -> bool:
        """Whether the point is an outlier of any kind."""
        return self is not Label.NOT_AN_OUTLIER

    def is_severe(self) -> bool:
        """Whether the point is a severe outlier."""
        return self in (Label.HIGH_SEVERE, Label.LOW_SEVERE)


def _label(x: float, fences: Fences) -> Label:
    low_severe, low_mild, high_mild, high_severe = fences
    if x < low_severe:
        return Label.LOW_SEVERE
    if x > high_severe:
        return Label.HIGH_SEVERE
    if x < low_mild:
        return Label.LOW_MILD
    if x > high_mild:
        return Label.HIGH_MILD
    return Label.NOT_AN_OUTLIER


class LabeledSample:
    """A sample whose points are labelled by the fences; order is kept."""

    __slots__ = ("_sample", "_fences")

    def __init__(self, sample: Sample, fences: Fences) -> None:
        self._sample = sample
        self._fences = fences

    def __repr__(self) -> str:
        return f"LabeledSample(fences={self._fences!r}, sample={self._sample!r})"

    @property
    def sample(self) -> Sample:
        """The underlying sample."""
        return self._sample

    def __len__(self) -> int:
        return len(self._sample)

    def __iter__(self) -> Iterator[tuple[float, Label]]:
        fences = self._fences
        return ((x, _label(x, fences)) for x in self._sample)

    def __getitem__(self, index: Any) -> Any:
        """Return the label of the point at ``index`` (a list of labels for a slice)."""
        if isinstance(index, slice):
            return [_label(x, self._fences) for x in self._sample[index]]
        return _label(self._sample[index], self._fences)

    def count(self) -> tuple[int, int, int, int, int]:
        """Return the number of points labelled low severe, low mild, normal,
        high mild and high severe, in that order."""
        counts = dict.fromkeys(Label, 0)
        for _, label in self:
            counts[label] += 1
        return (
            counts[Label.LOW_SEVERE],
            counts[Label.LOW_MILD],
            counts[Label.NOT_AN_OUTLIER],
            counts[Label.HIGH_MILD],
            counts[Label.HIGH_SEVERE],
        )

    def fences(self) -> Fences:
        """Return the low severe, low mild, high mild and high severe fences."""
        return self._fences


def classify(sample: Sequence[float]) -> LabeledSample:
    """Classify the points of ``sample`` and return the labelled sample."""
    if not isinstance(sample, Sample):
        sample = Sample(sample)
    q1, _, q3 = sample.percentiles().quartiles()
    iqr = q3 - q1
    fences = (
        q1 - _K_SEVERE * iqr,
        q1 - _K_MILD * iqr,
        q3 + _K_MILD * iqr,
        q3 + _K_SEVERE * iqr,
    )
    return LabeledSample(sample, fences)