"""Descriptive statistics over numeric sequences.

Every function accepts any finite sequence of real numbers (list, tuple or
1-D numpy array) and never mutates it. Empty input is not an error: each
function returns a documented neutral value instead.

Key Features:
- Population (N-divisor) standard deviation
- Multi-valued mode in first-encounter order
- MinMax result that distinguishes "no data" from numeric extrema
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MinMax:
    """Minimum and maximum of a sequence.

    Both fields are ``None`` when the sequence was empty.
    """

    min: float | None
    """Smallest element, or None for empty input."""

    max: float | None
    """Largest element, or None for empty input."""

    @property
    def is_empty(self) -> bool:
        """True if computed from an empty sequence."""
        return self.min is None and self.max is None

    def __iter__(self) -> Iterator[float | None]:
        yield self.min
        yield self.max


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``.

    Args:
        values: Numeric sequence.

    Returns:
        sum(values) / len(values), or 0.0 for an empty sequence.

    Example:
        >>> mean([1, 2, 3, 4, 5])
        3.0
    """
    if len(values) == 0:
        return 0.0
    return sum(values) / len(values)


def median(values: Sequence[float]) -> float:
    """Middle value of the sorted sequence.

    For an even number of elements the two middle values are averaged.

    Args:
        values: Numeric sequence (left untouched; a sorted copy is used).

    Returns:
        Median, or 0.0 for an empty sequence.

    Example:
        >>> median([1, 2, 2, 3, 4, 4, 4, 5])
        3.5
    """
    n = len(values)
    if n == 0:
        return 0.0

    ordered = sorted(values)
    middle = n // 2

    if n % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def mode(values: Sequence[float]) -> list[float]:
    """All most-frequent values.

    Values are compared with ``==``, so ``1`` and ``1.0`` count as the same
    value (the first spelling encountered is the one reported).

    Args:
        values: Numeric sequence.

    Returns:
        Every value whose count equals the maximum count, in order of first
        appearance. Empty list for an empty sequence.

    Example:
        >>> mode([1, 2, 2, 3, 4, 4, 4, 5])
        [4]
        >>> mode([1, 1, 2, 2])
        [1, 2]
    """
    if len(values) == 0:
        return []

    frequency: dict[float, int] = {}
    for value in values:
        frequency[value] = frequency.get(value, 0) + 1

    max_count = max(frequency.values())
    return [value for value, count in frequency.items() if count == max_count]


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation.

    Uses the biased estimator: sqrt(Σ(x - μ)² / N), where μ = mean(values).

    Args:
        values: Numeric sequence.

    Returns:
        Standard deviation (always >= 0), or 0.0 for an empty sequence.
    """
    n = len(values)
    if n == 0:
        return 0.0

    mu = mean(values)
    variance = sum((x - mu) ** 2 for x in values) / n
    return math.sqrt(variance)


def min_max(values: Sequence[float]) -> MinMax:
    """Smallest and largest element.

    Example:
        >>> lo, hi = min_max([3, 1, 2])
        >>> lo, hi
        (1, 3)
        >>> min_max([]).is_empty
        True
    """
    if len(values) == 0:
        return MinMax(min=None, max=None)
    return MinMax(min=min(values), max=max(values))


def sum_of_squares(values: Sequence[float]) -> float:
    """Σ x² over ``values`` (0 for an empty sequence)."""
    return sum(x * x for x in values)


__all__ = [
    "MinMax",
    "mean",
    "median",
    "mode",
    "standard_deviation",
    "min_max",
    "sum_of_squares",
]
