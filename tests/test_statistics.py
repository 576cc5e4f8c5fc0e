"""Tests for descriptive statistics."""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from math_util.algorithms.statistics import (
    MinMax,
    mean,
    median,
    min_max,
    mode,
    standard_deviation,
    sum_of_squares,
)

finite_floats = st.floats(
    min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False
)


class TestMean:
    """Tests for mean function."""

    def test_simple_sequence(self) -> None:
        """Mean of 1..5 is 3."""
        assert mean([1, 2, 3, 4, 5]) == 3

    def test_empty_returns_zero(self) -> None:
        """Empty input should return 0, not raise."""
        assert mean([]) == 0

    def test_accepts_tuple_and_ndarray(self) -> None:
        """Any sequence type should work."""
        assert mean((2, 4)) == 3
        assert mean(np.array([1.0, 2.0, 3.0])) == 2.0

    def test_negative_values(self) -> None:
        """Negative values should be averaged normally."""
        assert mean([-2, 2, -4, 4]) == 0


class TestMedian:
    """Tests for median function."""

    def test_odd_length(self) -> None:
        """Odd length returns the middle element."""
        assert median([1, 2, 3, 4, 5]) == 3

    def test_even_length_averages_middle_pair(self) -> None:
        """Even length returns the mean of the two middle elements."""
        assert median([1, 2, 2, 3, 4, 4, 4, 5]) == 3.5

    def test_unsorted_input(self) -> None:
        """Input order should not matter."""
        assert median([5, 1, 3]) == 3
        assert median([4, 1, 3, 2]) == 2.5

    def test_does_not_mutate_input(self) -> None:
        """Sorting must happen on a copy."""
        values = [3, 1, 2]
        median(values)
        assert values == [3, 1, 2]

    def test_empty_returns_zero(self) -> None:
        """Empty input should return 0."""
        assert median([]) == 0

    def test_single_element(self) -> None:
        """Single element is its own median."""
        assert median([7]) == 7


class TestMode:
    """Tests for mode function."""

    def test_single_mode(self) -> None:
        """Most frequent value is returned as a one-element list."""
        assert mode([1, 2, 2, 3, 4, 4, 4, 5]) == [4]

    def test_multiple_modes(self) -> None:
        """Ties return every most-frequent value."""
        assert mode([1, 1, 2, 2, 3]) == [1, 2]

    def test_first_encounter_order(self) -> None:
        """Modes are listed in order of first appearance."""
        assert mode([3, 1, 3, 1]) == [3, 1]

    def test_all_unique(self) -> None:
        """When every value appears once, all are modes."""
        assert mode([5, 4, 3]) == [5, 4, 3]

    def test_exact_numeric_equality(self) -> None:
        """1 and 1.0 count as the same value."""
        assert mode([1, 1.0, 2]) == [1]

    def test_empty_returns_empty_list(self) -> None:
        """Empty input should return an empty list."""
        assert mode([]) == []


class TestStandardDeviation:
    """Tests for standard_deviation function."""

    def test_population_estimator(self) -> None:
        """Should divide by N, not N-1."""
        assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0

    def test_constant_sequence_is_zero(self) -> None:
        """All-equal values have zero spread."""
        assert standard_deviation([5, 5, 5, 5]) == 0

    def test_empty_returns_zero(self) -> None:
        """Empty input should return 0."""
        assert standard_deviation([]) == 0

    def test_matches_numpy_ddof_zero(self) -> None:
        """Should agree with numpy's population std."""
        values = [1.5, 2.25, -3.0, 10.0, 4.75]
        assert np.isclose(standard_deviation(values), np.std(values))

    @given(st.lists(finite_floats, max_size=50))
    def test_non_negative(self, values: list[float]) -> None:
        """Standard deviation is never negative."""
        assert standard_deviation(values) >= 0

    @given(st.integers(-10**6, 10**6), st.integers(1, 50))
    def test_zero_for_equal_elements(self, value: int, count: int) -> None:
        """Equal elements give exactly zero."""
        assert standard_deviation([value] * count) == 0

    @given(st.lists(st.integers(-1000, 1000), min_size=2, max_size=50, unique=True))
    def test_positive_for_distinct_elements(self, values: list[int]) -> None:
        """Any spread gives a strictly positive result."""
        assert standard_deviation(values) > 0


class TestMinMax:
    """Tests for min_max function and MinMax dataclass."""

    def test_min_and_max(self) -> None:
        """Should return both extremes."""
        result = min_max([3, -1, 7, 2])
        assert result.min == -1
        assert result.max == 7
        assert not result.is_empty

    def test_unpacking(self) -> None:
        """MinMax should unpack as (min, max)."""
        lo, hi = min_max([4, 2, 9])
        assert (lo, hi) == (2, 9)

    def test_empty_returns_sentinel(self) -> None:
        """Empty input gives (None, None), distinct from any numeric pair."""
        result = min_max([])
        assert result == MinMax(min=None, max=None)
        assert result.is_empty

    def test_zero_is_not_empty(self) -> None:
        """A legitimate (0, 0) result is not the empty sentinel."""
        assert not min_max([0]).is_empty

    def test_immutable(self) -> None:
        """MinMax should be immutable."""
        result = min_max([1, 2])
        with pytest.raises(AttributeError):
            result.min = 0  # type: ignore[misc]

    def test_slots(self) -> None:
        """MinMax should use slots (no __dict__)."""
        assert not hasattr(min_max([1]), "__dict__")

    @given(st.lists(finite_floats, min_size=1, max_size=50))
    def test_bounds_every_element(self, values: list[float]) -> None:
        """min <= x <= max for every element."""
        result = min_max(values)
        assert all(result.min <= x <= result.max for x in values)


class TestSumOfSquares:
    """Tests for sum_of_squares function."""

    def test_simple_sequence(self) -> None:
        """1 + 4 + 9 = 14."""
        assert sum_of_squares([1, 2, 3]) == 14

    def test_negative_values(self) -> None:
        """Signs vanish when squared."""
        assert sum_of_squares([-3, 4]) == 25

    def test_empty_returns_zero(self) -> None:
        """Empty input should return 0."""
        assert sum_of_squares([]) == 0
