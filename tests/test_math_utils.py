"""Tests for math utilities"""
import math

import pytest

from utilkit.exceptions import InvalidArgumentError
from utilkit.math_utils import (
    add,
    average,
    clamp,
    factorial,
    is_even,
    is_odd,
    lerp,
    multiply,
    round_to,
    sum_numbers,
)

NAN = float("nan")
INF = float("inf")
HUGE = 10 ** 400


class TestClamp:
    """Test clamping."""

    def test_within_bounds(self):
        """Test values already inside the range."""
        assert clamp(5, 0, 10) == 5
        assert clamp(0, 0, 10) == 0
        assert clamp(10, 0, 10) == 10

    def test_outside_bounds(self):
        """Test values below min and above max."""
        assert clamp(15, 0, 10) == 10
        assert clamp(-5, 0, 10) == 0
        assert clamp(-15, -10, -1) == -10

    def test_decimals(self):
        """Test float bounds."""
        assert clamp(0.05, 0.1, 10.9) == 0.1
        assert clamp(11.5, 0.1, 10.9) == 10.9

    def test_equal_bounds(self):
        """Test a degenerate range."""
        assert clamp(5, 10, 10) == 10
        assert clamp(15, 10, 10) == 10

    def test_infinities(self):
        """Test infinite values and bounds."""
        assert clamp(INF, 0, 10) == 10
        assert clamp(-INF, 0, 10) == 0
        assert clamp(5, -INF, INF) == 5
        assert clamp(100, -INF, 10) == 10

    @pytest.mark.parametrize("args", [(NAN, 0, 10), (5, NAN, 10), (5, 0, NAN)])
    def test_nan_propagates(self, args):
        """Test that any NaN input gives NaN."""
        assert math.isnan(clamp(*args))

    def test_inverted_bounds_raise(self):
        """Test that min > max is a programmer error."""
        with pytest.raises(InvalidArgumentError, match="Invalid bounds: min must be less than or equal to max"):
            clamp(5, 10, 0)

    def test_ints_beyond_float_range(self):
        """Test that ints too large for a float are compared exactly."""
        assert clamp(HUGE, 0, 10) == 10
        assert clamp(-HUGE, 0, 10) == 0
        assert clamp(5, 0, HUGE) == 5
        assert clamp(HUGE, 0, INF) == HUGE


class TestLerp:
    """Test linear interpolation."""

    def test_endpoints(self):
        """Test t=0 and t=1."""
        assert lerp(0, 10, 0) == 0
        assert lerp(0, 10, 1) == 10
        assert lerp(-5, 5, 1) == 5

    def test_midpoints(self):
        """Test interpolation inside [0, 1]."""
        assert lerp(0, 10, 0.5) == 5
        assert lerp(0, 100, 0.25) == 25
        assert lerp(-10, -5, 0.5) == -7.5
        assert lerp(1.5, 2.5, 0.3) == pytest.approx(1.8)

    def test_extrapolation(self):
        """Test t outside [0, 1]."""
        assert lerp(0, 10, -0.5) == -5
        assert lerp(10, 20, 2) == 30

    @pytest.mark.parametrize("args", [(NAN, 1, 0.5), (0, NAN, 0.5), (0, 1, NAN)])
    def test_nan_propagates(self, args):
        """Test that any NaN input gives NaN."""
        assert math.isnan(lerp(*args))

    def test_same_infinity(self):
        """Test that matching infinities return that infinity."""
        assert lerp(INF, INF, 0.5) == INF
        assert lerp(-INF, -INF, 0.5) == -INF

    def test_infinite_start(self):
        """Test an infinite start point."""
        assert lerp(INF, 10, 0) == INF
        assert lerp(INF, 10, 1) == 10
        assert lerp(-INF, 10, 0.5) == -INF
        assert lerp(INF, 10, -0.5) == INF

    def test_infinite_end(self):
        """Test an infinite end point."""
        assert lerp(0, INF, 0) == 0
        assert lerp(0, INF, 1) == INF
        assert lerp(0, INF, 0.5) == INF
        assert lerp(0, -INF, 0.5) == -INF
        assert lerp(0, INF, 1.5) == INF

    def test_ints_beyond_float_range(self):
        """Test that huge int endpoints are not treated as NaN or infinite."""
        assert lerp(HUGE, HUGE + 10, 0) == HUGE
        assert lerp(HUGE, HUGE + 10, 1) == HUGE + 10


class TestRoundTo:
    """Test rounding to decimal places."""

    def test_rounds_half_up(self):
        """Test that halves round up rather than to even."""
        assert round_to(2.5, 0) == 3
        assert round_to(0.5, 0) == 1
        assert round_to(-2.5, 0) == -2

    def test_decimal_places(self):
        """Test common precisions."""
        assert round_to(3.14159, 2) == 3.14
        assert round_to(3.14159, 0) == 3
        assert round_to(1.23456, 4) == 1.2346

    def test_integral_float_decimals(self):
        """Test that a whole float decimal count is accepted."""
        assert round_to(3.14159, 2.0) == 3.14

    def test_non_finite_values_unchanged(self):
        """Test that infinities pass through."""
        assert round_to(INF, 2) == INF
        assert round_to(-INF, 2) == -INF

    def test_many_decimals_unchanged(self):
        """Test that more than 15 decimals returns the value."""
        assert round_to(1.123456789012345678, 16) == 1.123456789012345678

    def test_overflow_returns_value(self):
        """Test that a scaled value overflowing returns the input."""
        assert round_to(1e300, 15) == 1e300

    def test_nan(self):
        """Test NaN value or decimals."""
        assert math.isnan(round_to(NAN, 2))
        assert math.isnan(round_to(1.5, NAN))

    @pytest.mark.parametrize("decimals", [-1, 1.5, "2", None, True])
    def test_invalid_decimals_raise(self, decimals):
        """Test that negative or non-integer decimals are a programmer error."""
        with pytest.raises(InvalidArgumentError, match="decimals must be a non-negative integer"):
            round_to(1.5, decimals)

    def test_ints_beyond_float_range(self):
        """Test that huge ints come back unchanged instead of overflowing."""
        assert round_to(HUGE, 2) == HUGE
        assert round_to(-HUGE, 0) == -HUGE
        with pytest.raises(InvalidArgumentError):
            round_to(HUGE, -1)


class TestParity:
    """Test is_even and is_odd."""

    def test_integers(self):
        """Test positive, negative and zero."""
        assert is_even(4) is True
        assert is_even(0) is True
        assert is_even(-2) is True
        assert is_even(3) is False
        assert is_odd(3) is True
        assert is_odd(-3) is True
        assert is_odd(4) is False

    def test_whole_floats(self):
        """Test that whole floats count as integers."""
        assert is_even(4.0) is True
        assert is_odd(5.0) is True

    def test_ints_beyond_float_range(self):
        """Test parity of ints too large for a float."""
        assert is_even(HUGE) is True
        assert is_odd(HUGE + 1) is True

    @pytest.mark.parametrize("value", [2.5, NAN, INF, None, "4", True, [2]])
    def test_non_integers(self, value):
        """Test that anything but an integer is neither even nor odd."""
        assert is_even(value) is False
        assert is_odd(value) is False


class TestSumAndAverage:
    """Test sum_numbers and average."""

    def test_sum(self):
        """Test summing ints and floats."""
        assert sum_numbers([1, 2, 3]) == 6
        assert sum_numbers([1, 2, 3.5]) == 6.5
        assert sum_numbers((-1, 1)) == 0

    def test_empty_sum_is_zero(self):
        """Test the empty sum."""
        assert sum_numbers([]) == 0

    def test_average(self):
        """Test the arithmetic mean."""
        assert average([2, 4, 9]) == 5
        assert average([1.5]) == 1.5

    def test_empty_average_is_nan(self):
        """Test that the mean of nothing is NaN."""
        assert math.isnan(average([]))

    @pytest.mark.parametrize("values", [None, "123", 5, [1, "2"], [1, None], [1, NAN], [1, True]])
    def test_invalid_input_is_nan(self, values):
        """Test that non-lists and non-numeric elements give NaN."""
        assert math.isnan(sum_numbers(values))
        assert math.isnan(average(values))

    def test_ints_beyond_float_range(self):
        """Test that huge ints sum exactly and their mean saturates to infinity."""
        assert sum_numbers([HUGE]) == HUGE
        assert sum_numbers([HUGE, 1]) == HUGE + 1
        assert average([HUGE, HUGE]) == INF
        assert average([-HUGE]) == -INF
        assert average([HUGE, -HUGE]) == 0


class TestArithmetic:
    """Test add, multiply and factorial."""

    def test_add_and_multiply(self):
        """Test the basic operations."""
        assert add(2, 3) == 5
        assert add(-1.5, 0.5) == -1
        assert multiply(4, 2.5) == 10
        assert multiply(-3, 0) == 0

    def test_factorial(self):
        """Test small factorials."""
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_factorial_negative_raises(self):
        """Test that negative input is rejected."""
        with pytest.raises(InvalidArgumentError, match="not defined for negative numbers"):
            factorial(-1)

    def test_factorial_non_integer_raises(self):
        """Test that fractional input is rejected."""
        with pytest.raises(InvalidArgumentError):
            factorial(2.5)
