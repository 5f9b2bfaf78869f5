"""Math utilities for numbers.

Data problems (NaN, non-numeric values) propagate as NaN or False.
Broken control arguments (inverted bounds, bad decimal counts) raise
InvalidArgumentError.
"""

import math
from numbers import Real
from typing import Any

from utilkit.constants import MAX_ROUND_DECIMALS
from utilkit.exceptions import InvalidArgumentError
from utilkit.logging_config import get_logger

logger = get_logger(__name__)

NAN = float("nan")


def _isnan(value: Any) -> bool:
    """NaN check that never converts ints, which may exceed the float range."""
    return isinstance(value, float) and math.isnan(value)


def _isfinite(value: Any) -> bool:
    """Finiteness check that treats every int as finite."""
    return not isinstance(value, float) or math.isfinite(value)


def _is_number(value: Any) -> bool:
    """True for real numbers other than bool and NaN."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not _isnan(value)


def _is_integral(value: Any) -> bool:
    """True for ints and finite whole floats, never bool."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return _isfinite(value) and float(value).is_integer()


def clamp(value: float, minimum: float, maximum: float) -> float:
    """
    Constrain a value between minimum and maximum bounds.

    Args:
        value: The value to constrain
        minimum: Lower bound
        maximum: Upper bound

    Returns:
        The constrained value, NaN if any input is NaN

    Raises:
        InvalidArgumentError: If minimum > maximum

    Example:
        clamp(15, 0, 10) -> 10
    """
    if _isnan(value) or _isnan(minimum) or _isnan(maximum):
        return NAN

    if minimum > maximum:
        logger.debug(f"Rejected clamp bounds {minimum!r} > {maximum!r}")
        raise InvalidArgumentError(
            "clamp", "min", "Invalid bounds: min must be less than or equal to max"
        )

    return min(max(value, minimum), maximum)


def lerp(a: float, b: float, t: float) -> float:
    """
    Linearly interpolate between a (t=0) and b (t=1).

    Values of t outside [0, 1] extrapolate. Infinite endpoints keep their
    sign except at the exact boundary parameters.

    Example:
        lerp(0, 10, 0.5) -> 5.0
    """
    if _isnan(a) or _isnan(b) or _isnan(t):
        return NAN

    if not _isfinite(a) or not _isfinite(b):
        if a == b:
            return a
        if t == 0:
            return a
        if t == 1:
            return b
        if not _isfinite(a):
            if t > 0:
                return math.inf if a > 0 else -math.inf
            return a
        if t < 1:
            return math.inf if b > 0 else -math.inf
        return b

    return a + (b - a) * t


def round_to(value: float, decimals: Any) -> float:
    """
    Round a number to a number of decimal places, halves rounding up.

    Args:
        value: The value to round
        decimals: Decimal places, a non-negative integer

    Returns:
        The rounded value. Non-finite values and more than 15 decimals
        return the value unchanged.

    Raises:
        InvalidArgumentError: If decimals is negative or not an integer

    Example:
        round_to(2.5, 0) -> 3.0
        round_to(3.14159, 2) -> 3.14
    """
    if _isnan(value) or _isnan(decimals):
        return NAN

    if not _isfinite(value):
        return value

    if not _is_integral(decimals) or decimals < 0:
        logger.debug(f"Rejected decimal count {decimals!r}")
        raise InvalidArgumentError("round_to", "decimals", "decimals must be a non-negative integer")

    # ints are already whole at every precision
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if decimals > MAX_ROUND_DECIMALS:
        return value

    multiplier = 10 ** int(decimals)
    shifted = value * multiplier
    if not _isfinite(shifted):
        return value

    # floor(x + 0.5) rounds halves towards +inf, unlike round()'s banker's rounding
    return math.floor(shifted + 0.5) / multiplier


def is_even(n: Any) -> bool:
    """Check if a value is an even integer."""
    if not _is_integral(n):
        return False
    return n % 2 == 0


def is_odd(n: Any) -> bool:
    """Check if a value is an odd integer."""
    if not _is_integral(n):
        return False
    return n % 2 != 0


def sum_numbers(values: Any) -> float:
    """
    Sum a list of numbers.

    Args:
        values: List of numbers

    Returns:
        The total, 0 for an empty list, NaN for non-lists or if any
        element is not a number
    """
    if not isinstance(values, (list, tuple)):
        return NAN

    total = 0
    for value in values:
        if not _is_number(value):
            return NAN
        total += value

    return total


def average(values: Any) -> float:
    """
    Arithmetic mean of a list of numbers.

    Returns:
        The mean, NaN for empty lists, non-lists or non-numeric elements
    """
    if not isinstance(values, (list, tuple)) or not values:
        return NAN

    total = sum_numbers(values)
    if _isnan(total):
        return NAN

    try:
        return total / len(values)
    except OverflowError:
        # int totals past the float range
        return math.inf if total > 0 else -math.inf


def add(a: float, b: float) -> float:
    """Add two numbers."""
    return a + b


def multiply(a: float, b: float) -> float:
    """Multiply two numbers."""
    return a * b


def factorial(n: int) -> int:
    """
    Calculate n! iteratively.

    Args:
        n: Non-negative integer

    Returns:
        The factorial of n

    Raises:
        InvalidArgumentError: If n is negative or not an integer
    """
    if not _is_integral(n):
        raise InvalidArgumentError("factorial", "n", "Factorial is only defined for integers")
    if n < 0:
        raise InvalidArgumentError("factorial", "n", "Factorial is not defined for negative numbers")

    result = 1
    for i in range(2, int(n) + 1):
        result *= i

    return result
