"""Basic arithmetic reductions and scalar helpers."""

from __future__ import annotations

import math
from functools import reduce
from typing import Final

from math_util.errors import DomainError

DEFAULT_ROOT_DEGREE: Final[int] = 2
"""Degree used by nth_root() when none is given (square root)."""

DEFAULT_DECIMALS: Final[int] = 0
"""Decimal places used by round_to() when none are given."""


def sum_numbers(*numbers: float) -> float:
    """Sum of all arguments (0 when called with none)."""
    return sum(numbers)


def product(*numbers: float) -> float:
    """Product of all arguments (1 when called with none)."""
    return math.prod(numbers)


def subtract(*numbers: float) -> float:
    """Left-fold subtraction: subtract(a, b, c) == a - b - c.

    Raises:
        DomainError: If called without arguments.
    """
    if not numbers:
        msg = "subtract() requires at least one number"
        raise DomainError(msg)
    return reduce(lambda acc, num: acc - num, numbers)


def divide(*numbers: float) -> float:
    """Left-fold division: divide(a, b, c) == a / b / c.

    Raises:
        DomainError: If called without arguments.
        ZeroDivisionError: If any divisor is zero.
    """
    if not numbers:
        msg = "divide() requires at least one number"
        raise DomainError(msg)

    def _step(acc: float, num: float) -> float:
        if num == 0:
            msg = "Cannot divide by zero"
            raise ZeroDivisionError(msg)
        return acc / num

    return reduce(_step, numbers)


def power(base: float, exponent: float) -> float:
    """base raised to exponent."""
    return base**exponent


def nth_root(number: float, root: float = DEFAULT_ROOT_DEGREE) -> float:
    """The root-th root of number, computed as number ** (1 / root).

    Raises:
        DomainError: If root is zero.

    Example:
        >>> nth_root(27, 3)
        3.0
    """
    if root == 0:
        msg = "Root degree cannot be zero"
        raise DomainError(msg)
    return number ** (1 / root)


def absolute(number: float) -> float:
    return abs(number)


def round_to(number: float, decimals: int = DEFAULT_DECIMALS) -> float:
    """Round half up to ``decimals`` places.

    Unlike the builtin round(), ties always go towards +infinity:
    round_to(2.5) == 3 and round_to(-2.5) == -2.

    Example:
        >>> round_to(3.14159, 2)
        3.14
    """
    factor = 10**decimals
    return math.floor(number * factor + 0.5) / factor


__all__ = [
    "DEFAULT_ROOT_DEGREE",
    "DEFAULT_DECIMALS",
    "sum_numbers",
    "product",
    "subtract",
    "divide",
    "power",
    "nth_root",
    "absolute",
    "round_to",
]
