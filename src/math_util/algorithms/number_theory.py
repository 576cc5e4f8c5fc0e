"""Integer-domain algorithms.

Primality testing, factorial, GCD/LCM, Fibonacci generation and perfect
number testing. All algorithms are iterative, so large arguments never hit
the interpreter's recursion limit.

Integer arguments may be Python ints, numpy integers, or floats holding an
integral value (``7.0``). Anything else raises DomainError.

References:
- Knuth: "The Art of Computer Programming", Vol. 2, §4.5.2 (Euclid)
- Crandall & Pomerance: "Prime Numbers" (2nd ed.), §3.1 (trial division)
"""

from __future__ import annotations

import math
import numbers

from math_util.errors import DomainError


def _as_int(value: numbers.Real, name: str) -> int:
    """Coerce an integral real to int, rejecting fractional values."""
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    msg = f"{name} must be an integer, got {value!r}"
    raise DomainError(msg)


def is_prime(n: int) -> bool:
    """Check primality using the 6k±1 wheel.

    After ruling out multiples of 2 and 3, every remaining prime candidate
    has the form 6k-1 or 6k+1, so trial division only visits those values
    up to √n.

    Args:
        n: Integer to test.

    Returns:
        True if n is prime.

    Example:
        >>> [p for p in range(20) if is_prime(p)]
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    n = _as_int(n, "n")

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def factorial(n: int) -> int:
    """n! computed iteratively.

    Raises:
        DomainError: If n is negative or not an integer.

    Example:
        >>> factorial(5)
        120
    """
    n = _as_int(n, "n")

    if n < 0:
        msg = f"Factorial is undefined for negative numbers, got {n}"
        raise DomainError(msg)

    return math.prod(range(2, n + 1))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor via the Euclidean algorithm.

    The result is always non-negative regardless of operand signs, and
    gcd(0, 0) is 0.

    Example:
        >>> gcd(48, 18)
        6
        >>> gcd(-48, 18)
        6
    """
    a = abs(_as_int(a, "a"))
    b = abs(_as_int(b, "b"))

    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, |a·b| / gcd(a, b).

    Raises:
        ZeroDivisionError: If both a and b are zero.

    Example:
        >>> lcm(4, 6)
        12
    """
    a = _as_int(a, "a")
    b = _as_int(b, "b")

    divisor = gcd(a, b)
    if divisor == 0:
        msg = "LCM is undefined when both operands are zero"
        raise ZeroDivisionError(msg)

    return abs(a * b) // divisor


def fibonacci_sequence(n: int) -> list[int]:
    """First n Fibonacci numbers, starting 0, 1, 1, 2, ...

    Returns:
        Eagerly built list; empty for n <= 0.

    Example:
        >>> fibonacci_sequence(10)
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
    """
    n = _as_int(n, "n")

    if n <= 0:
        return []
    if n == 1:
        return [0]

    sequence = [0, 1]
    for _ in range(2, n):
        sequence.append(sequence[-1] + sequence[-2])
    return sequence


def is_perfect(n: int) -> bool:
    """Check whether n equals the sum of its proper divisors.

    Divisors are collected in pairs (i, n // i) for i up to √n; the partner
    is skipped when i² == n so square roots are counted once.

    Example:
        >>> [k for k in range(1, 500) if is_perfect(k)]
        [6, 28, 496]
    """
    n = _as_int(n, "n")

    if n <= 1:
        return False

    total = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            total += i
            if i * i != n:
                total += n // i
        i += 1
    return total == n


__all__ = [
    "is_prime",
    "factorial",
    "gcd",
    "lcm",
    "fibonacci_sequence",
    "is_perfect",
]
