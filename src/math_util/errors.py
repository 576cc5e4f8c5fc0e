"""Exception types raised by the math-util kernels.

Division by a zero operand uses the builtin ``ZeroDivisionError`` so that
callers can treat it exactly like Python's own arithmetic failures.
"""

from __future__ import annotations


class MathUtilError(Exception):
    """Base class for all errors defined by math-util."""


class DomainError(MathUtilError, ValueError):
    """Raised when an argument lies outside a function's valid domain."""


class DimensionMismatchError(DomainError):
    """Raised when matrix operands have incompatible shapes.

    A shape mismatch is a special case of a domain violation, so code that
    catches ``DomainError`` also sees these.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: tuple[int, int] | None = None,
        actual: tuple[int, int] | None = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)


__all__ = [
    "MathUtilError",
    "DomainError",
    "DimensionMismatchError",
]
