"""math-util: Self-contained numeric primitives for statistics, number theory and matrices."""

__version__ = "0.1.0"

from math_util.algorithms.basic import product, sum_numbers
from math_util.algorithms.number_theory import factorial, gcd, is_prime, lcm
from math_util.algorithms.statistics import mean, median
from math_util.errors import DimensionMismatchError, DomainError, MathUtilError

__all__ = [
    "__version__",
    "DimensionMismatchError",
    "DomainError",
    "MathUtilError",
    "factorial",
    "gcd",
    "is_prime",
    "lcm",
    "mean",
    "median",
    "product",
    "sum_numbers",
]
