"""Numerical algorithms module.

This module contains implementations of:
- Descriptive statistics over numeric sequences
- Number theory (primality, factorial, GCD/LCM, Fibonacci, perfect numbers)
- Dense matrix construction and linear algebra
- Basic arithmetic reductions and geometry formulas
"""

from math_util.algorithms.basic import (
    absolute,
    divide,
    nth_root,
    power,
    product,
    round_to,
    subtract,
    sum_numbers,
)
from math_util.algorithms.geometry import (
    box_volume,
    circle_area,
    circle_perimeter,
    distance,
    rectangle_area,
    sphere_volume,
    triangle_area,
    triangle_area_heron,
)
from math_util.algorithms.matrices import (
    Matrix,
    MatrixShape,
    add,
    determinant_2x2,
    from_ndarray,
    identity,
    multiply,
    shape,
    to_ndarray,
    transpose,
    validate_matrix,
    zeros,
)
from math_util.algorithms.number_theory import (
    factorial,
    fibonacci_sequence,
    gcd,
    is_perfect,
    is_prime,
    lcm,
)
from math_util.algorithms.statistics import (
    MinMax,
    mean,
    median,
    min_max,
    mode,
    standard_deviation,
    sum_of_squares,
)

__all__ = [
    # Basic arithmetic
    "absolute",
    "divide",
    "nth_root",
    "power",
    "product",
    "round_to",
    "subtract",
    "sum_numbers",
    # Geometry
    "box_volume",
    "circle_area",
    "circle_perimeter",
    "distance",
    "rectangle_area",
    "sphere_volume",
    "triangle_area",
    "triangle_area_heron",
    # Matrix
    "Matrix",
    "MatrixShape",
    "add",
    "determinant_2x2",
    "from_ndarray",
    "identity",
    "multiply",  # Matrix product; see basic.product for scalars
    "shape",
    "to_ndarray",
    "transpose",
    "validate_matrix",
    "zeros",
    # Number theory
    "factorial",
    "fibonacci_sequence",
    "gcd",
    "is_perfect",
    "is_prime",
    "lcm",
    # Statistics
    "MinMax",
    "mean",
    "median",
    "min_max",
    "mode",
    "standard_deviation",
    "sum_of_squares",
]
