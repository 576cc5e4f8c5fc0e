"""Dense matrix construction and linear-algebra operations.

Matrices are plain nested lists (``list[list[float]]``): a list of rows, all
of the same length. Every operation returns freshly built lists and never
mutates its operands.

Key Features:
- Zero and identity construction
- Shape-checked addition and multiplication
- Transpose and 2×2 determinant
- Conversion to and from numpy arrays

Row lengths are taken from the first row and are not re-validated per row;
use validate_matrix() when the input comes from an untrusted source.

References:
- Golub & Van Loan: "Matrix Computations" (4th ed.), Section 1.1
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

import numpy as np

from math_util.errors import DimensionMismatchError, DomainError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


Matrix: TypeAlias = list[list[float]]
"""Dense row-major matrix."""


@dataclass(frozen=True, slots=True)
class MatrixShape:
    """Row and column count of a dense matrix."""

    rows: int
    """Number of rows."""

    cols: int
    """Length of each row (0 when there are no rows)."""

    @property
    def is_square(self) -> bool:
        """True if rows == cols."""
        return self.rows == self.cols

    def as_tuple(self) -> tuple[int, int]:
        """(rows, cols), matching numpy's ``ndarray.shape``."""
        return (self.rows, self.cols)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"rows": self.rows, "cols": self.cols}

    def __str__(self) -> str:
        return f"{self.rows}×{self.cols}"


def shape(matrix: Sequence[Sequence[float]]) -> MatrixShape:
    """Shape of ``matrix``, reading the column count from the first row."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows > 0 else 0
    return MatrixShape(rows=rows, cols=cols)


def validate_matrix(matrix: Sequence[Sequence[float]]) -> MatrixShape:
    """Check that every row has the same length.

    Returns:
        Shape of the matrix.

    Raises:
        DimensionMismatchError: If any row length differs from the first.
    """
    result = shape(matrix)
    for i, row in enumerate(matrix):
        if len(row) != result.cols:
            msg = (
                f"Ragged matrix: row {i} has {len(row)} columns, "
                f"expected {result.cols}"
            )
            raise DimensionMismatchError(
                msg, expected=(result.rows, result.cols), actual=(i, len(row))
            )
    return result


def zeros(rows: int, cols: int) -> Matrix:
    """Create a rows×cols matrix of zeros.

    Zero is a valid dimension: ``zeros(0, 3)`` is ``[]`` and ``zeros(2, 0)``
    is ``[[], []]``.

    Raises:
        DomainError: If either dimension is negative.

    Example:
        >>> zeros(2, 3)
        [[0, 0, 0], [0, 0, 0]]
    """
    if rows < 0 or cols < 0:
        msg = f"Matrix dimensions must be non-negative, got {rows}×{cols}"
        raise DomainError(msg)

    # Each row is its own list so that results never share storage
    return [[0] * cols for _ in range(rows)]


def identity(size: int) -> Matrix:
    """Create a size×size identity matrix.

    Example:
        >>> identity(2)
        [[1, 0], [0, 1]]
    """
    matrix = zeros(size, size)
    for i in range(size):
        matrix[i][i] = 1
    return matrix


def add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Element-wise sum of two matrices of equal shape.

    Raises:
        DimensionMismatchError: If the shapes differ.

    Example:
        >>> add([[1, 2], [3, 4]], [[10, 20], [30, 40]])
        [[11, 22], [33, 44]]
    """
    shape_a = shape(a)
    shape_b = shape(b)

    if shape_a != shape_b:
        msg = (
            "Both matrices must have the same dimensions, "
            f"got {shape_a} and {shape_b}"
        )
        raise DimensionMismatchError(
            msg, expected=shape_a.as_tuple(), actual=shape_b.as_tuple()
        )

    return [
        [value + row_b[j] for j, value in enumerate(row_a)]
        for row_a, row_b in zip(a, b, strict=True)
    ]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Matrix product a @ b using the triple-loop definition.

    Mathematical Definition:
        C[i][j] = Σ_k A[i][k] · B[k][j]

    Args:
        a: m×n matrix.
        b: n×p matrix.

    Returns:
        m×p matrix.

    Raises:
        DimensionMismatchError: If a's column count differs from b's row count.

    Example:
        >>> multiply([[1, 2], [3, 4]], identity(2))
        [[1, 2], [3, 4]]
    """
    shape_a = shape(a)
    shape_b = shape(b)

    if shape_a.cols != shape_b.rows:
        msg = (
            "Number of columns in matrix A must equal number of rows in matrix B, "
            f"got {shape_a} and {shape_b}"
        )
        raise DimensionMismatchError(
            msg, expected=(shape_a.cols, shape_b.cols), actual=shape_b.as_tuple()
        )

    result = zeros(shape_a.rows, shape_b.cols)

    for i in range(shape_a.rows):
        for j in range(shape_b.cols):
            for k in range(shape_b.rows):
                result[i][j] += a[i][k] * b[k][j]

    return result


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Swap rows and columns: result[j][i] = matrix[i][j].

    Raises:
        DimensionMismatchError: If the matrix has no rows, since its column
            count (the row count of the result) is then undefined.

    Example:
        >>> transpose([[1, 2, 3], [4, 5, 6]])
        [[1, 4], [2, 5], [3, 6]]
    """
    m_shape = shape(matrix)

    if m_shape.rows == 0:
        msg = "Cannot transpose a matrix with zero rows"
        raise DimensionMismatchError(msg, actual=m_shape.as_tuple())

    return [[row[j] for row in matrix] for j in range(m_shape.cols)]


def determinant_2x2(matrix: Sequence[Sequence[float]]) -> float:
    """Determinant of a 2×2 matrix, ad - bc.

    Raises:
        DimensionMismatchError: If the matrix is not exactly 2×2.

    Example:
        >>> determinant_2x2([[1, 2], [3, 4]])
        -2
    """
    m_shape = shape(matrix)

    if m_shape.as_tuple() != (2, 2):
        msg = f"Matrix must be 2×2, got {m_shape}"
        raise DimensionMismatchError(msg, expected=(2, 2), actual=m_shape.as_tuple())

    return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]


# =============================================================================
# NUMPY INTEROP
# =============================================================================


def to_ndarray(matrix: Sequence[Sequence[float]]) -> NDArray[np.float64]:
    """Convert a nested-list matrix to a 2-D float64 array.

    A matrix with no rows becomes an array of shape (0, 0).
    """
    m_shape = validate_matrix(matrix)
    return np.array(matrix, dtype=np.float64).reshape(m_shape.as_tuple())


def from_ndarray(array: ArrayLike) -> Matrix:
    """Convert a 2-D array-like to a nested-list matrix of Python floats.

    Raises:
        DimensionMismatchError: If the input is not two-dimensional.

    Example:
        >>> from_ndarray(np.eye(2))
        [[1.0, 0.0], [0.0, 1.0]]
    """
    arr = np.asarray(array, dtype=np.float64)

    if arr.ndim != 2:
        msg = f"Expected a 2-D array, got {arr.ndim}-D with shape {arr.shape}"
        raise DimensionMismatchError(msg)

    return arr.tolist()


__all__ = [
    "Matrix",
    "MatrixShape",
    "shape",
    "validate_matrix",
    "zeros",
    "identity",
    "add",
    "multiply",
    "transpose",
    "determinant_2x2",
    "to_ndarray",
    "from_ndarray",
]
