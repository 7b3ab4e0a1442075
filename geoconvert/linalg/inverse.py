"""Square matrix inversion by Gauss-Jordan elimination.

The inverse is built by row-reducing the input matrix to the identity while
applying the same row operations to an identity-seeded result matrix
(augmented-identity form). Row swaps use max-magnitude partial pivoting, and
a column whose best candidate pivot is within ``tol`` of zero is reported as
singular.

The routine always works on an internal float64 copy of its input, so the
caller's array is left untouched whether inversion succeeds or fails.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Pivot magnitudes at or below this are treated as zero
ZERO_PIVOT_TOL = 2.0 * np.finfo(np.float64).eps


class InvalidInputError(ValueError):
    """Matrix is missing, empty, non-square, or contains non-finite values."""


class SingularMatrixError(np.linalg.LinAlgError):
    """Matrix has no usable pivot in some column and cannot be inverted."""


def _validate_square(matrix: ArrayLike) -> NDArray[np.float64]:
    if matrix is None:
        raise InvalidInputError("matrix must not be None")

    try:
        work = np.array(matrix, dtype=np.float64, copy=True)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"matrix is not a numeric array: {e}") from e

    if work.ndim != 2:
        raise InvalidInputError(f"matrix must be 2-D, got {work.ndim}-D")
    if work.size == 0:
        raise InvalidInputError(f"matrix must not be empty, got shape {work.shape}")
    rows, cols = work.shape
    if rows != cols:
        raise InvalidInputError(f"matrix must be square, got shape {work.shape}")
    if not np.all(np.isfinite(work)):
        raise InvalidInputError("matrix contains NaN or infinite values")

    return work


def _row_swap(m: NDArray[np.float64], r0: int, r1: int) -> None:
    m[[r0, r1], :] = m[[r1, r0], :]


def _row_scale(m: NDArray[np.float64], a: float, r: int) -> None:
    m[r, :] *= a


def _row_scale_add(m: NDArray[np.float64], a: float, r0: int, r1: int) -> None:
    # row[r1] += a * row[r0]
    m[r1, :] += a * m[r0, :]


def invert_matrix(
    matrix: ArrayLike,
    tol: float = ZERO_PIVOT_TOL,
) -> NDArray[np.float64]:
    """Compute the inverse of a square matrix using Gauss-Jordan elimination.

    Args:
        matrix: Square matrix of shape (n, n). Nested sequences and numpy
            arrays are both accepted. It is never modified.
        tol: Pivot magnitude at or below which a column is considered to have
            no usable pivot.

    Returns:
        Inverse matrix of shape (n, n) such that ``matrix @ inverse`` is the
        identity within floating-point precision.

    Raises:
        InvalidInputError: If ``matrix`` is None, empty, not 2-D, not square,
            or contains NaN/inf.
        SingularMatrixError: If some column has no pivot larger than ``tol``
            among the rows not yet reduced.

    Example:
        >>> A = [[1, 2, 3], [-3, 2, 1], [4, -1, 1]]
        >>> np.round(invert_matrix(A), 12)
        array([[ 1.5, -2.5, -2. ],
               [ 3.5, -5.5, -5. ],
               [-2.5,  4.5,  4. ]])
    """
    work = _validate_square(matrix)
    n = work.shape[0]
    inverse = np.eye(n, dtype=np.float64)

    # Process the matrix one column at a time
    for c in range(n):
        # Bring the largest remaining entry of column c onto the diagonal
        pivot_row = c + int(np.argmax(np.abs(work[c:, c])))
        if abs(work[pivot_row, c]) <= tol:
            raise SingularMatrixError(
                f"matrix is singular: no pivot above {tol:.3g} in column {c}"
            )
        if pivot_row != c:
            _row_swap(work, c, pivot_row)
            _row_swap(inverse, c, pivot_row)

        # Scale the pivot row so the pivot becomes 1
        scale = 1.0 / work[c, c]
        _row_scale(work, scale, c)
        _row_scale(inverse, scale, c)

        # Zero out the rest of the column
        for r in range(n):
            if r != c:
                factor = -work[r, c]
                _row_scale_add(work, factor, c, r)
                _row_scale_add(inverse, factor, c, r)

    return inverse
