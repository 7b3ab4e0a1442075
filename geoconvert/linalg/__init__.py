"""Linear algebra helpers for coordinate frame transforms.

This package provides:
- invert_matrix: general n x n inversion by Gauss-Jordan elimination
- make_homogeneous / apply_homogeneous: 4x4 rotation + translation transforms
"""

from geoconvert.linalg.homogeneous import apply_homogeneous, make_homogeneous
from geoconvert.linalg.inverse import (
    ZERO_PIVOT_TOL,
    InvalidInputError,
    SingularMatrixError,
    invert_matrix,
)

__all__ = [
    # Inversion
    "invert_matrix",
    "ZERO_PIVOT_TOL",
    # Errors
    "InvalidInputError",
    "SingularMatrixError",
    # Homogeneous transforms
    "make_homogeneous",
    "apply_homogeneous",
]
