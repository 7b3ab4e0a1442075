"""4x4 homogeneous transforms combining a rotation and a translation.

A point p is mapped by a single matrix-vector product with the implicit
fourth coordinate w = 1:

    [p'; 1] = T @ [p; 1],    T = [[R, t], [0, 0, 0, 1]]
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from geoconvert.linalg.inverse import InvalidInputError


def make_homogeneous(rotation: ArrayLike, translation: ArrayLike) -> NDArray[np.float64]:
    """Assemble a 4x4 homogeneous transform from a rotation and a translation.

    Args:
        rotation: Rotation (or any linear map) of shape (3, 3).
        translation: Translation vector of shape (3,).

    Returns:
        Transform of shape (4, 4) whose last row is [0, 0, 0, 1].

    Raises:
        InvalidInputError: If the inputs do not have the shapes above.
    """
    R = np.asarray(rotation, dtype=np.float64)
    t = np.asarray(translation, dtype=np.float64).reshape(-1)
    if R.shape != (3, 3):
        raise InvalidInputError(f"rotation must be (3, 3), got {R.shape}")
    if t.shape != (3,):
        raise InvalidInputError(f"translation must be (3,), got {t.shape}")

    T = np.eye(4, dtype=np.float64)
    T[:3, :3] = R
    T[:3, 3] = t
    return T


def apply_homogeneous(transform: ArrayLike, point: ArrayLike) -> NDArray[np.float64]:
    """Apply a 4x4 homogeneous transform to a 3D point (w = 1).

    Args:
        transform: Homogeneous transform of shape (4, 4).
        point: Point of shape (3,).

    Returns:
        Transformed point of shape (3,).

    Raises:
        InvalidInputError: If the inputs do not have the shapes above.
    """
    T = np.asarray(transform, dtype=np.float64)
    p = np.asarray(point, dtype=np.float64).reshape(-1)
    if T.shape != (4, 4):
        raise InvalidInputError(f"transform must be (4, 4), got {T.shape}")
    if p.shape != (3,):
        raise InvalidInputError(f"point must be (3,), got {p.shape}")

    return T[:3, :3] @ p + T[:3, 3]
