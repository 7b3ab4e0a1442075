"""
Unit tests for Gauss-Jordan matrix inversion.

Covers known inverses, pivoting (zero diagonal entries), singular detection,
input validation, and the guarantee that the caller's matrix is not modified.
"""

import numpy as np
import pytest

from geoconvert.linalg import (
    ZERO_PIVOT_TOL,
    InvalidInputError,
    SingularMatrixError,
    invert_matrix,
)


class TestKnownInverses:
    """Test inversion against hand-checked results."""

    def test_three_by_three(self):
        """Test the 3x3 case with an exact rational inverse."""
        A = np.array([[1, 2, 3], [-3, 2, 1], [4, -1, 1]], dtype=float)
        expected = np.array(
            [[1.5, -2.5, -2.0], [3.5, -5.5, -5.0], [-2.5, 4.5, 4.0]]
        )

        A_inv = invert_matrix(A)

        assert A_inv.shape == (3, 3)
        np.testing.assert_allclose(A_inv, expected, atol=1e-12)

    def test_identity(self):
        """Identity is its own inverse."""
        I = np.eye(5)
        np.testing.assert_array_equal(invert_matrix(I), I)

    def test_one_by_one(self):
        """Test scalar matrix."""
        np.testing.assert_allclose(invert_matrix([[4.0]]), [[0.25]])

    def test_diagonal(self):
        """Diagonal matrix inverts elementwise."""
        D = np.diag([2.0, -4.0, 0.5, 10.0])
        np.testing.assert_allclose(invert_matrix(D), np.diag([0.5, -0.25, 2.0, 0.1]))

    def test_nested_list_input(self):
        """Nested lists are accepted and an ndarray is returned."""
        A_inv = invert_matrix([[2, 0], [0, 4]])
        assert isinstance(A_inv, np.ndarray)
        assert A_inv.dtype == np.float64
        np.testing.assert_allclose(A_inv, [[0.5, 0.0], [0.0, 0.25]])


class TestPivoting:
    """Test row swapping when a diagonal entry is zero."""

    def test_permutation_matrix(self):
        """Zero on the diagonal forces a row swap."""
        P = np.array([[0.0, 1.0], [1.0, 0.0]])
        np.testing.assert_allclose(invert_matrix(P), P)

    def test_zero_leading_entry(self):
        """Matrix with zero in the top-left corner."""
        A = np.array([[0.0, 2.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 3.0]])

        A_inv = invert_matrix(A)

        np.testing.assert_allclose(A @ A_inv, np.eye(3), atol=1e-12)
        np.testing.assert_allclose(A_inv, np.linalg.inv(A), atol=1e-12)

    def test_small_pivot_is_swapped(self):
        """A tiny (but nonzero) pivot is replaced by a larger one."""
        A = np.array([[1e-20, 1.0], [1.0, 1.0]])

        A_inv = invert_matrix(A)

        np.testing.assert_allclose(A @ A_inv, np.eye(2), atol=1e-12)


class TestInverseProperties:
    """Test algebraic properties on random well-conditioned matrices."""

    @pytest.mark.parametrize("n", [2, 3, 4, 6, 10])
    def test_product_is_identity(self, n):
        """M @ inv(M) == I."""
        rng = np.random.default_rng(n)
        M = rng.normal(size=(n, n)) + n * np.eye(n)

        M_inv = invert_matrix(M)

        np.testing.assert_allclose(M @ M_inv, np.eye(n), atol=1e-10)
        np.testing.assert_allclose(M_inv @ M, np.eye(n), atol=1e-10)

    @pytest.mark.parametrize("n", [2, 4, 7])
    def test_double_inverse(self, n):
        """inv(inv(M)) == M."""
        rng = np.random.default_rng(100 + n)
        M = rng.uniform(-5.0, 5.0, size=(n, n)) + 5.0 * np.eye(n)

        np.testing.assert_allclose(invert_matrix(invert_matrix(M)), M, atol=1e-9)

    def test_matches_numpy(self):
        """Agrees with numpy.linalg.inv."""
        rng = np.random.default_rng(7)
        M = rng.normal(size=(5, 5)) + 3.0 * np.eye(5)

        np.testing.assert_allclose(invert_matrix(M), np.linalg.inv(M), atol=1e-10)

    def test_rigid_homogeneous_transform(self):
        """Inverse of [R t; 0 1] is [R^T -R^T t; 0 1]."""
        c, s = np.cos(0.3), np.sin(0.3)
        R = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        t = np.array([3.0e6, -1.5e6, 4.2e6])
        T = np.eye(4)
        T[:3, :3] = R
        T[:3, 3] = t

        expected = np.eye(4)
        expected[:3, :3] = R.T
        expected[:3, 3] = -R.T @ t

        np.testing.assert_allclose(invert_matrix(T), expected, atol=1e-8)


class TestSingularMatrix:
    """Test detection of matrices without a usable pivot."""

    def test_zero_row(self):
        """An all-zero row is singular."""
        A = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.5]])
        with pytest.raises(SingularMatrixError):
            invert_matrix(A)

    def test_zero_column(self):
        """An all-zero column is singular."""
        A = np.array([[0.0, 1.0], [0.0, 2.0]])
        with pytest.raises(SingularMatrixError, match="column 0"):
            invert_matrix(A)

    def test_zero_matrix(self):
        """The zero matrix is singular."""
        with pytest.raises(SingularMatrixError):
            invert_matrix(np.zeros((4, 4)))

    def test_dependent_rows(self):
        """Linearly dependent rows reduce to an exact zero pivot."""
        A = np.array([[1.0, 2.0], [2.0, 4.0]])
        with pytest.raises(SingularMatrixError, match="column 1"):
            invert_matrix(A)

    def test_custom_tolerance(self):
        """A pivot below a user-supplied tolerance is treated as zero."""
        A = np.array([[1e-10, 0.0], [0.0, 1.0]])

        np.testing.assert_allclose(invert_matrix(A), [[1e10, 0.0], [0.0, 1.0]])
        with pytest.raises(SingularMatrixError):
            invert_matrix(A, tol=1e-8)

    def test_is_linalg_error(self):
        """Singular errors can be caught as numpy LinAlgError."""
        assert issubclass(SingularMatrixError, np.linalg.LinAlgError)
        with pytest.raises(np.linalg.LinAlgError):
            invert_matrix([[0.0]])

    def test_default_tolerance(self):
        """Default zero band is twice the float64 machine epsilon."""
        assert ZERO_PIVOT_TOL == 2.0 * np.finfo(np.float64).eps


class TestInvalidInput:
    """Test argument validation before elimination."""

    def test_none(self):
        with pytest.raises(InvalidInputError, match="None"):
            invert_matrix(None)

    def test_empty(self):
        with pytest.raises(InvalidInputError):
            invert_matrix([])
        with pytest.raises(InvalidInputError, match="empty"):
            invert_matrix(np.zeros((0, 0)))

    def test_non_square(self):
        """A 2x3 matrix is rejected."""
        with pytest.raises(InvalidInputError, match="square"):
            invert_matrix(np.ones((2, 3)))

    def test_wrong_ndim(self):
        with pytest.raises(InvalidInputError, match="2-D"):
            invert_matrix(np.array([1.0, 2.0, 3.0]))
        with pytest.raises(InvalidInputError, match="2-D"):
            invert_matrix(np.ones((2, 2, 2)))

    def test_ragged(self):
        with pytest.raises(InvalidInputError):
            invert_matrix([[1.0, 2.0], [3.0]])

    def test_non_finite(self):
        with pytest.raises(InvalidInputError, match="NaN"):
            invert_matrix([[1.0, np.nan], [0.0, 1.0]])
        with pytest.raises(InvalidInputError):
            invert_matrix([[np.inf, 0.0], [0.0, 1.0]])

    def test_is_value_error(self):
        """Invalid input can be caught as ValueError."""
        with pytest.raises(ValueError):
            invert_matrix(np.ones((3, 2)))


class TestInputNotModified:
    """The caller's matrix is left untouched."""

    def test_success_path(self):
        A = np.array([[0.0, 2.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 3.0]])
        original = A.copy()

        invert_matrix(A)

        np.testing.assert_array_equal(A, original)

    def test_error_path(self):
        """A partially eliminated matrix must not leak back to the caller."""
        A = np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 0.0, 1.0]])
        original = A.copy()

        with pytest.raises(SingularMatrixError):
            invert_matrix(A)

        np.testing.assert_array_equal(A, original)

    def test_result_is_independent(self):
        """Returned inverse does not alias the input."""
        A = np.eye(3)
        A_inv = invert_matrix(A)
        A_inv[0, 0] = 99.0
        assert A[0, 0] == 1.0

    def test_repeated_calls_same_instance(self):
        """Inverting the same instance twice gives the same answer."""
        A = np.array([[4.0, 7.0], [2.0, 6.0]])
        np.testing.assert_array_equal(invert_matrix(A), invert_matrix(A))
