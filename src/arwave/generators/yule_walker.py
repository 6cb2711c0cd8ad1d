"""
Yule-Walker equations for a three-dimensional AR model.

The autocovariance matrix of a stationary 3-D process sampled on a lag grid
of shape (n0, n1, n2) is a nested block-Toeplitz matrix: the covariance
between lag triples a and b depends only on |a - b| along each axis. This
module assembles that matrix from the ACF, solves the Yule-Walker system
for the AR coefficients with LAPACK ``?sysv`` and checks that the fitted
process is stationary.

Lag triples are flattened in C order (time slowest, last spatial axis
fastest), both in the matrix and in the coefficient array.

Reference:
    Box, G.E.P., Jenkins, G.M., Reinsel, G.C. and Ljung, G.M., 2015.
    Time Series Analysis: Forecasting and Control. Wiley. Chapter 3.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import logging

import numpy as np
from scipy.linalg import lapack

from ..errors import NonStationaryError, SingularMatrixError

logger = logging.getLogger(__name__)


def _as_float(acf) -> np.ndarray:
    """ACF as a floating point array, integers promoted to float64."""
    acf = np.asarray(acf)
    if not np.issubdtype(acf.dtype, np.floating):
        acf = acf.astype(np.float64)
    return acf


def _toeplitz_index(n: int) -> np.ndarray:
    """|i - j| for i, j in range(n)."""
    i = np.arange(n)
    return np.abs(i[:, None] - i[None, :])


def ac_matrix_block(acf: np.ndarray, i0: int, j0: int) -> np.ndarray:
    """
    Innermost Toeplitz block of the autocovariance matrix.

    Returns the (n2, n2) matrix ``block[i, j] = acf[i0, j0, |i - j|]``.
    """
    return acf[i0, j0][_toeplitz_index(acf.shape[2])]


def ac_matrix(acf: np.ndarray) -> np.ndarray:
    """
    Assemble the autocovariance matrix of a 3-D ACF.

    Parameters
    ----------
    acf : ndarray
        ACF of shape (n0, n1, n2).

    Returns
    -------
    acm : ndarray
        Symmetric matrix of shape (n0·n1·n2, n0·n1·n2) with

            acm[(i0, i1, i2), (j0, j1, j2)] = acf[|i0-j0|, |i1-j1|, |i2-j2|]

        where row and column triples are flattened in C order.

    Notes
    -----
    The matrix is made of n0 × n0 blocks selected by |i0 - j0|; each of them
    is made of n1 × n1 blocks selected by |i1 - j1|; each of those is the
    n2 × n2 Toeplitz block returned by :func:`ac_matrix_block`. The matrix
    is preallocated and every block is written at its final position.
    """
    acf = _as_float(acf)
    if acf.ndim != 3:
        raise ValueError(f"Expected 3D array, got shape {acf.shape}")

    n0, n1, n2 = acf.shape
    s1 = n2  # size of an innermost block
    s0 = n1 * n2  # size of a middle block
    acm = np.empty((n0 * s0, n0 * s0), dtype=acf.dtype)

    # Middle blocks depend only on |i0 - j0|, build each of them once
    middle = np.empty((n0, s0, s0), dtype=acf.dtype)
    for d0 in range(n0):
        for i1 in range(n1):
            for j1 in range(n1):
                middle[d0, i1 * s1:(i1 + 1) * s1, j1 * s1:(j1 + 1) * s1] = (
                    ac_matrix_block(acf, d0, abs(i1 - j1))
                )

    for i0 in range(n0):
        for j0 in range(n0):
            acm[i0 * s0:(i0 + 1) * s0, j0 * s0:(j0 + 1) * s0] = middle[abs(i0 - j0)]

    return acm


def solve_symmetric(matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solve ``matrix @ x = rhs`` for a symmetric matrix with LAPACK ``?sysv``.

    Only the upper triangle of ``matrix`` is referenced.

    Raises
    ------
    SingularMatrixError
        If the factorization hits an exactly zero pivot. The 1-based pivot
        index is available as ``pivot``.
    """
    matrix = np.asarray(matrix)
    rhs = np.asarray(rhs)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {matrix.shape}")
    if rhs.shape != (matrix.shape[0],):
        raise ValueError(
            f"Right-hand side of shape {rhs.shape} does not match matrix {matrix.shape}"
        )

    (sysv,) = lapack.get_lapack_funcs(("sysv",), (matrix, rhs))
    _, _, x, info = sysv(matrix, rhs[:, None], lower=0)
    if info > 0:
        raise SingularMatrixError(int(info))
    if info < 0:
        raise ValueError(f"illegal value in argument {-info} of internal sysv")
    return x[:, 0]


def is_stationary(phi: np.ndarray) -> bool:
    """True if no AR coefficient exceeds 1 in absolute value."""
    return not np.any(np.abs(phi) > 1)


def compute_ar_coefs(acf: np.ndarray) -> np.ndarray:
    """
    Fit AR coefficients to an ACF by solving the Yule-Walker equations.

    The first equation of the system (the zero-lag one) is eliminated and
    the first column of the remaining matrix is moved to the right-hand side.

    Parameters
    ----------
    acf : ndarray
        ACF of shape (n0, n1, n2).

    Returns
    -------
    phi : ndarray
        AR coefficients with the same shape as ``acf`` and ``phi[0, 0, 0] == 0``.

    Raises
    ------
    SingularMatrixError
        If the autocovariance matrix is singular.
    NonStationaryError
        If any coefficient exceeds 1 in absolute value. The offending
        coefficients are logged before raising.
    """
    acf = _as_float(acf)
    acm = ac_matrix(acf)
    m = acf.size - 1

    phi = np.zeros(acf.shape, dtype=acf.dtype)
    if m > 0:
        rhs = acm[1:, 0].copy()
        lhs = acm[1:, 1:].copy()
        phi.flat[1:] = solve_symmetric(lhs, rhs)
    phi[0, 0, 0] = 0

    if not is_stationary(phi):
        offending = phi[np.abs(phi) > 1]
        logger.error("phi.shape() = %s", phi.shape)
        for val in offending:
            logger.error("%s", val)
        raise NonStationaryError(offending)

    return phi


def white_noise_variance(phi: np.ndarray, acf: np.ndarray) -> float:
    """
    Variance of the white noise driving the AR process.

        σ² = K(0, 0, 0) - Σ φ ⊙ K
    """
    return float(acf[0, 0, 0] - np.sum(phi * acf))
