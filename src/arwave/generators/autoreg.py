"""
Synthesis of a wavy surface by a three-dimensional AR filter.

The surface ζ is produced from white noise ε by the recurrence

    ζ(t, x, y) = ε(t, x, y) + Σ_{k, i, j} φ(k, i, j) · ζ(t-k, x-i, y-j)

applied in place, in raster order. Near the origin of each axis the filter
support is clamped to the available cells, so the first cells along every
axis are a warm-up region that is discarded by :func:`trim_zeta`.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np

from ..errors import InvalidParameterError
from ..grid import as_size3


def generate_zeta(phi: np.ndarray, zeta: np.ndarray) -> np.ndarray:
    """
    Apply the AR filter to a noise array in place.

    Parameters
    ----------
    phi : ndarray
        AR coefficients of shape (f0, f1, f2) with ``phi[0, 0, 0] == 0``.
    zeta : ndarray
        Array of shape (T, X, Y) filled with white noise. It is overwritten
        with the surface.

    Returns
    -------
    zeta : ndarray
        The same array object, now holding the surface.

    Notes
    -----
    Cells are visited with t slowest and y fastest, so every cell that
    ``zeta[t, x, y]`` depends on already holds its final value. For cell
    (t, x, y) the window spans ``min(t+1, f0) × min(x+1, f1) × min(y+1, f2)``
    lags.
    """
    phi = np.asarray(phi)
    if phi.ndim != 3 or zeta.ndim != 3:
        raise ValueError(
            f"Expected 3D arrays, got phi {phi.shape} and zeta {zeta.shape}"
        )
    if not np.issubdtype(zeta.dtype, np.floating):
        raise ValueError(f"Expected a floating point zeta, got dtype {zeta.dtype}")

    f0, f1, f2 = phi.shape
    t1, x1, y1 = zeta.shape
    # Reversed view: phi_rev[-1-k, -1-i, -1-j] == phi[k, i, j]
    phi_rev = phi[::-1, ::-1, ::-1]

    for t in range(t1):
        m1 = min(t + 1, f0)
        for x in range(x1):
            m2 = min(x + 1, f1)
            for y in range(y1):
                m3 = min(y + 1, f2)
                window = zeta[t - m1 + 1:t + 1, x - m2 + 1:x + 1, y - m3 + 1:y + 1]
                zeta[t, x, y] += np.sum(phi_rev[f0 - m1:, f1 - m2:, f2 - m3:] * window)

    return zeta


def trim_zeta(zeta2: np.ndarray, zsize) -> np.ndarray:
    """
    Remove the warm-up region from a surface.

    Keeps the last ``zsize[a]`` entries along each axis ``a``.

    Parameters
    ----------
    zeta2 : ndarray
        Surface of the enlarged shape.
    zsize : sequence of 3 ints
        Shape of the trimmed surface, not larger than ``zeta2.shape``.

    Returns
    -------
    zeta : ndarray
        Trimmed surface (a copy) of shape ``zsize``.
    """
    zsize = as_size3(zsize, "zsize")
    if zeta2.ndim != 3:
        raise ValueError(f"Expected 3D array, got shape {zeta2.shape}")
    if any(n > n2 for n, n2 in zip(zsize, zeta2.shape)):
        raise InvalidParameterError(
            "zsize", zsize, f"Invalid zsize: {zsize} exceeds surface shape {zeta2.shape}"
        )

    t2, x2, y2 = zeta2.shape
    t, x, y = zsize
    return zeta2[t2 - t:, x2 - x:, y2 - y:].copy()
