"""
Model autocovariance function (ACF) of a wavy surface.

The ACF is an exponentially decaying cosine, separable along time and the
two spatial axes:

    K(t, x, y) = γ · exp(-α (t·Δt + x·Δx + y·Δy))
                   · cos(β t·Δt) · cos(β x·Δx) · cos(β y·Δy)

It is evaluated on the grid of non-negative lags and serves as the input of
the Yule-Walker solver.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np

from ..grid import as_size3, as_vec3


def approx_acf(
    alpha: float,
    beta: float,
    gamma: float,
    delta,
    acf_size,
    dtype=np.float64,
) -> np.ndarray:
    """
    Evaluate the model ACF on a lag grid.

    Parameters
    ----------
    alpha : float
        Exponential decay rate (α ≥ 0).
    beta : float
        Oscillation frequency (β ≥ 0).
    gamma : float
        Amplitude, equal to the variance of the modelled surface.
    delta : sequence of 3 floats
        Grid spacing (Δt, Δx, Δy).
    acf_size : sequence of 3 ints
        Number of lags along each axis.
    dtype : data-type, optional
        Floating point type of the result. Default is float64.

    Returns
    -------
    acf : ndarray
        Array of shape ``acf_size`` with ``acf[t, x, y] = K(t, x, y)``.

    Examples
    --------
    >>> from arwave import approx_acf
    >>> acf = approx_acf(0.06, 0.8, 1.0, (1, 1, 1), (10, 10, 10))
    >>> acf.shape
    (10, 10, 10)
    """
    dt, dx, dy = as_vec3(delta, "acf_delta")
    nt, nx, ny = as_size3(acf_size, "acf_size")

    t = np.arange(nt, dtype=dtype)[:, None, None] * dt
    x = np.arange(nx, dtype=dtype)[None, :, None] * dx
    y = np.arange(ny, dtype=dtype)[None, None, :] * dy

    acf = (
        gamma
        * np.exp(-alpha * (t + x + y))
        * np.cos(beta * t)
        * np.cos(beta * x)
        * np.cos(beta * y)
    )
    return acf.astype(dtype, copy=False)


def acf_variance(acf: np.ndarray) -> float:
    """Variance of the modelled process, i.e. the ACF at zero lag."""
    return float(acf[0, 0, 0])
