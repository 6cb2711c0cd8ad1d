"""
Empirical autocovariance of generated surfaces.

AR surfaces are not periodic, so the estimator zero-pads the field before
the FFT to obtain the linear (not circular) autocovariance at non-negative
lags. The result can be compared directly with the model ACF.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np
from numpy.fft import fftn, ifftn


def autocovariance_nd(
    field: np.ndarray,
    max_lag=None,
    normalize: bool = False,
) -> np.ndarray:
    """
    Estimate the autocovariance of an N-D field at non-negative lags.

    Uses the biased estimator

        C(l) = 1/n · Σ_a (z(a) - z̄)(z(a + l) - z̄)

    where n is the number of elements and the sum runs over all a for which
    a + l lies inside the field.

    Parameters
    ----------
    field : ndarray
        Input field of any dimension.
    max_lag : sequence of ints, optional
        Number of lags to return along each axis. Defaults to the field shape.
    normalize : bool, optional
        If True, normalize so C at origin = 1. Default is False.

    Returns
    -------
    C : ndarray
        Autocovariance with shape ``max_lag``.

    Examples
    --------
    >>> import numpy as np
    >>> from arwave import autocovariance_nd
    >>> field = np.random.randn(64, 16, 16)
    >>> C = autocovariance_nd(field, max_lag=(3, 3, 3))
    >>> C.shape
    (3, 3, 3)
    """
    field = np.asarray(field, dtype=float)
    if field.size == 0:
        raise ValueError("Cannot compute the autocovariance of an empty array")

    if max_lag is None:
        max_lag = field.shape
    max_lag = tuple(int(n) for n in max_lag)
    if len(max_lag) != field.ndim:
        raise ValueError(
            f"max_lag {max_lag} does not match field dimension {field.ndim}"
        )
    if any(n <= 0 or n > s for n, s in zip(max_lag, field.shape)):
        raise ValueError(f"max_lag {max_lag} must be within (0, {field.shape}]")

    z = field - np.mean(field)
    padded = tuple(2 * s for s in field.shape)
    zhat = fftn(z, s=padded, axes=tuple(range(field.ndim)))
    C = np.real(ifftn(zhat * np.conj(zhat))) / field.size
    C = C[tuple(slice(0, n) for n in max_lag)]

    if normalize:
        origin = (0,) * field.ndim
        if C[origin] != 0:
            C = C / C[origin]

    return C
