"""
White noise driving the AR process.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np

from ..errors import InvalidParameterError, NoiseGenerationError
from ..grid import as_size3


def generate_white_noise(
    size,
    variance: float,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    dtype=np.float64,
) -> np.ndarray:
    """
    Generate zero-mean Gaussian white noise with the given variance.

    Parameters
    ----------
    size : sequence of 3 ints
        Shape of the noise array.
    variance : float
        Variance of the noise (≥ 0).
    rng : numpy.random.Generator, optional
        Random number generator. Takes precedence over ``seed``.
    seed : int, optional
        Seed for a new generator when ``rng`` is not given. If both are None,
        the generator is seeded from OS entropy.
    dtype : data-type, optional
        Floating point type of the result. Default is float64.

    Returns
    -------
    eps : ndarray
        Independent N(0, variance) samples with shape ``size``.

    Raises
    ------
    InvalidParameterError
        If ``variance`` is negative or ``size`` is not a valid size triple.
    NoiseGenerationError
        If the random source produced NaNs.
    """
    if not variance >= 0:
        raise InvalidParameterError(
            "variance", variance, f"variance is less than zero: {variance}"
        )
    size = as_size3(size, "size")

    if rng is None:
        rng = np.random.default_rng(seed)

    eps = rng.normal(0.0, np.sqrt(variance), size=size).astype(dtype, copy=False)
    if np.any(np.isnan(eps)):
        raise NoiseGenerationError("white noise generator produced some NaNs")
    return eps
