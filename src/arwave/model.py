"""
AR wavy surface model: runs the whole generation pipeline.

    ACF → AR coefficients → white noise variance → white noise
        → AR filter → trimmed surface

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import logging

import numpy as np

from .analysis.moments import mean, variance
from .config import ARModelConfig
from .errors import InvalidParameterError
from .generators.acf import acf_variance, approx_acf
from .generators.autoreg import generate_zeta, trim_zeta
from .generators.noise import generate_white_noise
from .generators.yule_walker import compute_ar_coefs, white_noise_variance

logger = logging.getLogger(__name__)


class ARModel:
    """
    Generator of wavy surfaces with a prescribed ACF.

    Parameters
    ----------
    config : ARModelConfig, optional
        Model parameters. Validated on construction. Defaults to
        ``ARModelConfig()``.
    verbose : bool, optional
        If True, print the parameters before generation. Default is False.

    Attributes
    ----------
    acf : ndarray or None
        Model ACF of the last run.
    ar_coefs : ndarray or None
        AR coefficients of the last run.
    white_noise_var : float or None
        White noise variance of the last run.

    Examples
    --------
    >>> import numpy as np
    >>> from arwave import ARModel, ARModelConfig
    >>> config = ARModelConfig(zsize=(64, 16, 16), acf_size=(4, 4, 4), alpha=0.5, beta=0.5)
    >>> zeta = ARModel(config).run(rng=np.random.default_rng(42))
    >>> zeta.shape
    (64, 16, 16)
    """

    def __init__(self, config: ARModelConfig | None = None, verbose: bool = False):
        self.config = (config or ARModelConfig()).validate()
        self.verbose = verbose
        self.acf = None
        self.ar_coefs = None
        self.white_noise_var = None

    def echo_parameters(self) -> None:
        """Print the surface and ACF sizes."""
        c = self.config
        for key, value in (
            ("acf_size:", c.acf_size),
            ("zsize:", c.zsize),
            ("zsize2:", c.zsize2),
            ("zdelta:", c.zdelta),
            ("size_factor:", c.zsize2[0] / c.zsize[0]),
        ):
            print(f"{key:<20}{value}")

    def fit(self) -> np.ndarray:
        """Compute the model ACF and fit the AR coefficients to it."""
        c = self.config
        self.acf = approx_acf(c.alpha, c.beta, c.gamma, c.acf_delta, c.acf_size)
        self.ar_coefs = compute_ar_coefs(self.acf)
        self.white_noise_var = white_noise_variance(self.ar_coefs, self.acf)
        if self.white_noise_var < 0:
            raise InvalidParameterError(
                "variance",
                self.white_noise_var,
                f"white noise variance is less than zero: {self.white_noise_var}",
            )
        logger.info("ACF variance = %g", acf_variance(self.acf))
        logger.info("WN variance = %g", self.white_noise_var)
        return self.ar_coefs

    def run(self, rng: np.random.Generator | None = None) -> np.ndarray:
        """
        Generate a surface.

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Random number generator. If None, one is created from
            ``config.seed``.

        Returns
        -------
        zeta : ndarray
            Surface of shape ``config.zsize``.
        """
        if self.verbose:
            self.echo_parameters()

        self.fit()

        zeta2 = generate_white_noise(
            self.config.zsize2, self.white_noise_var, rng=rng, seed=self.config.seed
        )
        logger.info("mean(eps) = %g", mean(zeta2))
        logger.info("variance(eps) = %g", variance(zeta2))

        generate_zeta(self.ar_coefs, zeta2)
        logger.info("mean(zeta) = %g", mean(zeta2))
        logger.info("variance(zeta) = %g", variance(zeta2))

        return trim_zeta(zeta2, self.config.zsize)


def autoreg_field(
    zsize=(768, 24, 24),
    acf_size=(10, 10, 10),
    alpha: float = 0.06,
    beta: float = 0.8,
    gamma: float = 1.0,
    zdelta=(1.0, 1.0, 1.0),
    size_factor: float = 1.2,
    rng: np.random.Generator | None = None,
    verbose: bool = False,
) -> np.ndarray:
    """
    Generate a wavy surface with an AR model fitted to an exponential-cosine ACF.

    Parameters
    ----------
    zsize : sequence of 3 ints, optional
        Size of the surface (t, x, y). Default is (768, 24, 24).
    acf_size : sequence of 3 ints, optional
        Number of ACF lags, i.e. the AR filter size. Default is (10, 10, 10).
    alpha : float, optional
        ACF decay rate. Default is 0.06.
    beta : float, optional
        ACF oscillation frequency. Default is 0.8.
    gamma : float, optional
        ACF amplitude (surface variance). Default is 1.0.
    zdelta : sequence of 3 floats, optional
        Grid spacing. Default is (1, 1, 1).
    size_factor : float, optional
        Enlargement absorbing the filter warm-up (≥ 1). Default is 1.2.
    rng : numpy.random.Generator, optional
        Random number generator for reproducibility.
    verbose : bool, optional
        If True, print generation parameters. Default is False.

    Returns
    -------
    zeta : ndarray
        Surface of shape ``zsize``.

    Raises
    ------
    InvalidParameterError
        If parameters are outside valid ranges.
    NonStationaryError
        If the ACF cannot be realized by a stationary AR model of order
        ``acf_size``.
    SingularMatrixError
        If the autocovariance matrix is singular.

    Examples
    --------
    >>> import numpy as np
    >>> from arwave import autoreg_field
    >>> rng = np.random.default_rng(42)
    >>> zeta = autoreg_field(zsize=(64, 16, 16), acf_size=(4, 4, 4),
    ...                      alpha=0.5, beta=0.5, rng=rng)
    """
    config = ARModelConfig(
        zsize=tuple(zsize),
        zdelta=tuple(zdelta),
        acf_size=tuple(acf_size),
        size_factor=size_factor,
        alpha=alpha,
        beta=beta,
        gamma=gamma,
    )
    if verbose:
        print("AR Wavy Surface:")
        print(f"    alpha = {alpha}")
        print(f"    beta = {beta}")
        print(f"    gamma = {gamma}")
    return ARModel(config, verbose=verbose).run(rng=rng)
