"""
arwave - Wavy Surface Generation with a Three-Dimensional AR Model.

A Python package for generating three-dimensional (t, x, y) random wavy
surfaces with a prescribed autocovariance function (ACF), using an
autoregressive (AR) model fitted by the Yule-Walker equations.

Features
--------
- Exponential-cosine ACF model
- Nested block-Toeplitz autocovariance matrix and Yule-Walker solver
- Stationarity check of the fitted AR model
- AR filtering of Gaussian white noise with warm-up removal
- Parameter files and a model driver with diagnostics
- Sample statistics and empirical autocovariance

Quick Start
-----------
>>> import numpy as np
>>> from arwave import autoreg_field
>>> rng = np.random.default_rng(42)
>>> zeta = autoreg_field(zsize=(64, 16, 16), acf_size=(4, 4, 4),
...                      alpha=0.5, beta=0.5, rng=rng)

References
----------
Box, G.E.P., Jenkins, G.M., Reinsel, G.C. and Ljung, G.M., 2015. Time Series
Analysis: Forecasting and Control, 5th ed. Wiley.

Author
------
Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"
__author__ = "Vladislav Yastrebov"

# Errors
from .errors import (
    ARWaveError,
    InvalidParameterError,
    NonStationaryError,
    SingularMatrixError,
    NoiseGenerationError,
)

# Generators
from .generators import (
    approx_acf,
    acf_variance,
    ac_matrix,
    ac_matrix_block,
    solve_symmetric,
    compute_ar_coefs,
    is_stationary,
    white_noise_variance,
    generate_white_noise,
    generate_zeta,
    trim_zeta,
)

# Configuration and driver
from .config import ARModelConfig, read_parameters, load_config
from .model import ARModel, autoreg_field

# Analysis tools
from .analysis import (
    mean,
    variance,
    field_summary,
    autocovariance_nd,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "ARWaveError",
    "InvalidParameterError",
    "NonStationaryError",
    "SingularMatrixError",
    "NoiseGenerationError",
    # Generators
    "approx_acf",
    "acf_variance",
    "ac_matrix",
    "ac_matrix_block",
    "solve_symmetric",
    "compute_ar_coefs",
    "is_stationary",
    "white_noise_variance",
    "generate_white_noise",
    "generate_zeta",
    "trim_zeta",
    # Configuration and driver
    "ARModelConfig",
    "read_parameters",
    "load_config",
    "ARModel",
    "autoreg_field",
    # Analysis
    "mean",
    "variance",
    "field_summary",
    "autocovariance_nd",
]
