"""
Building blocks of the AR wavy surface generator.

- Model ACF (exponentially decaying cosine)
- Autocovariance matrix and Yule-Walker solver for the AR coefficients
- Gaussian white noise
- AR filtering of the noise and removal of the warm-up region
"""

from .acf import approx_acf, acf_variance
from .yule_walker import (
    ac_matrix,
    ac_matrix_block,
    solve_symmetric,
    compute_ar_coefs,
    is_stationary,
    white_noise_variance,
)
from .noise import generate_white_noise
from .autoreg import generate_zeta, trim_zeta

__all__ = [
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
]
