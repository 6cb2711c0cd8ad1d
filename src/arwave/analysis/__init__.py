"""
Analysis tools for generated surfaces.

This module provides functions for analyzing wavy surfaces:

- Sample mean and variance of N-D arrays
- Empirical autocovariance at non-negative lags
"""

from .moments import (
    mean,
    variance,
    field_summary,
)
from .autocorrelation import autocovariance_nd

__all__ = [
    # Moments
    "mean",
    "variance",
    "field_summary",
    # Autocovariance
    "autocovariance_nd",
]
