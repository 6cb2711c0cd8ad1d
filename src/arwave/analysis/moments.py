"""
Sample statistics of generated surfaces.

Used for diagnostics around noise generation and AR filtering.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np


def mean(field: np.ndarray) -> float:
    """
    Mean of all elements of an N-D array.

    Raises
    ------
    ValueError
        If the array is empty.
    """
    field = np.asarray(field)
    if field.size == 0:
        raise ValueError("Cannot compute the mean of an empty array")
    return float(np.sum(field) / field.size)


def variance(field: np.ndarray) -> float:
    """
    Unbiased sample variance of all elements of an N-D array.

        var = Σ (z - mean(z))² / (n - 1)

    Raises
    ------
    ValueError
        If the array has fewer than two elements.
    """
    field = np.asarray(field)
    n = field.size
    if n <= 1:
        raise ValueError(f"Sample variance requires at least 2 elements, got {n}")
    m = mean(field)
    return float(np.sum((field - m) ** 2) / (n - 1))


def field_summary(field: np.ndarray) -> dict:
    """
    Compute basic statistics of a field.

    Returns
    -------
    summary : dict
        Dictionary with keys "mean", "variance", "min" and "max".
    """
    field = np.asarray(field)
    return {
        "mean": mean(field),
        "variance": variance(field),
        "min": float(np.min(field)),
        "max": float(np.max(field)),
    }
