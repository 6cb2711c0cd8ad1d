"""
Grid triples shared by the generators and the configuration.

A size triple is (t, x, y): the extent along time and the two spatial axes.
A delta triple holds the grid spacing along the same axes.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np

from .errors import InvalidParameterError

Size3 = tuple[int, int, int]
Vec3 = tuple[float, float, float]


def _as_triple(value, name: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(name, value) from exc
    if arr.shape != (3,) or not np.all(np.isfinite(arr)):
        raise InvalidParameterError(name, value)
    return arr


def as_size3(value, name: str = "size") -> Size3:
    """
    Convert ``value`` to a size triple with all components > 0.

    Raises
    ------
    InvalidParameterError
        If ``value`` does not have three integer components or any of them
        is zero or negative.
    """
    arr = _as_triple(value, name)
    if np.any(arr != np.floor(arr)) or np.any(arr <= 0):
        raise InvalidParameterError(name, value)
    return tuple(int(v) for v in arr)


def as_vec3(value, name: str = "delta") -> Vec3:
    """Convert ``value`` to a triple of positive floats."""
    arr = _as_triple(value, name)
    if np.any(arr <= 0):
        raise InvalidParameterError(name, value)
    return tuple(float(v) for v in arr)
