"""
Exceptions raised by the AR wavy surface pipeline.

Every failure of the pipeline is fatal: it stems from the configuration or
from the properties of the fitted model, so nothing is retried.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import numpy as np


class ARWaveError(Exception):
    """Base class for all arwave errors."""


class InvalidParameterError(ARWaveError, ValueError):
    """A configuration value or a function argument is out of range."""

    def __init__(self, name: str, value=None, message: str | None = None):
        self.name = name
        self.value = value
        if message is None:
            message = f"Invalid {name}: {value}"
        super().__init__(message)


class NonStationaryError(ARWaveError, ArithmeticError):
    """The fitted AR process is not stationary, i.e. |phi| > 1."""

    def __init__(self, coefficients: np.ndarray):
        self.coefficients = np.asarray(coefficients)
        super().__init__(
            "AR process is not stationary, i.e. |phi| > 1 "
            f"({self.coefficients.size} offending coefficient(s))"
        )


class SingularMatrixError(ARWaveError, np.linalg.LinAlgError):
    """The Yule-Walker system has a zero pivot."""

    def __init__(self, pivot: int):
        self.pivot = pivot
        super().__init__(f"sysv error, A({pivot}, {pivot})=0")


class NoiseGenerationError(ARWaveError, RuntimeError):
    """The random source produced invalid samples."""
