"""
Parameters of the AR wavy surface model.

Parameters are read from a plain text file (``autoreg.model`` by default)
with one ``name=value`` pair per line:

    # surface size (t, x, y)
    zsize=(768,24,24)
    zdelta=(1,1,1)
    acf_size=(10,10,10)
    size_factor=1.2
    alpha=0.06
    beta=0.8
    gamma=1.0

Lines starting with ``#`` are comments. Triples may be written as
``(a,b,c)``, ``a,b,c`` or ``a b c``.

Author: Vladislav Yastrebov, CNRS, Mines Paris - PSL, Centre des matériaux
License: BSD-3-Clause
"""

import math
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .errors import InvalidParameterError
from .grid import Size3, Vec3, as_size3, as_vec3

DEFAULT_CONFIG_FILE = "autoreg.model"


@dataclass(frozen=True)
class ARModelConfig:
    """
    Parameters of the AR model and of the generated surface.

    Attributes
    ----------
    zsize : tuple of 3 ints
        Size of the wavy surface (t, x, y).
    zdelta : tuple of 3 floats
        Grid spacing of the surface. Also used as the ACF grid spacing.
    acf_size : tuple of 3 ints
        Number of ACF lags along each axis, equal to the AR filter size.
    size_factor : float
        Enlargement of the surface used to absorb the filter warm-up (≥ 1).
    alpha, beta, gamma : float
        Decay rate, oscillation frequency and amplitude of the ACF.
        See :func:`arwave.approx_acf`.
    seed : int, optional
        Seed of the white noise generator. None seeds from OS entropy.
    """

    zsize: Size3 = (768, 24, 24)
    zdelta: Vec3 = (1.0, 1.0, 1.0)
    acf_size: Size3 = (10, 10, 10)
    size_factor: float = 1.2
    alpha: float = 0.06
    beta: float = 0.8
    gamma: float = 1.0
    seed: int | None = None

    @property
    def acf_delta(self) -> Vec3:
        """ACF grid spacing."""
        return self.zdelta

    @property
    def fsize(self) -> Size3:
        """Size of the array of AR coefficients."""
        return self.acf_size

    @property
    def zsize2(self) -> Size3:
        """Size of the enlarged surface, ``zsize`` scaled by ``size_factor``."""
        return tuple(int(math.floor(n * self.size_factor)) for n in self.zsize)

    def validate(self) -> "ARModelConfig":
        """
        Check for input errors and numerical constraints.

        Returns
        -------
        self : ARModelConfig

        Raises
        ------
        InvalidParameterError
            On the first invalid parameter, naming it and its value.
        """
        if not self.size_factor >= 1:
            raise InvalidParameterError(
                "size_factor", self.size_factor, f"Invalid size factor: {self.size_factor}"
            )
        as_size3(self.zsize, "zsize")
        as_vec3(self.zdelta, "zdelta")
        as_size3(self.acf_size, "acf_size")
        if any(n2 < n for n, n2 in zip(self.zsize, self.zsize2)):
            raise InvalidParameterError(
                "size_factor", self.size_factor, "size_factor < 1, zsize2 < zsize"
            )
        if self.fsize[0] > self.zsize[0]:
            raise InvalidParameterError(
                "acf_size",
                self.acf_size,
                "fsize[0] > zsize[0], should be 0 < fsize[0] < zsize[0]\n"
                f"fsize[0]  = {self.fsize[0]}\n"
                f"zsize[0] = {self.zsize[0]}",
            )
        return self


_TRIPLES = {"zsize": int, "acf_size": int, "zdelta": float}
_SCALARS = {"size_factor": float, "alpha": float, "beta": float, "gamma": float, "seed": int}


def _parse_value(name: str, text: str):
    text = text.strip()
    try:
        if name in _TRIPLES:
            parts = [p for p in re.split(r"[\s,]+", text.strip("()[] \t")) if p]
            if len(parts) != 3:
                raise ValueError(text)
            return tuple(_TRIPLES[name](p) for p in parts)
        if name == "seed" and text.lower() == "none":
            return None
        return _SCALARS[name](text)
    except ValueError as exc:
        raise InvalidParameterError(name, text) from exc


def read_parameters(text: str, base: ARModelConfig | None = None) -> ARModelConfig:
    """
    Parse ``name=value`` lines into a configuration.

    Parameters
    ----------
    text : str
        Contents of a parameter file.
    base : ARModelConfig, optional
        Configuration supplying values for parameters absent from ``text``.
        Defaults to :class:`ARModelConfig` defaults.

    Returns
    -------
    config : ARModelConfig
        Parsed configuration. It is not validated.

    Raises
    ------
    InvalidParameterError
        On unknown parameters or unparsable values.
    """
    known = {f.name for f in fields(ARModelConfig)}
    values = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        name, sep, value = line.partition("=")
        name = name.strip()
        if not sep or name not in known:
            raise InvalidParameterError(name, value, f"Unknown parameter: {name}.")
        values[name] = _parse_value(name, value)
    return replace(base or ARModelConfig(), **values)


def load_config(path: str | Path = DEFAULT_CONFIG_FILE) -> ARModelConfig:
    """Read and validate a parameter file."""
    return read_parameters(Path(path).read_text()).validate()
