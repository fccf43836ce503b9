"""
Core utility functions for damage calculations.

Pure elementwise helpers with no state. Every function accepts a python
scalar, a numpy array or an xarray DataArray and returns the same kind.
"""

import numpy as np
import xarray as xr
from typing import Union

DamageValue = Union[float, np.ndarray, xr.DataArray]


def is_scalar(value) -> bool:
    """True for python/numpy scalars and 0-d arrays that are not DataArrays."""
    if isinstance(value, xr.DataArray):
        return False
    return np.ndim(value) == 0


def as_output(value: DamageValue, scalar: bool) -> DamageValue:
    """Convert numpy scalars back to python floats when the input was scalar."""
    if scalar:
        return float(value)
    return value


def elementwise_max(a: DamageValue, b: DamageValue) -> DamageValue:
    """
    Elementwise maximum.

    Parameters
    ----------
    a, b : float, np.ndarray, or xr.DataArray
        Values to compare

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        max(a, b). A NaN operand is ignored in favour of the other one.

    Examples
    --------
    >>> elementwise_max(0.2, 0.7)
    0.7
    >>> elementwise_max(np.array([0.1, 0.9]), 0.5)
    array([0.5, 0.9])
    """
    if is_scalar(a) and is_scalar(b):
        return float(np.fmax(a, b))
    return np.fmax(a, b)


def elementwise_min(a: DamageValue, b: DamageValue) -> DamageValue:
    """Elementwise minimum (see ``elementwise_max``)."""
    if is_scalar(a) and is_scalar(b):
        return float(np.fmin(a, b))
    return np.fmin(a, b)


def clamp_unit_interval(value: DamageValue) -> DamageValue:
    """
    Clamp values into [0, 1].

    Parameters
    ----------
    value : float, np.ndarray, or xr.DataArray
        Raw damage value(s)

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        max(0, min(1, value))

    Examples
    --------
    >>> clamp_unit_interval(1.0000000002)
    1.0
    >>> clamp_unit_interval(-1e-12)
    0.0
    """
    return elementwise_max(0.0, elementwise_min(1.0, value))
