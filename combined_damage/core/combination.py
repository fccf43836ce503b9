"""
Core damage combination functions.

Merge several scalar damage indices into one composite index and bound it
(no state, no I/O). The same functions serve a single evaluation point
(python floats) and a whole set of points (numpy arrays or xarray
DataArrays).
"""

from enum import Enum
from typing import Sequence, Union

import numpy as np
import xarray as xr

from ..exceptions import ConfigurationError
from .utils import (
    DamageValue,
    as_output,
    clamp_unit_interval,
    elementwise_max,
    elementwise_min,
    is_scalar,
)


class CombinationType(str, Enum):
    """How the damage models are combined."""

    MAXIMUM = "Maximum"
    PRODUCT = "Product"

    @classmethod
    def parse(cls, value: Union[str, "CombinationType"]) -> "CombinationType":
        """
        Parse a combination type, ignoring case.

        Raises
        ------
        ConfigurationError
            If the value names no known combination type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise ConfigurationError(
            "combination_type",
            f"Unknown combination type {value!r}. "
            f"Valid options: {[m.value for m in cls]}",
        )


def combine_maximum(
    previous: DamageValue,
    source_values: Sequence[DamageValue],
) -> DamageValue:
    """
    Combine damage indices by taking the largest value.

    The reduction is a left fold starting from ``previous`` so floating
    point results do not depend on how the caller batches the sources.

    Parameters
    ----------
    previous : float, np.ndarray, or xr.DataArray
        Composite damage index from the previous step
    source_values : sequence
        Current-step damage index of each source, in resolution order

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        max(previous, s_1, ..., s_n)

    Examples
    --------
    >>> combine_maximum(0.2, [0.3, 0.7, 0.1])
    0.7
    """
    result = previous
    for value in source_values:
        result = elementwise_max(result, value)
    return result


def combine_product(
    source_values: Sequence[DamageValue],
    like: DamageValue = 0.0,
) -> DamageValue:
    """
    Combine damage indices as independent failure probabilities.

    Formula: damage = 1 - prod_i (1 - s_i)

    Parameters
    ----------
    source_values : sequence
        Current-step damage index of each source, in resolution order
    like : float, np.ndarray, or xr.DataArray, optional
        Template giving the shape of the result when ``source_values`` is
        empty (default: scalar)

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        Union damage of all sources. Zero when there are no sources.

    Examples
    --------
    >>> combine_product([0.5, 0.5])
    0.75

    Notes
    -----
    The previous composite value is not folded in here. The monotonicity
    floor is applied afterwards by ``limit_damage_index``.
    """
    if is_scalar(like):
        survival = 1.0
    elif isinstance(like, xr.DataArray):
        survival = xr.ones_like(like, dtype=float)
    else:
        survival = np.ones_like(like, dtype=float)

    for value in source_values:
        survival = survival * (1.0 - value)

    if is_scalar(survival):
        return float(1.0 - survival)
    return 1.0 - survival


def limit_damage_index(
    raw: DamageValue,
    previous: DamageValue,
    max_damage: float = 1.0,
) -> DamageValue:
    """
    Bound a raw combined damage index.

    Applied in this exact order:
    1. clamp into [0, 1] (absorbs floating point overshoot)
    2. floor by ``previous`` (damage never decreases)
    3. cap by ``max_damage``

    Parameters
    ----------
    raw : float, np.ndarray, or xr.DataArray
        Raw combined damage
    previous : float, np.ndarray, or xr.DataArray
        Composite damage from the previous step
    max_damage : float, optional
        Upper bound on the composite index (default: 1.0)

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        Bounded damage index

    Examples
    --------
    >>> limit_damage_index(0.99, 0.0, max_damage=0.5)
    0.5
    >>> limit_damage_index(0.1, 0.3)
    0.3

    Notes
    -----
    The cap wins over the floor: if ``previous`` exceeds ``max_damage`` the
    result is ``max_damage``.
    """
    bounded = clamp_unit_interval(raw)
    bounded = elementwise_max(bounded, previous)
    return elementwise_min(bounded, max_damage)


def combine_damage(
    previous: DamageValue,
    source_values: Sequence[DamageValue],
    combination_type: Union[str, CombinationType] = CombinationType.MAXIMUM,
    max_damage: float = 1.0,
) -> DamageValue:
    """
    Compute the bounded composite damage index.

    Parameters
    ----------
    previous : float, np.ndarray, or xr.DataArray
        Composite damage index from the previous step
    source_values : sequence
        Current-step damage index of each source, in resolution order
    combination_type : str or CombinationType, optional
        "Maximum" or "Product" (default: "Maximum")
    max_damage : float, optional
        Upper bound on the composite index (default: 1.0)

    Returns
    -------
    float, np.ndarray, or xr.DataArray
        New current damage index. Python float when ``previous`` and all
        sources are scalars.

    Raises
    ------
    ConfigurationError
        If ``combination_type`` is unknown

    Examples
    --------
    >>> combine_damage(0.2, [0.3, 0.7, 0.1], "Maximum")
    0.7
    >>> combine_damage(0.0, [0.5, 0.5], "Product", max_damage=0.9)
    0.75
    >>> combine_damage(0.0, [0.9, 0.9], "Product", max_damage=0.5)
    0.5
    >>> combine_damage(0.4, [], "Product")
    0.4
    """
    combination_type = CombinationType.parse(combination_type)
    source_values = list(source_values)
    scalar = is_scalar(previous) and all(is_scalar(v) for v in source_values)

    if combination_type is CombinationType.MAXIMUM:
        raw = combine_maximum(previous, source_values)
    else:
        raw = combine_product(source_values, like=previous)

    result = limit_damage_index(raw, previous, max_damage)
    return as_output(result, scalar)
