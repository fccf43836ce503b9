"""
Simple scalar damage sources.

These models report damage values given up front. They stand in for
physics-based damage models when testing or prototyping combinations.
"""

from typing import Sequence, Union

import numpy as np

from ..exceptions import ConfigurationError
from .base import ScalarDamageModel


def _check_unit_interval(param: str, values) -> None:
    values = np.asarray(values, dtype=float)
    if np.any(values < 0.0) or np.any(values > 1.0) or np.any(np.isnan(values)):
        raise ConfigurationError(param, "damage values must lie in [0, 1]")


class ConstantScalarDamage(ScalarDamageModel):
    """
    Constant damage at every evaluation point.

    Parameters
    ----------
    name : str
        Model name
    n_points : int
        Number of evaluation points
    damage_index : float
        Damage value reported at every point and step
    """

    def __init__(self, name: str, n_points: int, damage_index: float):
        _check_unit_interval("damage_index", damage_index)
        super().__init__(name, n_points, initial_damage=damage_index)
        self.value = float(damage_index)

    def update_qp_damage_index(self, qp: int) -> None:
        self._damage_index[qp] = self.value


class PrescribedScalarDamage(ScalarDamageModel):
    """
    Damage replayed from a prescribed per-step history.

    Row ``k`` of the history is reported on the ``k``-th evaluation. Once
    the history is exhausted the last row is held.

    Parameters
    ----------
    name : str
        Model name
    n_points : int
        Number of evaluation points
    history : sequence
        Either one scalar per step (broadcast to every point) or one row of
        ``n_points`` values per step
    initial_damage : float, optional
        Damage before the first step (default: 0.0)

    Examples
    --------
    >>> source = PrescribedScalarDamage("creep", 2, history=[0.1, 0.4])
    >>> source.compute_properties()
    >>> source.damage_index
    array([0.1, 0.1])
    """

    def __init__(
        self,
        name: str,
        n_points: int,
        history: Sequence[Union[float, Sequence[float]]],
        initial_damage: float = 0.0,
    ):
        super().__init__(name, n_points, initial_damage=initial_damage)

        table = np.asarray(history, dtype=float)
        if table.ndim == 1:
            table = np.repeat(table[:, np.newaxis], n_points, axis=1)
        if table.ndim != 2 or table.shape[1] != n_points or table.shape[0] == 0:
            raise ConfigurationError(
                "history",
                f"expected a non-empty list of scalars or rows of {n_points} values, "
                f"got shape {table.shape}",
            )
        _check_unit_interval("history", table)

        self.history = table
        self._step = 0

    @property
    def n_prescribed_steps(self) -> int:
        """Number of rows in the prescribed history."""
        return self.history.shape[0]

    def _row(self) -> np.ndarray:
        return self.history[min(self._step, self.n_prescribed_steps - 1)]

    def update_qp_damage_index(self, qp: int) -> None:
        self._damage_index[qp] = self._row()[qp]

    def advance_step(self) -> None:
        super().advance_step()
        self._step += 1

    def reset(self, value: float = 0.0) -> None:
        super().reset(value)
        self._step = 0
