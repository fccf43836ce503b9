"""
Base class for scalar damage models.

A scalar damage model tracks one damage index per evaluation point for the
current step and the step before it. Any model exposing this capability can
feed a combined damage model.
"""

from abc import ABC, abstractmethod

import numpy as np

from ..exceptions import ConfigurationError


class ScalarDamageModel(ABC):
    """
    Abstract base for scalar damage models.

    Parameters
    ----------
    name : str
        Name used to register and look up the model
    n_points : int
        Number of evaluation points tracked by the model
    initial_damage : float, optional
        Damage index at every point before the first step (default: 0.0)

    Examples
    --------
    >>> class HalfDamage(ScalarDamageModel):
    ...     def update_qp_damage_index(self, qp):
    ...         self._damage_index[qp] = 0.5
    ...
    >>> model = HalfDamage("half", n_points=3)
    >>> model.compute_properties()
    >>> model.get_qp_damage_index(0)
    0.5
    """

    def __init__(self, name: str, n_points: int, initial_damage: float = 0.0):
        if n_points < 1:
            raise ConfigurationError("n_points", f"must be >= 1, got {n_points}")
        if not 0.0 <= initial_damage <= 1.0:
            raise ConfigurationError(
                "initial_damage", f"must lie in [0, 1], got {initial_damage}"
            )

        self.name = name
        self.n_points = n_points
        self._damage_index = np.full(n_points, initial_damage, dtype=float)
        self._damage_index_old = np.full(n_points, initial_damage, dtype=float)

    def __repr__(self):
        return f"{self.__class__.__name__}(name={self.name!r}, n_points={self.n_points})"

    def initial_setup(self, registry) -> None:
        """One-time setup after all materials are registered."""
        pass

    @abstractmethod
    def update_qp_damage_index(self, qp: int) -> None:
        """Compute the current damage index at point ``qp``."""
        pass

    def compute_properties(self) -> None:
        """Update the damage index at every evaluation point."""
        for qp in range(self.n_points):
            self.update_qp_damage_index(qp)

    def get_qp_damage_index(self, qp: int) -> float:
        """Current-step damage index at point ``qp``."""
        return float(self._damage_index[qp])

    def get_qp_damage_index_old(self, qp: int) -> float:
        """Previous-step damage index at point ``qp``."""
        return float(self._damage_index_old[qp])

    @property
    def damage_index(self) -> np.ndarray:
        """Read-only view of the current damage index at all points."""
        view = self._damage_index.view()
        view.flags.writeable = False
        return view

    @property
    def damage_index_old(self) -> np.ndarray:
        """Read-only view of the previous damage index at all points."""
        view = self._damage_index_old.view()
        view.flags.writeable = False
        return view

    def advance_step(self) -> None:
        """Carry the current damage index over as the previous one."""
        self._damage_index_old[:] = self._damage_index

    def reset(self, value: float = 0.0) -> None:
        """Reinitialise current and previous damage at every point."""
        if not 0.0 <= value <= 1.0:
            raise ConfigurationError("value", f"must lie in [0, 1], got {value}")

        self._damage_index.fill(value)
        self._damage_index_old.fill(value)
