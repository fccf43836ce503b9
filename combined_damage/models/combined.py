"""
Combined scalar damage model.

Computes one damage index from several scalar damage models, bounded below
by the previous composite value and above by a configured maximum.
"""

from typing import Optional, Sequence, Tuple, Union
import logging

import numpy as np

from ..config import CombinedDamageConfig
from ..core import CombinationType, combine_damage
from ..exceptions import ConfigurationError
from .base import ScalarDamageModel

logger = logging.getLogger(__name__)


class CombinedScalarDamage(ScalarDamageModel):
    """
    Scalar damage model computed as a function of multiple scalar damage models.

    The model is created in a configured state. ``initial_setup`` resolves
    the configured names into model handles once; afterwards the damage
    index can be evaluated for any point.

    Parameters
    ----------
    name : str
        Model name
    n_points : int
        Number of evaluation points
    damage_models : sequence of str
        Names of the damage models used to compute the damage index
    combination_type : str or CombinationType, optional
        How the damage models are combined: "Maximum" (default) or "Product"
    max_damage : float, optional
        Maximum allowed damage (default: 1.0)
    initial_damage : float, optional
        Damage before the first step (default: 0.0)

    Examples
    --------
    >>> registry = MaterialRegistry()
    >>> registry.add(ConstantScalarDamage("a", 1, 0.5))
    >>> registry.add(ConstantScalarDamage("b", 1, 0.5))
    >>> combined = CombinedScalarDamage("ab", 1, ["a", "b"], "Product", max_damage=0.9)
    >>> combined.initial_setup(registry)
    >>> combined.update_qp_damage_index(0)
    >>> combined.get_qp_damage_index(0)
    0.75

    Notes
    -----
    Every source must be evaluated for the current step before this model
    is. The model reads the sources but never checks their step.
    """

    def __init__(
        self,
        name: str,
        n_points: int,
        damage_models: Sequence[str],
        combination_type: Union[str, CombinationType] = CombinationType.MAXIMUM,
        max_damage: float = 1.0,
        initial_damage: float = 0.0,
    ):
        super().__init__(name, n_points, initial_damage=initial_damage)

        self.combination_type = CombinationType.parse(combination_type)
        self.max_damage = float(max_damage)
        self.damage_model_names = tuple(damage_models)
        self._damage_models: Optional[Tuple[ScalarDamageModel, ...]] = None

        if not 0.0 <= self.max_damage <= 1.0:
            logger.warning(
                f"{name}: max_damage={self.max_damage} lies outside [0, 1]"
            )

    @classmethod
    def from_config(
        cls,
        name: str,
        n_points: int,
        config: CombinedDamageConfig,
        initial_damage: float = 0.0,
    ) -> "CombinedScalarDamage":
        """
        Create a combined model from a validated configuration.

        Parameters
        ----------
        name : str
            Model name
        n_points : int
            Number of evaluation points
        config : CombinedDamageConfig
            Validated configuration
        initial_damage : float, optional
            Damage before the first step (default: 0.0)

        Returns
        -------
        CombinedScalarDamage
            Model in the configured (unresolved) state
        """
        return cls(
            name,
            n_points,
            damage_models=config.damage_models,
            combination_type=config.combination_type,
            max_damage=config.max_damage,
            initial_damage=initial_damage,
        )

    @property
    def is_ready(self) -> bool:
        """Whether the damage model names have been resolved."""
        return self._damage_models is not None

    @property
    def damage_models(self) -> Tuple[ScalarDamageModel, ...]:
        """Resolved damage models, in configuration order."""
        self._check_ready()
        return self._damage_models

    def initial_setup(self, registry) -> None:
        """
        Resolve damage model names into model handles.

        Parameters
        ----------
        registry : MaterialRegistry
            Registry holding every material of the simulation

        Raises
        ------
        ConfigurationError
            If a named material is not a scalar damage model
        MaterialNotFoundError
            If a named material is not registered
        RuntimeError
            If called more than once
        """
        if self.is_ready:
            raise RuntimeError(f"{self.name}: initial_setup already ran")

        models = []
        for model_name in self.damage_model_names:
            model = registry.get_material_by_name(model_name)

            if not isinstance(model, ScalarDamageModel):
                raise ConfigurationError(
                    "damage_models",
                    f"Damage Model {model_name} is not compatible with "
                    f"{self.__class__.__name__}",
                )
            models.append(model)

        self._damage_models = tuple(models)

        logger.debug(
            f"{self.name}: resolved {len(models)} damage models "
            f"({self.combination_type.value}, max_damage={self.max_damage})"
        )

    def _check_ready(self):
        if not self.is_ready:
            raise RuntimeError(
                f"{self.name}: damage models are not resolved, call initial_setup first"
            )

    def update_qp_damage_index(self, qp: int) -> None:
        """Compute the combined damage index at point ``qp``."""
        self._check_ready()

        self._damage_index[qp] = combine_damage(
            self.get_qp_damage_index_old(qp),
            [model.get_qp_damage_index(qp) for model in self._damage_models],
            self.combination_type,
            self.max_damage,
        )

    def update_damage_index(self) -> np.ndarray:
        """
        Compute the combined damage index at every point at once.

        Gives the same values as calling ``update_qp_damage_index`` for each
        point.

        Returns
        -------
        np.ndarray
            Read-only view of the new current damage index
        """
        self._check_ready()

        self._damage_index[:] = combine_damage(
            self._damage_index_old,
            [model.damage_index for model in self._damage_models],
            self.combination_type,
            self.max_damage,
        )
        return self.damage_index
