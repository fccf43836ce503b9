"""
Damage simulation driver.

Builds materials from configuration, resolves them, and advances them step
by step so that every damage source is evaluated before the combined models
that read it.
"""

from typing import Union, Dict, Any, Optional, List
import logging

import numpy as np
import xarray as xr

from ..config import SimulationConfig
from ..exceptions import ConfigurationError
from ..io import history_to_dataset, save_damage_history
from ..models import CombinedScalarDamage
from ..registry import MaterialRegistry
from .factory import build_material

logger = logging.getLogger(__name__)


class DamageSimulation:
    """
    Step-by-step driver for a set of scalar damage materials.

    Parameters
    ----------
    config : str, dict, or SimulationConfig
        Configuration (path to YAML, dict, or validated config object)
    verbose : bool, optional
        Whether to print progress messages. If None, uses
        config.processing.verbose

    Examples
    --------
    >>> with DamageSimulation("damage.yaml") as simulation:
    ...     history = simulation.run(n_steps=10)
    >>> history["combined"].sel(qp=0).values
    """

    def __init__(
        self,
        config: Union[str, Dict, SimulationConfig],
        verbose: Optional[bool] = None,
    ):
        # Load and validate config
        if isinstance(config, str):
            self.config = SimulationConfig.from_yaml(config)
        elif isinstance(config, dict):
            self.config = SimulationConfig.from_dict(config)
        else:
            self.config = config

        if verbose is None:
            verbose = self.config.processing.verbose
        self.verbose = verbose

        # Configure logging
        if verbose:
            logging.basicConfig(
                level=logging.INFO,
                format='%(message)s'
            )

        self.registry = MaterialRegistry()
        self._order: List[str] = []
        self._history: Dict[str, List[np.ndarray]] = {}
        self._n_completed = 0

        self._setup()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass

    def _setup(self):
        """Build, register and resolve every configured material."""
        n_points = self.config.n_points

        for name, material_config in self.config.materials.items():
            self.registry.add(build_material(name, material_config, n_points))

        for material in self.registry:
            material.initial_setup(self.registry)

        self._order = self.evaluation_order()
        self._history = {name: [] for name in self._order}

        if self.verbose:
            logger.info(f"✓ {len(self.registry)} materials ready ({n_points} points)")
            logger.info(f"  Evaluation order: {self._order}")

    def evaluation_order(self) -> List[str]:
        """
        Order materials so every source precedes the models that read it.

        Materials without dependencies keep their configuration order.

        Returns
        -------
        list
            Material names in evaluation order

        Raises
        ------
        ConfigurationError
            If materials depend on each other in a cycle
        """
        order = []
        state = {}

        def visit(name, path):
            if state.get(name) == "done":
                return
            if state.get(name) == "visiting":
                cycle = path[path.index(name):] + [name]
                raise ConfigurationError(
                    "damage_models",
                    f"Circular damage model dependency: {' -> '.join(cycle)}",
                )

            state[name] = "visiting"
            material = self.registry.get_material_by_name(name)
            if isinstance(material, CombinedScalarDamage):
                for dependency in material.damage_model_names:
                    visit(dependency, path + [name])

            state[name] = "done"
            order.append(name)

        for name in self.registry.names():
            visit(name, [])

        return order

    @property
    def n_completed_steps(self) -> int:
        """Number of steps run so far."""
        return self._n_completed

    def step(self) -> Dict[str, np.ndarray]:
        """
        Evaluate every material for one step, then advance all of them.

        Returns
        -------
        dict
            Material name -> damage index at every point for this step
        """
        values = {}
        for name in self._order:
            material = self.registry.get_material_by_name(name)
            if isinstance(material, CombinedScalarDamage):
                material.update_damage_index()
            else:
                material.compute_properties()
            values[name] = np.array(material.damage_index)

        for material in self.registry:
            material.advance_step()

        for name, value in values.items():
            self._history[name].append(value)
        self._n_completed += 1

        return values

    def run(self, n_steps: Optional[int] = None, save: Optional[bool] = None) -> xr.Dataset:
        """
        Run several steps and return the full recorded history.

        Parameters
        ----------
        n_steps : int, optional
            Steps to run. If None, uses config.n_steps
        save : bool, optional
            Whether to save the history. If None, saves when
            config.processing.output_path is set

        Returns
        -------
        xr.Dataset
            Damage history with dims ``(step, qp)``, one variable per material
        """
        if n_steps is None:
            n_steps = self.config.n_steps

        for i in range(n_steps):
            self.step()
            if self.verbose:
                logger.info(f"[{i + 1}/{n_steps}] ✓ step {self._n_completed - 1}")

        history = self.get_history()

        output_path = self.config.processing.output_path
        if save is None:
            save = output_path is not None

        if save:
            if output_path is None:
                raise ValueError("No output path configured (processing.output_path)")
            path = save_damage_history(
                history, output_path, self.config.processing.output_format
            )
            if self.verbose:
                logger.info(f"  Saved: {path}")

        return history

    def get_history(self) -> xr.Dataset:
        """Damage recorded by every material so far."""
        return history_to_dataset(
            self._history,
            self.config.n_points,
            attrs={"n_points": self.config.n_points},
        )

    def get_material(self, name: str):
        """Look up a material by name."""
        return self.registry.get_material_by_name(name)

    def get_results(self) -> Dict[str, Any]:
        """Last recorded damage index of every material."""
        return {
            name: values[-1] for name, values in self._history.items() if values
        }
