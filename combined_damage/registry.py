"""
Material registry.

Holds every material of a simulation by name so materials can look each
other up during setup.
"""

from typing import Dict, Iterator, List
import logging

from .exceptions import ConfigurationError, MaterialNotFoundError

logger = logging.getLogger(__name__)


class MaterialRegistry:
    """
    Name-indexed collection of materials, kept in registration order.

    Examples
    --------
    >>> registry = MaterialRegistry()
    >>> registry.add(ConstantScalarDamage("tension", n_points=4, damage_index=0.2))
    >>> registry.get_material_by_name("tension")
    ConstantScalarDamage(name='tension', n_points=4)
    """

    def __init__(self):
        self._materials: Dict[str, object] = {}

    def add(self, material) -> None:
        """
        Register a material under its ``name`` attribute.

        Raises
        ------
        ConfigurationError
            If a material with the same name is already registered
        """
        name = material.name
        if name in self._materials:
            raise ConfigurationError("name", f"Material '{name}' is already registered")

        self._materials[name] = material
        logger.debug(f"Registered material {name!r}")

    def get_material_by_name(self, name: str):
        """
        Look up a material.

        Raises
        ------
        MaterialNotFoundError
            If no material is registered under ``name``
        """
        if name not in self._materials:
            raise MaterialNotFoundError(name, self._materials.keys())
        return self._materials[name]

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._materials)

    def __contains__(self, name) -> bool:
        return name in self._materials

    def __iter__(self) -> Iterator:
        return iter(self._materials.values())

    def __len__(self) -> int:
        return len(self._materials)
