"""
combined_damage: composite scalar damage for continuum material models.

Combines several independently computed scalar damage indices into one
bounded, non-decreasing damage index per evaluation point.
"""

from .exceptions import ConfigurationError, MaterialNotFoundError
from .core import CombinationType, combine_damage
from .models import (
    ScalarDamageModel,
    ConstantScalarDamage,
    PrescribedScalarDamage,
    CombinedScalarDamage,
)
from .registry import MaterialRegistry
from .config import CombinedDamageConfig, SimulationConfig
from .pipeline import DamageSimulation

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "MaterialNotFoundError",
    "CombinationType",
    "combine_damage",
    "ScalarDamageModel",
    "ConstantScalarDamage",
    "PrescribedScalarDamage",
    "CombinedScalarDamage",
    "MaterialRegistry",
    "CombinedDamageConfig",
    "SimulationConfig",
    "DamageSimulation",
]
