"""Configuration management with validation."""

from .schemas import (
    CombinedDamageConfig,
    MaterialConfig,
    ProcessingConfig,
    SimulationConfig,
)

__all__ = [
    "CombinedDamageConfig",
    "MaterialConfig",
    "ProcessingConfig",
    "SimulationConfig",
]
