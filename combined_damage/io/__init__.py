"""
I/O operations for damage simulations.

This module handles all file reading and writing operations,
keeping them separate from the damage models.
"""

from .loaders import load_yaml_config

from .writers import (
    history_to_dataset,
    save_damage_history,
)

__all__ = [
    "load_yaml_config",
    "history_to_dataset",
    "save_damage_history",
]
