"""
Core mathematical functions for damage combination.

This module contains pure functions with no state and no I/O dependencies.
All functions are deterministic and independently testable.
"""

from .utils import (
    clamp_unit_interval,
    elementwise_max,
    elementwise_min,
)

from .combination import (
    CombinationType,
    combine_maximum,
    combine_product,
    limit_damage_index,
    combine_damage,
)

__all__ = [
    # Utils
    "clamp_unit_interval",
    "elementwise_max",
    "elementwise_min",
    # Combination
    "CombinationType",
    "combine_maximum",
    "combine_product",
    "limit_damage_index",
    "combine_damage",
]
