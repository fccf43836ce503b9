"""
Shared fixtures for the combined_damage test suite.
"""

import pytest

from combined_damage import (
    ConstantScalarDamage,
    PrescribedScalarDamage,
    MaterialRegistry,
)


class NotADamageModel:
    """Registered material that lacks the damage index capability."""

    def __init__(self, name):
        self.name = name


@pytest.fixture
def registry():
    """Registry holding a few damage sources over three points."""
    registry = MaterialRegistry()
    registry.add(ConstantScalarDamage("low", n_points=3, damage_index=0.3))
    registry.add(ConstantScalarDamage("high", n_points=3, damage_index=0.7))
    registry.add(ConstantScalarDamage("tiny", n_points=3, damage_index=0.1))
    registry.add(
        PrescribedScalarDamage(
            "ramp",
            n_points=3,
            history=[[0.0, 0.1, 0.2], [0.2, 0.4, 0.6], [0.1, 0.3, 0.9]],
        )
    )
    registry.add(NotADamageModel("elasticity"))
    return registry


@pytest.fixture
def simulation_dict():
    """Simulation configuration as plain data."""
    return {
        "n_points": 4,
        "n_steps": 6,
        "materials": {
            "tension": {
                "type": "PrescribedScalarDamage",
                "history": [0.0, 0.1, 0.3, 0.2, 0.5, 0.6],
            },
            "creep": {
                "type": "PrescribedScalarDamage",
                "history": [
                    [0.00, 0.05, 0.10, 0.15],
                    [0.05, 0.10, 0.15, 0.20],
                    [0.10, 0.15, 0.20, 0.25],
                ],
            },
            "combined": {
                "type": "CombinedScalarDamage",
                "damage_models": ["tension", "creep"],
                "combination_type": "Product",
                "max_damage": 0.9,
            },
            "brittle_limit": {
                "type": "ConstantScalarDamage",
                "damage_index": 0.4,
            },
            "envelope": {
                "type": "CombinedScalarDamage",
                "damage_models": ["combined", "brittle_limit"],
            },
        },
        "processing": {"verbose": False},
    }
