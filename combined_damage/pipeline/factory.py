"""
Material construction from configuration.
"""

from ..config import MaterialConfig
from ..models import (
    ScalarDamageModel,
    ConstantScalarDamage,
    PrescribedScalarDamage,
    CombinedScalarDamage,
)


def build_material(name: str, config: MaterialConfig, n_points: int) -> ScalarDamageModel:
    """
    Create the material described by one configuration entry.

    Parameters
    ----------
    name : str
        Material name
    config : MaterialConfig
        Validated material configuration
    n_points : int
        Number of evaluation points

    Returns
    -------
    ScalarDamageModel
        New material. Combined models still need ``initial_setup``.

    Raises
    ------
    ValueError
        If the material type is unknown
    """
    if config.type == "ConstantScalarDamage":
        return ConstantScalarDamage(name, n_points, damage_index=config.damage_index)

    elif config.type == "PrescribedScalarDamage":
        return PrescribedScalarDamage(
            name,
            n_points,
            history=config.history,
            initial_damage=config.initial_damage,
        )

    elif config.type == "CombinedScalarDamage":
        return CombinedScalarDamage.from_config(
            name,
            n_points,
            config.to_combined_config(),
            initial_damage=config.initial_damage,
        )

    else:
        raise ValueError(f"Unknown material type: {config.type}")
