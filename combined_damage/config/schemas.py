"""
Pydantic schemas for damage model configuration.

Provides automatic validation of configuration files and parameters.
"""

from pydantic import BaseModel, Field, validator, model_validator
from pathlib import Path
from typing import Optional, List, Literal, Dict, Any, Union
import yaml
import warnings

from ..core.combination import CombinationType
from ..exceptions import MaterialNotFoundError


MaterialType = Literal[
    "ConstantScalarDamage",
    "PrescribedScalarDamage",
    "CombinedScalarDamage",
]


class CombinedDamageConfig(BaseModel):
    """
    Configuration of a combined scalar damage model.

    Attributes
    ----------
    damage_models : list of str
        Names of the damage models used to compute the damage index.
        Order is preserved. An empty list is allowed and makes the model
        inert.
    combination_type : str
        How the damage models are combined ("Maximum" or "Product")
    max_damage : float
        Maximum allowed damage (default: 1.0)
    """
    damage_models: List[str]
    combination_type: str = "Maximum"
    max_damage: float = 1.0

    @validator('combination_type')
    def validate_combination_type(cls, v):
        """Normalise combination type spelling."""
        return CombinationType.parse(v).value

    @validator('damage_models')
    def warn_repeated_names(cls, v):
        """Warn about repeated damage model names (each entry counts separately)."""
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            warnings.warn(
                f"Damage models listed more than once: {duplicates}. "
                f"Each occurrence is combined separately."
            )
        return v


class MaterialConfig(BaseModel):
    """
    One material entry of a simulation.

    Which fields are required depends on ``type``:

    - ConstantScalarDamage: ``damage_index``
    - PrescribedScalarDamage: ``history``
    - CombinedScalarDamage: ``damage_models``

    Attributes
    ----------
    type : str
        Material class name
    damage_index : float, optional
        Fixed damage value of a constant source
    history : list, optional
        Per-step damage values (scalars or per-point lists)
    damage_models : list of str, optional
        Source names of a combined model
    combination_type : str
        Combination rule of a combined model (default: "Maximum")
    max_damage : float
        Cap of a combined model (default: 1.0)
    initial_damage : float
        Damage index at every point before the first step (default: 0.0).
        Not accepted by ConstantScalarDamage, which starts at damage_index.
    """
    type: MaterialType
    damage_index: Optional[float] = None
    history: Optional[List[Union[float, List[float]]]] = None
    damage_models: Optional[List[str]] = None
    combination_type: str = "Maximum"
    max_damage: float = 1.0
    initial_damage: float = Field(0.0, ge=0.0, le=1.0)

    @validator('combination_type')
    def validate_combination_type(cls, v):
        """Normalise combination type spelling."""
        return CombinationType.parse(v).value

    @model_validator(mode='after')
    def validate_type_parameters(self):
        """Validate that the parameters required by ``type`` are present."""
        required = {
            "ConstantScalarDamage": "damage_index",
            "PrescribedScalarDamage": "history",
            "CombinedScalarDamage": "damage_models",
        }[self.type]

        if getattr(self, required) is None:
            raise ValueError(f"Material type {self.type} requires '{required}'")

        # a constant source starts at its damage_index
        if self.type == "ConstantScalarDamage" and "initial_damage" in self.model_fields_set:
            raise ValueError(
                "Material type ConstantScalarDamage does not accept 'initial_damage'"
            )

        return self

    def to_combined_config(self) -> CombinedDamageConfig:
        """
        Extract the combined model parameters.

        Returns
        -------
        CombinedDamageConfig
            Validated combined damage configuration

        Raises
        ------
        ValueError
            If this material is not a combined model
        """
        if self.type != "CombinedScalarDamage":
            raise ValueError(f"Material type {self.type} is not a combined model")

        return CombinedDamageConfig(
            damage_models=self.damage_models,
            combination_type=self.combination_type,
            max_damage=self.max_damage,
        )


class ProcessingConfig(BaseModel):
    """
    Processing options configuration.

    Attributes
    ----------
    verbose : bool
        Whether to print progress messages
    output_format : str
        Default output format for saved damage histories
    output_path : str, optional
        Where to save the damage history. Nothing is saved when None.
    """
    verbose: bool = True
    output_format: Literal["netcdf", "zarr", "csv"] = "netcdf"
    output_path: Optional[str] = None


class SimulationConfig(BaseModel):
    """
    Complete damage simulation configuration with validation.

    Attributes
    ----------
    n_points : int
        Number of evaluation (quadrature) points per material
    n_steps : int
        Number of steps run by default
    materials : dict
        Material configurations keyed by material name, in evaluation
        declaration order
    processing : ProcessingConfig
        Processing options

    Examples
    --------
    >>> config = SimulationConfig.from_yaml("damage.yaml")
    >>> config.materials["combined"].damage_models
    ['tension', 'creep']
    """
    n_points: int = Field(1, ge=1)
    n_steps: int = Field(1, ge=0)
    materials: Dict[str, MaterialConfig]
    processing: ProcessingConfig = ProcessingConfig()

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "SimulationConfig":
        """
        Load and validate configuration from YAML file.

        Parameters
        ----------
        yaml_path : str
            Path to YAML configuration file

        Returns
        -------
        SimulationConfig
            Validated configuration object

        Raises
        ------
        FileNotFoundError
            If YAML file doesn't exist
        ValidationError
            If configuration is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(**data)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SimulationConfig":
        """Load and validate configuration from dictionary."""
        return cls(**config_dict)

    def get_material_config(self, name: str) -> MaterialConfig:
        """
        Get configuration for a specific material.

        Raises
        ------
        MaterialNotFoundError
            If material not found in configuration
        """
        if name not in self.materials:
            raise MaterialNotFoundError(name, self.materials.keys())
        return self.materials[name]
