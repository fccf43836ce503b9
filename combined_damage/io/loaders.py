"""
Data loading functions for damage simulations.

All file reading operations are isolated here.
"""

import yaml
from typing import Dict, Any
from pathlib import Path


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load a raw configuration dictionary from a YAML file.

    Parameters
    ----------
    config_path : str
        Path to YAML configuration file

    Returns
    -------
    dict
        Configuration dictionary (not validated)

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist

    Examples
    --------
    >>> config = load_yaml_config("examples/configs/combined_damage.yaml")
    >>> config["materials"]["combined"]["combination_type"]
    'Product'
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}
