"""
Damage simulation driver.

Builds, orders and steps scalar damage materials.
"""

from .factory import build_material
from .orchestrator import DamageSimulation

__all__ = [
    "build_material",
    "DamageSimulation",
]
