"""Scalar damage models evaluated per point."""

from .base import ScalarDamageModel
from .sources import ConstantScalarDamage, PrescribedScalarDamage
from .combined import CombinedScalarDamage

__all__ = [
    "ScalarDamageModel",
    "ConstantScalarDamage",
    "PrescribedScalarDamage",
    "CombinedScalarDamage",
]
