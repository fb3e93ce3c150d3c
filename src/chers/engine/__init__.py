"""Evaluation helpers built on top of the core rules."""

from chers.engine.score import SHANNON_VALUES, material_balance, shannon_value

__all__ = [
    "SHANNON_VALUES",
    "material_balance",
    "shannon_value",
]
