"""
Core math modules

Арифметические примитивы evaluator'а.
"""

from src.core.math.operators import DivisionByZeroViolation, apply_operator

__all__ = [
    "DivisionByZeroViolation",
    "apply_operator",
]
