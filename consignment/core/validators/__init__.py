"""
Field rule implementations.

Provides the pure predicates and the validators wrapping them for
maximum length and alphanumeric shape checks.
"""

from .alpha_shape_validator import AlphaShapeValidator
from .base_validator import BaseValidator
from .max_length_validator import MaxLengthValidator
from .rules import exceeds_max_length, fails_alpha_shape

__all__ = [
    "BaseValidator",
    "MaxLengthValidator",
    "AlphaShapeValidator",
    "exceeds_max_length",
    "fails_alpha_shape",
]
