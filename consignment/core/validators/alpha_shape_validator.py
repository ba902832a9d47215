"""
AlphaShapeValidator - flags values that fail the alphanumeric shape check.
"""

from .base_validator import BaseValidator
from .rules import fails_alpha_shape


class AlphaShapeValidator(BaseValidator):
    """
    Validates the shape of short identifier fields (who pays, cost centre).

    Takes no parameters. The underlying predicate is a placeholder that flags
    any value longer than three characters; see ``rules.fails_alpha_shape``.
    """

    def is_violated(self, value: str) -> bool:
        return fails_alpha_shape(value)

    @property
    def rule_type(self) -> str:
        return "alpha_shape"
