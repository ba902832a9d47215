"""
MaxLengthValidator - flags values longer than a character bound.
"""

from typing import Any

from .base_validator import BaseValidator
from .rules import exceeds_max_length


class MaxLengthValidator(BaseValidator):
    """
    Validates that a string field has at most ``max_length`` characters.

    Parameters:
    - max_length: Inclusive upper bound on the character count (non-negative int)
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        super().__init__(field_name, parameters)

        max_length = self.parameters.get("max_length")
        if max_length is None:
            raise ValueError("MaxLengthValidator requires 'max_length' parameter")

        # bool is an int subclass; reject it explicitly
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0:
            raise ValueError(f"max_length must be a non-negative integer, got {max_length!r}")

        self.max_length: int = max_length

    def is_violated(self, value: str) -> bool:
        return exceeds_max_length(value, self.max_length)

    @property
    def rule_type(self) -> str:
        return "max_length"
