"""
Base validator interface for all field rules.

All validators must inherit from BaseValidator and implement is_violated().
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Each validator wraps one pure field predicate (max_length, alpha_shape).
    Validators answer a yes/no question about a single value and never raise
    once constructed; mapping a failure to a violation is the rule engine's job.
    """

    def __init__(self, field_name: str, parameters: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Dotted path of the field to validate (e.g. "sender.business_name")
            parameters: Rule-specific parameters (e.g., max_length)
        """
        self.field_name = field_name
        self.parameters = parameters or {}

    @abstractmethod
    def is_violated(self, value: str) -> bool:
        """
        Check a value against this rule.

        Args:
            value: The field value to check

        Returns:
            True if the value breaks the rule
        """
        pass

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.parameters})"
