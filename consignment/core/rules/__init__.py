"""
Consignment rule engine.
"""

from .rule_engine import MAX_FIELD_LENGTH, ConsignmentRuleEngine, validate

__all__ = [
    "ConsignmentRuleEngine",
    "MAX_FIELD_LENGTH",
    "validate",
]
