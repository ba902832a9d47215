"""
Field-level validation for consignment records.

Validate a record into an ordered tuple of typed violations, then project
the violations into a field error tree or a deduplicated message list.
"""

from consignment.core.models import ConsignmentRecord
from consignment.core.projections import project_to_messages, project_to_tree
from consignment.core.rules import validate

__version__ = "0.1.0"

__all__ = [
    "ConsignmentRecord",
    "validate",
    "project_to_tree",
    "project_to_messages",
]
