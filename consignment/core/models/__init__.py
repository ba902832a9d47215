"""
Core data models for consignment validation.

All models use Pydantic for runtime validation and immutability.
"""

from .consignment_record import (
    ConsignmentRecord,
    ConsignmentType,
    ContactMethod,
    Email,
    PartyDetails,
    Phone,
)
from .field_error_tree import FieldErrorTree, PartyErrors
from .loader import load_records, parse_records
from .violation import (
    VIOLATION_VARIANTS,
    BadEmail,
    BadPhone,
    BusinessNameTooLong,
    CostCentre,
    NonAlpha,
    PartyViolation,
    Receiver,
    Sender,
    ShortAlphaViolation,
    TooLong,
    Violation,
    ViolationList,
    WhoPays,
    dump_violations,
    load_violations,
)

__all__ = [
    "ConsignmentRecord",
    "ConsignmentType",
    "ContactMethod",
    "PartyDetails",
    "Phone",
    "Email",
    "Violation",
    "ViolationList",
    "ShortAlphaViolation",
    "PartyViolation",
    "TooLong",
    "NonAlpha",
    "BusinessNameTooLong",
    "WhoPays",
    "CostCentre",
    "Sender",
    "Receiver",
    "BadPhone",
    "BadEmail",
    "VIOLATION_VARIANTS",
    "dump_violations",
    "load_violations",
    "FieldErrorTree",
    "PartyErrors",
    "load_records",
    "parse_records",
]
