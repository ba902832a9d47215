"""
Flat projection: one human-readable sentence per distinct problem.
"""

from typing import Iterable

from consignment.core.exceptions import UnhandledViolationError
from consignment.core.models import (
    BadEmail,
    BadPhone,
    BusinessNameTooLong,
    CostCentre,
    NonAlpha,
    Receiver,
    Sender,
    TooLong,
    Violation,
    ViolationList,
    WhoPays,
)

from . import messages


def sentence_for(violation: Violation) -> str:
    """
    Build the sentence describing a single violation.

    Raises:
        UnhandledViolationError: If a violation is not a known variant
    """
    match violation:
        case CostCentre(reason=NonAlpha()):
            return f"Cost centre {messages.non_alpha()}"
        case CostCentre(reason=TooLong(bound=n)):
            return f"Cost centre is {messages.too_long(n)}"
        case WhoPays(reason=NonAlpha()):
            return f"Who pays {messages.non_alpha()}"
        case WhoPays(reason=TooLong(bound=n)):
            return f"Who pays is {messages.too_long(n)}"
        case Sender(reason=BusinessNameTooLong(bound=n)):
            return f"Sender Business Name is {messages.too_long(n)}"
        case Receiver(reason=BusinessNameTooLong(bound=n)):
            return f"Receiver Business Name is {messages.too_long(n)}"
        case BadPhone():
            return "Contact phone is invalid"
        case BadEmail():
            return "Contact email is invalid"
        case _:
            raise UnhandledViolationError(violation, "flat")


def unique_in_order(items: Iterable[str]) -> list[str]:
    """Drop every repeat of an already-seen item, keeping first occurrences in order."""
    seen: set[str] = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def project_to_messages(violations: ViolationList) -> list[str]:
    """
    Turn violations into deduplicated sentences.

    Repeated sentences collapse to their first occurrence wherever they
    appear, so bad phones at several positions yield a single
    "Contact phone is invalid".
    """
    return unique_in_order(sentence_for(violation) for violation in violations)
