"""
Tree projection: group violation messages by field path.
"""

from consignment.core.exceptions import UnhandledViolationError
from consignment.core.models import (
    BadEmail,
    BadPhone,
    BusinessNameTooLong,
    CostCentre,
    FieldErrorTree,
    NonAlpha,
    Receiver,
    Sender,
    TooLong,
    ViolationList,
    WhoPays,
)

from . import messages


def _upsert(slots: dict[int, list[str]], position: int, message: str) -> None:
    slots.setdefault(position, []).append(message)


def project_to_tree(violations: ViolationList) -> FieldErrorTree:
    """
    Fold violations into a FieldErrorTree.

    Messages land in their field's slot in violation order, so a field with
    a length and a shape violation lists the length message first.

    Raises:
        UnhandledViolationError: If a violation is not a known variant
    """
    tree = FieldErrorTree()

    for violation in violations:
        match violation:
            case CostCentre(reason=NonAlpha()):
                tree.cost_centre.append(messages.non_alpha())
            case CostCentre(reason=TooLong(bound=n)):
                tree.cost_centre.append(messages.too_long(n))
            case WhoPays(reason=NonAlpha()):
                tree.who_pays.append(messages.non_alpha())
            case WhoPays(reason=TooLong(bound=n)):
                tree.who_pays.append(messages.too_long(n))
            case Sender(reason=BusinessNameTooLong(bound=n)):
                tree.sender.business_name.append(messages.too_long(n))
            case Receiver(reason=BusinessNameTooLong(bound=n)):
                tree.receiver.business_name.append(messages.too_long(n))
            case BadPhone(position=position):
                _upsert(tree.contact_methods, position, messages.invalid_phone())
            case BadEmail(position=position):
                _upsert(tree.contact_methods, position, messages.invalid_email())
            case _:
                raise UnhandledViolationError(violation, "tree")

    return tree
