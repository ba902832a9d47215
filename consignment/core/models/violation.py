"""
Violation model: one typed fact describing a single rule failure.

The set of variants is closed. Every consumer dispatches over it with
``match`` and must raise ``UnhandledViolationError`` on anything else.

    ShortAlphaViolation = TooLong(bound) | NonAlpha
    PartyViolation      = BusinessNameTooLong(bound)
    Violation           = WhoPays(ShortAlphaViolation)
                        | CostCentre(ShortAlphaViolation)
                        | Sender(PartyViolation)
                        | Receiver(PartyViolation)
                        | BadPhone(position)
                        | BadEmail(position)

Each variant carries a ``kind`` tag so violation lists serialize to JSON and
back through a discriminated union.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _ViolationModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# =======================
# FIELD-LEVEL REASONS
# =======================

class TooLong(_ViolationModel):
    """Value has more characters than ``bound``."""

    kind: Literal["too_long"] = "too_long"
    bound: int = Field(..., ge=0)


class NonAlpha(_ViolationModel):
    """Value failed the alphanumeric shape check."""

    kind: Literal["non_alpha"] = "non_alpha"


class BusinessNameTooLong(_ViolationModel):
    """Party business name has more characters than ``bound``."""

    kind: Literal["business_name_too_long"] = "business_name_too_long"
    bound: int = Field(..., ge=0)


ShortAlphaViolation = Annotated[Union[TooLong, NonAlpha], Field(discriminator="kind")]
PartyViolation = BusinessNameTooLong


# =======================
# RECORD-LEVEL VIOLATIONS
# =======================

class WhoPays(_ViolationModel):
    kind: Literal["who_pays"] = "who_pays"
    reason: ShortAlphaViolation


class CostCentre(_ViolationModel):
    kind: Literal["cost_centre"] = "cost_centre"
    reason: ShortAlphaViolation


class Sender(_ViolationModel):
    kind: Literal["sender"] = "sender"
    reason: PartyViolation


class Receiver(_ViolationModel):
    kind: Literal["receiver"] = "receiver"
    reason: PartyViolation


class BadPhone(_ViolationModel):
    """Phone contact at ``position`` is invalid."""

    kind: Literal["bad_phone"] = "bad_phone"
    position: int = Field(..., ge=0)


class BadEmail(_ViolationModel):
    """Email contact at ``position`` is invalid."""

    kind: Literal["bad_email"] = "bad_email"
    position: int = Field(..., ge=0)


Violation = Annotated[
    Union[WhoPays, CostCentre, Sender, Receiver, BadPhone, BadEmail],
    Field(discriminator="kind"),
]

# Ordered, never mutated after the validator returns it
ViolationList = tuple[Violation, ...]

VIOLATION_VARIANTS: tuple[type[BaseModel], ...] = (
    WhoPays,
    CostCentre,
    Sender,
    Receiver,
    BadPhone,
    BadEmail,
)

_violation_list_adapter = TypeAdapter(ViolationList)


def dump_violations(violations: ViolationList) -> list[dict]:
    """Serialize a violation list to JSON-compatible dicts."""
    return _violation_list_adapter.dump_python(violations, mode="json")


def load_violations(data: list[dict]) -> ViolationList:
    """
    Rebuild a violation list from the output of ``dump_violations``.

    Raises:
        pydantic.ValidationError: If an entry is not a known violation
    """
    return _violation_list_adapter.validate_python(data)
