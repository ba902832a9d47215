"""
ConsignmentRecord model representing the shipment being validated (ephemeral).
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ConsignmentType(str, Enum):
    """Direction of a consignment. Carried on the record but never validated."""

    INCOMING = "incoming"
    OUTBOUND = "outbound"


class PartyDetails(BaseModel):
    """
    Sender or receiver detail group.

    Attributes:
        business_name: Trading name of the party
    """

    model_config = ConfigDict(frozen=True)

    business_name: str


class Phone(BaseModel):
    """Phone contact method."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["phone"] = "phone"
    value: str


class Email(BaseModel):
    """Email contact method."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["email"] = "email"
    value: str


ContactMethod = Annotated[Union[Phone, Email], Field(discriminator="kind")]


class ConsignmentRecord(BaseModel):
    """
    A consignment awaiting validation (immutable once constructed).

    Note: ConsignmentRecord is an in-memory structure owned by the caller.
    Malformed input (missing fields, non-string values) is rejected here,
    at construction time, so the validator only ever sees well-typed records.

    Attributes:
        direction: Incoming or outbound
        who_pays: Identifier of the paying account
        cost_centre: Identifier of the cost centre to charge
        sender: Sending party details
        receiver: Receiving party details
        contact_methods: Position-ordered phone/email contacts
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "direction": "outbound",
                "who_pays": "abc",
                "cost_centre": "cc1",
                "sender": {"business_name": "Acme"},
                "receiver": {"business_name": "Globex"},
                "contact_methods": [
                    {"kind": "phone", "value": "12345"},
                    {"kind": "email", "value": "a@b.io"},
                ],
            }
        },
    )

    direction: ConsignmentType
    who_pays: str
    cost_centre: str
    sender: PartyDetails
    receiver: PartyDetails
    contact_methods: tuple[ContactMethod, ...] = ()
