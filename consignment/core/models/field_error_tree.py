"""
FieldErrorTree model: violation messages indexed by field path.

The tree always holds every slot; empty slots exist internally and are only
dropped when the tree is serialized (``to_dict`` / ``to_json``), so API
responses never carry empty lists or maps.
"""

import json
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class _ErrorSlots(BaseModel):
    """Shared config: camelCase aliases, empty containers elided on dump."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Fields whose empty value is omitted from serialized output
    ELIDE_IF_EMPTY: ClassVar[tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def serialize_without_empty_slots(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for name in self.ELIDE_IF_EMPTY:
            if not getattr(self, name):
                data.pop(name, None)
                data.pop(to_camel(name), None)
        return data


class PartyErrors(_ErrorSlots):
    """
    Messages for one party (sender or receiver).

    Attributes:
        business_name: Messages for the business name, in violation order
    """

    ELIDE_IF_EMPTY: ClassVar[tuple[str, ...]] = ("business_name",)

    business_name: list[str] = Field(default_factory=list)


class FieldErrorTree(_ErrorSlots):
    """
    Per-field messages for one consignment.

    Attributes:
        who_pays: Messages for the who-pays identifier
        cost_centre: Messages for the cost-centre identifier
        sender: Sender messages (always serialized, possibly as ``{}``)
        receiver: Receiver messages (always serialized, possibly as ``{}``)
        contact_methods: Messages per contact-method position
    """

    ELIDE_IF_EMPTY: ClassVar[tuple[str, ...]] = ("who_pays", "cost_centre", "contact_methods")

    who_pays: list[str] = Field(default_factory=list)
    cost_centre: list[str] = Field(default_factory=list)
    sender: PartyErrors = Field(default_factory=PartyErrors)
    receiver: PartyErrors = Field(default_factory=PartyErrors)
    contact_methods: dict[int, list[str]] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys and empty slots omitted."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string (see ``to_dict``)."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def is_empty(self) -> bool:
        """True when no slot holds a message."""
        return not (
            self.who_pays
            or self.cost_centre
            or self.sender.business_name
            or self.receiver.business_name
            or self.contact_methods
        )
