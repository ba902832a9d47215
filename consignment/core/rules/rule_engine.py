"""
Rule engine applying the consignment field rules in a fixed order.

The engine walks a record's fields, asks each validator whether the value
breaks its rule, and turns every failure into a typed violation. Checks are
independent: one field can yield several violations.
"""

from contextlib import nullcontext
from typing import Iterable

from consignment.core.models import (
    BadEmail,
    BadPhone,
    BusinessNameTooLong,
    ConsignmentRecord,
    CostCentre,
    Email,
    NonAlpha,
    Phone,
    Receiver,
    Sender,
    TooLong,
    Violation,
    ViolationList,
    WhoPays,
)
from consignment.core.validators import AlphaShapeValidator, BaseValidator, MaxLengthValidator
from consignment.observability import metrics
from consignment.observability.logger import get_logger

logger = get_logger(__name__)

MAX_FIELD_LENGTH = 10

# Traversal order; identifier fields get both a length and a shape check
SHORT_ALPHA_FIELDS = (
    ("cost_centre", CostCentre),
    ("who_pays", WhoPays),
)
PARTY_FIELDS = (
    ("sender", Sender),
    ("receiver", Receiver),
)


class ConsignmentRuleEngine:
    """
    Validates consignment records against the fixed field rules.

    Order of checks (and therefore of the returned violations):
    cost centre length, cost centre shape, who pays length, who pays shape,
    sender business name, receiver business name, then each contact method
    by position (length only).
    """

    def __init__(self, record_metrics: bool = True):
        """
        Initialize the rule engine.

        Args:
            record_metrics: Count validated records and violations in Prometheus
        """
        self.record_metrics = record_metrics
        self.validators: list[BaseValidator] = []
        self._build_validators()

    def _build_validators(self) -> None:
        """Build validator instances for every checked field."""
        bound = {"max_length": MAX_FIELD_LENGTH}

        self._short_alpha: dict[str, tuple[MaxLengthValidator, AlphaShapeValidator]] = {}
        for field_name, _ in SHORT_ALPHA_FIELDS:
            length_rule = MaxLengthValidator(field_name, bound)
            shape_rule = AlphaShapeValidator(field_name)
            self._short_alpha[field_name] = (length_rule, shape_rule)
            self.validators.extend((length_rule, shape_rule))

        self._party: dict[str, MaxLengthValidator] = {}
        for field_name, _ in PARTY_FIELDS:
            rule = MaxLengthValidator(f"{field_name}.business_name", bound)
            self._party[field_name] = rule
            self.validators.append(rule)

        self._phone = MaxLengthValidator("contact_methods.phone", bound)
        self._email = MaxLengthValidator("contact_methods.email", bound)
        self.validators.extend((self._phone, self._email))

    def validate_record(self, record: ConsignmentRecord) -> ViolationList:
        """
        Validate a consignment record.

        Args:
            record: The record to validate (left untouched)

        Returns:
            Violations in traversal order; empty when the record is valid
        """
        timer = metrics.track_duration(metrics.validation_duration_seconds) if self.record_metrics else nullcontext()
        with timer:
            violations = tuple(self._collect(record))

        if self.record_metrics:
            metrics.record_validation(violations)

        logger.debug(
            "Validated consignment",
            extra={"violation_count": len(violations), "direction": record.direction.value},
        )
        return violations

    def _collect(self, record: ConsignmentRecord) -> Iterable[Violation]:
        for field_name, wrap in SHORT_ALPHA_FIELDS:
            value = getattr(record, field_name)
            length_rule, shape_rule = self._short_alpha[field_name]
            if length_rule.is_violated(value):
                yield wrap(reason=TooLong(bound=length_rule.max_length))
            if shape_rule.is_violated(value):
                yield wrap(reason=NonAlpha())

        for field_name, wrap in PARTY_FIELDS:
            rule = self._party[field_name]
            if rule.is_violated(getattr(record, field_name).business_name):
                yield wrap(reason=BusinessNameTooLong(bound=rule.max_length))

        for position, contact in enumerate(record.contact_methods):
            match contact:
                case Phone(value=value):
                    if self._phone.is_violated(value):
                        yield BadPhone(position=position)
                case Email(value=value):
                    if self._email.is_violated(value):
                        yield BadEmail(position=position)
                case _:
                    raise TypeError(f"Unknown contact method at position {position}: {contact!r}")

    def validate_batch(self, records: Iterable[ConsignmentRecord]) -> list[ViolationList]:
        """
        Validate a batch of records.

        Args:
            records: Records to validate

        Returns:
            One violation list per record, in input order
        """
        return [self.validate_record(record) for record in records]

    def get_rule_summary(self) -> dict:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with rule counts by type and the checked fields
        """
        counts: dict[str, int] = {}
        for validator in self.validators:
            counts[validator.rule_type] = counts.get(validator.rule_type, 0) + 1

        return {
            "total_rules": len(self.validators),
            "rules_by_type": counts,
            "fields": list(dict.fromkeys(v.field_name for v in self.validators)),
            "max_field_length": MAX_FIELD_LENGTH,
        }


_default_engine: ConsignmentRuleEngine | None = None


def validate(record: ConsignmentRecord) -> ViolationList:
    """Validate ``record`` with a shared default engine that records no metrics."""
    global _default_engine
    if _default_engine is None:
        _default_engine = ConsignmentRuleEngine(record_metrics=False)
    return _default_engine.validate_record(record)
