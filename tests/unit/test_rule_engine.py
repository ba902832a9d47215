"""
Unit tests for the consignment rule engine.
"""

import pytest

from consignment.core.models import (
    BadEmail,
    BadPhone,
    BusinessNameTooLong,
    CostCentre,
    Email,
    NonAlpha,
    Phone,
    Receiver,
    Sender,
    TooLong,
    WhoPays,
)
from consignment.core.rules import MAX_FIELD_LENGTH, ConsignmentRuleEngine, validate
from consignment.observability import metrics


class TestRuleEngine:
    """Tests for ConsignmentRuleEngine"""

    def test_valid_record_has_no_violations(self, engine, valid_record):
        assert engine.validate_record(valid_record) == ()

    def test_returns_tuple(self, engine, valid_record):
        assert isinstance(engine.validate_record(valid_record), tuple)

    def test_flat_fields_collect_both_checks(self, engine, make_record):
        """A long identifier breaks length and shape, length first"""
        record = make_record(who_pays="ok" * 10)
        assert engine.validate_record(record) == (
            WhoPays(reason=TooLong(bound=10)),
            WhoPays(reason=NonAlpha()),
        )

    def test_contact_methods_report_positions(self, engine, make_record):
        record = make_record(contact_methods=(Phone(value="12345" * 10), Email(value="asdasd" * 10)))
        assert engine.validate_record(record) == (BadPhone(position=0), BadEmail(position=1))

    def test_contact_values_get_no_shape_check(self, engine, make_record):
        record = make_record(contact_methods=(Phone(value="1234567890"), Email(value="a@b.cd")))
        assert engine.validate_record(record) == ()

    def test_business_name_gets_length_check_only(self, engine, make_record):
        record = make_record(receiver="b" * 26)
        assert engine.validate_record(record) == (Receiver(reason=BusinessNameTooLong(bound=10)),)

    def test_full_traversal_order(self, engine, make_record):
        record = make_record(
            who_pays="w" * 11,
            cost_centre="c" * 11,
            sender="s" * 11,
            receiver="r" * 11,
            contact_methods=(Email(value="e" * 11), Phone(value="p" * 11)),
        )
        assert engine.validate_record(record) == (
            CostCentre(reason=TooLong(bound=10)),
            CostCentre(reason=NonAlpha()),
            WhoPays(reason=TooLong(bound=10)),
            WhoPays(reason=NonAlpha()),
            Sender(reason=BusinessNameTooLong(bound=10)),
            Receiver(reason=BusinessNameTooLong(bound=10)),
            BadEmail(position=0),
            BadPhone(position=1),
        )

    def test_mixed_record(self, engine, mixed_record):
        assert engine.validate_record(mixed_record) == (
            WhoPays(reason=NonAlpha()),
            Receiver(reason=BusinessNameTooLong(bound=10)),
            BadPhone(position=1),
            BadPhone(position=3),
            BadEmail(position=4),
        )

    def test_record_left_untouched(self, engine, mixed_record):
        before = mixed_record.model_dump()
        engine.validate_record(mixed_record)
        assert mixed_record.model_dump() == before

    def test_validate_batch(self, engine, valid_record, make_record):
        results = engine.validate_batch([valid_record, make_record(cost_centre="abcd")])
        assert results == [(), (CostCentre(reason=NonAlpha()),)]

    def test_validate_batch_empty(self, engine):
        assert engine.validate_batch([]) == []

    def test_rule_summary(self, engine):
        summary = engine.get_rule_summary()
        assert summary["total_rules"] == 8
        assert summary["rules_by_type"] == {"max_length": 6, "alpha_shape": 2}
        assert summary["fields"] == [
            "cost_centre",
            "who_pays",
            "sender.business_name",
            "receiver.business_name",
            "contact_methods.phone",
            "contact_methods.email",
        ]
        assert summary["max_field_length"] == MAX_FIELD_LENGTH == 10


class TestModuleValidate:
    """Tests for the module-level validate()"""

    def test_matches_engine(self, engine, mixed_record):
        assert validate(mixed_record) == engine.validate_record(mixed_record)

    def test_idempotent(self, mixed_record):
        assert validate(mixed_record) == validate(mixed_record)

    def test_records_no_metrics(self, make_record):
        before = {
            status: metrics.REGISTRY.get_sample_value(
                "consignment_records_validated_total", {"status": status}
            )
            for status in ("valid", "invalid")
        }
        validate(make_record())
        validate(make_record(who_pays="abcd"))
        after = {
            status: metrics.REGISTRY.get_sample_value(
                "consignment_records_validated_total", {"status": status}
            )
            for status in ("valid", "invalid")
        }
        assert after == before


class TestEngineMetrics:
    """Tests for Prometheus recording"""

    @staticmethod
    def _sample(name, labels):
        return metrics.REGISTRY.get_sample_value(name, labels) or 0.0

    def test_records_counts(self, make_record):
        engine = ConsignmentRuleEngine(record_metrics=True)
        invalid_before = self._sample("consignment_records_validated_total", {"status": "invalid"})
        shape_before = self._sample(
            "consignment_violations_total", {"field": "cost_centre", "rule": "alpha_shape"}
        )

        engine.validate_record(make_record(cost_centre="abcd"))

        assert self._sample("consignment_records_validated_total", {"status": "invalid"}) == invalid_before + 1
        assert self._sample(
            "consignment_violations_total", {"field": "cost_centre", "rule": "alpha_shape"}
        ) == shape_before + 1

    def test_exposition_text(self, make_record):
        ConsignmentRuleEngine(record_metrics=True).validate_record(make_record())
        text = metrics.generate_metrics()
        assert b"consignment_records_validated_total" in text
        assert b"consignment_validation_duration_seconds_bucket" in text

    def test_disabled_metrics_leave_counters(self, make_record):
        engine = ConsignmentRuleEngine(record_metrics=False)
        before = self._sample("consignment_records_validated_total", {"status": "valid"})
        engine.validate_record(make_record())
        assert self._sample("consignment_records_validated_total", {"status": "valid"}) == before


@pytest.mark.parametrize(
    "who_pays,cost_centre,expected",
    [
        ("abc", "*^%^&%$^%$", (CostCentre(reason=NonAlpha()),)),
        ("abcd", "ok", (WhoPays(reason=NonAlpha()),)),
        ("ok", "x" * 11, (CostCentre(reason=TooLong(bound=10)), CostCentre(reason=NonAlpha()))),
    ],
)
def test_identifier_scenarios(engine, make_record, who_pays, cost_centre, expected):
    record = make_record(who_pays=who_pays, cost_centre=cost_centre, contact_methods=(Phone(value="foo"),))
    assert engine.validate_record(record) == expected
