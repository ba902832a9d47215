"""
Pytest configuration and fixtures for consignment validation tests

This module provides shared record builders for unit and integration tests.
"""
from typing import Callable

import pytest

from consignment.core.models import (
    ConsignmentRecord,
    ConsignmentType,
    Email,
    PartyDetails,
    Phone,
)
from consignment.core.rules import ConsignmentRuleEngine


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests running the full validate -> project flow or the CLI"
    )


# =======================
# RECORD FIXTURES
# =======================

def build_record(
    who_pays: str = "ok",
    cost_centre: str = "ok",
    sender: str = "ok",
    receiver: str = "ok",
    contact_methods: tuple = (),
    direction: ConsignmentType = ConsignmentType.OUTBOUND,
) -> ConsignmentRecord:
    """Build a record that is valid unless a field is overridden."""
    return ConsignmentRecord(
        direction=direction,
        who_pays=who_pays,
        cost_centre=cost_centre,
        sender=PartyDetails(business_name=sender),
        receiver=PartyDetails(business_name=receiver),
        contact_methods=contact_methods,
    )


@pytest.fixture
def make_record() -> Callable[..., ConsignmentRecord]:
    """Factory building records from keyword overrides"""
    return build_record


@pytest.fixture
def engine() -> ConsignmentRuleEngine:
    """Rule engine without Prometheus side effects"""
    return ConsignmentRuleEngine(record_metrics=False)


@pytest.fixture
def valid_record() -> ConsignmentRecord:
    """Record with every field inside its limits"""
    return build_record(contact_methods=(Phone(value="12345"), Email(value="asdasd")))


@pytest.fixture
def mixed_record() -> ConsignmentRecord:
    """
    Record breaking rules across every field group

    Yields: who pays shape, long receiver name, bad phones at 1 and 3,
    bad email at 4.
    """
    return build_record(
        who_pays="aaaaaa",
        cost_centre="asd",
        sender="bbbbb",
        receiver="bbbbb88888888888888888888",
        direction=ConsignmentType.INCOMING,
        contact_methods=(
            Email(value="foo"),
            Phone(value="foo" * 10),
            Email(value="foo"),
            Phone(value="foo" * 10),
            Email(value="foo" * 10),
        ),
    )
