"""
Prometheus metrics collection for consignment validation

This module counts validated records and violations by field and rule,
and times each validation, on a private registry.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)

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


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# VALIDATION METRICS
# =======================

records_validated_total = Counter(
    name="consignment_records_validated_total",
    documentation="Total number of consignment records validated",
    labelnames=["status"],  # status: valid, invalid
    registry=REGISTRY,
)

violations_total = Counter(
    name="consignment_violations_total",
    documentation="Total number of violations found, by field and rule",
    labelnames=["field", "rule"],
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="consignment_validation_duration_seconds",
    documentation="Time spent validating a single consignment record",
    buckets=[0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def violation_labels(violation: Violation) -> tuple[str, str]:
    """Map a violation to its (field, rule) label pair."""
    match violation:
        case CostCentre(reason=TooLong()):
            return "cost_centre", "max_length"
        case CostCentre(reason=NonAlpha()):
            return "cost_centre", "alpha_shape"
        case WhoPays(reason=TooLong()):
            return "who_pays", "max_length"
        case WhoPays(reason=NonAlpha()):
            return "who_pays", "alpha_shape"
        case Sender(reason=BusinessNameTooLong()):
            return "sender.business_name", "max_length"
        case Receiver(reason=BusinessNameTooLong()):
            return "receiver.business_name", "max_length"
        case BadPhone():
            return "contact_methods.phone", "max_length"
        case BadEmail():
            return "contact_methods.email", "max_length"
        case _:
            raise UnhandledViolationError(violation, "metrics")


def record_validation(violations: ViolationList) -> None:
    """
    Record the outcome of validating one consignment

    Args:
        violations: Violations found for the record
    """
    records_validated_total.labels(status="invalid" if violations else "valid").inc()
    for violation in violations:
        field, rule = violation_labels(violation)
        violations_total.labels(field=field, rule=rule).inc()


# =======================
# CONTEXT MANAGERS
# =======================

class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        """
        Initialize duration tracker

        Args:
            histogram: Prometheus Histogram metric
            **labels: Label values for the metric (omit for unlabelled histograms)
        """
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        target = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = target.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False
