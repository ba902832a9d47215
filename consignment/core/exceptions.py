"""
Exceptions raised by the consignment validation package.

Validation failures are never raised: they are returned as violation values.
The exceptions here cover programming errors and unreadable input only.
"""


class ConsignmentError(Exception):
    """Base class for all consignment package errors."""


class UnhandledViolationError(ConsignmentError, TypeError):
    """Raised when a projector meets a violation variant it does not handle."""

    def __init__(self, violation: object, projector: str):
        self.violation = violation
        self.projector = projector
        super().__init__(f"[{projector}] unhandled violation: {violation!r}")


class RecordLoadError(ConsignmentError, ValueError):
    """Raised when a source document cannot be turned into consignment records."""

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")
